"""
Durable key-value storage for campaigns and brand settings.

Each key is a JSON file in the storage directory. Storage is best-effort:
read, parse and write failures are logged and answered with defaults, and a
store without a directory (no storage medium) simply keeps nothing. The
in-memory workspace stays authoritative for the current session.
"""

import os
import json
from typing import Any, List, Optional

import jsonschema

from campaignforge.campaign.models import BrandSettings, Campaign
from campaignforge.core.constants import BRAND_SETTINGS_STORAGE_KEY, CAMPAIGNS_STORAGE_KEY
from campaignforge.core.logging_config import get_logger
from campaignforge.core.utils import save_json_file
from campaignforge.schemas import load_schema

logger = get_logger(__name__)

class CampaignStore:
    """
    Persists the campaign list and the brand settings.
    """

    def __init__(self, directory: Optional[str] = None):
        """
        Initialize the store.

        Args:
            directory (str, optional): Storage directory. None disables persistence.
        """
        self.directory = directory
        self.campaign_schema = load_schema("campaign")
        self.brand_settings_schema = load_schema("brand_settings")
        if directory is None:
            logger.info("No storage directory, campaigns will not be persisted")

    @property
    def available(self) -> bool:
        return self.directory is not None

    def _path(self, key: str) -> str:
        return os.path.join(self.directory, f"{key}.json")

    def _read(self, key: str) -> Any:
        """Return the decoded value for key, or None if absent or unreadable."""
        if not self.available:
            return None

        path = self._path(key)
        if not os.path.isfile(path):
            return None

        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            logger.warning(f"Could not read {path}: {e}")
            return None

    def _write(self, key: str, value: Any) -> bool:
        """Write value for key; returns False instead of raising on failure."""
        if not self.available:
            return False

        path = self._path(key)
        tmp_path = f"{path}.tmp"
        try:
            save_json_file(value, tmp_path)
            os.replace(tmp_path, path)
            return True
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Could not write {path}: {e}")
            return False

    def load_campaigns(self) -> List[Campaign]:
        """
        Load the stored campaign list, newest first.

        Entries that no longer match the campaign schema are dropped.

        Returns:
            List[Campaign]: Stored campaigns, or [] if nothing usable is stored
        """
        raw = self._read(CAMPAIGNS_STORAGE_KEY)
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning("Stored campaigns are not a list, ignoring them")
            return []

        campaigns = []
        for entry in raw:
            try:
                jsonschema.validate(instance=entry, schema=self.campaign_schema)
            except jsonschema.exceptions.ValidationError as e:
                logger.warning(f"Dropping stored campaign with unexpected shape: {e.message}")
                continue
            campaigns.append(Campaign.from_dict(entry))

        logger.debug(f"Loaded {len(campaigns)} campaigns")
        return campaigns

    def save_campaigns(self, campaigns: List[Campaign]) -> bool:
        """
        Store the full campaign list.

        Args:
            campaigns (List[Campaign]): Campaigns, newest first

        Returns:
            bool: Whether the list was written
        """
        return self._write(CAMPAIGNS_STORAGE_KEY, [c.to_dict() for c in campaigns])

    def load_brand_settings(self) -> BrandSettings:
        """
        Load brand settings; fields that are missing or not strings fall back
        to defaults.

        Returns:
            BrandSettings: The stored settings merged over the defaults
        """
        raw = self._read(BRAND_SETTINGS_STORAGE_KEY)
        if raw is None:
            return BrandSettings()
        if not isinstance(raw, dict):
            logger.warning("Stored brand settings are not an object, ignoring them")
            return BrandSettings()

        validator = jsonschema.Draft7Validator(self.brand_settings_schema)
        rejected = set()
        for error in validator.iter_errors(raw):
            if error.path:
                rejected.add(error.path[0])
                logger.warning(f"Ignoring stored brand setting {error.path[0]}: {error.message}")

        return BrandSettings.from_dict({k: v for k, v in raw.items() if k not in rejected})

    def save_brand_settings(self, settings: BrandSettings) -> bool:
        """
        Store brand settings.

        Args:
            settings (BrandSettings): Settings to store

        Returns:
            bool: Whether the settings were written
        """
        return self._write(BRAND_SETTINGS_STORAGE_KEY, settings.to_dict())
