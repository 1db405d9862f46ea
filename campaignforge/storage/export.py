"""
Campaign export.

Writes a campaign as a pretty-printed JSON document named after the campaign.
"""

import os
import json

from campaignforge.campaign.models import Campaign
from campaignforge.core.logging_config import get_logger
from campaignforge.core.utils import ensure_dir, sanitize_filename

logger = get_logger(__name__)

def campaign_to_json(campaign: Campaign) -> str:
    """Serialize a campaign in its persisted layout with 2-space indentation."""
    return json.dumps(campaign.to_dict(), indent=2, ensure_ascii=False)

def campaign_from_json(document: str) -> Campaign:
    """Parse an exported campaign document."""
    return Campaign.from_dict(json.loads(document))

def export_filename(campaign: Campaign) -> str:
    """
    File name for an exported campaign.

    Whitespace runs in the name become underscores, e.g.
    'Spring Launch' -> 'Spring_Launch_campaign.json'.
    """
    return f"{sanitize_filename(campaign.name or 'campaign')}_campaign.json"

def export_campaign(campaign: Campaign, output_dir: str) -> str:
    """
    Export a campaign to a JSON file.

    Args:
        campaign (Campaign): Campaign to export
        output_dir (str): Directory for the file; created if missing

    Returns:
        str: Path to the written file

    Raises:
        OSError: If the file cannot be written
    """
    ensure_dir(output_dir)
    output_path = os.path.join(output_dir, export_filename(campaign))

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(campaign_to_json(campaign))

    logger.info(f"Exported campaign {campaign.id} to {output_path}")
    return output_path
