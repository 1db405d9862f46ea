"""
Workspace state synchronization.

The Workspace owns the in-memory campaign list, the active campaign, the
brand settings and the presentation state (screen and status message). Every
change to a campaign goes through it, so the active campaign and its entry in
the stored list never disagree.
"""

from typing import List, Optional

from campaignforge.agents.gateway import AgentActivity
from campaignforge.campaign.models import BrandSettings, Campaign
from campaignforge.core.constants import SCREEN_DASHBOARD, SCREEN_REVIEW
from campaignforge.core.logging_config import get_logger
from campaignforge.storage.persistence import CampaignStore

logger = get_logger(__name__)

class Workspace:
    """
    Single-user campaign workspace backed by a CampaignStore.
    """

    def __init__(self, store: Optional[CampaignStore] = None, load: bool = True):
        """
        Initialize the workspace.

        Args:
            store (CampaignStore, optional): Durable store; a store without a
                directory is used when omitted
            load (bool): Whether to read campaigns and brand settings from the store now
        """
        self.store = store or CampaignStore(None)
        self.campaigns: List[Campaign] = []
        self.active_campaign: Optional[Campaign] = None
        self.brand_settings = BrandSettings()
        self.screen = SCREEN_DASHBOARD
        self.status_message = ""
        self.agent_activity = AgentActivity()

        if load:
            self.load()

    def load(self) -> None:
        """Replace in-memory campaigns and brand settings with the stored ones."""
        self.campaigns = self.store.load_campaigns()
        self.brand_settings = self.store.load_brand_settings()
        if self.active_campaign is not None:
            self.active_campaign = self.get_campaign(self.active_campaign.id)

    def get_campaign(self, campaign_id: str) -> Optional[Campaign]:
        """Return the current value of a campaign, or None for unknown ids."""
        for campaign in self.campaigns:
            if campaign.id == campaign_id:
                return campaign
        return None

    def add(self, campaign: Campaign) -> Campaign:
        """
        Prepend a new campaign, persist the list and make it active.

        Args:
            campaign (Campaign): The new campaign

        Returns:
            Campaign: The campaign
        """
        self.campaigns = [campaign] + [c for c in self.campaigns if c.id != campaign.id]
        self._persist()
        self.active_campaign = campaign
        logger.info(f"Added campaign {campaign.id}")
        return campaign

    def update(self, campaign: Campaign) -> Campaign:
        """
        Replace the stored entry with the same id, persist, and make it active.

        Args:
            campaign (Campaign): The updated campaign

        Returns:
            Campaign: The campaign
        """
        self.campaigns = [campaign if c.id == campaign.id else c for c in self.campaigns]
        self._persist()
        self.active_campaign = campaign
        logger.debug(f"Updated campaign {campaign.id}")
        return campaign

    def select(self, campaign_id: str) -> Optional[Campaign]:
        """
        Make a stored campaign active and switch to the review screen.

        Args:
            campaign_id (str): Campaign to open

        Returns:
            Optional[Campaign]: The campaign, or None if the id is unknown
        """
        campaign = self.get_campaign(campaign_id)
        if campaign is None:
            logger.debug(f"No campaign with id {campaign_id}")
            return None
        self.active_campaign = campaign
        self.screen = SCREEN_REVIEW
        return campaign

    def update_content_block(self, index: int, body: str) -> Optional[Campaign]:
        """
        Edit the body of one of the active campaign's content blocks.

        The block's word count is recomputed from the new body.

        Args:
            index (int): Position of the block
            body (str): New body text

        Returns:
            Optional[Campaign]: The updated campaign, or None without an active campaign
        """
        if self.active_campaign is None:
            return None
        current = self.get_campaign(self.active_campaign.id) or self.active_campaign
        return self.update(current.with_content_block_body(index, body))

    def save_brand_settings(self, settings: BrandSettings) -> BrandSettings:
        """Replace the brand settings and persist them."""
        self.brand_settings = settings
        self.store.save_brand_settings(settings)
        return settings

    def set_status(self, message: str) -> None:
        self.status_message = message

    def dismiss_status(self) -> None:
        self.status_message = ""

    def _persist(self) -> None:
        if not self.store.save_campaigns(self.campaigns) and self.store.available:
            logger.warning("Campaigns were not saved; changes are kept for this session only")
