"""
Persistence, workspace synchronization and export.
"""

from campaignforge.storage.persistence import CampaignStore
from campaignforge.storage.synchronizer import Workspace
from campaignforge.storage.export import export_campaign, campaign_to_json, campaign_from_json
