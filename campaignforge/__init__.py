"""
campaignforge - AI marketing campaign generation

Turns a campaign brief into platform copy, SEO analysis, graphics and video
briefs by calling external generation agents, and keeps the resulting
campaigns in a local workspace.
"""

__version__ = "0.1.0"

# Import main components for easier access
from campaignforge.agents.gateway import AgentGateway, AgentResponse
from campaignforge.agents.normalizer import normalize
from campaignforge.campaign.models import BrandSettings, Campaign, CampaignFormData
from campaignforge.pipeline.orchestrator import GenerationOrchestrator, WorkflowResult
from campaignforge.storage.persistence import CampaignStore
from campaignforge.storage.synchronizer import Workspace
