"""
Generation workflows and the campaign dashboard.
"""

from campaignforge.pipeline.orchestrator import GenerationOrchestrator, WorkflowResult
from campaignforge.pipeline.dashboard import summarize, filter_campaigns, SAMPLE_CAMPAIGNS
