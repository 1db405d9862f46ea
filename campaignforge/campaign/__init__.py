"""
Campaign records: data model, brief validation, prompts and record building.
"""

from campaignforge.campaign.models import (
    BrandSettings,
    Campaign,
    CampaignFormData,
    CompetitorGap,
    ContentBlock,
    GraphicAsset,
    Scene,
    SEOAnalysis,
    SEOKeyword,
    VideoBrief,
)
from campaignforge.campaign.input_validator import InputValidator
from campaignforge.campaign.prompts import build_campaign_prompt, default_graphic_prompt, default_video_prompt
from campaignforge.campaign.record_builder import build_campaign, build_graphics, build_video_brief
