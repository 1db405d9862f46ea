"""
Prompt templates for the generation agents.

The campaign prompt lists the brief fields in a fixed order so identical
input always produces identical prompt text.
"""

from typing import Optional

from campaignforge.campaign.models import BrandSettings, CampaignFormData

CAMPAIGN_PROMPT_TEMPLATE = """Create a comprehensive marketing campaign with the following brief:
Objective: {objective}
Target Audience: {audience}
Industry: {industry}
Brand Voice: {brand_voice}
Platforms: {platforms}
Keywords: {keywords}
{competitor_line}{brand_context}

Please generate content blocks for each platform and provide SEO analysis including keywords, content score, meta tags, optimization tips, and competitor gaps."""

GRAPHIC_PROMPT_TEMPLATE = "Create a marketing graphic for the campaign: {name}"
VIDEO_PROMPT_TEMPLATE = "Create a video brief for the campaign: {name}"


def build_brand_context(brand_settings: Optional[BrandSettings]) -> str:
    """
    Format the brand paragraph appended to generation prompts.

    Args:
        brand_settings (BrandSettings, optional): Current brand defaults

    Returns:
        str: The brand paragraph, or "" when no brand name is set
    """
    if brand_settings is None or not brand_settings.brand_name:
        return ""
    return (
        f"\nBrand: {brand_settings.brand_name}. Tagline: {brand_settings.tagline}. "
        f"Voice: {brand_settings.voice_tone}. Colors: {brand_settings.color_notes}."
    )


def build_campaign_prompt(form: CampaignFormData, brand_settings: Optional[BrandSettings] = None) -> str:
    """
    Build the prompt for the campaign orchestrator agent.

    Args:
        form (CampaignFormData): The campaign brief
        brand_settings (BrandSettings, optional): Brand defaults to include

    Returns:
        str: Prompt text
    """
    competitor_line = f"Competitor URLs: {form.competitor_urls}" if form.competitor_urls else ""
    return CAMPAIGN_PROMPT_TEMPLATE.format(
        objective=form.objective,
        audience=form.audience,
        industry=form.industry,
        brand_voice=form.brand_voice,
        platforms=", ".join(form.platforms),
        keywords=", ".join(form.keywords),
        competitor_line=competitor_line,
        brand_context=build_brand_context(brand_settings),
    )


def default_graphic_prompt(campaign_name: str) -> str:
    return GRAPHIC_PROMPT_TEMPLATE.format(name=campaign_name)


def default_video_prompt(campaign_name: str) -> str:
    return VIDEO_PROMPT_TEMPLATE.format(name=campaign_name)
