"""
Campaign record building.

Maps normalized agent output onto campaign records. Every field has an
explicit default, so any dict (including {}) produces a valid record:

- campaign_title   -> first 50 characters of the objective
- content_blocks   -> []
- seo_analysis     -> None
- video_title      -> "Untitled Video"
- scenes           -> []
- other text fields -> ""
"""

import datetime
from typing import Any, Dict, List, Optional

from campaignforge.campaign.fields import FieldView
from campaignforge.campaign.models import (
    Campaign,
    CampaignFormData,
    ContentBlock,
    GraphicAsset,
    SEOAnalysis,
    VideoBrief,
)
from campaignforge.core.constants import CAMPAIGN_NAME_FALLBACK_LENGTH, DEFAULT_CAMPAIGN_STATUS
from campaignforge.core.logging_config import get_logger
from campaignforge.core.utils import generate_unique_id, today_iso

logger = get_logger(__name__)


def build_campaign(
    form: CampaignFormData,
    normalized: Dict[str, Any],
    campaign_id: Optional[str] = None,
    today: Optional[datetime.date] = None
) -> Campaign:
    """
    Build a new Campaign from the brief and the orchestrator agent's output.

    Args:
        form (CampaignFormData): The brief the campaign was generated from
        normalized (Dict[str, Any]): Normalized agent output
        campaign_id (str, optional): Identifier to use instead of a fresh one
        today (datetime.date, optional): Creation date instead of today

    Returns:
        Campaign: The new campaign, with no graphics and no video brief
    """
    output = FieldView(normalized)

    name = output.text("campaign_title").strip() or form.objective[:CAMPAIGN_NAME_FALLBACK_LENGTH]
    content_blocks = [ContentBlock.from_dict(block) for block in output.records("content_blocks")]
    seo = output.mapping("seo_analysis")

    if "campaign_title" not in output:
        logger.debug("No campaign_title in agent output, naming campaign after its objective")

    campaign = Campaign(
        id=campaign_id or generate_unique_id(),
        name=name,
        status=DEFAULT_CAMPAIGN_STATUS,
        created_at=today_iso(today),
        objective=form.objective,
        audience=form.audience,
        industry=form.industry,
        platforms=list(form.platforms),
        content_blocks=content_blocks,
        seo_analysis=SEOAnalysis.from_dict(seo) if seo is not None else None,
        graphics=[],
        video_brief=None,
    )

    logger.info(f"Built campaign {campaign.id} '{campaign.name}' with {len(content_blocks)} content blocks")
    return campaign


def build_graphics(artifact_files: List[Dict[str, Any]], normalized: Dict[str, Any]) -> List[GraphicAsset]:
    """
    Build one graphic record per artifact file.

    The designer agent describes its output once, so every file of a call
    shares the same description, notes, platform and dimensions.

    Args:
        artifact_files (List[Dict[str, Any]]): Files returned by the agent, in order
        normalized (Dict[str, Any]): Normalized agent description

    Returns:
        List[GraphicAsset]: Graphic records in artifact order
    """
    output = FieldView(normalized)
    graphics = []
    for artifact in artifact_files:
        graphics.append(GraphicAsset(
            file_url=FieldView(artifact).text("file_url"),
            graphic_description=output.text("graphic_description"),
            design_notes=output.text("design_notes"),
            platform=output.text("platform"),
            dimensions=output.text("dimensions"),
        ))
    return graphics


def build_video_brief(normalized: Dict[str, Any]) -> VideoBrief:
    """
    Build a complete video brief from the video agent's output.

    Args:
        normalized (Dict[str, Any]): Normalized agent output

    Returns:
        VideoBrief: Brief with defaults for every missing field
    """
    return VideoBrief.from_dict(normalized)
