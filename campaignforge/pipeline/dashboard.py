"""
Campaign dashboard: summary statistics, filtering and demo data.
"""

from dataclasses import dataclass
from typing import List

from campaignforge.campaign.models import (
    Campaign,
    ContentBlock,
    GraphicAsset,
    SEOAnalysis,
    VideoBrief,
)

STATUS_ALL = "all"


@dataclass
class DashboardSummary:
    total: int = 0
    active: int = 0
    total_content: int = 0
    average_seo_score: int = 0


def summarize(campaigns: List[Campaign]) -> DashboardSummary:
    """
    Compute dashboard statistics.

    The average SEO score only counts campaigns with a non-zero content score
    and is rounded half up; it is 0 when none qualify.

    Args:
        campaigns (List[Campaign]): Campaigns to summarize

    Returns:
        DashboardSummary: The statistics
    """
    scores = [
        c.seo_analysis.content_score
        for c in campaigns
        if c.seo_analysis is not None and c.seo_analysis.content_score
    ]
    return DashboardSummary(
        total=len(campaigns),
        active=sum(1 for c in campaigns if c.status == "active"),
        total_content=sum(len(c.content_blocks) for c in campaigns),
        average_seo_score=int(sum(scores) / len(scores) + 0.5) if scores else 0,
    )


def filter_campaigns(campaigns: List[Campaign], query: str = "", status: str = STATUS_ALL) -> List[Campaign]:
    """
    Filter campaigns by a case-insensitive name search and a status.

    Args:
        campaigns (List[Campaign]): Campaigns to filter
        query (str): Text the name must contain
        status (str): Required status, or 'all'

    Returns:
        List[Campaign]: Matching campaigns in their original order
    """
    needle = (query or "").lower()
    return [
        c for c in campaigns
        if needle in c.name.lower() and (status == STATUS_ALL or c.status == status)
    ]


def _sample_block(platform: str, word_count: int) -> ContentBlock:
    return ContentBlock(platform=platform, title="Sample", body="Content...", word_count=word_count)


SAMPLE_CAMPAIGNS = [
    Campaign(
        id="s1", name="Q1 Product Launch - Wellness Line", status="active", created_at="2025-01-15",
        objective="Launch new wellness product line", audience="Health-conscious millennials",
        industry="Health & Wellness", platforms=["Blog", "Instagram", "LinkedIn"],
        content_blocks=[_sample_block("Blog", 800)], seo_analysis=SEOAnalysis(content_score=82),
    ),
    Campaign(
        id="s2", name="Brand Awareness - Tech Summit 2025", status="complete", created_at="2025-01-10",
        objective="Maximize brand visibility at tech summit", audience="CTOs and engineering leaders",
        industry="Technology", platforms=["LinkedIn", "Twitter", "Email"],
        content_blocks=[_sample_block("LinkedIn", 300)], seo_analysis=SEOAnalysis(content_score=91),
        graphics=[GraphicAsset()], video_brief=VideoBrief(video_title="Summit Highlight Reel"),
    ),
    Campaign(
        id="s3", name="Holiday Sale Email Series", status="draft", created_at="2025-01-20",
        objective="Drive holiday season sales", audience="Existing customers aged 25-45",
        industry="E-commerce", platforms=["Email", "Instagram", "Ad"],
    ),
    Campaign(
        id="s4", name="Sustainability Report Campaign", status="active", created_at="2025-01-18",
        objective="Promote annual sustainability report", audience="Investors and eco-conscious consumers",
        industry="Finance", platforms=["Blog", "LinkedIn", "Twitter"],
        content_blocks=[_sample_block("Blog", 1200), _sample_block("LinkedIn", 250)],
        seo_analysis=SEOAnalysis(content_score=76),
    ),
]
