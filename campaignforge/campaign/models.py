"""
Campaign data model.

Records are small dataclasses that convert to and from the persisted JSON
layout. Campaign-level keys are camelCase on disk (createdAt, contentBlocks,
seoAnalysis, videoBrief); nested records keep the snake_case keys the agents
produce, so the same from_dict reads both stored data and agent output.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from campaignforge.campaign.fields import FieldView, Number
from campaignforge.core.constants import CAMPAIGN_STATUSES, DEFAULT_CAMPAIGN_STATUS, DEFAULT_VIDEO_TITLE
from campaignforge.core.utils import count_words


@dataclass
class ContentBlock:
    """A piece of copy for one platform."""

    platform: str = ""
    content_type: str = ""
    title: str = ""
    body: str = ""
    # Taken from the agent as-is; recomputed from body on every edit.
    word_count: int = 0
    hashtags: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ContentBlock":
        view = FieldView(data)
        return cls(
            platform=view.text("platform"),
            content_type=view.text("content_type"),
            title=view.text("title"),
            body=view.text("body"),
            word_count=view.integer("word_count"),
            hashtags=view.text("hashtags"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "platform": self.platform,
            "content_type": self.content_type,
            "title": self.title,
            "body": self.body,
            "word_count": self.word_count,
            "hashtags": self.hashtags,
        }

    def with_body(self, body: str) -> "ContentBlock":
        """Return a copy with a new body and its recomputed word count."""
        return replace(self, body=body, word_count=count_words(body))


@dataclass
class SEOKeyword:
    keyword: str = ""
    search_volume: str = ""
    difficulty: str = ""
    recommendation: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "SEOKeyword":
        view = FieldView(data)
        return cls(
            keyword=view.text("keyword"),
            search_volume=view.text("search_volume"),
            difficulty=view.text("difficulty"),
            recommendation=view.text("recommendation"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "search_volume": self.search_volume,
            "difficulty": self.difficulty,
            "recommendation": self.recommendation,
        }


@dataclass
class CompetitorGap:
    gap: str = ""
    opportunity: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "CompetitorGap":
        view = FieldView(data)
        return cls(gap=view.text("gap"), opportunity=view.text("opportunity"))

    def to_dict(self) -> Dict[str, Any]:
        return {"gap": self.gap, "opportunity": self.opportunity}


@dataclass
class SEOAnalysis:
    """SEO analysis produced alongside the campaign copy."""

    keywords: List[SEOKeyword] = field(default_factory=list)
    content_score: Number = 0
    meta_title: str = ""
    meta_description: str = ""
    optimization_tips: List[str] = field(default_factory=list)
    competitor_gaps: List[CompetitorGap] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "SEOAnalysis":
        view = FieldView(data)
        return cls(
            keywords=[SEOKeyword.from_dict(k) for k in view.records("keywords")],
            content_score=view.number("content_score"),
            meta_title=view.text("meta_title"),
            meta_description=view.text("meta_description"),
            optimization_tips=view.strings("optimization_tips"),
            competitor_gaps=[CompetitorGap.from_dict(g) for g in view.records("competitor_gaps")],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keywords": [k.to_dict() for k in self.keywords],
            "content_score": self.content_score,
            "meta_title": self.meta_title,
            "meta_description": self.meta_description,
            "optimization_tips": list(self.optimization_tips),
            "competitor_gaps": [g.to_dict() for g in self.competitor_gaps],
        }


@dataclass
class GraphicAsset:
    """A generated graphic file and the designer's notes about it."""

    file_url: str = ""
    graphic_description: str = ""
    design_notes: str = ""
    platform: str = ""
    dimensions: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "GraphicAsset":
        view = FieldView(data)
        return cls(
            file_url=view.text("file_url"),
            graphic_description=view.text("graphic_description"),
            design_notes=view.text("design_notes"),
            platform=view.text("platform"),
            dimensions=view.text("dimensions"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_url": self.file_url,
            "graphic_description": self.graphic_description,
            "design_notes": self.design_notes,
            "platform": self.platform,
            "dimensions": self.dimensions,
        }


@dataclass
class Scene:
    scene_number: int = 0
    description: str = ""
    narration: str = ""
    visual_notes: str = ""
    duration: str = ""
    shot_type: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "Scene":
        view = FieldView(data)
        return cls(
            scene_number=view.integer("scene_number"),
            description=view.text("description"),
            narration=view.text("narration"),
            visual_notes=view.text("visual_notes"),
            duration=view.text("duration"),
            shot_type=view.text("shot_type"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scene_number": self.scene_number,
            "description": self.description,
            "narration": self.narration,
            "visual_notes": self.visual_notes,
            "duration": self.duration,
            "shot_type": self.shot_type,
        }


@dataclass
class VideoBrief:
    """A video production brief; replaced wholesale on each generation."""

    video_title: str = DEFAULT_VIDEO_TITLE
    concept_overview: str = ""
    target_duration: str = ""
    target_platform: str = ""
    scenes: List[Scene] = field(default_factory=list)
    music_suggestions: str = ""
    format_recommendations: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "VideoBrief":
        view = FieldView(data)
        return cls(
            video_title=view.text("video_title") or DEFAULT_VIDEO_TITLE,
            concept_overview=view.text("concept_overview"),
            target_duration=view.text("target_duration"),
            target_platform=view.text("target_platform"),
            scenes=[Scene.from_dict(s) for s in view.records("scenes")],
            music_suggestions=view.text("music_suggestions"),
            format_recommendations=view.text("format_recommendations"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "video_title": self.video_title,
            "concept_overview": self.concept_overview,
            "target_duration": self.target_duration,
            "target_platform": self.target_platform,
            "scenes": [s.to_dict() for s in self.scenes],
            "music_suggestions": self.music_suggestions,
            "format_recommendations": self.format_recommendations,
        }


@dataclass
class Campaign:
    """
    The unit of work: one generated campaign and its enrichments.

    The id is assigned once at creation and never changes. Mutating helpers
    return a new Campaign so the stored list and the active campaign can be
    swapped atomically.
    """

    id: str
    name: str
    status: str = DEFAULT_CAMPAIGN_STATUS
    created_at: str = ""
    objective: str = ""
    audience: str = ""
    industry: str = ""
    platforms: List[str] = field(default_factory=list)
    content_blocks: List[ContentBlock] = field(default_factory=list)
    seo_analysis: Optional[SEOAnalysis] = None
    graphics: List[GraphicAsset] = field(default_factory=list)
    video_brief: Optional[VideoBrief] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Campaign":
        view = FieldView(data)
        status = view.text("status")
        seo = view.mapping("seoAnalysis")
        video = view.mapping("videoBrief")
        return cls(
            id=view.text("id"),
            name=view.text("name"),
            status=status if status in CAMPAIGN_STATUSES else "draft",
            created_at=view.text("createdAt"),
            objective=view.text("objective"),
            audience=view.text("audience"),
            industry=view.text("industry"),
            platforms=view.strings("platforms"),
            content_blocks=[ContentBlock.from_dict(b) for b in view.records("contentBlocks")],
            seo_analysis=SEOAnalysis.from_dict(seo) if seo is not None else None,
            graphics=[GraphicAsset.from_dict(g) for g in view.records("graphics")],
            video_brief=VideoBrief.from_dict(video) if video is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status,
            "createdAt": self.created_at,
            "objective": self.objective,
            "audience": self.audience,
            "industry": self.industry,
            "platforms": list(self.platforms),
            "contentBlocks": [b.to_dict() for b in self.content_blocks],
            "seoAnalysis": self.seo_analysis.to_dict() if self.seo_analysis else None,
            "graphics": [g.to_dict() for g in self.graphics],
            "videoBrief": self.video_brief.to_dict() if self.video_brief else None,
        }

    def with_graphics(self, new_graphics: List[GraphicAsset]) -> "Campaign":
        """Return a copy with new_graphics appended after the existing ones."""
        return replace(self, graphics=list(self.graphics) + list(new_graphics))

    def with_video_brief(self, video_brief: VideoBrief) -> "Campaign":
        """Return a copy whose video brief is replaced by video_brief."""
        return replace(self, video_brief=video_brief)

    def with_content_block_body(self, index: int, body: str) -> "Campaign":
        """
        Return a copy with the body of one content block replaced.

        An out-of-range index leaves the blocks unchanged.
        """
        blocks = list(self.content_blocks)
        if 0 <= index < len(blocks):
            blocks[index] = blocks[index].with_body(body)
        return replace(self, content_blocks=blocks)


@dataclass
class BrandSettings:
    """Brand defaults applied to every generation prompt."""

    brand_name: str = ""
    tagline: str = ""
    voice_tone: str = ""
    industry: str = ""
    color_notes: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "BrandSettings":
        view = FieldView(data)
        return cls(
            brand_name=view.text("brandName"),
            tagline=view.text("tagline"),
            voice_tone=view.text("voiceTone"),
            industry=view.text("industry"),
            color_notes=view.text("colorNotes"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "brandName": self.brand_name,
            "tagline": self.tagline,
            "voiceTone": self.voice_tone,
            "industry": self.industry,
            "colorNotes": self.color_notes,
        }


@dataclass
class CampaignFormData:
    """Builder input for a single campaign generation request."""

    objective: str = ""
    audience: str = ""
    industry: str = ""
    brand_voice: str = ""
    platforms: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    competitor_urls: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "CampaignFormData":
        """Read a brief using either the form's camelCase or snake_case keys."""
        view = FieldView(data)
        return cls(
            objective=view.text("objective"),
            audience=view.text("audience"),
            industry=view.text("industry"),
            brand_voice=view.text("brandVoice") or view.text("brand_voice"),
            platforms=view.strings("platforms"),
            keywords=view.strings("keywords"),
            competitor_urls=view.text("competitorUrls") or view.text("competitor_urls"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "objective": self.objective,
            "audience": self.audience,
            "industry": self.industry,
            "brandVoice": self.brand_voice,
            "platforms": list(self.platforms),
            "keywords": list(self.keywords),
            "competitorUrls": self.competitor_urls,
        }
