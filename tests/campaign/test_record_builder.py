"""
Tests for campaign record building.
"""

import datetime
import pytest

from campaignforge.campaign.models import CampaignFormData
from campaignforge.campaign.record_builder import build_campaign, build_graphics, build_video_brief


class TestBuildCampaign:
    """
    Tests for the build_campaign function.
    """

    @pytest.fixture
    def form(self):
        """
        A complete campaign brief.
        """
        return CampaignFormData(
            objective="Launch the X smart speaker to early adopters across North America this spring",
            audience="Tech-savvy millennials",
            industry="Technology",
            brand_voice="Playful",
            platforms=["Blog", "LinkedIn"],
            keywords=["smart speaker"],
        )

    def test_full_output(self, form):
        """
        Test mapping a complete agent output.
        """
        normalized = {
            "campaign_title": "X Launch",
            "content_blocks": [
                {
                    "platform": "Blog",
                    "content_type": "article",
                    "title": "Meet X",
                    "body": "hi there",
                    "word_count": 0,
                    "hashtags": "#x"
                },
                {"platform": "LinkedIn", "body": "Say hello to X"}
            ],
            "seo_analysis": {
                "keywords": [{"keyword": "smart speaker", "search_volume": "10K", "difficulty": "Medium"}],
                "content_score": 84,
                "meta_title": "X",
                "optimization_tips": ["Add alt text"],
                "competitor_gaps": [{"gap": "No video", "opportunity": "Ship a teaser"}]
            }
        }

        campaign = build_campaign(form, normalized, campaign_id="c1", today=datetime.date(2025, 3, 1))

        assert campaign.id == "c1"
        assert campaign.name == "X Launch"
        assert campaign.status == "active"
        assert campaign.created_at == "2025-03-01"
        assert campaign.objective == form.objective
        assert campaign.audience == "Tech-savvy millennials"
        assert campaign.industry == "Technology"
        assert campaign.platforms == ["Blog", "LinkedIn"]
        assert [b.platform for b in campaign.content_blocks] == ["Blog", "LinkedIn"]
        assert campaign.content_blocks[0].word_count == 0
        assert campaign.content_blocks[1].content_type == ""
        assert campaign.seo_analysis.content_score == 84
        assert campaign.seo_analysis.keywords[0].keyword == "smart speaker"
        assert campaign.seo_analysis.competitor_gaps[0].opportunity == "Ship a teaser"
        assert campaign.graphics == []
        assert campaign.video_brief is None

    def test_empty_output(self, form):
        """
        Test that an empty output still produces a valid campaign.
        """
        campaign = build_campaign(form, {})

        assert campaign.name == form.objective[:50]
        assert campaign.content_blocks == []
        assert campaign.seo_analysis is None
        assert campaign.id
        assert campaign.created_at == datetime.date.today().isoformat()

    def test_blank_title_falls_back_to_objective(self, form):
        """
        Test that a whitespace-only title counts as missing.
        """
        campaign = build_campaign(form, {"campaign_title": "   "})

        assert campaign.name == form.objective[:50]

    def test_short_objective_used_whole(self):
        """
        Test the fallback name for objectives shorter than the limit.
        """
        form = CampaignFormData(objective="Launch X", audience="devs", platforms=["Blog"])

        assert build_campaign(form, {}).name == "Launch X"

    def test_malformed_fields_use_defaults(self, form):
        """
        Test that wrongly-typed fields fall back to defaults.
        """
        normalized = {
            "campaign_title": "X Launch",
            "content_blocks": [{"platform": "Blog", "word_count": "12"}, "not a block", None],
            "seo_analysis": "not an object"
        }

        campaign = build_campaign(form, normalized)

        assert len(campaign.content_blocks) == 1
        assert campaign.content_blocks[0].word_count == 12
        assert campaign.seo_analysis is None

    def test_ids_are_distinct(self, form):
        """
        Test that consecutive builds get different ids.
        """
        assert build_campaign(form, {}).id != build_campaign(form, {}).id


class TestBuildGraphics:
    """
    Tests for the build_graphics function.
    """

    def test_one_record_per_artifact(self):
        """
        Test that each artifact becomes a graphic sharing the description.
        """
        artifacts = [{"file_url": "https://cdn.example.com/1.png"}, {"file_url": "https://cdn.example.com/2.png"}]
        normalized = {
            "graphic_description": "Hero banner",
            "design_notes": "High contrast",
            "platform": "Instagram",
            "dimensions": "1080x1080"
        }

        graphics = build_graphics(artifacts, normalized)

        assert [g.file_url for g in graphics] == ["https://cdn.example.com/1.png", "https://cdn.example.com/2.png"]
        assert all(g.graphic_description == "Hero banner" for g in graphics)
        assert all(g.dimensions == "1080x1080" for g in graphics)

    def test_no_artifacts(self):
        """
        Test that no artifacts means no graphics, whatever the description.
        """
        assert build_graphics([], {"graphic_description": "Hero banner"}) == []

    def test_missing_description(self):
        """
        Test defaults when the agent gives no description.
        """
        graphics = build_graphics([{"file_url": "a.png"}, {}], {})

        assert graphics[0].file_url == "a.png"
        assert graphics[0].graphic_description == ""
        assert graphics[1].file_url == ""


class TestBuildVideoBrief:
    """
    Tests for the build_video_brief function.
    """

    def test_full_output(self):
        """
        Test mapping a complete video brief.
        """
        brief = build_video_brief({
            "video_title": "Meet X",
            "concept_overview": "A day with X",
            "target_duration": "30s",
            "target_platform": "Instagram Reels",
            "scenes": [
                {"scene_number": 1, "description": "Morning", "duration": "5s"},
                {"scene_number": 2, "description": "Evening"}
            ],
            "music_suggestions": "Lo-fi",
            "format_recommendations": "9:16"
        })

        assert brief.video_title == "Meet X"
        assert [s.scene_number for s in brief.scenes] == [1, 2]
        assert brief.scenes[1].duration == ""
        assert brief.format_recommendations == "9:16"

    def test_empty_output(self):
        """
        Test the defaults of an empty video brief.
        """
        brief = build_video_brief({})

        assert brief.video_title == "Untitled Video"
        assert brief.scenes == []
        assert brief.concept_overview == ""
