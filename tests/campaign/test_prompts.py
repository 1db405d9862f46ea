"""
Tests for generation prompts.
"""

from campaignforge.campaign.models import BrandSettings, CampaignFormData
from campaignforge.campaign.prompts import (
    build_brand_context,
    build_campaign_prompt,
    default_graphic_prompt,
    default_video_prompt,
)


class TestPrompts:
    """
    Tests for the prompt builders.
    """

    def test_campaign_prompt_with_brand(self):
        """
        Test the campaign prompt for a brief with brand settings.
        """
        form = CampaignFormData(
            objective="Launch X",
            audience="developers",
            industry="Technology",
            brand_voice="Friendly",
            platforms=["Blog", "LinkedIn"],
            keywords=["devtools", "cli"],
        )
        brand = BrandSettings(brand_name="Acme", tagline="Build better", voice_tone="Friendly", color_notes="Blue")

        prompt = build_campaign_prompt(form, brand)

        assert prompt.startswith("Create a comprehensive marketing campaign with the following brief:\n")
        assert "Objective: Launch X\n" in prompt
        assert "Target Audience: developers\n" in prompt
        assert "Platforms: Blog, LinkedIn\n" in prompt
        assert "Keywords: devtools, cli\n" in prompt
        assert "Competitor URLs" not in prompt
        assert "Brand: Acme. Tagline: Build better. Voice: Friendly. Colors: Blue." in prompt
        assert prompt.endswith("optimization tips, and competitor gaps.")

    def test_campaign_prompt_is_deterministic(self):
        """
        Test that the same brief gives the same prompt.
        """
        form = CampaignFormData(objective="Launch X", audience="developers", platforms=["Blog"])

        assert build_campaign_prompt(form) == build_campaign_prompt(form)

    def test_campaign_prompt_with_competitors(self):
        """
        Test that competitor URLs are listed when given.
        """
        form = CampaignFormData(objective="o", audience="a", platforms=["Blog"], competitor_urls="https://rival.example.com")

        assert "Competitor URLs: https://rival.example.com" in build_campaign_prompt(form)

    def test_brand_context_requires_brand_name(self):
        """
        Test that brand settings without a name add nothing.
        """
        assert build_brand_context(None) == ""
        assert build_brand_context(BrandSettings(tagline="Build better")) == ""

    def test_default_enrichment_prompts(self):
        """
        Test the default graphics and video prompts.
        """
        assert default_graphic_prompt("X Launch") == "Create a marketing graphic for the campaign: X Launch"
        assert default_video_prompt("X Launch") == "Create a video brief for the campaign: X Launch"
