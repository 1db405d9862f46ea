"""
Tests for the generation orchestrator.
"""

import json
import pytest
from unittest.mock import MagicMock

from campaignforge.agents.gateway import AgentGateway, AgentResponse
from campaignforge.campaign.models import Campaign, CampaignFormData, ContentBlock, GraphicAsset, VideoBrief
from campaignforge.core.error_handler import ValidationError
from campaignforge.pipeline.orchestrator import (
    FAILED,
    IDLE,
    SUCCEEDED,
    WORKFLOW_CAMPAIGN,
    WORKFLOW_GRAPHICS,
    WORKFLOW_VIDEO,
    GenerationOrchestrator,
)
from campaignforge.storage.persistence import CampaignStore
from campaignforge.storage.synchronizer import Workspace

AGENT_IDS = {"orchestrator": "orch", "graphic_designer": "design", "video_brief": "video"}


class StubGateway:
    """
    Gateway returning scripted responses and recording prompts.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.on_invoke = None

    def invoke(self, prompt, agent_id, activity=None):
        with activity.track(agent_id):
            self.calls.append((prompt, agent_id, activity.current))
            if self.on_invoke is not None:
                self.on_invoke()
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response


def campaign_response(title="X Launch"):
    return AgentResponse(success=True, response={"result": json.dumps({
        "campaign_title": title,
        "content_blocks": [{"platform": "Blog", "body": "hi there", "word_count": 0}],
        "seo_analysis": {"content_score": 80}
    })})


def graphics_response(*urls):
    return AgentResponse(
        success=True,
        response={"result": {"graphic_description": "Hero banner", "dimensions": "1200x628"}},
        module_outputs={"artifact_files": [{"file_url": url} for url in urls]}
    )


def video_response(title):
    return AgentResponse(success=True, response='```json\n{"video_title": "%s", "scenes": []}\n```' % title)


@pytest.fixture
def workspace(tmp_path):
    return Workspace(CampaignStore(str(tmp_path)))


@pytest.fixture
def form():
    return CampaignFormData(objective="Launch X", audience="developers", industry="Technology", platforms=["Blog"])


@pytest.fixture
def existing(workspace):
    """
    A stored, active campaign with one graphic.
    """
    campaign = Campaign(
        id="c1",
        name="Spring Launch",
        created_at="2025-03-01",
        content_blocks=[ContentBlock(platform="Blog", body="hello")],
        graphics=[GraphicAsset(file_url="g1.png")],
    )
    workspace.add(campaign)
    return campaign


def orchestrator_for(gateway):
    return GenerationOrchestrator(gateway=gateway, agent_ids=AGENT_IDS, validator=None)


class TestGenerateCampaign:
    """
    Tests for the campaign workflow.
    """

    def test_success(self, workspace, form):
        """
        Test that a generated campaign is prepended, stored and reviewed.
        """
        gateway = StubGateway(campaign_response())
        orchestrator = orchestrator_for(gateway)

        result = orchestrator.generate_campaign(workspace, form)

        assert result.succeeded
        assert result.message == "Campaign generated successfully"
        assert workspace.campaigns[0] is result.campaign
        assert workspace.active_campaign is result.campaign
        assert workspace.screen == "review"
        assert workspace.status_message == "Campaign generated successfully"
        assert orchestrator.states[WORKFLOW_CAMPAIGN] == SUCCEEDED
        assert result.campaign.name == "X Launch"
        assert result.campaign.seo_analysis.content_score == 80
        assert gateway.calls[0][1] == "orch"
        assert "Objective: Launch X" in gateway.calls[0][0]

        stored = CampaignStore(workspace.store.directory).load_campaigns()
        assert [c.id for c in stored] == [result.campaign.id]

    def test_campaigns_are_prepended(self, workspace, form):
        """
        Test that each creation adds one campaign at the front with a new id.
        """
        orchestrator = orchestrator_for(StubGateway(campaign_response("First"), campaign_response("Second")))

        first = orchestrator.generate_campaign(workspace, form).campaign
        second = orchestrator.generate_campaign(workspace, form).campaign

        assert [c.name for c in workspace.campaigns] == ["Second", "First"]
        assert first.id != second.id

    def test_brand_settings_in_prompt(self, workspace, form):
        """
        Test that the brand defaults are included in the prompt.
        """
        from campaignforge.campaign.models import BrandSettings

        workspace.save_brand_settings(BrandSettings(brand_name="Acme", tagline="Build better"))
        gateway = StubGateway(campaign_response())

        orchestrator_for(gateway).generate_campaign(workspace, form)

        assert "Brand: Acme. Tagline: Build better." in gateway.calls[0][0]

    def test_agent_failure(self, workspace, form, existing):
        """
        Test that a failed call leaves the list unchanged and reports the error.
        """
        orchestrator = orchestrator_for(StubGateway(AgentResponse.failure("Agent overloaded")))

        result = orchestrator.generate_campaign(workspace, form)

        assert result.failed
        assert result.campaign is None
        assert workspace.campaigns == [existing]
        assert workspace.active_campaign is existing
        assert workspace.screen == "builder"
        assert workspace.status_message == "Error: Agent overloaded"
        assert orchestrator.states[WORKFLOW_CAMPAIGN] == FAILED
        assert not orchestrator.is_generating(WORKFLOW_CAMPAIGN)

    def test_agent_failure_without_message(self, workspace, form):
        """
        Test the fallback error message.
        """
        result = orchestrator_for(StubGateway(AgentResponse(success=False))).generate_campaign(workspace, form)

        assert result.message == "Error: Failed to generate campaign"

    def test_unexpected_exception(self, workspace, form):
        """
        Test that an exception is reported and all in-flight state is cleared.
        """
        orchestrator = orchestrator_for(StubGateway(RuntimeError("socket closed")))

        result = orchestrator.generate_campaign(workspace, form)

        assert result.failed
        assert workspace.status_message == "Error: socket closed"
        assert workspace.campaigns == []
        assert workspace.agent_activity.current is None
        assert not orchestrator.is_generating(WORKFLOW_CAMPAIGN)

    def test_unparseable_output_still_creates_campaign(self, workspace, form):
        """
        Test that prose output produces a campaign named after the objective.
        """
        orchestrator = orchestrator_for(StubGateway(AgentResponse(success=True, response="Sorry, I cannot help.")))

        result = orchestrator.generate_campaign(workspace, form)

        assert result.succeeded
        assert result.campaign.name == "Launch X"
        assert result.campaign.content_blocks == []
        assert result.campaign.seo_analysis is None

    def test_invalid_form(self, workspace):
        """
        Test that an incomplete brief is rejected before any call.
        """
        gateway = StubGateway()
        orchestrator = orchestrator_for(gateway)

        with pytest.raises(ValidationError):
            orchestrator.generate_campaign(workspace, CampaignFormData(objective="Launch X", audience="devs"))

        assert gateway.calls == []
        assert orchestrator.states[WORKFLOW_CAMPAIGN] == IDLE

    def test_activity_indicator(self, workspace, form):
        """
        Test that the orchestrator agent is shown as active during the call only.
        """
        gateway = StubGateway(campaign_response())

        orchestrator_for(gateway).generate_campaign(workspace, form)

        assert gateway.calls[0][2] == "orch"
        assert workspace.agent_activity.current is None

    def test_reentry_is_ignored(self, workspace, form):
        """
        Test that a second request while one is in flight does nothing.
        """
        gateway = StubGateway(campaign_response())
        orchestrator = orchestrator_for(gateway)
        nested = []

        def reenter():
            assert orchestrator.is_generating(WORKFLOW_CAMPAIGN)
            nested.append(orchestrator.generate_campaign(workspace, form))

        gateway.on_invoke = reenter

        result = orchestrator.generate_campaign(workspace, form)

        assert result.succeeded
        assert len(gateway.calls) == 1
        assert nested[0].campaign is None
        assert len(workspace.campaigns) == 1


class TestGenerateGraphics:
    """
    Tests for the graphics workflow.
    """

    def test_graphics_are_appended(self, workspace, existing):
        """
        Test that new graphics go after the existing ones in artifact order.
        """
        gateway = StubGateway(graphics_response("g2.png", "g3.png"))
        orchestrator = orchestrator_for(gateway)

        result = orchestrator.generate_graphics(workspace, "Hero banner")

        assert result.succeeded
        assert result.message == "Graphics generated successfully"
        assert [g.file_url for g in workspace.active_campaign.graphics] == ["g1.png", "g2.png", "g3.png"]
        assert workspace.campaigns[0] is workspace.active_campaign
        assert workspace.active_campaign.graphics[1].graphic_description == "Hero banner"
        assert gateway.calls[0][:2] == ("Hero banner", "design")
        assert orchestrator.states[WORKFLOW_GRAPHICS] == SUCCEEDED

        stored = CampaignStore(workspace.store.directory).load_campaigns()
        assert len(stored[0].graphics) == 3

    def test_no_artifacts_adds_nothing(self, workspace, existing):
        """
        Test a successful call that returned no files.
        """
        result = orchestrator_for(StubGateway(graphics_response())).generate_graphics(workspace)

        assert result.succeeded
        assert [g.file_url for g in workspace.active_campaign.graphics] == ["g1.png"]

    def test_default_prompt(self, workspace, existing):
        """
        Test the prompt used when none is given.
        """
        gateway = StubGateway(graphics_response("g2.png"))

        orchestrator_for(gateway).generate_graphics(workspace, "   ")

        assert gateway.calls[0][0] == "Create a marketing graphic for the campaign: Spring Launch"

    def test_without_active_campaign(self, workspace):
        """
        Test that nothing happens without an active campaign.
        """
        gateway = StubGateway()
        orchestrator = orchestrator_for(gateway)

        result = orchestrator.generate_graphics(workspace, "Hero banner")

        assert result.state == IDLE
        assert result.message == ""
        assert gateway.calls == []

    def test_failure_keeps_campaign(self, workspace, existing):
        """
        Test that a failed call leaves the campaign untouched.
        """
        orchestrator = orchestrator_for(StubGateway(AgentResponse.failure("Render farm down")))

        result = orchestrator.generate_graphics(workspace)

        assert result.failed
        assert workspace.active_campaign is existing
        assert workspace.status_message == "Error: Render farm down"
        assert not orchestrator.is_generating(WORKFLOW_GRAPHICS)

    def test_merges_into_current_value(self, workspace, existing):
        """
        Test that changes made during the call are kept.
        """
        gateway = StubGateway(graphics_response("g2.png"))
        gateway.on_invoke = lambda: workspace.update_content_block(0, "edited while generating")

        orchestrator_for(gateway).generate_graphics(workspace)

        active = workspace.active_campaign
        assert active.content_blocks[0].body == "edited while generating"
        assert [g.file_url for g in active.graphics] == ["g1.png", "g2.png"]

    def test_concurrent_enrichments_both_land(self, workspace, existing):
        """
        Test that a video brief generated during a graphics call is kept.
        """
        graphics_gateway = StubGateway(graphics_response("g2.png"))
        orchestrator = orchestrator_for(graphics_gateway)
        video_gateway = StubGateway(video_response("Teaser"))
        graphics_gateway.on_invoke = lambda: orchestrator_for(video_gateway).generate_video_brief(workspace)

        orchestrator.generate_graphics(workspace)

        active = workspace.active_campaign
        assert active.video_brief.video_title == "Teaser"
        assert len(active.graphics) == 2
        assert workspace.get_campaign("c1") is active


class TestGenerateVideoBrief:
    """
    Tests for the video brief workflow.
    """

    def test_video_brief_is_replaced(self, workspace, existing):
        """
        Test that each generation replaces the previous brief.
        """
        orchestrator = orchestrator_for(StubGateway(video_response("First"), video_response("Second")))

        orchestrator.generate_video_brief(workspace)
        result = orchestrator.generate_video_brief(workspace, "Focus on the unboxing")

        assert result.succeeded
        assert result.message == "Video brief generated successfully"
        assert workspace.active_campaign.video_brief.video_title == "Second"
        assert workspace.get_campaign("c1").video_brief.video_title == "Second"
        assert orchestrator.states[WORKFLOW_VIDEO] == SUCCEEDED

    def test_default_prompt_and_agent(self, workspace, existing):
        """
        Test the default prompt and the agent used.
        """
        gateway = StubGateway(video_response("Teaser"))

        orchestrator_for(gateway).generate_video_brief(workspace)

        assert gateway.calls[0][:2] == ("Create a video brief for the campaign: Spring Launch", "video")

    def test_unparseable_output_gives_default_brief(self, workspace, existing):
        """
        Test that unusable output still produces a brief with defaults.
        """
        orchestrator = orchestrator_for(StubGateway(AgentResponse(success=True, response="no brief today")))

        orchestrator.generate_video_brief(workspace)

        assert workspace.active_campaign.video_brief == VideoBrief()

    def test_failure_message(self, workspace, existing):
        """
        Test the fallback failure message.
        """
        result = orchestrator_for(StubGateway(AgentResponse(success=False))).generate_video_brief(workspace)

        assert result.message == "Error: Failed to generate video brief"
        assert workspace.active_campaign.video_brief is None


class TestScenario:
    """
    End-to-end flow with a stubbed agent backend.
    """

    def test_create_then_edit(self, workspace):
        """
        Test creating a campaign from a raw backend body and editing a block.
        """
        gateway = AgentGateway(endpoint="http://agents.test/api", api_key="", timeout=5)
        body = {
            "success": True,
            "response": {"campaign_title": "X Launch", "content_blocks": [
                {"platform": "Blog", "body": "hi there", "word_count": 0}
            ]}
        }
        gateway._invoke = MagicMock(return_value=AgentResponse.from_payload(body))
        orchestrator = GenerationOrchestrator(gateway=gateway)
        form = CampaignFormData(objective="Launch X", audience="developers", platforms=["Blog"])

        result = orchestrator.generate_campaign(workspace, form)

        assert result.campaign.name == "X Launch"
        assert len(result.campaign.content_blocks) == 1
        assert result.campaign.content_blocks[0].word_count == 0

        updated = workspace.update_content_block(0, "hi there again")

        assert updated.content_blocks[0].word_count == 3
        assert workspace.campaigns[0].content_blocks[0].word_count == 3
