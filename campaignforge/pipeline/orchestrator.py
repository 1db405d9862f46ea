"""
Generation orchestrator.

This module drives the three generation workflows:
- campaign: brief -> orchestrator agent -> new campaign (copy + SEO)
- graphics: active campaign -> graphic designer agent -> graphics appended
- video: active campaign -> video brief agent -> video brief replaced

Each workflow moves idle -> in_flight -> succeeded | failed. Failures are
reported through the returned WorkflowResult and the workspace status
message; they are never raised. Whatever the outcome, the workflow's
in-flight flag and the active agent indicator are cleared on exit.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional

from campaignforge.agents.gateway import AgentGateway, AgentResponse
from campaignforge.agents.normalizer import normalize
from campaignforge.campaign.input_validator import InputValidator
from campaignforge.campaign.models import Campaign, CampaignFormData
from campaignforge.campaign.prompts import build_campaign_prompt, default_graphic_prompt, default_video_prompt
from campaignforge.campaign.record_builder import build_campaign, build_graphics, build_video_brief
from campaignforge.core.config import get_agent_ids
from campaignforge.core.constants import ERROR_PREFIX, SCREEN_BUILDER, SCREEN_REVIEW
from campaignforge.core.logging_config import get_logger
from campaignforge.storage.synchronizer import Workspace

logger = get_logger(__name__)

# Workflows
WORKFLOW_CAMPAIGN = "campaign"
WORKFLOW_GRAPHICS = "graphics"
WORKFLOW_VIDEO = "video"
WORKFLOWS = [WORKFLOW_CAMPAIGN, WORKFLOW_GRAPHICS, WORKFLOW_VIDEO]

# Workflow states
IDLE = "idle"
IN_FLIGHT = "in_flight"
SUCCEEDED = "succeeded"
FAILED = "failed"


@dataclass
class WorkflowResult:
    """
    Outcome of one workflow call.

    Attributes:
        workflow: Workflow name.
        state: Workflow state after the call.
        campaign: The created or updated campaign on success, else None.
        message: Status message shown to the user; empty for no-ops.
    """

    workflow: str
    state: str
    campaign: Optional[Campaign] = None
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.state == SUCCEEDED

    @property
    def failed(self) -> bool:
        return self.state == FAILED


class GenerationOrchestrator:
    """
    Runs the generation workflows against a Workspace.
    """

    def __init__(
        self,
        gateway: Optional[AgentGateway] = None,
        agent_ids: Optional[Dict[str, str]] = None,
        validator: Optional[InputValidator] = None
    ):
        """
        Initialize the orchestrator.

        Args:
            gateway (AgentGateway, optional): Gateway used for agent calls
            agent_ids (Dict[str, str], optional): Agent identifiers keyed by
                'orchestrator', 'graphic_designer' and 'video_brief'
            validator (InputValidator, optional): Brief validator
        """
        self.gateway = gateway or AgentGateway()
        self.agent_ids = dict(get_agent_ids())
        if agent_ids:
            self.agent_ids.update(agent_ids)
        self.validator = validator or InputValidator()
        self.states = {workflow: IDLE for workflow in WORKFLOWS}
        self._in_flight = set()
        logger.info("Initialized GenerationOrchestrator")

    def is_generating(self, workflow: str) -> bool:
        return workflow in self._in_flight

    @contextmanager
    def _running(self, workflow: str) -> Iterator[None]:
        self._in_flight.add(workflow)
        self.states[workflow] = IN_FLIGHT
        try:
            yield
        finally:
            self._in_flight.discard(workflow)
            if self.states[workflow] == IN_FLIGHT:
                self.states[workflow] = FAILED

    def generate_campaign(self, workspace: Workspace, form: CampaignFormData) -> WorkflowResult:
        """
        Generate a new campaign from a brief.

        On success the campaign is prepended to the workspace list, becomes
        the active campaign and the review screen is shown. On failure the
        list is untouched and the builder screen is shown with an error.

        Args:
            workspace (Workspace): Workspace to update
            form (CampaignFormData): The brief

        Returns:
            WorkflowResult: The outcome

        Raises:
            ValidationError: If the brief lacks an objective, an audience or a platform
        """
        self.validator.validate_form(form)

        if self.is_generating(WORKFLOW_CAMPAIGN):
            logger.warning("Campaign generation already in progress, ignoring request")
            return WorkflowResult(WORKFLOW_CAMPAIGN, self.states[WORKFLOW_CAMPAIGN])

        workspace.screen = SCREEN_BUILDER
        workspace.dismiss_status()

        prompt = build_campaign_prompt(form, workspace.brand_settings)
        agent_id = self.agent_ids["orchestrator"]
        logger.info(f"Generating campaign for objective '{form.objective[:50]}'")

        with self._running(WORKFLOW_CAMPAIGN):
            try:
                response = self.gateway.invoke(prompt, agent_id, activity=workspace.agent_activity)
                if not response.success:
                    return self._fail(workspace, WORKFLOW_CAMPAIGN, response.error or "Failed to generate campaign", SCREEN_BUILDER)

                campaign = build_campaign(form, normalize(response.payload()))
                workspace.add(campaign)
                workspace.screen = SCREEN_REVIEW
                return self._succeed(workspace, WORKFLOW_CAMPAIGN, campaign, "Campaign generated successfully")
            except Exception as e:
                logger.exception(f"Campaign generation failed: {e}")
                return self._fail(workspace, WORKFLOW_CAMPAIGN, str(e) or "Unexpected error", SCREEN_BUILDER)

    def generate_graphics(self, workspace: Workspace, prompt: Optional[str] = None) -> WorkflowResult:
        """
        Generate graphics for the active campaign and append them.

        Args:
            workspace (Workspace): Workspace holding the active campaign
            prompt (str, optional): Description of the graphic; defaults to
                a request naming the campaign

        Returns:
            WorkflowResult: The outcome; a no-op result without an active campaign
        """
        def merge(campaign: Campaign, response: AgentResponse) -> Campaign:
            graphics = build_graphics(response.artifact_files(), normalize(response.payload()))
            logger.info(f"Appending {len(graphics)} graphics to campaign {campaign.id}")
            return campaign.with_graphics(graphics)

        return self._enrich(
            workspace,
            WORKFLOW_GRAPHICS,
            self.agent_ids["graphic_designer"],
            prompt,
            default_graphic_prompt,
            merge,
            "Graphics generated successfully",
            "Failed to generate graphics",
        )

    def generate_video_brief(self, workspace: Workspace, prompt: Optional[str] = None) -> WorkflowResult:
        """
        Generate a video brief for the active campaign, replacing any previous one.

        Args:
            workspace (Workspace): Workspace holding the active campaign
            prompt (str, optional): Description of the video; defaults to a
                request naming the campaign

        Returns:
            WorkflowResult: The outcome; a no-op result without an active campaign
        """
        def merge(campaign: Campaign, response: AgentResponse) -> Campaign:
            return campaign.with_video_brief(build_video_brief(normalize(response.payload())))

        return self._enrich(
            workspace,
            WORKFLOW_VIDEO,
            self.agent_ids["video_brief"],
            prompt,
            default_video_prompt,
            merge,
            "Video brief generated successfully",
            "Failed to generate video brief",
        )

    def _enrich(
        self,
        workspace: Workspace,
        workflow: str,
        agent_id: str,
        prompt: Optional[str],
        default_prompt: Callable[[str], str],
        merge: Callable[[Campaign, AgentResponse], Campaign],
        success_message: str,
        failure_message: str
    ) -> WorkflowResult:
        target = workspace.active_campaign
        if target is None:
            logger.debug(f"No active campaign, skipping {workflow} generation")
            return WorkflowResult(workflow, self.states[workflow])

        if self.is_generating(workflow):
            logger.warning(f"{workflow} generation already in progress, ignoring request")
            return WorkflowResult(workflow, self.states[workflow])

        workspace.dismiss_status()
        if not prompt or not prompt.strip():
            prompt = default_prompt(target.name)

        with self._running(workflow):
            try:
                response = self.gateway.invoke(prompt, agent_id, activity=workspace.agent_activity)
                if not response.success:
                    return self._fail(workspace, workflow, response.error or failure_message)

                # Merge into the value stored now, not the one read before the call
                current = self._freshest(workspace, target)
                updated = workspace.update(merge(current, response))
                return self._succeed(workspace, workflow, updated, success_message)
            except Exception as e:
                logger.exception(f"{workflow} generation failed: {e}")
                return self._fail(workspace, workflow, str(e) or "Unexpected error")

    def _freshest(self, workspace: Workspace, target: Campaign) -> Campaign:
        stored = workspace.get_campaign(target.id)
        if stored is not None:
            return stored
        active = workspace.active_campaign
        if active is not None and active.id == target.id:
            return active
        return target

    def _succeed(self, workspace: Workspace, workflow: str, campaign: Campaign, message: str) -> WorkflowResult:
        self.states[workflow] = SUCCEEDED
        workspace.set_status(message)
        logger.info(f"{workflow} workflow succeeded for campaign {campaign.id}")
        return WorkflowResult(workflow, SUCCEEDED, campaign, message)

    def _fail(self, workspace: Workspace, workflow: str, error: str, screen: Optional[str] = None) -> WorkflowResult:
        self.states[workflow] = FAILED
        message = f"{ERROR_PREFIX}{error}"
        workspace.set_status(message)
        if screen is not None:
            workspace.screen = screen
        logger.error(f"{workflow} workflow failed: {error}")
        return WorkflowResult(workflow, FAILED, None, message)
