"""
Agent gateway.

This module invokes the external generation agents over HTTP. Every call
returns an AgentResponse: transport and backend failures are reported through
success=False and a readable error instead of being raised, so callers branch
on AgentResponse.success before touching the payload.
"""

from contextlib import contextmanager, nullcontext
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

import requests

from campaignforge.core.config import get_config_value
from campaignforge.core.constants import DEFAULT_AGENT_ENDPOINT, DEFAULT_AGENT_TIMEOUT
from campaignforge.core.credentials import get_api_key
from campaignforge.core.error_handler import APIError, ConfigurationError, handle_api_request, log_api_error
from campaignforge.core.logging_config import get_logger, log_api_request, log_api_response

logger = get_logger(__name__)


@dataclass
class AgentResponse:
    """
    Result of one agent invocation.

    Attributes:
        success: Whether the agent produced a result.
        response: Free-form payload; may be a JSON string, a dict, or a dict
            holding the real payload under 'result'.
        module_outputs: Extra outputs of asset-producing agents.
        error: Human-readable error when success is False.
    """

    success: bool
    response: Any = None
    module_outputs: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    @classmethod
    def from_payload(cls, body: Any) -> "AgentResponse":
        """
        Build a response from the decoded backend body.

        Args:
            body (Any): Decoded JSON body

        Returns:
            AgentResponse: The response; a failure if body is not an object
        """
        if not isinstance(body, dict):
            return cls(success=False, error="Unexpected response from agent backend")

        error = body.get("error")
        if error is not None and not isinstance(error, str):
            error = str(error)

        if "success" in body:
            success = bool(body.get("success"))
        else:
            success = body.get("response") is not None and not error

        module_outputs = body.get("module_outputs")
        return cls(
            success=success,
            response=body.get("response"),
            module_outputs=module_outputs if isinstance(module_outputs, dict) else {},
            error=error,
        )

    @classmethod
    def failure(cls, error: str) -> "AgentResponse":
        return cls(success=False, error=error)

    def payload(self) -> Any:
        """The agent's answer: response['result'] when set, else response itself."""
        if isinstance(self.response, dict) and self.response.get("result"):
            return self.response["result"]
        return self.response

    def artifact_files(self) -> List[Dict[str, Any]]:
        """Files produced by the agent, in order; malformed entries are skipped."""
        files = self.module_outputs.get("artifact_files")
        if not isinstance(files, list):
            return []
        return [f for f in files if isinstance(f, dict)]


class AgentActivity:
    """
    Indicator of the agent currently working, for status display.

    Only one agent is shown at a time; track() scopes it to a single call.
    """

    def __init__(self):
        self.current: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.current is not None

    @contextmanager
    def track(self, agent_id: str) -> Iterator[None]:
        """Mark agent_id active for the duration of the block, on every exit path."""
        self.current = agent_id
        try:
            yield
        finally:
            self.current = None


class AgentGateway:
    """
    Client for the agent backend.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize the gateway.

        Args:
            endpoint (str, optional): Agent backend URL. Defaults to 'agent_gateway.endpoint' from config.
            api_key (str, optional): Bearer token. Defaults to the CAMPAIGNFORGE_API_KEY credential.
            timeout (float, optional): Transport timeout in seconds. Defaults to 'agent_gateway.timeout'.

        Raises:
            ConfigurationError: If no endpoint is configured
        """
        self.endpoint = endpoint or get_config_value("agent_gateway.endpoint", DEFAULT_AGENT_ENDPOINT)
        if not self.endpoint:
            raise ConfigurationError(
                "Agent backend endpoint is not configured",
                component="AgentGateway",
                missing_keys=["agent_gateway.endpoint"]
            )
        self.api_key = api_key if api_key is not None else get_api_key("agent")
        self.timeout = timeout if timeout is not None else get_config_value("agent_gateway.timeout", DEFAULT_AGENT_TIMEOUT)

        logger.info(f"Initialized {self.__class__.__name__} for {self.endpoint}")

    def invoke(self, prompt: str, agent_id: str, activity: Optional[AgentActivity] = None) -> AgentResponse:
        """
        Invoke an agent with a text prompt.

        Args:
            prompt (str): Prompt text
            agent_id (str): Identifier of the agent to run
            activity (AgentActivity, optional): Indicator marked active during the call

        Returns:
            AgentResponse: The agent's response; success=False on any failure
        """
        scope = activity.track(agent_id) if activity is not None else nullcontext()
        with scope:
            return self._invoke(prompt, agent_id)

    def _invoke(self, prompt: str, agent_id: str) -> AgentResponse:
        payload = {"message": prompt, "agent_id": agent_id}
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        log_api_request(logger, "agent", self.endpoint, payload)

        try:
            body = handle_api_request(
                requests.post,
                self.endpoint,
                payload,
                headers,
                error_message=f"Agent {agent_id} request failed",
                timeout=self.timeout
            )
        except APIError as e:
            log_api_error(e)
            return AgentResponse.failure(e.message)

        log_api_response(logger, "agent", body)

        response = AgentResponse.from_payload(body)
        if not response.success:
            logger.warning(f"Agent {agent_id} reported failure: {response.error}")
        return response
