"""VibeKit: the single entry point for running a coding agent in a sandbox.

A ``VibeKit`` instance is bound to one configuration and, once first used,
to exactly one agent backend. Configuration problems are reported from the
constructor; everything the agent reports afterwards is passed through as-is.

Concurrent calls against one instance are not serialized. Issuing, say,
``generate_code`` and ``kill`` at the same time has no defined ordering.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from vibekit.config import ModelConfig, VibeKitConfig
from vibekit.errors import MissingGitHubConfigError
from vibekit.infra.agents.registry import build_agent_options, create_agent, resolve_agent_type
from vibekit.models.agent import (
    AgentMode,
    AgentResponse,
    ConversationTurn,
    ExecuteCommandOptions,
    PullRequestResponse,
)
from vibekit.services import metadata_service
from vibekit.streaming import StreamCallbacks, wrap_callbacks

if TYPE_CHECKING:
    from vibekit.infra.agents.base import BaseAgent
    from vibekit.models.provider import CommitMessage, PRMetadata

logger = logging.getLogger(__name__)


def _build(given, cls, fields: dict):
    """Return ``given``, or ``cls(**fields)``. Passing both is an error."""
    if given is None:
        return cls(**fields)
    if fields:
        raise TypeError(
            f"Pass either a {cls.__name__} or keyword fields, not both "
            f"(got {', '.join(sorted(fields))})"
        )
    return given


@dataclass(frozen=True)
class GenerateCodeRequest:
    prompt: str
    mode: AgentMode | str = AgentMode.CODE
    branch: str | None = None
    history: Sequence[ConversationTurn] = field(default_factory=list)
    callbacks: StreamCallbacks | None = None
    background: bool = False


@dataclass(frozen=True)
class RunTestsRequest:
    branch: str | None = None
    history: Sequence[ConversationTurn] | None = None
    callbacks: StreamCallbacks | None = None


class VibeKit:
    """Orchestration facade over one lazily-created agent backend."""

    def __init__(self, config: VibeKitConfig) -> None:
        self.config = config
        self.agent_type = resolve_agent_type(config.agent.type)
        # Surfaces environment and provider errors before any sandbox exists.
        self._options = build_agent_options(config)
        self._agent: BaseAgent | None = None
        self._agent_lock = threading.Lock()

    @property
    def agent(self) -> BaseAgent:
        """The agent backend, constructed on first access and kept for life."""
        if self._agent is None:
            with self._agent_lock:
                if self._agent is None:
                    self._agent = create_agent(self.config)
                    logger.debug("Bound %s agent", self.agent_type.value)
        return self._agent

    @property
    def model_config(self) -> ModelConfig:
        return ModelConfig(
            api_key=self._options.provider_api_key,
            name=self._options.model,
            provider=self._options.provider,
            base_url=self._options.base_url,
        )

    async def generate_code(
        self, request: GenerateCodeRequest | None = None, **fields
    ) -> AgentResponse:
        """Run the agent on a prompt.

        Accepts a ``GenerateCodeRequest`` or its fields as keyword arguments.
        """
        request = _build(request, GenerateCodeRequest, fields)
        adapter = wrap_callbacks(request.callbacks)
        try:
            return await self.agent.generate_code(
                request.prompt,
                request.mode,
                request.branch or None,
                request.history,
                adapter,
                request.background,
            )
        finally:
            if adapter:
                adapter.close()

    async def create_pull_request(self) -> PullRequestResponse:
        """Open a pull request with the sandbox's changes."""
        if self.config.github is None:
            raise MissingGitHubConfigError()
        return await self.agent.create_pull_request()

    async def run_tests(
        self, request: RunTestsRequest | None = None, **fields
    ) -> AgentResponse:
        """Have the agent run the test suite. Failing exit codes are returned, not raised."""
        request = _build(request, RunTestsRequest, fields)
        adapter = wrap_callbacks(request.callbacks)
        try:
            return await self.agent.run_tests(
                request.branch or None,
                request.history,
                adapter,
            )
        finally:
            if adapter:
                adapter.close()

    async def execute_command(
        self, command: str, options: ExecuteCommandOptions | None = None, **fields
    ) -> AgentResponse:
        """Run a shell command in the sandbox. ``timeout_ms`` is forwarded untouched."""
        options = _build(options, ExecuteCommandOptions, fields)
        adapter = wrap_callbacks(options.callbacks)
        try:
            return await self.agent.execute_command(command, replace(options, callbacks=adapter))
        finally:
            if adapter:
                adapter.close()

    async def kill(self) -> None:
        await self.agent.kill_sandbox()

    async def pause(self) -> None:
        await self.agent.pause_sandbox()

    async def resume(self) -> None:
        await self.agent.resume_sandbox()

    async def generate_pr_metadata(self, patch: str, prompt: str) -> PRMetadata:
        return await metadata_service.generate_pr_metadata(patch, self.model_config, prompt)

    async def generate_commit_message(self, patch: str, prompt: str) -> CommitMessage:
        return await metadata_service.generate_commit_message(patch, self.model_config, prompt)
