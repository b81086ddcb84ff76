"""OpenCode CLI agent backend."""

from __future__ import annotations

from vibekit.infra.agents.base import BaseAgent
from vibekit.models.agent import AgentType, CommandSpec, OpenCodeResponse, StartParams
from vibekit.models.provider import ModelProvider


class OpenCodeAgent(BaseAgent):
    """Backend for the OpenCode CLI agent, which can drive any configured vendor.

    Generates commands like:
        opencode run [--model PROVIDER/MODEL] PROMPT
    """

    agent_type = AgentType.OPENCODE
    default_provider = ModelProvider.ANTHROPIC
    response_cls = OpenCodeResponse

    @property
    def provider_name(self) -> str:
        return ModelProvider(self.options.provider).value

    def sandbox_env(self) -> dict[str, str]:
        return {f"{self.provider_name.upper()}_API_KEY": self.options.provider_api_key}

    def start_command(self, params: StartParams) -> CommandSpec:
        args: list[str] = ["run"]

        if params.model:
            args.extend(["--model", f"{self.provider_name}/{params.model}"])

        args.append(params.prompt)

        return CommandSpec(
            program="opencode",
            args=tuple(args),
            env=dict(params.env_vars) if params.env_vars else None,
            cwd=params.workspace_path or None,
        )
