"""Claude Code CLI agent backend."""

from __future__ import annotations

from vibekit.infra.agents.base import BaseAgent
from vibekit.models.agent import AgentType, ClaudeResponse, CommandSpec, StartParams
from vibekit.models.provider import ModelProvider


class ClaudeAgent(BaseAgent):
    """Backend for the Claude Code CLI agent.

    Generates commands like:
        claude -p PROMPT --output-format stream-json --verbose
               --permission-mode bypassPermissions [--model MODEL]
    """

    agent_type = AgentType.CLAUDE
    default_provider = ModelProvider.ANTHROPIC
    response_cls = ClaudeResponse

    def sandbox_env(self) -> dict[str, str]:
        return {"ANTHROPIC_API_KEY": self.options.provider_api_key}

    def start_command(self, params: StartParams) -> CommandSpec:
        args: list[str] = [
            "-p", params.prompt,
            "--output-format", "stream-json",
            "--verbose",
            "--permission-mode", "bypassPermissions",
        ]

        if params.model:
            args.extend(["--model", params.model])

        return CommandSpec(
            program="claude",
            args=tuple(args),
            env=dict(params.env_vars) if params.env_vars else None,
            cwd=params.workspace_path or None,
        )
