"""Codex CLI agent backend."""

from __future__ import annotations

from vibekit.infra.agents.base import BaseAgent
from vibekit.models.agent import AgentType, CodexResponse, CommandSpec, StartParams
from vibekit.models.provider import ModelProvider


class CodexAgent(BaseAgent):
    """Backend for the Codex CLI agent.

    Generates commands like:
        codex exec --full-auto --skip-git-repo-check [--model MODEL] PROMPT
    """

    agent_type = AgentType.CODEX
    default_provider = ModelProvider.OPENAI
    response_cls = CodexResponse

    def sandbox_env(self) -> dict[str, str]:
        return {"OPENAI_API_KEY": self.options.provider_api_key}

    def start_command(self, params: StartParams) -> CommandSpec:
        args: list[str] = ["exec", "--full-auto", "--skip-git-repo-check"]

        if params.model:
            args.extend(["--model", params.model])

        args.append(params.prompt)

        return CommandSpec(
            program="codex",
            args=tuple(args),
            env=dict(params.env_vars) if params.env_vars else None,
            cwd=params.workspace_path or None,
        )
