"""Agent backend factory/registry."""

from __future__ import annotations

import logging

from vibekit.config import VibeKitConfig
from vibekit.errors import UnsupportedAgentTypeError, UnsupportedProviderError
from vibekit.infra.agents.base import BaseAgent
from vibekit.infra.agents.claude import ClaudeAgent
from vibekit.infra.agents.codex import CodexAgent
from vibekit.infra.agents.opencode import OpenCodeAgent
from vibekit.infra.providers.registry import get_default_model
from vibekit.models.agent import AgentOptions, AgentType
from vibekit.models.provider import ModelProvider

logger = logging.getLogger(__name__)

_AGENTS: dict[AgentType, type[BaseAgent]] = {
    AgentType.CODEX: CodexAgent,
    AgentType.CLAUDE: ClaudeAgent,
    AgentType.OPENCODE: OpenCodeAgent,
}


def resolve_agent_type(agent_type: AgentType | str) -> AgentType:
    """Return the AgentType for a configured tag, or raise naming the tag."""
    try:
        resolved = AgentType(agent_type)
    except ValueError:
        raise UnsupportedAgentTypeError(agent_type) from None
    if resolved not in _AGENTS:
        raise UnsupportedAgentTypeError(resolved.value)
    return resolved


def build_agent_options(config: VibeKitConfig) -> AgentOptions:
    """Normalize a configuration into backend constructor arguments.

    Raises configuration errors only; nothing here touches the network.
    """
    agent_cls = _AGENTS[resolve_agent_type(config.agent.type)]
    model = config.agent.model

    provider_value = model.provider or agent_cls.default_provider
    try:
        provider = ModelProvider(provider_value)
    except ValueError:
        raise UnsupportedProviderError(provider_value) from None

    sandbox_type, sandbox_config = config.environment.selected()
    github = config.github

    return AgentOptions(
        provider_api_key=model.api_key,
        model=model.name or get_default_model(provider),
        provider=provider,
        sandbox_type=sandbox_type,
        sandbox_config=sandbox_config,
        github_token=github.token if github else None,
        repo_url=github.repository if github else None,
        base_url=model.base_url,
    )


def create_agent(config: VibeKitConfig) -> BaseAgent:
    """Construct the agent backend selected by ``config``.

    Construction does not provision a sandbox.
    """
    agent_type = resolve_agent_type(config.agent.type)
    options = build_agent_options(config)
    logger.debug(
        "Creating %s agent (provider=%s, model=%s, sandbox=%s)",
        agent_type.value, ModelProvider(options.provider).value, options.model,
        options.sandbox_type.value,
    )
    return _AGENTS[agent_type](options)
