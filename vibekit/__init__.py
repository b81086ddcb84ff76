"""vibekit - run coding agents in remote sandboxes."""

from __future__ import annotations

from vibekit.config import (
    AgentConfig,
    DaytonaConfig,
    E2BConfig,
    EnvironmentConfig,
    GitHubConfig,
    ModelConfig,
    VibeKitConfig,
    load_config,
)
from vibekit.core import GenerateCodeRequest, RunTestsRequest, VibeKit
from vibekit.errors import (
    ConfigurationError,
    MissingGitHubConfigError,
    MissingRequiredOptionError,
    UnsupportedAgentTypeError,
    UnsupportedProviderError,
    VibeKitError,
)
from vibekit.models.agent import (
    AgentResponse,
    ConversationTurn,
    ExecuteCommandOptions,
    PullRequestResponse,
)
from vibekit.streaming import StreamCallbacks

__all__ = [
    "AgentConfig",
    "AgentResponse",
    "ConfigurationError",
    "ConversationTurn",
    "DaytonaConfig",
    "E2BConfig",
    "EnvironmentConfig",
    "ExecuteCommandOptions",
    "GenerateCodeRequest",
    "GitHubConfig",
    "MissingGitHubConfigError",
    "MissingRequiredOptionError",
    "ModelConfig",
    "PullRequestResponse",
    "RunTestsRequest",
    "StreamCallbacks",
    "UnsupportedAgentTypeError",
    "UnsupportedProviderError",
    "VibeKit",
    "VibeKitConfig",
    "VibeKitError",
    "load_config",
]
