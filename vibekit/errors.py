"""Error types raised by vibekit itself.

Only configuration problems are detected here. Errors reported by agents,
sandboxes and model vendors propagate unchanged.
"""

from __future__ import annotations


class VibeKitError(Exception):
    """Base class for vibekit errors."""


class ConfigurationError(VibeKitError, ValueError):
    """The configuration cannot be used as given."""


class UnsupportedAgentTypeError(ConfigurationError):
    def __init__(self, agent_type: object) -> None:
        self.agent_type = agent_type
        super().__init__(f"Unsupported agent type: {agent_type}")


class UnsupportedProviderError(ConfigurationError):
    def __init__(self, provider: object) -> None:
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider}")


class MissingRequiredOptionError(ConfigurationError):
    """A mandatory option for the selected backend is absent."""


class MissingGitHubConfigError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__(
            "GitHub configuration is required for creating pull requests. "
            "Please provide githubToken and repoUrl in your configuration."
        )


class SandboxError(VibeKitError, RuntimeError):
    """A sandbox driver could not talk to its service."""
