"""Configuration: dataclasses plus TOML file loading with environment overlay."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]

from vibekit.errors import ConfigurationError
from vibekit.models.agent import AgentType
from vibekit.models.provider import ModelProvider
from vibekit.models.sandbox import SandboxType

DEFAULT_CONFIG_DIR = Path.home() / ".config" / "vibekit"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"

DEFAULT_CONFIG_TOML = """\
[agent]
type = "codex"

[agent.model]
name = ""
api_key_env = "OPENAI_API_KEY"
# provider = "openai"
# base_url = ""

[environment.e2b]
api_key_env = "E2B_API_KEY"
template_id = ""

# [environment.daytona]
# api_key_env = "DAYTONA_API_KEY"
# image = ""
# server_url = "https://app.daytona.io/api"

[github]
token_env = "GITHUB_TOKEN"
repository = ""
"""


@dataclass(frozen=True)
class ModelConfig:
    api_key: str
    name: str = ""
    provider: ModelProvider | str | None = None
    base_url: str = ""


@dataclass(frozen=True)
class AgentConfig:
    type: AgentType | str
    model: ModelConfig


@dataclass(frozen=True)
class E2BConfig:
    api_key: str
    template_id: str = ""


@dataclass(frozen=True)
class DaytonaConfig:
    api_key: str
    image: str = ""
    server_url: str = ""


@dataclass(frozen=True)
class EnvironmentConfig:
    """Sandbox backend selection. Exactly one variant must be set."""

    e2b: E2BConfig | None = None
    daytona: DaytonaConfig | None = None

    def selected(self) -> tuple[SandboxType, E2BConfig | DaytonaConfig]:
        """Return the single configured sandbox backend and its options."""
        chosen = [
            (sandbox_type, options)
            for sandbox_type, options in (
                (SandboxType.E2B, self.e2b),
                (SandboxType.DAYTONA, self.daytona),
            )
            if options is not None
        ]
        if not chosen:
            raise ConfigurationError(
                "No sandbox environment configured. Provide exactly one of: "
                + ", ".join(t.value for t in SandboxType)
            )
        if len(chosen) > 1:
            names = ", ".join(t.value for t, _ in chosen)
            raise ConfigurationError(
                f"Only one sandbox environment may be configured, got: {names}"
            )
        return chosen[0]


@dataclass(frozen=True)
class GitHubConfig:
    token: str
    repository: str


@dataclass(frozen=True)
class VibeKitConfig:
    agent: AgentConfig
    environment: EnvironmentConfig
    github: GitHubConfig | None = None


def _secret(data: dict, key: str) -> str:
    """Return ``data[key]``, or the value of the env var named by ``<key>_env``."""
    if value := data.get(key):
        return value
    env_name = data.get(f"{key}_env", "")
    return os.environ.get(env_name, "") if env_name else ""


def _parse_environment(raw: dict) -> EnvironmentConfig:
    e2b_raw = raw.get("e2b")
    daytona_raw = raw.get("daytona")
    return EnvironmentConfig(
        e2b=E2BConfig(
            api_key=_secret(e2b_raw, "api_key"),
            template_id=e2b_raw.get("template_id", ""),
        ) if e2b_raw is not None else None,
        daytona=DaytonaConfig(
            api_key=_secret(daytona_raw, "api_key"),
            image=daytona_raw.get("image", ""),
            server_url=daytona_raw.get("server_url", ""),
        ) if daytona_raw is not None else None,
    )


def _parse_github(raw: dict) -> GitHubConfig | None:
    token = _secret(raw, "token")
    repository = raw.get("repository", "")
    if not token or not repository:
        return None
    return GitHubConfig(token=token, repository=repository)


def load_config(config_path: Path | None = None) -> VibeKitConfig:
    """Load configuration from TOML file with env var overlay."""
    path = config_path or DEFAULT_CONFIG_PATH

    if path.exists():
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    else:
        raw = tomllib.loads(DEFAULT_CONFIG_TOML)

    agent_raw = raw.get("agent", {})
    model_raw = agent_raw.get("model", {})

    return VibeKitConfig(
        agent=AgentConfig(
            type=os.environ.get("VIBEKIT_AGENT") or agent_raw.get("type", "codex"),
            model=ModelConfig(
                api_key=_secret(model_raw, "api_key"),
                name=model_raw.get("name", ""),
                provider=model_raw.get("provider") or None,
                base_url=model_raw.get("base_url", ""),
            ),
        ),
        environment=_parse_environment(raw.get("environment", {})),
        github=_parse_github(raw.get("github", {})),
    )


def init_config(config_path: Path | None = None) -> Path:
    """Create default config file."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CONFIG_TOML)
    return path
