"""Tests for config loading."""

from pathlib import Path

import pytest

from vibekit.config import (
    DEFAULT_CONFIG_TOML,
    DaytonaConfig,
    E2BConfig,
    EnvironmentConfig,
    init_config,
    load_config,
)
from vibekit.errors import ConfigurationError
from vibekit.models.sandbox import SandboxType


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("VIBEKIT_AGENT", "OPENAI_API_KEY", "E2B_API_KEY", "GITHUB_TOKEN"):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_load_defaults(self):
        """Loading with no file should return defaults."""
        config = load_config(Path("/nonexistent/config.toml"))
        assert config.agent.type == "codex"
        assert config.agent.model.api_key == ""
        assert config.agent.model.provider is None
        assert config.environment.e2b == E2BConfig(api_key="")
        assert config.environment.daytona is None
        assert config.github is None

    def test_defaults_read_secrets_from_env(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("E2B_API_KEY", "e2b-env")
        config = load_config(Path("/nonexistent/config.toml"))
        assert config.agent.model.api_key == "sk-env"
        assert config.environment.e2b.api_key == "e2b-env"

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            '[agent]\ntype = "claude"\n'
            '[agent.model]\napi_key = "sk-ant"\nname = "claude-opus"\nprovider = "anthropic"\n'
            '[environment.daytona]\napi_key = "dt"\nimage = "node:20"\n'
            '[github]\ntoken = "ghp"\nrepository = "octocat/hello-world"\n'
        )
        config = load_config(path)
        assert config.agent.type == "claude"
        assert config.agent.model.name == "claude-opus"
        assert config.agent.model.provider == "anthropic"
        assert config.environment.selected() == (
            SandboxType.DAYTONA, DaytonaConfig(api_key="dt", image="node:20"),
        )
        assert config.github.token == "ghp"
        assert config.github.repository == "octocat/hello-world"

    def test_inline_value_wins_over_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "from-env")
        path = tmp_path / "config.toml"
        path.write_text('[agent.model]\napi_key = "inline"\napi_key_env = "OPENAI_API_KEY"\n')
        assert load_config(path).agent.model.api_key == "inline"

    def test_agent_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("VIBEKIT_AGENT", "opencode")
        config = load_config(Path("/nonexistent/config.toml"))
        assert config.agent.type == "opencode"

    def test_github_needs_token_and_repository(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "ghp")
        # Default file has an empty repository.
        assert load_config(Path("/nonexistent/config.toml")).github is None


class TestEnvironmentConfig:
    def test_none_selected(self):
        with pytest.raises(ConfigurationError, match="No sandbox environment configured"):
            EnvironmentConfig().selected()

    def test_both_selected(self):
        env = EnvironmentConfig(e2b=E2BConfig(api_key="e"), daytona=DaytonaConfig(api_key="d"))
        with pytest.raises(ConfigurationError, match="Only one sandbox environment"):
            env.selected()

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            EnvironmentConfig().selected()


class TestInitConfig:
    def test_init_config(self, tmp_path):
        path = init_config(tmp_path / "nested" / "config.toml")
        assert path.exists()
        assert path.read_text() == DEFAULT_CONFIG_TOML
        assert load_config(path).agent.type == "codex"
