"""Agent domain models."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from vibekit.models.provider import ModelProvider
from vibekit.models.sandbox import SandboxType

if TYPE_CHECKING:
    from vibekit.config import DaytonaConfig, E2BConfig
    from vibekit.streaming import StreamCallbacks


class AgentType(str, Enum):
    CODEX = "codex"
    CLAUDE = "claude"
    OPENCODE = "opencode"


class AgentMode(str, Enum):
    CODE = "code"
    ASK = "ask"


@dataclass(frozen=True)
class ConversationTurn:
    """A single message of the conversation threaded through agent calls."""

    role: str  # "user", "assistant"
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class CommandSpec:
    """Specification for launching an agent CLI inside a sandbox."""

    program: str
    args: tuple[str, ...] = ()
    env: dict[str, str] | None = None
    cwd: str | None = None

    @property
    def full_command(self) -> str:
        """Return the full command string for shell execution."""
        parts = [self.program, *self.args]
        return " ".join(shlex.quote(p) for p in parts)


@dataclass(frozen=True)
class StartParams:
    """Parameters for starting an agent CLI run inside a sandbox."""

    prompt: str = ""
    model: str = ""
    workspace_path: str = ""
    env_vars: dict[str, str] | None = None


@dataclass(frozen=True)
class AgentResponse:
    """Outcome of an agent call. Exit code and stderr are relayed as-is."""

    exit_code: int
    stdout: str
    stderr: str
    sandbox_id: str


@dataclass(frozen=True)
class CodexResponse(AgentResponse):
    pass


@dataclass(frozen=True)
class ClaudeResponse(AgentResponse):
    pass


@dataclass(frozen=True)
class OpenCodeResponse(AgentResponse):
    pass


AnyAgentResponse = Union[CodexResponse, ClaudeResponse, OpenCodeResponse]


@dataclass(frozen=True)
class PullRequestResponse:
    html_url: str
    number: int
    branch_name: str
    commit_sha: str


@dataclass(frozen=True)
class ExecuteCommandOptions:
    """Options for running an arbitrary command in the agent's sandbox.

    ``timeout_ms`` is handed to the sandbox driver; vibekit does not enforce it.
    """

    timeout_ms: int | None = None
    background: bool = False
    use_repo_context: bool = True
    callbacks: StreamCallbacks | None = None


@dataclass(frozen=True)
class AgentOptions:
    """Normalized constructor arguments shared by every agent backend."""

    provider_api_key: str
    model: str
    provider: ModelProvider | str
    sandbox_type: SandboxType
    sandbox_config: E2BConfig | DaytonaConfig
    github_token: str | None = None
    repo_url: str | None = None
    base_url: str = ""
