"""Sandbox domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SandboxType(str, Enum):
    E2B = "e2b"
    DAYTONA = "daytona"


@dataclass(frozen=True)
class CommandResult:
    """Result of running a command inside a sandbox."""

    exit_code: int
    stdout: str
    stderr: str
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
