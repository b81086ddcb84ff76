"""Sandbox protocol definition.

A sandbox is an ephemeral remote Linux environment owned by one agent. The
agent runs its CLI, the test suite, and git commands inside it, and drives
its lifecycle through kill/pause/resume.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from vibekit.models.sandbox import CommandResult

LineHandler = Callable[[str], None]


@runtime_checkable
class Sandbox(Protocol):
    """Abstraction over a remote sandbox environment."""

    @property
    def sandbox_id(self) -> str:
        ...

    async def run(
        self,
        cmd: str,
        *,
        timeout: int | None = None,
        cwd: str | None = None,
        env: dict[str, str] | None = None,
        background: bool = False,
        on_stdout: LineHandler | None = None,
        on_stderr: LineHandler | None = None,
    ) -> CommandResult:
        """Execute a shell command. ``timeout`` is in seconds.

        A non-zero exit is reported in the result, not raised. With
        ``background`` the command is started and an empty result returned.
        """
        ...

    async def kill(self) -> None:
        """Destroy the sandbox."""
        ...

    async def pause(self) -> None:
        """Suspend the sandbox, keeping its filesystem."""
        ...

    async def resume(self) -> None:
        """Wake a paused sandbox."""
        ...


class LineSplitter:
    """Turns output chunks into complete lines for a line handler."""

    def __init__(self, handler: LineHandler | None) -> None:
        self._handler = handler
        self._buffer = ""

    def feed(self, chunk: str) -> None:
        if self._handler is None or not chunk:
            return
        self._buffer += chunk
        while "\n" in self._buffer:
            line, self._buffer = self._buffer.split("\n", 1)
            self._handler(line.rstrip("\r"))

    def flush(self) -> None:
        if self._handler is not None and self._buffer:
            self._handler(self._buffer.rstrip("\r"))
        self._buffer = ""
