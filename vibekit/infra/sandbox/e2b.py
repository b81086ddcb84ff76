"""E2B sandbox backend using the e2b code interpreter SDK."""

from __future__ import annotations

import logging
import time
from typing import Any

from e2b_code_interpreter import AsyncSandbox

from vibekit.config import E2BConfig
from vibekit.infra.sandbox.base import LineHandler, LineSplitter
from vibekit.models.sandbox import CommandResult

logger = logging.getLogger(__name__)

DEFAULT_COMMAND_TIMEOUT = 3600
SANDBOX_TIMEOUT = 3600


class E2BSandbox:
    """Sandbox implementation backed by E2B."""

    def __init__(self, inner: Any, config: E2BConfig) -> None:
        self._inner = inner
        self._config = config

    @property
    def sandbox_id(self) -> str:
        return self._inner.sandbox_id

    @classmethod
    async def create(
        cls, config: E2BConfig, envs: dict[str, str] | None = None
    ) -> E2BSandbox:
        """Create a sandbox from ``config.template_id`` or the provider default."""
        kwargs: dict[str, Any] = {"api_key": config.api_key, "timeout": SANDBOX_TIMEOUT}
        if config.template_id:
            kwargs["template"] = config.template_id
        if envs:
            kwargs["envs"] = envs
        inner = await AsyncSandbox.create(**kwargs)
        logger.info(
            "E2B sandbox created: id=%s template=%s",
            inner.sandbox_id, config.template_id or "<provider-default>",
        )
        return cls(inner, config)

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
        stdout_lines = LineSplitter(on_stdout)
        stderr_lines = LineSplitter(on_stderr)

        t0 = time.monotonic()
        try:
            result = await self._inner.commands.run(
                cmd,
                background=background,
                envs=env,
                cwd=cwd,
                timeout=DEFAULT_COMMAND_TIMEOUT if timeout is None else timeout,
                on_stdout=stdout_lines.feed,
                on_stderr=stderr_lines.feed,
            )
        except Exception as error:
            # e2b raises CommandExitException on non-zero command exits.
            if (
                hasattr(error, "exit_code")
                and hasattr(error, "stdout")
                and hasattr(error, "stderr")
            ):
                result = error
            else:
                raise
        stdout_lines.flush()
        stderr_lines.flush()

        if background:
            return CommandResult(exit_code=0, stdout="", stderr="")

        exit_code = getattr(result, "exit_code", None)
        command_result = CommandResult(
            exit_code=exit_code if isinstance(exit_code, int) else 0,
            stdout=getattr(result, "stdout", "") or "",
            stderr=getattr(result, "stderr", "") or "",
            duration_ms=int((time.monotonic() - t0) * 1000),
        )
        if not command_result.ok:
            logger.debug("Command failed exit=%d cmd=%s", command_result.exit_code, cmd[:100])
        return command_result

    async def kill(self) -> None:
        await self._inner.kill()
        logger.info("E2B sandbox %s killed", self.sandbox_id)

    async def pause(self) -> None:
        await self._inner.beta_pause()
        logger.info("E2B sandbox %s paused", self.sandbox_id)

    async def resume(self) -> None:
        self._inner = await AsyncSandbox.connect(
            self.sandbox_id, api_key=self._config.api_key
        )
        logger.info("E2B sandbox %s resumed", self.sandbox_id)
