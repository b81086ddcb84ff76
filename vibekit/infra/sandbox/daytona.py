"""Daytona sandbox backend using the Daytona REST API over httpx."""

from __future__ import annotations

import logging
import shlex
import time

import httpx

from vibekit.config import DaytonaConfig
from vibekit.errors import SandboxError
from vibekit.infra.sandbox.base import LineHandler, LineSplitter
from vibekit.models.sandbox import CommandResult

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "https://app.daytona.io/api"
DEFAULT_COMMAND_TIMEOUT = 3600
REQUEST_TIMEOUT = 60.0


def _client(config: DaytonaConfig, timeout: float = REQUEST_TIMEOUT) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=(config.server_url or DEFAULT_SERVER_URL).rstrip("/"),
        headers={
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
        },
        timeout=timeout,
    )


def _check(response: httpx.Response, action: str) -> None:
    if response.is_error:
        raise SandboxError(
            f"Daytona {action} failed ({response.status_code}): {response.text.strip()}"
        )


class DaytonaSandbox:
    """Sandbox implementation backed by a Daytona server.

    Daytona returns combined output once a command finishes, so line
    handlers are fed after completion and ``stderr`` is always empty.
    """

    def __init__(self, sandbox_id: str, config: DaytonaConfig) -> None:
        self._sandbox_id = sandbox_id
        self._config = config

    @property
    def sandbox_id(self) -> str:
        return self._sandbox_id

    @classmethod
    async def create(
        cls, config: DaytonaConfig, envs: dict[str, str] | None = None
    ) -> DaytonaSandbox:
        payload: dict = {"env": envs or {}}
        if config.image:
            payload["image"] = config.image
        async with _client(config) as client:
            response = await client.post("/sandbox", json=payload)
        _check(response, "sandbox creation")
        sandbox_id = response.json()["id"]
        logger.info(
            "Daytona sandbox created: id=%s image=%s",
            sandbox_id, config.image or "<server-default>",
        )
        return cls(sandbox_id, config)

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
        if env:
            exports = " ".join(f"{k}={shlex.quote(v)}" for k, v in env.items())
            cmd = f"export {exports} && {cmd}"
        if background:
            cmd = f"nohup sh -c {shlex.quote(cmd)} > /tmp/vibekit-background.log 2>&1 &"

        if timeout is None:
            timeout = DEFAULT_COMMAND_TIMEOUT
        payload: dict = {"command": f"sh -c {shlex.quote(cmd)}", "timeout": timeout}
        if cwd:
            payload["cwd"] = cwd

        t0 = time.monotonic()
        async with _client(self._config, timeout=timeout + REQUEST_TIMEOUT) as client:
            response = await client.post(
                f"/toolbox/{self._sandbox_id}/toolbox/process/execute", json=payload
            )
        _check(response, "command execution")
        data = response.json()

        output = data.get("result", "") or ""
        lines = LineSplitter(on_stdout)
        lines.feed(output)
        lines.flush()

        return CommandResult(
            exit_code=int(data.get("exitCode", 0)),
            stdout=output,
            stderr="",
            duration_ms=int((time.monotonic() - t0) * 1000),
        )

    async def kill(self) -> None:
        async with _client(self._config) as client:
            response = await client.delete(
                f"/sandbox/{self._sandbox_id}", params={"force": "true"}
            )
        _check(response, "sandbox deletion")
        logger.info("Daytona sandbox %s killed", self._sandbox_id)

    async def pause(self) -> None:
        async with _client(self._config) as client:
            response = await client.post(f"/sandbox/{self._sandbox_id}/stop")
        _check(response, "sandbox stop")
        logger.info("Daytona sandbox %s paused", self._sandbox_id)

    async def resume(self) -> None:
        async with _client(self._config) as client:
            response = await client.post(f"/sandbox/{self._sandbox_id}/start")
        _check(response, "sandbox start")
        logger.info("Daytona sandbox %s resumed", self._sandbox_id)
