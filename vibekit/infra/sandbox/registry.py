"""Sandbox backend factory/registry."""

from __future__ import annotations

from vibekit.config import DaytonaConfig, E2BConfig
from vibekit.infra.sandbox.base import Sandbox
from vibekit.infra.sandbox.daytona import DaytonaSandbox
from vibekit.infra.sandbox.e2b import E2BSandbox
from vibekit.models.sandbox import SandboxType

_BACKENDS: dict[SandboxType, type] = {
    SandboxType.E2B: E2BSandbox,
    SandboxType.DAYTONA: DaytonaSandbox,
}


def _backend(sandbox_type: SandboxType | str) -> type:
    sandbox_type = SandboxType(sandbox_type)
    cls = _BACKENDS.get(sandbox_type)
    if cls is None:
        raise ValueError(f"Unknown sandbox provider: {sandbox_type}")
    return cls


async def create_sandbox(
    sandbox_type: SandboxType | str,
    options: E2BConfig | DaytonaConfig,
    envs: dict[str, str] | None = None,
) -> Sandbox:
    """Provision a new sandbox on the selected backend."""
    return await _backend(sandbox_type).create(options, envs=envs)
