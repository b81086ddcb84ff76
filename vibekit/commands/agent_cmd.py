"""CLI handlers for agent commands."""

from __future__ import annotations

import asyncio

import click

from vibekit.config import load_config
from vibekit.core import GenerateCodeRequest, RunTestsRequest, VibeKit
from vibekit.errors import VibeKitError
from vibekit.models.agent import AgentMode, AgentResponse, ExecuteCommandOptions
from vibekit.streaming import StreamCallbacks


def _run(coro):
    """Run an async function from sync context."""
    return asyncio.run(coro)


def _callbacks() -> StreamCallbacks:
    return StreamCallbacks(
        on_update=lambda message: click.echo(message),
        on_error=lambda error: click.echo(f"error: {error}", err=True),
    )


def _kit() -> VibeKit:
    config_path = click.get_current_context().obj.get("config_path")
    try:
        return VibeKit(load_config(config_path))
    except VibeKitError as e:
        raise click.ClickException(str(e)) from e


def _report(response: AgentResponse) -> None:
    if response.stderr:
        click.echo(response.stderr, err=True)
    click.echo(f"sandbox={response.sandbox_id} exit={response.exit_code}")
    if response.exit_code != 0:
        raise SystemExit(response.exit_code)


@click.group("agent")
def agent_group():
    """Run the configured agent in its sandbox."""
    pass


@agent_group.command("generate")
@click.argument("prompt")
@click.option("--mode", type=click.Choice([m.value for m in AgentMode]), default="code")
@click.option("--branch", default=None, help="Branch to check out first")
@click.option("--keep", is_flag=True, help="Keep the sandbox running afterwards")
def agent_generate(prompt: str, mode: str, branch: str | None, keep: bool):
    """Run the agent on PROMPT."""
    kit = _kit()

    async def _go() -> AgentResponse:
        try:
            return await kit.generate_code(GenerateCodeRequest(
                prompt=prompt, mode=mode, branch=branch, callbacks=_callbacks(),
            ))
        finally:
            if not keep:
                await kit.kill()

    _report(_run(_go()))


@agent_group.command("test")
@click.option("--branch", default=None)
def agent_test(branch: str | None):
    """Have the agent install dependencies and run the tests."""
    kit = _kit()

    async def _go() -> AgentResponse:
        try:
            return await kit.run_tests(RunTestsRequest(branch=branch, callbacks=_callbacks()))
        finally:
            await kit.kill()

    _report(_run(_go()))


@agent_group.command("exec")
@click.argument("command")
@click.option("--timeout-ms", type=int, default=None)
@click.option("--no-repo", is_flag=True, help="Run outside the repository checkout")
def agent_exec(command: str, timeout_ms: int | None, no_repo: bool):
    """Run COMMAND in a fresh sandbox."""
    kit = _kit()

    async def _go() -> AgentResponse:
        try:
            return await kit.execute_command(command, ExecuteCommandOptions(
                timeout_ms=timeout_ms,
                use_repo_context=not no_repo,
                callbacks=_callbacks(),
            ))
        finally:
            await kit.kill()

    _report(_run(_go()))


@agent_group.command("pr")
@click.argument("prompt")
def agent_pr(prompt: str):
    """Run the agent on PROMPT and open a pull request with the result."""
    kit = _kit()

    async def _go():
        try:
            response = await kit.generate_code(GenerateCodeRequest(
                prompt=prompt, callbacks=_callbacks(),
            ))
            if response.exit_code != 0:
                return response, None
            return response, await kit.create_pull_request()
        finally:
            await kit.kill()

    try:
        response, pr = _run(_go())
    except VibeKitError as e:
        raise click.ClickException(str(e)) from e
    if pr is None:
        _report(response)
        return
    click.echo(f"Opened #{pr.number}: {pr.html_url} ({pr.branch_name} @ {pr.commit_sha[:7]})")
