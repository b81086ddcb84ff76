"""CLI handlers for config commands."""

from __future__ import annotations

import click

from vibekit.config import init_config, load_config
from vibekit.errors import ConfigurationError


def _key_status(value: str) -> str:
    return "configured" if value else "not set"


@click.group("config")
def config_group():
    """Manage configuration."""
    pass


@config_group.command("init")
@click.pass_context
def config_init(ctx):
    """Create default configuration file."""
    path = init_config(ctx.obj.get("config_path"))
    click.echo(f"Configuration created at: {path}")


@config_group.command("show")
@click.pass_context
def config_show(ctx):
    """Show current configuration. Secrets are never printed."""
    config = load_config(ctx.obj.get("config_path"))
    model = config.agent.model
    click.echo(f"  Agent: {getattr(config.agent.type, 'value', config.agent.type)}")
    click.echo(f"  Model: {model.name or '<default>'} (provider={model.provider or '<agent default>'})")
    click.echo(f"  Model key: {_key_status(model.api_key)}")

    try:
        sandbox_type, options = config.environment.selected()
    except ConfigurationError as e:
        click.echo(f"  Sandbox: invalid ({e})")
    else:
        click.echo(f"  Sandbox: {sandbox_type.value}, key={_key_status(options.api_key)}")

    if config.github:
        click.echo(f"  GitHub: {config.github.repository}")
    else:
        click.echo("  GitHub: not configured (pull requests disabled)")
