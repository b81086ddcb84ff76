"""Click CLI definitions - main entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from vibekit.commands.agent_cmd import agent_group
from vibekit.commands.config_cmd import config_group


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="VIBEKIT_CONFIG",
    default=None,
    help="Config file (default: ~/.config/vibekit/config.toml)",
)
@click.pass_context
def cli(ctx, debug: bool, config_path: Path | None) -> None:
    """vibekit - run coding agents in remote sandboxes."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = config_path


cli.add_command(agent_group, "agent")
cli.add_command(config_group, "config")


if __name__ == "__main__":
    cli()
