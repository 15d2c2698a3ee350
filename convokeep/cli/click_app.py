"""CLI entrypoint."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from convokeep import __version__
from convokeep.core.log import configure_logging
from convokeep.ui import create_ui

from .commands import export_command, import_command, reset_command, validate_command
from .helpers import should_use_plain
from .types import AppEnv


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Config file (default: $CONVOKEEP_CONFIG or ~/.config/convokeep/config.json)",
)
@click.option("--plain", is_flag=True, help="Disable styled output and interactive prompts")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
@click.version_option(__version__, prog_name="convokeep")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], plain: bool, verbose: bool, json_logs: bool) -> None:
    """Validate, import, export, and reset ConvoKeep conversation backups."""
    configure_logging(verbose=verbose, json_logs=json_logs)
    ctx.obj = AppEnv(ui=create_ui(should_use_plain(plain=plain)), config_path=config_path)


cli.add_command(validate_command)
cli.add_command(import_command)
cli.add_command(export_command)
cli.add_command(reset_command)


def main() -> None:
    cli()


__all__ = ["cli", "main"]
