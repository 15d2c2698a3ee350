"""Validate command - check a backup file without importing it."""

from __future__ import annotations

import asyncio
from pathlib import Path

import click

from convokeep.cli.helpers import fail
from convokeep.cli.types import AppEnv
from convokeep.errors import BackupError
from convokeep.importers import DocumentLoader, FileBackupSource, is_native_backup
from convokeep.lib.json import dumps
from convokeep.validation import SchemaValidator


@click.command("validate")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@click.option("--json", "json_output", is_flag=True, help="Print the validation report as JSON")
@click.pass_obj
def validate_command(env: AppEnv, path: Path, json_output: bool) -> None:
    """Check PATH against the ConvoKeep backup schema and list every problem."""
    try:
        source = FileBackupSource.for_path(path)
        document = asyncio.run(DocumentLoader().load(source))
    except BackupError as exc:
        fail("validate", str(exc))

    report = SchemaValidator().validate(document)

    if json_output:
        click.echo(dumps(report.to_dict(), pretty=True))
    elif report.is_valid:
        env.ui.success(
            f"Valid ConvoKeep backup: {report.conversation_count} conversation(s), version {report.version}"
        )
    else:
        lines = list(report.errors)
        if not is_native_backup(document):
            lines.append("This does not appear to be a ConvoKeep backup.")
        env.ui.summary(f"{len(report.errors)} problem(s) in {path.name}", lines)

    if not report.is_valid:
        raise SystemExit(1)
