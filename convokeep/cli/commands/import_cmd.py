"""Import command - load a ConvoKeep backup into the local store."""

from __future__ import annotations

import asyncio
from pathlib import Path

import click

from convokeep.cli.helpers import fail, load_effective_config
from convokeep.cli.types import AppEnv
from convokeep.errors import BackupError, StoreError
from convokeep.importers import ConversationExtractor, FileBackupSource
from convokeep.storage import ConversationStore


@click.command("import")
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@click.option("--dry-run", is_flag=True, help="Validate and count conversations without storing them")
@click.pass_obj
def import_command(env: AppEnv, path: Path, dry_run: bool) -> None:
    """Import every conversation from the backup at PATH.

    Nothing is stored unless the whole backup is valid.
    """
    config = load_effective_config(env, "import")
    env.ui.info(f"Reading backup file {path.name}...")
    try:
        source = FileBackupSource.for_path(path)
        conversations = asyncio.run(ConversationExtractor().import_backup(source))
    except BackupError as exc:
        fail("import", str(exc))

    if dry_run:
        env.ui.success(f"Backup is valid: {len(conversations)} conversation(s) would be imported.")
        return

    env.ui.info(f"Storing {len(conversations)} conversation(s)...")
    try:
        result = ConversationStore(config.store_path).store_conversations(conversations)
    except StoreError as exc:
        fail("import", str(exc))

    message = f"Successfully imported {len(conversations)} conversation(s)!"
    if result.updated_conversations > 0:
        message += f" ({result.new_conversations} new, {result.updated_conversations} updated)"
    env.ui.success(message)
