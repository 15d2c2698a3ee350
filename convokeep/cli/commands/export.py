"""Export command - write the store out as a ConvoKeep backup."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from convokeep.cli.helpers import fail, load_effective_config
from convokeep.cli.types import AppEnv
from convokeep.errors import ExportError, StoreError
from convokeep.export import write_backup
from convokeep.storage import ConversationStore


@click.command("export")
@click.option("--out", type=click.Path(path_type=Path), help="Backup file or directory (default: export_dir)")
@click.option("--compact", is_flag=True, help="Write compact JSON instead of indented JSON")
@click.pass_obj
def export_command(env: AppEnv, out: Optional[Path], compact: bool) -> None:
    """Export all stored conversations."""
    config = load_effective_config(env, "export")
    try:
        conversations = ConversationStore(config.store_path).list_conversations()
        result = write_backup(
            conversations,
            out or config.export_dir,
            pretty=config.pretty_export and not compact,
        )
    except (ExportError, StoreError) as exc:
        fail("export", str(exc))
    env.ui.success(f"Exported {result.conversation_count} conversation(s) to {result.path}")
