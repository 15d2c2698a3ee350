"""Reset command for clearing the conversation store."""

from __future__ import annotations

import click

from convokeep.cli.helpers import load_effective_config
from convokeep.cli.types import AppEnv
from convokeep.reset import ResetCallbacks, reset_store
from convokeep.storage import ConversationStore


@click.command("reset")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_obj
def reset_command(env: AppEnv, yes: bool) -> None:
    """Delete every stored conversation."""
    config = load_effective_config(env, "reset")
    failures: list[Exception] = []

    def _confirm(prompt: str) -> bool:
        if yes:
            return True
        return env.ui.confirm(prompt, default=False)

    cleared = reset_store(
        ConversationStore(config.store_path),
        confirm=_confirm,
        reporter=env.ui,
        callbacks=ResetCallbacks(
            on_cancel=lambda: env.ui.info("Reset cancelled."),
            on_error=failures.append,
        ),
    )
    if failures or (not cleared and yes):
        raise SystemExit(1)
