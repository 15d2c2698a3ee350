"""Clearing the local conversation store.

Only one reset may be in flight at a time. The guard is taken before the
confirmation prompt, so a second request cannot stack another prompt, and
it is released on every exit path.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from .core.log import get_logger

logger = get_logger(__name__)

CONFIRM_PROMPT = "Are you sure you want to clear all stored data? This cannot be undone."

_RESET_LOCK = threading.Lock()


class ClearableStore(Protocol):
    def clear(self) -> None:
        ...


class ResetReporter(Protocol):
    def info(self, message: str) -> None:
        ...

    def success(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


@dataclass
class ResetCallbacks:
    on_before_reset: Optional[Callable[[], None]] = None
    on_after_reset: Optional[Callable[[], None]] = None
    on_cancel: Optional[Callable[[], None]] = None
    on_error: Optional[Callable[[Exception], None]] = None


@contextmanager
def reset_guard() -> Iterator[bool]:
    """Yield True if this caller holds the reset guard, False if another reset is running."""
    acquired = _RESET_LOCK.acquire(blocking=False)
    try:
        yield acquired
    finally:
        if acquired:
            _RESET_LOCK.release()


def reset_in_progress() -> bool:
    return _RESET_LOCK.locked()


def reset_store(
    store: ClearableStore,
    *,
    confirm: Callable[[str], bool],
    reporter: ResetReporter,
    callbacks: Optional[ResetCallbacks] = None,
) -> bool:
    """Ask for confirmation, then clear ``store``.

    Returns True only when the store was cleared and every hook ran.
    Anything raised after confirmation is reported and passed to
    ``on_error``.
    """
    hooks = callbacks or ResetCallbacks()
    with reset_guard() as acquired:
        if not acquired:
            logger.info("reset_skipped", reason="already_running")
            return False

        if not confirm(CONFIRM_PROMPT):
            logger.info("reset_cancelled")
            if hooks.on_cancel:
                hooks.on_cancel()
            return False

        reporter.info("Clearing database...")
        try:
            if hooks.on_before_reset:
                hooks.on_before_reset()
            store.clear()
            reporter.success("Database cleared successfully!")
            if hooks.on_after_reset:
                hooks.on_after_reset()
        except Exception as exc:
            logger.error("reset_failed", error=str(exc), error_type=type(exc).__name__)
            reporter.error(f"Error: {exc}")
            if hooks.on_error:
                hooks.on_error(exc)
            return False
        return True


__all__ = [
    "CONFIRM_PROMPT",
    "ClearableStore",
    "ResetCallbacks",
    "ResetReporter",
    "reset_guard",
    "reset_in_progress",
    "reset_store",
]
