from __future__ import annotations

import sys
from typing import Iterable, Set

from .facade import ConsoleFacade, ConsoleLike, PlainConsole, create_console_facade

__all__ = [
    "UI",
    "create_ui",
    "ConsoleFacade",
    "ConsoleLike",
    "PlainConsole",
]


class UI:
    """High-level UI abstraction delegating to a console facade."""

    def __init__(self, plain: bool) -> None:
        self._facade: ConsoleFacade = create_console_facade(plain)
        self._plain_warnings: Set[str] = set()

    @property
    def plain(self) -> bool:
        return self._facade.plain

    @property
    def console(self) -> ConsoleLike:
        return self._facade.console

    @console.setter
    def console(self, value: ConsoleLike) -> None:
        self._facade.console = value

    # Presentation helpers -------------------------------------------------
    def summary(self, title: str, lines: Iterable[str]) -> None:
        self._facade.summary(title, lines)

    def info(self, message: str) -> None:
        self._facade.info(message)

    def success(self, message: str) -> None:
        self._facade.success(message)

    def error(self, message: str) -> None:
        self._facade.error(message)

    # Prompting ------------------------------------------------------------
    def confirm(self, prompt: str, *, default: bool = True) -> bool:
        if self.plain:
            if not sys.stdin.isatty():
                self._abort_plain_prompt("confirmation prompts")
            try:
                response = input(f"{prompt} [{'Y/n' if default else 'y/N'}]: ").strip()
            except EOFError:
                return default
            if not response:
                return default
            return response.lower() in {"y", "yes"}
        return self._facade.confirm(prompt, default=default)

    def _warn_plain(self, topic: str) -> None:
        if topic in self._plain_warnings:
            return
        self._plain_warnings.add(topic)
        sys.stderr.write(f"Plain mode cannot prompt for {topic}; rerun with --yes or from a TTY.\n")

    def _abort_plain_prompt(self, topic: str) -> None:
        self._warn_plain(topic)
        raise SystemExit(1)


def create_ui(plain: bool) -> UI:
    return UI(plain=plain)
