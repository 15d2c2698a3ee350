"""Terminal UI facade.

Interactive mode renders with rich and prompts with questionary. Plain mode
prints unstyled lines, suitable for pipes and CI logs.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol

import questionary
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme


class ConsoleLike(Protocol):
    def print(self, *objects: object, **kwargs: object) -> None:
        ...


class PlainConsole:
    """Minimal Console shim for non-interactive mode."""

    def __init__(self, *_: object, **__: object) -> None:
        pass

    def print(self, *objects: object, **_: object) -> None:
        text = " ".join(str(obj) for obj in objects)
        print(text)


@dataclass
class ConsoleFacade:
    plain: bool
    console: ConsoleLike = field(init=False)

    theme: Theme = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.theme = Theme(
            {
                "panel.border": "#3b82f6",
                "summary.bullet": "bold #34d399",
                "summary.text": "#d6dee8",
                "status.icon.error": "bold #ff6b6b",
                "status.icon.success": "bold #34d399",
                "status.icon.info": "bold #38bdf8",
                "status.message": "#e5e7eb",
            }
        )
        if self.plain:
            self.console = PlainConsole()
        else:
            self.console = Console(theme=self.theme)

    def summary(self, title: str, lines: Iterable[str]) -> None:
        """Display a summary panel."""
        lines = list(lines)
        if self.plain:
            self.console.print(f"-- {title} --")
            for line in lines:
                self.console.print(line)
            return

        summary_text = Text()
        for line in lines:
            summary_text.append("• ", style="summary.bullet")
            summary_text.append(line + "\n", style="summary.text")
        panel = Panel(
            summary_text,
            title=f"  {title}  ",
            border_style="panel.border",
            box=box.ROUNDED,
            padding=(1, 2),
        )
        self.console.print(panel)

    def confirm(self, prompt: str, *, default: bool = True) -> bool:
        if self.plain:
            return default
        answer = questionary.confirm(prompt, default=default).ask()
        # ask() returns None when the prompt is interrupted
        return default if answer is None else bool(answer)

    def error(self, message: str) -> None:
        self._status("✗", "status.icon.error", message)

    def success(self, message: str) -> None:
        self._status("✓", "status.icon.success", message)

    def info(self, message: str) -> None:
        if self.plain:
            self.console.print(message)
            return
        self._status("ℹ", "status.icon.info", message)

    def _status(self, icon: str, icon_style: str, message: str) -> None:
        if self.plain:
            self.console.print(f"{icon} {message}")
            return
        text = Text()
        text.append(f"{icon} ", style=icon_style)
        text.append(message, style="status.message")
        self.console.print(text)


def create_console_facade(plain: bool) -> ConsoleFacade:
    return ConsoleFacade(plain=plain)


__all__ = ["ConsoleFacade", "ConsoleLike", "PlainConsole", "create_console_facade"]
