"""Rich UI components for the CLI.

Keeps visual details (spinner, colours) out of the command functions and out
of the core workflow, which only sees a log sink and a `StatusReporter`.
"""

from __future__ import annotations

from typing import Callable

from rich.console import Console
from rich.status import Status


class RichStatusReporter:
    """`StatusReporter` backed by a rich spinner (`Console.status`)."""

    def __init__(self, console: Console, *, spinner: str = "dots") -> None:
        self._console = console
        self._status: Status = console.status("", spinner=spinner)
        self.text = ""

    def start(self) -> None:
        self._status.start()

    def stop(self) -> None:
        self._status.stop()

    def set_text(self, message: str) -> None:
        self.text = message
        self._status.update(message)

    def print_line(self, message: str) -> None:
        self._console.print(message)


def console_log_sink(console: Console) -> Callable[[str], None]:
    """One-shot mode: every message becomes a permanent console line."""

    def log(message: str) -> None:
        console.print(message)

    return log


def print_config_error(console: Console, message: str) -> None:
    console.print(f"[red]{message}[/red]")
