"""Contract for live status output (spinner-like) used in watch mode."""

from __future__ import annotations

from typing import Protocol


class StatusReporter(Protocol):
    text: str

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def set_text(self, message: str) -> None: ...

    def print_line(self, message: str) -> None:
        """Print a permanent line above the live indicator."""

        ...
