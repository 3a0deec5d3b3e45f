"""Protocols (interfaces) consumed by the core layer.

These define the contracts that the CLI adapters must satisfy.  Core
code depends ONLY on these protocols — never on the console — so the
interpreter can be driven by scripted input in tests.
"""

from __future__ import annotations

from typing import Protocol

from staff_directory.core.models import Result
from staff_directory.exceptions import DirectoryError


class LineReader(Protocol):
    """Contract for sources of user input lines."""

    def read_line(self, prompt: str) -> str:
        """Show *prompt* and return one line of input without the newline.

        Raises
        ------
        InputIOError
            When a single read fails but the source remains usable.
        InputStreamClosedError
            When the source is exhausted and no more lines will come.
        """
        ...  # pragma: no cover


class Presenter(Protocol):
    """Contract for whatever renders the command loop to the user."""

    def show_menu(self) -> None:
        """Display the top-level menu before a choice is read."""
        ...  # pragma: no cover

    def show_result(self, result: Result) -> None:
        """Display a successful command result."""
        ...  # pragma: no cover

    def show_error(self, error: DirectoryError) -> None:
        """Display a recoverable error."""
        ...  # pragma: no cover
