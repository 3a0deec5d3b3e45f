"""Shared pytest fixtures and configuration for the staff-directory suite.

Guidelines
----------
* No real terminal interaction — input comes from :class:`ScriptedReader`.
* Core tests must be pure — no console output.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from staff_directory.core.models import Result
from staff_directory.exceptions import DirectoryError, InputStreamClosedError


class ScriptedReader:
    """LineReader that replays canned answers.

    Entries that are exceptions are raised instead of returned.  When
    the script runs out the reader behaves like a closed stdin.
    """

    def __init__(self, lines: Iterable[str | Exception]) -> None:
        self._lines: list[str | Exception] = list(lines)
        self.prompts: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise InputStreamClosedError("Input stream closed.")
        line = self._lines.pop(0)
        if isinstance(line, Exception):
            raise line
        return line


class RecordingPresenter:
    """Presenter that records every call for later assertions."""

    def __init__(self) -> None:
        self.menus_shown: int = 0
        self.results: list[Result] = []
        self.errors: list[DirectoryError] = []

    def show_menu(self) -> None:
        self.menus_shown += 1

    def show_result(self, result: Result) -> None:
        self.results.append(result)

    def show_error(self, error: DirectoryError) -> None:
        self.errors.append(error)


@pytest.fixture()
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture()
def scripted() -> type[ScriptedReader]:
    """Return the :class:`ScriptedReader` class for building inputs."""
    return ScriptedReader
