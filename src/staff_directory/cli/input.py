"""Console line reader — the only place stdin is touched.

Raw stream exceptions are mapped onto the project hierarchy here:

* ``EOFError`` / ``OSError`` → :class:`InputStreamClosedError` (fatal)
* ``UnicodeDecodeError``     → :class:`InputIOError` (recoverable)

``KeyboardInterrupt`` is left alone for the CLI error boundary.
"""

from __future__ import annotations

from rich.console import Console

from staff_directory.cli.console import console as default_console
from staff_directory.exceptions import InputIOError, InputStreamClosedError


class ConsoleLineReader:
    """Read one line per prompt from the console's input stream."""

    def __init__(self, console: Console | None = None) -> None:
        self._console: Console = console if console is not None else default_console

    def read_line(self, prompt: str) -> str:
        try:
            line = self._console.input(prompt, markup=False)
        except EOFError as exc:
            raise InputStreamClosedError("Input stream closed.") from exc
        except UnicodeDecodeError as exc:
            raise InputIOError(
                f"Could not decode input: {exc.reason}",
                hint="Check the terminal encoding and try again.",
            ) from exc
        except OSError as exc:
            raise InputStreamClosedError(f"Could not read input: {exc}") from exc
        return line.strip()
