"""Shared Rich console for the CLI layer.

Directory output goes to stdout; logging is routed to stderr separately
(see :mod:`staff_directory.cli.logging`).  The console resolves
``sys.stdout`` at write time, so redirected or captured streams are
honoured.
"""

from __future__ import annotations

from rich.console import Console


def get_rich_console(**kwargs: object) -> Console:
    """Create a Rich console for directory output.

    Keyword arguments are forwarded to :class:`rich.console.Console`,
    which lets tests target an in-memory file.
    """
    kwargs.setdefault("highlight", False)
    return Console(**kwargs)  # type: ignore[arg-type]


console = get_rich_console()
