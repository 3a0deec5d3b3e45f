"""CLI application entry point for staff-directory.

This module is the **sole error boundary** for the entire application.
Recoverable command errors are handled inside the interpreter loop;
whatever escapes it — :class:`~staff_directory.exceptions.DirectoryError`,
``KeyboardInterrupt``, or any unexpected ``Exception`` — is rendered here
and translated into a well-defined exit code.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the
  interpreter in the core layer.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.markup import escape

from staff_directory.cli import exit_codes
from staff_directory.cli.console import console
from staff_directory.cli.logging import configure_logging
from staff_directory.exceptions import DirectoryError
from staff_directory.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The directory is always interactive; options only affect
    diagnostics:

    * ``staff-directory``            — start the command loop
    * ``staff-directory --verbose``  — same, with debug logging on stderr
    * ``staff-directory --version``
    """
    parser = argparse.ArgumentParser(
        prog="staff-directory",
        description="Interactive in-memory employee directory.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log store changes and state transitions to stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command loop
# ---------------------------------------------------------------------------

def _run_directory() -> int:
    """Wire the console adapters to a fresh interpreter and run it."""
    from staff_directory.cli.display import ConsolePresenter
    from staff_directory.cli.input import ConsoleLineReader
    from staff_directory.core.interpreter import Interpreter
    from staff_directory.core.store import Store

    interpreter = Interpreter(ConsoleLineReader(console), Store())
    interpreter.run(ConsolePresenter(console))
    logger.debug("Command loop ended with %d department(s)", len(interpreter.store))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the staff-directory CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)
    return _run_directory()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DirectoryError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
