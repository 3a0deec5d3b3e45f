"""Console rendering of the command loop.

This module is responsible for:

* Printing the top-level menu.
* Rendering department listings as banner-delimited Rich tables.
* Printing confirmations, the farewell, and ``Error:`` lines.

All display-related logic lives here — no parsing and no store access.
User-supplied text is escaped before it reaches Rich markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from staff_directory.cli.console import console as default_console
from staff_directory.core.models import (
    DepartmentRoster,
    DirectoryListing,
    EmployeeAdded,
    Farewell,
    Result,
)
from staff_directory.core.parser import QUIT_ALIAS, MenuChoice
from staff_directory.exceptions import DirectoryError

MENU_TITLE: str = "Please enter a command:"
MENU_LABELS: dict[MenuChoice, str] = {
    MenuChoice.LIST_ALL: "Show All Employees",
    MenuChoice.LIST_DEPARTMENT: "Show Employees for Dept",
    MenuChoice.ADD_EMPLOYEE: "Add Employee",
    MenuChoice.QUIT: f"Quit ({QUIT_ALIAS})",
}

ALL_EMPLOYEES_BANNER: str = "----------All employees----------"
SEPARATOR: str = "---------------------------------"
NO_DATA_MESSAGE: str = "No data available!"


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def _format_menu_entry(choice: MenuChoice) -> str:
    """Render one menu line, e.g. ``"\\t1 - Show All Employees"``."""
    return f"\t{choice.value} - {MENU_LABELS[choice]}"


def _build_roster_table(roster: DepartmentRoster) -> Table:
    """Build a numbered table listing the employees of a department."""
    table = Table(
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Employee", justify="left", min_width=10)
    for i, name in enumerate(roster.employees, start=1):
        table.add_row(str(i), escape(name))
    return table


# ---------------------------------------------------------------------------
# Presenter
# ---------------------------------------------------------------------------

class ConsolePresenter:
    """Render interpreter results on a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self._console: Console = console if console is not None else default_console

    def show_menu(self) -> None:
        self._console.print(MENU_TITLE)
        for choice in MenuChoice:
            self._console.print(_format_menu_entry(choice))

    def show_result(self, result: Result) -> None:
        """Dispatch on the result type."""
        self._console.print()
        if isinstance(result, DirectoryListing):
            self._show_listing(result)
        elif isinstance(result, DepartmentRoster):
            self._show_roster(result)
        elif isinstance(result, EmployeeAdded):
            self._console.print(f"[green]{escape(result.message)}[/green]")
        elif isinstance(result, Farewell):
            self._console.print(f"[bold]{escape(result.message)}[/bold]")
        else:
            raise TypeError(f"Cannot display result: {result!r}")
        self._console.print()

    def show_error(self, error: DirectoryError) -> None:
        self._console.print()
        self._console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
        if error.hint:
            self._console.print(f"[yellow]Hint:[/yellow] {escape(error.hint)}")
        self._console.print()

    # ------------------------------------------------------------------

    def _show_listing(self, listing: DirectoryListing) -> None:
        self._console.print(ALL_EMPLOYEES_BANNER)
        self._console.print()
        if not listing:
            self._console.print(NO_DATA_MESSAGE)
            return
        for roster in listing.rosters:
            self._show_roster(roster)

    def _show_roster(self, roster: DepartmentRoster) -> None:
        self._console.print(SEPARATOR)
        self._console.print(
            f"[bold cyan]Department:[/bold cyan] {escape(roster.department)}",
        )
        self._console.print(_build_roster_table(roster))
        self._console.print(SEPARATOR)
