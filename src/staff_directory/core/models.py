"""Domain models for staff-directory.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero
dependencies on external packages.

Three families live here:

* :class:`Employee` — the only record the store knows about.
* Commands — parsed user intent, consumed by the interpreter.
* Results — plain data handed back to the caller for display.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from staff_directory.exceptions import DirectoryError


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Employee:
    """A single employee assigned to a department."""

    department: str
    """Department name (case-sensitive store key)."""

    name: str
    """Free-form employee name."""


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ListAllDepartments:
    """Show every department with its employees."""


@dataclass(frozen=True, slots=True)
class ListDepartment:
    """Show the employees of one department."""

    name: str


@dataclass(frozen=True, slots=True)
class AddEmployee:
    """Add :attr:`employee` to the store."""

    employee: Employee


@dataclass(frozen=True, slots=True)
class Quit:
    """Stop the command loop."""


@dataclass(frozen=True, slots=True)
class InvalidCommand:
    """User input that could not be turned into a command."""

    reason: str
    error: DirectoryError


Command = Union[ListAllDepartments, ListDepartment, AddEmployee, Quit, InvalidCommand]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DepartmentRoster:
    """One department and its employees, sorted for display."""

    department: str
    employees: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class DirectoryListing:
    """Every department in the store, sorted for display.

    An empty listing is falsy so callers can render a "no data" notice.
    """

    rosters: tuple[DepartmentRoster, ...]

    def __len__(self) -> int:
        return len(self.rosters)

    def __bool__(self) -> bool:
        return len(self.rosters) > 0


@dataclass(frozen=True, slots=True)
class EmployeeAdded:
    """Confirmation that an employee was stored."""

    employee: Employee
    message: str


@dataclass(frozen=True, slots=True)
class Farewell:
    message: str


@dataclass(frozen=True, slots=True)
class CommandFailed:
    """A recoverable error reported back to the caller."""

    error: DirectoryError


Result = Union[DirectoryListing, DepartmentRoster, EmployeeAdded, Farewell, CommandFailed]


# ---------------------------------------------------------------------------
# Interpreter state
# ---------------------------------------------------------------------------

class InterpreterState(enum.Enum):
    """States of the command loop."""

    AWAITING_COMMAND = "awaiting_command"
    AWAITING_DEPARTMENT_INPUT = "awaiting_department_input"
    AWAITING_ADD_SYNTAX = "awaiting_add_syntax"
    TERMINATED = "terminated"
