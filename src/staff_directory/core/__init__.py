"""Core / service layer — the store, the parser and the interpreter.

Rules
-----
* No ``print()`` calls.
* No terminal I/O; input arrives through :class:`LineReader`.
* No imports from ``cli``.
* All functions must be fully typed and deterministic.
"""

from staff_directory.core.interpreter import Interpreter
from staff_directory.core.models import (
    AddEmployee,
    CommandFailed,
    DepartmentRoster,
    DirectoryListing,
    Employee,
    EmployeeAdded,
    Farewell,
    InterpreterState,
    InvalidCommand,
    ListAllDepartments,
    ListDepartment,
    Quit,
)
from staff_directory.core.parser import MenuChoice, parse_add_command, parse_menu_choice
from staff_directory.core.protocols import LineReader, Presenter
from staff_directory.core.store import Store

__all__: list[str] = [
    "AddEmployee",
    "CommandFailed",
    "DepartmentRoster",
    "DirectoryListing",
    "Employee",
    "EmployeeAdded",
    "Farewell",
    "Interpreter",
    "InterpreterState",
    "InvalidCommand",
    "LineReader",
    "ListAllDepartments",
    "ListDepartment",
    "MenuChoice",
    "Presenter",
    "Quit",
    "Store",
    "parse_add_command",
    "parse_menu_choice",
]
