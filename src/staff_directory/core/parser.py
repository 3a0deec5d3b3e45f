"""Pure parsers for the command language.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Grammar of the add line::

    Add <name tokens> to <department tokens>[,.!?]

Keywords are case-insensitive, the first ``to`` after ``Add`` is the
separator, and both the name and the department must be non-empty.
"""

from __future__ import annotations

import enum

from staff_directory.core.models import AddEmployee, Employee
from staff_directory.exceptions import CommandSyntaxError, UnknownChoiceError

ADD_KEYWORD: str = "add"
SEPARATOR_KEYWORD: str = "to"
TRAILING_PUNCTUATION: str = ",.!?"
QUIT_ALIAS: str = "q"

ADD_SYNTAX_HINT: str = "Use: Add {name} to {dept}"


# ---------------------------------------------------------------------------
# Add line
# ---------------------------------------------------------------------------

def _normalise(line: str) -> str:
    """Trim whitespace and trailing punctuation."""
    return line.strip().rstrip(TRAILING_PUNCTUATION).strip()


def parse_add_command(line: str) -> AddEmployee:
    """Parse an ``Add <name> to <dept>`` line.

    Raises
    ------
    CommandSyntaxError
        If the line is empty, does not start with ``add``, has no ``to``
        separator, or leaves the name or department empty.
    """
    text = _normalise(line)
    if not text:
        raise CommandSyntaxError("Command required.", hint=ADD_SYNTAX_HINT)

    words = text.split()
    if words[0].lower() != ADD_KEYWORD:
        raise CommandSyntaxError(
            f"Invalid modify command: [{text}]",
            hint=ADD_SYNTAX_HINT,
        )

    separator = next(
        (
            idx
            for idx, word in enumerate(words[1:], start=1)
            if word.lower() == SEPARATOR_KEYWORD
        ),
        None,
    )
    if separator is None:
        raise CommandSyntaxError(
            f"Invalid Add Syntax: [{text}]",
            hint=ADD_SYNTAX_HINT,
        )

    name = " ".join(words[1:separator])
    department = " ".join(words[separator + 1:])
    if not name:
        raise CommandSyntaxError(
            f"Employee name required: [{text}]",
            hint=ADD_SYNTAX_HINT,
        )
    if not department:
        raise CommandSyntaxError(
            f"Department name required: [{text}]",
            hint=ADD_SYNTAX_HINT,
        )

    return AddEmployee(employee=Employee(department=department, name=name))


# ---------------------------------------------------------------------------
# Menu choice
# ---------------------------------------------------------------------------

class MenuChoice(enum.IntEnum):
    """Entries of the top-level menu, valued by their number."""

    LIST_ALL = 1
    LIST_DEPARTMENT = 2
    ADD_EMPLOYEE = 3
    QUIT = 4


def parse_menu_choice(text: str) -> MenuChoice:
    """Map a top-level menu answer to a :class:`MenuChoice`.

    The quit alias is recognised before any numeric parse.

    Raises
    ------
    CommandSyntaxError
        If *text* is neither the quit alias nor an integer.
    UnknownChoiceError
        If the integer is not a menu entry.
    """
    choice_text = text.strip()
    if choice_text.lower() == QUIT_ALIAS:
        return MenuChoice.QUIT

    try:
        number = int(choice_text)
    except ValueError as exc:
        raise CommandSyntaxError(
            f"Invalid menu choice: [{choice_text}]",
            hint=f"Enter a number from {MenuChoice.LIST_ALL.value} to {MenuChoice.QUIT.value}, "
            f"or {QUIT_ALIAS} to quit.",
        ) from exc

    try:
        return MenuChoice(number)
    except ValueError as exc:
        raise UnknownChoiceError(f"Unknown choice: {number}") from exc


def parse_department(text: str) -> str:
    """Return the trimmed department name.

    Raises
    ------
    CommandSyntaxError
        If nothing but whitespace was entered.
    """
    department = text.strip()
    if not department:
        raise CommandSyntaxError("Department name required.")
    return department
