"""Command interpreter — the menu-driven state machine.

The interpreter owns its :class:`~staff_directory.core.store.Store`
exclusively and reads user input through an injected
:class:`~staff_directory.core.protocols.LineReader`.  It never writes to
the console: every outcome is returned as a value from
:mod:`staff_directory.core.models` for the caller to render.

State machine
-------------
::

    AWAITING_COMMAND ──1──────────────────────────► action ─┐
        │  ├──2──► AWAITING_DEPARTMENT_INPUT ──────► action ─┤
        │  └──3──► AWAITING_ADD_SYNTAX ────────────► action ─┤
        │                                                    │
        │ ◄──────────────────────────────────────────────────┘
        └──4 / q──► TERMINATED

Any recoverable error returns the machine to ``AWAITING_COMMAND``.
Nothing is retried automatically.
"""

from __future__ import annotations

import logging

from staff_directory.core.models import (
    AddEmployee,
    Command,
    CommandFailed,
    DepartmentRoster,
    DirectoryListing,
    EmployeeAdded,
    Farewell,
    InterpreterState,
    InvalidCommand,
    ListAllDepartments,
    ListDepartment,
    Quit,
    Result,
)
from staff_directory.core.parser import (
    MenuChoice,
    parse_add_command,
    parse_department,
    parse_menu_choice,
)
from staff_directory.core.protocols import LineReader, Presenter
from staff_directory.core.store import Store
from staff_directory.exceptions import (
    RECOVERABLE_ERRORS,
    DirectoryError,
    InputIOError,
    InputStreamClosedError,
    InterpreterTerminatedError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

CHOICE_PROMPT: str = "> "
DEPARTMENT_PROMPT: str = "Please enter dept: "
ADD_PROMPT: str = 'Please enter "Add Employee" command: (Add {name} to {dept}) '
FAREWELL_MESSAGE: str = "Good bye!"


class Interpreter:
    """Reads commands, applies them to a store, and reports results.

    Parameters
    ----------
    reader:
        Source of user input lines.
    store:
        Store to operate on.  A fresh empty store is created when
        omitted; either way the interpreter is its only user.
    """

    def __init__(self, reader: LineReader, store: Store | None = None) -> None:
        self._reader: LineReader = reader
        self._store: Store = store if store is not None else Store()
        self._state: InterpreterState = InterpreterState.AWAITING_COMMAND

    @property
    def state(self) -> InterpreterState:
        return self._state

    @property
    def store(self) -> Store:
        return self._store

    @property
    def terminated(self) -> bool:
        return self._state is InterpreterState.TERMINATED

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def read_command(self) -> Command:
        """Read a menu choice, plus its follow-up line when needed.

        Raises
        ------
        CommandSyntaxError
            If the choice, department, or add line is malformed.
        UnknownChoiceError
            If the menu number is not offered.
        InputIOError
            If a line could not be read.
        InputStreamClosedError
            If input is exhausted; the interpreter is then terminated.
        InterpreterTerminatedError
            If called after the loop has stopped.
        """
        self._ensure_running()
        self._transition(InterpreterState.AWAITING_COMMAND)
        try:
            choice = parse_menu_choice(self._reader.read_line(CHOICE_PROMPT))

            if choice is MenuChoice.LIST_ALL:
                return ListAllDepartments()
            if choice is MenuChoice.QUIT:
                return Quit()
            if choice is MenuChoice.LIST_DEPARTMENT:
                self._transition(InterpreterState.AWAITING_DEPARTMENT_INPUT)
                line = self._reader.read_line(DEPARTMENT_PROMPT)
                return ListDepartment(name=parse_department(line))

            self._transition(InterpreterState.AWAITING_ADD_SYNTAX)
            return parse_add_command(self._reader.read_line(ADD_PROMPT))
        except InputStreamClosedError:
            self._transition(InterpreterState.TERMINATED)
            raise
        except DirectoryError:
            self._transition(InterpreterState.AWAITING_COMMAND)
            raise

    def execute(self, command: Command) -> Result:
        """Apply *command* and return its outcome.

        Only :class:`Quit` leaves the interpreter terminated; every other
        command returns it to ``AWAITING_COMMAND``.
        """
        self._ensure_running()
        logger.debug("Executing %r", command)

        result: Result
        if isinstance(command, ListAllDepartments):
            result = DirectoryListing(rosters=self._store.roster())
        elif isinstance(command, ListDepartment):
            result = self._list_department(command.name)
        elif isinstance(command, AddEmployee):
            message = self._store.add(command.employee)
            result = EmployeeAdded(employee=command.employee, message=message)
        elif isinstance(command, Quit):
            self._transition(InterpreterState.TERMINATED)
            return Farewell(message=FAREWELL_MESSAGE)
        elif isinstance(command, InvalidCommand):
            result = CommandFailed(error=command.error)
        else:
            raise TypeError(f"Unsupported command: {command!r}")

        self._transition(InterpreterState.AWAITING_COMMAND)
        return result

    def step(self) -> Result:
        """Read and execute one command.

        Recoverable input errors come back as :class:`CommandFailed`;
        :class:`InputStreamClosedError` propagates.
        """
        try:
            command = self.read_command()
        except InputStreamClosedError:
            raise
        except (*RECOVERABLE_ERRORS, InputIOError) as exc:
            command = InvalidCommand(reason=str(exc), error=exc)
        return self.execute(command)

    def run(self, presenter: Presenter) -> None:
        """Loop until a quit command, handing every result to *presenter*."""
        while not self.terminated:
            presenter.show_menu()
            result = self.step()
            if isinstance(result, CommandFailed):
                presenter.show_error(result.error)
            else:
                presenter.show_result(result)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _list_department(self, department: str) -> Result:
        employees = self._store.employees_in(department)
        if employees is None:
            return CommandFailed(
                error=NotFoundError(f"Department {department} not found!"),
            )
        return DepartmentRoster(department=department, employees=employees)

    def _ensure_running(self) -> None:
        if self.terminated:
            raise InterpreterTerminatedError("The command loop has already ended.")

    def _transition(self, state: InterpreterState) -> None:
        if state is not self._state:
            logger.debug("State %s -> %s", self._state.name, state.name)
        self._state = state
