"""Tests for the command interpreter state machine (core/interpreter.py).

Input is replayed by ``ScriptedReader`` and output captured by
``RecordingPresenter`` (see ``conftest.py``) — no console involved.
"""

from __future__ import annotations

from typing import Any

import pytest

from staff_directory.core.interpreter import (
    ADD_PROMPT,
    CHOICE_PROMPT,
    DEPARTMENT_PROMPT,
    FAREWELL_MESSAGE,
    Interpreter,
)
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
from staff_directory.core.store import Store
from staff_directory.exceptions import (
    CommandSyntaxError,
    InputIOError,
    InputStreamClosedError,
    InterpreterTerminatedError,
    NotFoundError,
    UnknownChoiceError,
)


def _interpreter(scripted: Any, *lines: str | Exception, store: Store | None = None) -> Interpreter:
    return Interpreter(scripted(lines), store)


# ---------------------------------------------------------------------------
# read_command
# ---------------------------------------------------------------------------

class TestReadCommand:
    def test_starts_awaiting_command(self, scripted: Any) -> None:
        assert _interpreter(scripted).state is InterpreterState.AWAITING_COMMAND

    def test_list_all(self, scripted: Any) -> None:
        assert _interpreter(scripted, "1").read_command() == ListAllDepartments()

    def test_list_department_prompts_for_name(self, scripted: Any) -> None:
        reader = scripted(["2", " Sales "])
        interpreter = Interpreter(reader)
        assert interpreter.read_command() == ListDepartment(name="Sales")
        assert reader.prompts == [CHOICE_PROMPT, DEPARTMENT_PROMPT]
        assert interpreter.state is InterpreterState.AWAITING_DEPARTMENT_INPUT

    def test_add_prompts_for_syntax(self, scripted: Any) -> None:
        reader = scripted(["3", "Add Jane Doe to Sales."])
        interpreter = Interpreter(reader)
        assert interpreter.read_command() == AddEmployee(
            employee=Employee(department="Sales", name="Jane Doe"),
        )
        assert reader.prompts == [CHOICE_PROMPT, ADD_PROMPT]
        assert interpreter.state is InterpreterState.AWAITING_ADD_SYNTAX

    @pytest.mark.parametrize("choice", ["4", "q", "Q"])
    def test_quit(self, scripted: Any, choice: str) -> None:
        assert _interpreter(scripted, choice).read_command() == Quit()

    def test_unknown_choice_returns_to_awaiting(self, scripted: Any) -> None:
        interpreter = _interpreter(scripted, "5")
        with pytest.raises(UnknownChoiceError):
            interpreter.read_command()
        assert interpreter.state is InterpreterState.AWAITING_COMMAND

    def test_bad_add_line_returns_to_awaiting(self, scripted: Any) -> None:
        interpreter = _interpreter(scripted, "3", "Add Jane Doe Sales")
        with pytest.raises(CommandSyntaxError):
            interpreter.read_command()
        assert interpreter.state is InterpreterState.AWAITING_COMMAND

    def test_empty_department_is_syntax_error(self, scripted: Any) -> None:
        interpreter = _interpreter(scripted, "2", "   ")
        with pytest.raises(CommandSyntaxError):
            interpreter.read_command()

    def test_read_failure_on_sub_prompt(self, scripted: Any) -> None:
        interpreter = _interpreter(scripted, "2", InputIOError("bad bytes"))
        with pytest.raises(InputIOError):
            interpreter.read_command()
        assert interpreter.state is InterpreterState.AWAITING_COMMAND

    def test_closed_stream_terminates(self, scripted: Any) -> None:
        interpreter = _interpreter(scripted)
        with pytest.raises(InputStreamClosedError):
            interpreter.read_command()
        assert interpreter.terminated


# ---------------------------------------------------------------------------
# execute
# ---------------------------------------------------------------------------

class TestExecute:
    def test_list_all_on_empty_store(self, scripted: Any) -> None:
        result = _interpreter(scripted).execute(ListAllDepartments())
        assert result == DirectoryListing(rosters=())
        assert not result

    def test_add_mutates_owned_store(self, scripted: Any) -> None:
        store = Store()
        interpreter = _interpreter(scripted, store=store)
        employee = Employee(department="Engineering", name="Alice")
        result = interpreter.execute(AddEmployee(employee=employee))
        assert result == EmployeeAdded(employee=employee, message="Alice added to Engineering.")
        assert store.employees_in("Engineering") == ("Alice",)
        assert interpreter.store is store

    def test_list_department(self, scripted: Any) -> None:
        store = Store()
        store.add_employee("Engineering", "Bob")
        store.add_employee("Engineering", "Alice")
        result = _interpreter(scripted, store=store).execute(ListDepartment(name="Engineering"))
        assert result == DepartmentRoster(department="Engineering", employees=("Alice", "Bob"))

    def test_list_missing_department_fails(self, scripted: Any) -> None:
        interpreter = _interpreter(scripted)
        result = interpreter.execute(ListDepartment(name="Ops"))
        assert isinstance(result, CommandFailed)
        assert isinstance(result.error, NotFoundError)
        assert "Ops" in str(result.error)
        assert interpreter.state is InterpreterState.AWAITING_COMMAND

    def test_invalid_command_reports_its_error(self, scripted: Any) -> None:
        err = CommandSyntaxError("nope")
        result = _interpreter(scripted).execute(InvalidCommand(reason="nope", error=err))
        assert result == CommandFailed(error=err)

    def test_quit_terminates(self, scripted: Any) -> None:
        interpreter = _interpreter(scripted)
        assert interpreter.execute(Quit()) == Farewell(message=FAREWELL_MESSAGE)
        assert interpreter.state is InterpreterState.TERMINATED

    def test_no_work_after_quit(self, scripted: Any) -> None:
        interpreter = _interpreter(scripted, "1")
        interpreter.execute(Quit())
        with pytest.raises(InterpreterTerminatedError):
            interpreter.execute(ListAllDepartments())
        with pytest.raises(InterpreterTerminatedError):
            interpreter.read_command()

    def test_unsupported_command(self, scripted: Any) -> None:
        with pytest.raises(TypeError):
            _interpreter(scripted).execute("1")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# step / run
# ---------------------------------------------------------------------------

class TestStep:
    def test_unknown_choice_becomes_failure(self, scripted: Any) -> None:
        result = _interpreter(scripted, "5").step()
        assert isinstance(result, CommandFailed)
        assert isinstance(result.error, UnknownChoiceError)

    def test_syntax_error_becomes_failure(self, scripted: Any) -> None:
        result = _interpreter(scripted, "3", "").step()
        assert isinstance(result, CommandFailed)
        assert isinstance(result.error, CommandSyntaxError)

    def test_io_error_becomes_failure(self, scripted: Any) -> None:
        result = _interpreter(scripted, InputIOError("bad bytes")).step()
        assert isinstance(result, CommandFailed)
        assert isinstance(result.error, InputIOError)

    def test_closed_stream_propagates(self, scripted: Any) -> None:
        with pytest.raises(InputStreamClosedError):
            _interpreter(scripted).step()


class TestRun:
    def test_full_session(self, scripted: Any, presenter: Any) -> None:
        interpreter = _interpreter(
            scripted,
            "1",
            "3", "Add Bob to Engineering",
            "3", "add Alice to Engineering!",
            "3", "Add Jane Doe to Sales.",
            "2", "Engineering",
            "2", "Marketing",
            "7",
            "3", "Add Jane Doe Sales",
            "1",
            "Q",
        )
        interpreter.run(presenter)

        assert interpreter.terminated
        assert presenter.menus_shown == 10
        assert presenter.results == [
            DirectoryListing(rosters=()),
            EmployeeAdded(Employee("Engineering", "Bob"), "Bob added to Engineering."),
            EmployeeAdded(Employee("Engineering", "Alice"), "Alice added to Engineering."),
            EmployeeAdded(Employee("Sales", "Jane Doe"), "Jane Doe added to Sales."),
            DepartmentRoster("Engineering", ("Alice", "Bob")),
            DirectoryListing(
                rosters=(
                    DepartmentRoster("Engineering", ("Alice", "Bob")),
                    DepartmentRoster("Sales", ("Jane Doe",)),
                ),
            ),
            Farewell(FAREWELL_MESSAGE),
        ]
        assert [type(e) for e in presenter.errors] == [
            NotFoundError,
            UnknownChoiceError,
            CommandSyntaxError,
        ]

    def test_quit_immediately(self, scripted: Any, presenter: Any) -> None:
        _interpreter(scripted, "4").run(presenter)
        assert presenter.menus_shown == 1
        assert presenter.results == [Farewell(FAREWELL_MESSAGE)]

    def test_closed_stream_ends_loop(self, scripted: Any, presenter: Any) -> None:
        interpreter = _interpreter(scripted, "1")
        with pytest.raises(InputStreamClosedError):
            interpreter.run(presenter)
        assert presenter.results == [DirectoryListing(rosters=())]
        assert interpreter.terminated
