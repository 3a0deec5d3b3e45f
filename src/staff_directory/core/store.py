"""In-memory department → employee store.

The store is a plain owned object: the interpreter receives one
instance and nothing else holds a reference to it.  It performs no I/O;
confirmation text is returned to the caller instead of printed.

Invariants
----------
* Every department key maps to a non-empty list of names.
* An empty store has no keys.
* Insertion order is kept internally; every query returns names sorted
  ascending so display is deterministic.
"""

from __future__ import annotations

import logging

from staff_directory.core.models import DepartmentRoster, Employee

logger = logging.getLogger(__name__)


class Store:
    """Mapping of department name to the names of its employees."""

    def __init__(self) -> None:
        self._departments: dict[str, list[str]] = {}

    def __len__(self) -> int:
        return len(self._departments)

    def __contains__(self, department: object) -> bool:
        return department in self._departments

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def departments(self) -> tuple[str, ...] | None:
        """Return department names sorted ascending, or ``None`` if empty."""
        if not self._departments:
            return None
        return tuple(sorted(self._departments))

    def employees_in(self, department: str) -> tuple[str, ...] | None:
        """Return the sorted employees of *department*.

        Returns ``None`` when the department has never been added to.
        """
        names = self._departments.get(department)
        if names is None:
            return None
        return tuple(sorted(names))

    def roster(self) -> tuple[DepartmentRoster, ...]:
        """Return every department with its employees, both sorted."""
        return tuple(
            DepartmentRoster(department=dept, employees=tuple(sorted(names)))
            for dept, names in sorted(self._departments.items())
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_employee(self, department: str, name: str) -> str:
        """Append *name* to *department*, creating it when absent.

        Returns
        -------
        str
            Confirmation message for the caller to display.
        """
        self._departments.setdefault(department, []).append(name)
        logger.debug(
            "Added %r to %r (%d in department)",
            name,
            department,
            len(self._departments[department]),
        )
        return f"{name} added to {department}."

    def add(self, employee: Employee) -> str:
        """Store *employee*; see :meth:`add_employee`."""
        return self.add_employee(employee.department, employee.name)
