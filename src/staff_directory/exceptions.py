"""Custom exception hierarchy for staff-directory.

All exceptions that cross layer boundaries must inherit from
:class:`DirectoryError`.  Raw stream exceptions (``EOFError``,
``OSError``) must never propagate beyond the line reader — they are
caught there and re-raised as a typed subclass defined here.

Hierarchy
---------
DirectoryError
├── CommandSyntaxError
├── UnknownChoiceError
├── NotFoundError
├── InputIOError
│   └── InputStreamClosedError
└── InterpreterTerminatedError
"""

from __future__ import annotations


class DirectoryError(Exception):
    """Base exception for all staff-directory errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the interpreter loop and the CLI error boundary
    can render a clean message without leaking stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command input ---------------------------------------------------------

class CommandSyntaxError(DirectoryError):
    """Raised when an add line, menu choice or department is malformed."""


class UnknownChoiceError(DirectoryError):
    """Raised when a numeric menu choice is outside the offered range."""


# --- Store -----------------------------------------------------------------

class NotFoundError(DirectoryError):
    """Raised when a department is absent from the store."""


# --- Input stream ----------------------------------------------------------

class InputIOError(DirectoryError):
    """Raised when a single line could not be read from the input source."""


class InputStreamClosedError(InputIOError):
    """Raised when the input source is exhausted or cancelled.

    Unlike its parent this is not recoverable: the interpreter loop lets
    it propagate so the process can terminate.
    """


# --- Interpreter -----------------------------------------------------------

class InterpreterTerminatedError(DirectoryError):
    """Raised when a terminated interpreter is asked to do more work."""


RECOVERABLE_ERRORS: tuple[type[DirectoryError], ...] = (
    CommandSyntaxError,
    UnknownChoiceError,
    NotFoundError,
)
"""Errors the interpreter loop reports and then continues after.

:class:`InputIOError` is handled separately because its
:class:`InputStreamClosedError` subclass must stay fatal.
"""
