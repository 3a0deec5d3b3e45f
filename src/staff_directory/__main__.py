"""Allow ``python -m staff_directory`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m staff_directory`` behaves identically to the
``staff-directory`` console script.
"""

from __future__ import annotations

from staff_directory.cli.app import cli

if __name__ == "__main__":
    cli()
