"""staff-directory — interactive in-memory employee directory.

Employees are grouped by department and managed through a small
menu-driven command loop.
"""

from staff_directory.version import __version__

__all__: list[str] = ["__version__"]
