"""Exceptions raised by the library catalogue.

Only registration problems are exceptional. Operational failures during
borrowing and returning are reported as sentinel strings (see ``messages``).
"""


class CatalogueError(Exception):
    """Base exception for catalogue operations."""


class DuplicateError(CatalogueError):
    """Raised when registering an item or member whose id is already taken."""
