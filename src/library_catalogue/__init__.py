"""
Library Catalogue Package.

An in-memory catalogue of borrowable items (books, magazines, DVDs) and the
members who borrow them.

Key Components:
- models: Pydantic models for items, members and circulation results
- library: the registry that owns items and members and routes requests
- config: Configuration management with pydantic-settings
- exceptions: errors raised on registration
"""

__version__ = "0.1.0"

from .exceptions import CatalogueError, DuplicateError
from .library import Library
from .models import (
    DVD,
    Book,
    Borrowable,
    CirculationOutcome,
    CirculationResult,
    LibraryItem,
    LibraryMember,
    Magazine,
    item_from_dict,
)

__all__ = [
    "DVD",
    "Book",
    "Borrowable",
    "CatalogueError",
    "CirculationOutcome",
    "CirculationResult",
    "DuplicateError",
    "Library",
    "LibraryItem",
    "LibraryMember",
    "Magazine",
    "__version__",
    "item_from_dict",
]
