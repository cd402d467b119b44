"""
Library Catalogue Models.

Pydantic models for the entities of the catalogue:
- LibraryItem and its variants (Book, Magazine, DVD): things that can be borrowed
- LibraryMember: people who borrow them
- CirculationResult: structured outcome of a borrow or return
"""

from .circulation import CirculationOutcome, CirculationResult
from .item import DVD, Book, Borrowable, CatalogueItem, LibraryItem, Magazine, item_from_dict
from .member import LibraryMember

__all__ = [
    "DVD",
    "Book",
    "Borrowable",
    "CatalogueItem",
    "CirculationOutcome",
    "CirculationResult",
    "LibraryItem",
    "LibraryMember",
    "Magazine",
    "item_from_dict",
]
