"""
Item models for the library catalogue.

A library item is anything a member can borrow. The catalogue knows three
variants, each adding its own detail fields and its own rendering:

- Book: written by an author
- Magazine: published as a dated issue
- DVD: a film with a running time in minutes

All variants share the same availability state machine. An item starts out
available, becomes unavailable when borrowed and available again when
returned. Failures are reported through sentinel strings rather than
exceptions so callers can print whatever comes back.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Annotated, Any, Literal, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, TypeAdapter

from ..messages import ITEM_NOT_AVAILABLE

logger = logging.getLogger(__name__)


@runtime_checkable
class Borrowable(Protocol):
    """Anything that can be lent out and handed back."""

    def borrow(self, member_name: str) -> str: ...

    def return_item(self) -> str: ...

    @property
    def is_available(self) -> bool: ...


class LibraryItem(BaseModel, ABC):
    """
    Abstract base for every catalogue entry.

    Subclasses provide ``get_details``; the borrow/return transitions are
    shared. The availability flag is private so that it only changes through
    ``borrow``, ``return_item`` or the ``available`` setter.
    """

    id: str = Field(
        ...,
        description="Identifier of the item, unique within a library",
        min_length=1,
        frozen=True,
        examples=["B001", "M042", "D007"],
    )

    title: str = Field(
        ...,
        description="Title of the item",
        min_length=1,
        max_length=500,
        examples=["Harry Potter", "National Geographic"],
    )

    _available: bool = PrivateAttr(default=True)

    @property
    def available(self) -> bool:
        """Whether the item is on the shelf."""
        return self._available

    @available.setter
    def available(self, available: bool) -> None:
        if self._available and available:
            logger.warning("Item %s is already available", self.title)
            return
        if not self._available and not available:
            logger.warning("Item %s is already borrowed", self.title)
            return

        self._set_available(available)

    def _set_available(self, available: bool) -> None:
        self._available = available
        logger.info(
            "Status updated: %s is now %s",
            self.title,
            "available" if available else "unavailable",
        )

    @property
    def is_available(self) -> bool:
        return self._available

    @property
    def kind_name(self) -> str:
        """Variant name used in confirmation messages (``Book``, ``DVD``...)."""
        return type(self).__name__

    @abstractmethod
    def get_details(self) -> str:
        """Render the item for listings."""

    def borrow(self, member_name: str) -> str:
        """
        Lend the item to a member.

        Returns:
            A confirmation naming the variant, title and borrower, or the
            ``ITEM_NOT_AVAILABLE`` sentinel if the item is already out.
        """
        if not self._available:
            return ITEM_NOT_AVAILABLE
        self._set_available(False)
        return f"{self.kind_name} {self.title} borrowed by {member_name}"

    def return_item(self) -> str:
        """
        Put the item back on the shelf.

        Returning an item that is already available changes nothing but
        still reports it as returned.
        """
        if self._available:
            return f"{self.kind_name} {self.title} returned"
        self._set_available(True)
        return f"{self.kind_name} {self.title} returned"

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        str_strip_whitespace=True,
    )


class Book(LibraryItem):
    """A book, identified by its author."""

    kind: Literal["book"] = "book"

    author: str = Field(
        ...,
        description="Author of the book",
        min_length=1,
        examples=["J.K. Rowling", "Frank Herbert"],
    )

    def get_details(self) -> str:
        return f"Book: {self.title} by {self.author} (ID: {self.id})"


class Magazine(LibraryItem):
    """A single magazine issue."""

    kind: Literal["magazine"] = "magazine"

    issue_date: str = Field(
        ...,
        description="Issue the copy belongs to, as printed on the cover",
        min_length=1,
        examples=["2024-03", "Spring 2023"],
    )

    def get_details(self) -> str:
        return f"Magazine: {self.title} (Issue: {self.issue_date}, ID: {self.id})"


class DVD(LibraryItem):
    """A film on DVD."""

    kind: Literal["dvd"] = "dvd"

    duration: int = Field(
        ...,
        description="Running time in minutes",
        ge=0,
        examples=[90, 148],
    )

    def get_details(self) -> str:
        return f"DVD: {self.title} ({self.duration} mins, ID: {self.id})"


# Closed set of variants, discriminated by ``kind``
CatalogueItem = Annotated[Book | Magazine | DVD, Field(discriminator="kind")]

_item_adapter: TypeAdapter[Book | Magazine | DVD] = TypeAdapter(CatalogueItem)


def item_from_dict(data: Mapping[str, Any]) -> LibraryItem:
    """
    Build the right item variant from plain data.

    Raises:
        pydantic.ValidationError: If ``kind`` is missing or unknown, or the
            fields do not match the variant.
    """
    return _item_adapter.validate_python(dict(data))
