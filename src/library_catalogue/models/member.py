"""
Member model for the library catalogue.

A member borrows items and keeps an ordered list of what they currently hold.
The list holds references to items owned elsewhere (normally a library's item
table); the member never creates or discards items. It is private state:
it changes only through ``borrow_item`` and ``return_item`` and is not part
of the serialized model.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..messages import (
    ITEM_NOT_AVAILABLE,
    MEMBER_ITEM_NOT_AVAILABLE,
    NO_BORROWED_ITEMS,
    NOT_IN_BORROWED_LIST,
)
from .item import LibraryItem

logger = logging.getLogger(__name__)


class LibraryMember(BaseModel):
    """
    Represents a person registered to borrow items.

    The borrowed list grows on every successful borrow and shrinks on every
    successful return, in borrow order.
    """

    id: str = Field(
        ...,
        description="Identifier of the member, unique within a library",
        min_length=1,
        frozen=True,
        examples=["MEM001", "MEM002"],
    )

    name: str = Field(
        ...,
        description="Name of the member, used in borrow confirmations",
        min_length=1,
        max_length=200,
        examples=["Alice", "fern"],
    )

    _borrowed: list[LibraryItem] = PrivateAttr(default_factory=list)

    @property
    def borrowed_items(self) -> list[LibraryItem]:
        """The items currently held, oldest first."""
        return list(self._borrowed)

    @property
    def borrowed_item_ids(self) -> list[str]:
        """Ids of the items currently held, oldest first."""
        return [item.id for item in self._borrowed]

    def borrow_item(self, item: LibraryItem) -> str:
        """
        Borrow ``item`` for this member.

        Returns:
            The item's confirmation, or ``MEMBER_ITEM_NOT_AVAILABLE`` if the
            item is already out.
        """
        if not item.is_available:
            return MEMBER_ITEM_NOT_AVAILABLE

        msg = item.borrow(self.name)
        if msg != ITEM_NOT_AVAILABLE:
            self._borrowed.append(item)
        return msg

    def return_item(self, item_id: str) -> str:
        """
        Hand back the first held item with id ``item_id``.

        Returns:
            The item's confirmation, or ``NOT_IN_BORROWED_LIST`` if this
            member does not hold that item.
        """
        for index, item in enumerate(self._borrowed):
            if item.id == item_id:
                break
        else:
            logger.debug("Member %s does not hold item %s", self.id, item_id)
            return NOT_IN_BORROWED_LIST

        msg = item.return_item()
        del self._borrowed[index]
        return msg

    def list_borrowed_items(self) -> str:
        """Details of every held item, one per line."""
        if not self._borrowed:
            return NO_BORROWED_ITEMS
        return "\n".join(item.get_details() for item in self._borrowed)

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        str_strip_whitespace=True,
    )
