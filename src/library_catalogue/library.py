"""
Library registry.

The ``Library`` owns every item and member, keyed by id, and routes borrow and
return requests to the right member. Registration is the only place that
raises: a duplicate id is a programming error the caller has to handle.
Everything after registration reports failures as sentinel strings, or as a
``CirculationResult`` through ``checkout`` / ``checkin``.
"""

import logging
from collections.abc import Iterable

from .exceptions import DuplicateError
from .messages import ITEM_NOT_FOUND, MEMBER_NOT_FOUND, NO_ITEMS, NO_MEMBERS
from .models.circulation import CirculationOutcome, CirculationResult
from .models.item import LibraryItem
from .models.member import LibraryMember

logger = logging.getLogger(__name__)


class Library:
    """In-memory catalogue of items and the members who borrow them."""

    def __init__(self) -> None:
        self._items: dict[str, LibraryItem] = {}
        self._members: dict[str, LibraryMember] = {}

    # === Registration ===

    def add_item(self, item: LibraryItem) -> None:
        """
        Register an item.

        Raises:
            DuplicateError: If an item with the same id is already registered
        """
        if self.find_item_by_id(item.id) is not None:
            raise DuplicateError(f"Duplicate item id: {item.id}")
        self._items[item.id] = item
        logger.debug("Registered %s %s", item.kind_name, item.id)

    def add_items(self, items: Iterable[LibraryItem]) -> None:
        """Register several items in order, stopping at the first duplicate."""
        for item in items:
            self.add_item(item)

    def add_member(self, member: LibraryMember) -> None:
        """
        Register a member.

        Raises:
            DuplicateError: If a member with the same id is already registered
        """
        if self.find_member_by_id(member.id) is not None:
            raise DuplicateError(f"Duplicate member id: {member.id}")
        self._members[member.id] = member
        logger.debug("Registered member %s", member.id)

    # === Lookup ===

    def find_item_by_id(self, item_id: str) -> LibraryItem | None:
        return self._items.get(item_id)

    def find_member_by_id(self, member_id: str) -> LibraryMember | None:
        return self._members.get(member_id)

    def list_items(self) -> list[LibraryItem]:
        """Registered items in registration order."""
        return list(self._items.values())

    def list_members(self) -> list[LibraryMember]:
        """Registered members in registration order."""
        return list(self._members.values())

    # === Circulation (string API) ===

    def borrow_item(self, member_id: str, item_id: str) -> str:
        member = self.find_member_by_id(member_id)
        if member is None:
            return MEMBER_NOT_FOUND
        item = self.find_item_by_id(item_id)
        if item is None:
            return ITEM_NOT_FOUND
        return member.borrow_item(item)

    def return_item(self, member_id: str, item_id: str) -> str:
        member = self.find_member_by_id(member_id)
        if member is None:
            return MEMBER_NOT_FOUND
        if self.find_item_by_id(item_id) is None:
            return ITEM_NOT_FOUND
        return member.return_item(item_id)

    # === Circulation (structured API) ===

    def checkout(self, member_id: str, item_id: str) -> CirculationResult:
        """Borrow like ``borrow_item`` but classify the outcome."""
        outcome = self._classify(member_id, item_id)
        if outcome is None:
            item = self._items[item_id]
            outcome = (
                CirculationOutcome.BORROWED
                if item.is_available
                else CirculationOutcome.ITEM_UNAVAILABLE
            )
        message = self.borrow_item(member_id, item_id)
        return CirculationResult(
            outcome=outcome, message=message, member_id=member_id, item_id=item_id
        )

    def checkin(self, member_id: str, item_id: str) -> CirculationResult:
        """Return like ``return_item`` but classify the outcome."""
        outcome = self._classify(member_id, item_id)
        if outcome is None:
            member = self._members[member_id]
            outcome = (
                CirculationOutcome.RETURNED
                if item_id in member.borrowed_item_ids
                else CirculationOutcome.NOT_BORROWED
            )
        message = self.return_item(member_id, item_id)
        return CirculationResult(
            outcome=outcome, message=message, member_id=member_id, item_id=item_id
        )

    def _classify(self, member_id: str, item_id: str) -> CirculationOutcome | None:
        """Lookup failure for a request, or None if both ids resolve."""
        if member_id not in self._members:
            return CirculationOutcome.MEMBER_NOT_FOUND
        if item_id not in self._items:
            return CirculationOutcome.ITEM_NOT_FOUND
        return None

    # === Reporting ===

    def get_library_summary(self) -> str:
        items_summary = (
            "\n".join(item.get_details() for item in self._items.values())
            if self._items
            else NO_ITEMS
        )
        members_summary = (
            "\n".join(f"Member: {m.name} ({m.id})" for m in self._members.values())
            if self._members
            else NO_MEMBERS
        )
        return f"=== Items ===\n{items_summary}\n\n=== Members ===\n{members_summary}"
