"""
Circulation results for the library catalogue.

The string API (``Library.borrow_item`` / ``Library.return_item``) reports
failures as sentinel text. ``CirculationResult`` carries the same text
together with a machine-readable outcome, so callers can branch on
``result.outcome`` instead of comparing messages.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CirculationOutcome(str, Enum):
    """What happened to a borrow or return request."""

    BORROWED = "borrowed"
    RETURNED = "returned"
    ITEM_UNAVAILABLE = "item_unavailable"
    MEMBER_NOT_FOUND = "member_not_found"
    ITEM_NOT_FOUND = "item_not_found"
    NOT_BORROWED = "not_borrowed"


class CirculationResult(BaseModel):
    """Outcome of a single checkout or checkin."""

    outcome: CirculationOutcome = Field(
        ...,
        description="Classification of the request",
    )

    message: str = Field(
        ...,
        description="Text the string API returns for the same request",
        examples=["Book Harry Potter borrowed by Alice", "Item not available"],
    )

    member_id: str = Field(..., description="Member the request was made for")

    item_id: str = Field(..., description="Item the request was made for")

    @property
    def ok(self) -> bool:
        """True if the item changed hands."""
        return self.outcome in (CirculationOutcome.BORROWED, CirculationOutcome.RETURNED)

    model_config = ConfigDict(frozen=True)
