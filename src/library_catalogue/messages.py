"""Sentinel strings returned by circulation operations.

Callers of the string API detect failures by comparing against these values,
so the text must stay exactly as is.
"""

# Item level: every variant reports this, books or not.
ITEM_NOT_AVAILABLE = "Book not available"

# Member level
MEMBER_ITEM_NOT_AVAILABLE = "Item not available"
NOT_IN_BORROWED_LIST = "Item not found in member's borrowed list"
NO_BORROWED_ITEMS = "No borrowed items"

# Library level
MEMBER_NOT_FOUND = "Member not found"
ITEM_NOT_FOUND = "Item not found"
NO_ITEMS = "No items"
NO_MEMBERS = "No members"
