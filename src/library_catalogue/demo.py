"""Demo harness for the library catalogue.

Builds a one-book library with two members and walks through a borrow that
succeeds, a borrow that is refused, the members' lists and a return. Run it
with ``library-catalogue-demo`` or ``python -m library_catalogue.demo``.
"""

import logging
import sys

from .config import get_config
from .library import Library
from .logging_config import configure_logging
from .models.item import Book
from .models.member import LibraryMember

logger = logging.getLogger(__name__)


def build_demo_library() -> Library:
    """Library with book B001 and members MEM001 (Alice) and MEM002 (fern)."""
    library = Library()
    library.add_item(Book(id="B001", title="Harry Potter", author="J.K. Rowling"))
    library.add_member(LibraryMember(id="MEM001", name="Alice"))
    library.add_member(LibraryMember(id="MEM002", name="fern"))
    return library


def run_demo(library: Library | None = None) -> list[str]:
    """Run the scenario and return every line it produced, in order."""
    library = library or build_demo_library()
    alice = library.find_member_by_id("MEM001")
    fern = library.find_member_by_id("MEM002")
    if alice is None or fern is None:
        raise LookupError("Demo library must contain members MEM001 and MEM002")

    return [
        library.borrow_item("MEM001", "B001"),
        library.borrow_item("MEM002", "B001"),
        alice.list_borrowed_items(),
        fern.list_borrowed_items(),
        library.return_item("MEM001", "B001"),
    ]


def main() -> None:
    """Console entry point."""
    config = get_config()
    configure_logging(config)
    logger.info("Running %s demo", config.library_name)

    library = build_demo_library()
    try:
        for line in run_demo(library):
            print(line)
    except Exception:
        logger.exception("Demo failed")
        sys.exit(1)

    print()
    print(library.get_library_summary())


if __name__ == "__main__":
    main()
