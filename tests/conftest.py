"""Test configuration and fixtures for the library catalogue.

Fixtures provide:
1. Configuration isolation - no LIBRARY_CATALOGUE_* variables or cached config leak between tests
2. Ready-made items and members matching the demo scenario
3. A populated library for circulation tests
4. Restoration of root logging for tests that reconfigure it
"""

import logging
import os
from collections.abc import Generator

import pytest

from library_catalogue.config import reset_config
from library_catalogue.library import Library
from library_catalogue.models.item import DVD, Book, Magazine
from library_catalogue.models.member import LibraryMember

# === Configuration Fixtures ===


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Generator[None, None, None]:
    """Remove LIBRARY_CATALOGUE_* variables and any .env file from view."""
    for key in list(os.environ):
        if key.startswith("LIBRARY_CATALOGUE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Drop handlers added by configure_logging and restore the root level."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


# === Entity Fixtures ===


@pytest.fixture
def book() -> Book:
    return Book(id="B001", title="Harry Potter", author="J.K. Rowling")


@pytest.fixture
def magazine() -> Magazine:
    return Magazine(id="M001", title="National Geographic", issue_date="2024-03")


@pytest.fixture
def dvd() -> DVD:
    return DVD(id="D001", title="Inception", duration=148)


@pytest.fixture
def alice() -> LibraryMember:
    return LibraryMember(id="MEM001", name="Alice")


@pytest.fixture
def fern() -> LibraryMember:
    return LibraryMember(id="MEM002", name="fern")


@pytest.fixture
def library(book, magazine, dvd, alice, fern) -> Library:
    """Library holding one item of each kind and two members."""
    lib = Library()
    lib.add_items([book, magazine, dvd])
    lib.add_member(alice)
    lib.add_member(fern)
    return lib
