"""Composition root — builds a ready-to-use Store.

This is the only place in the codebase that knows which books the
demo catalog starts with.  Nothing is persisted: every call to
``store()`` returns a fresh, freshly seeded Store.
"""

from __future__ import annotations

from datetime import date

from bookstore.domain.model.book import Book, DemoBook, EBook, PaperBook
from bookstore.domain.model.store import Store
from bookstore.domain.model.value_objects import Money

DEFAULT_AGE_LIMIT = 100


def current_year() -> int:
    return date.today().year


def seed_catalog() -> list[Book]:
    return [
        PaperBook(
            isbn="111",
            title="Effective C++",
            author="Scott Meyers",
            year=2018,
            price=Money.of("45.0"),
            stock=3,
        ),
        EBook(
            isbn="222",
            title="Deep Learning",
            author="Ian Goodfellow",
            year=2016,
            price=Money.of("35.0"),
            file_format="epub",
        ),
        DemoBook(isbn="333", title="Ancient Manuscript", author="Unknown", year=1800),
    ]


def store() -> Store:
    s = Store()
    for book in seed_catalog():
        s.add(book)
    return s
