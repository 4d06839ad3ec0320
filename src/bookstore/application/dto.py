"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BookSpec:
    """Input: everything needed to put a new book on the catalog.

    ``kind`` is one of ``"paper"``, ``"ebook"`` or ``"demo"``.  ``stock``
    only applies to paper books and ``file_format`` only to e-books.
    """

    kind: str
    isbn: str
    title: str
    author: str
    year: int
    price: str = "0"
    stock: int = 0
    file_format: str = "epub"


@dataclass(frozen=True)
class BookDTO:
    """Output: a single catalog entry as displayed to the user."""

    isbn: str
    kind: str
    title: str
    author: str
    year: int
    price: str  # formatted, e.g. "$45.00"
    stock: int | None = None
    file_format: str | None = None


@dataclass(frozen=True)
class PurchaseDTO:
    """Output: the result of a successful purchase."""

    isbn: str
    quantity: int
    total: str  # formatted, e.g. "$90.00"
    total_amount: str  # raw decimal, e.g. "90.0"
    delivery: str  # human notice, e.g. "Shipped 'X' to Y"
