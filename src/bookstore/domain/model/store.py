"""Store aggregate — owns every book in the catalog.

The Store is the only way in or out for a book: books enter through
``add`` and leave through ``purge_old``.  Purchases go through the
book's own ``available``/``deliver`` contract; the Store never asks
which concrete kind of book it is holding.
"""

from __future__ import annotations

import threading

import structlog

from bookstore.domain.exceptions import (
    BookNotFoundError,
    BookUnavailableError,
    DuplicateBookError,
    FulfillmentError,
)
from bookstore.domain.model.book import Book
from bookstore.domain.model.delivery import Receipt
from bookstore.domain.model.value_objects import Isbn, Money, Quantity

log = structlog.get_logger(__name__)


class Store:
    """Aggregate root for the catalog.

    Invariants:
    - at most one book per ISBN
    - the availability check and the delivery of a purchase happen
      under the same lock, so no other caller can slip in between
    """

    def __init__(self) -> None:
        self._books: dict[Isbn, Book] = {}
        self._lock = threading.RLock()

    # --- Catalog maintenance --------------------------------------------------

    def add(self, book: Book) -> None:
        """Add a book, rejecting a second book with the same ISBN."""
        with self._lock:
            if book.isbn in self._books:
                log.warning("book.duplicate", isbn=str(book.isbn))
                raise DuplicateBookError(str(book.isbn))
            self._books[book.isbn] = book
        log.debug("book.added", isbn=str(book.isbn), kind=book.kind)

    def purge_old(self, current_year: int, age_limit: int) -> list[str]:
        """Remove every book older than *age_limit* years.

        A book goes when ``current_year - year`` is strictly greater than
        the limit.  Returns the removed ISBNs in catalog order.
        """
        with self._lock:
            removed = [
                isbn
                for isbn, book in self._books.items()
                if book.age(current_year) > age_limit
            ]
            for isbn in removed:
                del self._books[isbn]

        removed_keys = [str(isbn) for isbn in removed]
        log.info(
            "books.purged",
            current_year=current_year,
            age_limit=age_limit,
            removed=removed_keys,
        )
        return removed_keys

    # --- Lookup ---------------------------------------------------------------

    def get(self, isbn: str | Isbn) -> Book:
        """Return the live book for *isbn*; treat it as read-only."""
        key = _as_isbn(isbn)
        book = self._books.get(key)
        if book is None:
            raise BookNotFoundError(str(key))
        return book

    def list_all(self) -> list[Book]:
        return list(self._books.values())

    def __contains__(self, isbn: object) -> bool:
        if isinstance(isbn, str):
            if not isbn.strip():
                return False
            isbn = Isbn(isbn)
        return isbn in self._books

    def __len__(self) -> int:
        return len(self._books)

    # --- Purchase -------------------------------------------------------------

    def purchase(
        self,
        isbn: str | Isbn,
        quantity: int,
        email: str,
        address: str,
    ) -> Money:
        """Sell *quantity* copies and return the amount charged.

        See ``sell`` for the errors raised.
        """
        return self.sell(isbn, quantity, email, address).total

    def sell(
        self,
        isbn: str | Isbn,
        quantity: int,
        email: str,
        address: str,
    ) -> Receipt:
        """Sell *quantity* copies and return the charge with its delivery.

        Raises:
            ValidationError: quantity is not a positive integer.
            BookNotFoundError: no book with that ISBN.
            BookUnavailableError: the book cannot supply that many copies.
            FulfillmentError: delivery failed even though the book
                reported itself available.  Nothing is charged.
        """
        qty = Quantity(quantity).value
        key = _as_isbn(isbn)

        with self._lock:
            book = self.get(key)
            if not book.available(qty):
                log.info("purchase.rejected", isbn=str(key), quantity=qty)
                raise BookUnavailableError(str(key), qty)

            try:
                delivery = book.deliver(email, address, qty)
            except FulfillmentError:
                log.error("purchase.fulfillment_failed", isbn=str(key), quantity=qty)
                raise

            receipt = Receipt(total=book.price * qty, delivery=delivery)

        log.info(
            "book.purchased",
            isbn=str(key),
            quantity=qty,
            total=str(receipt.total.amount),
            channel=delivery.channel.value,
        )
        return receipt


def _as_isbn(isbn: str | Isbn) -> Isbn:
    return isbn if isinstance(isbn, Isbn) else Isbn(isbn)
