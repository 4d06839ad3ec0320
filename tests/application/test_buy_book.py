"""Integration tests for the BuyBook use case."""

import threading

import pytest

from bookstore.application.buy_book import BuyBookHandler
from bookstore.domain.exceptions import BookNotFoundError, BookUnavailableError
from bookstore.domain.model.store import Store
from bookstore.infrastructure.bootstrap import seed_catalog
from bookstore.infrastructure.bootstrap import store as seeded_store


class _BusyStore(Store):
    """Another buyer's e-book sale completes right after our first sale."""

    def __init__(self) -> None:
        super().__init__()
        self._other_buyer_waiting = True
        for book in seed_catalog():
            self.add(book)

    def sell(self, isbn, quantity, email, address):
        receipt = super().sell(isbn, quantity, email, address)
        if self._other_buyer_waiting:
            self._other_buyer_waiting = False
            other = threading.Thread(
                target=super().sell, args=("222", 1, "other@x.com", ""),
            )
            other.start()
            other.join()
        return receipt


class TestBuyBookHappyPath:

    def test_buy_paper_book(self):
        store = seeded_store()
        purchase = BuyBookHandler(store).handle(
            "111", 2, "customer@gmail.com", "221B Baker Street",
        )

        assert purchase.total == "$90.00"
        assert purchase.total_amount == "90.0"
        assert purchase.quantity == 2
        assert purchase.delivery == "Shipped 'Effective C++' to 221B Baker Street"
        assert store.get("111").stock == 1

    def test_buy_ebook(self):
        purchase = BuyBookHandler(seeded_store()).handle("222", 1, "reader@mail.com")

        assert purchase.total == "$35.00"
        assert purchase.delivery == "Emailed 'Deep Learning' (epub) to reader@mail.com"


class TestBuyBookValidation:

    def test_demo_book_rejected(self):
        with pytest.raises(BookUnavailableError):
            BuyBookHandler(seeded_store()).handle("333", 1, "test@test.com", "Some Address")

    def test_unknown_book_rejected(self):
        with pytest.raises(BookNotFoundError, match="not found"):
            BuyBookHandler(seeded_store()).handle("404", 1)


class TestBuyBookConcurrentSales:

    def test_result_belongs_to_our_own_sale(self):
        purchase = BuyBookHandler(_BusyStore()).handle(
            "111", 2, "customer@gmail.com", "221B Baker Street",
        )

        assert purchase.isbn == "111"
        assert purchase.quantity == 2
        assert purchase.total == "$90.00"
        assert purchase.delivery == "Shipped 'Effective C++' to 221B Baker Street"
