"""Unit tests for the Book kinds and their delivery behaviour."""

import pytest

from bookstore.domain.exceptions import NotForSaleError, OutOfStockError, ValidationError
from bookstore.domain.model.book import Book, DemoBook, EBook, PaperBook
from bookstore.domain.model.delivery import DeliveryChannel
from bookstore.domain.model.value_objects import Isbn, Money


def _paper(stock: int = 3) -> PaperBook:
    return PaperBook(
        isbn="111", title="Effective C++", author="Scott Meyers",
        year=2018, price=Money.of("45.0"), stock=stock,
    )


def _ebook() -> EBook:
    return EBook(
        isbn="222", title="Deep Learning", author="Ian Goodfellow",
        year=2016, price=Money.of("35.0"), file_format="epub",
    )


def _demo() -> DemoBook:
    return DemoBook(isbn="333", title="Ancient Manuscript", author="Unknown", year=1800)


class TestBookConstruction:

    def test_book_is_abstract(self):
        with pytest.raises(TypeError):
            Book(isbn="1", title="X", author="Y", year=2000, price=Money.of(1))

    def test_string_isbn_coerced(self):
        assert _paper().isbn == Isbn("111")

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError, match="title is required"):
            EBook(isbn="9", title=" ", author="A", year=2000, price=Money.of(1))

    def test_non_money_price_rejected(self):
        with pytest.raises(ValidationError, match="price must be Money"):
            EBook(isbn="9", title="T", author="A", year=2000, price=10.0)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="Stock cannot be negative"):
            _paper(stock=-1)

    def test_demo_book_is_free(self):
        assert _demo().price == Money.of(0)

    def test_demo_book_with_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot carry a price"):
            DemoBook(isbn="9", title="T", author="A", year=1900, price=Money.of(5))

    def test_kinds(self):
        assert _paper().kind == "paper"
        assert _ebook().kind == "ebook"
        assert _demo().kind == "demo"

    @pytest.mark.parametrize("field, value", [
        ("isbn", Isbn("999")), ("title", "Other"), ("year", 1900), ("price", Money.of(1)),
    ])
    def test_identity_fields_are_read_only(self, field, value):
        book = _paper()
        with pytest.raises(AttributeError, match=f"Book.{field} cannot be changed"):
            setattr(book, field, value)
        assert book.isbn == Isbn("111")

    def test_age(self):
        assert _demo().age(2024) == 224
        assert _paper().age(2018) == 0


class TestPaperBook:

    @pytest.mark.parametrize("qty, expected", [(1, True), (3, True), (4, False)])
    def test_available_iff_enough_stock(self, qty, expected):
        assert _paper(stock=3).available(qty) is expected

    def test_deliver_decrements_stock(self):
        book = _paper(stock=3)
        book.deliver("customer@gmail.com", "221B Baker Street", 2)
        assert book.stock == 1

    def test_deliver_ships_to_address(self):
        delivery = _paper().deliver("customer@gmail.com", "221B Baker Street", 2)
        assert delivery.channel is DeliveryChannel.SHIPPED
        assert delivery.recipient == "221B Baker Street"
        assert delivery.quantity == 2
        assert str(delivery) == "Shipped 'Effective C++' to 221B Baker Street"

    def test_deliver_all_stock(self):
        book = _paper(stock=3)
        book.deliver("", "Somewhere", 3)
        assert book.stock == 0
        assert book.available(1) is False

    def test_deliver_more_than_stock_fails_without_mutation(self):
        book = _paper(stock=3)
        with pytest.raises(OutOfStockError, match="Out of stock: Effective C\\+\\+"):
            book.deliver("", "Somewhere", 4)
        assert book.stock == 3

    def test_non_positive_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _paper().available(0)
        with pytest.raises(ValidationError, match="must be positive"):
            _paper().deliver("", "Somewhere", -1)


class TestEBook:

    def test_always_available(self):
        assert _ebook().available(1000) is True

    def test_deliver_emails_recipient(self):
        delivery = _ebook().deliver("reader@mail.com", "", 1)
        assert delivery.channel is DeliveryChannel.EMAILED
        assert delivery.recipient == "reader@mail.com"
        assert delivery.file_format == "epub"
        assert str(delivery) == "Emailed 'Deep Learning' (epub) to reader@mail.com"

    def test_free_ebook_allowed(self):
        book = EBook(isbn="9", title="Free", author="A", year=2020, price=Money.of(0))
        assert book.price.is_zero


class TestDemoBook:

    @pytest.mark.parametrize("qty", [1, 5, 100])
    def test_never_available(self, qty):
        assert _demo().available(qty) is False

    def test_deliver_always_fails(self):
        with pytest.raises(NotForSaleError, match="not for sale"):
            _demo().deliver("test@test.com", "Some Address", 1)
