"""Book hierarchy — the sellable items held by the store.

Every kind of book answers the same two questions: can *n* copies be
handed over right now (``available``), and hand them over (``deliver``).
The Store only ever talks to that contract, so adding a new kind of
book never touches the purchase logic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

from bookstore.domain.exceptions import NotForSaleError, OutOfStockError, ValidationError
from bookstore.domain.model.delivery import Delivery, DeliveryChannel
from bookstore.domain.model.value_objects import Isbn, Money, Quantity

_IDENTITY_FIELDS = frozenset({"isbn", "title", "author", "year", "price"})


@dataclass
class Book(ABC):
    """Abstract base for every catalog entry.

    Identity fields (``isbn``, ``title``, ``author``, ``year``, ``price``)
    are fixed once the book is created; reassigning one raises
    AttributeError.  Only variant-specific state such as paper stock
    changes afterwards, and only through ``deliver``.
    """

    KIND: ClassVar[str]

    isbn: Isbn
    title: str
    author: str
    year: int
    price: Money

    def __post_init__(self) -> None:
        if isinstance(self.isbn, str):
            object.__setattr__(self, "isbn", Isbn(self.isbn))
        if not self.title or not self.title.strip():
            raise ValidationError("Book title is required")
        if isinstance(self.year, bool) or not isinstance(self.year, int):
            raise ValidationError(
                f"Publication year must be an integer, got {type(self.year).__name__}"
            )
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Book price must be Money, got {type(self.price).__name__}"
            )

    def __setattr__(self, name: str, value: object) -> None:
        if name in _IDENTITY_FIELDS and name in self.__dict__:
            raise AttributeError(f"Book.{name} cannot be changed")
        super().__setattr__(name, value)

    @property
    def kind(self) -> str:
        return type(self).KIND

    def age(self, current_year: int) -> int:
        return current_year - self.year

    @abstractmethod
    def available(self, quantity: int) -> bool:
        """Return True if *quantity* copies could be delivered right now."""

    @abstractmethod
    def deliver(self, email: str, address: str, quantity: int) -> Delivery:
        """Hand *quantity* copies over to the buyer.

        Raises a FulfillmentError subclass, leaving the book untouched,
        when delivery is impossible.
        """


@dataclass
class PaperBook(Book):
    """A printed book with a finite number of copies on the shelf."""

    KIND = "paper"

    stock: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.stock, bool) or not isinstance(self.stock, int):
            raise ValidationError(
                f"Stock must be an integer, got {type(self.stock).__name__}"
            )
        if self.stock < 0:
            raise ValidationError("Stock cannot be negative")

    def available(self, quantity: int) -> bool:
        return self.stock >= Quantity(quantity).value

    def deliver(self, email: str, address: str, quantity: int) -> Delivery:
        qty = Quantity(quantity).value
        if qty > self.stock:
            raise OutOfStockError(
                f"Out of stock: {self.title} (need {qty}, have {self.stock})"
            )
        self.stock -= qty
        return Delivery(
            isbn=str(self.isbn),
            title=self.title,
            channel=DeliveryChannel.SHIPPED,
            recipient=address,
            quantity=qty,
        )


@dataclass
class EBook(Book):
    """A downloadable book; never runs out."""

    KIND = "ebook"

    file_format: str = "epub"

    def available(self, quantity: int) -> bool:
        Quantity(quantity)
        return True

    def deliver(self, email: str, address: str, quantity: int) -> Delivery:
        qty = Quantity(quantity).value
        return Delivery(
            isbn=str(self.isbn),
            title=self.title,
            channel=DeliveryChannel.EMAILED,
            recipient=email,
            quantity=qty,
            file_format=self.file_format,
        )


@dataclass
class DemoBook(Book):
    """A display copy. Listed in the catalog, never sold."""

    KIND = "demo"

    price: Money = field(default_factory=lambda: Money.of(0))

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.price.is_zero:
            raise ValidationError("Demo books cannot carry a price")

    def available(self, quantity: int) -> bool:
        Quantity(quantity)
        return False

    def deliver(self, email: str, address: str, quantity: int) -> Delivery:
        raise NotForSaleError(f"Demo book '{self.title}' not for sale")
