"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class BookNotFoundError(EntityNotFoundError):
    """No book with the given ISBN is held by the store."""

    def __init__(self, isbn: str) -> None:
        super().__init__(f"Book with ISBN '{isbn}' not found")
        self.isbn = isbn


class DuplicateBookError(DomainException):
    """A book with the same ISBN is already in the store."""

    def __init__(self, isbn: str) -> None:
        super().__init__(f"Book with ISBN '{isbn}' already exists")
        self.isbn = isbn


class BookUnavailableError(DomainException):
    """The book cannot satisfy the requested quantity right now."""

    def __init__(self, isbn: str, quantity: int) -> None:
        super().__init__(
            f"Book '{isbn}' unavailable for purchase (requested {quantity})"
        )
        self.isbn = isbn
        self.quantity = quantity


class FulfillmentError(DomainException):
    """Delivery of a book failed."""


class OutOfStockError(FulfillmentError):
    """Not enough paper copies left to ship."""


class NotForSaleError(FulfillmentError):
    """Demo copies are never delivered."""
