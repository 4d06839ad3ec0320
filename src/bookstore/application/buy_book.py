"""Application service: Buy Book use case.

Sells through the Store aggregate and turns the receipt (amount charged
plus the delivery it paid for) into a PurchaseDTO for display.
"""

from __future__ import annotations

from bookstore.application.dto import PurchaseDTO
from bookstore.domain.model.store import Store


class BuyBookHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(
        self,
        isbn: str,
        quantity: int,
        email: str = "",
        address: str = "",
    ) -> PurchaseDTO:
        """Buy *quantity* copies of the book with the given ISBN.

        Domain errors (not found, unavailable, fulfillment failures,
        invalid quantity) propagate to the caller unchanged.
        """
        receipt = self._store.sell(isbn, quantity, email, address)
        delivery = receipt.delivery

        return PurchaseDTO(
            isbn=delivery.isbn,
            quantity=delivery.quantity,
            total=str(receipt.total),
            total_amount=str(receipt.total.amount),
            delivery=str(delivery),
        )
