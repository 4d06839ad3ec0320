"""Delivery record — what a successful fulfillment produced."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bookstore.domain.model.value_objects import Money


class DeliveryChannel(Enum):
    SHIPPED = "SHIPPED"
    EMAILED = "EMAILED"


@dataclass(frozen=True)
class Delivery:
    """Proof that copies of a book reached (or left for) a recipient.

    ``recipient`` is the postal address for shipped books and the email
    address for e-mailed ones.
    """

    isbn: str
    title: str
    channel: DeliveryChannel
    recipient: str
    quantity: int
    file_format: str | None = None

    def __str__(self) -> str:
        if self.channel is DeliveryChannel.SHIPPED:
            return f"Shipped '{self.title}' to {self.recipient}"
        return f"Emailed '{self.title}' ({self.file_format}) to {self.recipient}"


@dataclass(frozen=True)
class Receipt:
    """What a single sale produced: the amount charged and its delivery."""

    total: Money
    delivery: Delivery
