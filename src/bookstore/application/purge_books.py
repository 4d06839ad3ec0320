"""Application service: Purge Old Books use case."""

from __future__ import annotations

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.store import Store


class PurgeOldBooksHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self, current_year: int, age_limit: int) -> list[str]:
        """Remove books older than *age_limit* and return their ISBNs."""
        if age_limit < 0:
            raise ValidationError("Age limit cannot be negative")
        return self._store.purge_old(current_year, age_limit)
