"""Application service: Show Catalog query."""

from __future__ import annotations

from bookstore.application.dto import BookDTO
from bookstore.domain.model.book import Book, EBook, PaperBook
from bookstore.domain.model.store import Store


class ShowCatalogHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self) -> list[BookDTO]:
        return [to_dto(book) for book in self._store.list_all()]


def to_dto(book: Book) -> BookDTO:
    return BookDTO(
        isbn=str(book.isbn),
        kind=book.kind,
        title=book.title,
        author=book.author,
        year=book.year,
        price=str(book.price),
        stock=book.stock if isinstance(book, PaperBook) else None,
        file_format=book.file_format if isinstance(book, EBook) else None,
    )
