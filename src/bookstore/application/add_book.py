"""Application service: Add Book use case."""

from __future__ import annotations

from bookstore.application.dto import BookDTO, BookSpec
from bookstore.application.show_catalog import to_dto
from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.book import Book, DemoBook, EBook, PaperBook
from bookstore.domain.model.store import Store
from bookstore.domain.model.value_objects import Isbn, Money


class AddBookHandler:

    def __init__(self, store: Store) -> None:
        self._store = store

    def handle(self, spec: BookSpec) -> BookDTO:
        """Build the requested kind of book and add it to the store."""
        book = self._build(spec)
        self._store.add(book)
        return to_dto(book)

    @staticmethod
    def _build(spec: BookSpec) -> Book:
        kind = (spec.kind or "").strip().lower()
        isbn = Isbn(spec.isbn)
        title = spec.title.strip() if spec.title else spec.title

        if kind == PaperBook.KIND:
            return PaperBook(
                isbn=isbn,
                title=title,
                author=spec.author,
                year=spec.year,
                price=Money.of(spec.price),
                stock=spec.stock,
            )
        if kind == EBook.KIND:
            return EBook(
                isbn=isbn,
                title=title,
                author=spec.author,
                year=spec.year,
                price=Money.of(spec.price),
                file_format=spec.file_format,
            )
        if kind == DemoBook.KIND:
            return DemoBook(isbn=isbn, title=title, author=spec.author, year=spec.year)

        raise ValidationError(
            f"Unknown book kind '{spec.kind}' "
            f"(expected one of: {PaperBook.KIND}, {EBook.KIND}, {DemoBook.KIND})"
        )
