"""CLI commands for the Store aggregate.

Each command runs against a freshly seeded demo catalog.
"""

from __future__ import annotations

import click

from bookstore.application.buy_book import BuyBookHandler
from bookstore.application.purge_books import PurgeOldBooksHandler
from bookstore.application.show_catalog import ShowCatalogHandler
from bookstore.domain.exceptions import DomainException
from bookstore.infrastructure.bootstrap import DEFAULT_AGE_LIMIT, current_year, store


@click.command("catalog")
def catalog_show() -> None:
    """List every book in the catalog."""
    books = ShowCatalogHandler(store()).handle()

    if not books:
        click.echo("No books found.")
        return

    click.echo(f"{'ISBN':<8} {'Kind':<6} {'Title':<22} {'Year':>5} {'Price':>9} {'Stock':>6}")
    click.echo("-" * 61)
    for b in books:
        stock = "-" if b.stock is None else str(b.stock)
        click.echo(
            f"{b.isbn:<8} {b.kind:<6} {b.title:<22} {b.year:>5} {b.price:>9} {stock:>6}"
        )


@click.command("buy")
@click.option("--isbn", required=True, help="ISBN of the book.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Copies to buy.")
@click.option("--email", default="", help="Where e-books are sent.")
@click.option("--address", default="", help="Where paper books are shipped.")
def book_buy(isbn: str, quantity: int, email: str, address: str) -> None:
    """Buy copies of a book."""
    handler = BuyBookHandler(store())

    try:
        purchase = handler.handle(isbn=isbn, quantity=quantity, email=email, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Quantum book store: {purchase.delivery}")
    click.echo(f"Quantum book store: Paid {purchase.total}")


@click.command("purge")
@click.option(
    "--year", "year", type=int, default=current_year, envvar="BOOKSTORE_CURRENT_YEAR",
    show_default="current year", help="Reference year for book age.",
)
@click.option(
    "--age-limit", type=int, default=DEFAULT_AGE_LIMIT, envvar="BOOKSTORE_AGE_LIMIT",
    show_default=True, help="Books older than this many years are removed.",
)
def book_purge(year: int, age_limit: int) -> None:
    """Remove outdated books from the catalog."""
    handler = PurgeOldBooksHandler(store())

    try:
        removed = handler.handle(current_year=year, age_limit=age_limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_removed(removed)


def echo_removed(removed: list[str]) -> None:
    if not removed:
        click.echo("Quantum book store: No outdated books found.")
        return
    click.echo("Quantum book store: Removed outdated books:")
    for i, isbn in enumerate(removed, start=1):
        click.echo(f"{i}-ISBN: {isbn}")
