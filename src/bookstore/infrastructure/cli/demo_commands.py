"""The ``demo`` command — walks through a typical day at the store.

Buys a paper book, buys an e-book, tries to buy a demo copy, then
purges books older than the age limit.  Errors are reported and the
walkthrough carries on.
"""

from __future__ import annotations

import click

from bookstore.application.buy_book import BuyBookHandler
from bookstore.application.purge_books import PurgeOldBooksHandler
from bookstore.domain.exceptions import DomainException
from bookstore.infrastructure.bootstrap import DEFAULT_AGE_LIMIT, store
from bookstore.infrastructure.cli.book_commands import echo_removed

DEMO_YEAR = 2024

_PURCHASES = [
    ("PaperBook", "111", 2, "customer@gmail.com", "221B Baker Street"),
    ("EBook", "222", 1, "reader@mail.com", ""),
    ("DemoBook", "333", 1, "test@test.com", "Some Address"),
]


@click.command("demo")
@click.option(
    "--year", type=int, default=DEMO_YEAR, show_default=True,
    help="Reference year used for purging.",
)
@click.option(
    "--age-limit", type=int, default=DEFAULT_AGE_LIMIT, show_default=True,
    help="Books older than this many years are removed.",
)
def demo(year: int, age_limit: int) -> None:
    """Run the demo scenario against a freshly seeded catalog."""
    s = store()
    buy = BuyBookHandler(s)

    for label, isbn, quantity, email, address in _PURCHASES:
        click.echo(f"Quantum book store: Buying {label}...")
        try:
            purchase = buy.handle(isbn, quantity, email, address)
        except DomainException as exc:
            click.echo(f"Quantum book store error: {exc}")
            continue
        click.echo(f"Quantum book store: {purchase.delivery}")
        click.echo(f"Quantum book store: Paid {purchase.total}")

    try:
        removed = PurgeOldBooksHandler(s).handle(current_year=year, age_limit=age_limit)
    except DomainException as exc:
        click.echo(f"Quantum book store error: {exc}")
        return
    echo_removed(removed)
