import click

from bookstore.infrastructure.cli.book_commands import book_buy, book_purge, catalog_show
from bookstore.infrastructure.cli.demo_commands import demo
from bookstore.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--verbose", "-v", is_flag=True, envvar="BOOKSTORE_VERBOSE",
    help="Show debug logging.",
)
@click.option(
    "--log-json", is_flag=True, envvar="BOOKSTORE_LOG_JSON",
    help="Emit logs as JSON lines.",
)
def cli(verbose: bool, log_json: bool) -> None:
    """Quantum book store — catalog, purchases and purging."""
    configure_logging(verbose=verbose, log_json=log_json)


# Register subcommands
cli.add_command(book_buy)
cli.add_command(book_purge)
cli.add_command(catalog_show)
cli.add_command(demo)
