"""Console driver for the bookstore."""

import json
import logging
import sys

import typer

from .config import BookstoreSettings, get_settings
from .discovery import discover_variants
from .exceptions import BookstoreError
from .loader import dump_catalog, load_catalog
from .model import AudioBook, EBook, PaperBook, ShowcaseBook
from .store import Bookstore

app = typer.Typer(help="Quantum bookstore catalog and purchase console")

logger = logging.getLogger(__name__)


def setup_logging(settings: BookstoreSettings) -> None:
    """Configure logging for the console."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format=settings.log_format,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )
    logger.debug(f"Logging configured at {settings.log_level} level")


def _load_store(catalog: str) -> Bookstore:
    """Build a store seeded from a catalog file, exiting on bad input."""
    try:
        items = load_catalog(catalog)
    except BookstoreError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    store = Bookstore()
    for item in items:
        store.add(item)
    return store


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override the configured logging level.",
    ),
):
    """Quantum bookstore catalog and purchase console."""
    settings = get_settings()
    if log_level:
        settings.log_level = log_level
    setup_logging(settings)
    ctx.obj = settings


@app.command()
def demo(ctx: typer.Context):
    """Run the scripted scenario suite against a fresh store."""
    settings: BookstoreSettings = ctx.obj
    name = settings.store_name
    currency = settings.currency_symbol
    email = settings.default_email
    address = settings.default_address

    store = Bookstore()

    def attempt(isbn: str, quantity: int) -> None:
        # Failures are reported and the run carries on
        try:
            amount = store.buy(isbn, quantity, email, address)
            typer.echo(f"Purchase amount: {currency}{amount}")
        except BookstoreError as e:
            typer.echo(f"{name}: Error - {e}")

    typer.echo(f"=== {name} test suite ===\n")

    typer.echo("1. Adding books:")
    store.add(PaperBook(identifier="978-0134685991", title="Effective Java",
                        author="Joshua Bloch", year=2017, unit_price="45.99", stock=10))
    store.add(PaperBook(identifier="978-0596009205", title="Head First Design Patterns",
                        author="Eric Freeman", year=2004, unit_price="39.99", stock=5))
    store.add(EBook(identifier="978-0321356680", title="Effective Java Digital",
                    author="Joshua Bloch", year=2017, unit_price="35.99", file_type="PDF"))
    store.add(EBook(identifier="978-0134757599", title="Java Concurrency in Practice",
                    author="Brian Goetz", year=2006, unit_price="42.99", file_type="EPUB"))
    store.add(ShowcaseBook(identifier="978-0134494166", title="Clean Code Demo",
                           author="Robert Martin", year=2008, unit_price="0.00"))
    for line in store.display_inventory():
        typer.echo(f"  {line}")

    typer.echo("\n2. Book purchases:")
    attempt("978-0134685991", 2)
    attempt("978-0321356680", 1)

    typer.echo("\n3. Error handling:")
    attempt("978-0134494166", 1)
    attempt("978-0596009205", 10)
    attempt("978-9999999999", 1)

    typer.echo("\n4. Outdated book removal:")
    removed = store.remove_outdated(settings.outdated_years)
    typer.echo(f"{name}: Removed {len(removed)} outdated books")

    typer.echo("\n5. Final inventory:")
    for line in store.display_inventory():
        typer.echo(f"  {line}")

    typer.echo("\n6. Extensibility:")
    store.add(AudioBook(identifier="978-1234567890", title="The Art of Programming",
                        author="Donald Knuth", year=2020, unit_price="29.99",
                        audio_format="MP3", duration_minutes=480))
    attempt("978-1234567890", 1)

    typer.echo(f"\n{name}: Test suite completed successfully!")


@app.command()
def inventory(
    catalog: str = typer.Option(..., "--catalog", "-c", help="Catalog JSON file to load."),
    as_json: bool = typer.Option(False, "--json", help="Print the catalog as JSON."),
):
    """Show the contents of a catalog file."""
    store = _load_store(catalog)

    if as_json:
        typer.echo(json.dumps(dump_catalog(store.list_all()), indent=2))
        return

    for line in store.display_inventory():
        typer.echo(line)
    typer.echo(f"{len(store)} books in catalog", err=True)


@app.command()
def buy(
    ctx: typer.Context,
    isbn: str = typer.Argument(..., help="ISBN of the book to buy."),
    catalog: str = typer.Option(..., "--catalog", "-c", help="Catalog JSON file to load."),
    quantity: int = typer.Option(1, "--quantity", "-q", help="Number of copies."),
    email: str | None = typer.Option(None, "--email", "-e", help="Contact email."),
    address: str | None = typer.Option(None, "--address", "-a", help="Shipping address."),
):
    """Buy copies of a book from a catalog file."""
    settings: BookstoreSettings = ctx.obj
    store = _load_store(catalog)

    try:
        amount = store.buy(
            isbn,
            quantity,
            email or settings.default_email,
            address or settings.default_address,
        )
    except BookstoreError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Purchase amount: {settings.currency_symbol}{amount}")


@app.command()
def prune(
    ctx: typer.Context,
    catalog: str = typer.Option(..., "--catalog", "-c", help="Catalog JSON file to load."),
    years: int | None = typer.Option(
        None,
        "--years",
        "-y",
        help="Age threshold in years. Defaults to the configured value.",
    ),
):
    """Remove books older than the age threshold from a catalog file."""
    settings: BookstoreSettings = ctx.obj
    store = _load_store(catalog)

    threshold = settings.outdated_years if years is None else years
    removed = store.remove_outdated(threshold)
    for item in removed:
        typer.echo(f"Removed: {item}")
    typer.echo(f"Removed {len(removed)} outdated books, {len(store)} remaining")


@app.command()
def variants():
    """List the registered book variants."""
    for kind, variant in sorted(discover_variants().items()):
        typer.echo(f"{kind}: {variant.label} ({variant.__module__}.{variant.__name__})")


if __name__ == "__main__":
    app()
