# cli/utils.py
import logging
from contextlib import contextmanager
from typing import Iterator, Optional
import click
from sqlalchemy.orm import Session

from catalog.errors import CatalogError
from catalog.sa.database import Database

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


@contextmanager
def catalog_session(database_url: Optional[str] = None) -> Iterator[Session]:
    """Open a session for one command; catalog errors end the command with
    a red message and exit status 1."""
    db = Database(database_url)
    try:
        with db.get_db() as session:
            yield session
    except CatalogError as error:
        logger.info(f"Command failed: {error}")
        click.echo(click.style(f"{type(error).__name__}: {error.message}", fg='red'), err=True)
        raise click.exceptions.Exit(1)
    finally:
        db.dispose()


def print_row(label: str, value: object) -> None:
    click.echo(click.style(f"{label}: ", fg='blue') + click.style(str(value), fg='cyan'))
