# cli/main.py
import click
from .commands.db import db
from .commands.library import library
from .commands.user import user
from .utils import configure_logging

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None, help='Database connection string')
@click.option('--verbose/--no-verbose', default=False, help='Log catalog activity')
@click.pass_context
def cli(ctx: click.Context, database_url: str, verbose: bool):
    """Library Catalog CLI"""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['database_url'] = database_url

cli.add_command(db)
cli.add_command(library)
cli.add_command(user)

def main():
    """Entry point for the CLI"""
    cli(obj={})

if __name__ == '__main__':
    main()
