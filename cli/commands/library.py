import click
from typing import Optional
from catalog.sa.actions import LibraryActions
from ..utils import catalog_session, print_row

@click.group()
def library():
    """Manage Libraries"""
    pass

@library.command('list')
@click.option('--name', default=None, help='Only Libraries whose name contains this text')
@click.option('--active/--inactive', default=None, help='Filter on the active flag')
@click.option('--limit', default=None, type=int, help='Limit number of Libraries')
@click.option('--offset', default=None, type=int, help='Skip this many Libraries')
@click.pass_context
def list_libraries(ctx: click.Context, name: Optional[str], active: Optional[bool],
                   limit: Optional[int], offset: Optional[int]):
    """List Libraries in name order"""
    options = {'name': name, 'active': active, 'limit': limit, 'offset': offset}
    with catalog_session(ctx.obj.get('database_url')) as session:
        libraries = LibraryActions(session).all({k: v for k, v in options.items() if v is not None})
        if not libraries:
            click.echo(click.style("No Libraries found", fg='yellow'))
            return
        for row in libraries:
            status = "" if row.active else click.style(" (inactive)", fg='yellow')
            click.echo(click.style(f"{row.id:>4} ", fg='blue') +
                       click.style(row.name, fg='cyan') +
                       f" [{row.scope}]" + status)

@library.command('add')
@click.argument('name')
@click.argument('scope')
@click.option('--notes', default=None, help='Free text notes')
@click.option('--inactive', is_flag=True, help='Create the Library as inactive')
@click.pass_context
def add_library(ctx: click.Context, name: str, scope: str, notes: Optional[str], inactive: bool):
    """Create a Library

    Example:
        catalog library add "Personal Library" personal
    """
    with catalog_session(ctx.obj.get('database_url')) as session:
        row = LibraryActions(session).insert({
            'name': name, 'scope': scope, 'notes': notes, 'active': not inactive
        })
        click.echo(click.style("Created Library", fg='green'))
        print_row("ID", row.id)
        print_row("Name", row.name)
        print_row("Scope", row.scope)

@library.command('remove')
@click.argument('library_id', type=int)
@click.option('--force/--no-force', default=False, help='Skip confirmation prompt')
@click.pass_context
def remove_library(ctx: click.Context, library_id: int, force: bool):
    """Delete a Library and everything it owns"""
    with catalog_session(ctx.obj.get('database_url')) as session:
        actions = LibraryActions(session)
        row = actions.find(library_id)
        if not force and not click.confirm(f"Delete Library '{row.name}' and all of its contents?"):
            click.echo("Operation cancelled")
            return
        actions.remove(library_id)
        click.echo(click.style(f"Removed Library '{row.name}'", fg='green'))
