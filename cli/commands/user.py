import click
from typing import Optional
from catalog.sa.actions import UserActions
from ..utils import catalog_session, print_row

@click.group()
def user():
    """Manage Users"""
    pass

@user.command('list')
@click.option('--username', default=None, help='Only Users whose username contains this text')
@click.option('--active/--inactive', default=None, help='Filter on the active flag')
@click.pass_context
def list_users(ctx: click.Context, username: Optional[str], active: Optional[bool]):
    """List Users in username order"""
    options = {'username': username, 'active': active}
    with catalog_session(ctx.obj.get('database_url')) as session:
        users = UserActions(session).all({k: v for k, v in options.items() if v is not None})
        if not users:
            click.echo(click.style("No Users found", fg='yellow'))
            return
        for row in users:
            click.echo(click.style(f"{row.id:>4} ", fg='blue') +
                       click.style(row.username, fg='cyan') +
                       f" {row.name} [{row.scope}]")

@user.command('add')
@click.argument('username')
@click.option('--name', required=True, help='Display name')
@click.option('--scope', default='', help='Space separated authorization scopes')
@click.password_option(help='Password for the new User')
@click.pass_context
def add_user(ctx: click.Context, username: str, name: str, scope: str, password: str):
    """Create a User

    Example:
        catalog user add fred --name "Fred Flintstone" --scope "personal:admin"
    """
    with catalog_session(ctx.obj.get('database_url')) as session:
        row = UserActions(session).insert({
            'username': username, 'name': name, 'scope': scope, 'password': password
        })
        click.echo(click.style("Created User", fg='green'))
        print_row("ID", row.id)
        print_row("Username", row.username)
