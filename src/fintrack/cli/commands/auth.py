"""Session token commands."""

import click

from fintrack.storage.base import AUTH_TOKEN_KEY


@click.command("login")
@click.option(
    "--token",
    prompt=True,
    hide_input=True,
    help="Bearer token issued by the transactions service",
)
@click.pass_context
def login(ctx, token: str):
    """Store a bearer token sent with every request."""
    token = token.strip()
    if not token:
        click.echo("Error: Token must not be empty", err=True)
        ctx.exit(1)
    ctx.obj["storage"].set(AUTH_TOKEN_KEY, token)
    click.echo("Token saved.")


@click.command("logout")
@click.pass_context
def logout(ctx):
    """Forget the stored bearer token."""
    ctx.obj["storage"].delete(AUTH_TOKEN_KEY)
    click.echo("Token removed.")


def register_commands(cli):
    """Register login and logout commands with main CLI."""
    cli.add_command(login)
    cli.add_command(logout)
