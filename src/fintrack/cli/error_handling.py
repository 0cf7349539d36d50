"""CLI error handling helpers."""

import click

from fintrack.domain.errors import DomainError
from fintrack.domain.store import TransactionStore
from fintrack.gateway.errors import AuthError, GatewayError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_gateway_error(ctx: click.Context, error: GatewayError) -> None:
    """Render a gateway error and exit with failure."""
    if isinstance(error, AuthError):
        click.echo(f"Error: {error}. Run 'fintrack login --token <token>'.", err=True)
    else:
        click.echo(f"Error: {error.server_message or error}", err=True)
    ctx.exit(1)


def report_store_error(ctx: click.Context, store: TransactionStore, fatal: bool) -> None:
    """Render the store's error flag, if set.

    A fatal error exits with failure; otherwise it is shown as a warning
    and the command continues with whatever state the store fell back to.
    """
    if not store.has_error:
        return
    if fatal:
        click.echo(f"Error: {store.error}", err=True)
        ctx.exit(1)
    click.echo(f"Warning: {store.error}", err=True)
