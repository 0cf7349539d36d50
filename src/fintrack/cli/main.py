"""Main CLI entry point."""

import click

from fintrack.config import load_settings
from fintrack.domain.store import TransactionStore
from fintrack.gateway.client import TransactionGateway
from fintrack.logging_setup import configure_logging
from fintrack.storage.factories import create_sqlite_storage

# Import and register all commands at module level
from fintrack.cli.commands import auth, summary, transaction, transactions


@click.group()
@click.option(
    "--api-url",
    help="Base URL of the transactions API (overrides FINTRACK_API_URL)",
    envvar="FINTRACK_API_URL",
)
@click.option(
    "--state-path",
    type=click.Path(dir_okay=False),
    help="Path to local state file (overrides FINTRACK_STATE_PATH)",
    envvar="FINTRACK_STATE_PATH",
)
@click.option(
    "--timeout",
    type=float,
    help="Request timeout in seconds (overrides FINTRACK_TIMEOUT)",
    envvar="FINTRACK_TIMEOUT",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides FINTRACK_LOG_LEVEL)",
    envvar="FINTRACK_LOG_LEVEL",
)
@click.pass_context
def cli(
    ctx,
    api_url: str | None,
    state_path: str | None,
    timeout: float | None,
    log_level: str | None,
):
    """Fintrack - Personal finance tracking client.

    Tracks income and expenses stored by a remote transactions service and
    keeps a local copy to fall back on when the service is unreachable.
    """
    ctx.ensure_object(dict)

    # Set up services only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is None:
        return

    try:
        settings = load_settings(
            api_url=api_url,
            state_path=state_path,
            timeout=timeout,
            log_level=log_level,
        )
        configure_logging(settings.log_level)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    ctx.obj["settings"] = settings

    if "storage" not in ctx.obj:
        storage = create_sqlite_storage(state_path=settings.state_path)
        storage.connect()
        storage.initialize_schema()
        ctx.obj["storage"] = storage
        ctx.call_on_close(storage.disconnect)

    if "gateway" not in ctx.obj:
        ctx.obj["gateway"] = TransactionGateway(
            ctx.obj["storage"],
            base_url=settings.api_url,
            timeout=settings.timeout,
        )

    if "store" not in ctx.obj:
        ctx.obj["store"] = TransactionStore(ctx.obj["gateway"], ctx.obj["storage"])


# Register all commands
transactions.register_commands(cli)
transaction.register_commands(cli)
summary.register_commands(cli)
auth.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
