"""Summary and statistics commands."""

import click

from fintrack.cli.date_filters import (
    date_filter_options,
    pop_period_flags,
    resolve_cli_date_range,
)
from fintrack.cli.error_handling import (
    handle_domain_error,
    handle_gateway_error,
    report_store_error,
)
from fintrack.cli.formatting import format_amount
from fintrack.domain import aggregates
from fintrack.domain.errors import ValidationError
from fintrack.gateway.errors import GatewayError


def _echo_totals(balance: float, income: float, expenses: float, by_category: dict) -> None:
    click.echo(f"{'Balance:':<12} {format_amount(balance):>14}")
    click.echo(f"{'Income:':<12} {format_amount(income):>14}")
    click.echo(f"{'Expenses:':<12} {format_amount(expenses):>14}")
    if by_category:
        click.echo("\nBy category:")
        click.echo("-" * 40)
        for category, total in sorted(by_category.items()):
            click.echo(f"{category:<24} {format_amount(total):>14}")


@click.command("summary")
@date_filter_options
@click.pass_context
def summary(ctx, start_date: str | None, end_date: str | None, **period_kwargs):
    """Show balance, income, expenses and per-category totals.

    Totals are computed locally from the loaded transactions.

    Examples:
        fintrack summary
        fintrack summary --last-month
    """
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=pop_period_flags(period_kwargs),
    )

    store = ctx.obj["store"]
    store.load_transactions()
    report_store_error(ctx, store, fatal=False)

    records = aggregates.filter_records(store.transactions, start_date=start, end_date=end)
    report = aggregates.build_summary(records)
    click.echo(f"Transactions: {report.transaction_count}")
    _echo_totals(
        report.total_balance,
        report.total_income,
        report.total_expenses,
        report.by_category,
    )


@click.command("stats")
@click.pass_context
def stats(ctx):
    """Show the statistics computed by the service."""
    gateway = ctx.obj["gateway"]
    try:
        statistics = gateway.get_statistics()
    except GatewayError as e:
        handle_gateway_error(ctx, e)
    except ValidationError as e:
        handle_domain_error(ctx, e)
    _echo_totals(
        statistics.total_balance,
        statistics.total_income,
        statistics.total_expenses,
        statistics.by_category,
    )


@click.command("categories")
@click.pass_context
def categories(ctx):
    """List the suggested transaction categories."""
    for name in ctx.obj["store"].categories:
        click.echo(name)


def register_commands(cli):
    """Register summary commands with main CLI."""
    cli.add_command(summary)
    cli.add_command(stats)
    cli.add_command(categories)
