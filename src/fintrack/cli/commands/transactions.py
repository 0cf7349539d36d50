"""List, add and delete transaction commands."""

import math

import click

from fintrack.cli.date_filters import (
    date_filter_options,
    pop_period_flags,
    resolve_cli_date_range,
)
from fintrack.cli.error_handling import report_store_error
from fintrack.cli.formatting import echo_record, echo_records, format_amount
from fintrack.domain import aggregates
from fintrack.domain.entities import TransactionParameters, TransactionType
from fintrack.utils.date_parser import parse_date

TYPE_CHOICE = click.Choice([t.value for t in TransactionType])


def validate_amount(ctx, param, value):
    """Reject amounts that are not finite numbers (inf, nan)."""
    if value is not None and not math.isfinite(value):
        raise click.BadParameter(f"{value!r} is not a finite number.")
    return value


@click.command("list")
@date_filter_options
@click.option("--category", help="Only include this category")
@click.option("--type", "kind", type=TYPE_CHOICE, help="Only include income or expenses")
@click.pass_context
def list_transactions(
    ctx,
    start_date: str | None,
    end_date: str | None,
    category: str | None,
    kind: str | None,
    **period_kwargs,
):
    """View transactions with optional filters.

    When the service is unreachable the last locally mirrored list is shown.

    Examples:
        fintrack list --this-month
        fintrack list --category Groceries --type expense
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

    records = aggregates.filter_records(
        store.transactions,
        start_date=start,
        end_date=end,
        category=category,
        kind=kind,
    )
    if not records:
        click.echo("No transactions found.")
        return

    echo_records(records)
    click.echo("-" * 100)
    click.echo(
        f"TOTAL  Income: {format_amount(aggregates.total_income(records))} | "
        f"Expenses: {format_amount(aggregates.total_expenses(records))} | "
        f"Balance: {format_amount(aggregates.total_balance(records))} | "
        f"Count: {len(records)}"
    )


@click.command("add")
@click.option(
    "--amount",
    required=True,
    type=float,
    callback=validate_amount,
    help="Transaction amount (e.g., 123.45)",
)
@click.option("--type", "kind", required=True, type=TYPE_CHOICE, help="income or expense")
@click.option("--category", required=True, help="Category name (see 'fintrack categories')")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--description", help="Transaction description")
@click.pass_context
def add_transaction(
    ctx,
    amount: float,
    kind: str,
    category: str,
    date: str,
    description: str | None,
):
    """Add a transaction.

    Examples:
        fintrack add --amount 50 --type expense --category Groceries
        fintrack add --amount 1000 --type income --category Salary --date 2024-01-15
    """
    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    store = ctx.obj["store"]
    record = store.add_transaction(
        TransactionParameters(
            amount=amount,
            type=kind,
            category=category,
            date=txn_date.isoformat(),
            description=description,
        )
    )
    report_store_error(ctx, store, fatal=True)

    click.echo("Created transaction")
    echo_record(record)


@click.command("delete")
@click.argument("transaction_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: str, yes: bool):
    """Delete a transaction.

    The transaction is removed from the local mirror even when the service
    cannot be reached.

    Examples:
        fintrack delete 42 --yes
    """
    if not yes and not click.confirm(
        f"Are you sure you want to delete transaction {transaction_id}?"
    ):
        click.echo("Deletion cancelled.")
        return

    store = ctx.obj["store"]
    store.load_from_mirror()
    store.delete_transaction(transaction_id)
    report_store_error(ctx, store, fatal=False)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register list, add and delete commands with main CLI."""
    cli.add_command(list_transactions)
    cli.add_command(add_transaction)
    cli.add_command(delete_transaction)
