"""Single-transaction commands that talk to the service directly."""

import click

from fintrack.cli.error_handling import handle_domain_error, handle_gateway_error
from fintrack.cli.formatting import echo_record, echo_records
from fintrack.cli.commands.transactions import TYPE_CHOICE, validate_amount
from fintrack.domain.errors import ValidationError
from fintrack.gateway.errors import GatewayError
from fintrack.utils.date_parser import parse_date


@click.group()
def transaction_group():
    """Inspect and edit individual transactions."""
    pass


@transaction_group.command("show")
@click.argument("transaction_id")
@click.pass_context
def show_transaction(ctx, transaction_id: str) -> None:
    """Show one transaction."""
    gateway = ctx.obj["gateway"]
    try:
        record = gateway.get_transaction(transaction_id)
    except GatewayError as e:
        handle_gateway_error(ctx, e)
    except ValidationError as e:
        handle_domain_error(ctx, e)
    echo_record(record)


@transaction_group.command("update")
@click.argument("transaction_id")
@click.option("--amount", type=float, callback=validate_amount, help="New amount")
@click.option("--type", "kind", type=TYPE_CHOICE, help="New type")
@click.option("--category", help="New category")
@click.option("--date", help="New date (YYYY-MM-DD or relative like 'today')")
@click.option("--description", help="New description")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: str,
    amount: float | None,
    kind: str | None,
    category: str | None,
    date: str | None,
    description: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided.

    Examples:
        fintrack transaction update 42 --amount 75
        fintrack transaction update 42 --category Transport --date yesterday
    """
    changes = {}
    if amount is not None:
        changes["amount"] = amount
    if kind is not None:
        changes["type"] = kind
    if category is not None:
        changes["category"] = category
    if date is not None:
        try:
            changes["date"] = parse_date(date).isoformat()
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)
    if description is not None:
        changes["description"] = description

    if not changes:
        click.echo("Error: Nothing to update; pass at least one field option.", err=True)
        ctx.exit(1)

    gateway = ctx.obj["gateway"]
    try:
        record = gateway.update_transaction(transaction_id, {"parameters": changes})
    except GatewayError as e:
        handle_gateway_error(ctx, e)
    except ValidationError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated transaction {transaction_id}")
    echo_record(record)


@transaction_group.command("page")
@click.option("--page", "page_number", type=click.IntRange(min=0), default=0, show_default=True)
@click.option("--size", type=click.IntRange(min=1), default=20, show_default=True)
@click.pass_context
def page_transactions(ctx, page_number: int, size: int) -> None:
    """Show one page of transactions as returned by the service."""
    gateway = ctx.obj["gateway"]
    try:
        page = gateway.get_transactions_page(page=page_number, size=size)
    except GatewayError as e:
        handle_gateway_error(ctx, e)
    except ValidationError as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Page {page.number + 1} of {page.total_pages} "
        f"({page.total_elements} transaction(s) total)"
    )
    if page.content:
        echo_records(page.content)


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
