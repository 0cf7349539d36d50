"""Shared output formatting for CLI commands."""

from typing import Sequence

import click

from fintrack.domain.entities import ViewRecord


def format_amount(amount: float) -> str:
    return f"{amount:,.2f}"


def echo_record(record: ViewRecord) -> None:
    """Print one record in detail."""
    click.echo(f"Transaction ID: {record.id}")
    click.echo(f"  Date: {record.date}")
    click.echo(f"  Type: {record.type}")
    click.echo(f"  Amount: {format_amount(record.amount)}")
    click.echo(f"  Category: {record.category}")
    if record.description:
        click.echo(f"  Description: {record.description}")


def echo_records(records: Sequence[ViewRecord]) -> None:
    """Print records as a compact table."""
    click.echo(f"\nFound {len(records)} transaction(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<12} {'Date':<12} {'Type':<8} {'Amount':>12}  {'Category':<20} {'Description':<30}"
    )
    click.echo("-" * 100)
    for record in records:
        description = (record.description or "")[:30]
        click.echo(
            f"{record.id[:12]:<12} {record.date[:10]:<12} {record.type:<8} "
            f"{format_amount(record.signed_amount):>12}  {record.category[:20]:<20} {description:<30}"
        )
