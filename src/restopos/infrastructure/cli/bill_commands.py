"""CLI commands for billing."""

from __future__ import annotations

import click

from restopos.domain.exceptions import DomainException
from restopos.infrastructure.cli.context import services


@click.command("create")
@click.option("--order", "order_id", required=True, type=int, help="Order ID to bill.")
def bill_create(order_id: int) -> None:
    """Generate the bill for an order and close it."""
    try:
        bill = services().generate_bill().handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Bill #{bill.id} for order #{bill.order_id}  (table {bill.table_number})")
    click.echo()
    click.echo(f"  {'Item':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in bill.lines:
        click.echo(
            f"  {line.name:<20} {line.quantity:>5} {str(line.unit_price):>10} {str(line.line_total):>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {str(bill.subtotal):>20}")
    click.echo(f"  {'Tax':<27} {str(bill.tax):>20}")
    click.echo(f"  {'Total':<27} {str(bill.total):>20}")
