"""CLI commands for the order lifecycle."""

from __future__ import annotations

import click

from restopos.application.dto import ItemSpec
from restopos.domain.exceptions import DomainException
from restopos.domain.model.order import Order
from restopos.infrastructure.cli.context import services


def _parse_items(raw: str) -> list[ItemSpec]:
    """Parse '1:2,4:3' (menu id : quantity) into ItemSpec list."""
    specs: list[ItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'MenuId:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            specs.append(ItemSpec(item_id=int(id_str), quantity=int(qty_str)))
        except ValueError:
            raise click.BadParameter(
                f"Invalid item '{pair}'. Menu id and quantity must be integers."
            )
    return specs


def _display_order(order: Order) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{order.id}  (status={order.status.value})")
    click.echo(f"Table:   {order.table_number}  [{order.kind.value}]")
    click.echo(f"Created: {order.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    if order.notes:
        click.echo(f"Notes:   {order.notes}")
    click.echo()
    click.echo(f"  {'#':>3} {'Item':<20} {'Qty':>5} {'Price':>10} {'Status':>10}")
    click.echo(f"  {'-'*52}")
    for item in order.items:
        click.echo(
            f"  {item.id:>3} {item.name:<20} {item.quantity.value:>5} "
            f"{str(item.unit_price):>10} {item.status.value:>10}"
        )
    click.echo(f"  {'-'*52}")
    click.echo(f"  {'Subtotal':<30} {str(order.subtotal):>21}")


@click.command("list")
@click.option("--status", default=None, help="Only orders in this status.")
def order_list(status: str | None) -> None:
    """List orders, oldest first."""
    try:
        orders = services().list_orders().handle(status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Table':<10} {'Type':<10} {'Status':<10} {'Items':>5}")
    click.echo("-" * 45)
    for o in orders:
        click.echo(f"{o.id:<6} {o.table_number:<10} {o.kind.value:<10} {o.status.value:<10} {len(o.items):>5}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    try:
        order = services().show_order().handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(order)


@click.command("create")
@click.option("--table", default=None, help="Table number (required for dine-in).")
@click.option(
    "--type", "order_type",
    type=click.Choice(["dine-in", "takeaway"]), default="dine-in", show_default=True,
)
@click.option("--items", required=True, help="Items as 'MenuId:Qty,MenuId:Qty'.")
@click.option("--notes", default=None, help="Kitchen notes.")
@click.option("--cashier", "cashier_id", type=int, default=None, help="Cashier user id.")
def order_create(table: str | None, order_type: str, items: str, notes: str | None, cashier_id: int | None) -> None:
    """Submit a new order to the kitchen."""
    specs = _parse_items(items)

    try:
        result = services().submit_order().handle(
            table_number=table,
            order_kind=order_type,
            items=specs,
            notes=notes,
            cashier_id=cashier_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{result.order.id} sent to kitchen in {result.latency_ms}ms")
    click.echo()
    _display_order(result.order)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.argument("new_status", type=click.Choice(["pending", "preparing", "ready"]))
def order_status(order_id: int, new_status: str) -> None:
    """Advance an order to NEW_STATUS."""
    try:
        order = services().advance_status().handle(order_id, new_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order.id} is now {order.status.value}.")


@click.command("cancel-item")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--item", "item_id", required=True, type=int, help="Item ID within the order.")
def order_cancel_item(order_id: int, item_id: int) -> None:
    """Cancel one item of an order."""
    try:
        services().cancel_item().handle(order_id, item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id}: item #{item_id} cancelled.")
