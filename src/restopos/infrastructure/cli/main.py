import click
import uvicorn

from restopos.infrastructure.cli.bill_commands import bill_create
from restopos.infrastructure.cli.kot_commands import kot_logs, kot_stats
from restopos.infrastructure.cli.menu_commands import menu_list
from restopos.infrastructure.cli.order_commands import (
    order_cancel_item,
    order_create,
    order_list,
    order_show,
    order_status,
)
from restopos.infrastructure.config import Settings, setup_logging


@click.group()
def cli() -> None:
    """restopos: restaurant POS and kitchen display server"""


@cli.command()
@click.option("--host", default=None, help="Bind host (default: POS_HOST).")
@click.option("--port", type=int, default=None, help="Bind port (default: POS_PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP + WebSocket server."""
    from restopos.infrastructure.web.app import create_app

    settings = Settings()
    setup_logging(settings)
    uvicorn.run(
        create_app(settings),
        host=host or settings.host,
        port=port or settings.port,
        log_level="debug" if settings.debug else "info",
    )


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def bill() -> None:
    """Generate bills."""


@cli.group()
def kot() -> None:
    """Inspect the KOT latency log."""


@cli.group()
def menu() -> None:
    """Browse the menu."""


# Register subcommands
order.add_command(order_cancel_item)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
bill.add_command(bill_create)
kot.add_command(kot_logs)
kot.add_command(kot_stats)
menu.add_command(menu_list)
