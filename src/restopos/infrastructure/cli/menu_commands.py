"""CLI commands for the menu."""

from __future__ import annotations

import click

from restopos.infrastructure.cli.context import services


@click.command("list")
@click.option("--all", "show_all", is_flag=True, default=False, help="Include disabled items.")
def menu_list(show_all: bool) -> None:
    """List menu items."""
    items = [m for m in services().menu.list_all() if show_all or m.enabled]

    if not items:
        click.echo("No menu items found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Category':<14} {'Price':>10}")
    click.echo("-" * 53)
    for m in items:
        flag = "" if m.enabled else "  (disabled)"
        click.echo(f"{m.id:<6} {m.name:<20} {m.category:<14} {str(m.price):>10}{flag}")
