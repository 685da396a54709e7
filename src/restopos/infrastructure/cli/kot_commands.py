"""CLI commands for the KOT latency log."""

from __future__ import annotations

import click

from restopos.infrastructure.cli.context import services


@click.command("logs")
@click.option("--limit", type=int, default=None, help="Number of entries (default: configured window).")
def kot_logs(limit: int | None) -> None:
    """Show the most recent KOT log entries."""
    entries = services().kot_log.query_recent(limit)

    if not entries:
        click.echo("No KOT entries yet.")
        return

    click.echo(f"{'ID':<6} {'Order':<7} {'Type':<12} {'OK':<4} {'Latency':>9}  Timestamp")
    click.echo("-" * 64)
    for e in entries:
        click.echo(
            f"{e.id:<6} {e.order_id:<7} {e.event_type.value:<12} "
            f"{'yes' if e.success else 'no':<4} {e.latency_ms:>7}ms  "
            f"{e.created_at.strftime('%Y-%m-%d %H:%M:%S')}"
        )


@click.command("stats")
def kot_stats() -> None:
    """Show average latency, count and success rate."""
    stats = services().kot_log.stats()
    click.echo(f"Average latency: {stats.avg_latency}ms")
    click.echo(f"Total KOTs:      {stats.total_kots}")
    click.echo(f"Success rate:    {stats.success_rate}%")
