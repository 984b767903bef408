"""
Console transport: renders display snapshots with rich.
"""

from __future__ import annotations

import logging
import time

from rich.console import Console
from rich.table import Table

from ..config import IpResolutionConfig
from ..core.display import DisplaySnapshot
from ..factory import IpResolutionComponents, create_components

logger = logging.getLogger(__name__)
console = Console()


def build_table(snapshot: DisplaySnapshot) -> Table:
    """Render one snapshot as a table."""
    table = Table(title="IP Addresses", show_header=True, header_style="bold")
    table.add_column("Field", width=12)
    table.add_column("Value", style="cyan")

    table.add_row("Display", snapshot.text)
    for index, line in enumerate(snapshot.lines, 1):
        table.add_row(f"Line {index}", line)

    result = snapshot.external_result
    if result is not None and result.is_valid():
        table.add_row("Country", result.country_code or "-")
        table.add_row("Provider", result.company_name() or "-")

    return table


def render_once(components: IpResolutionComponents, force_refresh: bool = False) -> None:
    """Compose and print one snapshot."""
    snapshot = components.composer.compose(force_refresh=force_refresh)
    console.print(build_table(snapshot))
    console.print(f"[dim]{snapshot.tooltip}[/dim]")


def run_console(
    config: IpResolutionConfig,
    force_refresh: bool = False,
    watch_seconds: float = 0,
) -> None:
    """
    Print the display once, or every ``watch_seconds`` until interrupted.

    Args:
        config: Service configuration
        force_refresh: Force the first external lookup
        watch_seconds: Interval between refreshes; 0 prints once
    """
    components = create_components(config)
    if watch_seconds > 0:
        logger.info(f"Refreshing every {watch_seconds:g}s, Ctrl+C to stop")
    try:
        render_once(components, force_refresh=force_refresh)
        while watch_seconds > 0:
            time.sleep(watch_seconds)
            console.clear()
            render_once(components)
    finally:
        components.close()
