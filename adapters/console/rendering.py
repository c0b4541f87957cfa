"""
Plain-text tables for the console.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ai.advisors import Advisory
from core.commands import CommandOutcome
from engines.inventory.models import LogEntry, Product
from projections.inventory import InventoryMetrics, is_low_stock


def format_table(headers: Sequence[str], rows: Sequence[Sequence[object]]) -> str:
    cells = [[str(h) for h in headers]] + [[str(c) for c in row] for row in rows]
    widths = [max(len(row[i]) for row in cells) for i in range(len(headers))]
    lines = []
    for index, row in enumerate(cells):
        lines.append("  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip())
        if index == 0:
            lines.append("  ".join("-" * w for w in widths))
    return "\n".join(lines)


def render_products(products: Sequence[Product], default_min_stock: int) -> str:
    if not products:
        return "No products found. Add stock to begin."
    rows = [
        (
            p.name,
            p.sku,
            p.category,
            p.quantity,
            p.location,
            "LOW" if is_low_stock(p, default_min_stock) else "",
        )
        for p in products
    ]
    return format_table(("Product", "SKU", "Category", "Qty", "Location", ""), rows)


def render_log(log: Sequence[LogEntry]) -> str:
    if not log:
        return "No activity logs yet."
    rows = [(e.timestamp, e.action, e.entry_type.value, e.details) for e in log]
    return format_table(("Timestamp", "Action", "Type", "Details"), rows)


def render_dashboard(
    metrics: InventoryMetrics,
    by_location: List[Tuple[str, int]],
    advisories: Sequence[Advisory],
) -> str:
    last = "N/A"
    if metrics.last_action:
        last = f"{metrics.last_action} at {metrics.last_activity_at}"
    parts = [
        f"Total items:     {metrics.total_units}",
        f"Unique products: {metrics.unique_products}",
        f"Low stock:       {metrics.low_stock_count}",
        f"Last activity:   {last}",
        "",
    ]
    if by_location:
        parts.append(format_table(("Location", "Units"), by_location))
    else:
        parts.append("No inventory data to display")
    for advisory in advisories:
        parts.append(f"! {advisory.title}: {advisory.recommended_action}")
    return "\n".join(parts)


def render_outcome(outcome: CommandOutcome) -> str:
    if outcome.is_accepted:
        return f"OK: {outcome.message}"
    return f"ERROR [{outcome.reason.code}]: {outcome.message}"
