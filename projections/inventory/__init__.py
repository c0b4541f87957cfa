"""
StockMaster Projections - Inventory Dashboard
================================================
Read models derived from ledger state on demand. Nothing here is
stored: low stock, totals and per-location sums are recomputed from
the current collections every time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from config import settings
from engines.inventory.models import LogEntry, Product


UNKNOWN_LOCATION = "Unknown"


# ══════════════════════════════════════════════════════════════
# LOW STOCK
# ══════════════════════════════════════════════════════════════

def low_stock_threshold(
    product: Product, default_min_stock: int = settings.DEFAULT_MIN_STOCK,
) -> int:
    if product.min_stock is not None:
        return product.min_stock
    return default_min_stock


def is_low_stock(
    product: Product, default_min_stock: int = settings.DEFAULT_MIN_STOCK,
) -> bool:
    return product.quantity < low_stock_threshold(product, default_min_stock)


# ══════════════════════════════════════════════════════════════
# METRICS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class InventoryMetrics:
    total_units: int
    unique_products: int
    low_stock_count: int
    last_action: Optional[str] = None
    last_activity_at: Optional[str] = None


def compute_metrics(
    products: Sequence[Product],
    log: Sequence[LogEntry],
    default_min_stock: int = settings.DEFAULT_MIN_STOCK,
) -> InventoryMetrics:
    """log must be newest-first, as the ledger returns it."""
    latest = log[0] if log else None
    return InventoryMetrics(
        total_units=sum(p.quantity for p in products),
        unique_products=len({p.folded_name for p in products}),
        low_stock_count=sum(1 for p in products if is_low_stock(p, default_min_stock)),
        last_action=latest.action if latest else None,
        last_activity_at=latest.timestamp if latest else None,
    )


def stock_by_location(products: Sequence[Product]) -> List[Tuple[str, int]]:
    """Units per location, in order of first appearance."""
    totals: Dict[str, int] = {}
    for product in products:
        location = product.location or UNKNOWN_LOCATION
        totals[location] = totals.get(location, 0) + product.quantity
    return list(totals.items())


# ══════════════════════════════════════════════════════════════
# DASHBOARD SERVICE (read-only aggregation)
# ══════════════════════════════════════════════════════════════

class InventoryDashboard:
    """
    Read-only aggregation over a ledger.

    Takes any object with snapshot() -> (products, log).
    """

    def __init__(self, ledger, default_min_stock: int = settings.DEFAULT_MIN_STOCK):
        self._ledger = ledger
        self._default_min_stock = default_min_stock

    @property
    def default_min_stock(self) -> int:
        return self._default_min_stock

    def metrics(self) -> InventoryMetrics:
        products, log = self._ledger.snapshot()
        return compute_metrics(products, log, self._default_min_stock)

    def stock_by_location(self) -> List[Tuple[str, int]]:
        products, _ = self._ledger.snapshot()
        return stock_by_location(products)

    def low_stock_products(self) -> List[Product]:
        products, _ = self._ledger.snapshot()
        return [p for p in products if is_low_stock(p, self._default_min_stock)]
