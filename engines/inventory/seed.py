"""
Demo stock for a fresh store.
"""

from __future__ import annotations

import logging
from typing import List

from engines.inventory.services import InventoryLedger, LedgerResult

logger = logging.getLogger("stockmaster.inventory")

DEMO_PRODUCTS = (
    # name, quantity, location, category
    ("IPhones", 50, "Warehouse A", "Electronics"),
    ("Office Chairs", 120, "Showroom", "Furniture"),
    ("Steel Rods", 500, "Zone B", "Raw Material"),
)


def seed_demo_data(ledger: InventoryLedger) -> List[LedgerResult]:
    """Receive the demo products, only when the product collection is empty."""
    if ledger.list_products():
        return []
    logger.info("Seeding demo inventory")
    return [
        ledger.receive(name, quantity, location, category)
        for name, quantity, location, category in DEMO_PRODUCTS
    ]
