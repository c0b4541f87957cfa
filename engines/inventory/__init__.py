"""
StockMaster Inventory Engine
==============================
Products, the activity log, and the ledger that mutates them.
"""

from engines.inventory.errors import (
    InsufficientStock,
    InvalidQuantity,
    LedgerError,
    ProductNotFound,
)
from engines.inventory.models import LogEntry, LogType, Product
from engines.inventory.services import InventoryLedger, LedgerResult

__all__ = [
    "InventoryLedger",
    "LedgerResult",
    "Product",
    "LogEntry",
    "LogType",
    "LedgerError",
    "ProductNotFound",
    "InsufficientStock",
    "InvalidQuantity",
]
