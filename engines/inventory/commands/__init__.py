"""
StockMaster Inventory Engine - Request Commands
==================================================
Typed ledger requests. Structural checks (non-empty names, integer
quantities) happen here and raise ValueError. Business checks (positive
quantities, stock on hand) are policies evaluated by the ledger.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# ══════════════════════════════════════════════════════════════
# ACTION LABELS
# ══════════════════════════════════════════════════════════════

ADD_STOCK = "ADD_STOCK"
DELIVER_STOCK = "DELIVER_STOCK"
MOVE_STOCK = "MOVE_STOCK"
ADJUST_STOCK = "ADJUST_STOCK"

INVENTORY_ACTIONS = frozenset({
    ADD_STOCK,
    DELIVER_STOCK,
    MOVE_STOCK,
    ADJUST_STOCK,
})


def _require_name(value: str, field_name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field_name} must be non-empty.")


def _require_int(value, field_name: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{field_name} must be an integer.")


# ══════════════════════════════════════════════════════════════
# REQUEST COMMANDS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ReceiveStockRequest:
    """Receipt: add units, creating the product on first receipt."""
    name: str
    quantity: int
    location: str
    category: Optional[str] = None

    action = ADD_STOCK

    def __post_init__(self):
        _require_name(self.name, "name")
        _require_int(self.quantity, "quantity")
        _require_name(self.location, "location")
        if self.category is not None and not isinstance(self.category, str):
            raise ValueError("category must be a string.")


@dataclass(frozen=True)
class DeliverStockRequest:
    """Delivery: remove units from an existing product."""
    name: str
    quantity: int

    action = DELIVER_STOCK

    def __post_init__(self):
        _require_name(self.name, "name")
        _require_int(self.quantity, "quantity")


@dataclass(frozen=True)
class MoveStockRequest:
    """
    Transfer: relocate a product.

    quantity is informational only (it appears in the log line); the
    whole product record moves.
    """
    name: str
    to_location: str
    quantity: Optional[int] = None

    action = MOVE_STOCK

    def __post_init__(self):
        _require_name(self.name, "name")
        _require_name(self.to_location, "to_location")
        if self.quantity is not None:
            _require_int(self.quantity, "quantity")


@dataclass(frozen=True)
class AdjustStockRequest:
    """Adjustment: overwrite quantity with a physical count."""
    name: str
    true_quantity: int

    action = ADJUST_STOCK

    def __post_init__(self):
        _require_name(self.name, "name")
        _require_int(self.true_quantity, "true_quantity")
