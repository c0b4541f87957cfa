"""
StockMaster Inventory Engine - Records
=========================================
Product and LogEntry, plus their persisted (JSON-ready dict) form.

Products are keyed by case-folded name; at most one product per
folded name exists in a store. Log entries are immutable once written.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


# ══════════════════════════════════════════════════════════════
# LOG ENTRY TYPE
# ══════════════════════════════════════════════════════════════

class LogType(Enum):
    """Direction of a logged stock change."""
    IN = "IN"
    OUT = "OUT"
    MOVE = "MOVE"
    ADJUST = "ADJUST"
    INFO = "INFO"


def fold_name(name: str) -> str:
    """Lookup key for product names."""
    return name.strip().casefold()


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ══════════════════════════════════════════════════════════════
# PRODUCT
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Product:
    """
    One stocked product at exactly one location.

    sku and product_id are assigned once at creation and never change.
    min_stock is an optional per-product low-stock threshold.
    """

    product_id: str
    name: str
    sku: str
    category: str
    quantity: int
    location: str
    min_stock: Optional[int] = None

    def __post_init__(self):
        if not self.product_id:
            raise ValueError("product_id must be non-empty.")
        if not self.name or not self.name.strip():
            raise ValueError("name must be non-empty.")
        if not self.sku:
            raise ValueError("sku must be non-empty.")
        if not _is_int(self.quantity) or self.quantity < 0:
            raise ValueError("quantity must be a non-negative integer.")
        if self.min_stock is not None and (
            not _is_int(self.min_stock) or self.min_stock < 0
        ):
            raise ValueError("min_stock must be a non-negative integer.")

    @property
    def folded_name(self) -> str:
        return fold_name(self.name)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.product_id,
            "name": self.name,
            "sku": self.sku,
            "category": self.category,
            "quantity": self.quantity,
            "location": self.location,
        }
        if self.min_stock is not None:
            data["min_stock"] = self.min_stock
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        return cls(
            product_id=str(data["id"]),
            name=data["name"],
            sku=data["sku"],
            category=data.get("category") or "General",
            quantity=data["quantity"],
            location=data.get("location", ""),
            min_stock=data.get("min_stock"),
        )


# ══════════════════════════════════════════════════════════════
# LOG ENTRY
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class LogEntry:
    """Audit record written as a side effect of a mutating operation."""

    entry_id: str
    timestamp: str            # ISO-8601 UTC
    action: str               # ADD_STOCK | DELIVER_STOCK | MOVE_STOCK | ADJUST_STOCK
    details: str
    entry_type: LogType

    def __post_init__(self):
        if not self.entry_id:
            raise ValueError("entry_id must be non-empty.")
        if not self.action:
            raise ValueError("action must be non-empty.")
        if not isinstance(self.entry_type, LogType):
            raise ValueError(
                f"entry_type must be LogType, got {type(self.entry_type).__name__}."
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.entry_id,
            "timestamp": self.timestamp,
            "action": self.action,
            "details": self.details,
            "type": self.entry_type.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEntry":
        return cls(
            entry_id=str(data["id"]),
            timestamp=data["timestamp"],
            action=data["action"],
            details=data.get("details", ""),
            entry_type=LogType(data.get("type", LogType.INFO.value)),
        )
