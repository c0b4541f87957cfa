"""
StockMaster Inventory Engine - Log Entry Builders
====================================================
Maps each ledger action to its log type and builds the human-readable
details line. The ledger stamps id and timestamp.
"""

from __future__ import annotations

from typing import Optional

from engines.inventory.commands import (
    ADD_STOCK,
    ADJUST_STOCK,
    DELIVER_STOCK,
    MOVE_STOCK,
)
from engines.inventory.models import LogType


# ══════════════════════════════════════════════════════════════
# ACTION → LOG TYPE
# ══════════════════════════════════════════════════════════════

ACTION_LOG_TYPES = {
    ADD_STOCK: LogType.IN,
    DELIVER_STOCK: LogType.OUT,
    MOVE_STOCK: LogType.MOVE,
    ADJUST_STOCK: LogType.ADJUST,
}


def resolve_log_type(action: str) -> LogType:
    return ACTION_LOG_TYPES.get(action, LogType.INFO)


# ══════════════════════════════════════════════════════════════
# DETAIL BUILDERS
# ══════════════════════════════════════════════════════════════

def build_created_details(
    name: str, quantity: int, location: str, category: str,
) -> str:
    return f"Created {name}: {quantity} units at {location} ({category})"


def build_received_details(
    name: str, quantity: int, total: int, location: str,
) -> str:
    return f"Updated {name}: +{quantity} (Total: {total}) at {location}"


def build_delivered_details(name: str, quantity: int, remaining: int) -> str:
    return f"Delivered {quantity} {name} (Remaining: {remaining})"


def build_moved_details(
    name: str, quantity: Optional[int], from_location: str, to_location: str,
) -> str:
    moved = quantity if quantity else "all"
    return f"Moved {moved} {name} from {from_location} to {to_location}"


def build_adjusted_details(name: str, old_quantity: int, new_quantity: int) -> str:
    delta = new_quantity - old_quantity
    return (
        f"Audit {name}: Corrected qty from {old_quantity} to {new_quantity} "
        f"({delta:+d})"
    )
