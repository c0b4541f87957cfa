"""
StockMaster Interpreter - Intents
====================================
Tagged union over the six interpreter actions. Each variant carries
only the fields its action needs.

parse_intent() is the boundary: it takes the model's raw JSON object
and either returns a variant or raises.

    error present                → InterpreterFailure
    action fields missing        → MissingParameters
    UNKNOWN / unrecognized tool  → UnknownIntent (not raised)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ai.interpreter.errors import InterpreterFailure, MissingParameters


# ══════════════════════════════════════════════════════════════
# TOOL ACTIONS
# ══════════════════════════════════════════════════════════════

class ToolAction(Enum):
    ADD_STOCK = "ADD_STOCK"          # receipt
    DELIVER_STOCK = "DELIVER_STOCK"  # delivery order
    MOVE_STOCK = "MOVE_STOCK"        # internal transfer
    ADJUST_STOCK = "ADJUST_STOCK"    # inventory adjustment
    REPORT = "REPORT"
    UNKNOWN = "UNKNOWN"


ACTION_LABELS = {
    ToolAction.ADD_STOCK: "Adding Stock",
    ToolAction.DELIVER_STOCK: "Delivering Stock",
    ToolAction.MOVE_STOCK: "Moving Stock",
    ToolAction.ADJUST_STOCK: "Adjustment",
}


# ══════════════════════════════════════════════════════════════
# VARIANTS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ReceiveIntent:
    name: str
    qty: int
    location: str
    category: Optional[str] = None

    tool = ToolAction.ADD_STOCK
    required = ("name", "qty", "location")


@dataclass(frozen=True)
class DeliverIntent:
    name: str
    qty: int

    tool = ToolAction.DELIVER_STOCK
    required = ("name", "qty")


@dataclass(frozen=True)
class MoveIntent:
    name: str
    to_location: str
    qty: Optional[int] = None

    tool = ToolAction.MOVE_STOCK
    required = ("name", "to_location")


@dataclass(frozen=True)
class AdjustIntent:
    name: str
    true_qty: int

    tool = ToolAction.ADJUST_STOCK
    required = ("name", "true_qty")


@dataclass(frozen=True)
class ReportIntent:
    tool = ToolAction.REPORT


@dataclass(frozen=True)
class UnknownIntent:
    raw_tool: str = "UNKNOWN"

    tool = ToolAction.UNKNOWN


Intent = Union[
    ReceiveIntent,
    DeliverIntent,
    MoveIntent,
    AdjustIntent,
    ReportIntent,
    UnknownIntent,
]


# ══════════════════════════════════════════════════════════════
# FIELD COERCION
# ══════════════════════════════════════════════════════════════

def _text(raw: Dict[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _integer(raw: Dict[str, Any], key: str) -> Optional[int]:
    """Integers, integral floats and digit strings; anything else is absent."""
    value = raw.get(key)
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


_INTEGER_FIELDS = ("qty", "true_qty")


def _usable(key: str, value: Any) -> bool:
    if key in _INTEGER_FIELDS:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, str) and bool(value.strip())


def missing_fields(intent: Intent) -> List[str]:
    """
    Fields of an intent that the ledger cannot use, in declaration order.

    Required text must be non-blank and required counts must be ints.
    An optional count, when set, must be an int as well.
    """
    required = getattr(intent, "required", ())
    missing = [key for key in required if not _usable(key, getattr(intent, key))]
    for key in _INTEGER_FIELDS:
        value = getattr(intent, key, None)
        if key not in required and value is not None and not _usable(key, value):
            missing.append(key)
    return missing


def require_fields(intent: Intent) -> Intent:
    """Raise MissingParameters unless every field the action needs is usable."""
    missing = missing_fields(intent)
    if missing:
        raise MissingParameters(ACTION_LABELS[intent.tool], missing)
    return intent


# ══════════════════════════════════════════════════════════════
# BOUNDARY
# ══════════════════════════════════════════════════════════════

def parse_intent(raw: Any) -> Intent:
    """Validate the interpreter's raw JSON object into an Intent."""
    if not isinstance(raw, dict):
        raise InterpreterFailure("Interpreter returned a non-object response.")

    error = raw.get("error")
    if isinstance(error, str) and error.strip():
        raise InterpreterFailure(error.strip())

    raw_tool = raw.get("tool")
    try:
        tool = ToolAction(raw_tool)
    except ValueError:
        return UnknownIntent(raw_tool=str(raw_tool))

    name = _text(raw, "name")

    if tool is ToolAction.ADD_STOCK:
        return require_fields(ReceiveIntent(
            name=name,
            qty=_integer(raw, "qty"),
            location=_text(raw, "location"),
            category=_text(raw, "category"),
        ))

    if tool is ToolAction.DELIVER_STOCK:
        return require_fields(DeliverIntent(name=name, qty=_integer(raw, "qty")))

    if tool is ToolAction.MOVE_STOCK:
        # 0 means "unspecified" for a transfer
        return require_fields(MoveIntent(
            name=name,
            to_location=_text(raw, "to_location"),
            qty=_integer(raw, "qty") or None,
        ))

    if tool is ToolAction.ADJUST_STOCK:
        return require_fields(AdjustIntent(name=name, true_qty=_integer(raw, "true_qty")))

    if tool is ToolAction.REPORT:
        return ReportIntent()

    return UnknownIntent(raw_tool=tool.value)
