"""
StockMaster Inventory Engine - Errors
========================================
Raised by the ledger when a policy rejects an operation. Every error
wraps the RejectionReason that produced it, so the caller can render
the message and code without knowing the subclass.
"""

from __future__ import annotations

from core.commands.rejection import RejectionReason


class LedgerError(Exception):
    """Base error for ledger operations. Nothing was written."""

    def __init__(self, reason: RejectionReason):
        self.reason = reason
        super().__init__(reason.message)

    @property
    def code(self) -> str:
        return self.reason.code

    def to_rejection(self) -> RejectionReason:
        return self.reason


class ProductNotFound(LedgerError):
    """No product matches the name, case-insensitively."""

    def __init__(self, reason: RejectionReason, *, name: str):
        self.name = name
        super().__init__(reason)


class InsufficientStock(LedgerError):
    """Delivery asked for more units than the product holds."""

    def __init__(
        self, reason: RejectionReason, *, name: str, requested: int, available: int,
    ):
        self.name = name
        self.requested = requested
        self.available = available
        super().__init__(reason)


class InvalidQuantity(LedgerError):
    """Quantity precondition failed (non-positive receipt/delivery, negative count)."""
    pass
