"""
StockMaster Inventory Engine - Policies
==========================================
Validation policies for ledger operations. Each returns None when the
operation may proceed, or a RejectionReason explaining why not.
"""

from __future__ import annotations

from typing import Optional

from core.commands.rejection import ReasonCode, RejectionReason
from engines.inventory.commands import (
    AdjustStockRequest,
    DeliverStockRequest,
    MoveStockRequest,
    ReceiveStockRequest,
)
from engines.inventory.models import Product


def product_exists_policy(
    name: str,
    product: Optional[Product],
) -> Optional[RejectionReason]:
    """Reject operations that address a product nobody has received yet."""
    if product is not None:
        return None
    return RejectionReason(
        code=ReasonCode.NOT_FOUND,
        message=f'Product "{name}" not found.',
        policy_name="product_exists_policy",
    )


def positive_quantity_policy(request) -> Optional[RejectionReason]:
    """
    Receipts and deliveries move at least one unit.

    A move quantity only labels the log line; 0 reads as "all", so only
    a negative one is rejected.
    """
    if isinstance(request, (ReceiveStockRequest, DeliverStockRequest)):
        quantity = request.quantity
        if quantity > 0:
            return None
    elif isinstance(request, MoveStockRequest) and request.quantity is not None:
        quantity = request.quantity
        if quantity >= 0:
            return None
    else:
        return None

    return RejectionReason(
        code=ReasonCode.INVALID_QUANTITY,
        message=f"Quantity must be a positive integer, got {quantity}.",
        policy_name="positive_quantity_policy",
    )


def non_negative_count_policy(request) -> Optional[RejectionReason]:
    """Stock counts cannot be negative."""
    if not isinstance(request, AdjustStockRequest):
        return None
    if request.true_quantity >= 0:
        return None
    return RejectionReason(
        code=ReasonCode.INVALID_QUANTITY,
        message=(
            f"Counted quantity cannot be negative, got {request.true_quantity}."
        ),
        policy_name="non_negative_count_policy",
    )


def insufficient_stock_policy(
    request,
    product: Product,
) -> Optional[RejectionReason]:
    """Reject deliveries that exceed stock on hand."""
    if not isinstance(request, DeliverStockRequest):
        return None
    if request.quantity <= product.quantity:
        return None
    return RejectionReason(
        code=ReasonCode.INSUFFICIENT_STOCK,
        message=(
            f"Insufficient stock: {product.quantity} {product.name} available, "
            f"{request.quantity} requested."
        ),
        policy_name="insufficient_stock_policy",
    )
