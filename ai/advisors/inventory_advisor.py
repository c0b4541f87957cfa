"""
StockMaster AI Advisors - Low Stock Advisor
==============================================
Flags products under their low-stock threshold and products that
have run out.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from ai.advisors.base import Advisor, Advisory
from config import settings
from projections.inventory import low_stock_threshold


class LowStockAdvisor(Advisor):
    """
    Context keys:
        products:          list of Product
        default_min_stock: threshold for products without min_stock
    """

    @property
    def name(self) -> str:
        return "low_stock"

    def analyze(
        self,
        context: Dict[str, Any],
        now: datetime,
    ) -> List[Advisory]:
        advisories: List[Advisory] = []
        default_min = context.get("default_min_stock", settings.DEFAULT_MIN_STOCK)

        for product in context.get("products", []):
            threshold = low_stock_threshold(product, default_min)

            if product.quantity == 0:
                advisories.append(Advisory(
                    advice_type="stockout",
                    title=f"Stockout: {product.name}",
                    description=(
                        f"{product.name} ({product.sku}) is at zero stock "
                        f"at {product.location}."
                    ),
                    confidence=0.95,
                    recommended_action=f"Urgent reorder for {product.name}",
                    data={"sku": product.sku, "threshold": threshold},
                ))
                continue

            if product.quantity < threshold:
                advisories.append(Advisory(
                    advice_type="reorder_suggestion",
                    title=f"Low stock: {product.name}",
                    description=(
                        f"{product.name} has {product.quantity} units remaining "
                        f"at {product.location}, below the threshold of {threshold}."
                    ),
                    confidence=0.85,
                    recommended_action=(
                        f"Reorder {threshold * 2 - product.quantity} units "
                        f"of {product.name}"
                    ),
                    data={
                        "sku": product.sku,
                        "quantity": product.quantity,
                        "threshold": threshold,
                    },
                ))

        return advisories
