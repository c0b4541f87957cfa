"""
StockMaster AI Advisors - Public API
=======================================
"""

from ai.advisors.base import Advisor, Advisory
from ai.advisors.inventory_advisor import LowStockAdvisor

__all__ = [
    "Advisor",
    "Advisory",
    "LowStockAdvisor",
]
