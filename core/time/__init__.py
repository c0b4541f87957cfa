"""
StockMaster Core Time - Public API
=====================================
"""

from core.time.clock import (
    Clock,
    FixedClock,
    SystemClock,
    format_timestamp,
)

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "format_timestamp",
]
