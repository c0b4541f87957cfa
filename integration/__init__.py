"""
StockMaster Integration Layer - Public API
=============================================
Inbound: free text → interpreter → intent → ledger.
"""

from integration.inbound import REPORT_MESSAGE, CommandCenter

__all__ = [
    "CommandCenter",
    "REPORT_MESSAGE",
]
