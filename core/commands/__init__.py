"""
StockMaster Command Layer
===========================
Every submitted command produces exactly one Outcome.
REJECTED commands carry a structured, renderable reason.
"""

from core.commands.outcomes import (
    CommandOutcome,
    CommandStatus,
)
from core.commands.rejection import (
    ReasonCode,
    RejectionReason,
)

__all__ = [
    "CommandOutcome",
    "CommandStatus",
    "ReasonCode",
    "RejectionReason",
]
