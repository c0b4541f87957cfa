"""
StockMaster AI Advisors - Base Advisor Protocol
==================================================
Advisors are read-only. They look at ledger state and return
Advisory records for display; they never mutate anything.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


# ══════════════════════════════════════════════════════════════
# ADVISORY OUTPUT
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Advisory:
    """Structured recommendation shown next to the dashboard."""

    advice_type: str          # reorder_suggestion | stockout
    title: str                # human-readable summary
    description: str
    confidence: float         # 0.0 to 1.0
    recommended_action: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be between 0 and 1, got {self.confidence}.")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "advice_type": self.advice_type,
            "title": self.title,
            "description": self.description,
            "confidence": self.confidence,
            "recommended_action": self.recommended_action,
            "data": self.data,
        }


# ══════════════════════════════════════════════════════════════
# ADVISOR PROTOCOL
# ══════════════════════════════════════════════════════════════

class Advisor(ABC):
    """
    Base class for advisors.

    Subclasses implement `analyze()` over a context dict built by the
    caller from ledger reads.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def analyze(
        self,
        context: Dict[str, Any],
        now: datetime,
    ) -> List[Advisory]:
        """
        Return advisories for the given ledger reads.

        now is passed in so results are reproducible under a fixed clock.
        """
        ...
