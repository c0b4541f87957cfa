"""
StockMaster Command Layer - Command Outcome Contract
=======================================================
Every command submitted at the command center produces exactly one
Outcome.

ACCEPTED → intent applied (or, for reports, acknowledged).
REJECTED → nothing applied, reason is mandatory.

An outcome is frozen once built. A rejection always names its reason;
an acceptance never does. Both are stamped with the decision time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from core.commands.rejection import RejectionReason


# ══════════════════════════════════════════════════════════════
# COMMAND STATUS
# ══════════════════════════════════════════════════════════════

class CommandStatus(Enum):
    """Binary command decision. No middle ground."""
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


# ══════════════════════════════════════════════════════════════
# COMMAND OUTCOME
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class CommandOutcome:
    """
    Result of one submitted command.

    Fields:
        status:      ACCEPTED or REJECTED.
        message:     Text shown to the user (success or failure).
        reason:      RejectionReason (mandatory if REJECTED, None if ACCEPTED).
        occurred_at: When the decision was made.
        intent:      The interpreted intent, when interpretation succeeded.
    """

    status: CommandStatus
    message: str
    reason: Optional[RejectionReason]
    occurred_at: datetime
    intent: Any = None

    def __post_init__(self):
        if not isinstance(self.status, CommandStatus):
            raise ValueError(
                f"status must be CommandStatus, got {type(self.status).__name__}."
            )

        if self.status == CommandStatus.REJECTED and self.reason is None:
            raise ValueError(
                "REJECTED outcome must include a RejectionReason."
            )

        if self.status == CommandStatus.ACCEPTED and self.reason is not None:
            raise ValueError(
                "ACCEPTED outcome must NOT include a RejectionReason."
            )

        if not isinstance(self.occurred_at, datetime):
            raise ValueError("occurred_at must be a datetime.")

    @classmethod
    def accepted(
        cls, message: str, occurred_at: datetime, intent: Any = None,
    ) -> "CommandOutcome":
        return cls(
            status=CommandStatus.ACCEPTED,
            message=message,
            reason=None,
            occurred_at=occurred_at,
            intent=intent,
        )

    @classmethod
    def rejected(
        cls, reason: RejectionReason, occurred_at: datetime, intent: Any = None,
    ) -> "CommandOutcome":
        return cls(
            status=CommandStatus.REJECTED,
            message=reason.message,
            reason=reason,
            occurred_at=occurred_at,
            intent=intent,
        )

    @property
    def is_accepted(self) -> bool:
        return self.status == CommandStatus.ACCEPTED

    @property
    def is_rejected(self) -> bool:
        return self.status == CommandStatus.REJECTED
