"""
StockMaster Command Layer - Rejection Model
==============================================
Structured reasons for commands the ledger or the command center
refused to apply.

Every rejection carries:
- a machine-readable code (ReasonCode)
- a human-readable message (shown to the user as-is)
- the name of the policy or boundary that produced it
"""

from __future__ import annotations

from dataclasses import dataclass


# ══════════════════════════════════════════════════════════════
# REJECTION REASON (frozen explanation structure)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RejectionReason:
    """
    Why a command was refused.

    code is one of ReasonCode; message is rendered verbatim to the user;
    policy_name identifies the check that refused it.
    """

    code: str
    message: str
    policy_name: str

    def __post_init__(self):
        if not self.code or not isinstance(self.code, str):
            raise ValueError("code must be a non-empty string.")

        if not self.message or not isinstance(self.message, str):
            raise ValueError("message must be a non-empty string.")

        if not self.policy_name or not isinstance(self.policy_name, str):
            raise ValueError("policy_name must be a non-empty string.")

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "policy_name": self.policy_name,
        }


# ══════════════════════════════════════════════════════════════
# STANDARD REJECTION CODES
# ══════════════════════════════════════════════════════════════

class ReasonCode:
    """
    Known rejection codes.

    Convention: SCREAMING_SNAKE_CASE.
    """

    # ── Ledger ────────────────────────────────────────────────
    NOT_FOUND = "NOT_FOUND"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    INVALID_QUANTITY = "INVALID_QUANTITY"

    # ── Command center / interpreter ──────────────────────────
    MISSING_PARAMETERS = "MISSING_PARAMETERS"
    INTERPRETER_FAILURE = "INTERPRETER_FAILURE"
    UNKNOWN_COMMAND = "UNKNOWN_COMMAND"
    EMPTY_COMMAND = "EMPTY_COMMAND"
