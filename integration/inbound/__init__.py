"""
StockMaster Integration - Inbound Command Center
===================================================
The caller boundary between free text and the ledger.

Flow per submission:
    1. Interpret text → Intent (hosted model, may fail)
    2. Map Intent → ledger request (required fields already checked)
    3. Apply through the ledger
    4. Return exactly one CommandOutcome

Every failure (interpreter, missing fields, unknown command, ledger
policy) is caught here and turned into a REJECTED outcome with a
user-visible message. Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from ai.interpreter import (
    AdjustIntent,
    CommandInterpreter,
    DeliverIntent,
    Intent,
    InterpreterError,
    MoveIntent,
    ReceiveIntent,
    ReportIntent,
    UnknownCommand,
    UnknownIntent,
    require_fields,
)
from core.commands import CommandOutcome, ReasonCode, RejectionReason
from core.time import Clock, SystemClock
from engines.inventory.errors import LedgerError
from engines.inventory.services import InventoryLedger

logger = logging.getLogger("stockmaster.command_center")

REPORT_MESSAGE = "Report requested. See the live warehouse state."


class CommandCenter:
    """
    Usage:
        center = CommandCenter(ledger=ledger, interpreter=GeminiInterpreter())
        outcome = center.submit("Received 50 iPhones at Warehouse A")
        outcome.is_accepted, outcome.message
    """

    def __init__(
        self,
        *,
        ledger: InventoryLedger,
        interpreter: CommandInterpreter,
        clock: Optional[Clock] = None,
    ):
        self._ledger = ledger
        self._interpreter = interpreter
        self._clock = clock or SystemClock()
        self._handlers: Dict[type, Callable[[Intent], str]] = {
            ReceiveIntent: self._apply_receive,
            DeliverIntent: self._apply_deliver,
            MoveIntent: self._apply_move,
            AdjustIntent: self._apply_adjust,
            ReportIntent: self._apply_report,
            UnknownIntent: self._apply_unknown,
        }

    @property
    def ledger(self) -> InventoryLedger:
        return self._ledger

    # ══════════════════════════════════════════════════════════
    # SUBMIT (main orchestration)
    # ══════════════════════════════════════════════════════════

    def submit(self, text: str) -> CommandOutcome:
        if not text or not text.strip():
            return CommandOutcome.rejected(
                RejectionReason(
                    code=ReasonCode.EMPTY_COMMAND,
                    message="Please enter a command.",
                    policy_name="command_center",
                ),
                occurred_at=self._clock.now_utc(),
            )

        try:
            intent = self._interpreter.interpret(text.strip())
        except InterpreterError as e:
            logger.warning(f"Command not interpreted ({e.code}): {e}")
            return CommandOutcome.rejected(
                e.to_rejection(), occurred_at=self._clock.now_utc(),
            )

        return self.apply(intent)

    def apply(self, intent: Intent) -> CommandOutcome:
        """Apply an already-interpreted intent. Unusable fields are rejected, not raised."""
        handler = self._handlers.get(type(intent))
        if handler is None:
            raise TypeError(f"Unsupported intent: {type(intent).__name__}")

        try:
            message = handler(require_fields(intent))
        except (InterpreterError, LedgerError) as e:
            logger.warning(f"Command rejected ({e.code}): {e}")
            return CommandOutcome.rejected(
                e.to_rejection(), occurred_at=self._clock.now_utc(), intent=intent,
            )

        logger.info(f"Command accepted: {message}")
        return CommandOutcome.accepted(
            message, occurred_at=self._clock.now_utc(), intent=intent,
        )

    # ══════════════════════════════════════════════════════════
    # INTENT HANDLERS
    # ══════════════════════════════════════════════════════════

    def _apply_receive(self, intent: ReceiveIntent) -> str:
        self._ledger.receive(intent.name, intent.qty, intent.location, intent.category)
        return f"Added {intent.qty} {intent.name} to {intent.location}."

    def _apply_deliver(self, intent: DeliverIntent) -> str:
        self._ledger.deliver(intent.name, intent.qty)
        return f"Delivered {intent.qty} {intent.name}."

    def _apply_move(self, intent: MoveIntent) -> str:
        self._ledger.move(intent.name, intent.qty, intent.to_location)
        return f"Moved {intent.name} to {intent.to_location}."

    def _apply_adjust(self, intent: AdjustIntent) -> str:
        self._ledger.adjust(intent.name, intent.true_qty)
        return f"Adjusted {intent.name} to {intent.true_qty}."

    def _apply_report(self, intent: ReportIntent) -> str:
        return REPORT_MESSAGE

    def _apply_unknown(self, intent: UnknownIntent) -> str:
        raise UnknownCommand(intent.raw_tool)
