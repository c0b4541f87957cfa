"""
Tests for integration.inbound - CommandCenter end to end over a fake
interpreter.
"""

from datetime import datetime, timezone

import pytest

from ai.interpreter import (
    AdjustIntent,
    DeliverIntent,
    InterpreterFailure,
    MissingParameters,
    MoveIntent,
    ReceiveIntent,
    ReportIntent,
    UnknownIntent,
)
from core.commands import CommandStatus, ReasonCode
from core.storage import InMemoryKeyValueStore
from core.time import FixedClock
from engines.inventory.services import InventoryLedger
from integration import REPORT_MESSAGE, CommandCenter


NOW = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


class FakeInterpreter:
    """Returns (or raises) whatever is mapped for the text."""

    def __init__(self, mapping=None):
        self.mapping = dict(mapping or {})
        self.seen = []

    def interpret(self, text):
        self.seen.append(text)
        result = self.mapping[text]
        if isinstance(result, Exception):
            raise result
        return result


def _center(mapping=None):
    clock = FixedClock(NOW)
    ledger = InventoryLedger(InMemoryKeyValueStore(), clock=clock)
    interpreter = FakeInterpreter(mapping)
    return CommandCenter(ledger=ledger, interpreter=interpreter, clock=clock), interpreter


class TestAccepted:
    def test_receive(self):
        center, _ = _center({
            "Received 50 iPhones at Warehouse A": ReceiveIntent(
                name="iPhones", qty=50, location="Warehouse A",
            ),
        })
        outcome = center.submit("Received 50 iPhones at Warehouse A")

        assert outcome.status == CommandStatus.ACCEPTED
        assert outcome.message == "Added 50 iPhones to Warehouse A."
        assert outcome.occurred_at == NOW
        assert center.ledger.find_product("iphones").quantity == 50

    def test_full_sequence(self):
        center, _ = _center({
            "r": ReceiveIntent(name="Chairs", qty=120, location="Showroom"),
            "d": DeliverIntent(name="chairs", qty=20),
            "m": MoveIntent(name="Chairs", to_location="Dock"),
            "a": AdjustIntent(name="Chairs", true_qty=99),
        })
        messages = [center.submit(text).message for text in "rdma"]

        assert messages == [
            "Added 120 Chairs to Showroom.",
            "Delivered 20 chairs.",
            "Moved Chairs to Dock.",
            "Adjusted Chairs to 99.",
        ]
        chairs = center.ledger.find_product("Chairs")
        assert chairs.quantity == 99
        assert chairs.location == "Dock"
        assert len(center.ledger.list_log()) == 4

    def test_report_mutates_nothing(self):
        center, _ = _center({"How are we?": ReportIntent()})
        outcome = center.submit("How are we?")
        assert outcome.is_accepted
        assert outcome.message == REPORT_MESSAGE
        assert center.ledger.list_log() == []

    def test_text_is_stripped_before_interpreting(self):
        center, interpreter = _center({"report": ReportIntent()})
        center.submit("  report  ")
        assert interpreter.seen == ["report"]


class TestRejected:
    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_command_skips_interpreter(self, text):
        center, interpreter = _center()
        outcome = center.submit(text)
        assert outcome.is_rejected
        assert outcome.reason.code == ReasonCode.EMPTY_COMMAND
        assert outcome.message == "Please enter a command."
        assert interpreter.seen == []

    def test_interpreter_failure(self):
        center, _ = _center({"x": InterpreterFailure()})
        outcome = center.submit("x")
        assert outcome.reason.code == ReasonCode.INTERPRETER_FAILURE
        assert outcome.message == "Failed to process command with AI."
        assert outcome.intent is None

    def test_missing_parameters(self):
        center, _ = _center({"x": MissingParameters("Adding Stock", ["qty"])})
        outcome = center.submit("x")
        assert outcome.reason.code == ReasonCode.MISSING_PARAMETERS
        assert center.ledger.list_products() == []

    def test_unknown_command(self):
        center, _ = _center({"sing": UnknownIntent()})
        outcome = center.submit("sing")
        assert outcome.reason.code == ReasonCode.UNKNOWN_COMMAND
        assert outcome.message == "Unknown command. Please try again."
        assert outcome.intent == UnknownIntent()

    def test_not_found(self):
        center, _ = _center({"d": DeliverIntent(name="Gadget", qty=1)})
        outcome = center.submit("d")
        assert outcome.reason.code == ReasonCode.NOT_FOUND
        assert outcome.message == 'Product "Gadget" not found.'

    def test_insufficient_stock_leaves_ledger_unchanged(self):
        center, _ = _center({
            "r": ReceiveIntent(name="Widget", qty=5, location="A"),
            "d": DeliverIntent(name="Widget", qty=6),
        })
        center.submit("r")
        outcome = center.submit("d")
        assert outcome.reason.code == ReasonCode.INSUFFICIENT_STOCK
        assert center.ledger.find_product("Widget").quantity == 5
        assert len(center.ledger.list_log()) == 1

    def test_invalid_quantity(self):
        center, _ = _center({"r": ReceiveIntent(name="Widget", qty=0, location="A")})
        outcome = center.submit("r")
        assert outcome.reason.code == ReasonCode.INVALID_QUANTITY
        assert center.ledger.list_products() == []


class TestApply:
    def test_unsupported_intent_type(self):
        center, _ = _center()
        with pytest.raises(TypeError, match="Unsupported intent"):
            center.apply("ADD_STOCK")

    def test_intent_with_missing_field_is_rejected(self):
        center, _ = _center()
        intent = ReceiveIntent(name="Widget", qty=None, location="A")
        outcome = center.apply(intent)

        assert outcome.is_rejected
        assert outcome.reason.code == ReasonCode.MISSING_PARAMETERS
        assert outcome.message == "Missing parameters for Adding Stock: qty."
        assert outcome.intent == intent
        assert center.ledger.list_products() == []

    @pytest.mark.parametrize("intent", [
        DeliverIntent(name="Widget", qty="3"),
        MoveIntent(name="Widget", to_location="", qty=None),
        AdjustIntent(name=None, true_qty=4),
    ])
    def test_unusable_fields_never_raise(self, intent):
        center, _ = _center()
        outcome = center.apply(intent)
        assert outcome.reason.code == ReasonCode.MISSING_PARAMETERS

    def test_zero_quantity_move_applies(self):
        center, _ = _center({
            "r": ReceiveIntent(name="Widget", qty=5, location="A"),
        })
        center.submit("r")
        outcome = center.apply(MoveIntent(name="Widget", to_location="B", qty=0))
        assert outcome.is_accepted
        assert center.ledger.find_product("Widget").location == "B"
