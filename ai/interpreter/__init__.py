"""
StockMaster Interpreter - Public API
=======================================
Turns free text into a typed Intent via a hosted language model.
"""

from ai.interpreter.client import CommandInterpreter, GeminiInterpreter
from ai.interpreter.errors import (
    InterpreterError,
    InterpreterFailure,
    MissingParameters,
    UnknownCommand,
)
from ai.interpreter.intents import (
    AdjustIntent,
    DeliverIntent,
    Intent,
    MoveIntent,
    ReceiveIntent,
    ReportIntent,
    ToolAction,
    UnknownIntent,
    missing_fields,
    parse_intent,
    require_fields,
)

__all__ = [
    "CommandInterpreter",
    "GeminiInterpreter",
    "InterpreterError",
    "InterpreterFailure",
    "MissingParameters",
    "UnknownCommand",
    "Intent",
    "ReceiveIntent",
    "DeliverIntent",
    "MoveIntent",
    "AdjustIntent",
    "ReportIntent",
    "UnknownIntent",
    "ToolAction",
    "missing_fields",
    "parse_intent",
    "require_fields",
]
