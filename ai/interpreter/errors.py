"""
StockMaster Interpreter - Errors
===================================
Failures between free text and a usable intent. None of them reach the
ledger: the command center renders them and stops.
"""

from __future__ import annotations

from typing import Sequence

from core.commands.rejection import ReasonCode, RejectionReason


class InterpreterError(Exception):
    """Base error for command interpretation."""

    code = ReasonCode.INTERPRETER_FAILURE
    policy_name = "command_interpreter"

    def to_rejection(self) -> RejectionReason:
        return RejectionReason(
            code=self.code,
            message=str(self),
            policy_name=self.policy_name,
        )


class InterpreterFailure(InterpreterError):
    """The model call failed, or the model reported an error of its own."""

    def __init__(self, message: str = "Failed to process command with AI."):
        super().__init__(message)


class UnknownCommand(InterpreterError):
    """The model could not map the text to a supported action."""

    code = ReasonCode.UNKNOWN_COMMAND

    def __init__(self, tool: str = "UNKNOWN"):
        self.tool = tool
        super().__init__("Unknown command. Please try again.")


class MissingParameters(InterpreterError):
    """The intent names an action but lacks fields that action needs."""

    code = ReasonCode.MISSING_PARAMETERS
    policy_name = "required_fields_check"

    def __init__(self, action_label: str, missing: Sequence[str]):
        self.action_label = action_label
        self.missing = tuple(missing)
        super().__init__(
            f"Missing parameters for {action_label}: {', '.join(self.missing)}."
        )
