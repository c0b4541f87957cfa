"""
StockMaster Interpreter - Hosted Model Client
================================================
One outbound generateContent call per command: system instruction plus
the user's text, JSON response mode, fixed response schema.

No retries. Any transport or decoding failure surfaces immediately as
InterpreterFailure. Every request carries an explicit timeout.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Protocol

import requests

from ai.interpreter.errors import InterpreterFailure
from ai.interpreter.intents import Intent, parse_intent
from ai.interpreter.prompts import RESPONSE_SCHEMA, SYSTEM_PROMPT
from config import settings

logger = logging.getLogger("stockmaster.interpreter")


# ══════════════════════════════════════════════════════════════
# INTERPRETER PROTOCOL
# ══════════════════════════════════════════════════════════════

class CommandInterpreter(Protocol):
    """Free text in, Intent out. Raises InterpreterError subclasses."""

    def interpret(self, text: str) -> Intent:
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# GEMINI CLIENT
# ══════════════════════════════════════════════════════════════

class GeminiInterpreter:
    """
    Interpreter backed by the Gemini REST API.

    A requests.Session may be injected (tests pass a fake); otherwise
    the module-level requests API is used.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Any = None,
    ):
        self._api_key = settings.API_KEY if api_key is None else api_key
        self._model = model or settings.MODEL_ID
        self._api_base = (api_base or settings.API_BASE).rstrip("/")
        self._timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self._http = session if session is not None else requests

    @property
    def endpoint(self) -> str:
        return f"{self._api_base}/models/{self._model}:generateContent"

    def build_request_body(self, text: str) -> Dict[str, Any]:
        return {
            "systemInstruction": {"parts": [{"text": SYSTEM_PROMPT}]},
            "contents": [
                {"role": "user", "parts": [{"text": text}]},
            ],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }

    def request_raw(self, text: str) -> Dict[str, Any]:
        """Send one request and return the model's JSON object, undecoded into an Intent."""
        if not self._api_key:
            raise InterpreterFailure(
                "No API key configured. Set STOCKMASTER_API_KEY or GEMINI_API_KEY."
            )

        try:
            response = self._http.post(
                self.endpoint,
                headers={
                    "x-goog-api-key": self._api_key,
                    "Content-Type": "application/json",
                },
                json=self.build_request_body(text),
                timeout=self._timeout,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            logger.error(f"Interpreter request failed: {e}")
            raise InterpreterFailure() from e
        except ValueError as e:
            logger.error(f"Interpreter returned a non-JSON body: {e}")
            raise InterpreterFailure() from e

        payload = self._extract_text(body)
        try:
            return json.loads(payload)
        except json.JSONDecodeError as e:
            logger.error(f"Interpreter returned malformed intent JSON: {e}")
            raise InterpreterFailure() from e

    @staticmethod
    def _extract_text(body: Any) -> str:
        try:
            parts = body["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError):
            logger.error("Interpreter response had no candidates")
            raise InterpreterFailure("No response from AI.")
        if not isinstance(parts, list):
            logger.error(f"Interpreter response parts were {type(parts).__name__}")
            raise InterpreterFailure("No response from AI.")
        text = "".join(
            part["text"] for part in parts
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        )
        if not text.strip():
            raise InterpreterFailure("No response from AI.")
        return text

    def interpret(self, text: str) -> Intent:
        raw = self.request_raw(text)
        logger.debug(f"Interpreter raw result: {raw}")
        intent = parse_intent(raw)
        logger.info(f"Interpreted {text!r} as {intent.tool.value}")
        return intent
