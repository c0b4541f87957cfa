"""
Tests for ai.interpreter.client - GeminiInterpreter over a fake session.
"""

import json

import pytest
import requests

from ai.interpreter import (
    DeliverIntent,
    GeminiInterpreter,
    InterpreterFailure,
    MissingParameters,
)
from ai.interpreter.prompts import RESPONSE_SCHEMA, SYSTEM_PROMPT


class FakeResponse:
    def __init__(self, body=None, status_code=200, raw_text=None):
        self._body = body
        self.status_code = status_code
        self._raw_text = raw_text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self._raw_text is not None:
            return json.loads(self._raw_text)
        return self._body


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response


def _model_body(payload) -> dict:
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def _interpreter(session, **overrides) -> GeminiInterpreter:
    defaults = dict(
        api_key="test-key",
        model="gemini-test",
        api_base="https://example.invalid/v1beta/",
        timeout=5.0,
        session=session,
    )
    defaults.update(overrides)
    return GeminiInterpreter(**defaults)


class TestRequestShape:
    def test_posts_to_generate_content(self):
        session = FakeSession(FakeResponse(_model_body({"tool": "REPORT"})))
        _interpreter(session).interpret("How are we doing?")

        url, kwargs = session.calls[0]
        assert url == "https://example.invalid/v1beta/models/gemini-test:generateContent"
        assert kwargs["headers"]["x-goog-api-key"] == "test-key"
        assert kwargs["timeout"] == 5.0

    def test_body_carries_prompt_schema_and_text(self):
        body = _interpreter(FakeSession()).build_request_body("Deliver 10 chairs")
        assert body["systemInstruction"]["parts"][0]["text"] == SYSTEM_PROMPT
        assert body["contents"][0]["parts"][0]["text"] == "Deliver 10 chairs"
        config = body["generationConfig"]
        assert config["responseMimeType"] == "application/json"
        assert config["responseSchema"] == RESPONSE_SCHEMA

    def test_exactly_one_request(self):
        session = FakeSession(FakeResponse(status_code=503))
        with pytest.raises(InterpreterFailure):
            _interpreter(session).interpret("Deliver 10 chairs")
        assert len(session.calls) == 1


class TestInterpret:
    def test_returns_intent(self):
        session = FakeSession(FakeResponse(_model_body(
            {"tool": "DELIVER_STOCK", "name": "Office Chairs", "qty": 10},
        )))
        intent = _interpreter(session).interpret("Deliver 10 office chairs")
        assert intent == DeliverIntent(name="Office Chairs", qty=10)

    def test_text_split_across_parts(self):
        body = {"candidates": [{"content": {"parts": [
            {"text": '{"tool": "DELIVER_STOCK", '},
            {"text": '"name": "W", "qty": 2}'},
        ]}}]}
        intent = _interpreter(FakeSession(FakeResponse(body))).interpret("x")
        assert intent == DeliverIntent(name="W", qty=2)

    def test_missing_fields_propagate(self):
        session = FakeSession(FakeResponse(_model_body({"tool": "DELIVER_STOCK"})))
        with pytest.raises(MissingParameters):
            _interpreter(session).interpret("Deliver")


class TestFailures:
    def test_no_api_key(self):
        session = FakeSession()
        with pytest.raises(InterpreterFailure, match="No API key"):
            _interpreter(session, api_key="").interpret("Deliver 1 W")
        assert session.calls == []

    def test_http_error(self):
        session = FakeSession(FakeResponse(status_code=500))
        with pytest.raises(InterpreterFailure, match="Failed to process command with AI."):
            _interpreter(session).interpret("x")

    def test_timeout(self):
        session = FakeSession(exc=requests.Timeout("read timed out"))
        with pytest.raises(InterpreterFailure):
            _interpreter(session).interpret("x")

    def test_non_json_body(self):
        session = FakeSession(FakeResponse(raw_text="<html>oops</html>"))
        with pytest.raises(InterpreterFailure):
            _interpreter(session).interpret("x")

    @pytest.mark.parametrize("body", [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": [{"text": "   "}]}}]},
        {"candidates": [{"content": {"parts": None}}]},
        {"candidates": [{"content": {"parts": "text"}}]},
        {"candidates": [{"content": {"parts": [{"text": None}]}}]},
    ])
    def test_empty_response(self, body):
        with pytest.raises(InterpreterFailure, match="No response from AI."):
            _interpreter(FakeSession(FakeResponse(body))).interpret("x")

    def test_malformed_intent_json(self):
        session = FakeSession(FakeResponse(_model_body('{"tool": "ADD_STOCK", ')))
        with pytest.raises(InterpreterFailure):
            _interpreter(session).interpret("x")

    def test_model_reported_error(self):
        session = FakeSession(FakeResponse(_model_body(
            {"tool": "UNKNOWN", "error": "Could not understand request"},
        )))
        with pytest.raises(InterpreterFailure, match="Could not understand request"):
            _interpreter(session).interpret("x")
