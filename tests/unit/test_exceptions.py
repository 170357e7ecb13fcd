"""Tests for StateException hierarchy."""

from __future__ import annotations

from fastapi_request_state.exceptions import StateException, StateInternalError


class TestStateException:
    def test_is_base_exception(self) -> None:
        exc = StateException("test")
        assert isinstance(exc, Exception)
        assert str(exc) == "test"


class TestStateInternalError:
    def test_detail_and_cause(self) -> None:
        cause = RuntimeError("boom")
        exc = StateInternalError("Internal state error", cause=cause)
        assert exc.detail == "Internal state error"
        assert exc.cause is cause
        assert str(exc) == "Internal state error"

    def test_cause_defaults_to_none(self) -> None:
        assert StateInternalError("x").cause is None

    def test_is_state_exception(self) -> None:
        assert issubclass(StateInternalError, StateException)
