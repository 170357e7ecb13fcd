"""StateException hierarchy."""

from __future__ import annotations


class StateException(Exception):
    """Base for all state resolution exceptions."""


class StateInternalError(StateException):
    """Wraps an unexpected exception raised by a state layer."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause
