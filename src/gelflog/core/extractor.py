"""Recognise error-like values and pull out their message and stack trace."""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

__all__ = ["ErrorInfo", "SupportsErrorInfo", "extract_error", "is_error_like"]


@runtime_checkable
class SupportsErrorInfo(Protocol):
    """Anything that can describe itself as an error without being an exception."""

    def message(self) -> str: ...

    def trace(self) -> str: ...


@dataclass(slots=True, frozen=True)
class ErrorInfo:
    message: str
    trace: str = ""


def is_error_like(value: Any) -> bool:
    if isinstance(value, BaseException):
        return True
    if isinstance(value, type) or not isinstance(value, SupportsErrorInfo):
        return False
    # runtime_checkable only checks attribute presence
    return callable(value.message) and callable(value.trace)


def extract_error(value: Any) -> ErrorInfo:
    """Return the message and stack trace of an error-like ``value``.

    Exceptions that were never raised have no traceback; their trace is an
    empty string.
    """

    if isinstance(value, BaseException):
        frames = traceback.format_tb(value.__traceback__) if value.__traceback__ else []
        return ErrorInfo(message=str(value), trace="".join(frames).rstrip("\n"))
    if not is_error_like(value):
        raise TypeError(f"{type(value).__name__} is not an error-like value")
    trace = value.trace()
    return ErrorInfo(message=str(value.message()), trace=str(trace) if trace else "")
