"""Reduce classified call arguments to the optional record sections."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Sequence

from ..core.classifier import ClassificationResult, is_structured
from ..core.extractor import ErrorInfo
from .pretty import pretty_print

__all__ = [
    "FormattedSections",
    "format_data",
    "format_errors",
    "format_sections",
    "format_stacks",
    "to_json",
]


@dataclass(slots=True, frozen=True)
class FormattedSections:
    extra_info: str | None = None
    error_message: str | None = None
    error_stack: str | None = None


def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return list(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def to_json(value: Any) -> str:
    """Serialise ``value`` compactly; values JSON cannot express fall back to text."""

    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=_json_default)


def format_data(data_items: Sequence[Any]) -> str | None:
    if not data_items:
        return None
    if len(data_items) == 1 and is_structured(data_items[0]):
        payload = data_items[0]
    else:
        payload = list(data_items)
    return pretty_print(to_json(payload))


def format_errors(error_messages: Sequence[str]) -> str | None:
    if not error_messages:
        return None
    if len(error_messages) == 1:
        return error_messages[0]
    return " | ".join(
        f"[Erro #{index}]: {message}" for index, message in enumerate(error_messages, start=1)
    ).strip()


def format_stacks(stack_traces: Sequence[ErrorInfo]) -> str | None:
    if not stack_traces:
        return None
    if len(stack_traces) == 1:
        return stack_traces[0].trace
    return "".join(
        f'[Backtrace do erro #{index} "{info.message}"]:\n{info.trace}\n\n'
        for index, info in enumerate(stack_traces, start=1)
    )


def format_sections(result: ClassificationResult) -> FormattedSections:
    return FormattedSections(
        extra_info=format_data(result.data_items),
        error_message=format_errors(result.error_messages),
        error_stack=format_stacks(result.stack_traces),
    )
