"""Partition log call arguments into data, error messages and stack traces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Set

from .extractor import ErrorInfo, extract_error, is_error_like

__all__ = ["CIRCULAR_MARKER", "ClassificationResult", "classify", "is_structured"]

CIRCULAR_MARKER = "[circular reference]"

_JSON_KEY_TYPES = (str, int, float, bool, type(None))


@dataclass(slots=True)
class ClassificationResult:
    data_items: List[Any] = field(default_factory=list)
    error_messages: List[str] = field(default_factory=list)
    stack_traces: List[ErrorInfo] = field(default_factory=list)

    def add_error(self, value: Any) -> None:
        info = extract_error(value)
        self.error_messages.append(info.message)
        self.stack_traces.append(info)


def is_structured(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple, set, frozenset))


def classify(message: Any, extras: Iterable[Any]) -> ClassificationResult:
    """Walk the call arguments and route every leaf to exactly one bucket.

    The leading ``message`` only contributes when it is itself error-like.
    Structured extras are pruned of nested errors; the pruned copies are
    kept unless nothing is left. Caller-owned containers are never mutated.
    """

    result = ClassificationResult()
    if is_error_like(message):
        result.add_error(message)

    for value in extras:
        if is_error_like(value):
            result.add_error(value)
        elif is_structured(value):
            pruned = _prune(value, result, set())
            if pruned:
                result.data_items.append(pruned)
        else:
            result.data_items.append(value)
    return result


def _prune(container: Any, result: ClassificationResult, path: Set[int]) -> Any:
    marker = id(container)
    path.add(marker)
    try:
        if isinstance(container, Mapping):
            pruned: Dict[Any, Any] = {}
            for key, value in container.items():
                if is_error_like(value):
                    result.add_error(value)
                    continue
                pruned[_json_key(key)] = _prune_child(value, result, path)
            return pruned

        items: List[Any] = []
        for value in container:
            if is_error_like(value):
                result.add_error(value)
                continue
            items.append(_prune_child(value, result, path))
        return items
    finally:
        path.discard(marker)


def _prune_child(value: Any, result: ClassificationResult, path: Set[int]) -> Any:
    if not is_structured(value):
        return value
    if id(value) in path:
        return CIRCULAR_MARKER
    return _prune(value, result, path)


def _json_key(key: Any) -> Any:
    return key if isinstance(key, _JSON_KEY_TYPES) else str(key)
