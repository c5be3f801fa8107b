from __future__ import annotations

from typing import Any, Dict

from gelflog.core.classifier import CIRCULAR_MARKER, classify
from gelflog.core.extractor import ErrorInfo, extract_error, is_error_like


class FakeError:
    def __init__(self, text: str, stack: str = "") -> None:
        self.text = text
        self.stack = stack

    def message(self) -> str:
        return self.text

    def trace(self) -> str:
        return self.stack


class HasMessageAttribute:
    message = "not callable"
    trace = "not callable"


def _raised(exc: Exception) -> Exception:
    try:
        raise exc
    except Exception as caught:
        return caught


def test_exception_is_error_like_and_extracted() -> None:
    exc = _raised(RuntimeError("disk full"))

    info = extract_error(exc)

    assert is_error_like(exc)
    assert info.message == "disk full"
    assert "_raised" in info.trace
    assert not info.trace.endswith("\n")


def test_unraised_exception_has_empty_trace() -> None:
    assert extract_error(ValueError("bad")) == ErrorInfo(message="bad", trace="")


def test_duck_typed_error_capability() -> None:
    assert is_error_like(FakeError("x"))
    assert extract_error(FakeError("x", "at foo()")) == ErrorInfo("x", "at foo()")
    assert not is_error_like(HasMessageAttribute())
    assert not is_error_like(ValueError)
    assert not is_error_like({"message": "x"})


def test_plain_leading_message_is_excluded() -> None:
    result = classify("boom", [])

    assert result.data_items == []
    assert result.error_messages == []
    assert result.stack_traces == []


def test_error_leading_message_comes_first() -> None:
    result = classify(FakeError("first", "t1"), ["scalar", FakeError("second", "t2")])

    assert result.error_messages == ["first", "second"]
    assert [info.trace for info in result.stack_traces] == ["t1", "t2"]
    assert result.data_items == ["scalar"]


def test_nested_errors_are_pruned_from_a_copy() -> None:
    inner_error = FakeError("nested", "at deep()")
    payload: Dict[str, Any] = {
        "user": "alice",
        "ctx": {"attempt": 2, "cause": inner_error, "tags": ["a", FakeError("in list"), "b"]},
    }

    result = classify("boom", [payload])

    assert result.error_messages == ["nested", "in list"]
    assert result.data_items == [{"user": "alice", "ctx": {"attempt": 2, "tags": ["a", "b"]}}]
    assert payload["ctx"]["cause"] is inner_error
    assert len(payload["ctx"]["tags"]) == 3


def test_structures_empty_after_pruning_are_dropped() -> None:
    result = classify("boom", [{"err": FakeError("only")}, [], ("x",)])

    assert result.error_messages == ["only"]
    assert result.data_items == [["x"]]


def test_nested_empty_containers_are_kept() -> None:
    result = classify("boom", [{"inner": {"err": FakeError("e")}, "n": 1}])

    assert result.data_items == [{"inner": {}, "n": 1}]


def test_every_error_leaf_lands_once() -> None:
    errors = [FakeError(f"e{i}") for i in range(5)]
    args = [errors[0], {"a": errors[1], "b": [errors[2], {"c": errors[3]}]}, 7, errors[4]]

    result = classify("msg", args)

    assert result.error_messages == ["e0", "e1", "e2", "e3", "e4"]
    assert len(result.stack_traces) == 5
    assert result.data_items == [{"b": [{}]}, 7]


def test_non_json_keys_are_stringified() -> None:
    result = classify("msg", [{(1, 2): "pair", 3: "three"}])

    assert result.data_items == [{"(1, 2)": "pair", 3: "three"}]


def test_cycles_are_replaced_by_marker() -> None:
    loop: Dict[str, Any] = {"name": "loop"}
    loop["self"] = loop

    result = classify("msg", [loop])

    assert result.data_items == [{"name": "loop", "self": CIRCULAR_MARKER}]


def test_errors_inside_sets_are_extracted() -> None:
    hidden = FakeError("hidden")

    result = classify("boom", [{"tags": {hidden, "t"}}, frozenset([FakeError("frozen")])])

    assert sorted(result.error_messages) == ["frozen", "hidden"]
    assert result.data_items == [{"tags": ["t"]}]
