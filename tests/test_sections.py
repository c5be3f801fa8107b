from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from gelflog.core.extractor import ErrorInfo
from gelflog.formatters.sections import format_data, format_errors, format_stacks, to_json


@dataclass
class Point:
    x: int
    y: int


def test_format_errors() -> None:
    assert format_errors([]) is None
    assert format_errors(["m"]) == "m"
    assert format_errors(["a", "b"]) == "[Erro #1]: a | [Erro #2]: b"


def test_format_stacks_single_trace_is_verbatim() -> None:
    assert format_stacks([]) is None
    assert format_stacks([ErrorInfo("ignored", "t")]) == "t"


def test_format_stacks_labels_each_trace() -> None:
    traces = [ErrorInfo("A", "at a()"), ErrorInfo("B", "at b()")]

    assert format_stacks(traces) == (
        '[Backtrace do erro #1 "A"]:\nat a()\n\n'
        '[Backtrace do erro #2 "B"]:\nat b()\n\n'
    )


def test_format_data_single_structure_is_not_wrapped() -> None:
    assert format_data([]) is None
    assert format_data([{"x": 1}]) == '{\n    "x": 1\n}'
    assert format_data([[1, 2]]) == "[\n    1,\n    2\n]"


def test_format_data_several_items_become_a_list() -> None:
    assert format_data([1, 2]) == "[\n    1,\n    2\n]"
    assert format_data(["only"]) == '[\n    "only"\n]'


def test_to_json_handles_arbitrary_values() -> None:
    assert to_json({"p": Point(1, 2)}) == '{"p":{"x":1,"y":2}}'
    assert to_json([date(2024, 5, 1), b"raw", {3}]) == '["2024-05-01","raw",[3]]'
    assert to_json(object()).startswith('"<object object at')
