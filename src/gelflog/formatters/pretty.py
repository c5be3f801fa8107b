"""Streaming re-indenter for compact JSON text."""

from __future__ import annotations

from typing import Iterable, Iterator, List

__all__ = ["INDENT", "PrettyPrinter", "iter_pretty", "pretty_print"]

INDENT = "    "

_WHITESPACE = frozenset(" \t\n\r")


class PrettyPrinter:
    """Character-level JSON indenter that never builds a parse tree.

    State survives between :meth:`feed` calls, so the output is the same
    whether the input arrives in one piece or in arbitrary chunks.
    """

    def __init__(self, indent: str = INDENT) -> None:
        self.indent = indent
        self.level = 0
        self.in_string = False
        self.in_escape = False
        # newline owed to the next emitted character, as an indent level
        self._pending: int | None = None

    def feed(self, text: str) -> str:
        out: List[str] = []
        for char in text:
            out.append(self._step(char))
        return "".join(out)

    def _step(self, char: str) -> str:
        newline = self._pending
        self._pending = None
        suffix = ""

        if self.in_escape:
            self.in_escape = False
        elif char == '"':
            self.in_string = not self.in_string
        elif not self.in_string:
            if char in "}]":
                self.level -= 1
                newline = self.level
            elif char in "{[":
                self.level += 1
                self._pending = self.level
            elif char == ",":
                self._pending = self.level
            elif char == ":":
                suffix = " "
            elif char in _WHITESPACE:
                self._pending = newline
                return ""
        elif char == "\\":
            self.in_escape = True

        if newline is None:
            return char + suffix
        return "\n" + self.indent * newline + char + suffix


def iter_pretty(chunks: Iterable[str], indent: str = INDENT) -> Iterator[str]:
    printer = PrettyPrinter(indent)
    for chunk in chunks:
        piece = printer.feed(chunk)
        if piece:
            yield piece


def pretty_print(compact: str, indent: str = INDENT) -> str:
    """Return ``compact`` re-indented with one ``indent`` per nesting level."""

    return PrettyPrinter(indent).feed(compact)
