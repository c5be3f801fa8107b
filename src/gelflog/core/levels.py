"""Syslog severity levels and their stdlib logging counterparts."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Dict

__all__ = ["Severity", "UnsupportedSeverityError", "register_levels"]


class UnsupportedSeverityError(ValueError):
    """Raised when a log call names a severity that does not exist."""


class Severity(IntEnum):
    """The eight syslog severities, lower value means more severe."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def logging_level(self) -> int:
        return _LOGGING_LEVELS[self]

    @classmethod
    def parse(cls, value: "Severity | int | str") -> "Severity":
        """Resolve ``value`` to a severity or raise :class:`UnsupportedSeverityError`."""

        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise UnsupportedSeverityError(f"Unsupported severity number: {value}") from None
        if isinstance(value, str):
            member = cls.__members__.get(value.strip().upper())
            if member is not None:
                return member
        raise UnsupportedSeverityError(f"Unsupported severity: {value!r}")


_LOGGING_LEVELS: Dict[Severity, int] = {
    Severity.EMERGENCY: 60,
    Severity.ALERT: 55,
    Severity.CRITICAL: logging.CRITICAL,
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.NOTICE: 25,
    Severity.INFO: logging.INFO,
    Severity.DEBUG: logging.DEBUG,
}

_EXTRA_LEVEL_NAMES = (Severity.EMERGENCY, Severity.ALERT, Severity.NOTICE)


def register_levels() -> None:
    """Register EMERGENCY, ALERT and NOTICE on the stdlib logging module.

    Levels already known to ``logging`` are left untouched, so repeated
    calls are harmless.
    """

    for severity in _EXTRA_LEVEL_NAMES:
        number = severity.logging_level
        if logging.getLevelName(number) != severity.name:
            logging.addLevelName(number, severity.name)
