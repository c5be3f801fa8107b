"""The application-facing logging client."""

from __future__ import annotations

from typing import Any

from ..utils.time import Clock, utcnow
from .levels import Severity
from .record import GraylogRecord, IdentityFields, build_record
from .transport import Transport

__all__ = ["GraylogClient"]


class GraylogClient:
    """Build a record for each log call and hand it to ``transport``.

    Every call returns the record that was sent, which is convenient when
    debugging what actually reached the collector.
    """

    def __init__(self, identity: IdentityFields, transport: Transport, *, clock: Clock = utcnow) -> None:
        self.identity = identity
        self.transport = transport
        self.clock = clock

    def log(self, severity: Severity | int | str, message: Any, *args: Any) -> GraylogRecord:
        level = Severity.parse(severity)
        record = build_record(self.identity, level, message, args, clock=self.clock)
        self.transport.send(record)
        return record

    def emergency(self, message: Any, *args: Any) -> GraylogRecord:
        return self.log(Severity.EMERGENCY, message, *args)

    def alert(self, message: Any, *args: Any) -> GraylogRecord:
        return self.log(Severity.ALERT, message, *args)

    def critical(self, message: Any, *args: Any) -> GraylogRecord:
        return self.log(Severity.CRITICAL, message, *args)

    def error(self, message: Any, *args: Any) -> GraylogRecord:
        return self.log(Severity.ERROR, message, *args)

    def warning(self, message: Any, *args: Any) -> GraylogRecord:
        return self.log(Severity.WARNING, message, *args)

    def notice(self, message: Any, *args: Any) -> GraylogRecord:
        return self.log(Severity.NOTICE, message, *args)

    def info(self, message: Any, *args: Any) -> GraylogRecord:
        return self.log(Severity.INFO, message, *args)

    def debug(self, message: Any, *args: Any) -> GraylogRecord:
        return self.log(Severity.DEBUG, message, *args)
