"""Transport seam between the client and the delivery handlers."""

from __future__ import annotations

import logging
from typing import Protocol

from .record import GraylogRecord

__all__ = ["RECORDS_LOGGER_NAME", "RECORD_ATTR", "LoggerTransport", "Transport"]

RECORDS_LOGGER_NAME = "gelflog.records"
RECORD_ATTR = "graylog"


class Transport(Protocol):
    def send(self, record: GraylogRecord) -> None: ...


class LoggerTransport:
    """Deliver records through the handlers attached to a stdlib logger.

    The :class:`GraylogRecord` rides on the ``logging.LogRecord`` under the
    ``graylog`` attribute so handlers and formatters can read every field.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    def send(self, record: GraylogRecord) -> None:
        self.logger.log(
            record.severity.logging_level,
            record.message,
            extra={RECORD_ATTR: record},
        )
