"""Human readable banner for the console mirror."""

from __future__ import annotations

import logging

from ..core.record import GraylogRecord
from ..core.transport import RECORD_ATTR
from ..utils.time import format_timestamp

__all__ = ["ConsoleFormatter", "render_banner"]

_HEADER = "========= GRAYLOG MESSAGE [{timestamp}]: ========="
_FOOTER = "================= END OF GRAYLOG MESSAGE ================="


def render_banner(record: GraylogRecord) -> str:
    identity = record.identity
    lines = [
        _HEADER.format(timestamp=format_timestamp(record.timestamp)),
        f"Application: {identity.app_name} | Version: {identity.app_version} | Environment: {identity.environment}",
        f'[{record.severity.label}] "{record.message}"',
    ]
    if record.error_message:
        lines.append(f'Error message: "{record.error_message.strip()}"')
    if record.error_stack:
        lines.append("Backtrace:")
        lines.append(record.error_stack.strip())
    if record.extra_info:
        lines.append("Extra info:")
        lines.append(record.extra_info.strip())
    lines.append(_FOOTER)
    return "\n".join(lines)


class ConsoleFormatter(logging.Formatter):
    """Render the Graylog banner; plain records fall back to the stock format."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        graylog = getattr(record, RECORD_ATTR, None)
        if isinstance(graylog, GraylogRecord):
            return render_banner(graylog)
        return super().format(record)
