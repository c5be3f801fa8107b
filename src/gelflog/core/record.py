"""Assembly of the outgoing Graylog record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterable

from ..formatters.sections import FormattedSections, format_sections
from ..utils.time import Clock, format_timestamp, utcnow
from .classifier import classify
from .extractor import extract_error, is_error_like
from .levels import Severity

__all__ = [
    "APP_LANGUAGE",
    "GraylogRecord",
    "IdentityFields",
    "assemble_record",
    "build_record",
    "message_text",
]

APP_LANGUAGE = "Python"


@dataclass(slots=True, frozen=True)
class IdentityFields:
    """Static fields identifying the application that emits the logs."""

    app_name: str
    app_version: str
    environment: str
    app_language: str = APP_LANGUAGE

    def as_dict(self) -> Dict[str, str]:
        return {
            "app_language": self.app_language,
            "facility": self.app_name,
            "app_version": self.app_version,
            "environment": self.environment,
        }


@dataclass(slots=True, frozen=True)
class GraylogRecord:
    """A single log entry ready to be handed to a transport."""

    identity: IdentityFields
    severity: Severity
    message: str
    timestamp: datetime
    sections: FormattedSections = FormattedSections()

    @property
    def extra_info(self) -> str | None:
        return self.sections.extra_info

    @property
    def error_message(self) -> str | None:
        return self.sections.error_message

    @property
    def error_stack(self) -> str | None:
        return self.sections.error_stack

    def fields(self) -> Dict[str, str]:
        """Identity fields plus the sections that have content."""

        data = self.identity.as_dict()
        if self.error_message:
            data["error_message"] = self.error_message
        if self.error_stack:
            data["error_stack"] = self.error_stack
        if self.extra_info:
            data["extra_info"] = self.extra_info
        return data

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "timestamp": format_timestamp(self.timestamp),
            "level": self.severity.label,
            "message": self.message,
        }
        payload.update(self.fields())
        return payload


def message_text(message: Any) -> str:
    if is_error_like(message):
        return extract_error(message).message
    return message if isinstance(message, str) else str(message)


def assemble_record(
    identity: IdentityFields,
    sections: FormattedSections,
    severity: Severity,
    message: str,
    timestamp: datetime,
) -> GraylogRecord:
    return GraylogRecord(
        identity=identity,
        severity=severity,
        message=message,
        timestamp=timestamp,
        sections=sections,
    )


def build_record(
    identity: IdentityFields,
    severity: Severity | int | str,
    message: Any,
    extras: Iterable[Any] = (),
    *,
    clock: Clock = utcnow,
) -> GraylogRecord:
    """Classify, format and merge one log call into a :class:`GraylogRecord`."""

    level = Severity.parse(severity)
    sections = format_sections(classify(message, extras))
    return assemble_record(identity, sections, level, message_text(message), clock())
