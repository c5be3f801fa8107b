"""GELF UDP handler implementation."""

from __future__ import annotations

import json
import logging
import socket
from dataclasses import dataclass
from logging.handlers import DatagramHandler
from typing import Any, Dict

from ..core.record import GraylogRecord
from ..core.transport import RECORD_ATTR

__all__ = ["GELFUDPConfig", "GELFUDPHandler", "build_gelf_udp_handler", "gelf_payload"]

_GELF_VERSION = "1.1"


@dataclass(slots=True)
class GELFUDPConfig:
    host: str = "localhost"
    port: int = 12201
    source: str | None = None


def gelf_payload(record: GraylogRecord, source: str) -> Dict[str, Any]:
    """Map ``record`` onto a GELF 1.1 message with ``_`` additional fields."""

    payload: Dict[str, Any] = {
        "version": _GELF_VERSION,
        "host": source,
        "short_message": record.message,
        "timestamp": round(record.timestamp.timestamp(), 3),
        "level": int(record.severity),
    }
    for key, value in record.fields().items():
        payload[f"_{key}"] = value
    return payload


class GELFUDPHandler(DatagramHandler):
    """Send records carrying a :class:`GraylogRecord` as GELF JSON datagrams."""

    def __init__(self, host: str, port: int, *, source: str | None = None) -> None:
        super().__init__(host, port)
        self.source = source or socket.gethostname()

    def makePickle(self, record: logging.LogRecord) -> bytes:  # type: ignore[override]
        payload = gelf_payload(getattr(record, RECORD_ATTR), self.source)
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def build_gelf_udp_handler(config: GELFUDPConfig | None = None) -> logging.Handler:
    cfg = config or GELFUDPConfig()
    return GELFUDPHandler(cfg.host, cfg.port, source=cfg.source)
