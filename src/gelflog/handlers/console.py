"""Console mirror handlers."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any, List

from ..formatters.console import ConsoleFormatter

__all__ = ["BelowLevelFilter", "ConsoleHandlerConfig", "MinLevelFilter", "build_console_handlers"]


class MinLevelFilter(logging.Filter):
    """Allow records at or above a minimum level."""

    def __init__(self, minimum: int) -> None:
        super().__init__()
        self.minimum = minimum

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        return record.levelno >= self.minimum


class BelowLevelFilter(logging.Filter):
    """Allow records strictly below a level."""

    def __init__(self, ceiling: int) -> None:
        super().__init__()
        self.ceiling = ceiling

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        return record.levelno < self.ceiling


@dataclass(slots=True)
class ConsoleHandlerConfig:
    """Where the mirror writes; records at ``split_level`` and above go to stderr."""

    out_stream: str = "stdout"
    err_stream: str = "stderr"
    split_level: int = logging.ERROR


def _resolve_stream(name: str) -> Any:
    if name == "stdout":
        return sys.stdout
    if name == "stderr":
        return sys.stderr
    return None


def build_console_handlers(config: ConsoleHandlerConfig | None = None) -> List[logging.Handler]:
    """Return the stdout and stderr handlers sharing one :class:`ConsoleFormatter`."""

    cfg = config or ConsoleHandlerConfig()
    formatter = ConsoleFormatter()

    out_handler = logging.StreamHandler(stream=_resolve_stream(cfg.out_stream))
    out_handler.addFilter(BelowLevelFilter(cfg.split_level))
    err_handler = logging.StreamHandler(stream=_resolve_stream(cfg.err_stream))
    err_handler.addFilter(MinLevelFilter(cfg.split_level))

    handlers: List[logging.Handler] = [out_handler, err_handler]
    for handler in handlers:
        handler.setLevel(logging.NOTSET)
        handler.setFormatter(formatter)
    return handlers
