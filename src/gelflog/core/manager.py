"""Handler wiring and lifecycle for the records logger."""

from __future__ import annotations

import logging
from typing import Dict

from ..config.schema import GelflogConfig
from ..handlers.console import build_console_handlers
from .levels import register_levels
from .registry import build_transport_handler
from .transport import RECORDS_LOGGER_NAME, LoggerTransport
from .validation import validate_configuration

_LOGGER = logging.getLogger(__name__)


class LogManager:
    """Own the handlers attached to the ``gelflog.records`` logger."""

    def __init__(self, logger_name: str = RECORDS_LOGGER_NAME) -> None:
        self._logger_name = logger_name
        self._handlers: Dict[str, logging.Handler] = {}

    # ------------------------------------------------------------------
    def configure(self, config: GelflogConfig) -> LoggerTransport:
        """Validate ``config``, rebuild the handlers and return a transport."""

        validate_configuration(config)
        self._teardown()

        register_levels()

        handlers: Dict[str, logging.Handler] = {"transport": build_transport_handler(config)}
        if config.show_console:
            out_handler, err_handler = build_console_handlers()
            handlers["console_out"] = out_handler
            handlers["console_err"] = err_handler
        self._handlers = handlers

        logger = self._records_logger()
        logger.handlers = []
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        for handler in self._handlers.values():
            logger.addHandler(handler)

        _LOGGER.debug(
            "gelflog configured: transport=%s console=%s handlers=%s",
            config.transport,
            config.show_console,
            ",".join(self._handlers),
        )
        return LoggerTransport(logger)

    # ------------------------------------------------------------------
    def shutdown(self) -> None:
        """Detach and close every handler."""

        self._teardown()

    # ------------------------------------------------------------------
    def _records_logger(self) -> logging.Logger:
        return logging.getLogger(self._logger_name)

    def _teardown(self) -> None:
        logger = self._records_logger()
        for handler in self._handlers.values():
            logger.removeHandler(handler)
            try:
                handler.flush()
            except Exception:
                _LOGGER.debug("flush failed for %r", handler, exc_info=True)
            handler.close()
        self._handlers.clear()


GLOBAL_MANAGER = LogManager()
