"""Public API surface for gelflog."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .config.loader import load_configuration
from .core.client import GraylogClient
from .core.manager import GLOBAL_MANAGER
from .utils.time import Clock, utcnow

_LOGGER = logging.getLogger(__name__)

_CLIENT: GraylogClient | None = None


def configure(overrides: Mapping[str, Any] | None = None, *, clock: Clock = utcnow) -> GraylogClient:
    """Create the process-wide client, or return it if it already exists.

    Configuration is write-once: later calls ignore ``overrides`` and hand
    back the first client.
    """

    global _CLIENT
    if _CLIENT is not None:
        _LOGGER.debug("gelflog already configured; reusing the existing client")
        return _CLIENT
    config = load_configuration(overrides or {})
    transport = GLOBAL_MANAGER.configure(config)
    _CLIENT = GraylogClient(config.identity(), transport, clock=clock)
    return _CLIENT


def get_client() -> GraylogClient:
    """Return the process-wide client, configuring from ambient sources if needed."""

    if _CLIENT is None:
        return configure({})
    return _CLIENT

