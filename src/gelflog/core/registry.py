"""Registry of transport handler builders."""

from __future__ import annotations

import logging
from typing import Callable, Dict

from ..config.schema import GelflogConfig
from ..handlers.gelf_udp import GELFUDPConfig, build_gelf_udp_handler

__all__ = ["HANDLER_BUILDERS", "build_transport_handler"]

HandlerBuilder = Callable[[GelflogConfig], logging.Handler]


def _build_gelf_handler(config: GelflogConfig) -> logging.Handler:
    cfg = GELFUDPConfig(
        host=str(config.server),
        port=int(config.input_port or 0),
        source=config.host,
    )
    return build_gelf_udp_handler(cfg)


def _build_null_handler(config: GelflogConfig) -> logging.Handler:
    return logging.NullHandler()


HANDLER_BUILDERS: Dict[str, HandlerBuilder] = {
    "gelf_udp": _build_gelf_handler,
    "null": _build_null_handler,
}


def build_transport_handler(config: GelflogConfig) -> logging.Handler:
    builder = HANDLER_BUILDERS.get(config.transport)
    if builder is None:
        raise ValueError(f"Unknown transport kind: {config.transport}")
    return builder(config)
