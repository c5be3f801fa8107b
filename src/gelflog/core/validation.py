"""Configuration validation helpers."""

from __future__ import annotations

from ..config.schema import ALLOWED_ENVIRONMENTS, GelflogConfig

__all__ = ["ConfigurationError", "validate_configuration"]

NETWORK_TRANSPORTS = ("gelf_udp",)
TRANSPORT_KINDS = ("gelf_udp", "null")


class ConfigurationError(ValueError):
    """Raised when configuration validation fails."""


def validate_configuration(config: GelflogConfig) -> None:
    """Ensure the identity fields and the transport settings are usable."""

    for key in ("app_name", "app_version", "environment"):
        if not getattr(config, key):
            raise ConfigurationError(f"Configuration '{key}' is required")

    if config.environment not in ALLOWED_ENVIRONMENTS:
        raise ConfigurationError(
            f"Configuration 'environment' must be one of: {', '.join(ALLOWED_ENVIRONMENTS)}"
        )

    if config.transport not in TRANSPORT_KINDS:
        raise ConfigurationError(f"Unknown transport kind: {config.transport}")

    if config.transport in NETWORK_TRANSPORTS:
        if not config.server:
            raise ConfigurationError("Configuration 'server' is required")
        port = config.input_port
        if port is None or port == "":
            raise ConfigurationError("Configuration 'input_port' is required")
        if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
            raise ConfigurationError(f"Configuration 'input_port' must be a port number, got {port!r}")
