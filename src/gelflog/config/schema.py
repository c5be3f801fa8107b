"""Configuration schema definition for gelflog."""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from ..core.record import IdentityFields

DEFAULT_CONFIG: Dict[str, Any] = {
    "server": None,
    "input_port": None,
    "app_name": None,
    "app_version": None,
    "environment": None,
    "show_console": True,
    "transport": "gelf_udp",
    "host": None,
}

ALLOWED_ENVIRONMENTS = ("PROD", "DEV", "STAGING")


def default_config() -> Dict[str, Any]:
    """Return a deep copy of the default configuration mapping."""

    return deepcopy(DEFAULT_CONFIG)


@dataclass(slots=True)
class GelflogConfig:
    server: str | None
    input_port: int | str | None
    app_name: str | None
    app_version: str | None
    environment: str | None
    show_console: bool
    transport: str
    host: str | None = None

    def identity(self) -> IdentityFields:
        return IdentityFields(
            app_name=str(self.app_name),
            app_version=str(self.app_version),
            environment=str(self.environment),
        )


def _normalize_show_console(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() != "false"
    return bool(value)


def _normalize_port(value: Any) -> int | str | None:
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        return int(stripped) if stripped.isdigit() else stripped
    return value


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def build_config(data: Mapping[str, Any]) -> GelflogConfig:
    return GelflogConfig(
        server=_optional_str(data.get("server")),
        input_port=_normalize_port(data.get("input_port")),
        app_name=_optional_str(data.get("app_name")),
        app_version=_optional_str(data.get("app_version")),
        environment=_optional_str(data.get("environment")),
        show_console=_normalize_show_console(data.get("show_console", True)),
        transport=str(data.get("transport") or "gelf_udp").strip().lower(),
        host=_optional_str(data.get("host")),
    )
