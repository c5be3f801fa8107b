"""Configuration loading pipeline."""

from __future__ import annotations

import importlib
import os
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Dict, Mapping, cast

from platformdirs import user_config_dir

from .schema import GelflogConfig, build_config, default_config

try:  # pragma: no cover
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]

try:  # pragma: no cover
    yaml_module = importlib.import_module("yaml")
except ModuleNotFoundError:  # pragma: no cover
    yaml_module = None

yaml: ModuleType | None = yaml_module

_CONFIG_FILENAMES = ("gelflog.toml", "gelflog.yaml", "gelflog.yml")

ENV_VARS: Dict[str, str] = {
    "GRAYLOG_SERVER": "server",
    "GRAYLOG_INPUT_PORT": "input_port",
    "GRAYLOG_APP_NAME": "app_name",
    "GRAYLOG_APP_VERSION": "app_version",
    "GRAYLOG_ENVIRONMENT": "environment",
    "GRAYLOG_SHOW_CONSOLE": "show_console",
    "GRAYLOG_HOST": "host",
    "GRAYLOG_TRANSPORT": "transport",
}


def _load_toml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def _load_yaml(path: Path) -> Dict[str, Any]:
    if yaml is None or not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        loader = getattr(yaml, "safe_load", None)
        if not callable(loader):
            return {}
        yaml_loader = cast(Callable[[Any], Any], loader)
        data = yaml_loader(fh)
    if isinstance(data, Mapping):
        return {str(key): value for key, value in data.items()}
    return {}


def _load_file(path: Path) -> Dict[str, Any]:
    return _load_toml(path) if path.suffix == ".toml" else _load_yaml(path)


def _load_directory(directory: Path) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for filename in _CONFIG_FILENAMES:
        data.update(_load_file(directory / filename))
    return data


def _load_user_config() -> Dict[str, Any]:
    cfg_dir = Path(user_config_dir("gelflog"))
    if not cfg_dir.exists():
        return {}
    return _load_directory(cfg_dir)


def _load_local_config() -> Dict[str, Any]:
    return _load_directory(Path.cwd())


def _load_pyproject() -> Dict[str, Any]:
    path = Path("pyproject.toml")
    if not path.exists():
        return {}
    data = _load_toml(path)
    tool = data.get("tool", {})
    if not isinstance(tool, Mapping):
        return {}
    section = tool.get("gelflog", {})
    if isinstance(section, Mapping):
        return {str(key): value for key, value in section.items()}
    return {}


def _env_config() -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for env_key, config_key in ENV_VARS.items():
        raw_value = os.environ.get(env_key)
        if raw_value is not None:
            data[config_key] = raw_value.strip()
    return data


def _merge_overrides(*mappings: Mapping[str, Any]) -> Dict[str, Any]:
    result: Dict[str, Any] = default_config()
    for mapping in mappings:
        result.update(mapping)
    return result


def load_configuration(overrides: Mapping[str, Any] | None = None) -> GelflogConfig:
    """Load configuration from supported sources in precedence order."""

    merged = _merge_overrides(
        _load_user_config(),
        _load_local_config(),
        _load_pyproject(),
        _env_config(),
        dict(overrides or {}),
    )
    return build_config(merged)
