from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List

import pytest

import gelflog.api as gelflog_api
from gelflog.config import loader
from gelflog.config.loader import ENV_VARS
from gelflog.core.manager import GLOBAL_MANAGER
from gelflog.core.record import GraylogRecord, IdentityFields


class RecordingTransport:
    def __init__(self) -> None:
        self.sent: List[GraylogRecord] = []

    def send(self, record: GraylogRecord) -> None:
        self.sent.append(record)


@pytest.fixture(autouse=True)
def reset_gelflog(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    user_dir = tmp_path / "user-config"
    monkeypatch.setattr(loader, "user_config_dir", lambda _: str(user_dir))
    monkeypatch.chdir(tmp_path)
    yield
    GLOBAL_MANAGER.shutdown()
    gelflog_api._CLIENT = None
    logging.getLogger("gelflog.records").handlers = []


@pytest.fixture
def identity() -> IdentityFields:
    return IdentityFields(app_name="billing", app_version="2.3.1", environment="DEV")


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()
