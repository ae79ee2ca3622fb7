import os
from pathlib import Path

import pytest

from riosettings.settings import Setting, SettingsStore


@pytest.fixture
def store() -> SettingsStore:
    return SettingsStore()


@pytest.fixture
def int_setting() -> Setting[int]:
    return Setting.create("org.example.rio.buffersize", "Buffer size", 1024)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep settings files and RIOSETTINGS_* variables of the host out of tests."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("RIOSETTINGS_"):
            monkeypatch.delenv(name)
    return tmp_path
