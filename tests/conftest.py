"""Pytest configuration and fixtures.

Provides environment isolation: every test starts with a fresh settings
cache, no FAULTCATALOG_* variables, a scratch working directory (so no
.env file or stray nonexistent.txt is picked up) and the root log level
restored afterwards.
"""

from __future__ import annotations

import logging
import os

import pytest

from faultcatalog.config import get_settings


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path):
    for key in list(os.environ):
        if key.startswith("FAULTCATALOG_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    root_level = logging.getLogger().level
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()
    logging.getLogger().setLevel(root_level)


@pytest.fixture
def lines() -> list[str]:
    """A list-backed output sink; pass ``lines.append`` to the dispatcher."""
    return []
