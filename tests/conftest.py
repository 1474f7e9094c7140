from __future__ import annotations

import logging

import pytest
import structlog

from versionkit.config.settings import get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache(monkeypatch):
    for name in ("VK_SERVICE_NAME", "VK_LOGGING__LEVEL", "VK_LOGGING__SCRUB_FIELDS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logging():
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    root.setLevel(level)
