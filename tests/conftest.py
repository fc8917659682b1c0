"""Root conftest - shared test configuration."""

import os

import pytest

from content_rules.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    """Each test starts from Settings defaults.

    Exported CONTENT_RULES_* variables are removed and the working directory
    moves to an empty tmp dir so no .env file is read. get_settings() is
    lru_cached, so the cache is cleared on both sides of the test.
    """
    for name in list(os.environ):
        if name.upper().startswith("CONTENT_RULES_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
