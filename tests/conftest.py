import logging

import pytest

from cmdparser.config import get_settings


@pytest.fixture(autouse=True)
def test_env(monkeypatch: pytest.MonkeyPatch):
    for key in ("APP_ENV", "LOG_LEVEL", "CMDPARSER_PROMPT", "CMDPARSER_ERROR_PREFIX"):
        monkeypatch.delenv(key, raising=False)
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
