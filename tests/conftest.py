import importlib
import sys

import pytest

from app.core.config import Settings, get_settings

CREDENTIALS = ("DEEPGRAM_API_KEY", "XAI_API_KEY", "OPENAI_API_KEY")
EAGER_MODULES = ("app.clients.grok", "app.clients.gpt")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in CREDENTIALS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("XAI_BASE_URL", raising=False)
    # a developer .env must not leak into tests
    monkeypatch.setitem(Settings.model_config, "env_file", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    for name in EAGER_MODULES:
        sys.modules.pop(name, None)


@pytest.fixture
def fresh_import():
    """Import a module from scratch so its import-time code runs again."""

    def _import(name):
        sys.modules.pop(name, None)
        return importlib.import_module(name)

    return _import
