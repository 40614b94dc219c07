"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402

from contentchain.config import settings  # noqa: E402
from contentchain.content import get_global_provider_chain, set_global_provider_chain  # noqa: E402


@pytest.fixture(autouse=True)
def restore_provider_chain():
    """Reset the process-wide provider chain after each test."""

    original = get_global_provider_chain()
    yield
    set_global_provider_chain(original)


@pytest.fixture()
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Drop configuration overrides and cached settings around a test."""

    monkeypatch.delenv(settings.CONFIG_ENV, raising=False)
    monkeypatch.delenv(settings.PROVIDER_CHAIN_ENV, raising=False)
    settings.load_default_settings.cache_clear()
    yield monkeypatch
    settings.load_default_settings.cache_clear()
