"""
Test configuration to keep imports stable without an installed package.

Pytest prepends each test directory to ``sys.path``. We explicitly place the
``src`` directory at the front so imports resolve to the checked-in source
rather than a stale installed copy.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).resolve().parent / "src"
src_str = str(SRC_ROOT)

if src_str in sys.path:
    sys.path.remove(src_str)
sys.path.insert(0, src_str)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep user config files and env vars out of every test."""
    from subclip.config import get_settings

    for name in ("SUBCLIP_LOG_LEVEL", "SUBCLIP_LOG_FORMAT", "SUBCLIP_METRICS", "SUBCLIP_METRICS_ENABLED",
                 "SUBCLIP_METRICS_PATH", "SUBCLIP_APP_ENV", "APP_ENV", "SUBCLIP_CONFIG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
