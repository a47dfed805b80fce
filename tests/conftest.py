"""
Root conftest.py - sys.path, env isolation, shared fixtures.

Every test starts from the built-in defaults: OVERLAY_* variables are
cleared and the configuration singleton is dropped before and after.
"""

import os
import sys

import pytest

# Add project root to sys.path so 'core', 'color_scales', 'overlay', 'config' are importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

CONFIG_ENV_VARS = [
    "OVERLAY_DEFAULT_PALETTE",
    "OVERLAY_DEFAULT_BINS",
    "OVERLAY_DEFAULT_EXCLUSIVE",
    "OVERLAY_LOCK_ON_CLICK",
    "OVERLAY_LOCK_ON_DBLCLICK",
    "OVERLAY_PREVENT_HOVER_ON_CLICK",
    "OVERLAY_PREVENT_HOVER_ON_DBLCLICK",
    "OVERLAY_ISOLATE_POPUP",
    "DEBUG_MODE",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Clear config env vars and reset the config singleton around each test."""
    from config import reset_config

    for var in CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield monkeypatch
    reset_config()


@pytest.fixture
def clean_env(isolated_config):
    """monkeypatch with every config env var cleared."""
    return isolated_config
