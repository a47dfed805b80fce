"""
Config test fixtures - clean environment via monkeypatch.

The root conftest already clears every OVERLAY_* variable and resets the
config singleton around each test; this adds a helper to set several at once.
"""

import pytest


@pytest.fixture
def set_env(clean_env):
    """Set environment variables from a dict on the cleaned environment."""
    def _set(values):
        for key, value in values.items():
            clean_env.setenv(key, value)
    return _set
