"""Pytest configuration"""

import pytest

from tmuxl.providers import GenericProvider


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TMUXL_* settings from the developer's shell out of tests"""
    for key in [
        "TMUXL_TMUX_BINARY",
        "TMUXL_COOL_OFF",
        "TMUXL_ATTACH",
        "TMUXL_FOCUS_BOTTOM_LEFT",
        "TMUXL_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def provider():
    """In-memory 100x40 window with a single pane"""
    return GenericProvider(window_width=100, window_height=40, pane_count=1)
