"""
Pytest configuration and shared fixtures for rgrep tests.
"""
import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Keep RGREP_* variables from the outer shell out of CLI option defaults."""
    for name in list(os.environ):
        if name.startswith("RGREP_"):
            monkeypatch.delenv(name)
