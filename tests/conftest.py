"""Root test configuration: isolate tests from the caller's HELPDOC_* environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove HELPDOC_* env vars so config defaults are predictable."""
    for name in list(os.environ):
        if name.startswith("HELPDOC_"):
            monkeypatch.delenv(name, raising=False)
