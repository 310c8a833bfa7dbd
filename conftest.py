"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch):
    """Run every test with default settings, whatever the developer's shell exports."""
    monkeypatch.delenv("VOICECART_LANGUAGE", raising=False)
    monkeypatch.delenv("VOICECART_LOG_LEVEL", raising=False)
    yield
