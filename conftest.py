"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep a developer's NUMERAL_WORDS_* variables out of the suite."""
    for name in ("NUMERAL_WORDS_DEFAULT_LANG", "NUMERAL_WORDS_MAX_DIGITS", "NUMERAL_WORDS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield
