"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from num2text.models import RenderOptions  # noqa: E402
from num2text.pipeline import Num2Text  # noqa: E402


@pytest.fixture
def to_words():
    """``to_words(value, lang="en", **options)`` → text, for compact tests."""
    def _convert(value, lang="en", fallback=None, **options):
        return Num2Text(lang, fallback_on_error=fallback).convert(
            value, RenderOptions(**options)
        )

    return _convert
