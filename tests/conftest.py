"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

import pytest

from pgncodec.core.notation import PgnStream


@pytest.fixture
def make_stream() -> Callable[[str], PgnStream]:
    """Build a :class:`PgnStream` over an in-memory string."""
    return PgnStream.from_text


@pytest.fixture
def fixed_date() -> date:
    return date(2026, 2, 26)
