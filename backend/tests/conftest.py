"""Shared test fixtures for the solar position engine and API tests."""

from __future__ import annotations

import pytest

from solpos import PositionRecord
from tests.benchmark import ATLANTA_INPUTS


@pytest.fixture
def atlanta() -> PositionRecord:
    """Position record for the NREL Atlanta benchmark."""
    return PositionRecord(**ATLANTA_INPUTS)


@pytest.fixture
def make_record():
    """Factory for benchmark-based records with selected inputs overridden."""

    def _make(**overrides) -> PositionRecord:
        return PositionRecord(**{**ATLANTA_INPUTS, **overrides})

    return _make
