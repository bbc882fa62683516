"""Shared pytest fixtures for the encoded polyline test suite."""

from __future__ import annotations

import pytest

from encoded_polyline.core.constants import Strategy
from tests.vectors import GOOGLE_PATH


@pytest.fixture(params=list(Strategy), ids=lambda s: s.value)
def strategy(request: pytest.FixtureRequest) -> Strategy:
    """Run a test once per chunk coding strategy."""
    return request.param


@pytest.fixture()
def google_path() -> list[tuple[float, float]]:
    """The three-point path from the public polyline documentation."""
    return list(GOOGLE_PATH)
