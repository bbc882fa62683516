"""Tests for the shared precision and strategy argument checks."""

from __future__ import annotations

import pytest

from encoded_polyline.core.constants import Strategy
from encoded_polyline.core.exceptions import PrecisionError, StrategyError
from encoded_polyline.core.validation import resolve_strategy, validate_precision


class TestValidatePrecision:
    @pytest.mark.parametrize("precision", [0, 5, 6, 18])
    def test_valid_precision(self, precision: int) -> None:
        assert validate_precision(precision) == precision

    @pytest.mark.parametrize("precision", [-1, 19, 5.5, "6", False])
    def test_invalid_precision(self, precision: object) -> None:
        with pytest.raises(PrecisionError):
            validate_precision(precision)


class TestResolveStrategy:
    def test_resolve_strategy(self) -> None:
        assert resolve_strategy(None) is Strategy.TABLE
        assert resolve_strategy("loop") is Strategy.LOOP
        assert resolve_strategy(" Loop ") is Strategy.LOOP
        assert resolve_strategy(Strategy.LOOP) is Strategy.LOOP

    def test_unknown_strategy(self) -> None:
        with pytest.raises(StrategyError, match="expected one of: loop, table"):
            resolve_strategy("fast")
