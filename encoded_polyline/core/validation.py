"""Argument validation shared by the codec functions and ``CodecConfig``."""

from __future__ import annotations

from encoded_polyline.core.constants import (
    DEFAULT_STRATEGY,
    MAX_PRECISION,
    MIN_PRECISION,
    Strategy,
)
from encoded_polyline.core.exceptions import PrecisionError, StrategyError


def validate_precision(precision: object) -> int:
    """Return ``precision`` if it is an int in ``[0, 18]``.

    Raises:
        PrecisionError: If ``precision`` is not an integer in range.
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        msg = f"Precision must be an integer, got {type(precision).__name__}"
        raise PrecisionError(msg)
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        msg = f"Precision {precision} out of range [{MIN_PRECISION}, {MAX_PRECISION}]"
        raise PrecisionError(msg)
    return precision


def resolve_strategy(strategy: Strategy | str | None) -> Strategy:
    """Map a strategy name or member to a ``Strategy``.

    Raises:
        StrategyError: If the name is unknown.
    """
    if strategy is None:
        return DEFAULT_STRATEGY
    if isinstance(strategy, Strategy):
        return strategy
    try:
        return Strategy(str(strategy).strip().lower())
    except ValueError as exc:
        names = ", ".join(s.value for s in Strategy)
        msg = f"Unknown strategy {strategy!r}; expected one of: {names}"
        raise StrategyError(msg) from exc
