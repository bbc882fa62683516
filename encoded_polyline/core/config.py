"""Codec configuration loaded from environment variables.

The core ``encode``/``decode`` functions never read the environment;
this module exists for applications that want to pin precision and
strategy once at startup and thread a ``PolylineCodec`` through.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if a value is out of
    its valid range, so bad configuration is caught at startup.  Direct
    construction runs the same checks as ``encode``/``decode`` and
    raises ``PrecisionError`` or ``StrategyError``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from encoded_polyline.core.constants import (
    DEFAULT_PRECISION,
    DEFAULT_STRATEGY,
    MAX_PRECISION,
    MIN_PRECISION,
    Strategy,
)
from encoded_polyline.core.exceptions import ValidationError
from encoded_polyline.core.validation import resolve_strategy, validate_precision


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Immutable codec configuration.

    ``strategy`` may be given by name; it is stored as a ``Strategy``.

    Attributes:
        precision: Decimal digits preserved per coordinate (default 5).
        strategy: Chunk coding strategy (default ``Strategy.TABLE``).

    Raises:
        PrecisionError: If ``precision`` is not an int in ``[0, 18]``.
        StrategyError: If ``strategy`` names no known strategy.
    """

    precision: int = DEFAULT_PRECISION
    strategy: Strategy = DEFAULT_STRATEGY  # names are normalised in __post_init__

    def __post_init__(self) -> None:
        validate_precision(self.precision)
        object.__setattr__(self, "strategy", resolve_strategy(self.strategy))

    @classmethod
    def from_env(cls) -> CodecConfig:
        """Load and validate configuration from environment variables.

        Reads ``POLYLINE_PRECISION`` and ``POLYLINE_STRATEGY``.

        Raises:
            ConfigValidationError: If precision is out of range or the
                strategy name is unknown.
            ValueError: If ``POLYLINE_PRECISION`` cannot be parsed as an
                integer (e.g. ``POLYLINE_PRECISION=abc``).
        """
        precision = int(os.getenv("POLYLINE_PRECISION", str(DEFAULT_PRECISION)))
        strategy_name = os.getenv("POLYLINE_STRATEGY", DEFAULT_STRATEGY.value).strip().lower()

        _validate(precision, strategy_name)
        return cls(precision=precision, strategy=Strategy(strategy_name))


def _validate(precision: int, strategy_name: str) -> None:
    """Validate environment values.  Raises ``ConfigValidationError``."""
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise ConfigValidationError(
            "POLYLINE_PRECISION",
            precision,
            f"must be between {MIN_PRECISION} and {MAX_PRECISION}",
        )

    names = [s.value for s in Strategy]
    if strategy_name not in names:
        raise ConfigValidationError(
            "POLYLINE_STRATEGY",
            strategy_name,
            f"must be one of: {', '.join(names)}",
        )
