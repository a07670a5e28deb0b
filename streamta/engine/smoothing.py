"""Exponential smoothing: a single running value, no window buffer."""

from __future__ import annotations

import math

from streamta.engine.base import Scalar, close_of, require_period
from streamta.errors import InvalidParameterError


class EMA:
    """Exponential Moving Average.

    The first update seeds the running value with the input itself; later
    updates blend ``alpha * x + (1 - alpha) * previous``. ``alpha`` defaults
    to ``2 / (period + 1)`` and can be given explicitly instead.
    """

    __slots__ = ("_alpha", "_period", "_value")

    def __init__(self, period: int = 9, alpha: float | None = None) -> None:
        self._period = require_period("EMA", period)
        if alpha is None:
            alpha = 2.0 / (period + 1)
        elif not (math.isfinite(alpha) and 0.0 < alpha <= 1.0):
            raise InvalidParameterError(f"EMA alpha must be in (0, 1], got {alpha}")
        self._alpha = alpha
        self._value: float | None = None

    def update(self, value: Scalar) -> float:
        x = close_of(value)
        if self._value is None:
            self._value = x
        else:
            self._value = self._alpha * x + (1.0 - self._alpha) * self._value
        return self._value

    def reset(self) -> None:
        self._value = None

    @property
    def value(self) -> float | None:
        """Current smoothed value, or None before the first update."""
        return self._value

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def period(self) -> int:
        return self._period

    def __str__(self) -> str:
        return f"EMA({self._period})"
