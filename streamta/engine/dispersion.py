"""Dispersion over a count window: population standard deviation and MAD."""

from __future__ import annotations

import math

from streamta.engine.base import Scalar, close_of
from streamta.engine.window import CountWindow


class StdDev:
    """Population standard deviation. O(1) amortized per update.

    Reads the window's running sum and sum of squares. Variance is clamped
    at zero before the square root, since ``sum_sq/n - mean**2`` can dip
    below zero through cancellation.
    """

    __slots__ = ("_window",)

    def __init__(self, period: int = 9) -> None:
        self._window = CountWindow(period, "StdDev")

    def update(self, value: Scalar) -> float:
        self._window.push(close_of(value))
        n = self._window.count
        mean = self._window.sum / n
        variance = self._window.sum_sq / n - mean * mean
        return math.sqrt(max(variance, 0.0))

    def reset(self) -> None:
        self._window.clear()

    @property
    def count(self) -> int:
        return self._window.count

    @property
    def period(self) -> int:
        return self._window.period

    def __str__(self) -> str:
        return f"SD({self.period})"


class MAD:
    """Mean Absolute Deviation around the window mean. O(period) per update.

    Absolute deviation does not decompose over insert/evict, so every
    update makes one pass over the window.
    """

    __slots__ = ("_window",)

    def __init__(self, period: int = 9) -> None:
        self._window = CountWindow(period, "MAD")

    def update(self, value: Scalar) -> float:
        self._window.push(close_of(value))
        n = self._window.count
        mean = self._window.sum / n
        return sum(abs(x - mean) for x in self._window) / n

    def reset(self) -> None:
        self._window.clear()

    @property
    def count(self) -> int:
        return self._window.count

    @property
    def period(self) -> int:
        return self._window.period

    def __str__(self) -> str:
        return f"MAD({self.period})"
