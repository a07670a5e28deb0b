"""Composite indicators built from privately owned sub-engines.

BollingerBands wraps an SMA and a StdDev over the same period. RSI smooths
gains and losses with two EMAs and keeps a time-based sample log; its
window is evicted by elapsed time, not by count.
"""

from __future__ import annotations

import math
from collections import deque
from datetime import datetime, timedelta
from typing import NamedTuple

from streamta.engine.base import Scalar, close_of, require_duration
from streamta.engine.dispersion import StdDev
from streamta.engine.smoothing import EMA
from streamta.engine.window import SMA
from streamta.errors import InvalidParameterError

RSI_NEUTRAL = 50.0
# Seeds both averages on the first sample so the first output is neutral
# and later outputs are defined before any loss has been seen.
RSI_SEED = 0.1

_ONE_DAY = timedelta(days=1)


class BollingerBandsOutput(NamedTuple):
    """Lower band, middle (SMA) and upper band."""

    lower: float
    middle: float
    upper: float


class BollingerBands:
    """SMA with bands ``multiplier`` population standard deviations away."""

    __slots__ = ("_multiplier", "_sd", "_sma")

    def __init__(self, period: int = 9, multiplier: float = 2.0) -> None:
        if not math.isfinite(multiplier) or multiplier < 0:
            raise InvalidParameterError(
                f"BollingerBands multiplier must be >= 0, got {multiplier}"
            )
        self._multiplier = multiplier
        self._sma = SMA(period)
        self._sd = StdDev(period)

    def update(self, value: Scalar) -> BollingerBandsOutput:
        x = close_of(value)
        middle = self._sma.update(x)
        width = self._multiplier * self._sd.update(x)
        return BollingerBandsOutput(
            lower=middle - width,
            middle=middle,
            upper=middle + width,
        )

    def reset(self) -> None:
        self._sma.reset()
        self._sd.reset()

    @property
    def period(self) -> int:
        return self._sma.period

    @property
    def count(self) -> int:
        return self._sma.count

    @property
    def multiplier(self) -> float:
        return self._multiplier

    def __str__(self) -> str:
        return f"BB({self.period}, {self._multiplier:g})"


class RSI:
    """Relative Strength Index over a time duration.

    ``update((timestamp, value))`` evicts log entries at or before
    ``timestamp - duration``, splits the move from the previous value into
    gain and loss, and smooths each with an EMA whose alpha is
    ``2 / (days + 1)`` (capped at 1). Output is ``100 * up / (up + down)``,
    or 50 when both averages are zero.

    Timestamps are assumed non-decreasing; out-of-order input is not detected.
    """

    __slots__ = ("_down", "_duration", "_prev", "_up", "_window")

    def __init__(self, duration: timedelta = timedelta(days=14)) -> None:
        self._duration = require_duration("RSI", duration)
        days = duration / _ONE_DAY
        alpha = min(2.0 / (days + 1.0), 1.0)
        ema_period = max(1, round(days))
        self._up = EMA(ema_period, alpha=alpha)
        self._down = EMA(ema_period, alpha=alpha)
        self._window: deque[tuple[datetime, float]] = deque()
        self._prev: float | None = None

    def update(self, value: tuple[datetime, Scalar]) -> float:
        timestamp, raw = value
        x = close_of(raw)

        horizon = timestamp - self._duration
        while self._window and self._window[0][0] <= horizon:
            self._window.popleft()
        self._window.append((timestamp, x))

        if self._prev is None:
            gain = loss = RSI_SEED
        else:
            gain = max(x - self._prev, 0.0)
            loss = max(self._prev - x, 0.0)
        self._prev = x

        up = self._up.update(gain)
        down = self._down.update(loss)
        if up + down == 0.0:
            return RSI_NEUTRAL
        return 100.0 * up / (up + down)

    def reset(self) -> None:
        self._window.clear()
        self._prev = None
        self._up.reset()
        self._down.reset()

    @property
    def duration(self) -> timedelta:
        return self._duration

    @property
    def sample_count(self) -> int:
        """Samples currently inside the duration window."""
        return len(self._window)

    def __str__(self) -> str:
        return f"RSI({self._duration / _ONE_DAY:g} days)"
