"""Count-based windows: a bounded ring buffer and the indicators built on it.

CountWindow keeps the last N values plus running sums, O(1) amortized per
push. SMA reads the running sum; Minimum/Maximum keep a monotonic deque
beside the window so the current extreme is available in amortized O(1);
ROC compares against the value N steps back.
"""

from __future__ import annotations

import math
import operator
from collections import deque
from collections.abc import Callable, Iterator

from streamta.engine.base import Scalar, close_of, high_of, low_of, require_period

# An evicted square this many times the remaining sum of squares leaves
# mostly rounding error behind in the running sums.
_RESUM_RATIO = 2.0**20


class CountWindow:
    """Last ``period`` values in order, with running sum and sum of squares.

    Both sums are rebuilt from the buffer with math.fsum once every
    ``period`` pushes, and immediately when an evicted value dwarfs what is
    left in the window. Rounding error from large values therefore never
    outlives them.
    """

    __slots__ = ("_buf", "_period", "_pushes", "_sum", "_sum_sq")

    def __init__(self, period: int, name: str = "Window") -> None:
        self._period = require_period(name, period)
        self._buf: deque[float] = deque(maxlen=period)
        self._sum: float = 0.0
        self._sum_sq: float = 0.0
        self._pushes = 0

    def push(self, value: float) -> float | None:
        """Add a value. Returns the evicted oldest value, if at capacity."""
        evicted: float | None = None
        if len(self._buf) == self._period:
            evicted = self._buf[0]
            self._sum -= evicted
            self._sum_sq -= evicted * evicted
        self._buf.append(value)
        self._sum += value
        self._sum_sq += value * value

        self._pushes += 1
        if self._pushes >= self._period or (
            evicted is not None
            and evicted * evicted > _RESUM_RATIO * abs(self._sum_sq)
        ):
            self._resum()
        return evicted

    def _resum(self) -> None:
        self._sum = math.fsum(self._buf)
        self._sum_sq = math.fsum(x * x for x in self._buf)
        self._pushes = 0

    def clear(self) -> None:
        self._buf.clear()
        self._sum = 0.0
        self._sum_sq = 0.0
        self._pushes = 0

    @property
    def period(self) -> int:
        return self._period

    @property
    def sum(self) -> float:
        return self._sum

    @property
    def sum_sq(self) -> float:
        return self._sum_sq

    @property
    def count(self) -> int:
        """Number of values currently held (max = period)."""
        return len(self._buf)

    @property
    def is_full(self) -> bool:
        return len(self._buf) >= self._period

    @property
    def oldest(self) -> float:
        return self._buf[0]

    def __iter__(self) -> Iterator[float]:
        return iter(self._buf)

    def __len__(self) -> int:
        return len(self._buf)


class SMA:
    """Simple Moving Average via ring buffer with running sum. O(1) per update.

    Before the window fills, averages over the values seen so far.
    """

    __slots__ = ("_window",)

    def __init__(self, period: int = 9) -> None:
        self._window = CountWindow(period, "SMA")

    def update(self, value: Scalar) -> float:
        self._window.push(close_of(value))
        return self._window.sum / self._window.count

    def reset(self) -> None:
        self._window.clear()

    @property
    def value(self) -> float | None:
        """Current SMA, or None before the first update."""
        if not self._window.count:
            return None
        return self._window.sum / self._window.count

    @property
    def is_warm(self) -> bool:
        """True when the buffer holds a full period of values."""
        return self._window.is_full

    @property
    def count(self) -> int:
        return self._window.count

    @property
    def period(self) -> int:
        return self._window.period

    def __str__(self) -> str:
        return f"SMA({self.period})"


class _WindowExtreme:
    """Sliding-window extreme using a monotonic deque.

    ``_candidates`` holds, front to back, the values that can still become
    the extreme; the front is the current one. ``beats(new, old)`` is true
    when ``new`` makes ``old`` unreachable. Equal values are kept so
    eviction by value stays correct with duplicates.
    """

    __slots__ = ("_beats", "_candidates", "_window")

    def __init__(
        self, period: int, name: str, beats: Callable[[float, float], bool]
    ) -> None:
        self._window = CountWindow(period, name)
        self._beats = beats
        self._candidates: deque[float] = deque()

    def _push(self, value: float) -> float:
        evicted = self._window.push(value)
        if evicted is not None and self._candidates[0] == evicted:
            self._candidates.popleft()
        while self._candidates and self._beats(value, self._candidates[-1]):
            self._candidates.pop()
        self._candidates.append(value)
        return self._candidates[0]

    def reset(self) -> None:
        self._window.clear()
        self._candidates.clear()

    @property
    def count(self) -> int:
        return self._window.count

    @property
    def period(self) -> int:
        return self._window.period


class Minimum(_WindowExtreme):
    """Lowest value over the last ``period`` observations (bar lows)."""

    __slots__ = ()

    def __init__(self, period: int = 14) -> None:
        super().__init__(period, "Minimum", operator.lt)

    def update(self, value: Scalar) -> float:
        return self._push(low_of(value))

    def __str__(self) -> str:
        return f"MIN({self.period})"


class Maximum(_WindowExtreme):
    """Highest value over the last ``period`` observations (bar highs)."""

    __slots__ = ()

    def __init__(self, period: int = 14) -> None:
        super().__init__(period, "Maximum", operator.gt)

    def update(self, value: Scalar) -> float:
        return self._push(high_of(value))

    def __str__(self) -> str:
        return f"MAX({self.period})"


class ROC:
    """Rate of Change: percent change against the value ``period`` steps back.

    Until ``period + 1`` values have arrived, compares against the oldest
    value seen. The very first update compares a value with itself and
    returns 0.
    """

    __slots__ = ("_buf", "_period")

    def __init__(self, period: int = 9) -> None:
        self._period = require_period("ROC", period)
        # current value plus the ``period`` values before it
        self._buf: deque[float] = deque(maxlen=period + 1)

    def update(self, value: Scalar) -> float:
        current = close_of(value)
        self._buf.append(current)
        if len(self._buf) == 1:
            return 0.0
        base = self._buf[0]
        if base == 0.0:
            # zero base: unchanged is 0%, any move is unbounded
            if current == base:
                return 0.0
            return math.copysign(math.inf, current - base)
        return 100.0 * (current - base) / base

    def reset(self) -> None:
        self._buf.clear()

    @property
    def period(self) -> int:
        return self._period

    @property
    def count(self) -> int:
        """Values held, at most ``period + 1``."""
        return len(self._buf)

    def __str__(self) -> str:
        return f"ROC({self._period})"
