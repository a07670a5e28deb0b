"""Price bar value object and its builder.

Bar is a frozen dataclass: equality and hashing are by value. The
OHLC/volume invariant is checked once, at construction, and never again.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from streamta.errors import BarIncompleteError, BarInvalidError

BAR_FIELDS = ("open", "high", "low", "close", "volume")


@dataclass(frozen=True)
class Bar:
    """OHLCV bar (candlestick) data."""

    open: float
    high: float
    low: float
    close: float
    volume: float

    def __post_init__(self) -> None:
        values = (self.open, self.high, self.low, self.close, self.volume)
        if not all(math.isfinite(v) for v in values):
            raise BarInvalidError(f"Bar values must be finite, got {values}")
        if not (
            self.low <= self.open
            and self.low <= self.close
            and self.low <= self.high
            and self.high >= self.open
            and self.high >= self.close
        ):
            raise BarInvalidError(
                f"Bar prices out of order: open={self.open} high={self.high} "
                f"low={self.low} close={self.close}"
            )
        if self.volume < 0:
            raise BarInvalidError(f"Bar volume must be >= 0, got {self.volume}")

    @staticmethod
    def builder() -> BarBuilder:
        """Start an empty builder."""
        return BarBuilder()


class BarBuilder:
    """Accumulates OHLCV fields and validates them in build().

    Setters overwrite earlier values and return the builder for chaining:

        Bar.builder().open(20).high(25).low(15).close(21).volume(7500).build()
    """

    __slots__ = ("_fields",)

    def __init__(self) -> None:
        self._fields: dict[str, float] = {}

    def open(self, value: float) -> BarBuilder:
        self._fields["open"] = value
        return self

    def high(self, value: float) -> BarBuilder:
        self._fields["high"] = value
        return self

    def low(self, value: float) -> BarBuilder:
        self._fields["low"] = value
        return self

    def close(self, value: float) -> BarBuilder:
        self._fields["close"] = value
        return self

    def volume(self, value: float) -> BarBuilder:
        self._fields["volume"] = value
        return self

    def build(self) -> Bar:
        """Return a validated Bar.

        Raises:
            BarIncompleteError: a field was never set.
            BarInvalidError: the OHLC/volume invariant does not hold.
        """
        missing = tuple(name for name in BAR_FIELDS if name not in self._fields)
        if missing:
            raise BarIncompleteError(missing)
        return Bar(**{name: float(self._fields[name]) for name in BAR_FIELDS})
