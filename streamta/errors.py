"""Indicator error hierarchy.

All exceptions raised by streamta inherit from IndicatorError, enabling
clean exception handling at the feed boundary. Parameter and bar errors
also subclass ValueError so callers that only know the builtin still
catch them.
"""

from __future__ import annotations


class IndicatorError(Exception):
    """Base exception for all indicator-related errors."""


class InvalidParameterError(IndicatorError, ValueError):
    """Zero/negative period or duration, or an out-of-range constant."""


class BarError(IndicatorError, ValueError):
    """Base for price bar construction failures."""


class BarIncompleteError(BarError):
    """Builder finalized before every OHLCV field was set.

    Stores the names of the fields that were never provided.
    """

    def __init__(self, missing: tuple[str, ...]) -> None:
        self.missing = missing
        super().__init__(f"Bar is incomplete, missing: {', '.join(missing)}")


class BarInvalidError(BarError):
    """OHLC ordering or volume invariant violated."""
