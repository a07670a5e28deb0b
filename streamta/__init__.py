"""Incremental technical-analysis indicators over streaming market data."""

from streamta.engine import (
    EMA,
    MAD,
    ROC,
    RSI,
    SMA,
    BollingerBands,
    BollingerBandsOutput,
    Indicator,
    IndicatorCalculator,
    IndicatorSet,
    Maximum,
    Minimum,
    StdDev,
)
from streamta.errors import (
    BarError,
    BarIncompleteError,
    BarInvalidError,
    IndicatorError,
    InvalidParameterError,
)
from streamta.types import Bar, BarBuilder

__all__ = [
    "EMA",
    "MAD",
    "ROC",
    "RSI",
    "SMA",
    "Bar",
    "BarBuilder",
    "BarError",
    "BarIncompleteError",
    "BarInvalidError",
    "BollingerBands",
    "BollingerBandsOutput",
    "Indicator",
    "IndicatorCalculator",
    "IndicatorError",
    "IndicatorSet",
    "InvalidParameterError",
    "Maximum",
    "Minimum",
    "StdDev",
]
