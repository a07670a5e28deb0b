"""Engine layer: incremental indicators and the bar-stream calculator."""

from streamta.engine.base import Indicator
from streamta.engine.calculator import IndicatorCalculator, IndicatorSet
from streamta.engine.composite import RSI, BollingerBands, BollingerBandsOutput
from streamta.engine.dispersion import MAD, StdDev
from streamta.engine.smoothing import EMA
from streamta.engine.window import ROC, SMA, CountWindow, Maximum, Minimum

__all__ = [
    "EMA",
    "MAD",
    "ROC",
    "RSI",
    "SMA",
    "BollingerBands",
    "BollingerBandsOutput",
    "CountWindow",
    "Indicator",
    "IndicatorCalculator",
    "IndicatorSet",
    "Maximum",
    "Minimum",
    "StdDev",
]
