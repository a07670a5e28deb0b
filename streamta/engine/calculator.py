"""Indicator fan-out over a bar stream.

IndicatorSet is a frozen snapshot of every indicator's output after one
bar. IndicatorCalculator owns one instance of each indicator and feeds
each bar to all of them independently; no output feeds another.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from streamta.config import AppConfig, IndicatorConfig
from streamta.engine.composite import RSI, BollingerBands, BollingerBandsOutput
from streamta.engine.dispersion import MAD, StdDev
from streamta.engine.smoothing import EMA
from streamta.engine.window import ROC, SMA, Maximum, Minimum
from streamta.types import Bar
from streamta.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class IndicatorSet:
    """Indicator values after the latest bar.

    All fields are None until the first bar has been processed.
    """

    sma: float | None = None
    ema: float | None = None
    std_dev: float | None = None
    mad: float | None = None
    minimum: float | None = None
    maximum: float | None = None
    roc: float | None = None
    bollinger: BollingerBandsOutput | None = None
    rsi: float | None = None
    bar_count: int = 0


class IndicatorCalculator:
    """Computes every configured indicator from a bar stream.

    Minimum reads bar lows, Maximum reads bar highs, everything else reads
    closes. RSI additionally needs the bar's timestamp. ``stream_id``, when
    given, tags this calculator's lifecycle events.
    """

    def __init__(
        self,
        config: IndicatorConfig | None = None,
        stream_id: str | None = None,
    ) -> None:
        cfg = config if config is not None else IndicatorConfig()
        self._sma = SMA(cfg.sma_period)
        self._ema = EMA(cfg.ema_period)
        self._std_dev = StdDev(cfg.std_dev_period)
        self._mad = MAD(cfg.mad_period)
        self._minimum = Minimum(cfg.min_period)
        self._maximum = Maximum(cfg.max_period)
        self._roc = ROC(cfg.roc_period)
        self._bollinger = BollingerBands(
            cfg.bollinger_period, cfg.bollinger_multiplier
        )
        self._rsi = RSI(timedelta(days=cfg.rsi_days))
        self._bar_count = 0
        self._last = IndicatorSet()
        self._log_context: dict[str, str] = (
            {"stream_id": stream_id} if stream_id else {}
        )
        log.debug(
            "indicator_calculator_created",
            indicators=self.labels,
            **self._log_context,
        )

    @classmethod
    def from_config(
        cls, config: AppConfig, stream_id: str | None = None
    ) -> IndicatorCalculator:
        return cls(config.indicators, stream_id)

    def process_bar(self, timestamp: datetime, bar: Bar) -> IndicatorSet:
        """Feed one bar to every indicator and return their outputs."""
        self._bar_count += 1
        self._last = IndicatorSet(
            sma=self._sma.update(bar),
            ema=self._ema.update(bar),
            std_dev=self._std_dev.update(bar),
            mad=self._mad.update(bar),
            minimum=self._minimum.update(bar),
            maximum=self._maximum.update(bar),
            roc=self._roc.update(bar),
            bollinger=self._bollinger.update(bar),
            rsi=self._rsi.update((timestamp, bar)),
            bar_count=self._bar_count,
        )
        return self._last

    def reset(self) -> None:
        """Reset every indicator to its just-constructed state."""
        for indicator in self._indicators():
            indicator.reset()
        log.debug(
            "indicator_calculator_reset",
            bar_count=self._bar_count,
            **self._log_context,
        )
        self._bar_count = 0
        self._last = IndicatorSet()

    @property
    def latest(self) -> IndicatorSet:
        """Snapshot from the most recent process_bar() call."""
        return self._last

    @property
    def bar_count(self) -> int:
        """Bars processed since construction or the last reset()."""
        return self._bar_count

    @property
    def labels(self) -> list[str]:
        return [str(ind) for ind in self._indicators()]

    def _indicators(
        self,
    ) -> tuple[SMA, EMA, StdDev, MAD, Minimum, Maximum, ROC, BollingerBands, RSI]:
        return (
            self._sma,
            self._ema,
            self._std_dev,
            self._mad,
            self._minimum,
            self._maximum,
            self._roc,
            self._bollinger,
            self._rsi,
        )
