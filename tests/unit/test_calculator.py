"""Tests for IndicatorSet and IndicatorCalculator."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from streamta.config import AppConfig, IndicatorConfig
from streamta.engine.calculator import IndicatorCalculator, IndicatorSet
from streamta.engine.composite import BollingerBandsOutput
from tests.factories import at_day, make_bar, price_series


class TestIndicatorSet:
    """Test IndicatorSet frozen dataclass."""

    def test_is_frozen(self) -> None:
        ind = IndicatorSet(sma=150.0)
        with pytest.raises(FrozenInstanceError):
            ind.sma = 999.0  # type: ignore[misc]

    def test_default_values(self) -> None:
        ind = IndicatorSet()
        assert ind.sma is None
        assert ind.bollinger is None
        assert ind.rsi is None
        assert ind.bar_count == 0


def _small_config() -> IndicatorConfig:
    return IndicatorConfig(
        sma_period=3,
        ema_period=3,
        std_dev_period=3,
        mad_period=3,
        min_period=3,
        max_period=3,
        roc_period=1,
        bollinger_period=3,
        bollinger_multiplier=2.0,
        rsi_days=3,
    )


class TestProcessBar:
    """Each indicator sees the bar field it reads."""

    def test_first_bar(self) -> None:
        calc = IndicatorCalculator(_small_config())
        result = calc.process_bar(at_day(0), make_bar(open=10.0, close=10.0, high=12.0, low=9.0))
        assert result.sma == pytest.approx(10.0)
        assert result.ema == pytest.approx(10.0)
        assert result.std_dev == 0.0
        assert result.mad == 0.0
        assert result.minimum == 9.0
        assert result.maximum == 12.0
        assert result.roc == 0.0
        assert result.bollinger == BollingerBandsOutput(10.0, 10.0, 10.0)
        assert result.rsi == 50.0
        assert result.bar_count == 1

    def test_sequence(self) -> None:
        calc = IndicatorCalculator(_small_config())
        for day, close in enumerate((10.0, 10.5, 10.0, 9.5)):
            result = calc.process_bar(at_day(day), make_bar(open=close, close=close))
        assert result.sma == pytest.approx(10.0)
        assert result.roc == pytest.approx(-5.0)
        assert round(result.rsi or 0.0) == 16
        assert result.minimum == pytest.approx(8.5)
        assert result.maximum == pytest.approx(11.5)
        assert result.bar_count == 4
        assert calc.latest is result

    def test_matches_standalone_indicators(self) -> None:
        from streamta.engine.window import SMA

        calc = IndicatorCalculator(_small_config())
        sma = SMA(3)
        for day, p in enumerate(price_series(30)):
            result = calc.process_bar(at_day(day), make_bar(open=p, close=p))
            assert result.sma == sma.update(p)


class TestReset:
    def test_reset_replays_identically(self) -> None:
        calc = IndicatorCalculator(_small_config())
        bars = [make_bar(open=p, close=p) for p in price_series(20)]
        first = [calc.process_bar(at_day(d), b) for d, b in enumerate(bars)]
        calc.reset()
        assert calc.bar_count == 0
        assert calc.latest == IndicatorSet()
        second = [calc.process_bar(at_day(d), b) for d, b in enumerate(bars)]
        assert first == second


class TestConstruction:
    def test_default_config(self) -> None:
        calc = IndicatorCalculator()
        assert calc.labels == [
            "SMA(9)",
            "EMA(9)",
            "SD(9)",
            "MAD(9)",
            "MIN(14)",
            "MAX(14)",
            "ROC(9)",
            "BB(9, 2)",
            "RSI(14 days)",
        ]

    def test_from_app_config(self, clean_env: None) -> None:
        config = AppConfig(indicators=_small_config())
        calc = IndicatorCalculator.from_config(config)
        assert "SMA(3)" in calc.labels
        assert "RSI(3 days)" in calc.labels
