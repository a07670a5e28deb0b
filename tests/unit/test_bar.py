"""Tests for the Bar value object and BarBuilder."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from streamta.errors import BarError, BarIncompleteError, BarInvalidError
from streamta.types import Bar, BarBuilder


def _build(
    open: float, high: float, low: float, close: float, volume: float
) -> Bar:
    return (
        Bar.builder().open(open).high(high).low(low).close(close).volume(volume).build()
    )


class TestBarBuilderSuccess:
    """Valid field sets produce a Bar."""

    @pytest.mark.parametrize(
        "record",
        [
            (20.0, 25.0, 15.0, 21.0, 7500.0),
            (10.0, 10.0, 10.0, 10.0, 10.0),
            (0.0, 0.0, 0.0, 0.0, 0.0),
        ],
    )
    def test_valid_records(self, record: tuple[float, ...]) -> None:
        bar = _build(*record)
        assert (bar.open, bar.high, bar.low, bar.close, bar.volume) == record

    def test_builder_returns_builder(self) -> None:
        assert isinstance(Bar.builder(), BarBuilder)

    def test_setters_chain(self) -> None:
        builder = Bar.builder()
        assert builder.open(1.0) is builder

    def test_setting_twice_overwrites(self) -> None:
        bar = (
            Bar.builder()
            .open(20)
            .high(25)
            .low(15)
            .close(30)
            .close(21)
            .volume(7500)
            .build()
        )
        assert bar.close == 21.0

    def test_int_inputs_become_float(self) -> None:
        bar = _build(20, 25, 15, 21, 7500)
        assert isinstance(bar.volume, float)


class TestBarBuilderIncomplete:
    """Missing fields raise BarIncompleteError."""

    def test_missing_volume(self) -> None:
        with pytest.raises(BarIncompleteError) as exc_info:
            Bar.builder().open(20).high(25).low(15).close(21).build()
        assert exc_info.value.missing == ("volume",)

    def test_empty_builder_lists_all_fields(self) -> None:
        with pytest.raises(BarIncompleteError) as exc_info:
            Bar.builder().build()
        assert exc_info.value.missing == ("open", "high", "low", "close", "volume")

    def test_incomplete_wins_over_invalid(self) -> None:
        with pytest.raises(BarIncompleteError):
            Bar.builder().open(20).high(1).low(15).build()


class TestBarBuilderInvalid:
    """Invariant violations raise BarInvalidError."""

    @pytest.mark.parametrize(
        "record",
        [
            (-1.0, 25.0, 15.0, 21.0, 7500.0),
            (20.0, -1.0, 15.0, 21.0, 7500.0),
            (20.0, 25.0, 15.0, -1.0, 7500.0),
            (20.0, 25.0, 15.0, 21.0, -1.0),
            (14.9, 25.0, 15.0, 21.0, 7500.0),
            (25.1, 25.0, 15.0, 21.0, 7500.0),
            (20.0, 25.0, 15.0, 14.9, 7500.0),
            (20.0, 25.0, 15.0, 25.1, 7500.0),
            (20.0, 15.0, 25.0, 21.0, 7500.0),
        ],
    )
    def test_invalid_records(self, record: tuple[float, ...]) -> None:
        with pytest.raises(BarInvalidError):
            _build(*record)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf")])
    def test_non_finite_rejected(self, bad: float) -> None:
        with pytest.raises(BarInvalidError):
            _build(20.0, 25.0, 15.0, 21.0, bad)

    def test_direct_construction_validates(self) -> None:
        with pytest.raises(BarInvalidError):
            Bar(open=20.0, high=25.0, low=15.0, close=21.0, volume=-1.0)

    def test_errors_share_base(self) -> None:
        assert issubclass(BarInvalidError, BarError)
        assert issubclass(BarIncompleteError, ValueError)


class TestBarValueSemantics:
    """Bars compare and hash by value and cannot be mutated."""

    def test_equal_by_value(self) -> None:
        assert _build(20, 25, 15, 21, 7500) == _build(20, 25, 15, 21, 7500)

    def test_hashable(self) -> None:
        assert len({_build(20, 25, 15, 21, 7500), _build(20, 25, 15, 21, 7500)}) == 1

    def test_is_frozen(self) -> None:
        bar = _build(20, 25, 15, 21, 7500)
        with pytest.raises(FrozenInstanceError):
            bar.close = 22.0  # type: ignore[misc]
