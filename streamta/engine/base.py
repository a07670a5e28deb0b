"""Indicator protocol and input helpers shared by every indicator.

Indicators are standalone state machines: update() consumes one
observation and returns the current output, reset() restores the
just-constructed state. Bars are reduced to floats at this boundary.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Protocol, TypeVar, runtime_checkable

from streamta.errors import InvalidParameterError
from streamta.types import Bar

InputT = TypeVar("InputT", contravariant=True)
OutputT = TypeVar("OutputT", covariant=True)

Scalar = float | int | Bar


@runtime_checkable
class Indicator(Protocol[InputT, OutputT]):
    """Incremental update contract.

    Implementations must keep memory bounded by their construction
    parameter, regardless of how many times update() is called.
    """

    def update(self, value: InputT) -> OutputT:
        """Consume one observation and return the indicator's current value."""
        ...

    def reset(self) -> None:
        """Restore the state the indicator had right after construction."""
        ...


def close_of(value: Scalar) -> float:
    """Closing price of a bar, or the number itself."""
    if isinstance(value, Bar):
        return value.close
    return float(value)


def high_of(value: Scalar) -> float:
    if isinstance(value, Bar):
        return value.high
    return float(value)


def low_of(value: Scalar) -> float:
    if isinstance(value, Bar):
        return value.low
    return float(value)


def require_period(name: str, period: int) -> int:
    """Validate a count window length."""
    if period < 1:
        raise InvalidParameterError(f"{name} period must be >= 1, got {period}")
    return period


def require_duration(name: str, duration: timedelta) -> timedelta:
    """Validate a time window length."""
    if duration <= timedelta(0):
        raise InvalidParameterError(
            f"{name} duration must be positive, got {duration}"
        )
    return duration
