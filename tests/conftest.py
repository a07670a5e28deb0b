"""Shared test fixtures for streamta."""

from __future__ import annotations

import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from tests.factories import price_series


@pytest.fixture
def prices() -> list[float]:
    """Sixty deterministic closes."""
    return price_series(60)


@pytest.fixture
def clean_env() -> Iterator[None]:
    """Run with no STREAMTA_* variables inherited from the shell."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("STREAMTA_")}
    with patch.dict(os.environ, env, clear=True):
        yield
