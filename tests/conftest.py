"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from ordstat.selection.metrics import reset_selection_metrics

if TYPE_CHECKING:
    from collections.abc import Generator

# Sorted: 0 1 3 4 5 7 8 9 9 10 12 13 16 17
SAMPLE_VALUES = [9, 17, 3, 16, 13, 10, 1, 5, 7, 12, 4, 8, 9, 0]


@pytest.fixture
def sample_values() -> list[int]:
    """Fourteen unsorted ints with one duplicate (9)."""
    return list(SAMPLE_VALUES)


@pytest.fixture(autouse=True)
def _reset_metrics() -> Generator[None, None, None]:
    """Keep module-level selection metrics isolated per test."""
    reset_selection_metrics()
    yield
    reset_selection_metrics()
