"""Unit tests for stacking parallel series."""

from __future__ import annotations

import pytest

from src.graph_engine.models.primitives import StackingMode
from src.graph_engine.utils.stack_calculator import StackCalculator

pytestmark = pytest.mark.unit


@pytest.fixture
def calculator() -> StackCalculator:
    return StackCalculator()


def test_raw_stacking(calculator: StackCalculator) -> None:
    """The first series sits on the baseline and each next one on top of it."""

    stacked = calculator.stack([[1, 2], [3, 4]], StackingMode.RAW)

    assert stacked.heights.tolist() == [[1.0, 2.0], [3.0, 4.0]]
    assert stacked.bases.tolist() == [[0.0, 0.0], [1.0, 2.0]]
    assert stacked.tops.tolist() == [[1.0, 2.0], [4.0, 6.0]]


def test_percent_stacking(calculator: StackCalculator) -> None:
    """Every category sums to 100."""

    stacked = calculator.stack([[1, 2], [3, 2]], StackingMode.PERCENT)

    assert stacked.tops.tolist() == [[25.0, 50.0], [100.0, 100.0]]


def test_fraction_stacking_keeps_zero_categories(calculator: StackCalculator) -> None:
    """A category summing to zero stays zero instead of dividing by it."""

    stacked = calculator.stack([[0, 1], [0, 3]], StackingMode.FRACTION)

    assert stacked.heights.tolist() == [[0.0, 0.25], [0.0, 0.75]]
    assert stacked.tops[-1].tolist() == [0.0, 1.0]


def test_normalized_modes_reject_negative_values(calculator: StackCalculator) -> None:
    """Only the normalized modes restrict the sign of the values."""

    values = [[1, 2], [3, -1]]

    assert calculator.validate_values(values, "data.series_values", StackingMode.PERCENT) == (
        "negative data.series_values[1][1]: -1"
    )
    assert calculator.validate_values(values, "data.series_values", StackingMode.RAW) is None
    assert calculator.validate_values(values, "data.series_values", None) is None


def test_align_lines_over_union(calculator: StackCalculator) -> None:
    """Lines are interpolated on the union of xs and are zero outside their own extent."""

    xs, ys = calculator.align_lines([[0, 2], [1, 3]], [[0, 4], [10, 30]])

    assert xs.tolist() == [0.0, 1.0, 2.0, 3.0]
    assert ys[0] == pytest.approx([0.0, 2.0, 4.0, 0.0])
    assert ys[1] == pytest.approx([0.0, 10.0, 20.0, 30.0])
