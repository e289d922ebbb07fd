"""Unit tests for marker size validation and mapping."""

from __future__ import annotations

import pytest

from src.graph_engine.models.configurations import (
    PointsConfiguration,
    SizeRangeConfiguration,
    SizeScaleConfiguration,
)
from src.graph_engine.utils.size_manager import SizeManager

pytestmark = pytest.mark.unit


@pytest.fixture
def sizes() -> SizeManager:
    return SizeManager()


def _points(**scale) -> PointsConfiguration:
    return PointsConfiguration(
        size_range=SizeRangeConfiguration(smallest=2, largest=20),
        size_scale=SizeScaleConfiguration(**scale),
    )


def test_configuration_messages() -> None:
    """Fixed size and size range are checked before the size scale."""

    assert PointsConfiguration(size=0).validate("configuration.points") == (
        "non-positive configuration.points.size: 0"
    )
    assert PointsConfiguration(
        size_range=SizeRangeConfiguration(smallest=10, largest=5)
    ).validate("configuration.points") == (
        "configuration.points.size_range.largest: 5\n"
        "is not larger than configuration.points.size_range.smallest: 10"
    )
    assert _points(log_regularization=0, minimum=0).validate("configuration.points") == (
        "log of non-positive configuration.points.size_scale.minimum: 0"
    )
    assert _points().validate("configuration.points") is None


def test_validate_sizes(sizes: SizeManager) -> None:
    """Sizes must be non-negative numbers, addressed per entry."""

    points = _points()

    assert sizes.validate_sizes([1, -1], "data.points_sizes", points) == "negative data.points_sizes[1]: -1"
    assert sizes.validate_sizes(["a"], "data.points_sizes", points) == "invalid data.points_sizes[0]: a"
    assert sizes.validate_sizes([[0, 1]], "data.grid_sizes", _points(log_regularization=0), is_matrix=True) == (
        "log of non-positive data.grid_sizes[0,0]: 0"
    )
    assert sizes.validate_sizes(None, "data.points_sizes", points) is None


def test_linear_mapping_spans_range(sizes: SizeManager) -> None:
    """The smallest value maps to the smallest size and the largest to the largest."""

    assert sizes.map_sizes([0, 5, 10], _points()).tolist() == pytest.approx([2.0, 11.0, 20.0])


def test_reverse_mapping(sizes: SizeManager) -> None:
    assert sizes.map_sizes([0, 5, 10], _points(reverse=True)).tolist() == pytest.approx([20.0, 11.0, 2.0])


def test_log_mapping(sizes: SizeManager) -> None:
    """Log scales map evenly between powers of ten."""

    assert sizes.map_sizes([1, 10, 100], _points(log_regularization=0)).tolist() == pytest.approx(
        [2.0, 11.0, 20.0]
    )


def test_equal_values_use_middle_size(sizes: SizeManager) -> None:
    assert sizes.map_sizes([3, 3], _points()).tolist() == pytest.approx([11.0, 11.0])


def test_configured_bounds_clip(sizes: SizeManager) -> None:
    """Values beyond the configured maximum take the largest size."""

    assert sizes.map_sizes([0, 5, 10], _points(maximum=5)).tolist() == pytest.approx([2.0, 20.0, 20.0])


def test_matrix_is_flattened_by_rows(sizes: SizeManager) -> None:
    assert sizes.map_sizes([[0, 10], [5, 5]], _points(), is_matrix=True).tolist() == pytest.approx(
        [2.0, 20.0, 11.0, 11.0]
    )
