"""Unit tests for box statistics and density estimation."""

from __future__ import annotations

import numpy as np
import pytest

from src.graph_engine.models.configurations import DistributionConfiguration
from src.graph_engine.utils.distribution_calculator import DistributionCalculator

pytestmark = pytest.mark.unit


@pytest.fixture
def calculator() -> DistributionCalculator:
    return DistributionCalculator(density_points=50)


def test_style_requires_one_representation() -> None:
    configuration = DistributionConfiguration(show_box=False)

    assert configuration.validate("configuration.distribution") == (
        "must specify at least one of: configuration.distribution.show_box, "
        "configuration.distribution.show_violin, configuration.distribution.show_curve"
    )


def test_style_rejects_violin_with_curve() -> None:
    configuration = DistributionConfiguration(show_violin=True, show_curve=True)

    assert configuration.validate("d") == "must not specify both of: d.show_violin, d.show_curve"


def test_box_with_outliers_uses_tukey_whiskers(calculator: DistributionCalculator) -> None:
    """Whiskers stop at the most extreme values within 1.5 IQR of the quartiles."""

    box = calculator.box_statistics([1, 2, 3, 4, 100])

    assert (box.q1, box.median, box.q3) == (2.0, 3.0, 4.0)
    assert (box.lower_whisker, box.upper_whisker) == (1.0, 4.0)
    assert box.outliers.tolist() == [100.0]
    assert box.iqr == 2.0


def test_box_without_far_values_spans_all_values(calculator: DistributionCalculator) -> None:
    box = calculator.box_statistics([1, 2, 3, 4, 5])

    assert (box.lower_whisker, box.upper_whisker) == (1.0, 5.0)
    assert box.outliers.size == 0


def test_density_is_normalized_to_peak_one(calculator: DistributionCalculator) -> None:
    """The curve covers two bandwidths beyond the data on each side."""

    estimate = calculator.density([1.0, 2.0, 2.5, 3.0, 5.0])

    assert estimate.positions.size == 50
    assert estimate.densities.max() == pytest.approx(1.0)
    assert np.all(estimate.densities >= 0)
    assert estimate.bandwidth > 0
    assert estimate.positions[0] == pytest.approx(1.0 - 2 * estimate.bandwidth)
    assert estimate.positions[-1] == pytest.approx(5.0 + 2 * estimate.bandwidth)


def test_density_of_constant_values_is_a_spike(calculator: DistributionCalculator) -> None:
    estimate = calculator.density([5, 5, 5])

    assert estimate.positions.tolist() == [4.5, 5.0, 5.5]
    assert estimate.densities.tolist() == [0.0, 1.0, 0.0]
