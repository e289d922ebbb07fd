"""Unit tests for reference band validation and geometry."""

from __future__ import annotations

import pytest

from src.graph_engine.models.configurations import AxisConfiguration, Band, BandConfiguration
from src.graph_engine.models.primitives import BandsOrientation, FillBandStyle
from src.graph_engine.utils.axis_configurator import AxisConfigurator, AxisRange
from src.graph_engine.utils.band_builder import BandBuilder
from src.graph_engine.utils.color_manager import ColorManager

pytestmark = pytest.mark.unit

PATH = "configuration.vertical_bands"


@pytest.fixture
def builder() -> BandBuilder:
    return BandBuilder(ColorManager(), AxisConfigurator())


def test_order_messages() -> None:
    """Offsets must increase from low through middle to high."""

    assert BandConfiguration(low=Band(offset=2), middle=Band(offset=1)).validate(PATH) == (
        f"{PATH}.low.offset: 2\nis not less than {PATH}.middle.offset: 1"
    )
    assert BandConfiguration(middle=Band(offset=2), high=Band(offset=2)).validate(PATH) == (
        f"{PATH}.high.offset: 2\nis not greater than {PATH}.middle.offset: 2"
    )
    assert BandConfiguration(low=Band(offset=3), high=Band(offset=1)).validate(PATH) == (
        f"{PATH}.low.offset: 3\nis not less than {PATH}.high.offset: 1"
    )


def test_style_messages() -> None:
    """A band is either a line or a filled region."""

    assert Band().validate("b") is None
    assert Band().style().width == 1.0
    assert Band(width=1, is_filled=True).validate("b") == "must not specify both of: b.width, b.is_filled"
    assert Band(width=-1).validate("b") == "non-positive b.width: -1"
    assert Band(is_filled=True).validate("b") is None
    assert isinstance(Band(is_filled=True).style(), FillBandStyle)


def test_axis_messages(builder: BandBuilder) -> None:
    """Offsets follow the scale of the axis they are placed on."""

    log = AxisConfiguration(log_regularization=0)
    linear = AxisConfiguration()
    bands = BandConfiguration(middle=Band(offset=0))

    assert builder.validate_axes(bands, PATH, BandsOrientation.VERTICAL, log, linear) == (
        f"log of non-positive {PATH}.middle.offset: 0"
    )
    assert builder.validate_axes(bands, PATH, BandsOrientation.HORIZONTAL, log, linear) is None
    assert builder.validate_axes(bands, "d", BandsOrientation.DIAGONAL, log, linear) == (
        "d specified for a combination of linear and log scale axes"
    )
    assert builder.validate_axes(bands, "d", BandsOrientation.DIAGONAL, log, log) == "non-positive d.middle.offset: 0"


def test_vertical_line_spans_y_range(builder: BandBuilder) -> None:
    bands = BandConfiguration(middle=Band(offset=1))

    traces = builder.build(bands, BandsOrientation.VERTICAL, AxisRange(0, 2), AxisRange(0, 10))

    assert len(traces.lines) == 1
    assert not traces.fills
    assert list(traces.lines[0].x) == [1, 1]
    assert list(traces.lines[0].y) == [0, 10]
    assert traces.lines[0].line.dash == "solid"


def test_log_axis_offset_is_shifted_by_regularization(builder: BandBuilder) -> None:
    """Plotted coordinates on a log axis include the regularization."""

    bands = BandConfiguration(middle=Band(offset=9))
    x_range = AxisRange(0, 2, is_log=True, regularization=1)

    traces = builder.build(bands, BandsOrientation.VERTICAL, x_range, AxisRange(0, 1))

    assert list(traces.lines[0].x) == [10, 10]


def test_filled_low_region_is_below_offset(builder: BandBuilder) -> None:
    bands = BandConfiguration(low=Band(offset=2, is_filled=True))

    traces = builder.build(bands, BandsOrientation.HORIZONTAL, AxisRange(0, 4), AxisRange(0, 10))

    region = traces.fills[0]
    assert list(region.x) == [0, 4, 4, 0, 0]
    assert list(region.y) == [0, 0, 2, 2, 0]
    assert region.fill == "toself"


def test_diagonal_line(builder: BandBuilder) -> None:
    """Linear diagonals are additive and log diagonals multiplicative."""

    bands = BandConfiguration(middle=Band(offset=1))
    linear = builder.build(bands, BandsOrientation.DIAGONAL, AxisRange(0, 4), AxisRange(0, 4))

    bands = BandConfiguration(middle=Band(offset=10))
    log = builder.build(
        bands, BandsOrientation.DIAGONAL, AxisRange(0, 1, is_log=True), AxisRange(0, 2, is_log=True)
    )

    assert list(linear.lines[0].y) == [1, 5]
    assert list(log.lines[0].y) == pytest.approx([10.0, 100.0])


def test_only_titled_bands_enter_the_legend(builder: BandBuilder) -> None:
    bands = BandConfiguration(low=Band(offset=0, title="Floor"), high=Band(offset=2), show_legend=True)

    traces = builder.build(bands, BandsOrientation.HORIZONTAL, AxisRange(0, 1), AxisRange(-1, 3))

    assert [trace.showlegend for trace in traces.lines] == [True, False]
    assert traces.lines[0].name == "Floor"
    assert traces.has_legend
