"""Tests for bar and bars graphs."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from src.graph_engine.figure_assembler import FigureAssembler
from src.graph_engine.models.configurations import ColorsConfiguration, ColorScaleConfiguration
from src.graph_engine.models.graph_configurations import BarGraphConfiguration, BarsGraphConfiguration
from src.graph_engine.models.graph_data import BarGraphData, BarsGraphData
from src.graph_engine.models.primitives import CategoricalPairs, StackingMode, ValuesOrientation

pytestmark = pytest.mark.unit

RenderError = Callable[[Any, Any], str]

FRUITS = CategoricalPairs([("apple", "red"), ("lime", "green")])


def test_ragged_series_are_rejected(render_error: RenderError) -> None:
    data = BarsGraphData(series_values=[[0, 1, 2], [0, 1, 2, 3]])

    assert render_error(data, BarsGraphConfiguration()) == (
        "the number of data.series_values[1]: 4\nis different from the number of data.series_values[0]: 3"
    )


@pytest.mark.parametrize(
    ("bars_gap", "message"),
    [
        (1, "too-large configuration.bars_gap: 1"),
        (-0.1, "negative configuration.bars_gap: -0.1"),
    ],
)
def test_bars_gap_bounds(render_error: RenderError, bars_gap: float, message: str) -> None:
    assert render_error(BarGraphData(bars_values=[1]), BarGraphConfiguration(bars_gap=bars_gap)) == message


def test_bar_data_messages(render_error: RenderError) -> None:
    assert render_error(BarGraphData(bars_values=[]), BarGraphConfiguration()) == "empty data.bars_values"
    assert render_error(BarGraphData(bars_values=[1, 2], bars_names=["a"]), BarGraphConfiguration()) == (
        "the number of data.bars_names: 1\nis different from the number of data.bars_values: 2"
    )


def test_explicit_colors_cannot_show_a_scale(render_error: RenderError) -> None:
    data = BarGraphData(bars_values=[1, 2], bars_colors=["red", "blue"])
    configuration = BarGraphConfiguration(bars=ColorsConfiguration(show_color_scale=True))

    assert render_error(data, configuration) == (
        "explicit data.bars_colors specified for configuration.bars.show_color_scale"
    )


def test_reversed_categorical_bars(render_error: RenderError) -> None:
    configuration = BarGraphConfiguration(
        bars=ColorsConfiguration(color_palette=FRUITS, color_scale=ColorScaleConfiguration(reverse=True))
    )

    assert render_error(BarGraphData(bars_values=[1]), configuration) == (
        "reversed categorical configuration.bars.color_palette"
    )


def test_vertical_bars_layout(assembler: FigureAssembler) -> None:
    """Bars sit at category positions with their names as tick labels."""

    data = BarGraphData(bars_values=[1, 2, 3], bars_names=["a", "b", "c"], bars_hovers=["x", "y", "z"])

    fig = assembler.assemble(data, BarGraphConfiguration(bars_gap=0.3))

    bar = fig.data[0]
    assert bar.type == "bar"
    assert list(bar.x) == [0, 1, 2]
    assert list(bar.y) == [1.0, 2.0, 3.0]
    assert list(bar.hovertext) == ["x", "y", "z"]
    assert list(fig.layout.xaxis.ticktext) == ["a", "b", "c"]
    assert fig.layout.yaxis.range[0] == 0.0
    assert fig.layout.bargap == pytest.approx(0.3)


def test_horizontal_bars_put_values_on_x(assembler: FigureAssembler) -> None:
    configuration = BarGraphConfiguration(orientation=ValuesOrientation.HORIZONTAL)

    fig = assembler.assemble(BarGraphData(bars_values=[4, 5]), configuration)

    assert fig.data[0].orientation == "h"
    assert list(fig.data[0].x) == [4.0, 5.0]
    assert list(fig.layout.yaxis.ticktext) == ["0", "1"]


def test_categorical_bar_colors_with_legend(assembler: FigureAssembler) -> None:
    data = BarGraphData(bars_values=[1, 2, 3], bars_colors=["apple", "lime", "apple"], bars_colors_title="Fruit")
    configuration = BarGraphConfiguration(bars=ColorsConfiguration(color_palette=FRUITS, show_color_scale=True))

    fig = assembler.assemble(data, configuration)

    assert list(fig.data[0].marker.color) == ["rgb(255,0,0)", "rgb(0,128,0)", "rgb(255,0,0)"]
    assert [trace.name for trace in fig.data[1:]] == ["apple", "lime"]
    assert fig.data[1].legendgrouptitle.text == "Fruit"
    assert fig.layout.showlegend is True


def test_continuous_bar_colors_with_color_bar(assembler: FigureAssembler) -> None:
    data = BarGraphData(bars_values=[1, 2, 3], bars_colors=[10, 20, 30])
    configuration = BarGraphConfiguration(bars=ColorsConfiguration(show_color_scale=True))

    fig = assembler.assemble(data, configuration)

    assert len(fig.data) == 2
    assert fig.data[1].marker.showscale is True
    assert (fig.data[1].marker.cmin, fig.data[1].marker.cmax) == (10.0, 30.0)
    assert fig.layout.showlegend is False


def test_grouped_bars(assembler: FigureAssembler) -> None:
    data = BarsGraphData(series_values=[[1, 2], [3, 4]], series_names=["a", "b"], bars_names=["x", "y"])

    fig = assembler.assemble(data, BarsGraphConfiguration(show_legend=True))

    assert fig.layout.barmode == "group"
    assert [trace.name for trace in fig.data] == ["a", "b"]
    assert list(fig.layout.xaxis.ticktext) == ["x", "y"]


def test_stacked_bars_start_on_previous_series(assembler: FigureAssembler) -> None:
    data = BarsGraphData(series_values=[[1, 2], [3, 4]], series_colors=["red", "blue"])

    fig = assembler.assemble(data, BarsGraphConfiguration(stacking=StackingMode.RAW))

    assert fig.layout.barmode == "overlay"
    assert list(fig.data[1].y) == [3.0, 4.0]
    assert list(fig.data[1].base) == [1.0, 2.0]
    assert fig.data[1].marker.color == "rgb(0,0,255)"
    assert fig.layout.yaxis.range[1] == pytest.approx(6.3)


def test_bars_need_names_for_legend(render_error: RenderError) -> None:
    data = BarsGraphData(series_values=[[1, 2]])

    assert render_error(data, BarsGraphConfiguration(show_legend=True)) == (
        "no data.series_names specified for configuration.show_legend"
    )


def test_bars_names_follow_categories(render_error: RenderError) -> None:
    data = BarsGraphData(series_values=[[1, 2]], bars_names=["only"])

    assert render_error(data, BarsGraphConfiguration()) == (
        "the number of data.bars_names: 1\nis different from the number of data.series_values[0]: 2"
    )
