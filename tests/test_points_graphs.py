"""Tests for points graphs: colors, sizes, borders, edges and bands."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from src.graph_engine.figure_assembler import FigureAssembler
from src.graph_engine.models.configurations import (
    AxisConfiguration,
    Band,
    BandConfiguration,
    ColorScaleConfiguration,
    EdgesConfiguration,
    PointsConfiguration,
)
from src.graph_engine.models.graph_configurations import PointsGraphConfiguration
from src.graph_engine.models.graph_data import PointsGraphData
from src.graph_engine.models.primitives import CategoricalPairs, ContinuousStops
from src.graph_engine.utils.legend_manager import COLORBAR_START

pytestmark = pytest.mark.unit

RenderError = Callable[[Any, Any], str]


def _points(**fields: Any) -> PointsGraphData:
    return PointsGraphData(points_xs=[1, 2, 3], points_ys=[3, 1, 2], **fields)


def test_reversed_categorical_palette(render_error: RenderError) -> None:
    configuration = PointsGraphConfiguration(
        points=PointsConfiguration(
            color_palette=CategoricalPairs([("a", "red")]),
            color_scale=ColorScaleConfiguration(reverse=True),
        )
    )

    assert render_error(_points(), configuration) == "reversed categorical configuration.points.color_palette"


@pytest.mark.parametrize(
    ("edges", "message"),
    [
        ([(0, 5)], "data.edges[0] to invalid point: 5"),
        ([(0, 1), (-1, 1)], "data.edges[1] from invalid point: -1"),
        ([(1, 1)], "data.edges[0] from point to itself: 1"),
    ],
)
def test_edge_endpoints(render_error: RenderError, edges: list, message: str) -> None:
    assert render_error(_points(edges=edges), PointsGraphConfiguration()) == message


def test_parallel_vectors(render_error: RenderError) -> None:
    assert render_error(_points(points_sizes=[1, 2]), PointsGraphConfiguration()) == (
        "the number of data.points_sizes: 2\nis different from the number of data.points_xs: 3"
    )
    assert render_error(_points(points_sizes=[1, -2, 3]), PointsGraphConfiguration()) == (
        "negative data.points_sizes[1]: -2"
    )


def test_diagonal_bands_need_matching_scales(render_error: RenderError) -> None:
    configuration = PointsGraphConfiguration(
        x_axis=AxisConfiguration(log_regularization=0),
        diagonal_bands=BandConfiguration(middle=Band(offset=1)),
    )

    assert render_error(_points(), configuration) == (
        "configuration.diagonal_bands specified for a combination of linear and log scale axes"
    )


def test_missing_colors_for_shown_scale(render_error: RenderError) -> None:
    configuration = PointsGraphConfiguration(points=PointsConfiguration(show_color_scale=True))

    assert render_error(_points(), configuration) == (
        "no data.points_colors specified for configuration.points.show_color_scale"
    )


def test_plain_points(assembler: FigureAssembler) -> None:
    fig = assembler.assemble(_points(points_hovers=["a", "b", "c"]), PointsGraphConfiguration())

    assert len(fig.data) == 1
    trace = fig.data[0]
    assert trace.mode == "markers"
    assert trace.marker.size == 8
    assert trace.marker.color == "rgb(31,119,180)"
    assert list(trace.hovertext) == ["a", "b", "c"]


def test_sizes_are_mapped_to_range(assembler: FigureAssembler) -> None:
    fig = assembler.assemble(_points(points_sizes=[0, 5, 10]), PointsGraphConfiguration())

    assert list(fig.data[0].marker.size) == pytest.approx([2.0, 11.0, 20.0])


def test_borders_are_drawn_behind_points(assembler: FigureAssembler) -> None:
    """A border ring is a larger marker of the border color behind each point."""

    configuration = PointsGraphConfiguration(borders=PointsConfiguration(size=2))

    fig = assembler.assemble(_points(), configuration)

    border, point = fig.data
    assert border.marker.size == 12
    assert border.marker.color == "rgb(0,0,0)"
    assert point.marker.size == 8


def test_edges_below_or_above_points(assembler: FigureAssembler) -> None:
    data = _points(edges=[(0, 1), (1, 2)], edges_colors=["red", "blue"], edges_sizes=[3, 1])

    below = assembler.assemble(data, PointsGraphConfiguration())
    above = assembler.assemble(data, PointsGraphConfiguration(edges_over_points=True))

    assert [trace.mode for trace in below.data] == ["lines", "lines", "markers"]
    assert [trace.mode for trace in above.data] == ["markers", "lines", "lines"]
    assert list(below.data[0].x) == [1.0, 2.0]
    assert list(below.data[0].y) == [3.0, 1.0]
    assert below.data[0].line.color == "rgb(255,0,0)"
    assert below.data[0].line.width == 3


def test_default_edge_style(assembler: FigureAssembler) -> None:
    configuration = PointsGraphConfiguration(edges=EdgesConfiguration(width=2, is_dashed=True))

    fig = assembler.assemble(_points(edges=[(0, 2)]), configuration)

    edge = fig.data[0]
    assert edge.line.color == "rgb(169,169,169)"
    assert edge.line.width == 2
    assert edge.line.dash == "dash"


def test_diagonal_band_on_linear_axes(assembler: FigureAssembler) -> None:
    configuration = PointsGraphConfiguration(
        x_axis=AxisConfiguration(minimum=0, maximum=4),
        diagonal_bands=BandConfiguration(middle=Band(offset=1)),
    )

    fig = assembler.assemble(_points(), configuration)

    band = fig.data[0]
    assert list(band.x) == [0.0, 4.0]
    assert list(band.y) == [1.0, 5.0]


def test_two_color_bars_side_by_side(assembler: FigureAssembler) -> None:
    """Point and border color scales each get a color bar, in request order."""

    data = _points(points_colors=[1, 2, 3], borders_colors=[10, 20, 30])
    configuration = PointsGraphConfiguration(
        points=PointsConfiguration(show_color_scale=True),
        borders=PointsConfiguration(
            color_palette=ContinuousStops([(10, "white"), (30, "black")]), show_color_scale=True
        ),
    )

    fig = assembler.assemble(data, configuration)

    colorbars = [trace for trace in fig.data if trace.marker.showscale]
    assert len(colorbars) == 2
    assert colorbars[0].marker.colorbar.x == pytest.approx(COLORBAR_START)
    assert colorbars[1].marker.colorbar.x > colorbars[0].marker.colorbar.x
    assert list(fig.data[0].marker.color) == ["rgb(255,255,255)", "rgb(128,128,128)", "rgb(0,0,0)"]


def test_color_bar_titles(legend_titles: Callable[..., Any]) -> None:
    def set_titles(data: PointsGraphData, title: str) -> None:
        data.points_colors_title = title

    untitled, titled = legend_titles(
        _points(points_colors=[1, 2, 3]),
        PointsGraphConfiguration(points=PointsConfiguration(show_color_scale=True)),
        set_titles,
    )

    assert untitled["data"][0] == titled["data"][0]
    assert "title" not in untitled["data"][1]["marker"]["colorbar"]
    assert titled["data"][1]["marker"]["colorbar"]["title"]["text"] == "Title"
