"""Tests for grid and heatmap graphs."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from src.graph_engine.figure_assembler import FigureAssembler
from src.graph_engine.models.configurations import (
    ColorsConfiguration,
    ColorScaleConfiguration,
    PointsConfiguration,
    SizeScaleConfiguration,
)
from src.graph_engine.models.graph_configurations import GridGraphConfiguration, HeatmapGraphConfiguration
from src.graph_engine.models.graph_data import GridGraphData, HeatmapGraphData
from src.graph_engine.models.primitives import CategoricalPairs, ContinuousStops

pytestmark = pytest.mark.unit

RenderError = Callable[[Any, Any], str]


def test_grid_needs_colors_or_sizes(render_error: RenderError) -> None:
    assert render_error(GridGraphData(), GridGraphConfiguration()) == (
        "must specify at least one of: data.points_colors, data.points_sizes"
    )


def test_grid_matrices_must_match(render_error: RenderError) -> None:
    data = GridGraphData(points_colors=[[1, 2], [3, 4]], points_sizes=[[1, 2]])

    assert render_error(data, GridGraphConfiguration()) == (
        "the shape of data.points_sizes: (1, 2)\nis different from the shape of data.points_colors: (2, 2)"
    )


def test_grid_names_follow_shape(render_error: RenderError) -> None:
    data = GridGraphData(points_sizes=[[1, 2], [3, 4]], rows_names=["a"])

    assert render_error(data, GridGraphConfiguration()) == (
        "the number of data.rows_names: 1\nis different from the number of rows in data.points_sizes: 2"
    )


def test_grid_log_sizes_use_matrix_paths(render_error: RenderError) -> None:
    data = GridGraphData(points_sizes=[[1, 0]])
    configuration = GridGraphConfiguration(
        points=PointsConfiguration(size_scale=SizeScaleConfiguration(log_regularization=0))
    )

    assert render_error(data, configuration) == "log of non-positive data.points_sizes[0,1]: 0"


def test_grid_layout_puts_first_row_on_top(assembler: FigureAssembler) -> None:
    data = GridGraphData(
        points_colors=[["red", "blue"], ["green", "black"]],
        rows_names=["r0", "r1"],
        columns_names=["c0", "c1"],
    )

    fig = assembler.assemble(data, GridGraphConfiguration())

    trace = fig.data[0]
    assert list(trace.x) == [0, 1, 0, 1]
    assert list(trace.y) == [0, 0, 1, 1]
    assert list(trace.marker.color) == ["rgb(255,0,0)", "rgb(0,0,255)", "rgb(0,128,0)", "rgb(0,0,0)"]
    assert list(fig.layout.yaxis.range) == [1.5, -0.5]
    assert list(fig.layout.yaxis.ticktext) == ["r0", "r1"]
    assert list(fig.layout.xaxis.ticktext) == ["c0", "c1"]


def test_grid_sizes_only(assembler: FigureAssembler) -> None:
    data = GridGraphData(points_sizes=[[0, 10]])

    fig = assembler.assemble(data, GridGraphConfiguration(points=PointsConfiguration(color="red")))

    assert fig.data[0].marker.color == "rgb(255,0,0)"
    assert list(fig.data[0].marker.size) == pytest.approx([2.0, 20.0])
    assert list(fig.layout.xaxis.ticktext) == ["0", "1"]


def test_heatmap_rejects_categorical_palette(render_error: RenderError) -> None:
    configuration = HeatmapGraphConfiguration(
        entries=ColorsConfiguration(color_palette=CategoricalPairs([("a", "red")]))
    )

    assert render_error(HeatmapGraphData(entries_values=[[1]]), configuration) == (
        "categorical configuration.entries.color_palette specified for data.entries_values"
    )


def test_heatmap_data_messages(render_error: RenderError) -> None:
    assert render_error(HeatmapGraphData(entries_values=[]), HeatmapGraphConfiguration()) == (
        "empty data.entries_values"
    )
    assert render_error(HeatmapGraphData(entries_values=[[1, "x"]]), HeatmapGraphConfiguration()) == (
        "invalid data.entries_values[0,1]: x"
    )


def test_heatmap_hovers_shape(render_error: RenderError) -> None:
    data = HeatmapGraphData(entries_values=[[1, 2]], entries_hovers=[["a"], ["b"]])

    assert render_error(data, HeatmapGraphConfiguration()) == (
        "the shape of data.entries_hovers: (2, 1)\nis different from the shape of data.entries_values: (1, 2)"
    )


def test_heatmap_trace(assembler: FigureAssembler) -> None:
    data = HeatmapGraphData(entries_values=[[0, 5], [10, 5]], entries_colors_title="Load")
    configuration = HeatmapGraphConfiguration(
        entries=ColorsConfiguration(
            color_palette=ContinuousStops([(0, "black"), (10, "white")]), show_color_scale=True
        )
    )

    fig = assembler.assemble(data, configuration)

    heatmap, colorbar = fig.data
    assert heatmap.type == "heatmap"
    assert [list(row) for row in heatmap.z] == [[0.0, 5.0], [10.0, 5.0]]
    assert (heatmap.zmin, heatmap.zmax) == (0.0, 10.0)
    assert heatmap.showscale is False
    assert colorbar.marker.colorbar.title.text == "Load"
    assert list(fig.layout.yaxis.range) == [1.5, -0.5]


def test_heatmap_log_scale(assembler: FigureAssembler) -> None:
    data = HeatmapGraphData(entries_values=[[1, 10, 100]])
    configuration = HeatmapGraphConfiguration(
        entries=ColorsConfiguration(color_scale=ColorScaleConfiguration(log_regularization=0))
    )

    fig = assembler.assemble(data, configuration)

    assert list(fig.data[0].z[0]) == pytest.approx([0.0, 1.0, 2.0])
    assert len(fig.data) == 1
