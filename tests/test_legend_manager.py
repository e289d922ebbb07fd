"""Unit tests for combining legends into a single block."""

from __future__ import annotations

import plotly.graph_objects as go
import pytest

from src.graph_engine.utils.color_manager import CategoricalLegend, ColorBarLegend
from src.graph_engine.utils.legend_manager import (
    CATEGORICAL_LEGEND_RANK,
    COLORBAR_START,
    LegendManager,
    series_legend,
)

pytestmark = pytest.mark.unit

SCALE = [[0.0, "rgb(0,0,0)"], [1.0, "rgb(255,255,255)"]]


def test_series_legend_needs_a_name() -> None:
    """Unnamed series never show up in the legend."""

    assert series_legend("Revenue", 1, True)["showlegend"] is True
    assert series_legend("Revenue", 1, False)["showlegend"] is False
    unnamed = series_legend(None, 2, True)
    assert unnamed["showlegend"] is False
    assert unnamed["name"] == "series 2"


def test_colorbars_are_placed_side_by_side() -> None:
    legends = LegendManager(colorbar_spacing=0.2)
    legends.add(ColorBarLegend(title="First", colorscale=SCALE, cmin=0, cmax=1))
    legends.add(None)
    legends.add(ColorBarLegend(title=None, colorscale=SCALE, cmin=0, cmax=2, tickvals=[0.0], ticktext=["1"]))

    traces = legends.build_traces()

    assert legends.colorbars_count == 2
    assert [trace.marker.colorbar.x for trace in traces] == pytest.approx([COLORBAR_START, COLORBAR_START + 0.2])
    assert traces[0].marker.colorbar.title.text == "First"
    assert list(traces[1].marker.colorbar.tickvals) == [0.0]
    assert all(trace.showlegend is False for trace in traces)


def test_categorical_entries_follow_series() -> None:
    """Categorical entries are ranked after series and grouped under their title."""

    legends = LegendManager()
    legends.add(CategoricalLegend(title="Fruit", entries=[("apple", "rgb(255,0,0)"), ("lime", "rgb(0,128,0)")]))

    traces = legends.build_traces()

    assert [trace.name for trace in traces] == ["apple", "lime"]
    assert [trace.legendrank for trace in traces] == [CATEGORICAL_LEGEND_RANK, CATEGORICAL_LEGEND_RANK + 1]
    assert traces[0].legendgrouptitle.text == "Fruit"
    assert traces[0].legendgroup == traces[1].legendgroup


def test_apply_places_legend_after_colorbars() -> None:
    legends = LegendManager(colorbar_spacing=0.1)
    legends.add(ColorBarLegend(title=None, colorscale=SCALE, cmin=0, cmax=1))
    fig = go.Figure(data=[go.Scatter(x=[1], y=[1], name="a", showlegend=True)] + legends.build_traces())

    legends.apply(fig, title="Series")

    assert fig.layout.showlegend is True
    assert fig.layout.legend.x == pytest.approx(COLORBAR_START + 0.1)
    assert fig.layout.legend.title.text == "Series"


def test_apply_hides_empty_legend() -> None:
    fig = go.Figure(data=[go.Scatter(x=[1], y=[1], showlegend=False)])

    LegendManager().apply(fig)

    assert fig.layout.showlegend is False
