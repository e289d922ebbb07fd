"""
BarGenerator - Gerador de grafico de barras simples.

Uma barra por valor, em posicoes de categoria 0..n-1. As cores das barras
podem ser explicitas, categoricas (paleta de pares) ou continuas (escala de
cores), com legenda opcional.
"""

from typing import Any, Dict, List, Optional

import plotly.graph_objects as go
from plotly.basedatatypes import BaseTraceType

from src.graph_engine.generators.base import BaseGraphGenerator, EngineOutputs
from src.graph_engine.models.graph_configurations import BarGraphConfiguration
from src.graph_engine.models.graph_data import BarGraphData
from src.graph_engine.models.primitives import GraphKind, ValuesOrientation
from src.shared_lib.utils.validations import first_message


class BarGenerator(BaseGraphGenerator):
    """
    Generator para barras simples.

    Requisitos:
    - Pelo menos um valor
    - bars_names, bars_hovers e bars_colors (se definidos) com um item por barra
    - show_color_scale exige bars_colors nao explicitas
    """

    kind = GraphKind.BAR

    def validate_combination(
        self, data: BarGraphData, configuration: BarGraphConfiguration
    ) -> Optional[str]:
        return first_message(
            lambda: self.axes.validate_values(configuration.value_axis, data.bars_values, "data.bars_values"),
            lambda: self.colors.validate_colors(
                data.bars_colors, "data.bars_colors", configuration.bars, "configuration.bars"
            ),
        )

    def compute(self, data: BarGraphData, configuration: BarGraphConfiguration) -> EngineOutputs:
        outputs = EngineOutputs()
        value_range = self.axes.compute_range(configuration.value_axis, data.bars_values, include_zero=True)
        category_range = self.axes.category_range(len(data.bars_values))

        if configuration.orientation == ValuesOrientation.VERTICAL:
            outputs.x_range, outputs.y_range = category_range, value_range
        else:
            outputs.x_range, outputs.y_range = value_range, category_range

        mapping = self.colors.map_colors(data.bars_colors, configuration.bars, data.bars_colors_title)
        outputs.colors["bars"] = mapping
        outputs.legends.add(mapping.legend)
        return outputs

    def build_traces(
        self, data: BarGraphData, configuration: BarGraphConfiguration, outputs: EngineOutputs
    ) -> List[BaseTraceType]:
        positions = list(range(len(data.bars_values)))
        values = self.axes.plotted(configuration.value_axis, data.bars_values).tolist()
        is_vertical = configuration.orientation == ValuesOrientation.VERTICAL

        trace = go.Bar(
            marker={"color": outputs.colors["bars"].marker_color},
            orientation="v" if is_vertical else "h",
            showlegend=False,
            **self.oriented(configuration.orientation, positions, values),
        )
        if data.bars_hovers is not None:
            trace.update(hovertext=data.bars_hovers, hoverinfo="text")
        return [trace]

    def build_layout(
        self, data: BarGraphData, configuration: BarGraphConfiguration, outputs: EngineOutputs
    ) -> Dict[str, Any]:
        return self.bars_layout(
            configuration, outputs, len(data.bars_values), data.bars_names, data.value_axis_title, data.bars_axis_title
        )

    def bars_layout(
        self,
        configuration: Any,
        outputs: EngineOutputs,
        count: int,
        names: Optional[List[str]],
        value_title: Optional[str],
        bars_title: Optional[str],
    ) -> Dict[str, Any]:
        """Eixos de valores e de categorias mais o espacamento entre barras."""
        is_vertical = configuration.orientation == ValuesOrientation.VERTICAL
        value_range = outputs.y_range if is_vertical else outputs.x_range

        value_axis = self.axes.plotly_axis(value_range, configuration.graph, value_title)
        category_axis = self.axes.plotly_axis(
            self.axes.category_range(count),
            configuration.graph,
            bars_title,
            tick_labels=names if names is not None else [str(index) for index in range(count)],
        )
        layout = self.oriented_axes(configuration.orientation, value_axis, category_axis)
        layout["bargap"] = configuration.bars_gap
        return layout
