"""
LineGenerator - Gerador de grafico de uma linha.

Caracteristicas:
- Pontos ligados na ordem dos dados (sem reordenar por X)
- Preenchimento opcional da area entre a linha e o zero
- Faixas de referencia verticais e horizontais
"""

from typing import Any, Dict, List, Optional

import plotly.graph_objects as go
from plotly.basedatatypes import BaseTraceType

from src.graph_engine.generators.base import BaseGraphGenerator, EngineOutputs
from src.graph_engine.models.graph_configurations import LineGraphConfiguration
from src.graph_engine.models.graph_data import LineGraphData
from src.graph_engine.models.primitives import BandsOrientation, GraphKind
from src.shared_lib.utils.validations import first_message


class LineGenerator(BaseGraphGenerator):
    """
    Generator para uma linha.

    Requisitos:
    - points_xs e points_ys com o mesmo tamanho (pelo menos 2 pontos)
    - Em eixo log, todo valor + regularizacao positivo
    """

    kind = GraphKind.LINE

    def validate_combination(
        self, data: LineGraphData, configuration: LineGraphConfiguration
    ) -> Optional[str]:
        return first_message(
            lambda: self.axes.validate_values(configuration.x_axis, data.points_xs, "data.points_xs"),
            lambda: self.axes.validate_values(configuration.y_axis, data.points_ys, "data.points_ys"),
            lambda: self.validate_bands(configuration),
        )

    def validate_bands(self, configuration: Any) -> Optional[str]:
        """Valida as faixas verticais e horizontais contra os eixos."""
        return first_message(
            lambda: self.bands.validate_axes(
                configuration.vertical_bands,
                "configuration.vertical_bands",
                BandsOrientation.VERTICAL,
                configuration.x_axis,
                configuration.y_axis,
            ),
            lambda: self.bands.validate_axes(
                configuration.horizontal_bands,
                "configuration.horizontal_bands",
                BandsOrientation.HORIZONTAL,
                configuration.x_axis,
                configuration.y_axis,
            ),
        )

    def compute(self, data: LineGraphData, configuration: LineGraphConfiguration) -> EngineOutputs:
        outputs = EngineOutputs()
        outputs.x_range = self.axes.compute_range(configuration.x_axis, data.points_xs)
        outputs.y_range = self.axes.compute_range(
            configuration.y_axis, data.points_ys, include_zero=configuration.line.is_filled
        )
        self.build_bands(configuration, outputs)
        return outputs

    def build_bands(self, configuration: Any, outputs: EngineOutputs) -> None:
        for orientation, bands in (
            (BandsOrientation.VERTICAL, configuration.vertical_bands),
            (BandsOrientation.HORIZONTAL, configuration.horizontal_bands),
        ):
            outputs.bands.append(
                self.bands.build(bands, orientation, outputs.x_range, outputs.y_range)
            )

    def build_traces(
        self, data: LineGraphData, configuration: LineGraphConfiguration, outputs: EngineOutputs
    ) -> List[BaseTraceType]:
        line = configuration.line
        color = self.colors.to_css(line.color or self.colors.default_color)

        trace = go.Scatter(
            x=self.axes.plotted(configuration.x_axis, data.points_xs).tolist(),
            y=self.axes.plotted(configuration.y_axis, data.points_ys).tolist(),
            mode="lines",
            line={
                "color": color,
                "width": line.width or 0,
                "dash": "dash" if line.is_dashed else "solid",
            },
            showlegend=False,
        )
        if line.is_filled:
            trace.update(fill="tozeroy", fillcolor=self.colors.with_alpha(color, 0.3))

        return outputs.band_traces + [trace]

    def build_layout(
        self, data: LineGraphData, configuration: LineGraphConfiguration, outputs: EngineOutputs
    ) -> Dict[str, Any]:
        return {
            "xaxis": self.axes.plotly_axis(outputs.x_range, configuration.graph, data.x_axis_title),
            "yaxis": self.axes.plotly_axis(outputs.y_range, configuration.graph, data.y_axis_title),
        }
