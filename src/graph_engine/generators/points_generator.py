"""
PointsGenerator - Gerador de grafico de pontos (dispersao).

Camadas, na ordem de desenho:
1. Faixas de referencia (regioes, depois linhas)
2. Arestas (quando ``edges_over_points`` e False)
3. Bordas: marcadores maiores atras dos pontos
4. Pontos
5. Arestas (quando ``edges_over_points`` e True)

Cores e tamanhos de pontos e de bordas sao mapeados independentemente, cada
um com sua propria legenda de cores.
"""

from typing import Any, Dict, List, Optional, Union

import numpy as np
import plotly.graph_objects as go
from plotly.basedatatypes import BaseTraceType

from src.graph_engine.core import settings
from src.graph_engine.generators.base import BaseGraphGenerator, EngineOutputs
from src.graph_engine.models.graph_configurations import PointsGraphConfiguration
from src.graph_engine.models.graph_data import PointsGraphData
from src.graph_engine.models.primitives import BandsOrientation, GraphKind
from src.shared_lib.utils.validations import first_message


class PointsGenerator(BaseGraphGenerator):
    """
    Generator para pontos com cores, tamanhos, bordas, arestas e faixas.

    Requisitos:
    - points_xs e points_ys com o mesmo tamanho
    - Vetores paralelos (cores, tamanhos, hovers, bordas) com um item por ponto
    - Arestas entre indices de pontos validos e distintos
    - Faixas diagonais apenas com eixos de mesma escala
    """

    kind = GraphKind.POINTS

    def validate_combination(
        self, data: PointsGraphData, configuration: PointsGraphConfiguration
    ) -> Optional[str]:
        return first_message(
            lambda: self.axes.validate_values(configuration.x_axis, data.points_xs, "data.points_xs"),
            lambda: self.axes.validate_values(configuration.y_axis, data.points_ys, "data.points_ys"),
            lambda: self.colors.validate_colors(
                data.points_colors, "data.points_colors", configuration.points, "configuration.points"
            ),
            lambda: self.sizes.validate_sizes(data.points_sizes, "data.points_sizes", configuration.points),
            lambda: self.colors.validate_colors(
                data.borders_colors, "data.borders_colors", configuration.borders, "configuration.borders"
            ),
            lambda: self.sizes.validate_sizes(data.borders_sizes, "data.borders_sizes", configuration.borders),
            lambda: self._validate_bands(configuration),
        )

    def _validate_bands(self, configuration: PointsGraphConfiguration) -> Optional[str]:
        for orientation, path, bands in self._band_configurations(configuration):
            message = self.bands.validate_axes(
                bands, path, orientation, configuration.x_axis, configuration.y_axis
            )
            if message is not None:
                return message
        return None

    @staticmethod
    def _band_configurations(configuration: PointsGraphConfiguration) -> List[Any]:
        return [
            (BandsOrientation.VERTICAL, "configuration.vertical_bands", configuration.vertical_bands),
            (BandsOrientation.HORIZONTAL, "configuration.horizontal_bands", configuration.horizontal_bands),
            (BandsOrientation.DIAGONAL, "configuration.diagonal_bands", configuration.diagonal_bands),
        ]

    @staticmethod
    def has_borders(data: PointsGraphData, configuration: PointsGraphConfiguration) -> bool:
        borders = configuration.borders
        return any([
            data.borders_colors is not None,
            data.borders_sizes is not None,
            borders.color is not None,
            borders.size is not None,
        ])

    def compute(self, data: PointsGraphData, configuration: PointsGraphConfiguration) -> EngineOutputs:
        outputs = EngineOutputs()
        outputs.x_range = self.axes.compute_range(configuration.x_axis, data.points_xs)
        outputs.y_range = self.axes.compute_range(configuration.y_axis, data.points_ys)

        points = self.colors.map_colors(data.points_colors, configuration.points, data.points_colors_title)
        outputs.colors["points"] = points
        outputs.legends.add(points.legend)
        outputs.sizes["points"] = self._sizes(
            data.points_sizes, configuration.points, len(data.points_xs), settings.DEFAULT_POINT_SIZE
        )

        if self.has_borders(data, configuration):
            borders = self.colors.map_colors(data.borders_colors, configuration.borders, data.borders_colors_title)
            if configuration.borders.color is None:
                borders.fixed = self.colors.to_css(settings.DEFAULT_BORDER_COLOR)
            outputs.colors["borders"] = borders
            outputs.legends.add(borders.legend)
            outputs.sizes["borders"] = self._sizes(
                data.borders_sizes, configuration.borders, len(data.points_xs), settings.DEFAULT_BORDER_WIDTH
            )

        for orientation, _, bands in self._band_configurations(configuration):
            outputs.bands.append(self.bands.build(bands, orientation, outputs.x_range, outputs.y_range))
        return outputs

    def _sizes(self, values: Optional[List[float]], points: Any, count: int, default: float) -> np.ndarray:
        if values is not None:
            return self.sizes.map_sizes(values, points)
        return np.full(count, float(points.size if points.size is not None else default))

    def build_traces(
        self, data: PointsGraphData, configuration: PointsGraphConfiguration, outputs: EngineOutputs
    ) -> List[BaseTraceType]:
        xs = self.axes.plotted(configuration.x_axis, data.points_xs).tolist()
        ys = self.axes.plotted(configuration.y_axis, data.points_ys).tolist()
        point_sizes = outputs.sizes["points"]

        hover: Dict[str, Any] = {}
        if data.points_hovers is not None:
            hover = {"hovertext": data.points_hovers, "hoverinfo": "text"}

        edges = self._edge_traces(data, configuration, xs, ys)
        traces: List[BaseTraceType] = list(outputs.band_traces)
        if not configuration.edges_over_points:
            traces.extend(edges)

        if "borders" in outputs.colors:
            border_sizes = point_sizes + 2 * outputs.sizes["borders"]
            traces.append(
                go.Scatter(
                    x=xs,
                    y=ys,
                    mode="markers",
                    marker={
                        "color": outputs.colors["borders"].marker_color,
                        "size": self._marker_size(border_sizes),
                        "line": {"width": 0},
                    },
                    showlegend=False,
                    hoverinfo="skip",
                )
            )

        traces.append(
            go.Scatter(
                x=xs,
                y=ys,
                mode="markers",
                marker={
                    "color": outputs.colors["points"].marker_color,
                    "size": self._marker_size(point_sizes),
                    "line": {"width": 0},
                },
                showlegend=False,
                **hover,
            )
        )

        if configuration.edges_over_points:
            traces.extend(edges)

        self.logger.debug(f"{len(data.points_xs)} pontos, {len(edges)} arestas")
        return traces

    @staticmethod
    def _marker_size(sizes: np.ndarray) -> Union[float, List[float]]:
        if sizes.size > 0 and np.all(sizes == sizes[0]):
            return float(sizes[0])
        return sizes.tolist()

    def _edge_traces(
        self,
        data: PointsGraphData,
        configuration: PointsGraphConfiguration,
        xs: List[float],
        ys: List[float],
    ) -> List[go.Scatter]:
        if not data.edges:
            return []

        style = configuration.edges
        default_color = self.colors.to_css(style.color or settings.DEFAULT_EDGE_COLOR)
        traces = []
        for index, (source, target) in enumerate(data.edges):
            color = default_color
            if data.edges_colors is not None:
                color = self.colors.to_css(data.edges_colors[index])
            width = style.width
            if data.edges_sizes is not None:
                width = data.edges_sizes[index]

            traces.append(
                go.Scatter(
                    x=[xs[source], xs[target]],
                    y=[ys[source], ys[target]],
                    mode="lines",
                    line={"color": color, "width": width, "dash": "dash" if style.is_dashed else "solid"},
                    showlegend=False,
                    hoverinfo="skip",
                )
            )
        return traces

    def build_layout(
        self, data: PointsGraphData, configuration: PointsGraphConfiguration, outputs: EngineOutputs
    ) -> Dict[str, Any]:
        return {
            "xaxis": self.axes.plotly_axis(outputs.x_range, configuration.graph, data.x_axis_title),
            "yaxis": self.axes.plotly_axis(outputs.y_range, configuration.graph, data.y_axis_title),
        }
