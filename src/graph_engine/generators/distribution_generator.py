"""
DistributionGenerator - Gerador de grafico de uma distribuicao.

Combina ate tres representacoes da mesma distribuicao, centradas na posicao
de categoria da distribuicao:
- box plot (estatisticas pre-calculadas, outliers em um trace separado)
- violino (densidade espelhada)
- curva (densidade de um lado so)
"""

from typing import Any, Dict, List, Optional

import numpy as np
import plotly.graph_objects as go
from plotly.basedatatypes import BaseTraceType

from src.graph_engine.generators.base import BaseGraphGenerator, EngineOutputs
from src.graph_engine.models.graph_configurations import DistributionGraphConfiguration
from src.graph_engine.models.graph_data import DistributionGraphData
from src.graph_engine.models.primitives import GraphKind, ValuesOrientation
from src.graph_engine.utils.legend_manager import series_legend


class DistributionGenerator(BaseGraphGenerator):
    """
    Generator para distribuicoes.

    Requisitos:
    - Pelo menos um valor
    - Em eixo log, todo valor + regularizacao positivo
    - Pelo menos um de show_box/show_violin/show_curve; violino e curva exclusivos

    Exemplo:
        >>> generator = DistributionGenerator(PlotStyler())
        >>> fig = generator.generate(data, configuration)
    """

    kind = GraphKind.DISTRIBUTION

    # Meia largura (em unidades de categoria) de violinos e curvas
    DENSITY_HALF_WIDTH = 0.45
    BOX_WIDTH = 0.5
    BOX_WIDTH_WITH_DENSITY = 0.15

    def validate_combination(
        self, data: DistributionGraphData, configuration: DistributionGraphConfiguration
    ) -> Optional[str]:
        return self.axes.validate_values(
            configuration.value_axis, data.distribution_values, "data.distribution_values"
        )

    def series(self, data: Any) -> List[List[float]]:
        return [data.distribution_values]

    def names(self, data: Any) -> Optional[List[str]]:
        if data.distribution_name is None:
            return None
        return [data.distribution_name]

    def series_colors(self, data: Any, configuration: Any) -> List[str]:
        return [self.colors.to_css(configuration.distribution.color or self.colors.default_color)]

    def show_legend(self, configuration: Any) -> bool:
        return False

    def compute(self, data: Any, configuration: Any) -> EngineOutputs:
        outputs = EngineOutputs()
        style = configuration.distribution
        extents: List[float] = []

        for values in self.series(data):
            internal = self.axes.normalize(configuration.value_axis, values)
            outputs.boxes.append(self.statistics.box_statistics(internal))

            density = None
            if style.show_violin or style.show_curve:
                density = self.statistics.density(internal)
                extents.extend([float(density.positions[0]), float(density.positions[-1])])
            outputs.densities.append(density)
            extents.extend(internal.tolist())

        value_range = self.axes.compute_range(configuration.value_axis, extents, is_internal=True)
        category_range = self.axes.category_range(len(outputs.boxes))

        if style.orientation == ValuesOrientation.VERTICAL:
            outputs.x_range, outputs.y_range = category_range, value_range
        else:
            outputs.x_range, outputs.y_range = value_range, category_range

        return outputs

    def build_traces(self, data: Any, configuration: Any, outputs: EngineOutputs) -> List[BaseTraceType]:
        style = configuration.distribution
        axis = configuration.value_axis
        names = self.names(data)
        colors = self.series_colors(data, configuration)
        traces = []

        for index, (box, density) in enumerate(zip(outputs.boxes, outputs.densities)):
            name = names[index] if names is not None else None
            legend = series_legend(name, index, self.show_legend(configuration))
            color = colors[index]

            if density is not None:
                traces.append(self._density_trace(index, density, axis, style, color, legend))
                legend = dict(legend, showlegend=False)

            if style.show_box:
                traces.append(self._box_trace(index, box, axis, style, color, density is not None, legend))
                legend = dict(legend, showlegend=False)

            if style.show_outliers and box.outliers.size > 0:
                outliers = self.axes.from_internal(axis, box.outliers)
                traces.append(
                    go.Scatter(
                        mode="markers",
                        marker={"color": color, "size": 5},
                        hoverinfo="x+y",
                        **self.oriented(style.orientation, [index] * outliers.size, outliers.tolist()),
                        **legend,
                    )
                )

        self.logger.debug(f"{len(outputs.boxes)} distribuicoes, {len(traces)} traces")
        return traces

    def build_layout(self, data: Any, configuration: Any, outputs: EngineOutputs) -> Dict[str, Any]:
        style = configuration.distribution
        count = len(outputs.boxes)
        names = self.names(data) or [""] * count
        value_range = outputs.y_range if style.orientation == ValuesOrientation.VERTICAL else outputs.x_range

        value_axis = self.axes.plotly_axis(value_range, configuration.graph, data.value_axis_title)
        category_axis = self.axes.plotly_axis(
            self.axes.category_range(count), configuration.graph, tick_labels=names
        )
        return self.oriented_axes(style.orientation, value_axis, category_axis)

    def _box_trace(
        self,
        index: int,
        box: Any,
        axis: Any,
        style: Any,
        color: str,
        with_density: bool,
        legend: Dict[str, Any],
    ) -> go.Box:
        q1, median, q3, lower, upper = self.axes.from_internal(
            axis, [box.q1, box.median, box.q3, box.lower_whisker, box.upper_whisker]
        ).tolist()
        is_vertical = style.orientation == ValuesOrientation.VERTICAL
        position = {"x": [index]} if is_vertical else {"y": [index]}
        return go.Box(
            q1=[q1],
            median=[median],
            q3=[q3],
            lowerfence=[lower],
            upperfence=[upper],
            orientation="v" if is_vertical else "h",
            boxpoints=False,
            width=self.BOX_WIDTH_WITH_DENSITY if with_density else self.BOX_WIDTH,
            line={"color": color},
            fillcolor=self.colors.with_alpha(color, 0.5 if not with_density else 1.0),
            **position,
            **legend,
        )

    def _density_trace(
        self,
        index: int,
        density: Any,
        axis: Any,
        style: Any,
        color: str,
        legend: Dict[str, Any],
    ) -> go.Scatter:
        values = self.axes.from_internal(axis, density.positions)
        half = density.densities * self.DENSITY_HALF_WIDTH

        if style.show_violin:
            offsets = np.concatenate([index + half, (index - half)[::-1]])
            along = np.concatenate([values, values[::-1]])
        else:
            base = index - self.DENSITY_HALF_WIDTH
            offsets = np.concatenate([base + 2 * half, [base, base]])
            along = np.concatenate([values, [values[-1], values[0]]])

        return go.Scatter(
            mode="lines",
            fill="toself",
            fillcolor=self.colors.with_alpha(color, 0.5),
            line={"color": color, "width": 1},
            hoverinfo="skip",
            **self.oriented(style.orientation, offsets.tolist(), along.tolist()),
            **legend,
        )
