"""
CdfGenerator - Gerador de funcao de distribuicao acumulada.

A curva e uma escada sobre os valores ordenados:
- UP_TO_VALUE: fracao dos valores <= v (sobe de 0 ate 1)
- DOWN_TO_VALUE: fracao dos valores >= v (desce de 1 ate 0)
"""

from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import plotly.graph_objects as go
from plotly.basedatatypes import BaseTraceType

from src.graph_engine.generators.base import BaseGraphGenerator, EngineOutputs
from src.graph_engine.models.graph_configurations import CdfGraphConfiguration
from src.graph_engine.models.graph_data import CdfGraphData
from src.graph_engine.models.primitives import CdfDirection, GraphKind, ValuesOrientation
from src.graph_engine.utils.legend_manager import series_legend


class CdfGenerator(BaseGraphGenerator):
    """
    Generator para uma CDF.

    Requisitos:
    - Pelo menos 2 valores
    - Em eixo log, todo valor + regularizacao positivo
    """

    kind = GraphKind.CDF

    def validate_combination(
        self, data: CdfGraphData, configuration: CdfGraphConfiguration
    ) -> Optional[str]:
        return self.axes.validate_values(configuration.value_axis, data.cdf_values, "data.cdf_values")

    def series(self, data: Any) -> List[List[float]]:
        return [data.cdf_values]

    def names(self, data: Any) -> Optional[List[str]]:
        if data.cdf_name is None:
            return None
        return [data.cdf_name]

    def series_colors(self, data: Any, configuration: Any) -> List[str]:
        return [self.colors.to_css(configuration.line.color or self.colors.default_color)]

    def show_legend(self, configuration: Any) -> bool:
        return False

    def steps(self, values: List[float], configuration: Any) -> Tuple[np.ndarray, np.ndarray]:
        """
        Pontos da escada de uma CDF.

        Returns:
            Tupla (valores, fracoes), com o ponto de fracao zero quando o
            eixo de fracoes e linear
        """
        ordered = np.sort(np.asarray(values, dtype=float))
        count = ordered.size
        scale = 100.0 if configuration.show_percent else 1.0
        with_zero = not self.axes.is_log(configuration.fraction_axis)

        if configuration.direction == CdfDirection.UP_TO_VALUE:
            fractions = np.arange(1, count + 1) / count
            if with_zero:
                ordered = np.concatenate([ordered[:1], ordered])
                fractions = np.concatenate([[0.0], fractions])
        else:
            fractions = np.arange(count, 0, -1) / count
            if with_zero:
                ordered = np.concatenate([ordered, ordered[-1:]])
                fractions = np.concatenate([fractions, [0.0]])

        return ordered, fractions * scale

    def line_shape(self, configuration: Any) -> str:
        is_up = configuration.direction == CdfDirection.UP_TO_VALUE
        if configuration.orientation == ValuesOrientation.HORIZONTAL:
            return "hv" if is_up else "vh"
        return "vh" if is_up else "hv"

    def compute(self, data: Any, configuration: Any) -> EngineOutputs:
        outputs = EngineOutputs()
        steps = [self.steps(values, configuration) for values in self.series(data)]
        outputs.extras["steps"] = steps

        value_range = self.axes.compute_range(
            configuration.value_axis, [value for values, _ in steps for value in values]
        )
        fraction_range = self.axes.compute_range(
            configuration.fraction_axis,
            [fraction for _, fractions in steps for fraction in fractions],
            include_zero=True,
        )

        if configuration.orientation == ValuesOrientation.HORIZONTAL:
            outputs.x_range, outputs.y_range = value_range, fraction_range
        else:
            outputs.x_range, outputs.y_range = fraction_range, value_range
        return outputs

    def build_traces(self, data: Any, configuration: Any, outputs: EngineOutputs) -> List[BaseTraceType]:
        line = configuration.line
        names = self.names(data)
        colors = self.series_colors(data, configuration)
        traces = []

        for index, (values, fractions) in enumerate(outputs.extras["steps"]):
            plotted_values = self.axes.plotted(configuration.value_axis, values).tolist()
            plotted_fractions = self.axes.plotted(configuration.fraction_axis, fractions).tolist()
            if configuration.orientation == ValuesOrientation.HORIZONTAL:
                coordinates = {"x": plotted_values, "y": plotted_fractions}
            else:
                coordinates = {"x": plotted_fractions, "y": plotted_values}

            color = colors[index]
            name = names[index] if names is not None else None
            trace = go.Scatter(
                mode="lines",
                line={
                    "color": color,
                    "width": line.width or 0,
                    "dash": "dash" if line.is_dashed else "solid",
                    "shape": self.line_shape(configuration),
                },
                **coordinates,
                **series_legend(name, index, self.show_legend(configuration)),
            )
            if line.is_filled:
                fill = "tozeroy" if configuration.orientation == ValuesOrientation.HORIZONTAL else "tozerox"
                trace.update(fill=fill, fillcolor=self.colors.with_alpha(color, 0.3))
            traces.append(trace)

        return traces

    def build_layout(self, data: Any, configuration: Any, outputs: EngineOutputs) -> Dict[str, Any]:
        is_horizontal = configuration.orientation == ValuesOrientation.HORIZONTAL
        value_range = outputs.x_range if is_horizontal else outputs.y_range
        fraction_range = outputs.y_range if is_horizontal else outputs.x_range

        value_axis = self.axes.plotly_axis(value_range, configuration.graph, data.value_axis_title)
        fraction_axis = self.axes.plotly_axis(fraction_range, configuration.graph, data.fraction_axis_title)
        if configuration.show_percent:
            fraction_axis["ticksuffix"] = "%"

        if is_horizontal:
            return {"xaxis": value_axis, "yaxis": fraction_axis}
        return {"xaxis": fraction_axis, "yaxis": value_axis}
