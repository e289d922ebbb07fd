"""
BarsGenerator - Gerador de barras agrupadas ou empilhadas.

Cada serie tem um valor por categoria. Sem ``stacking`` as series ficam lado a
lado em cada categoria; com ``stacking`` sao empilhadas na ordem das series
(valores brutos, percentuais ou fracoes).
"""

from typing import Any, Dict, List, Optional

import plotly.graph_objects as go
from plotly.basedatatypes import BaseTraceType

from src.graph_engine.generators.bar_generator import BarGenerator
from src.graph_engine.generators.base import EngineOutputs
from src.graph_engine.models.graph_configurations import BarsGraphConfiguration
from src.graph_engine.models.graph_data import BarsGraphData
from src.graph_engine.models.primitives import GraphKind, ValuesOrientation
from src.graph_engine.utils.legend_manager import series_legend
from src.shared_lib.utils.validations import first_message


class BarsGenerator(BarGenerator):
    """
    Generator para varias series de barras.

    Requisitos:
    - series_values retangular (mesmo numero de categorias em toda serie)
    - Nomes obrigatorios quando show_legend esta ativo
    - Empilhamento normalizado exige valores nao negativos
    """

    kind = GraphKind.BARS

    def validate_combination(
        self, data: BarsGraphData, configuration: BarsGraphConfiguration
    ) -> Optional[str]:
        return first_message(
            lambda: (
                "no data.series_names specified for configuration.show_legend"
                if configuration.show_legend and data.series_names is None else None
            ),
            lambda: self.axes.validate_nested_values(
                configuration.value_axis, data.series_values, "data.series_values"
            ),
            lambda: self.stacks.validate_values(data.series_values, "data.series_values", configuration.stacking),
        )

    def compute(self, data: BarsGraphData, configuration: BarsGraphConfiguration) -> EngineOutputs:
        outputs = EngineOutputs()
        if configuration.stacking is not None:
            outputs.stacked = self.stacks.stack(data.series_values, configuration.stacking)
            values = outputs.stacked.tops.ravel().tolist()
        else:
            values = [value for series in data.series_values for value in series]

        value_range = self.axes.compute_range(configuration.value_axis, values, include_zero=True)
        category_range = self.axes.category_range(self.categories_count(data))
        if configuration.orientation == ValuesOrientation.VERTICAL:
            outputs.x_range, outputs.y_range = category_range, value_range
        else:
            outputs.x_range, outputs.y_range = value_range, category_range
        return outputs

    @staticmethod
    def categories_count(data: BarsGraphData) -> int:
        return len(data.series_values[0]) if data.series_values else 0

    def build_traces(
        self, data: BarsGraphData, configuration: BarsGraphConfiguration, outputs: EngineOutputs
    ) -> List[BaseTraceType]:
        positions = list(range(self.categories_count(data)))
        is_vertical = configuration.orientation == ValuesOrientation.VERTICAL
        axis = configuration.value_axis
        traces = []

        for index, series in enumerate(data.series_values):
            name = data.series_names[index] if data.series_names is not None else None
            if data.series_colors is not None:
                color = self.colors.to_css(data.series_colors[index])
            else:
                color = self.colors.series_color(index)

            if outputs.stacked is not None:
                values = outputs.stacked.heights[index].tolist()
                extra: Dict[str, Any] = {"base": self.axes.plotted(axis, outputs.stacked.bases[index]).tolist()}
            else:
                values = self.axes.plotted(axis, series).tolist()
                extra = {}

            if data.series_hovers is not None:
                extra.update(hovertext=data.series_hovers[index], hoverinfo="text")

            traces.append(
                go.Bar(
                    marker={"color": color},
                    orientation="v" if is_vertical else "h",
                    **self.oriented(configuration.orientation, positions, values),
                    **series_legend(name, index, configuration.show_legend),
                    **extra,
                )
            )

        self.logger.debug(f"{len(traces)} series de barras (empilhadas: {outputs.stacked is not None})")
        return traces

    def build_layout(
        self, data: BarsGraphData, configuration: BarsGraphConfiguration, outputs: EngineOutputs
    ) -> Dict[str, Any]:
        layout = self.bars_layout(
            configuration,
            outputs,
            self.categories_count(data),
            data.bars_names,
            data.value_axis_title,
            data.bars_axis_title,
        )
        layout["barmode"] = "overlay" if configuration.stacking is not None else "group"
        return layout
