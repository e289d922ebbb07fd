"""
HeatmapGenerator - Gerador de mapa de calor.

Cada celula da matriz e colorida pela escala continua da configuracao
(``entries``). A primeira linha fica no topo. A barra de cor, quando pedida,
passa pelo LegendManager como nos demais tipos.
"""

from typing import Any, Dict, List, Optional

import plotly.graph_objects as go
from plotly.basedatatypes import BaseTraceType

from src.graph_engine.generators.base import BaseGraphGenerator, EngineOutputs
from src.graph_engine.generators.grid_generator import GridGenerator
from src.graph_engine.models.graph_configurations import HeatmapGraphConfiguration
from src.graph_engine.models.graph_data import HeatmapGraphData
from src.graph_engine.models.primitives import GraphKind
from src.graph_engine.utils.axis_configurator import AxisRange
from src.shared_lib.utils.validations import first_message


class HeatmapGenerator(BaseGraphGenerator):
    """
    Generator para mapas de calor.

    Requisitos:
    - entries_values numerica, retangular e nao vazia
    - Apenas paletas continuas (preset ou paradas)
    """

    kind = GraphKind.HEATMAP

    def validate_combination(
        self, data: HeatmapGraphData, configuration: HeatmapGraphConfiguration
    ) -> Optional[str]:
        return first_message(
            lambda: (
                "categorical configuration.entries.color_palette specified for data.entries_values"
                if self.colors.is_categorical(configuration.entries) else None
            ),
            lambda: self.colors.validate_colors(
                data.entries_values, "data.entries_values", configuration.entries, "configuration.entries",
                is_matrix=True,
            ),
        )

    def compute(self, data: HeatmapGraphData, configuration: HeatmapGraphConfiguration) -> EngineOutputs:
        outputs = EngineOutputs()
        rows, columns = data.shape
        outputs.x_range = self.axes.category_range(columns)
        outputs.y_range = AxisRange(minimum=max(rows, 1) - 0.5, maximum=-0.5)

        internal = self.colors.normalize(configuration.entries, data.entries_values)
        scale = self.colors.continuous_scale(configuration.entries, internal.ravel())
        outputs.extras["z"] = internal.tolist()
        outputs.extras["scale"] = scale
        if configuration.entries.show_color_scale:
            outputs.legends.add(scale.legend(data.entries_colors_title))
        return outputs

    def build_traces(
        self, data: HeatmapGraphData, configuration: HeatmapGraphConfiguration, outputs: EngineOutputs
    ) -> List[BaseTraceType]:
        scale = outputs.extras["scale"]
        trace = go.Heatmap(
            z=outputs.extras["z"],
            colorscale=scale.colorscale(),
            zmin=scale.cmin,
            zmax=scale.cmax,
            showscale=False,
            xgap=0,
            ygap=0,
        )
        if data.entries_hovers is not None:
            trace.update(hovertext=data.entries_hovers, hoverinfo="text")
        return [trace]

    def build_layout(
        self, data: HeatmapGraphData, configuration: HeatmapGraphConfiguration, outputs: EngineOutputs
    ) -> Dict[str, Any]:
        rows, columns = data.shape
        xaxis = self.axes.plotly_axis(
            outputs.x_range,
            configuration.graph,
            data.columns_axis_title,
            tick_labels=GridGenerator.labels(data.columns_names, columns),
        )
        yaxis = self.axes.plotly_axis(
            outputs.y_range,
            configuration.graph,
            data.rows_axis_title,
            tick_labels=GridGenerator.labels(data.rows_names, rows),
        )
        return {"xaxis": xaxis, "yaxis": yaxis}
