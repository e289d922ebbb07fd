"""
GridGenerator - Gerador de grade de pontos.

Uma matriz (linhas x colunas) de marcadores: colunas no eixo X, linhas no eixo
Y (a primeira linha no topo). Cores e tamanhos vem de matrizes paralelas.
"""

from typing import Any, Dict, List, Optional

import numpy as np
import plotly.graph_objects as go
from plotly.basedatatypes import BaseTraceType

from src.graph_engine.core import settings
from src.graph_engine.generators.base import BaseGraphGenerator, EngineOutputs
from src.graph_engine.models.graph_configurations import GridGraphConfiguration
from src.graph_engine.models.graph_data import GridGraphData
from src.graph_engine.models.primitives import GraphKind
from src.graph_engine.utils.axis_configurator import AxisRange
from src.shared_lib.utils.validations import first_message


class GridGenerator(BaseGraphGenerator):
    """
    Generator para grades.

    Requisitos:
    - Pelo menos uma de points_colors/points_sizes
    - Matrizes retangulares e do mesmo formato
    - rows_names/columns_names com um nome por linha/coluna
    """

    kind = GraphKind.GRID

    def validate_combination(
        self, data: GridGraphData, configuration: GridGraphConfiguration
    ) -> Optional[str]:
        return first_message(
            lambda: self.colors.validate_colors(
                data.points_colors, "data.points_colors", configuration.points, "configuration.points",
                is_matrix=True,
            ),
            lambda: self.sizes.validate_sizes(
                data.points_sizes, "data.points_sizes", configuration.points, is_matrix=True
            ),
        )

    def compute(self, data: GridGraphData, configuration: GridGraphConfiguration) -> EngineOutputs:
        outputs = EngineOutputs()
        rows, columns = data.shape
        outputs.x_range = self.axes.category_range(columns)
        outputs.y_range = AxisRange(minimum=max(rows, 1) - 0.5, maximum=-0.5)

        mapping = self.colors.map_colors(
            data.points_colors, configuration.points, data.points_colors_title, is_matrix=True
        )
        outputs.colors["points"] = mapping
        outputs.legends.add(mapping.legend)

        if data.points_sizes is not None:
            outputs.sizes["points"] = self.sizes.map_sizes(data.points_sizes, configuration.points, is_matrix=True)
        else:
            size = configuration.points.size if configuration.points.size is not None else settings.DEFAULT_POINT_SIZE
            outputs.sizes["points"] = np.full(rows * columns, float(size))
        return outputs

    def build_traces(
        self, data: GridGraphData, configuration: GridGraphConfiguration, outputs: EngineOutputs
    ) -> List[BaseTraceType]:
        rows, columns = data.shape
        row_indices, column_indices = np.divmod(np.arange(rows * columns), columns) if columns else ([], [])

        return [
            go.Scatter(
                x=np.asarray(column_indices).tolist(),
                y=np.asarray(row_indices).tolist(),
                mode="markers",
                marker={
                    "color": outputs.colors["points"].marker_color,
                    "size": outputs.sizes["points"].tolist(),
                    "line": {"width": 0},
                },
                showlegend=False,
                hoverinfo="x+y",
            )
        ]

    def build_layout(
        self, data: GridGraphData, configuration: GridGraphConfiguration, outputs: EngineOutputs
    ) -> Dict[str, Any]:
        rows, columns = data.shape
        return {
            "xaxis": self.axes.plotly_axis(
                outputs.x_range,
                configuration.graph,
                data.columns_axis_title,
                tick_labels=self.labels(data.columns_names, columns),
            ),
            "yaxis": self.axes.plotly_axis(
                outputs.y_range,
                configuration.graph,
                data.rows_axis_title,
                tick_labels=self.labels(data.rows_names, rows),
            ),
        }

    @staticmethod
    def labels(names: Optional[List[str]], count: int) -> List[str]:
        return list(names) if names is not None else [str(index) for index in range(count)]
