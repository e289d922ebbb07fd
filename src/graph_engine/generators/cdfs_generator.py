"""
CdfsGenerator - Gerador de varias CDFs no mesmo grafico.
"""

from typing import Any, List, Optional

from src.graph_engine.generators.cdf_generator import CdfGenerator
from src.graph_engine.models.graph_configurations import CdfsGraphConfiguration
from src.graph_engine.models.graph_data import CdfsGraphData
from src.graph_engine.models.primitives import GraphKind
from src.shared_lib.utils.validations import first_message


class CdfsGenerator(CdfGenerator):
    """Generator para varias CDFs; cores por CDF, senao da linha, senao da sequencia padrao."""

    kind = GraphKind.CDFS

    def validate_combination(
        self, data: CdfsGraphData, configuration: CdfsGraphConfiguration
    ) -> Optional[str]:
        return first_message(
            lambda: (
                "no data.cdfs_names specified for configuration.show_legend"
                if configuration.show_legend and data.cdfs_names is None else None
            ),
            lambda: self.axes.validate_nested_values(
                configuration.value_axis, data.cdfs_values, "data.cdfs_values"
            ),
        )

    def series(self, data: Any) -> List[List[float]]:
        return data.cdfs_values

    def names(self, data: Any) -> Optional[List[str]]:
        return data.cdfs_names

    def series_colors(self, data: Any, configuration: Any) -> List[str]:
        count = len(data.cdfs_values)
        if data.cdfs_colors is not None:
            return [self.colors.to_css(color) for color in data.cdfs_colors]
        if configuration.line.color is not None:
            return [self.colors.to_css(configuration.line.color)] * count
        return [self.colors.series_color(index) for index in range(count)]

    def show_legend(self, configuration: Any) -> bool:
        return configuration.show_legend
