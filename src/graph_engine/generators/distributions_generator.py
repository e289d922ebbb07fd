"""
DistributionsGenerator - Gerador de varias distribuicoes lado a lado.
"""

from typing import Any, List, Optional

from src.graph_engine.generators.distribution_generator import DistributionGenerator
from src.graph_engine.models.graph_configurations import DistributionsGraphConfiguration
from src.graph_engine.models.graph_data import DistributionsGraphData
from src.graph_engine.models.primitives import GraphKind
from src.shared_lib.utils.validations import first_message


class DistributionsGenerator(DistributionGenerator):
    """
    Generator para varias distribuicoes, uma por posicao de categoria.

    Cores: ``data.distributions_colors``, senao ``configuration.distribution.color``,
    senao a sequencia padrao de cores de series.
    """

    kind = GraphKind.DISTRIBUTIONS

    def validate_combination(
        self, data: DistributionsGraphData, configuration: DistributionsGraphConfiguration
    ) -> Optional[str]:
        return first_message(
            lambda: (
                "no data.distributions_names specified for configuration.show_legend"
                if configuration.show_legend and data.distributions_names is None else None
            ),
            lambda: self.axes.validate_nested_values(
                configuration.value_axis, data.distributions_values, "data.distributions_values"
            ),
        )

    def series(self, data: Any) -> List[List[float]]:
        return data.distributions_values

    def names(self, data: Any) -> Optional[List[str]]:
        return data.distributions_names

    def series_colors(self, data: Any, configuration: Any) -> List[str]:
        count = len(data.distributions_values)
        if data.distributions_colors is not None:
            return [self.colors.to_css(color) for color in data.distributions_colors]
        if configuration.distribution.color is not None:
            return [self.colors.to_css(configuration.distribution.color)] * count
        return [self.colors.series_color(index) for index in range(count)]

    def show_legend(self, configuration: Any) -> bool:
        return configuration.show_legend
