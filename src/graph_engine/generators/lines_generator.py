"""
LinesGenerator - Gerador de grafico de varias linhas.

Cada linha pode sobrescrever cor, largura, preenchimento e tracejado da
configuracao comum. Com ``stacking`` as linhas sao reamostradas sobre a uniao
dos X e empilhadas (a primeira linha fica junto ao zero).
"""

from typing import Any, List, Optional

import plotly.graph_objects as go
from plotly.basedatatypes import BaseTraceType

from src.graph_engine.generators.base import EngineOutputs
from src.graph_engine.generators.line_generator import LineGenerator
from src.graph_engine.models.graph_configurations import LinesGraphConfiguration
from src.graph_engine.models.graph_data import LinesGraphData
from src.graph_engine.models.primitives import GraphKind
from src.graph_engine.utils.legend_manager import series_legend
from src.shared_lib.utils.validations import first_message, validate_at_least_one


class LinesGenerator(LineGenerator):
    """
    Generator para varias linhas.

    Requisitos:
    - lines_xs[i] e lines_ys[i] com o mesmo tamanho (pelo menos 2 pontos cada)
    - Nomes obrigatorios quando show_legend esta ativo
    - Empilhamento normalizado (percent/fraction) exige Y nao negativos
    """

    kind = GraphKind.LINES

    def validate_combination(
        self, data: LinesGraphData, configuration: LinesGraphConfiguration
    ) -> Optional[str]:
        return first_message(
            lambda: (
                "no data.lines_names specified for configuration.show_legend"
                if configuration.show_legend and data.lines_names is None else None
            ),
            lambda: self._validate_line_styles(data, configuration),
            lambda: self.axes.validate_nested_values(configuration.x_axis, data.lines_xs, "data.lines_xs"),
            lambda: self.axes.validate_nested_values(configuration.y_axis, data.lines_ys, "data.lines_ys"),
            lambda: self.stacks.validate_values(data.lines_ys, "data.lines_ys", configuration.stacking),
            lambda: self.validate_bands(configuration),
        )

    def compute(self, data: LinesGraphData, configuration: LinesGraphConfiguration) -> EngineOutputs:
        outputs = EngineOutputs()
        xs: List[List[float]] = [list(line) for line in data.lines_xs]
        ys: List[List[float]] = [list(line) for line in data.lines_ys]

        if configuration.stacking is not None:
            union, aligned = self.stacks.align_lines(data.lines_xs, data.lines_ys)
            outputs.stacked = self.stacks.stack(aligned, configuration.stacking)
            xs = [union.tolist()] * len(aligned)
            ys = outputs.stacked.tops.tolist()

        outputs.extras["xs"] = xs
        outputs.extras["ys"] = ys

        any_filled = configuration.line.is_filled or any(data.lines_fills or [])
        outputs.x_range = self.axes.compute_range(
            configuration.x_axis, [x for line in xs for x in line]
        )
        outputs.y_range = self.axes.compute_range(
            configuration.y_axis,
            [y for line in ys for y in line],
            include_zero=any_filled or configuration.stacking is not None,
        )
        self.build_bands(configuration, outputs)
        return outputs

    def build_traces(
        self, data: LinesGraphData, configuration: LinesGraphConfiguration, outputs: EngineOutputs
    ) -> List[BaseTraceType]:
        line = configuration.line
        is_stacked = configuration.stacking is not None
        traces = []

        for index, (xs, ys) in enumerate(zip(outputs.extras["xs"], outputs.extras["ys"])):
            color = self._line_color(data, configuration, index)
            width = self._pick(data.lines_widths, index, line.width)
            is_filled = self._pick(data.lines_fills, index, line.is_filled)
            is_dashed = self._pick(data.lines_are_dashed, index, line.is_dashed)
            name = data.lines_names[index] if data.lines_names is not None else None

            trace = go.Scatter(
                x=self.axes.plotted(configuration.x_axis, xs).tolist(),
                y=self.axes.plotted(configuration.y_axis, ys).tolist(),
                mode="lines",
                line={
                    "color": color,
                    "width": width or 0,
                    "dash": "dash" if is_dashed else "solid",
                },
                **series_legend(name, index, configuration.show_legend),
            )
            if is_filled:
                fill = "tonexty" if is_stacked and index > 0 else "tozeroy"
                trace.update(fill=fill, fillcolor=self.colors.with_alpha(color, 0.3))
            traces.append(trace)

        self.logger.debug(f"{len(traces)} linhas (empilhadas: {is_stacked})")
        return outputs.band_traces + traces

    def _validate_line_styles(
        self, data: LinesGraphData, configuration: LinesGraphConfiguration
    ) -> Optional[str]:
        """Cada linha, apos as sobrescritas, precisa de largura ou preenchimento."""
        for index in range(len(data.lines_xs)):
            width = self._pick(data.lines_widths, index, configuration.line.width)
            is_filled = self._pick(data.lines_fills, index, configuration.line.is_filled)
            message = validate_at_least_one(
                [(f"data.lines_widths[{index}]", width is not None), (f"data.lines_fills[{index}]", bool(is_filled))]
            )
            if message is not None:
                return message
        return None

    def _line_color(self, data: LinesGraphData, configuration: LinesGraphConfiguration, index: int) -> str:
        if data.lines_colors is not None:
            return self.colors.to_css(data.lines_colors[index])
        if configuration.line.color is not None:
            return self.colors.to_css(configuration.line.color)
        return self.colors.series_color(index)

    @staticmethod
    def _pick(values: Optional[List[Any]], index: int, default: Any) -> Any:
        if values is None or values[index] is None:
            return default
        return values[index]

