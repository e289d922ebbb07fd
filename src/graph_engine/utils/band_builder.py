"""
BandBuilder - Engine de faixas de referencia.

Cada ``BandConfiguration`` agrupa tres faixas (low, middle, high). Uma faixa
com ``offset`` definido vira uma linha (modo linha) ou uma regiao preenchida
(modo preenchimento), em uma de tres orientacoes:

- vertical: ``x = offset``
- horizontal: ``y = offset``
- diagonal: ``y = x + offset`` (eixos lineares) ou ``y = x * offset`` (eixos log)

Regioes preenchidas: low fica abaixo/a esquerda de ``low.offset``, high acima/a
direita de ``high.offset`` e middle entre os dois (ou os limites do eixo).
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

import plotly.graph_objects as go

from src.graph_engine.models.primitives import BandsOrientation, FillBandStyle
from src.graph_engine.utils.axis_configurator import AxisConfigurator, AxisRange
from src.graph_engine.utils.color_manager import ColorManager
from src.shared_lib.utils.logger import get_logger
from src.shared_lib.utils.validations import (
    first_message,
    validate_is_positive,
    validate_not_both,
)

if TYPE_CHECKING:
    from src.graph_engine.models.configurations import AxisConfiguration, Band, BandConfiguration

logger = get_logger(__name__)

# Entradas de faixas ficam no fim da legenda combinada
BAND_LEGEND_RANK = 1000


@dataclass
class BandTraces:
    """Primitivas geradas para uma configuracao de faixas."""

    fills: List[go.Scatter] = field(default_factory=list)
    lines: List[go.Scatter] = field(default_factory=list)

    @property
    def traces(self) -> List[go.Scatter]:
        return self.fills + self.lines

    @property
    def has_legend(self) -> bool:
        return any(trace.showlegend for trace in self.traces)


class BandBuilder:
    """
    Engine de faixas: validacao de ordenacao, estilo e eixos, e geometria.

    Exemplo:
        >>> builder = BandBuilder(ColorManager(), AxisConfigurator())
        >>> bands = BandConfiguration(low=Band(offset=2), high=Band(offset=1))
        >>> builder.validate_bands(bands, "configuration.vertical_bands")
        'configuration.vertical_bands.low.offset: 2\\nis not less than configuration.vertical_bands.high.offset: 1'
    """

    def __init__(self, colors: ColorManager, axes: AxisConfigurator):
        self.colors = colors
        self.axes = axes

    def validate_band(self, band: "Band", path: str) -> Optional[str]:
        """Linha (``width`` explicito ou padrao) ou preenchimento, nunca os dois."""
        has_width = band.width is not None
        return first_message(
            lambda: validate_not_both((f"{path}.width", has_width), (f"{path}.is_filled", band.is_filled)),
            lambda: validate_is_positive(band.width, f"{path}.width"),
            lambda: self.colors.validate_color(band.color, f"{path}.color"),
        )

    def validate_bands(self, bands: "BandConfiguration", path: str) -> Optional[str]:
        """Valida a ordenacao ``low < middle < high`` e depois o estilo de cada faixa."""
        return first_message(
            lambda: self._validate_order(bands, path),
            lambda: self.validate_band(bands.low, f"{path}.low"),
            lambda: self.validate_band(bands.middle, f"{path}.middle"),
            lambda: self.validate_band(bands.high, f"{path}.high"),
        )

    def validate_axes(
        self,
        bands: "BandConfiguration",
        path: str,
        orientation: BandsOrientation,
        x_axis: "AxisConfiguration",
        y_axis: "AxisConfiguration",
    ) -> Optional[str]:
        """
        Valida os offsets contra a escala dos eixos envolvidos.

        Faixas diagonais exigem que os dois eixos tenham a mesma escala; em
        eixos log o offset diagonal e multiplicativo e deve ser positivo.
        """
        offsets = [
            (f"{path}.{name}.offset", band.offset)
            for name, band in self._named(bands)
            if band.offset is not None
        ]
        if not offsets:
            return None

        if orientation == BandsOrientation.VERTICAL:
            for offset_path, offset in offsets:
                message = self.axes.validate_value(x_axis, offset, offset_path)
                if message is not None:
                    return message
            return None

        if orientation == BandsOrientation.HORIZONTAL:
            for offset_path, offset in offsets:
                message = self.axes.validate_value(y_axis, offset, offset_path)
                if message is not None:
                    return message
            return None

        is_log = self.axes.is_log(x_axis)
        if is_log != self.axes.is_log(y_axis):
            return f"{path} specified for a combination of linear and log scale axes"
        if is_log:
            for offset_path, offset in offsets:
                message = validate_is_positive(offset, offset_path)
                if message is not None:
                    return message
        return None

    def build(
        self,
        bands: "BandConfiguration",
        orientation: BandsOrientation,
        x_range: AxisRange,
        y_range: AxisRange,
    ) -> BandTraces:
        """
        Gera as primitivas (linhas e regioes) de uma configuracao de faixas.

        Args:
            bands: Configuracao ja validada
            orientation: Orientacao das faixas
            x_range: Intervalo do eixo X
            y_range: Intervalo do eixo Y

        Returns:
            BandTraces com as regioes preenchidas e as linhas, em coordenadas de dados
        """
        result = BandTraces()
        bounds = (
            x_range.plotted_minimum,
            x_range.plotted_maximum,
            y_range.plotted_minimum,
            y_range.plotted_maximum,
        )
        is_log = x_range.is_log and y_range.is_log
        # Em eixos log as coordenadas do Plotly sao valor + regularizacao
        shift = self._shift(orientation, x_range, y_range)

        for index, (name, band) in enumerate(self._named(bands)):
            if band.offset is None:
                continue
            style = band.style()
            show_legend = bool(bands.show_legend and band.title)
            legend = {
                "showlegend": show_legend,
                "name": band.title if band.title else f"{orientation.value} {name}",
                "legendgroup": f"{orientation.value}_bands",
                "legendrank": BAND_LEGEND_RANK + index,
                "hoverinfo": "skip",
            }

            if isinstance(style, FillBandStyle):
                xs, ys = self._region(name, bands, orientation, bounds, is_log, shift)
                result.fills.append(
                    go.Scatter(
                        x=xs,
                        y=ys,
                        mode="lines",
                        fill="toself",
                        fillcolor=self.colors.to_css(style.color),
                        line={"width": 0},
                        **legend,
                    )
                )
            else:
                xs, ys = self._line(band.offset + shift, orientation, bounds, is_log)
                result.lines.append(
                    go.Scatter(
                        x=xs,
                        y=ys,
                        mode="lines",
                        line={
                            "color": self.colors.to_css(style.color),
                            "width": style.width,
                            "dash": "dash" if style.is_dashed else "solid",
                        },
                        **legend,
                    )
                )

        logger.debug(
            f"Faixas {orientation.value}: {len(result.fills)} regioes, {len(result.lines)} linhas"
        )
        return result

    @staticmethod
    def _named(bands: "BandConfiguration") -> List[Tuple[str, "Band"]]:
        return [("low", bands.low), ("middle", bands.middle), ("high", bands.high)]

    @staticmethod
    def _validate_order(bands: "BandConfiguration", path: str) -> Optional[str]:
        low = bands.low.offset
        middle = bands.middle.offset
        high = bands.high.offset
        if low is not None and middle is not None and not low < middle:
            return f"{path}.low.offset: {low}\nis not less than {path}.middle.offset: {middle}"
        if high is not None and middle is not None and not high > middle:
            return f"{path}.high.offset: {high}\nis not greater than {path}.middle.offset: {middle}"
        if low is not None and high is not None and middle is None and not low < high:
            return f"{path}.low.offset: {low}\nis not less than {path}.high.offset: {high}"
        return None

    @staticmethod
    def _shift(orientation: BandsOrientation, x_range: AxisRange, y_range: AxisRange) -> float:
        if orientation == BandsOrientation.VERTICAL and x_range.is_log:
            return x_range.regularization
        if orientation == BandsOrientation.HORIZONTAL and y_range.is_log:
            return y_range.regularization
        return 0.0

    @staticmethod
    def _diagonal(offset: float, is_log: bool) -> Callable[[float], float]:
        if is_log:
            return lambda x: x * offset
        return lambda x: x + offset

    def _line(
        self,
        offset: float,
        orientation: BandsOrientation,
        bounds: Tuple[float, float, float, float],
        is_log: bool,
    ) -> Tuple[List[float], List[float]]:
        x_min, x_max, y_min, y_max = bounds
        if orientation == BandsOrientation.VERTICAL:
            return [offset, offset], [y_min, y_max]
        if orientation == BandsOrientation.HORIZONTAL:
            return [x_min, x_max], [offset, offset]
        line = self._diagonal(offset, is_log)
        return [x_min, x_max], [line(x_min), line(x_max)]

    def _region(
        self,
        name: str,
        bands: "BandConfiguration",
        orientation: BandsOrientation,
        bounds: Tuple[float, float, float, float],
        is_log: bool,
        shift: float = 0.0,
    ) -> Tuple[List[float], List[float]]:
        x_min, x_max, y_min, y_max = bounds
        low = bands.low.offset
        high = bands.high.offset

        if orientation == BandsOrientation.DIAGONAL:
            return self._diagonal_region(name, low, high, bounds, is_log)

        low = low + shift if low is not None else None
        high = high + shift if high is not None else None

        if orientation == BandsOrientation.VERTICAL:
            start, end = x_min, x_max
        else:
            start, end = y_min, y_max

        if name == "low":
            start, end = start, low
        elif name == "high":
            start, end = high, end
        else:
            start = low if low is not None else start
            end = high if high is not None else end

        if orientation == BandsOrientation.VERTICAL:
            return [start, end, end, start, start], [y_min, y_min, y_max, y_max, y_min]
        return [x_min, x_max, x_max, x_min, x_min], [start, start, end, end, start]

    def _diagonal_region(
        self,
        name: str,
        low: Optional[float],
        high: Optional[float],
        bounds: Tuple[float, float, float, float],
        is_log: bool,
    ) -> Tuple[List[float], List[float]]:
        x_min, x_max, y_min, y_max = bounds
        xs = [x_min, x_max]

        def edge(offset: Optional[float], fallback: float) -> List[float]:
            if offset is None:
                return [fallback, fallback]
            line = self._diagonal(offset, is_log)
            return [line(x) for x in xs]

        candidates_low = [y_min] + [y for offset in (low, high) if offset is not None for y in edge(offset, y_min)]
        candidates_high = [y_max] + [y for offset in (low, high) if offset is not None for y in edge(offset, y_max)]
        bottom = min(candidates_low)
        top = max(candidates_high)

        if name == "low":
            lower, upper = [bottom, bottom], edge(low, bottom)
        elif name == "high":
            lower, upper = edge(high, top), [top, top]
        else:
            lower, upper = edge(low, bottom), edge(high, top)

        return (
            [xs[0], xs[1], xs[1], xs[0], xs[0]],
            [lower[0], lower[1], upper[1], upper[0], lower[0]],
        )
