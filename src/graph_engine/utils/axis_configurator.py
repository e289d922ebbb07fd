"""
AxisConfigurator - Dominio e intervalo de eixos lineares e logaritmicos.

Um eixo e logaritmico quando ``log_regularization`` esta definido. Nesse caso
cada valor ``v`` e transformado para o dominio interno ``log10(v + reg)``;
as coordenadas entregues ao Plotly sao ``v + reg`` (o Plotly aplica o log10),
de modo que o ``range`` de um eixo log no layout ja esta no dominio interno.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional, Sequence

import numpy as np

from src.graph_engine.core import settings
from src.shared_lib.utils.logger import get_logger
from src.shared_lib.utils.validations import (
    first_message,
    iterate_entries,
    iterate_nested_entries,
    validate_entries,
    validate_is_non_negative,
    validate_is_range,
)

if TYPE_CHECKING:
    from src.graph_engine.models.configurations import AxisConfiguration, GraphConfiguration

logger = get_logger(__name__)


@dataclass(frozen=True)
class AxisRange:
    """Intervalo de um eixo no dominio interno (log10 para eixos log)."""

    minimum: float
    maximum: float
    is_log: bool = False
    regularization: float = 0.0

    @property
    def plotted_minimum(self) -> float:
        return 10.0 ** self.minimum if self.is_log else self.minimum

    @property
    def plotted_maximum(self) -> float:
        return 10.0 ** self.maximum if self.is_log else self.maximum


class AxisConfigurator:
    """
    Engine de eixos: normalizacao, validacao de dominio e calculo de intervalos.

    Exemplo:
        >>> axes = AxisConfigurator()
        >>> axis = AxisConfiguration(log_regularization=0)
        >>> axes.normalize(axis, [1, 10, 100])
        array([0., 1., 2.])
    """

    def __init__(self, padding: float = settings.AXIS_PADDING):
        self.padding = padding

    @staticmethod
    def is_log(axis: "AxisConfiguration") -> bool:
        return axis.log_regularization is not None

    @staticmethod
    def regularization(axis: "AxisConfiguration") -> float:
        return float(axis.log_regularization or 0.0)

    def validate_axis(self, axis: "AxisConfiguration", path: str) -> Optional[str]:
        """
        Valida a propria configuracao de um eixo.

        Ordem: regularizacao, dominio log dos limites, ordenacao dos limites.
        """
        return first_message(
            lambda: validate_is_non_negative(axis.log_regularization, f"{path}.log_regularization"),
            lambda: self.validate_value(axis, axis.minimum, f"{path}.minimum"),
            lambda: self.validate_value(axis, axis.maximum, f"{path}.maximum"),
            lambda: self.validate_range(axis, path),
        )

    @staticmethod
    def validate_range(axis: "AxisConfiguration", path: str) -> Optional[str]:
        return validate_is_range(axis.minimum, f"{path}.minimum", axis.maximum, f"{path}.maximum")

    def validate_value(self, axis: "AxisConfiguration", value: Optional[float], path: str) -> Optional[str]:
        if value is None or not self.is_log(axis):
            return None
        if value + self.regularization(axis) <= 0:
            return f"log of non-positive {path}: {value}"
        return None

    def validate_values(
        self, axis: "AxisConfiguration", values: Sequence[float], path: str, is_matrix: bool = False
    ) -> Optional[str]:
        """Valida cada valor de um vetor (``path[i]``) ou matriz (``path[i,j]``)."""
        if values is None or not self.is_log(axis):
            return None
        return validate_entries(
            iterate_entries(values, path, is_matrix),
            lambda value, entry_path: self.validate_value(axis, value, entry_path),
        )

    def validate_nested_values(
        self, axis: "AxisConfiguration", values: Sequence[Sequence[float]], path: str
    ) -> Optional[str]:
        """Valida cada valor de um vetor de vetores (``path[i][j]``)."""
        if values is None or not self.is_log(axis):
            return None
        return validate_entries(
            iterate_nested_entries(values, path),
            lambda value, entry_path: self.validate_value(axis, value, entry_path),
        )

    def normalize(self, axis: "AxisConfiguration", values: Iterable[float]) -> np.ndarray:
        """Converte valores para o dominio interno do eixo."""
        array = np.asarray(list(values), dtype=float)
        if self.is_log(axis):
            return np.log10(array + self.regularization(axis))
        return array

    def plotted(self, axis: "AxisConfiguration", values: Iterable[float]) -> np.ndarray:
        """Converte valores para as coordenadas de dados do Plotly."""
        array = np.asarray(list(values), dtype=float)
        if self.is_log(axis):
            return array + self.regularization(axis)
        return array

    def from_internal(self, axis: "AxisConfiguration", internal: Iterable[float]) -> np.ndarray:
        """Converte valores do dominio interno para coordenadas do Plotly."""
        array = np.asarray(list(internal), dtype=float)
        if self.is_log(axis):
            return 10.0 ** array
        return array

    def compute_range(
        self,
        axis: "AxisConfiguration",
        values: Iterable[float],
        include_zero: bool = False,
        is_internal: bool = False,
    ) -> AxisRange:
        """
        Calcula o intervalo do eixo no dominio interno.

        Os lados nao fixados pela configuracao recebem uma margem de
        ``padding`` vezes a extensao dos dados. Com ``include_zero`` (eixos
        lineares de barras e areas) o zero e incluido e o lado do zero nao
        recebe margem.

        Args:
            axis: Configuracao do eixo
            values: Valores dos dados (ja validados)
            include_zero: Se True, inclui o zero em eixos lineares
            is_internal: Se True, ``values`` ja estao no dominio interno

        Returns:
            AxisRange com os limites no dominio interno
        """
        is_log = self.is_log(axis)
        internal = np.asarray(list(values), dtype=float) if is_internal else self.normalize(axis, values)
        internal = internal[np.isfinite(internal)]

        pad_low = pad_high = True
        if internal.size > 0:
            low, high = float(internal.min()), float(internal.max())
        else:
            low, high = 0.0, 1.0

        if include_zero and not is_log:
            if low >= 0:
                low, pad_low = 0.0, False
            if high <= 0:
                high, pad_high = 0.0, False

        if high == low:
            low, high = low - 0.5, high + 0.5
            pad_low = pad_high = True

        span = high - low
        minimum = low - span * self.padding if pad_low else low
        maximum = high + span * self.padding if pad_high else high

        if axis.minimum is not None:
            minimum = float(self.normalize(axis, [axis.minimum])[0])
        if axis.maximum is not None:
            maximum = float(self.normalize(axis, [axis.maximum])[0])

        if maximum <= minimum:
            if axis.maximum is None:
                maximum = minimum + 1.0
            else:
                minimum = maximum - 1.0

        return AxisRange(
            minimum=minimum,
            maximum=maximum,
            is_log=is_log,
            regularization=self.regularization(axis),
        )

    @staticmethod
    def category_range(count: int) -> AxisRange:
        """Intervalo de um eixo de categorias com posicoes 0..count-1."""
        return AxisRange(minimum=-0.5, maximum=max(count, 1) - 0.5)

    def plotly_axis(
        self,
        axis_range: AxisRange,
        graph: "GraphConfiguration",
        title: Optional[str] = None,
        tick_labels: Optional[Sequence[str]] = None,
    ) -> Dict[str, Any]:
        """
        Monta o dicionario de configuracao de um eixo do layout Plotly.

        Args:
            axis_range: Intervalo calculado
            graph: Configuracao geral (grade e marcas)
            title: Titulo do eixo
            tick_labels: Rotulos de categorias (posicoes 0..n-1)

        Returns:
            Dicionario para ``xaxis``/``yaxis`` do layout
        """
        config: Dict[str, Any] = {
            "type": "log" if axis_range.is_log else "linear",
            "range": [axis_range.minimum, axis_range.maximum],
            "showgrid": graph.show_grid,
            "gridcolor": graph.grid_color,
            "showticklabels": graph.show_ticks,
            "ticks": "outside" if graph.show_ticks else "",
            "zeroline": False,
            "showline": True,
            "linecolor": "black",
            "mirror": False,
        }
        if title:
            config["title"] = {"text": title}
        if tick_labels is not None:
            config["tickmode"] = "array"
            config["tickvals"] = list(range(len(tick_labels)))
            config["ticktext"] = list(tick_labels)
            config["showgrid"] = False
        return config
