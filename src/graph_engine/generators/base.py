"""
BaseGraphGenerator - Classe abstrata base para todos os generators de graficos.

Define a interface comum (validar, calcular saidas das engines, montar traces
e layout) e o fluxo de geracao compartilhado por todos os tipos de grafico.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional

import numpy as np
import plotly.graph_objects as go
from plotly.basedatatypes import BaseTraceType

from src.graph_engine.models.primitives import GraphKind, ValuesOrientation
from src.graph_engine.utils.axis_configurator import AxisConfigurator, AxisRange
from src.graph_engine.utils.band_builder import BandBuilder, BandTraces
from src.graph_engine.utils.color_manager import ColorMapping
from src.graph_engine.utils.distribution_calculator import (
    BoxStatistics,
    DensityEstimate,
    DistributionCalculator,
)
from src.graph_engine.utils.legend_manager import LegendManager
from src.graph_engine.utils.plot_styler import PlotStyler
from src.graph_engine.utils.size_manager import SizeManager
from src.graph_engine.utils.stack_calculator import StackCalculator, StackedSeries
from src.shared_lib.utils.logger import get_logger
from src.shared_lib.utils.validations import ValidationError, assert_valid_object

logger = get_logger(__name__)


@dataclass
class EngineOutputs:
    """Valores derivados pelas engines para um par (dados, configuracao) validado."""

    x_range: Optional[AxisRange] = None
    y_range: Optional[AxisRange] = None
    colors: Dict[str, ColorMapping] = field(default_factory=dict)
    sizes: Dict[str, np.ndarray] = field(default_factory=dict)
    stacked: Optional[StackedSeries] = None
    boxes: List[BoxStatistics] = field(default_factory=list)
    densities: List[Optional[DensityEstimate]] = field(default_factory=list)
    bands: List[BandTraces] = field(default_factory=list)
    legends: LegendManager = field(default_factory=LegendManager)
    extras: Dict[str, Any] = field(default_factory=dict)

    @property
    def band_traces(self) -> List[go.Scatter]:
        """Todas as regioes preenchidas primeiro, depois todas as linhas."""
        fills = [trace for bands in self.bands for trace in bands.fills]
        lines = [trace for bands in self.bands for trace in bands.lines]
        return fills + lines


class BaseGraphGenerator(ABC):
    """
    Classe base abstrata para os generators de cada tipo de grafico.

    Cada subclasse implementa:
    - validate_combination(): Regras que cruzam dados e configuracao
    - compute(): Saidas das engines (intervalos, escalas, pilhas, estatisticas, faixas)
    - build_traces(): Traces do grafico
    - build_layout(): Entradas de layout especificas do tipo

    Exemplo de Subclasse:
        >>> class LineGenerator(BaseGraphGenerator):
        ...     kind = GraphKind.LINE
        ...     def validate_combination(self, data, configuration):
        ...         return None
        ...     ...
    """

    kind: ClassVar[GraphKind]

    def __init__(self, styler: PlotStyler):
        """
        Inicializa o generator.

        Args:
            styler: Instancia de PlotStyler para aplicar o layout comum
        """
        self.styler = styler
        self.colors = styler.colors
        self.axes = AxisConfigurator()
        self.sizes = SizeManager()
        self.bands = BandBuilder(self.colors, self.axes)
        self.stacks = StackCalculator()
        self.statistics = DistributionCalculator()
        self.logger = get_logger(type(self).__module__)

        self.logger.debug(f"{self.__class__.__name__} inicializado")

    def validate(self, data: Any, configuration: Any) -> None:
        """
        Valida dados, configuracao e a combinacao dos dois, nessa ordem.

        Raises:
            ValidationError: Com a mensagem do primeiro problema encontrado
        """
        assert_valid_object(data, "data")
        assert_valid_object(configuration, "configuration")

        message = self.validate_combination(data, configuration)
        if message is not None:
            self.logger.debug(f"Validacao falhou: {message!r}")
            raise ValidationError(message)

        self.logger.debug("Validacao OK")

    @abstractmethod
    def validate_combination(self, data: Any, configuration: Any) -> Optional[str]:
        """
        Valida as regras que dependem de dados e configuracao juntos
        (escala log, paletas, escala de cores, faixas contra eixos).

        Returns:
            Mensagem do primeiro problema encontrado, ou None
        """

    @abstractmethod
    def compute(self, data: Any, configuration: Any) -> EngineOutputs:
        """Calcula as saidas das engines para dados ja validados."""

    @abstractmethod
    def build_traces(self, data: Any, configuration: Any, outputs: EngineOutputs) -> List[BaseTraceType]:
        """Monta os traces, na ordem de desenho."""

    @abstractmethod
    def build_layout(self, data: Any, configuration: Any, outputs: EngineOutputs) -> Dict[str, Any]:
        """Monta as entradas de layout especificas do tipo (eixos, barmode, ...)."""

    def generate(self, data: Any, configuration: Any) -> go.Figure:
        """
        Gera a figura completa.

        A validacao acontece antes de qualquer calculo; em caso de falha
        nenhuma figura e produzida.

        Returns:
            go.Figure com traces, layout e legenda combinada

        Raises:
            ValidationError: Se os dados ou a configuracao forem invalidos
        """
        self.validate(data, configuration)

        outputs = self.compute(data, configuration)
        traces = list(self.build_traces(data, configuration, outputs))
        fig = go.Figure(data=traces + outputs.legends.build_traces())

        self.styler.apply_layout(
            fig,
            configuration.graph,
            data.graph_title,
            self.build_layout(data, configuration, outputs),
        )
        outputs.legends.apply(fig, getattr(data, "legend_title", None))

        self.logger.info(f"Grafico {self.kind.value} gerado com {len(fig.data)} traces")
        return fig

    # Auxiliares compartilhados

    @staticmethod
    def oriented(orientation: ValuesOrientation, positions: Any, values: Any) -> Dict[str, Any]:
        """Coordenadas ``x``/``y`` com os valores no eixo indicado pela orientacao."""
        if orientation == ValuesOrientation.VERTICAL:
            return {"x": positions, "y": values}
        return {"x": values, "y": positions}

    @staticmethod
    def oriented_axes(
        orientation: ValuesOrientation, value_axis: Dict[str, Any], other_axis: Dict[str, Any]
    ) -> Dict[str, Any]:
        if orientation == ValuesOrientation.VERTICAL:
            return {"xaxis": other_axis, "yaxis": value_axis}
        return {"xaxis": value_axis, "yaxis": other_axis}

    @staticmethod
    def as_list(values: Any) -> List[Any]:
        return np.asarray(values, dtype=float).tolist()
