"""
GeneratorRouter - Roteador que seleciona o generator apropriado pelo tipo de grafico.

Usa um registro (GraphKind -> classe de generator) fechado: cada tipo de dados
tem exatamente um generator.
"""

from typing import Any, Dict, List, Optional, Type

from src.graph_engine.generators.bar_generator import BarGenerator
from src.graph_engine.generators.bars_generator import BarsGenerator
from src.graph_engine.generators.base import BaseGraphGenerator
from src.graph_engine.generators.cdf_generator import CdfGenerator
from src.graph_engine.generators.cdfs_generator import CdfsGenerator
from src.graph_engine.generators.distribution_generator import DistributionGenerator
from src.graph_engine.generators.distributions_generator import DistributionsGenerator
from src.graph_engine.generators.grid_generator import GridGenerator
from src.graph_engine.generators.heatmap_generator import HeatmapGenerator
from src.graph_engine.generators.line_generator import LineGenerator
from src.graph_engine.generators.lines_generator import LinesGenerator
from src.graph_engine.generators.points_generator import PointsGenerator
from src.graph_engine.models.primitives import GraphKind
from src.graph_engine.utils.plot_styler import PlotStyler
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


class GeneratorRouter:
    """
    Roteador que seleciona o generator apropriado pelo GraphKind.

    Exemplo:
        >>> router = GeneratorRouter()
        >>> generator = router.get_generator(GraphKind.BARS)
        >>> type(generator).__name__
        'BarsGenerator'
        >>> fig = router.route(data, configuration).generate(data, configuration)
    """

    def __init__(self, styler: Optional[PlotStyler] = None):
        """
        Inicializa o router.

        Args:
            styler: Instancia de PlotStyler para passar aos generators
                    (uma nova instancia se None)
        """
        self.styler = styler or PlotStyler()
        self._registry: Dict[GraphKind, Type[BaseGraphGenerator]] = {}
        self._register_default_generators()
        logger.debug(f"GeneratorRouter inicializado com {len(self._registry)} generators")

    def _register_default_generators(self) -> None:
        for generator_class in (
            DistributionGenerator,
            DistributionsGenerator,
            LineGenerator,
            LinesGenerator,
            CdfGenerator,
            CdfsGenerator,
            BarGenerator,
            BarsGenerator,
            PointsGenerator,
            GridGenerator,
            HeatmapGenerator,
        ):
            self._register(generator_class.kind, generator_class)

        logger.debug(f"Generators registrados: {[kind.value for kind in self._registry]}")

    def _register(self, kind: GraphKind, generator_class: Type[BaseGraphGenerator]) -> None:
        if not issubclass(generator_class, BaseGraphGenerator):
            raise TypeError(f"{generator_class.__name__} deve herdar de BaseGraphGenerator")
        self._registry[kind] = generator_class

    def get_generator(self, kind: GraphKind) -> BaseGraphGenerator:
        """
        Retorna uma instancia do generator do tipo de grafico.

        Raises:
            ValueError: Se o tipo nao estiver registrado
        """
        if kind not in self._registry:
            supported = [registered.value for registered in self._registry]
            raise ValueError(f"Tipo de grafico '{kind}' nao suportado. Tipos suportados: {supported}")

        generator_class = self._registry[kind]
        logger.debug(f"Generator instanciado: {generator_class.__name__} para '{kind.value}'")
        return generator_class(styler=self.styler)

    def route(self, data: Any, configuration: Any) -> BaseGraphGenerator:
        """
        Seleciona o generator pelo tipo dos dados, conferindo a configuracao.

        Raises:
            TypeError: Se dados ou configuracao nao tiverem tipo de grafico,
                       ou se os tipos forem diferentes
        """
        data_kind = getattr(data, "kind", None)
        configuration_kind = getattr(configuration, "kind", None)
        if not isinstance(data_kind, GraphKind):
            raise TypeError(f"{type(data).__name__} nao e um tipo de dados de grafico")
        if not isinstance(configuration_kind, GraphKind):
            raise TypeError(f"{type(configuration).__name__} nao e um tipo de configuracao de grafico")
        if data_kind != configuration_kind:
            raise TypeError(
                f"Dados de '{data_kind.value}' combinados com configuracao de '{configuration_kind.value}'"
            )
        return self.get_generator(data_kind)

    def get_supported_kinds(self) -> List[GraphKind]:
        return list(self._registry.keys())

    def is_supported(self, kind: GraphKind) -> bool:
        return kind in self._registry
