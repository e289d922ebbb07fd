"""
DistributionCalculator - Estatisticas para graficos de distribuicao.

Calcula o resumo de box plot (mediana, quartis, bigodes de Tukey e outliers)
e a estimativa de densidade usada por violinos e curvas.

Escolhas:
- Quartis por ``numpy.percentile`` com interpolacao linear.
- Bigodes de Tukey: o dado mais extremo dentro de ``1.5 * IQR`` dos quartis
  (fator em ``settings.WHISKER_IQR_FACTOR``); sem outliers exibidos, os
  bigodes vao do minimo ao maximo.
- Densidade: KDE gaussiano (``scipy.stats.gaussian_kde``, largura de banda
  pela regra de Scott), avaliado em ``settings.DENSITY_POINTS`` pontos de
  ``min - 2*bw`` a ``max + 2*bw`` e normalizado para pico 1.

Todas as estatisticas sao calculadas no dominio interno do eixo de valores
(log10 para eixos log) pelo chamador.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np
from scipy import stats

from src.graph_engine.core import settings
from src.shared_lib.utils.logger import get_logger
from src.shared_lib.utils.validations import first_message, validate_at_least_one, validate_not_both

if TYPE_CHECKING:
    from src.graph_engine.models.configurations import DistributionConfiguration

logger = get_logger(__name__)


@dataclass
class BoxStatistics:
    median: float
    q1: float
    q3: float
    lower_whisker: float
    upper_whisker: float
    outliers: np.ndarray

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1


@dataclass
class DensityEstimate:
    """Densidade normalizada (pico 1) avaliada em ``positions``."""

    positions: np.ndarray
    densities: np.ndarray
    bandwidth: float


class DistributionCalculator:
    """
    Calculadora de estatisticas de distribuicao.

    Exemplo:
        >>> calculator = DistributionCalculator()
        >>> box = calculator.box_statistics([1, 2, 3, 4, 100])
        >>> box.median, box.upper_whisker, box.outliers.tolist()
        (3.0, 4.0, [100.0])
    """

    def __init__(
        self,
        whisker_factor: float = settings.WHISKER_IQR_FACTOR,
        density_points: int = settings.DENSITY_POINTS,
    ):
        self.whisker_factor = whisker_factor
        self.density_points = density_points

    @staticmethod
    def validate_style(distribution: "DistributionConfiguration", path: str) -> Optional[str]:
        """Pelo menos um de box/violino/curva; violino e curva sao mutuamente exclusivos."""
        return first_message(
            lambda: validate_at_least_one([
                (f"{path}.show_box", distribution.show_box),
                (f"{path}.show_violin", distribution.show_violin),
                (f"{path}.show_curve", distribution.show_curve),
            ]),
            lambda: validate_not_both(
                (f"{path}.show_violin", distribution.show_violin),
                (f"{path}.show_curve", distribution.show_curve),
            ),
        )

    def box_statistics(self, values: Sequence[float]) -> BoxStatistics:
        """
        Calcula o resumo de box plot pela regra de Tukey.

        Os bigodes param no valor mais extremo a ate ``whisker_factor`` IQR dos
        quartis; o que fica alem deles e devolvido em ``outliers``.

        Args:
            values: Valores (nao vazios) no dominio interno

        Returns:
            BoxStatistics
        """
        array = np.asarray(values, dtype=float)
        q1, median, q3 = np.percentile(array, [25, 50, 75])

        reach = self.whisker_factor * (q3 - q1)
        inside = array[(array >= q1 - reach) & (array <= q3 + reach)]
        lower = float(inside.min())
        upper = float(inside.max())
        outliers = np.sort(array[(array < lower) | (array > upper)])

        return BoxStatistics(
            median=float(median),
            q1=float(q1),
            q3=float(q3),
            lower_whisker=lower,
            upper_whisker=upper,
            outliers=outliers,
        )

    def density(self, values: Sequence[float]) -> DensityEstimate:
        """
        Estima a densidade dos valores por KDE gaussiano.

        Amostras com menos de dois valores distintos geram um pico unitario
        no valor comum.
        """
        array = np.asarray(values, dtype=float)
        distinct = np.unique(array)

        if distinct.size < 2:
            center = float(distinct[0])
            return DensityEstimate(
                positions=np.array([center - 0.5, center, center + 0.5]),
                densities=np.array([0.0, 1.0, 0.0]),
                bandwidth=0.0,
            )

        kde = stats.gaussian_kde(array)
        bandwidth = float(kde.factor * array.std(ddof=1))
        positions = np.linspace(
            array.min() - 2 * bandwidth,
            array.max() + 2 * bandwidth,
            self.density_points,
        )
        densities = kde(positions)
        densities = densities / densities.max()

        logger.debug(f"KDE com {array.size} valores, bandwidth={bandwidth:.4g}")
        return DensityEstimate(positions=positions, densities=densities, bandwidth=bandwidth)
