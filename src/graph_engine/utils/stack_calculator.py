"""
StackCalculator - Engine de empilhamento de series paralelas.

Combina series com o mesmo numero de categorias em pilhas cumulativas por
indice de categoria. A ordem das series e a ordem de empilhamento (a primeira
serie fica junto a linha de base).

Modos:
- RAW: valores originais empilhados
- PERCENT: cada categoria reescalada para somar 100
- FRACTION: cada categoria reescalada para somar 1

Uma categoria cuja soma e zero permanece zero nos modos normalizados.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from src.graph_engine.models.primitives import StackingMode
from src.shared_lib.utils.logger import get_logger
from src.shared_lib.utils.validations import iterate_nested_entries, validate_entries, validate_is_non_negative

logger = get_logger(__name__)


@dataclass
class StackedSeries:
    """
    Resultado do empilhamento, com uma linha por serie e uma coluna por categoria.

    Attributes:
        heights: Valores (transformados) de cada serie
        bases: Inicio de cada segmento da pilha
        tops: Fim de cada segmento da pilha (bases + heights)
    """

    heights: np.ndarray
    bases: np.ndarray
    tops: np.ndarray


class StackCalculator:
    """
    Engine de empilhamento.

    Exemplo:
        >>> calculator = StackCalculator()
        >>> stacked = calculator.stack([[1, 2], [3, 2]], StackingMode.PERCENT)
        >>> stacked.tops.tolist()
        [[25.0, 50.0], [100.0, 100.0]]
    """

    SCALES = {
        StackingMode.PERCENT: 100.0,
        StackingMode.FRACTION: 1.0,
    }

    def validate_values(
        self, values: Sequence[Sequence[float]], path: str, mode: Optional[StackingMode]
    ) -> Optional[str]:
        """Modos normalizados exigem valores nao negativos (``path[i][j]``)."""
        if mode not in self.SCALES:
            return None
        return validate_entries(iterate_nested_entries(values, path), validate_is_non_negative)

    def stack(self, values: Sequence[Sequence[float]], mode: StackingMode) -> StackedSeries:
        """
        Empilha as series.

        Args:
            values: Uma lista de valores por serie, todas com o mesmo tamanho
            mode: Modo de empilhamento

        Returns:
            StackedSeries com alturas, bases e topos
        """
        frame = pd.DataFrame([list(series) for series in values], dtype=float)

        if mode in self.SCALES:
            totals = frame.sum(axis=0)
            frame = frame.div(totals.where(totals != 0), axis=1).fillna(0.0) * self.SCALES[mode]

        tops = frame.cumsum(axis=0)
        bases = tops - frame

        logger.debug(
            f"Empilhamento {mode.value}: {frame.shape[0]} series x {frame.shape[1]} categorias"
        )
        return StackedSeries(
            heights=frame.to_numpy(),
            bases=bases.to_numpy(),
            tops=tops.to_numpy(),
        )

    @staticmethod
    def align_lines(
        xs: Sequence[Sequence[float]], ys: Sequence[Sequence[float]]
    ) -> Tuple[np.ndarray, List[List[float]]]:
        """
        Reamostra linhas com X diferentes sobre a uniao dos X.

        Cada linha e interpolada linearmente nos X da uniao; fora do seu
        proprio intervalo ela vale zero.

        Returns:
            Tupla (xs_uniao, ys_por_linha)
        """
        union = np.unique(np.concatenate([np.asarray(line, dtype=float) for line in xs]))
        aligned = []
        for line_xs, line_ys in zip(xs, ys):
            line_xs = np.asarray(line_xs, dtype=float)
            line_ys = np.asarray(line_ys, dtype=float)
            order = np.argsort(line_xs, kind="stable")
            aligned.append(
                np.interp(union, line_xs[order], line_ys[order], left=0.0, right=0.0).tolist()
            )
        return union, aligned
