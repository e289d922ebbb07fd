"""
SizeManager - Engine de tamanhos de marcadores.

Espelha o ColorManager para tamanhos numericos: valida os valores e a
configuracao, e mapeia os valores para a faixa ``[smallest, largest]`` por
normalizacao min-max linear ou logaritmica (com regularizacao).
"""

from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from src.shared_lib.utils.logger import get_logger
from src.shared_lib.utils.validations import (
    first_message,
    is_number,
    iterate_entries,
    validate_is_non_negative,
    validate_is_positive,
    validate_is_range,
)

if TYPE_CHECKING:
    from src.graph_engine.models.configurations import PointsConfiguration

logger = get_logger(__name__)


class SizeManager:
    """Engine de tamanhos: validacao e mapeamento de valores para pixels."""

    @staticmethod
    def is_log(points: "PointsConfiguration") -> bool:
        return points.size_scale.log_regularization is not None

    def validate_configuration(self, points: "PointsConfiguration", path: str) -> Optional[str]:
        """
        Valida tamanho fixo, faixa de tamanhos e escala de tamanhos.

        Ordem: tamanho fixo, menor e maior tamanho, ordenacao da faixa,
        regularizacao, dominio log dos limites, ordenacao dos limites.
        """
        size_range = points.size_range
        scale = points.size_scale
        range_path = f"{path}.size_range"
        scale_path = f"{path}.size_scale"
        return first_message(
            lambda: validate_is_positive(points.size, f"{path}.size"),
            lambda: validate_is_positive(size_range.smallest, f"{range_path}.smallest"),
            lambda: validate_is_positive(size_range.largest, f"{range_path}.largest"),
            lambda: validate_is_range(
                size_range.smallest, f"{range_path}.smallest", size_range.largest, f"{range_path}.largest"
            ),
            lambda: validate_is_non_negative(scale.log_regularization, f"{scale_path}.log_regularization"),
            lambda: self._validate_log_value(points, scale.minimum, f"{scale_path}.minimum"),
            lambda: self._validate_log_value(points, scale.maximum, f"{scale_path}.maximum"),
            lambda: validate_is_range(
                scale.minimum, f"{scale_path}.minimum", scale.maximum, f"{scale_path}.maximum"
            ),
        )

    def validate_sizes(
        self,
        values: Optional[Sequence[float]],
        data_path: str,
        points: "PointsConfiguration",
        is_matrix: bool = False,
    ) -> Optional[str]:
        """Todo tamanho deve ser um numero nao negativo (e positivo apos a regularizacao em escala log)."""
        if values is None:
            return None
        for entry_path, value in iterate_entries(values, data_path, is_matrix):
            if not is_number(value):
                return f"invalid {entry_path}: {value}"
            message = validate_is_non_negative(value, entry_path)
            if message is None:
                message = self._validate_log_value(points, value, entry_path)
            if message is not None:
                return message
        return None

    def map_sizes(
        self, values: Sequence[float], points: "PointsConfiguration", is_matrix: bool = False
    ) -> np.ndarray:
        """
        Mapeia valores (ja validados) para tamanhos em pixels.

        Valores iguais (ou um unico valor) mapeiam para o meio da faixa.

        Args:
            values: Tamanhos por elemento (vetor, ou matriz achatada por linhas)
            points: Configuracao com ``size_range`` e ``size_scale``
            is_matrix: Se True, ``values`` e uma matriz

        Returns:
            Array com um tamanho por elemento
        """
        flat = np.asarray([value for _, value in iterate_entries(values, "", is_matrix)], dtype=float)
        scale = points.size_scale
        smallest = points.size_range.smallest
        largest = points.size_range.largest

        internal = self._normalize(points, flat)
        if internal.size == 0:
            return internal

        low = float(internal.min())
        high = float(internal.max())
        if scale.minimum is not None:
            low = float(self._normalize(points, [scale.minimum])[0])
        if scale.maximum is not None:
            high = float(self._normalize(points, [scale.maximum])[0])

        if high <= low:
            fractions = np.full(internal.shape, 0.5)
        else:
            fractions = np.clip((internal - low) / (high - low), 0.0, 1.0)

        if scale.reverse:
            fractions = 1.0 - fractions

        return smallest + fractions * (largest - smallest)

    def _normalize(self, points: "PointsConfiguration", values: Sequence[float]) -> np.ndarray:
        array = np.asarray(values, dtype=float)
        if self.is_log(points):
            return np.log10(array + points.size_scale.log_regularization)
        return array

    def _validate_log_value(
        self, points: "PointsConfiguration", value: Optional[float], path: str
    ) -> Optional[str]:
        regularization = points.size_scale.log_regularization
        if value is None or regularization is None:
            return None
        if value + regularization <= 0:
            return f"log of non-positive {path}: {value}"
        return None
