"""
Dados de cada tipo de grafico.

Cada classe carrega os vetores (ou matrizes) crus de um tipo de grafico e os
titulos que descrevem esses dados. Os vetores paralelos (nomes, hovers, cores,
tamanhos) devem concordar em tamanho com o vetor principal; ``validate``
verifica apenas a estrutura dos dados. As regras que dependem da configuracao
(escala log, paletas, escala de cores) ficam nos generators.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, List, Optional, Sequence, Tuple

from src.graph_engine.models.primitives import GraphKind
from src.graph_engine.utils.color_manager import ColorManager
from src.shared_lib.utils.validations import (
    ObjectWithValidation,
    first_message,
    is_number,
    iterate_entries,
    iterate_nested_entries,
    matrix_shape,
    validate_at_least_one,
    validate_entries,
    validate_has_at_least,
    validate_is_non_negative,
    validate_is_not_empty,
    validate_is_positive,
    validate_is_rectangular,
    validate_matrix_size,
    validate_vector_length,
)

_COLORS = ColorManager()


def _validate_number(value: Any, path: str) -> Optional[str]:
    if not is_number(value):
        return f"invalid {path}: {value}"
    return None


def validate_numbers(values: Optional[Sequence[Any]], path: str, is_matrix: bool = False) -> Optional[str]:
    if values is None:
        return None
    return validate_entries(iterate_entries(values, path, is_matrix), _validate_number)


def validate_nested_numbers(values: Optional[Sequence[Sequence[Any]]], path: str) -> Optional[str]:
    if values is None:
        return None
    return validate_entries(iterate_nested_entries(values, path), _validate_number)


def validate_nested_lengths(
    values: Sequence[Sequence[Any]], path: str, expected: Sequence[Sequence[Any]], expected_path: str
) -> Optional[str]:
    """Cada ``values[i]`` deve ter o mesmo tamanho que ``expected[i]``."""
    for index, (inner, expected_inner) in enumerate(zip(values, expected)):
        message = validate_vector_length(
            inner, f"{path}[{index}]", len(expected_inner), f"{expected_path}[{index}]"
        )
        if message is not None:
            return message
    return None


@dataclass
class DistributionGraphData(ObjectWithValidation):
    """Uma distribuicao de valores."""

    kind: ClassVar[GraphKind] = GraphKind.DISTRIBUTION

    distribution_values: List[float] = field(default_factory=list)
    distribution_name: Optional[str] = None
    graph_title: Optional[str] = None
    value_axis_title: Optional[str] = None

    def validate(self, path: str) -> Optional[str]:
        values_path = f"{path}.distribution_values"
        return first_message(
            lambda: validate_is_not_empty(self.distribution_values, values_path),
            lambda: validate_numbers(self.distribution_values, values_path),
        )


@dataclass
class DistributionsGraphData(ObjectWithValidation):
    """Varias distribuicoes lado a lado."""

    kind: ClassVar[GraphKind] = GraphKind.DISTRIBUTIONS

    distributions_values: List[List[float]] = field(default_factory=list)
    distributions_names: Optional[List[str]] = None
    distributions_colors: Optional[List[str]] = None
    legend_title: Optional[str] = None
    graph_title: Optional[str] = None
    value_axis_title: Optional[str] = None

    def validate(self, path: str) -> Optional[str]:
        values_path = f"{path}.distributions_values"
        count = len(self.distributions_values)
        return first_message(
            lambda: validate_is_not_empty(self.distributions_values, values_path),
            lambda: validate_entries(iterate_entries(self.distributions_values, values_path), validate_is_not_empty),
            lambda: validate_nested_numbers(self.distributions_values, values_path),
            lambda: validate_vector_length(self.distributions_names, f"{path}.distributions_names", count, values_path),
            lambda: validate_vector_length(self.distributions_colors, f"{path}.distributions_colors", count, values_path),
            lambda: _COLORS.validate_explicit_colors(self.distributions_colors, f"{path}.distributions_colors"),
        )


@dataclass
class LineGraphData(ObjectWithValidation):
    """Uma linha definida por pontos (x, y)."""

    kind: ClassVar[GraphKind] = GraphKind.LINE

    points_xs: List[float] = field(default_factory=list)
    points_ys: List[float] = field(default_factory=list)
    graph_title: Optional[str] = None
    x_axis_title: Optional[str] = None
    y_axis_title: Optional[str] = None

    def validate(self, path: str) -> Optional[str]:
        xs_path = f"{path}.points_xs"
        ys_path = f"{path}.points_ys"
        return first_message(
            lambda: validate_vector_length(self.points_ys, ys_path, len(self.points_xs), xs_path),
            lambda: validate_has_at_least(self.points_xs, xs_path, 2),
            lambda: validate_numbers(self.points_xs, xs_path),
            lambda: validate_numbers(self.points_ys, ys_path),
        )


@dataclass
class LinesGraphData(ObjectWithValidation):
    """Varias linhas, cada uma com seus proprios pontos e estilo opcional."""

    kind: ClassVar[GraphKind] = GraphKind.LINES

    lines_xs: List[List[float]] = field(default_factory=list)
    lines_ys: List[List[float]] = field(default_factory=list)
    lines_names: Optional[List[str]] = None
    lines_colors: Optional[List[str]] = None
    lines_widths: Optional[List[float]] = None
    lines_fills: Optional[List[bool]] = None
    lines_are_dashed: Optional[List[bool]] = None
    legend_title: Optional[str] = None
    graph_title: Optional[str] = None
    x_axis_title: Optional[str] = None
    y_axis_title: Optional[str] = None

    def validate(self, path: str) -> Optional[str]:
        xs_path = f"{path}.lines_xs"
        ys_path = f"{path}.lines_ys"
        count = len(self.lines_xs)
        return first_message(
            lambda: validate_is_not_empty(self.lines_xs, xs_path),
            lambda: validate_vector_length(self.lines_ys, ys_path, count, xs_path),
            lambda: validate_nested_lengths(self.lines_ys, ys_path, self.lines_xs, xs_path),
            lambda: validate_entries(
                iterate_entries(self.lines_xs, xs_path),
                lambda xs, line_path: validate_has_at_least(xs, line_path, 2),
            ),
            lambda: validate_nested_numbers(self.lines_xs, xs_path),
            lambda: validate_nested_numbers(self.lines_ys, ys_path),
            lambda: validate_vector_length(self.lines_names, f"{path}.lines_names", count, xs_path),
            lambda: validate_vector_length(self.lines_colors, f"{path}.lines_colors", count, xs_path),
            lambda: validate_vector_length(self.lines_widths, f"{path}.lines_widths", count, xs_path),
            lambda: validate_vector_length(self.lines_fills, f"{path}.lines_fills", count, xs_path),
            lambda: validate_vector_length(self.lines_are_dashed, f"{path}.lines_are_dashed", count, xs_path),
            lambda: _COLORS.validate_explicit_colors(self.lines_colors, f"{path}.lines_colors"),
            lambda: (
                validate_entries(iterate_entries(self.lines_widths, f"{path}.lines_widths"), validate_is_positive)
                if self.lines_widths is not None else None
            ),
        )


@dataclass
class CdfGraphData(ObjectWithValidation):
    """Funcao de distribuicao acumulada de um conjunto de valores."""

    kind: ClassVar[GraphKind] = GraphKind.CDF

    cdf_values: List[float] = field(default_factory=list)
    cdf_name: Optional[str] = None
    graph_title: Optional[str] = None
    value_axis_title: Optional[str] = None
    fraction_axis_title: Optional[str] = None

    def validate(self, path: str) -> Optional[str]:
        values_path = f"{path}.cdf_values"
        return first_message(
            lambda: validate_has_at_least(self.cdf_values, values_path, 2),
            lambda: validate_numbers(self.cdf_values, values_path),
        )


@dataclass
class CdfsGraphData(ObjectWithValidation):
    """Varias funcoes de distribuicao acumulada."""

    kind: ClassVar[GraphKind] = GraphKind.CDFS

    cdfs_values: List[List[float]] = field(default_factory=list)
    cdfs_names: Optional[List[str]] = None
    cdfs_colors: Optional[List[str]] = None
    legend_title: Optional[str] = None
    graph_title: Optional[str] = None
    value_axis_title: Optional[str] = None
    fraction_axis_title: Optional[str] = None

    def validate(self, path: str) -> Optional[str]:
        values_path = f"{path}.cdfs_values"
        count = len(self.cdfs_values)
        return first_message(
            lambda: validate_is_not_empty(self.cdfs_values, values_path),
            lambda: validate_entries(
                iterate_entries(self.cdfs_values, values_path),
                lambda values, entry_path: validate_has_at_least(values, entry_path, 2),
            ),
            lambda: validate_nested_numbers(self.cdfs_values, values_path),
            lambda: validate_vector_length(self.cdfs_names, f"{path}.cdfs_names", count, values_path),
            lambda: validate_vector_length(self.cdfs_colors, f"{path}.cdfs_colors", count, values_path),
            lambda: _COLORS.validate_explicit_colors(self.cdfs_colors, f"{path}.cdfs_colors"),
        )


@dataclass
class BarGraphData(ObjectWithValidation):
    """
    Uma serie de barras.

    ``bars_colors`` pode trazer tokens de cor, chaves categoricas ou numeros,
    conforme a paleta de ``configuration.bars``.
    """

    kind: ClassVar[GraphKind] = GraphKind.BAR

    bars_values: List[float] = field(default_factory=list)
    bars_names: Optional[List[str]] = None
    bars_hovers: Optional[List[str]] = None
    bars_colors: Optional[List[Any]] = None
    bars_colors_title: Optional[str] = None
    graph_title: Optional[str] = None
    value_axis_title: Optional[str] = None
    bars_axis_title: Optional[str] = None

    def validate(self, path: str) -> Optional[str]:
        values_path = f"{path}.bars_values"
        count = len(self.bars_values)
        return first_message(
            lambda: validate_is_not_empty(self.bars_values, values_path),
            lambda: validate_numbers(self.bars_values, values_path),
            lambda: validate_vector_length(self.bars_names, f"{path}.bars_names", count, values_path),
            lambda: validate_vector_length(self.bars_hovers, f"{path}.bars_hovers", count, values_path),
            lambda: validate_vector_length(self.bars_colors, f"{path}.bars_colors", count, values_path),
        )


@dataclass
class BarsGraphData(ObjectWithValidation):
    """Varias series de barras com as mesmas categorias."""

    kind: ClassVar[GraphKind] = GraphKind.BARS

    series_values: List[List[float]] = field(default_factory=list)
    series_names: Optional[List[str]] = None
    series_hovers: Optional[List[List[str]]] = None
    series_colors: Optional[List[str]] = None
    bars_names: Optional[List[str]] = None
    legend_title: Optional[str] = None
    graph_title: Optional[str] = None
    value_axis_title: Optional[str] = None
    bars_axis_title: Optional[str] = None

    def validate(self, path: str) -> Optional[str]:
        values_path = f"{path}.series_values"
        count = len(self.series_values)
        return first_message(
            lambda: validate_is_not_empty(self.series_values, values_path),
            lambda: validate_is_rectangular(self.series_values, values_path),
            lambda: validate_nested_numbers(self.series_values, values_path),
            lambda: validate_vector_length(self.series_names, f"{path}.series_names", count, values_path),
            lambda: validate_vector_length(self.series_colors, f"{path}.series_colors", count, values_path),
            lambda: validate_vector_length(self.series_hovers, f"{path}.series_hovers", count, values_path),
            lambda: (
                validate_nested_lengths(self.series_hovers, f"{path}.series_hovers", self.series_values, values_path)
                if self.series_hovers is not None else None
            ),
            lambda: validate_vector_length(
                self.bars_names, f"{path}.bars_names", len(self.series_values[0]), f"{values_path}[0]"
            ),
            lambda: _COLORS.validate_explicit_colors(self.series_colors, f"{path}.series_colors"),
        )


@dataclass
class PointsGraphData(ObjectWithValidation):
    """
    Pontos (x, y) com cores, tamanhos, bordas e arestas opcionais.

    ``edges`` sao pares (origem, destino) de indices de pontos.
    """

    kind: ClassVar[GraphKind] = GraphKind.POINTS

    points_xs: List[float] = field(default_factory=list)
    points_ys: List[float] = field(default_factory=list)
    points_colors: Optional[List[Any]] = None
    points_sizes: Optional[List[float]] = None
    points_hovers: Optional[List[str]] = None
    points_colors_title: Optional[str] = None
    borders_colors: Optional[List[Any]] = None
    borders_sizes: Optional[List[float]] = None
    borders_colors_title: Optional[str] = None
    edges: Optional[List[Tuple[int, int]]] = None
    edges_colors: Optional[List[str]] = None
    edges_sizes: Optional[List[float]] = None
    graph_title: Optional[str] = None
    x_axis_title: Optional[str] = None
    y_axis_title: Optional[str] = None

    def validate(self, path: str) -> Optional[str]:
        xs_path = f"{path}.points_xs"
        count = len(self.points_xs)
        edges_path = f"{path}.edges"
        edges_count = len(self.edges) if self.edges is not None else 0
        return first_message(
            lambda: validate_vector_length(self.points_ys, f"{path}.points_ys", count, xs_path),
            lambda: validate_numbers(self.points_xs, xs_path),
            lambda: validate_numbers(self.points_ys, f"{path}.points_ys"),
            lambda: validate_vector_length(self.points_colors, f"{path}.points_colors", count, xs_path),
            lambda: validate_vector_length(self.points_sizes, f"{path}.points_sizes", count, xs_path),
            lambda: validate_vector_length(self.points_hovers, f"{path}.points_hovers", count, xs_path),
            lambda: validate_vector_length(self.borders_colors, f"{path}.borders_colors", count, xs_path),
            lambda: validate_vector_length(self.borders_sizes, f"{path}.borders_sizes", count, xs_path),
            lambda: self._validate_edges(edges_path, count),
            lambda: validate_vector_length(self.edges_colors, f"{path}.edges_colors", edges_count, edges_path),
            lambda: validate_vector_length(self.edges_sizes, f"{path}.edges_sizes", edges_count, edges_path),
            lambda: _COLORS.validate_explicit_colors(self.edges_colors, f"{path}.edges_colors"),
            lambda: (
                validate_entries(iterate_entries(self.edges_sizes, f"{path}.edges_sizes"), validate_is_non_negative)
                if self.edges_sizes is not None else None
            ),
        )

    def _validate_edges(self, path: str, count: int) -> Optional[str]:
        if self.edges is None:
            return None
        for index, (source, target) in enumerate(self.edges):
            if not 0 <= source < count:
                return f"{path}[{index}] from invalid point: {source}"
            if not 0 <= target < count:
                return f"{path}[{index}] to invalid point: {target}"
            if source == target:
                return f"{path}[{index}] from point to itself: {source}"
        return None


@dataclass
class GridGraphData(ObjectWithValidation):
    """Matriz de pontos (linhas x colunas) com cores e/ou tamanhos."""

    kind: ClassVar[GraphKind] = GraphKind.GRID

    points_colors: Optional[List[List[Any]]] = None
    points_sizes: Optional[List[List[float]]] = None
    rows_names: Optional[List[str]] = None
    columns_names: Optional[List[str]] = None
    points_colors_title: Optional[str] = None
    graph_title: Optional[str] = None
    rows_axis_title: Optional[str] = None
    columns_axis_title: Optional[str] = None

    @property
    def primary_path(self) -> str:
        return "points_colors" if self.points_colors is not None else "points_sizes"

    @property
    def shape(self) -> Tuple[int, int]:
        primary = self.points_colors if self.points_colors is not None else self.points_sizes
        if primary is None:
            return 0, 0
        return matrix_shape(primary)

    def validate(self, path: str) -> Optional[str]:
        primary_path = f"{path}.{self.primary_path}"
        return first_message(
            lambda: validate_at_least_one([
                (f"{path}.points_colors", self.points_colors is not None),
                (f"{path}.points_sizes", self.points_sizes is not None),
            ]),
            lambda: validate_is_rectangular(self.points_colors, f"{path}.points_colors"),
            lambda: validate_matrix_size(self.points_sizes, f"{path}.points_sizes", self.shape, primary_path),
            lambda: validate_vector_length(
                self.rows_names, f"{path}.rows_names", self.shape[0], f"rows in {primary_path}"
            ),
            lambda: validate_vector_length(
                self.columns_names, f"{path}.columns_names", self.shape[1], f"columns in {primary_path}"
            ),
        )


@dataclass
class HeatmapGraphData(ObjectWithValidation):
    """Matriz de valores numericos coloridos por uma escala continua."""

    kind: ClassVar[GraphKind] = GraphKind.HEATMAP

    entries_values: List[List[float]] = field(default_factory=list)
    entries_hovers: Optional[List[List[str]]] = None
    rows_names: Optional[List[str]] = None
    columns_names: Optional[List[str]] = None
    entries_colors_title: Optional[str] = None
    graph_title: Optional[str] = None
    rows_axis_title: Optional[str] = None
    columns_axis_title: Optional[str] = None

    @property
    def shape(self) -> Tuple[int, int]:
        return matrix_shape(self.entries_values)

    def validate(self, path: str) -> Optional[str]:
        values_path = f"{path}.entries_values"
        return first_message(
            lambda: validate_is_not_empty(self.entries_values, values_path),
            lambda: validate_is_rectangular(self.entries_values, values_path),
            lambda: validate_numbers(self.entries_values, values_path, is_matrix=True),
            lambda: validate_matrix_size(self.entries_hovers, f"{path}.entries_hovers", self.shape, values_path),
            lambda: validate_vector_length(
                self.rows_names, f"{path}.rows_names", self.shape[0], f"rows in {values_path}"
            ),
            lambda: validate_vector_length(
                self.columns_names, f"{path}.columns_names", self.shape[1], f"columns in {values_path}"
            ),
        )
