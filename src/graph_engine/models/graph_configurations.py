"""
Configuracoes de cada tipo de grafico.

Cada configuracao valida seus campos na ordem declarada (opcoes gerais
primeiro) e devolve a primeira mensagem encontrada.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from src.graph_engine.models.configurations import (
    AxisConfiguration,
    BandConfiguration,
    ColorsConfiguration,
    DistributionConfiguration,
    EdgesConfiguration,
    GraphConfiguration,
    LineConfiguration,
    PointsConfiguration,
)
from src.graph_engine.models.primitives import CdfDirection, GraphKind, StackingMode, ValuesOrientation
from src.shared_lib.utils.validations import (
    ObjectWithValidation,
    first_message,
    validate_is_less_than_one,
    validate_is_non_negative,
)


def validate_fields(obj: ObjectWithValidation, path: str, *names: str) -> Optional[str]:
    """Valida os campos ``names`` de ``obj`` em ordem, parando no primeiro problema."""
    for name in names:
        message = getattr(obj, name).validate(f"{path}.{name}")
        if message is not None:
            return message
    return None


def validate_bars_gap(bars_gap: float, path: str) -> Optional[str]:
    return first_message(
        lambda: validate_is_non_negative(bars_gap, path),
        lambda: validate_is_less_than_one(bars_gap, path),
    )


@dataclass
class DistributionGraphConfiguration(ObjectWithValidation):
    kind: ClassVar[GraphKind] = GraphKind.DISTRIBUTION

    graph: GraphConfiguration = field(default_factory=GraphConfiguration)
    value_axis: AxisConfiguration = field(default_factory=AxisConfiguration)
    distribution: DistributionConfiguration = field(default_factory=DistributionConfiguration)

    def validate(self, path: str) -> Optional[str]:
        return validate_fields(self, path, "graph", "value_axis", "distribution")


@dataclass
class DistributionsGraphConfiguration(ObjectWithValidation):
    kind: ClassVar[GraphKind] = GraphKind.DISTRIBUTIONS

    graph: GraphConfiguration = field(default_factory=GraphConfiguration)
    value_axis: AxisConfiguration = field(default_factory=AxisConfiguration)
    distribution: DistributionConfiguration = field(default_factory=DistributionConfiguration)
    show_legend: bool = False

    def validate(self, path: str) -> Optional[str]:
        return validate_fields(self, path, "graph", "value_axis", "distribution")


@dataclass
class LineGraphConfiguration(ObjectWithValidation):
    kind: ClassVar[GraphKind] = GraphKind.LINE

    graph: GraphConfiguration = field(default_factory=GraphConfiguration)
    x_axis: AxisConfiguration = field(default_factory=AxisConfiguration)
    y_axis: AxisConfiguration = field(default_factory=AxisConfiguration)
    line: LineConfiguration = field(default_factory=LineConfiguration)
    vertical_bands: BandConfiguration = field(default_factory=BandConfiguration)
    horizontal_bands: BandConfiguration = field(default_factory=BandConfiguration)

    def validate(self, path: str) -> Optional[str]:
        return validate_fields(
            self, path, "graph", "x_axis", "y_axis", "line", "vertical_bands", "horizontal_bands"
        )


@dataclass
class LinesGraphConfiguration(ObjectWithValidation):
    """``stacking`` None desenha as linhas independentes; com um modo, elas sao empilhadas."""

    kind: ClassVar[GraphKind] = GraphKind.LINES

    graph: GraphConfiguration = field(default_factory=GraphConfiguration)
    x_axis: AxisConfiguration = field(default_factory=AxisConfiguration)
    y_axis: AxisConfiguration = field(default_factory=AxisConfiguration)
    line: LineConfiguration = field(default_factory=LineConfiguration)
    stacking: Optional[StackingMode] = None
    show_legend: bool = False
    vertical_bands: BandConfiguration = field(default_factory=BandConfiguration)
    horizontal_bands: BandConfiguration = field(default_factory=BandConfiguration)

    def validate(self, path: str) -> Optional[str]:
        return validate_fields(
            self, path, "graph", "x_axis", "y_axis", "line", "vertical_bands", "horizontal_bands"
        )


@dataclass
class CdfGraphConfiguration(ObjectWithValidation):
    """
    Com ``orientation`` HORIZONTAL os valores crescem no eixo X e a fracao no
    eixo Y; VERTICAL inverte os eixos. ``show_percent`` usa 0..100 em vez de 0..1.
    """

    kind: ClassVar[GraphKind] = GraphKind.CDF

    graph: GraphConfiguration = field(default_factory=GraphConfiguration)
    value_axis: AxisConfiguration = field(default_factory=AxisConfiguration)
    fraction_axis: AxisConfiguration = field(default_factory=AxisConfiguration)
    line: LineConfiguration = field(default_factory=LineConfiguration)
    orientation: ValuesOrientation = ValuesOrientation.HORIZONTAL
    direction: CdfDirection = CdfDirection.UP_TO_VALUE
    show_percent: bool = False

    def validate(self, path: str) -> Optional[str]:
        return validate_fields(self, path, "graph", "value_axis", "fraction_axis", "line")


@dataclass
class CdfsGraphConfiguration(ObjectWithValidation):
    kind: ClassVar[GraphKind] = GraphKind.CDFS

    graph: GraphConfiguration = field(default_factory=GraphConfiguration)
    value_axis: AxisConfiguration = field(default_factory=AxisConfiguration)
    fraction_axis: AxisConfiguration = field(default_factory=AxisConfiguration)
    line: LineConfiguration = field(default_factory=LineConfiguration)
    orientation: ValuesOrientation = ValuesOrientation.HORIZONTAL
    direction: CdfDirection = CdfDirection.UP_TO_VALUE
    show_percent: bool = False
    show_legend: bool = False

    def validate(self, path: str) -> Optional[str]:
        return validate_fields(self, path, "graph", "value_axis", "fraction_axis", "line")


@dataclass
class BarGraphConfiguration(ObjectWithValidation):
    """``bars_gap`` e a fracao (0 <= gap < 1) do espaco de cada categoria deixada vazia."""

    kind: ClassVar[GraphKind] = GraphKind.BAR

    graph: GraphConfiguration = field(default_factory=GraphConfiguration)
    value_axis: AxisConfiguration = field(default_factory=AxisConfiguration)
    orientation: ValuesOrientation = ValuesOrientation.VERTICAL
    bars_gap: float = 0.2
    bars: ColorsConfiguration = field(default_factory=ColorsConfiguration)

    def validate(self, path: str) -> Optional[str]:
        return first_message(
            lambda: validate_fields(self, path, "graph", "value_axis"),
            lambda: validate_bars_gap(self.bars_gap, f"{path}.bars_gap"),
            lambda: validate_fields(self, path, "bars"),
        )


@dataclass
class BarsGraphConfiguration(ObjectWithValidation):
    kind: ClassVar[GraphKind] = GraphKind.BARS

    graph: GraphConfiguration = field(default_factory=GraphConfiguration)
    value_axis: AxisConfiguration = field(default_factory=AxisConfiguration)
    orientation: ValuesOrientation = ValuesOrientation.VERTICAL
    bars_gap: float = 0.2
    stacking: Optional[StackingMode] = None
    show_legend: bool = False

    def validate(self, path: str) -> Optional[str]:
        return first_message(
            lambda: validate_fields(self, path, "graph", "value_axis"),
            lambda: validate_bars_gap(self.bars_gap, f"{path}.bars_gap"),
        )


@dataclass
class PointsGraphConfiguration(ObjectWithValidation):
    """``borders`` controla o anel desenhado ao redor de cada ponto (``size`` e a espessura)."""

    kind: ClassVar[GraphKind] = GraphKind.POINTS

    graph: GraphConfiguration = field(default_factory=GraphConfiguration)
    x_axis: AxisConfiguration = field(default_factory=AxisConfiguration)
    y_axis: AxisConfiguration = field(default_factory=AxisConfiguration)
    points: PointsConfiguration = field(default_factory=PointsConfiguration)
    borders: PointsConfiguration = field(default_factory=PointsConfiguration)
    edges: EdgesConfiguration = field(default_factory=EdgesConfiguration)
    edges_over_points: bool = False
    vertical_bands: BandConfiguration = field(default_factory=BandConfiguration)
    horizontal_bands: BandConfiguration = field(default_factory=BandConfiguration)
    diagonal_bands: BandConfiguration = field(default_factory=BandConfiguration)

    def validate(self, path: str) -> Optional[str]:
        return validate_fields(
            self,
            path,
            "graph",
            "x_axis",
            "y_axis",
            "points",
            "borders",
            "edges",
            "vertical_bands",
            "horizontal_bands",
            "diagonal_bands",
        )


@dataclass
class GridGraphConfiguration(ObjectWithValidation):
    kind: ClassVar[GraphKind] = GraphKind.GRID

    graph: GraphConfiguration = field(default_factory=GraphConfiguration)
    points: PointsConfiguration = field(default_factory=PointsConfiguration)

    def validate(self, path: str) -> Optional[str]:
        return validate_fields(self, path, "graph", "points")


@dataclass
class HeatmapGraphConfiguration(ObjectWithValidation):
    kind: ClassVar[GraphKind] = GraphKind.HEATMAP

    graph: GraphConfiguration = field(default_factory=GraphConfiguration)
    entries: ColorsConfiguration = field(default_factory=ColorsConfiguration)

    def validate(self, path: str) -> Optional[str]:
        return validate_fields(self, path, "graph", "entries")
