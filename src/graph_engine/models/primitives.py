"""
Tipos basicos compartilhados entre os modelos e as engines.

Este modulo nao importa nenhum outro modulo do pacote, para que as engines
(eixos, cores, faixas, pilhas) possam usa-lo sem depender dos modelos.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Union


class GraphKind(Enum):
    """Conjunto fechado de tipos de grafico suportados."""

    DISTRIBUTION = "distribution"
    DISTRIBUTIONS = "distributions"
    LINE = "line"
    LINES = "lines"
    CDF = "cdf"
    CDFS = "cdfs"
    BAR = "bar"
    BARS = "bars"
    POINTS = "points"
    GRID = "grid"
    HEATMAP = "heatmap"


class ValuesOrientation(Enum):
    """Direcao em que os valores crescem (eixo de valores vertical ou horizontal)."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class StackingMode(Enum):
    """Modo de empilhamento de series paralelas."""

    RAW = "raw"
    PERCENT = "percent"
    FRACTION = "fraction"


class CdfDirection(Enum):
    """Fracao dos valores ate (UP_TO_VALUE) ou a partir de (DOWN_TO_VALUE) cada valor."""

    UP_TO_VALUE = "up_to_value"
    DOWN_TO_VALUE = "down_to_value"


class BandsOrientation(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    DIAGONAL = "diagonal"


# Paletas de cores (uniao marcada)


@dataclass
class NamedPreset:
    """Escala continua nomeada do Plotly (ex: "Viridis", "Blues")."""

    name: str


@dataclass
class ContinuousStops:
    """Lista de pares (valor, cor) interpolados linearmente."""

    stops: List[Tuple[float, str]] = field(default_factory=list)


@dataclass
class CategoricalPairs:
    """Lista de pares (chave, cor) para valores categoricos."""

    pairs: List[Tuple[str, str]] = field(default_factory=list)


Palette = Union[NamedPreset, ContinuousStops, CategoricalPairs]


# Estilos resolvidos de uma faixa (uniao marcada)


@dataclass(frozen=True)
class LineBandStyle:
    width: float
    color: str
    is_dashed: bool


@dataclass(frozen=True)
class FillBandStyle:
    color: str


BandStyle = Union[LineBandStyle, FillBandStyle]
