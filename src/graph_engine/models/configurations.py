"""
Sub-configuracoes compartilhadas entre os tipos de grafico.

Todas sao dataclasses mutaveis, pertencentes ao chamador, que sabem dizer por
que estao invalidas (``validate(path)``). A validacao delega para as engines
que sao donas de cada regra (eixos, cores, tamanhos, faixas, estatisticas).
"""

from dataclasses import dataclass, field
from typing import Optional

from src.graph_engine.core import settings
from src.graph_engine.models.primitives import (
    BandStyle,
    FillBandStyle,
    LineBandStyle,
    Palette,
    ValuesOrientation,
)
from src.graph_engine.utils.axis_configurator import AxisConfigurator
from src.graph_engine.utils.band_builder import BandBuilder
from src.graph_engine.utils.color_manager import ColorManager
from src.graph_engine.utils.distribution_calculator import DistributionCalculator
from src.graph_engine.utils.size_manager import SizeManager
from src.shared_lib.utils.validations import (
    ObjectWithValidation,
    first_message,
    validate_at_least_one,
    validate_is_non_negative,
    validate_is_positive,
)

_AXES = AxisConfigurator()
_COLORS = ColorManager()
_SIZES = SizeManager()
_BANDS = BandBuilder(_COLORS, _AXES)


@dataclass
class MarginsConfiguration(ObjectWithValidation):
    """Margens do grafico em pixels."""

    left: int = settings.MARGIN_LEFT
    right: int = settings.MARGIN_RIGHT
    top: int = settings.MARGIN_TOP
    bottom: int = settings.MARGIN_BOTTOM

    def validate(self, path: str) -> Optional[str]:
        return first_message(
            lambda: validate_is_non_negative(self.left, f"{path}.left"),
            lambda: validate_is_non_negative(self.right, f"{path}.right"),
            lambda: validate_is_non_negative(self.top, f"{path}.top"),
            lambda: validate_is_non_negative(self.bottom, f"{path}.bottom"),
        )


@dataclass
class GraphConfiguration(ObjectWithValidation):
    """
    Opcoes gerais do grafico.

    Attributes:
        width: Largura em pixels (None deixa o renderizador decidir)
        height: Altura em pixels
        margins: Margens em pixels
        show_grid: Exibe linhas de grade
        grid_color: Cor das linhas de grade
        show_ticks: Exibe marcas e rotulos dos eixos
        background_color: Cor de fundo da area de plotagem
    """

    width: Optional[int] = None
    height: Optional[int] = None
    margins: MarginsConfiguration = field(default_factory=MarginsConfiguration)
    show_grid: bool = True
    grid_color: str = settings.GRID_COLOR
    show_ticks: bool = True
    background_color: str = settings.PLOT_BGCOLOR

    def validate(self, path: str) -> Optional[str]:
        return first_message(
            lambda: validate_is_positive(self.width, f"{path}.width"),
            lambda: validate_is_positive(self.height, f"{path}.height"),
            lambda: self.margins.validate(f"{path}.margins"),
            lambda: _COLORS.validate_color(self.grid_color, f"{path}.grid_color"),
            lambda: _COLORS.validate_color(self.background_color, f"{path}.background_color"),
        )


@dataclass
class AxisConfiguration(ObjectWithValidation):
    """
    Configuracao de um eixo.

    ``log_regularization`` definido torna o eixo logaritmico, somando esse
    valor (nao negativo) antes do log10. None significa eixo linear.
    """

    minimum: Optional[float] = None
    maximum: Optional[float] = None
    log_regularization: Optional[float] = None

    def validate(self, path: str) -> Optional[str]:
        return _AXES.validate_axis(self, path)


@dataclass
class ColorScaleConfiguration:
    """Dominio da escala continua de cores."""

    minimum: Optional[float] = None
    maximum: Optional[float] = None
    log_regularization: Optional[float] = None
    reverse: bool = False


@dataclass
class SizeScaleConfiguration:
    """Dominio da escala de tamanhos."""

    minimum: Optional[float] = None
    maximum: Optional[float] = None
    log_regularization: Optional[float] = None
    reverse: bool = False


@dataclass
class SizeRangeConfiguration:
    """Faixa de tamanhos (pixels) para a qual os valores sao mapeados."""

    smallest: float = settings.DEFAULT_SIZE_SMALLEST
    largest: float = settings.DEFAULT_SIZE_LARGEST


@dataclass
class ColorsConfiguration(ObjectWithValidation):
    """
    Como colorir elementos.

    Attributes:
        color: Cor fixa usada quando os dados nao trazem cores
        color_palette: Paleta (NamedPreset, ContinuousStops ou CategoricalPairs)
        color_scale: Dominio da escala continua
        show_color_scale: Exibe a legenda (barra de cor ou entradas categoricas)
    """

    color: Optional[str] = None
    color_palette: Optional[Palette] = None
    color_scale: ColorScaleConfiguration = field(default_factory=ColorScaleConfiguration)
    show_color_scale: bool = False

    def validate(self, path: str) -> Optional[str]:
        return _COLORS.validate_configuration(self, path)


@dataclass
class PointsConfiguration(ColorsConfiguration):
    """Cores e tamanhos de marcadores."""

    size: Optional[float] = None
    size_range: SizeRangeConfiguration = field(default_factory=SizeRangeConfiguration)
    size_scale: SizeScaleConfiguration = field(default_factory=SizeScaleConfiguration)

    def validate(self, path: str) -> Optional[str]:
        return first_message(
            lambda: _COLORS.validate_configuration(self, path),
            lambda: _SIZES.validate_configuration(self, path),
        )


@dataclass
class LineConfiguration(ObjectWithValidation):
    """Estilo de uma linha; ``is_filled`` preenche a area abaixo dela."""

    width: Optional[float] = 1.0
    is_filled: bool = False
    is_dashed: bool = False
    color: Optional[str] = None

    def validate(self, path: str) -> Optional[str]:
        return first_message(
            lambda: validate_at_least_one([
                (f"{path}.width", self.width is not None),
                (f"{path}.is_filled", self.is_filled),
            ]),
            lambda: validate_is_positive(self.width, f"{path}.width"),
            lambda: _COLORS.validate_color(self.color, f"{path}.color"),
        )


@dataclass
class EdgesConfiguration(ObjectWithValidation):
    """Estilo padrao das arestas entre pontos."""

    width: float = 1.0
    color: Optional[str] = None
    is_dashed: bool = False

    def validate(self, path: str) -> Optional[str]:
        return first_message(
            lambda: validate_is_positive(self.width, f"{path}.width"),
            lambda: _COLORS.validate_color(self.color, f"{path}.color"),
        )


@dataclass
class Band(ObjectWithValidation):
    """
    Uma faixa de referencia.

    ``width`` (modo linha) e ``is_filled`` (modo preenchimento) sao mutuamente
    exclusivos; sem nenhum dos dois a faixa e uma linha com
    ``settings.DEFAULT_BAND_WIDTH``. ``title`` so aparece na
    legenda quando ``BandConfiguration.show_legend`` esta ativo.
    """

    offset: Optional[float] = None
    width: Optional[float] = None
    is_filled: bool = False
    color: Optional[str] = None
    is_dashed: bool = False
    title: Optional[str] = None

    def validate(self, path: str) -> Optional[str]:
        return _BANDS.validate_band(self, path)

    def style(self) -> BandStyle:
        """Resolve o estilo (apos a validacao)."""
        if self.is_filled:
            return FillBandStyle(color=self.color or settings.DEFAULT_BAND_FILL_COLOR)
        return LineBandStyle(
            width=self.width if self.width is not None else settings.DEFAULT_BAND_WIDTH,
            color=self.color or settings.DEFAULT_BAND_COLOR,
            is_dashed=self.is_dashed,
        )


@dataclass
class BandConfiguration(ObjectWithValidation):
    """Faixas low/middle/high; low e high tracejadas por padrao."""

    low: Band = field(default_factory=lambda: Band(is_dashed=True))
    middle: Band = field(default_factory=Band)
    high: Band = field(default_factory=lambda: Band(is_dashed=True))
    show_legend: bool = False

    def validate(self, path: str) -> Optional[str]:
        return _BANDS.validate_bands(self, path)


@dataclass
class DistributionConfiguration(ObjectWithValidation):
    """Quais representacoes de uma distribuicao exibir."""

    orientation: ValuesOrientation = ValuesOrientation.VERTICAL
    show_box: bool = True
    show_violin: bool = False
    show_curve: bool = False
    show_outliers: bool = False
    color: Optional[str] = None

    def validate(self, path: str) -> Optional[str]:
        return first_message(
            lambda: DistributionCalculator.validate_style(self, path),
            lambda: _COLORS.validate_color(self.color, f"{path}.color"),
        )
