"""
ColorManager - Engine de cores.

Resolve tokens de cor (nomes CSS e sintaxe hexadecimal), valida paletas e
escalas de cor, e mapeia valores por elemento para cores:

- explicitas: os proprios valores sao tokens de cor (sem paleta)
- categoricas: busca exata da chave em uma paleta ``CategoricalPairs``
- continuas: interpolacao linear por partes entre as paradas de uma paleta
  ``ContinuousStops`` (ou da tabela embutida de um ``NamedPreset``), com
  saturacao fora do intervalo das paradas

Tambem produz os descritores de legenda (barra de cor ou entradas categoricas)
consumidos pelo LegendManager.
"""

import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Tuple, Union

import numpy as np
import plotly.colors as pc
from PIL import ImageColor

from src.graph_engine.core import settings
from src.graph_engine.models.primitives import CategoricalPairs, ContinuousStops, NamedPreset
from src.shared_lib.utils.logger import get_logger
from src.shared_lib.utils.validations import (
    first_message,
    is_number,
    iterate_entries,
    validate_entries,
    validate_is_non_negative,
    validate_is_range,
)

if TYPE_CHECKING:
    from src.graph_engine.models.configurations import ColorsConfiguration

logger = get_logger(__name__)

# Formato produzido por rgba_to_css (alfa fracionario, que o Pillow nao aceita)
CSS_RGBA = re.compile(r"^rgba\((\d{1,3}),(\d{1,3}),(\d{1,3}),(0|1|0?\.\d+|1\.0+)\)$")


def rgba_to_css(rgba: Sequence[float]) -> str:
    """Converte (r, g, b, a) com r/g/b em 0..255 e a em 0..1 para CSS."""
    red, green, blue = (int(round(channel)) for channel in rgba[:3])
    alpha = float(rgba[3])
    if alpha >= 1.0:
        return f"rgb({red},{green},{blue})"
    return f"rgba({red},{green},{blue},{alpha:.3g})"


@dataclass
class ColorBarLegend:
    """Descritor de barra de cor (escala continua), no dominio interno."""

    title: Optional[str]
    colorscale: List[List[Any]]
    cmin: float
    cmax: float
    tickvals: Optional[List[float]] = None
    ticktext: Optional[List[str]] = None


@dataclass
class CategoricalLegend:
    """Descritor de legenda categorica: pares (chave, cor CSS) em ordem da paleta."""

    title: Optional[str]
    entries: List[Tuple[str, str]]


ColorLegend = Union[ColorBarLegend, CategoricalLegend]


@dataclass
class ContinuousScale:
    """Escala continua resolvida: paradas no dominio interno e cores RGBA."""

    values: np.ndarray
    rgba: np.ndarray
    cmin: float
    cmax: float
    is_log: bool = False

    def __call__(self, internal_values: Sequence[float]) -> np.ndarray:
        internal = np.asarray(internal_values, dtype=float)
        return np.stack(
            [np.interp(internal, self.values, self.rgba[:, channel]) for channel in range(4)],
            axis=-1,
        )

    def colorscale(self) -> List[List[Any]]:
        """Escala no formato Plotly ``[[posicao, cor], ...]`` sobre [cmin, cmax]."""
        inner = [value for value in self.values if self.cmin < value < self.cmax]
        points = [self.cmin] + inner + [self.cmax]
        span = self.cmax - self.cmin
        return [
            [(point - self.cmin) / span, rgba_to_css(rgba)]
            for point, rgba in zip(points, self(points))
        ]

    def legend(self, title: Optional[str]) -> ColorBarLegend:
        tickvals = ticktext = None
        if self.is_log:
            powers = list(range(math.ceil(self.cmin), math.floor(self.cmax) + 1))
            if powers:
                tickvals = [float(power) for power in powers]
                ticktext = [f"{10.0 ** power:g}" for power in powers]
        return ColorBarLegend(
            title=title,
            colorscale=self.colorscale(),
            cmin=self.cmin,
            cmax=self.cmax,
            tickvals=tickvals,
            ticktext=ticktext,
        )


@dataclass
class ColorMapping:
    """Resultado do mapeamento: uma cor CSS por elemento, ou uma cor fixa."""

    fixed: str
    colors: Optional[List[str]] = None
    legend: Optional[ColorLegend] = None
    scale: Optional[ContinuousScale] = None

    def color_at(self, index: int) -> str:
        if self.colors is None:
            return self.fixed
        return self.colors[index]

    @property
    def marker_color(self) -> Union[str, List[str]]:
        return self.fixed if self.colors is None else self.colors


class ColorManager:
    """
    Engine de cores: validacao de tokens, paletas e escalas, e mapeamento.

    Exemplo:
        >>> manager = ColorManager()
        >>> manager.to_css("red")
        'rgb(255,0,0)'
        >>> manager.validate_color("nope", "configuration.line.color")
        'invalid configuration.line.color: nope'
    """

    # Cores de series sem cor explicita, em ordem
    SERIES_PALETTE: List[str] = pc.qualitative.Plotly

    def __init__(self, default_color: str = settings.DEFAULT_COLOR):
        self.default_color = default_color

    def series_color(self, index: int) -> str:
        return self.to_css(self.SERIES_PALETTE[index % len(self.SERIES_PALETTE)])

    # Tokens

    @staticmethod
    def parse(token: Any) -> Optional[np.ndarray]:
        """Retorna (r, g, b, a) do token, ou None se o token for desconhecido."""
        if not isinstance(token, str):
            return None
        match = CSS_RGBA.match(token)
        if match is not None:
            return np.array([float(channel) for channel in match.groups()])
        try:
            parsed = ImageColor.getrgb(token)
        except ValueError:
            return None
        alpha = parsed[3] / 255.0 if len(parsed) == 4 else 1.0
        return np.array([parsed[0], parsed[1], parsed[2], alpha], dtype=float)

    def validate_color(self, token: Optional[str], path: str) -> Optional[str]:
        if token is None:
            return None
        if self.parse(token) is None:
            return f"invalid {path}: {token}"
        return None

    def validate_explicit_colors(
        self, tokens: Optional[Sequence[str]], path: str, is_matrix: bool = False
    ) -> Optional[str]:
        """Valida uma lista (ou matriz) de tokens de cor explicitos."""
        if tokens is None:
            return None
        return validate_entries(iterate_entries(tokens, path, is_matrix), self.validate_color)

    def to_css(self, token: str) -> str:
        rgba = self.parse(token)
        if rgba is None:
            raise ValueError(f"Cor desconhecida: {token}")
        return rgba_to_css(rgba)

    def with_alpha(self, token: str, alpha: float) -> str:
        """Retorna o token com a opacidade multiplicada por ``alpha``."""
        rgba = self.parse(token)
        if rgba is None:
            raise ValueError(f"Cor desconhecida: {token}")
        rgba[3] = rgba[3] * alpha
        return rgba_to_css(rgba)

    # Configuracao

    @staticmethod
    def is_categorical(colors: "ColorsConfiguration") -> bool:
        return isinstance(colors.color_palette, CategoricalPairs)

    @staticmethod
    def is_log(colors: "ColorsConfiguration") -> bool:
        return colors.color_scale.log_regularization is not None

    def validate_palette(self, palette: Any, path: str) -> Optional[str]:
        """Valida a boa formacao de uma paleta (preset, paradas ou pares)."""
        if palette is None:
            return None

        if isinstance(palette, NamedPreset):
            if self._preset_name(palette.name) not in pc.named_colorscales():
                return f"invalid {path}: {palette.name}"
            return None

        if isinstance(palette, ContinuousStops):
            if len(palette.stops) == 0:
                return f"empty {path}"
            for index, (value, color) in enumerate(palette.stops):
                if not is_number(value):
                    return f"invalid {path}[{index}]: {value}"
                message = self.validate_color(color, f"{path}[{index}]")
                if message is not None:
                    return message
            distinct = sorted({value for value, _ in palette.stops})
            if len(distinct) < 2:
                return f"single {path} value: {distinct[0]}"
            return None

        if isinstance(palette, CategoricalPairs):
            if len(palette.pairs) == 0:
                return f"empty {path}"
            for index, (_, color) in enumerate(palette.pairs):
                message = self.validate_color(color, f"{path}[{index}]")
                if message is not None:
                    return message
            return None

        return f"invalid {path}: {palette}"

    def validate_configuration(self, colors: "ColorsConfiguration", path: str) -> Optional[str]:
        """
        Valida uma configuracao de cores.

        Ordem: cor fixa, paleta, regularizacao, combinacoes proibidas
        (categorica invertida, log invertida, categorica log), dominio log
        dos limites e das paradas, ordenacao dos limites.
        """
        scale = colors.color_scale
        palette_path = f"{path}.color_palette"
        scale_path = f"{path}.color_scale"
        return first_message(
            lambda: self.validate_color(colors.color, f"{path}.color"),
            lambda: self.validate_palette(colors.color_palette, palette_path),
            lambda: validate_is_non_negative(scale.log_regularization, f"{scale_path}.log_regularization"),
            lambda: (
                f"reversed categorical {palette_path}"
                if self.is_categorical(colors) and scale.reverse else None
            ),
            lambda: f"reversed log {scale_path}" if self.is_log(colors) and scale.reverse else None,
            lambda: (
                f"categorical {palette_path} specified for log {scale_path}"
                if self.is_categorical(colors) and self.is_log(colors) else None
            ),
            lambda: self._validate_log_value(colors, scale.minimum, f"{scale_path}.minimum"),
            lambda: self._validate_log_value(colors, scale.maximum, f"{scale_path}.maximum"),
            lambda: self._validate_log_stops(colors, palette_path),
            lambda: validate_is_range(
                scale.minimum, f"{scale_path}.minimum", scale.maximum, f"{scale_path}.maximum"
            ),
        )

    def validate_colors(
        self,
        values: Optional[Sequence[Any]],
        data_path: str,
        colors: "ColorsConfiguration",
        config_path: str,
        is_matrix: bool = False,
    ) -> Optional[str]:
        """
        Valida os valores de cor por elemento contra a configuracao de cores.

        Args:
            values: Tokens, chaves categoricas ou numeros (vetor ou matriz)
            data_path: Caminho do campo de dados (ex: "data.points_colors")
            colors: Configuracao de cores ja validada
            config_path: Caminho da configuracao (ex: "configuration.points")
            is_matrix: Se True, ``values`` e uma matriz (entradas ``[i,j]``)

        Returns:
            Mensagem do primeiro problema encontrado, ou None
        """
        if values is None:
            if colors.show_color_scale:
                return f"no {data_path} specified for {config_path}.show_color_scale"
            return None

        entries = list(iterate_entries(values, data_path, is_matrix))
        palette = colors.color_palette

        if isinstance(palette, CategoricalPairs):
            keys = {key for key, _ in palette.pairs}
            for entry_path, value in entries:
                if not isinstance(value, str):
                    if is_number(value):
                        return f"numeric {data_path} specified for categorical {config_path}.color_palette"
                    return f"invalid {entry_path}: {value}"
                if value not in keys:
                    return f"invalid {entry_path}: {value}"
            return None

        if self._is_explicit(values, colors, is_matrix):
            if colors.show_color_scale:
                return f"explicit {data_path} specified for {config_path}.show_color_scale"
            return validate_entries(entries, self.validate_color)

        regularization = colors.color_scale.log_regularization
        for entry_path, value in entries:
            if not is_number(value):
                return f"invalid {entry_path}: {value}"
            if regularization is not None and value + regularization <= 0:
                return f"log of non-positive {entry_path}: {value}"
        return None

    # Mapeamento

    def normalize(self, colors: "ColorsConfiguration", values: Sequence[float]) -> np.ndarray:
        array = np.asarray(values, dtype=float)
        if self.is_log(colors):
            return np.log10(array + colors.color_scale.log_regularization)
        return array

    def continuous_scale(
        self, colors: "ColorsConfiguration", internal_values: Sequence[float]
    ) -> ContinuousScale:
        """
        Resolve a escala continua para os valores (no dominio interno).

        O dominio [cmin, cmax] vem dos limites configurados; na falta deles,
        das paradas (``ContinuousStops``) ou dos proprios dados (presets).
        ``reverse`` inverte apenas as cores, nunca o dominio.
        """
        scale_config = colors.color_scale
        palette = colors.color_palette or NamedPreset(settings.DEFAULT_COLOR_PRESET)
        internal = np.asarray(internal_values, dtype=float)
        internal = internal[np.isfinite(internal)]

        positions = None
        if isinstance(palette, ContinuousStops):
            pairs = []
            seen = set()
            for value, color in sorted(palette.stops, key=lambda stop: stop[0]):
                if value not in seen:
                    seen.add(value)
                    pairs.append((value, color))
            stop_values = self.normalize(colors, [value for value, _ in pairs])
            rgba = np.array([self.parse(color) for _, color in pairs])
            data_low, data_high = float(stop_values[0]), float(stop_values[-1])
        else:
            positions, rgba = self._preset_table(palette.name)
            if internal.size > 0:
                data_low, data_high = float(internal.min()), float(internal.max())
            else:
                data_low, data_high = 0.0, 1.0

        cmin = data_low
        cmax = data_high
        if scale_config.minimum is not None:
            cmin = float(self.normalize(colors, [scale_config.minimum])[0])
        if scale_config.maximum is not None:
            cmax = float(self.normalize(colors, [scale_config.maximum])[0])
        if cmax == cmin:
            cmin, cmax = cmin - 0.5, cmax + 0.5
        elif cmax < cmin:
            if scale_config.maximum is None:
                cmax = cmin + 1.0
            else:
                cmin = cmax - 1.0

        if positions is not None:
            stop_values = cmin + positions * (cmax - cmin)

        if scale_config.reverse:
            rgba = rgba[::-1]

        return ContinuousScale(
            values=np.asarray(stop_values, dtype=float),
            rgba=np.asarray(rgba, dtype=float),
            cmin=cmin,
            cmax=cmax,
            is_log=self.is_log(colors),
        )

    def map_colors(
        self,
        values: Optional[Sequence[Any]],
        colors: "ColorsConfiguration",
        title: Optional[str] = None,
        is_matrix: bool = False,
    ) -> ColorMapping:
        """
        Mapeia valores (ja validados) para cores CSS.

        Args:
            values: Valores por elemento (None usa a cor fixa)
            colors: Configuracao de cores
            title: Titulo da legenda de cores
            is_matrix: Se True, ``values`` e achatada em ordem de linhas

        Returns:
            ColorMapping com as cores e o descritor de legenda (se pedido)
        """
        fixed = self.to_css(colors.color or self.default_color)
        if values is None:
            return ColorMapping(fixed=fixed)

        flat = [value for _, value in iterate_entries(values, "", is_matrix)]
        palette = colors.color_palette

        if isinstance(palette, CategoricalPairs):
            lookup = {}
            for key, color in palette.pairs:
                lookup.setdefault(key, self.to_css(color))
            mapped = [lookup[value] for value in flat]
            legend = None
            if colors.show_color_scale:
                used = set(flat)
                entries = []
                for key, _ in palette.pairs:
                    if key in used and key not in dict(entries):
                        entries.append((key, lookup[key]))
                legend = CategoricalLegend(title=title, entries=entries)
            return ColorMapping(fixed=fixed, colors=mapped, legend=legend)

        if self._is_explicit(values, colors, is_matrix):
            return ColorMapping(fixed=fixed, colors=[self.to_css(value) for value in flat])

        internal = self.normalize(colors, flat)
        scale = self.continuous_scale(colors, internal)
        mapped = [rgba_to_css(rgba) for rgba in scale(internal)] if internal.size else []
        legend = scale.legend(title) if colors.show_color_scale else None
        logger.debug(
            f"Escala continua: dominio [{scale.cmin:.4g}, {scale.cmax:.4g}], {len(mapped)} valores"
        )
        return ColorMapping(fixed=fixed, colors=mapped, legend=legend, scale=scale)

    # Auxiliares

    @staticmethod
    def _preset_name(name: str) -> str:
        base = name.lower()
        if base.endswith("_r"):
            base = base[:-2]
        return base

    @staticmethod
    def _preset_table(name: str) -> Tuple[np.ndarray, np.ndarray]:
        """Tabela embutida (posicoes em 0..1, cores RGBA) de um preset do Plotly."""
        table = pc.get_colorscale(name)
        positions = np.array([float(position) for position, _ in table])
        rgba = []
        for _, color in table:
            if color.startswith("#"):
                red, green, blue = pc.hex_to_rgb(color)
            else:
                red, green, blue = pc.unlabel_rgb(color)[:3]
            rgba.append([float(red), float(green), float(blue), 1.0])
        return positions, np.array(rgba)

    def _is_explicit(self, values: Sequence[Any], colors: "ColorsConfiguration", is_matrix: bool) -> bool:
        if colors.color_palette is not None:
            return False
        flat = [value for _, value in iterate_entries(values, "", is_matrix)]
        return len(flat) > 0 and all(isinstance(value, str) for value in flat)

    def _validate_log_value(
        self, colors: "ColorsConfiguration", value: Optional[float], path: str
    ) -> Optional[str]:
        regularization = colors.color_scale.log_regularization
        if value is None or regularization is None:
            return None
        if value + regularization <= 0:
            return f"log of non-positive {path}: {value}"
        return None

    def _validate_log_stops(self, colors: "ColorsConfiguration", path: str) -> Optional[str]:
        palette = colors.color_palette
        if not isinstance(palette, ContinuousStops):
            return None
        for index, (value, _) in enumerate(palette.stops):
            message = self._validate_log_value(colors, value, f"{path}[{index}]")
            if message is not None:
                return message
        return None
