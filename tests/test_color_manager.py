"""Unit tests for color tokens, palettes, scales and mapping."""

from __future__ import annotations

import pytest

from src.graph_engine.models.configurations import ColorsConfiguration, ColorScaleConfiguration
from src.graph_engine.models.primitives import CategoricalPairs, ContinuousStops, NamedPreset
from src.graph_engine.utils.color_manager import CategoricalLegend, ColorBarLegend, ColorManager

pytestmark = pytest.mark.unit

GRAYS = ContinuousStops([(0, "black"), (10, "white")])
FRUITS = CategoricalPairs([("apple", "red"), ("lime", "green")])


def test_tokens(colors: ColorManager) -> None:
    """Names and hex syntax resolve; unknown tokens are reported."""

    assert colors.to_css("red") == "rgb(255,0,0)"
    assert colors.to_css("#00ff00") == "rgb(0,255,0)"
    assert colors.to_css("#ff000080") == "rgba(255,0,0,0.502)"
    assert colors.validate_color("nope", "configuration.line.color") == "invalid configuration.line.color: nope"
    assert colors.validate_color(None, "configuration.line.color") is None


def test_with_alpha_accepts_its_own_output(colors: ColorManager) -> None:
    """Translucent CSS produced by the engine can be made more translucent."""

    half = colors.with_alpha("blue", 0.5)

    assert half == "rgba(0,0,255,0.5)"
    assert colors.with_alpha(half, 0.5) == "rgba(0,0,255,0.25)"


@pytest.mark.parametrize(
    ("configuration", "message"),
    [
        (
            ColorsConfiguration(color_palette=FRUITS, color_scale=ColorScaleConfiguration(reverse=True)),
            "reversed categorical configuration.points.color_palette",
        ),
        (
            ColorsConfiguration(color_scale=ColorScaleConfiguration(log_regularization=0, reverse=True)),
            "reversed log configuration.points.color_scale",
        ),
        (
            ColorsConfiguration(color_palette=FRUITS, color_scale=ColorScaleConfiguration(log_regularization=0)),
            "categorical configuration.points.color_palette specified for log configuration.points.color_scale",
        ),
        (
            ColorsConfiguration(color_palette=NamedPreset("NotAScale")),
            "invalid configuration.points.color_palette: NotAScale",
        ),
        (
            ColorsConfiguration(color_palette=ContinuousStops([(1, "red"), (1, "blue")])),
            "single configuration.points.color_palette value: 1",
        ),
        (
            ColorsConfiguration(color_palette=ContinuousStops([])),
            "empty configuration.points.color_palette",
        ),
        (
            ColorsConfiguration(color_scale=ColorScaleConfiguration(minimum=2, maximum=1)),
            "configuration.points.color_scale.maximum: 1\nis not larger than configuration.points.color_scale.minimum: 2",
        ),
        (
            ColorsConfiguration(
                color_palette=ContinuousStops([(0, "red"), (1, "blue")]),
                color_scale=ColorScaleConfiguration(log_regularization=0),
            ),
            "log of non-positive configuration.points.color_palette[0]: 0",
        ),
    ],
)
def test_configuration_conflicts(configuration: ColorsConfiguration, message: str) -> None:
    """Each invalid color configuration reports one specific message."""

    assert configuration.validate("configuration.points") == message


def test_valid_configurations() -> None:
    """Presets are matched case-insensitively and may be reversed with _r."""

    assert ColorsConfiguration(color_palette=NamedPreset("viridis_r")).validate("c") is None
    assert ColorsConfiguration(color_palette=GRAYS, show_color_scale=True).validate("c") is None


def test_validate_colors_against_configuration(colors: ColorManager) -> None:
    """Per-element colors must agree with the palette and the color scale request."""

    shown = ColorsConfiguration(show_color_scale=True)
    categorical = ColorsConfiguration(color_palette=FRUITS)

    assert colors.validate_colors(None, "data.points_colors", shown, "configuration.points") == (
        "no data.points_colors specified for configuration.points.show_color_scale"
    )
    assert colors.validate_colors(["red"], "data.points_colors", shown, "configuration.points") == (
        "explicit data.points_colors specified for configuration.points.show_color_scale"
    )
    assert colors.validate_colors([1, 2], "data.points_colors", categorical, "configuration.points") == (
        "numeric data.points_colors specified for categorical configuration.points.color_palette"
    )
    assert colors.validate_colors(["apple", "pear"], "data.points_colors", categorical, "configuration.points") == (
        "invalid data.points_colors[1]: pear"
    )
    assert colors.validate_colors(["red", "nope"], "data.points_colors", ColorsConfiguration(), "c") == (
        "invalid data.points_colors[1]: nope"
    )
    assert colors.validate_colors([[1, -1]], "data.points_colors", ColorsConfiguration(
        color_scale=ColorScaleConfiguration(log_regularization=0)
    ), "c", is_matrix=True) == "log of non-positive data.points_colors[0,1]: -1"


def test_continuous_mapping_interpolates_and_saturates(colors: ColorManager) -> None:
    """Values between stops are interpolated; values outside take the end colors."""

    mapping = colors.map_colors([0, 5, 10, 20], ColorsConfiguration(color_palette=GRAYS))

    assert mapping.colors == ["rgb(0,0,0)", "rgb(128,128,128)", "rgb(255,255,255)", "rgb(255,255,255)"]
    assert mapping.legend is None


def test_reverse_flips_colors_not_domain(colors: ColorManager) -> None:
    """A reversed scale keeps its domain and swaps the colors."""

    configuration = ColorsConfiguration(
        color_palette=GRAYS, color_scale=ColorScaleConfiguration(reverse=True), show_color_scale=True
    )

    mapping = colors.map_colors([0, 10], configuration, title="Gray")

    assert mapping.colors == ["rgb(255,255,255)", "rgb(0,0,0)"]
    assert isinstance(mapping.legend, ColorBarLegend)
    assert (mapping.legend.cmin, mapping.legend.cmax) == (0.0, 10.0)
    assert mapping.legend.title == "Gray"


def test_default_preset_spans_data(colors: ColorManager) -> None:
    """Without a palette numeric values use the default preset over the data range."""

    mapping = colors.map_colors([1, 2, 3], ColorsConfiguration())

    assert mapping.colors[0] == "rgb(68,1,84)"
    assert mapping.scale is not None
    assert (mapping.scale.cmin, mapping.scale.cmax) == (1.0, 3.0)


def test_log_scale_legend_ticks_at_powers_of_ten(colors: ColorManager) -> None:
    """Log color bars label their ticks with the original values."""

    configuration = ColorsConfiguration(
        color_scale=ColorScaleConfiguration(log_regularization=0), show_color_scale=True
    )

    mapping = colors.map_colors([1, 10, 100], configuration)

    assert mapping.legend.tickvals == [0.0, 1.0, 2.0]
    assert mapping.legend.ticktext == ["1", "10", "100"]


def test_categorical_mapping_and_legend(colors: ColorManager) -> None:
    """Categorical legends list the used keys in palette order."""

    configuration = ColorsConfiguration(color_palette=FRUITS, show_color_scale=True)

    mapping = colors.map_colors(["lime", "apple", "lime"], configuration, title="Fruit")

    assert mapping.colors == ["rgb(0,128,0)", "rgb(255,0,0)", "rgb(0,128,0)"]
    assert isinstance(mapping.legend, CategoricalLegend)
    assert mapping.legend.entries == [("apple", "rgb(255,0,0)"), ("lime", "rgb(0,128,0)")]


def test_explicit_and_fixed_colors(colors: ColorManager) -> None:
    """Explicit tokens are used as-is; no values means the fixed color."""

    explicit = colors.map_colors(["red", "#0000ff"], ColorsConfiguration())
    fixed = colors.map_colors(None, ColorsConfiguration(color="green"))

    assert explicit.colors == ["rgb(255,0,0)", "rgb(0,0,255)"]
    assert fixed.colors is None
    assert fixed.marker_color == "rgb(0,128,0)"
