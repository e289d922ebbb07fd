"""
LegendManager - Combina todas as legendas pedidas em um unico bloco.

Ordem da legenda (via ``legendrank``): series nomeadas, entradas categoricas
de cores e, por ultimo, faixas de referencia. Barras de cor continuas ficam a
direita da area de plotagem, lado a lado na ordem em que foram pedidas; a
legenda de entradas fica a direita da ultima barra de cor.
"""

from typing import Any, Dict, List, Optional

import plotly.graph_objects as go

from src.graph_engine.core import settings
from src.graph_engine.utils.color_manager import ColorBarLegend, ColorLegend
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)

SERIES_LEGEND_RANK = 100
CATEGORICAL_LEGEND_RANK = 500

# Posicao (fracao do papel) da primeira barra de cor
COLORBAR_START = 1.02


def series_legend(name: Optional[str], index: int, show_legend: bool) -> Dict[str, Any]:
    """Propriedades de legenda de uma serie nomeada (uma entrada por grupo)."""
    return {
        "name": name if name is not None else f"series {index}",
        "showlegend": bool(show_legend and name is not None),
        "legendgroup": f"series_{index}",
        "legendrank": SERIES_LEGEND_RANK + index,
    }


class LegendManager:
    """
    Acumula descritores de legenda de cores e gera os traces que os exibem.

    Exemplo:
        >>> legends = LegendManager()
        >>> legends.add(mapping.legend)
        >>> fig = go.Figure(data=traces + legends.build_traces())
        >>> legends.apply(fig, title="Series")
    """

    def __init__(self, colorbar_spacing: float = settings.COLORBAR_SPACING):
        self.colorbar_spacing = colorbar_spacing
        self.color_legends: List[ColorLegend] = []

    def add(self, legend: Optional[ColorLegend]) -> None:
        if legend is not None:
            self.color_legends.append(legend)

    @property
    def colorbars_count(self) -> int:
        return sum(1 for legend in self.color_legends if isinstance(legend, ColorBarLegend))

    def build_traces(self) -> List[go.Scatter]:
        """Gera traces sem dados que carregam as barras de cor e as entradas categoricas."""
        traces = []
        colorbar_index = 0
        categorical_rank = CATEGORICAL_LEGEND_RANK

        for legend_index, legend in enumerate(self.color_legends):
            if isinstance(legend, ColorBarLegend):
                traces.append(self._colorbar_trace(legend, colorbar_index))
                colorbar_index += 1
                continue

            group = f"colors_{legend_index}"
            for entry_index, (key, color) in enumerate(legend.entries):
                extra = {}
                if entry_index == 0 and legend.title:
                    extra["legendgrouptitle"] = {"text": legend.title}
                traces.append(
                    go.Scatter(
                        x=[None],
                        y=[None],
                        mode="markers",
                        marker={"color": color, "size": 10},
                        name=str(key),
                        showlegend=True,
                        legendgroup=group,
                        legendrank=categorical_rank,
                        hoverinfo="skip",
                        **extra,
                    )
                )
                categorical_rank += 1

        return traces

    def apply(self, fig: go.Figure, title: Optional[str] = None) -> None:
        """Configura a legenda do layout conforme as entradas presentes na figura."""
        has_entries = any(trace.showlegend is True for trace in fig.data)
        legend: Dict[str, Any] = {
            "x": COLORBAR_START + self.colorbars_count * self.colorbar_spacing,
            "y": 1.0,
            "xanchor": "left",
            "yanchor": "top",
            "bgcolor": "rgba(255,255,255,0)",
        }
        if title:
            legend["title"] = {"text": title}

        fig.update_layout(showlegend=has_entries, legend=legend)
        logger.debug(
            f"Legenda aplicada: entradas={has_entries}, barras de cor={self.colorbars_count}"
        )

    def _colorbar_trace(self, legend: ColorBarLegend, index: int) -> go.Scatter:
        colorbar: Dict[str, Any] = {
            "x": COLORBAR_START + index * self.colorbar_spacing,
            "xanchor": "left",
            "len": 1.0,
            "thickness": 15,
        }
        if legend.title:
            colorbar["title"] = {"text": legend.title}
        if legend.tickvals is not None:
            colorbar["tickmode"] = "array"
            colorbar["tickvals"] = legend.tickvals
            colorbar["ticktext"] = legend.ticktext

        return go.Scatter(
            x=[None],
            y=[None],
            mode="markers",
            marker={
                "colorscale": legend.colorscale,
                "cmin": legend.cmin,
                "cmax": legend.cmax,
                "color": [legend.cmin],
                "showscale": True,
                "colorbar": colorbar,
            },
            showlegend=False,
            hoverinfo="skip",
        )
