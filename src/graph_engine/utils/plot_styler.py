"""
PlotStyler - Aplicacao do layout comum a todos os graficos.

Centraliza fonte, margens, dimensoes, fundo, titulo e eixos para garantir
consistencia visual entre todos os tipos de grafico.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

import plotly.graph_objects as go

from src.graph_engine.core.settings import get_default_layout_config
from src.graph_engine.utils.color_manager import ColorManager
from src.shared_lib.utils.logger import get_logger

if TYPE_CHECKING:
    from src.graph_engine.models.configurations import GraphConfiguration

logger = get_logger(__name__)


class PlotStyler:
    """
    Gerenciador de estilos visuais.

    Exemplo:
        >>> styler = PlotStyler()
        >>> styler.apply_layout(fig, configuration.graph, "Vendas", {"xaxis": {...}})
    """

    def __init__(self, colors: Optional[ColorManager] = None):
        self.colors = colors or ColorManager()
        logger.debug("PlotStyler inicializado")

    def apply_layout(
        self,
        fig: go.Figure,
        graph: "GraphConfiguration",
        title: Optional[str],
        layout: Dict[str, Any],
    ) -> go.Figure:
        """
        Aplica o layout padrao mais as opcoes especificas do grafico.

        Args:
            fig: Figura a estilizar
            graph: Opcoes gerais (dimensoes, margens, fundo)
            title: Titulo do grafico (None para nenhum)
            layout: Entradas especificas do tipo (``xaxis``, ``yaxis``, ``barmode``, ...)

        Returns:
            A propria figura, para encadeamento
        """
        config = get_default_layout_config()
        config["margin"] = {
            "l": graph.margins.left,
            "r": graph.margins.right,
            "t": graph.margins.top,
            "b": graph.margins.bottom,
        }
        config["plot_bgcolor"] = self.colors.to_css(graph.background_color)
        config["hovermode"] = "closest"

        if graph.width is not None:
            config["width"] = graph.width
        if graph.height is not None:
            config["height"] = graph.height
        if title:
            config["title"] = {"text": title, "x": 0.5, "xanchor": "center"}

        config.update(layout)
        fig.update_layout(**config)
        return fig
