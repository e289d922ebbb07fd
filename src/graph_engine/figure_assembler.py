"""
Figure Assembler - Ponto de entrada do graph_engine.

Recebe um par (dados, configuracao) de um mesmo tipo de grafico, valida,
calcula as saidas das engines, monta traces e layout e devolve a figura
Plotly pronta. Opcionalmente entrega a figura ao renderizador para gravar
HTML, SVG ou PNG.

Fluxo:
    dados + configuracao
        -> GeneratorRouter (tipo de grafico)
        -> validacao (aborta na primeira falha, sem figura)
        -> engines (eixos, cores, tamanhos, pilhas, estatisticas, faixas)
        -> traces + layout + legenda combinada
        -> go.Figure (-> FileSaver)

Exemplo:
    >>> data = BarGraphData(bars_values=[1, 2, 3], bars_names=["a", "b", "c"])
    >>> fig = render(data, BarGraphConfiguration())
    >>> render(data, BarGraphConfiguration(), output="bars.html")
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import plotly.graph_objects as go

from src.graph_engine.core import settings
from src.graph_engine.generators.router import GeneratorRouter
from src.graph_engine.utils.file_saver import FileSaver
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


class FigureAssembler:
    """
    Monta figuras a partir de pares (dados, configuracao).

    O assembler nao guarda estado entre chamadas: a mesma entrada sempre
    produz a mesma figura.
    """

    def __init__(self, router: Optional[GeneratorRouter] = None):
        self.router = router or GeneratorRouter()

    def assemble(self, data: Any, configuration: Any) -> go.Figure:
        """
        Valida e monta a figura.

        Raises:
            TypeError: Se dados e configuracao nao forem do mesmo tipo de grafico
            ValidationError: Se dados ou configuracao forem invalidos
        """
        generator = self.router.route(data, configuration)
        return generator.generate(data, configuration)


def render(
    data: Any,
    configuration: Any,
    output: Optional[Union[str, Path]] = None,
    assembler: Optional[FigureAssembler] = None,
) -> go.Figure:
    """
    Gera a figura e, se ``output`` for informado, grava o arquivo.

    Args:
        data: Dados de um tipo de grafico (ex: BarGraphData)
        configuration: Configuracao do mesmo tipo (ex: BarGraphConfiguration)
        output: Caminho do arquivo (.html, .svg ou .png); caminhos relativos
                sao resolvidos contra OUTPUT_DIR
        assembler: FigureAssembler a reutilizar (um novo se None)

    Returns:
        A figura montada

    Raises:
        ValidationError: Se dados ou configuracao forem invalidos (nada e gravado)
        ValueError: Se a extensao de ``output`` nao for suportada
    """
    fig = (assembler or FigureAssembler()).assemble(data, configuration)

    if output is not None:
        path = Path(output)
        FileSaver.output_format(path)
        if not path.is_absolute():
            path = Path(settings.OUTPUT_DIR) / path
        FileSaver(path.parent).save(fig, path.name)

    return fig


@dataclass
class Graph:
    """Par (dados, configuracao) que sabe se desenhar."""

    data: Any
    configuration: Any

    def render(self, output: Optional[Union[str, Path]] = None) -> go.Figure:
        return render(self.data, self.configuration, output)
