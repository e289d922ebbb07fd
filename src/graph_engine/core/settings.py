"""
Settings e configuracoes do Graph Engine.

Define constantes, diretorios e valores padrao usados na validacao e na
montagem dos graficos. Todos os valores podem ser sobrescritos por variaveis
de ambiente (ou por um arquivo .env na raiz do projeto).
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

# Raiz do projeto
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Diretorio de saida padrao para graficos renderizados com caminho relativo
OUTPUT_DIR = os.getenv(
    "GRAPH_ENGINE_OUTPUT_DIR",
    str(PROJECT_ROOT / "generated_graphs")
)

# Logging
LOG_LEVEL = os.getenv("GRAPH_ENGINE_LOG_LEVEL", "WARNING")
LOG_FILE: Optional[str] = os.getenv("GRAPH_ENGINE_LOG_FILE") or None

# Configuracoes de Plotly.js ("cdn", "inline", ou "directory")
PLOTLY_JS_MODE = os.getenv("GRAPH_ENGINE_JS_MODE", "cdn")

# Fator de escala para imagens estaticas (SVG/PNG via kaleido)
IMAGE_SCALE = float(os.getenv("GRAPH_ENGINE_IMAGE_SCALE", "1.0"))

# Configuracoes de estilo
FONT_FAMILY = os.getenv("GRAPH_ENGINE_FONT_FAMILY", "Arial, sans-serif")
FONT_SIZE = int(os.getenv("GRAPH_ENGINE_FONT_SIZE", "12"))

# Margens padrao
MARGIN_LEFT = int(os.getenv("GRAPH_ENGINE_MARGIN_LEFT", "80"))
MARGIN_RIGHT = int(os.getenv("GRAPH_ENGINE_MARGIN_RIGHT", "40"))
MARGIN_TOP = int(os.getenv("GRAPH_ENGINE_MARGIN_TOP", "60"))
MARGIN_BOTTOM = int(os.getenv("GRAPH_ENGINE_MARGIN_BOTTOM", "60"))

# Cores de fundo e de grade
PLOT_BGCOLOR = os.getenv("GRAPH_ENGINE_PLOT_BGCOLOR", "white")
PAPER_BGCOLOR = os.getenv("GRAPH_ENGINE_PAPER_BGCOLOR", "white")
GRID_COLOR = os.getenv("GRAPH_ENGINE_GRID_COLOR", "lightgray")

# Cores padrao de elementos
DEFAULT_COLOR = os.getenv("GRAPH_ENGINE_DEFAULT_COLOR", "#1f77b4")
DEFAULT_BAND_COLOR = os.getenv("GRAPH_ENGINE_DEFAULT_BAND_COLOR", "black")
DEFAULT_BAND_FILL_COLOR = os.getenv("GRAPH_ENGINE_DEFAULT_BAND_FILL_COLOR", "#00000020")
DEFAULT_EDGE_COLOR = os.getenv("GRAPH_ENGINE_DEFAULT_EDGE_COLOR", "darkgray")
DEFAULT_BORDER_COLOR = os.getenv("GRAPH_ENGINE_DEFAULT_BORDER_COLOR", "black")
DEFAULT_COLOR_PRESET = os.getenv("GRAPH_ENGINE_DEFAULT_COLOR_PRESET", "Viridis")

# Tamanhos padrao de marcadores (pixels)
DEFAULT_POINT_SIZE = float(os.getenv("GRAPH_ENGINE_DEFAULT_POINT_SIZE", "8"))
DEFAULT_BORDER_WIDTH = float(os.getenv("GRAPH_ENGINE_DEFAULT_BORDER_WIDTH", "1"))
DEFAULT_BAND_WIDTH = float(os.getenv("GRAPH_ENGINE_DEFAULT_BAND_WIDTH", "1"))
DEFAULT_SIZE_SMALLEST = float(os.getenv("GRAPH_ENGINE_SIZE_SMALLEST", "2"))
DEFAULT_SIZE_LARGEST = float(os.getenv("GRAPH_ENGINE_SIZE_LARGEST", "20"))

# Fracao do intervalo adicionada aos lados livres de cada eixo
AXIS_PADDING = float(os.getenv("GRAPH_ENGINE_AXIS_PADDING", "0.05"))

# Estatisticas de distribuicao
DENSITY_POINTS = int(os.getenv("GRAPH_ENGINE_DENSITY_POINTS", "200"))
WHISKER_IQR_FACTOR = float(os.getenv("GRAPH_ENGINE_WHISKER_IQR_FACTOR", "1.5"))

# Distancia horizontal (fracao do papel) entre barras de cor empilhadas
COLORBAR_SPACING = float(os.getenv("GRAPH_ENGINE_COLORBAR_SPACING", "0.15"))


def validate_settings() -> bool:
    """
    Valida todas as configuracoes do modulo.

    Returns:
        True se todas as validacoes passarem

    Raises:
        ValueError: Se alguma configuracao for invalida
        FileNotFoundError: Se OUTPUT_DIR nao puder ser criado
    """
    output_path = Path(OUTPUT_DIR)
    try:
        output_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileNotFoundError(
            f"Nao foi possivel criar diretorio de saida: {OUTPUT_DIR}"
        ) from e

    if PLOTLY_JS_MODE not in ("cdn", "inline", "directory"):
        raise ValueError(f"PLOTLY_JS_MODE invalido: {PLOTLY_JS_MODE}")

    if IMAGE_SCALE <= 0:
        raise ValueError(f"IMAGE_SCALE deve ser positivo: {IMAGE_SCALE}")

    margins = [MARGIN_LEFT, MARGIN_RIGHT, MARGIN_TOP, MARGIN_BOTTOM]
    if any(m < 0 for m in margins):
        raise ValueError(
            f"Margens devem ser positivas: L={MARGIN_LEFT}, R={MARGIN_RIGHT}, "
            f"T={MARGIN_TOP}, B={MARGIN_BOTTOM}"
        )

    if FONT_SIZE <= 0:
        raise ValueError(f"FONT_SIZE deve ser positivo: {FONT_SIZE}")

    if not 0 < DEFAULT_SIZE_SMALLEST < DEFAULT_SIZE_LARGEST:
        raise ValueError(
            f"Faixa de tamanhos invalida: {DEFAULT_SIZE_SMALLEST}..{DEFAULT_SIZE_LARGEST}"
        )

    if AXIS_PADDING < 0:
        raise ValueError(f"AXIS_PADDING nao pode ser negativo: {AXIS_PADDING}")

    if DENSITY_POINTS < 2:
        raise ValueError(f"DENSITY_POINTS deve ser pelo menos 2: {DENSITY_POINTS}")

    return True


def get_default_layout_config() -> dict:
    """
    Retorna configuracao de layout padrao para graficos Plotly.

    Returns:
        Dicionario com configuracoes de layout
    """
    return {
        "font": {
            "family": FONT_FAMILY,
            "size": FONT_SIZE
        },
        "margin": {
            "l": MARGIN_LEFT,
            "r": MARGIN_RIGHT,
            "t": MARGIN_TOP,
            "b": MARGIN_BOTTOM
        },
        "plot_bgcolor": PLOT_BGCOLOR,
        "paper_bgcolor": PAPER_BGCOLOR
    }
