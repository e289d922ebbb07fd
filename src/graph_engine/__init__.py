"""
Graph Engine

Motor declarativo de graficos: recebe um objeto de dados e um objeto de
configuracao tipados, valida a consistencia entre eles, deriva escalas,
pilhas, estatisticas e faixas de referencia, e monta uma Figure Plotly.

Modulos:
    - core: Configuracoes do motor
    - models: Estruturas de dados e de configuracao (uma por tipo de grafico)
    - utils: Engines reutilizaveis (eixos, cores, tamanhos, faixas, pilhas, estatisticas)
    - generators: Geradores de traces e layout (um por tipo de grafico)
    - figure_assembler: Orquestracao e entrega ao renderizador
"""

from pathlib import Path

__version__ = "1.0.0"
__all__ = ["__version__"]

# Diretorio raiz do modulo
MODULE_ROOT = Path(__file__).parent
