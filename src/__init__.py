"""
Graph Engine - Motor declarativo de graficos sobre Plotly.

Architecture:
    src/
    ├── shared_lib/      # Logging e protocolo de validacao compartilhados
    └── graph_engine/    # Modelos, engines, generators e montagem de figuras
"""

__version__ = "1.0.0"

# Export main entry points for convenience
from src.graph_engine.figure_assembler import FigureAssembler, Graph, render
from src.shared_lib.utils.validations import ValidationError

__all__ = [
    "FigureAssembler",
    "Graph",
    "render",
    "ValidationError",
]
