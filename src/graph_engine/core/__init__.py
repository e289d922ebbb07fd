"""
Core module - Configuracoes e settings do Graph Engine.
"""

from src.graph_engine.core.settings import (
    OUTPUT_DIR,
    DEFAULT_COLOR_PRESET,
    validate_settings,
    get_default_layout_config,
)

__all__ = [
    "OUTPUT_DIR",
    "DEFAULT_COLOR_PRESET",
    "validate_settings",
    "get_default_layout_config",
]
