"""
Shared Library - Common components used across the engine.

This module contains the logging setup and the validation protocol shared by
models and engines.
"""

__all__ = [
    "utils"
]
