"""Utilities module for shared helper functions."""

from .logger import *
from .validations import (
    ObjectWithValidation,
    ValidationError,
    assert_valid_object,
    validate_object,
)

__all__ = [
    "logger",
    "ObjectWithValidation",
    "ValidationError",
    "assert_valid_object",
    "validate_object",
]
