"""
Validation protocol for data and configuration objects.

An object reports why it is invalid by returning a message from
``validate(path)``, or ``None`` when it is valid. Composite objects validate
their nested fields in a fixed order and return the first message found, so
every failure is described by exactly one message.

The ``validate_*`` helpers below produce the standard message wording, with
fields addressed by dotted paths (``configuration.graph.width``), vector
entries by ``[i]`` and matrix entries by ``[i,j]`` (zero-based).
"""

import logging
from numbers import Real
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Exception raised when a data or configuration object is invalid."""

    def __init__(self, message: str, field: Optional[str] = None):
        """
        Initialize validation error.

        Args:
            message: Error message, used verbatim as the exception text
            field: Dotted path of the field that caused the error (if known)
        """
        self.message = message
        self.field = field
        super().__init__(message)


class ObjectWithValidation:
    """Base class for objects that can describe why they are invalid."""

    def validate(self, path: str) -> Optional[str]:
        """
        Return a message describing the first problem found, or None.

        Args:
            path: Dotted path of this object inside the caller's structure
        """
        return None


def validate_object(obj: Optional[ObjectWithValidation], path: str) -> Optional[str]:
    """Validate ``obj`` (if any) under ``path``."""
    if obj is None:
        return None
    return obj.validate(path)


def assert_valid_object(obj: Optional[ObjectWithValidation], path: str) -> None:
    """
    Raise a ValidationError if ``obj`` is invalid.

    Raises:
        ValidationError: With the exact message returned by ``obj.validate``
    """
    message = validate_object(obj, path)
    if message is not None:
        logger.debug(f"Invalid {path}: {message!r}")
        raise ValidationError(message, field=path)


def first_message(*checks: Callable[[], Optional[str]]) -> Optional[str]:
    """Run ``checks`` in order and return the first message, stopping there."""
    for check in checks:
        message = check()
        if message is not None:
            return message
    return None


def is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_is_positive(value: Optional[float], path: str) -> Optional[str]:
    if value is not None and value <= 0:
        return f"non-positive {path}: {value}"
    return None


def validate_is_non_negative(value: Optional[float], path: str) -> Optional[str]:
    if value is not None and value < 0:
        return f"negative {path}: {value}"
    return None


def validate_is_less_than_one(value: Optional[float], path: str) -> Optional[str]:
    if value is not None and value >= 1:
        return f"too-large {path}: {value}"
    return None


def validate_is_range(
    minimum: Optional[float],
    minimum_path: str,
    maximum: Optional[float],
    maximum_path: str,
) -> Optional[str]:
    """Check ``maximum > minimum`` when both bounds are given."""
    if minimum is not None and maximum is not None and maximum <= minimum:
        return (
            f"{maximum_path}: {maximum}\n"
            f"is not larger than {minimum_path}: {minimum}"
        )
    return None


def validate_is_not_empty(values: Optional[Sequence[Any]], path: str) -> Optional[str]:
    if values is not None and len(values) == 0:
        return f"empty {path}"
    return None


def validate_has_at_least(values: Sequence[Any], path: str, count: int) -> Optional[str]:
    if len(values) < count:
        return f"too few {path}: {len(values)}"
    return None


def validate_vector_length(
    values: Optional[Sequence[Any]],
    path: str,
    expected_length: int,
    expected_path: str,
) -> Optional[str]:
    """Check that a parallel vector has the same length as its primary vector."""
    if values is not None and len(values) != expected_length:
        return (
            f"the number of {path}: {len(values)}\n"
            f"is different from the number of {expected_path}: {expected_length}"
        )
    return None


def matrix_shape(values: Sequence[Sequence[Any]]) -> Tuple[int, int]:
    """Return ``(rows, columns)`` of a rectangular nested sequence."""
    rows = len(values)
    columns = len(values[0]) if rows > 0 else 0
    return rows, columns


def validate_is_rectangular(values: Optional[Sequence[Sequence[Any]]], path: str) -> Optional[str]:
    if values is None or len(values) == 0:
        return None
    columns = len(values[0])
    for row_index, row in enumerate(values):
        if len(row) != columns:
            return (
                f"the number of {path}[{row_index}]: {len(row)}\n"
                f"is different from the number of {path}[0]: {columns}"
            )
    return None


def validate_matrix_size(
    values: Optional[Sequence[Sequence[Any]]],
    path: str,
    expected_shape: Tuple[int, int],
    expected_path: str,
) -> Optional[str]:
    """Check that a parallel matrix has the same shape as its primary matrix."""
    if values is None:
        return None
    message = validate_is_rectangular(values, path)
    if message is not None:
        return message
    shape = matrix_shape(values)
    if shape != tuple(expected_shape):
        return (
            f"the shape of {path}: ({shape[0]}, {shape[1]})\n"
            f"is different from the shape of {expected_path}: "
            f"({expected_shape[0]}, {expected_shape[1]})"
        )
    return None


def validate_at_least_one(flags: Sequence[Tuple[str, bool]]) -> Optional[str]:
    """Require at least one of the ``(path, flag)`` pairs to be set."""
    if not any(flag for _, flag in flags):
        return "must specify at least one of: " + ", ".join(path for path, _ in flags)
    return None


def validate_not_both(first: Tuple[str, bool], second: Tuple[str, bool]) -> Optional[str]:
    if first[1] and second[1]:
        return f"must not specify both of: {first[0]}, {second[0]}"
    return None


def iterate_entries(
    values: Sequence[Any], path: str, is_matrix: bool = False
) -> Iterator[Tuple[str, Any]]:
    """
    Yield ``(entry_path, value)`` for every entry of a vector or matrix.

    Matrix entries are addressed as ``path[i,j]`` in row-major order.
    """
    if is_matrix:
        for row_index, row in enumerate(values):
            for column_index, value in enumerate(row):
                yield f"{path}[{row_index},{column_index}]", value
    else:
        for index, value in enumerate(values):
            yield f"{path}[{index}]", value


def iterate_nested_entries(values: Iterable[Sequence[Any]], path: str) -> Iterator[Tuple[str, Any]]:
    """Yield ``(entry_path, value)`` for a vector of vectors, as ``path[i][j]``."""
    for outer_index, inner in enumerate(values):
        for inner_index, value in enumerate(inner):
            yield f"{path}[{outer_index}][{inner_index}]", value


def validate_entries(
    entries: Iterable[Tuple[str, Any]],
    validate_entry: Callable[[Any, str], Optional[str]],
) -> Optional[str]:
    """Apply ``validate_entry(value, entry_path)`` to entries until one fails."""
    for entry_path, value in entries:
        message = validate_entry(value, entry_path)
        if message is not None:
            return message
    return None


__all__ = [
    "ValidationError",
    "ObjectWithValidation",
    "validate_object",
    "assert_valid_object",
    "first_message",
    "is_number",
    "validate_is_positive",
    "validate_is_non_negative",
    "validate_is_less_than_one",
    "validate_is_range",
    "validate_is_not_empty",
    "validate_has_at_least",
    "validate_vector_length",
    "matrix_shape",
    "validate_is_rectangular",
    "validate_matrix_size",
    "validate_at_least_one",
    "validate_not_both",
    "iterate_entries",
    "iterate_nested_entries",
    "validate_entries",
]
