"""
Input validation utilities for PyStructures.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except float64 conversion of numeric data)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pystructures.core.exceptions import (
    DimensionMismatchError,
    InvalidDimensionsError,
    ValidationError,
)


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a matrix dimension (row or column count).

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        InvalidDimensionsError: If value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise InvalidDimensionsError(f"{name}: expected an integer, got bool")
    try:
        size = operator.index(value)
    except TypeError as e:
        raise InvalidDimensionsError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e
    if size < 0:
        raise InvalidDimensionsError(f"{name}: must be non-negative, got {size}")
    return size


def check_rectangular(data: Any, name: str) -> tuple[int, int]:
    """
    Verify data is a non-empty, rectangular sequence of rows.

    The first row defines the column count; every other row must match it.
    A 2D numpy array is rectangular by construction and only checked for
    emptiness.

    Args:
        data: Sequence of row sequences, or a 2D array
        name: Parameter name for error messages

    Returns:
        (rows, columns) of the data

    Raises:
        InvalidDimensionsError: If data is empty, ragged or not 2D
    """
    if isinstance(data, np.ndarray):
        if data.ndim != 2:
            raise InvalidDimensionsError(
                f"{name}: expected 2D array, got {data.ndim}D with shape {data.shape}"
            )
        if data.shape[0] == 0:
            raise InvalidDimensionsError(f"{name}: must contain at least one row")
        return data.shape[0], data.shape[1]

    if not isinstance(data, Sequence) or isinstance(data, (str, bytes)):
        raise InvalidDimensionsError(
            f"{name}: expected a sequence of rows, got {type(data).__name__}"
        )
    if len(data) == 0:
        raise InvalidDimensionsError(f"{name}: must contain at least one row")

    lengths = []
    for i, row in enumerate(data):
        if not isinstance(row, (Sequence, np.ndarray)) or isinstance(row, (str, bytes)):
            raise InvalidDimensionsError(
                f"{name}: row {i} is not a sequence ({type(row).__name__})",
                row=i,
            )
        lengths.append(len(row))

    expected = lengths[0]
    for i, length in enumerate(lengths):
        if length != expected:
            raise InvalidDimensionsError(
                f"{name}: row {i} has {length} columns, expected {expected}",
                row=i,
                expected_columns=expected,
                actual_columns=length,
            )
    return len(lengths), expected


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def check_numeric(data: Any, name: str) -> NDArray[np.float64]:
    """
    Convert rectangular data to a fresh float64 array.

    Args:
        data: Rectangular array-like (already validated for shape)
        name: Parameter name for error messages

    Returns:
        C-contiguous float64 copy of the data

    Raises:
        ValidationError: If the data is not numeric
    """
    try:
        result = np.array(data)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        # Python ints beyond int64 land here; they are still real numbers
        if not all(_is_real(v) for v in result.flat):
            raise ValidationError(
                f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
            )
        try:
            result = np.array(data, dtype=np.float64)
        except (ValueError, TypeError, OverflowError) as e:
            raise ValidationError(f"{name}: cannot convert to float64: {e}") from e

    # Reject non-numeric dtypes (strings, bytes, bool, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return np.ascontiguousarray(result, dtype=np.float64)


def check_index(index: Any, size: int, name: str) -> int:
    """
    Validate a row or column index against its dimension.

    Negative indices are rejected rather than wrapped around.

    Args:
        index: Candidate index
        size: Length of the indexed dimension
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        TypeError: If index is not an integer
        IndexError: If index is outside [0, size)
    """
    if isinstance(index, bool):
        raise TypeError(f"{name}: index must be an integer, got bool")
    try:
        i = operator.index(index)
    except TypeError as e:
        raise TypeError(
            f"{name}: index must be an integer, got {type(index).__name__}"
        ) from e
    if not 0 <= i < size:
        raise IndexError(f"{name}: index {i} out of bounds for size {size}")
    return i


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes (elementwise operations).

    Raises:
        DimensionMismatchError: If shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: shapes {left[0]}x{left[1]} and {right[0]}x{right[1]} "
            f"must match",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify left columns equal right rows (matrix product).

    Raises:
        DimensionMismatchError: If inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: left has {left[1]} columns but right has {right[0]} rows "
            f"({left[0]}x{left[1]} by {right[0]}x{right[1]})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )
