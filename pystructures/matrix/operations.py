"""
Matrix arithmetic.

Every operation is pure: operands are never modified and each result is
backed by freshly allocated storage.

Public API:
    transpose(a)        - (columns x rows) matrix, out[j, i] = a[i, j]
    add(a, b)           - elementwise sum, shapes must match
    subtract(a, b)      - elementwise difference, shapes must match
    scale(a, scalar)    - elementwise product with a scalar
    multiply(a, b)      - matrix product, a.columns must equal b.rows
    equals(a, b)        - exact structural equality
"""

from __future__ import annotations

import numpy as np

from pystructures.core.validation import check_inner_dimensions, check_same_shape
from pystructures.matrix.design import Matrix, _check_real


def _check_matrix(value: object, name: str) -> None:
    if not isinstance(value, Matrix):
        raise TypeError(f"{name}: expected Matrix, got {type(value).__name__}")


def transpose(a: Matrix) -> Matrix:
    """Swap rows and columns. Always succeeds."""
    _check_matrix(a, "a")
    # copy() is C-ordered, so the result never shares a's buffer
    return Matrix._from_storage(a._data.T.copy())


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise sum of two matrices of identical shape.

    Raises:
        DimensionMismatchError: If a and b differ in rows or columns
    """
    _check_matrix(a, "a")
    _check_matrix(b, "b")
    check_same_shape(a.shape, b.shape, "add")
    return Matrix._from_storage(a._data + b._data)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise difference a - b of two matrices of identical shape.

    Raises:
        DimensionMismatchError: If a and b differ in rows or columns
    """
    _check_matrix(a, "a")
    _check_matrix(b, "b")
    check_same_shape(a.shape, b.shape, "subtract")
    return Matrix._from_storage(a._data - b._data)


def scale(a: Matrix, scalar: float) -> Matrix:
    """Multiply every element by scalar. Always succeeds."""
    _check_matrix(a, "a")
    factor = _check_real(scalar, "scalar")
    return Matrix._from_storage(a._data * factor)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product a @ b.

    Each element [i, j] is a running sum, starting from zero, of
    a[i, k] * b[k, j] over k = 0 .. a.columns - 1 in increasing order.
    The sum is accumulated one rank-1 update per k, so the rounding
    sequence is the same as the naive triple loop.

    Raises:
        DimensionMismatchError: If a.columns != b.rows

    Returns:
        New (a.rows x b.columns) matrix
    """
    _check_matrix(a, "a")
    _check_matrix(b, "b")
    check_inner_dimensions(a.shape, b.shape, "multiply")

    result = np.zeros((a.rows, b.columns), dtype=np.float64)
    for k in range(a.columns):
        result += np.outer(a._data[:, k], b._data[k, :])
    return Matrix._from_storage(result)


def equals(a: Matrix, b: Matrix) -> bool:
    """
    Exact structural equality.

    False when dimensions differ, even if the flattened contents match.
    Otherwise elements are compared with IEEE-754 ==, so NaN is never
    equal to anything.
    """
    _check_matrix(a, "a")
    _check_matrix(b, "b")
    if a.shape != b.shape:
        return False
    return bool(np.array_equal(a._data, b._data))
