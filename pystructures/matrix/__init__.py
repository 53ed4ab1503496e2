"""
Dense matrix module.

Provides a fixed-size, mutable, row-major matrix of float64 values with
elementwise and linear-algebraic arithmetic.

Public API:
    Matrix(rows, columns, initial_value=0.0)  - uniform fill
    Matrix.from_array(data)                   - from rectangular rows
    transpose(a)    - a.T
    add(a, b)       - a + b
    subtract(a, b)  - a - b
    scale(a, s)     - a * s
    multiply(a, b)  - a @ b
    equals(a, b)    - a == b
"""

from pystructures.matrix.design import Matrix
from pystructures.matrix.operations import (
    transpose,
    add,
    subtract,
    scale,
    multiply,
    equals,
)

__all__ = [
    "Matrix",
    "transpose",
    "add",
    "subtract",
    "scale",
    "multiply",
    "equals",
]
