"""
Matrix: dense, mutable, row-major 2D container of float64 values.

Storage is a private C-contiguous numpy array owned exclusively by the
instance. Dimensions are fixed at construction; the only mutation is
indexed element assignment. Arithmetic lives in matrix/operations.py and
is reachable through the operators defined here.
"""

from __future__ import annotations

import numbers
import sys
import warnings
from typing import Any, TextIO

import numpy as np
from numpy.typing import NDArray

from pystructures.core.config import DEFAULT, PrintOptions
from pystructures.core.exceptions import (
    InvalidDimensionsError,
    PyStructuresWarning,
    ValidationError,
)
from pystructures.core.validation import (
    check_dimension,
    check_index,
    check_numeric,
    check_rectangular,
)


def _check_real(value: Any, name: str) -> float:
    """Accept real scalars only; strings and complex numbers are rejected."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)


def _warn_nan(stacklevel: int) -> None:
    warnings.warn(
        "Matrix holds NaN; it will not compare equal to any matrix, "
        "including itself.",
        PyStructuresWarning,
        stacklevel=stacklevel + 1,
    )


class Matrix:
    """
    Dense 2D matrix of double-precision floats.

    Construction:
        Matrix(rows, columns)                 - filled with 0.0
        Matrix(rows, columns, initial_value)  - filled with initial_value
        Matrix.from_array(data)               - copied from rectangular rows

    Element access uses a (row, column) pair; indices outside the matrix
    raise IndexError and never wrap around:

        >>> m = Matrix(2, 3)
        >>> m[1, 2] = 4.5
        >>> m[1, 2]
        4.5
    """

    __slots__ = ('_data',)

    # Mutable container: equality is structural, hashing is unsupported.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, columns: int, initial_value: float = 0.0) -> None:
        n_rows = check_dimension(rows, "rows")
        n_cols = check_dimension(columns, "columns")
        value = _check_real(initial_value, "initial_value")
        self._data = np.full((n_rows, n_cols), value, dtype=np.float64)
        if self._data.size and np.isnan(value):
            _warn_nan(stacklevel=2)

    @classmethod
    def from_array(cls, data) -> Matrix:
        """
        Build a Matrix from rectangular data.

        Parameters
        ----------
        data : sequence of sequences or 2D numpy array
            Rows of numeric values. Every row must have the same length as
            the first one. The values are copied and stored as float64.
            Integers too large for int64 are accepted and rounded to the
            nearest double.

        Warns
        -----
        PyStructuresWarning
            If data contains NaN.

        Raises
        ------
        InvalidDimensionsError
            If data is empty, ragged or not two-dimensional.
        ValidationError
            If data contains non-numeric values.
        """
        check_rectangular(data, "data")
        array = check_numeric(data, "data")
        if array.ndim != 2:
            raise InvalidDimensionsError(
                f"data: expected rows of scalars, got {array.ndim}D data "
                f"with shape {array.shape}"
            )

        if np.any(np.isnan(array)):
            _warn_nan(stacklevel=2)

        return cls._from_storage(array)

    @classmethod
    def _from_storage(cls, storage: NDArray[np.float64]) -> Matrix:
        """Internal builder: adopt an already validated, unshared array."""
        matrix = cls.__new__(cls)
        matrix._data = storage
        return matrix

    # --- Dimensions ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return self.rows, self.columns

    # --- Element access ---

    def _locate(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                f"Matrix indices must be a (row, column) pair, got {key!r}"
            )
        row = check_index(key[0], self.rows, "row")
        column = check_index(key[1], self.columns, "column")
        return row, column

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, column = self._locate(key)
        return float(self._data[row, column])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, column = self._locate(key)
        number = _check_real(value, "value")
        if np.isnan(number):
            _warn_nan(stacklevel=2)
        self._data[row, column] = number

    def get(self, row: int, column: int) -> float:
        """Element at (row, column)."""
        return self[row, column]

    def set(self, row: int, column: int, value: float) -> None:
        """Assign value to the element at (row, column)."""
        self[row, column] = value

    # --- Conversion ---

    def to_array(self) -> NDArray[np.float64]:
        """Copy of the elements as a (rows, columns) float64 array."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        """Elements as nested Python lists, one list per row."""
        return self._data.tolist()

    def copy(self) -> Matrix:
        """Independent copy of this matrix."""
        return Matrix._from_storage(self._data.copy())

    # --- Operations ---

    def transpose(self) -> Matrix:
        """New (columns x rows) matrix with rows and columns swapped."""
        from pystructures.matrix.operations import transpose
        return transpose(self)

    @property
    def T(self) -> Matrix:
        """Transpose of this matrix."""
        return self.transpose()

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pystructures.matrix.operations import add
        return add(self, other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pystructures.matrix.operations import subtract
        return subtract(self, other)

    def __mul__(self, scalar: object) -> Matrix:
        # Matrix * Matrix is undefined; the product is spelled @.
        if isinstance(scalar, bool) or not isinstance(scalar, numbers.Real):
            return NotImplemented
        from pystructures.matrix.operations import scale
        return scale(self, scalar)

    __rmul__ = __mul__

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pystructures.matrix.operations import multiply
        return multiply(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pystructures.matrix.operations import equals
        return equals(self, other)

    # --- Display ---

    def _format_rows(self, options: PrintOptions | None) -> list[str]:
        options = options or DEFAULT
        return [
            options.separator.join(options.format_value(v) for v in row)
            for row in self._data.tolist()
        ]

    def to_string(self, options: PrintOptions | None = None) -> str:
        """Human-readable rendering, one line per row."""
        return "\n".join(self._format_rows(options))

    def display(
        self,
        stream: TextIO | None = None,
        options: PrintOptions | None = None,
    ) -> None:
        """Write each row to stream (default: standard output)."""
        stream = stream if stream is not None else sys.stdout
        for line in self._format_rows(options):
            print(line, file=stream)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, columns={self.columns})"
