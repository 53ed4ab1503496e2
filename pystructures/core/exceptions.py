"""
Exception and warning hierarchy for PyStructures.

All exceptions inherit from PyStructuresError to allow catching any
library-specific error. Out-of-bounds element access is a programming
error and raises the builtin IndexError instead.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyStructuresError(Exception):
    """Base exception for all PyStructures errors."""
    pass


class ValidationError(PyStructuresError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for the shape errors raised at construction time and by
    arithmetic between matrices.
    """
    pass


class InvalidDimensionsError(DimensionError):
    """
    A matrix cannot be built from the given shape or data.

    Raised when construction data is empty, ragged (rows of differing
    lengths), not two-dimensional, or when explicit dimensions are negative.

    Attributes:
        row: Index of the first offending row, if the data was ragged
        expected_columns: Column count defined by the first row
        actual_columns: Column count of the offending row
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        expected_columns: int | None = None,
        actual_columns: int | None = None
    ):
        super().__init__(message)
        self.row = row
        self.expected_columns = expected_columns
        self.actual_columns = actual_columns


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible for a matrix operation.

    Attributes:
        operation: Name of the operation that was attempted
        left_shape: (rows, columns) of the left operand
        right_shape: (rows, columns) of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class PyStructuresWarning(UserWarning):
    """Non-fatal issue detected while building or using a structure."""
    pass
