"""
Tests for PyStructures exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyStructuresError)
    - Diagnostic attributes on InvalidDimensionsError, DimensionMismatchError
    - Default attribute values (None for optional attributes)
    - PyStructuresWarning is a UserWarning
"""

import pytest

from pystructures.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    InvalidDimensionsError,
    PyStructuresError,
    PyStructuresWarning,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyStructuresError."""

    def test_validation_error_is_pystructures_error(self):
        with pytest.raises(PyStructuresError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_invalid_dimensions_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise InvalidDimensionsError("ragged")

    def test_dimension_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise DimensionMismatchError("2x3 by 2x2")

    def test_mismatch_is_not_invalid_dimensions(self):
        """The two shape errors are siblings, not parent and child."""
        err = DimensionMismatchError("mismatch")
        assert not isinstance(err, InvalidDimensionsError)

    def test_index_error_is_outside_hierarchy(self):
        assert not issubclass(IndexError, PyStructuresError)

    def test_warning_is_user_warning(self):
        assert issubclass(PyStructuresWarning, UserWarning)


# ═══════════════════════════════════════════════════════════════════════
# InvalidDimensionsError
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidDimensionsError:
    """InvalidDimensionsError carries the offending row."""

    def test_all_attributes(self):
        err = InvalidDimensionsError(
            "data: row 1 has 1 columns, expected 2",
            row=1,
            expected_columns=2,
            actual_columns=1,
        )
        assert str(err) == "data: row 1 has 1 columns, expected 2"
        assert err.row == 1
        assert err.expected_columns == 2
        assert err.actual_columns == 1

    def test_defaults_are_none(self):
        err = InvalidDimensionsError("data: must contain at least one row")
        assert err.row is None
        assert err.expected_columns is None
        assert err.actual_columns is None


# ═══════════════════════════════════════════════════════════════════════
# DimensionMismatchError
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionMismatchError:
    """DimensionMismatchError carries both operand shapes."""

    def test_all_attributes(self):
        err = DimensionMismatchError(
            "multiply: left has 3 columns but right has 2 rows",
            operation="multiply",
            left_shape=(2, 3),
            right_shape=(2, 2),
        )
        assert "3 columns" in str(err)
        assert err.operation == "multiply"
        assert err.left_shape == (2, 3)
        assert err.right_shape == (2, 2)

    def test_defaults_are_none(self):
        err = DimensionMismatchError("mismatch")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None
