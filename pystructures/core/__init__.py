"""
Core infrastructure for PyStructures.

This module provides shared abstractions and utilities used by the
data-structure submodules (matrix, queues).

Key components:
    exceptions: Exception and warning hierarchy
    validation: Input validators
    config: Display presets
"""

from pystructures.core.config import PrintOptions, select_print_options
from pystructures.core.exceptions import (
    PyStructuresError,
    ValidationError,
    DimensionError,
    InvalidDimensionsError,
    DimensionMismatchError,
    PyStructuresWarning,
)

__all__ = [
    # Config
    "PrintOptions",
    "select_print_options",
    # Exceptions
    "PyStructuresError",
    "ValidationError",
    "DimensionError",
    "InvalidDimensionsError",
    "DimensionMismatchError",
    "PyStructuresWarning",
]
