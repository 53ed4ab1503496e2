"""
PyStructures: small, self-contained data structures for Python.

Submodules:
    matrix: Dense float64 matrix with elementwise and product arithmetic
    queues: Min-priority queue with linear-scan extraction
    core: Exceptions, validation and display configuration
"""

__version__ = "0.1.0"

from pystructures import matrix
from pystructures import queues
from pystructures.matrix import Matrix
from pystructures.queues import PriorityQueue
from pystructures.core.exceptions import (
    PyStructuresError,
    InvalidDimensionsError,
    DimensionMismatchError,
)

__all__ = [
    "__version__",
    "matrix",
    "queues",
    "Matrix",
    "PriorityQueue",
    "PyStructuresError",
    "InvalidDimensionsError",
    "DimensionMismatchError",
]
