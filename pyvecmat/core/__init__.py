"""
Core infrastructure for PyVecMat.

Shared abstractions used by the linalg value types.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerance tiers for numeric comparison
"""

from pyvecmat.core.exceptions import (
    PyVecMatError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    ShapeMismatchError,
    IndexOutOfBoundsError,
)

__all__ = [
    "PyVecMatError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "ShapeMismatchError",
    "IndexOutOfBoundsError",
]
