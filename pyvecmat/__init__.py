"""
PyVecMat: dense vector and matrix primitives for Python.

A small numeric foundation: construction, element access, dot product,
norm, elementwise arithmetic, transpose and matrix multiplication over
float64 data. Not a full linear-algebra suite.

Submodules:
    linalg: Vector, Matrix and functional operations
    core: Exceptions, validation, tolerance tiers
"""

__version__ = "0.1.0"

from pyvecmat.core.exceptions import (
    PyVecMatError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    ShapeMismatchError,
    IndexOutOfBoundsError,
)
from pyvecmat.linalg import (
    Vector,
    Matrix,
    dot,
    norm,
    add,
    sub,
    scale,
    transpose,
    matmul,
)

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "dot",
    "norm",
    "add",
    "sub",
    "scale",
    "transpose",
    "matmul",
    "PyVecMatError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "ShapeMismatchError",
    "IndexOutOfBoundsError",
]
