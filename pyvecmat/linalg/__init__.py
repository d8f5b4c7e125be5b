"""
Dense vector and matrix primitives.

Public API:
    Vector           - fixed-length immutable float64 vector
    Matrix           - fixed-shape row-major float64 matrix
    dot(a, b)        - dot product
    norm(a)          - Euclidean norm
    add(a, b)        - elementwise sum
    sub(a, b)        - elementwise difference
    scale(a, s)      - scalar multiple
    transpose(m)     - matrix transpose
    matmul(a, b)     - matrix product
"""

from pyvecmat.linalg.vector import Vector
from pyvecmat.linalg.matrix import Matrix
from pyvecmat.linalg.ops import (
    dot,
    norm,
    add,
    sub,
    scale,
    transpose,
    matmul,
)

__all__ = [
    "Vector",
    "Matrix",
    "dot",
    "norm",
    "add",
    "sub",
    "scale",
    "transpose",
    "matmul",
]
