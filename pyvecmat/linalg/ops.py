"""
Functional entry points for vector and matrix operations.

Each function accepts the value types or raw array-likes (1D for vectors,
2D for matrices) and delegates to the corresponding method:

    dot(a, b)        - dot product of two vectors
    norm(a)          - Euclidean norm of a vector
    add(a, b)        - elementwise vector sum
    sub(a, b)        - elementwise vector difference
    scale(a, s)      - vector times scalar
    transpose(m)     - matrix transpose
    matmul(a, b)     - matrix product
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pyvecmat.linalg.vector import Vector, as_vector
from pyvecmat.linalg.matrix import Matrix, as_matrix


VectorLike = ArrayLike | Vector
MatrixLike = ArrayLike | Matrix


def dot(a: VectorLike, b: VectorLike) -> float:
    """
    Dot product of two equal-length vectors.

    >>> dot([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
    32.0

    Raises:
        DimensionMismatchError: If the lengths differ
    """
    return as_vector(a, 'a').dot(as_vector(b, 'b'))


def norm(a: VectorLike) -> float:
    """
    Euclidean norm of a vector.

    >>> norm([3.0, 4.0])
    5.0
    """
    return as_vector(a, 'a').norm()


def add(a: VectorLike, b: VectorLike) -> Vector:
    """Elementwise sum of two equal-length vectors."""
    return as_vector(a, 'a').add(as_vector(b, 'b'))


def sub(a: VectorLike, b: VectorLike) -> Vector:
    """Elementwise difference of two equal-length vectors."""
    return as_vector(a, 'a').sub(as_vector(b, 'b'))


def scale(a: VectorLike, s: float) -> Vector:
    """Vector with every element multiplied by s."""
    return as_vector(a, 'a').scale(s)


def transpose(m: MatrixLike) -> Matrix:
    """
    Transpose of a matrix.

    >>> transpose([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]).tolist()
    [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]]
    """
    return as_matrix(m, 'm').transpose()


def matmul(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Matrix product a @ b.

    Raises:
        DimensionMismatchError: If a.cols != b.rows
    """
    return as_matrix(a, 'a').matmul(as_matrix(b, 'b'))
