"""
Matrix: fixed-shape dense array of float64 scalars, stored row-major.

Invariant: len(data) == rows * cols, checked at construction and kept by
every operation that builds a new matrix. set() is the only mutator.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmat.core.compute.tolerances import ToleranceTier, FP64, select_tolerance
from pyvecmat.core.exceptions import DimensionMismatchError, ShapeMismatchError, ValidationError
from pyvecmat.core.validation import (
    check_array,
    check_1d,
    check_2d,
    check_size,
    check_scalar,
    check_index,
)
from pyvecmat.linalg import _kernels


class Matrix:
    """
    Dense row-major matrix of double-precision scalars.

    Construction:
        Matrix([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], 2, 3)
        Matrix.filled(2, 3, 0.0)
        Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])

    The matrix owns a private copy of its data; element (r, c) lives at
    linear offset r * cols + c.
    """

    __slots__ = ('_data', '_rows', '_cols')

    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, data: ArrayLike, rows: int, cols: int):
        rows = check_size(rows, 'rows')
        cols = check_size(cols, 'cols')
        array = check_array(data, 'data')
        check_1d(array, 'data')

        if array.shape[0] != rows * cols:
            raise ShapeMismatchError(
                f"data length {array.shape[0]} does not match dimensions "
                f"{rows}x{cols} (expected {rows * cols})",
                data_length=array.shape[0],
                rows=rows,
                cols=cols,
            )

        self._data = array
        self._rows = rows
        self._cols = cols

    @classmethod
    def _wrap(cls, array: NDArray[np.float64], rows: int, cols: int) -> Matrix:
        """Adopt a freshly built row-major buffer without revalidating."""
        matrix = cls.__new__(cls)
        matrix._data = array
        matrix._rows = rows
        matrix._cols = cols
        return matrix

    @classmethod
    def filled(cls, rows: int, cols: int, value: float) -> Matrix:
        """rows x cols matrix with every element equal to value."""
        rows = check_size(rows, 'rows')
        cols = check_size(cols, 'cols')
        value = check_scalar(value, 'value')
        return cls._wrap(np.full(rows * cols, value, dtype=np.float64), rows, cols)

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2D array-like, e.g. a list of equal-length rows.

        Raises:
            DimensionError: If the input is not 2D
            ValidationError: If the input is ragged or non-numeric
        """
        return cls._from_2d(rows, 'rows')

    @classmethod
    def _from_2d(cls, value: ArrayLike, name: str) -> Matrix:
        array = check_array(value, name)
        check_2d(array, name)
        n_rows, n_cols = array.shape
        return cls._wrap(np.ascontiguousarray(array).reshape(-1), n_rows, n_cols)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def dim(self) -> tuple[int, int]:
        """Shape as (rows, cols)."""
        return (self._rows, self._cols)

    def get(self, r: int, c: int) -> float:
        """
        Element at row r, column c.

        Raises:
            IndexOutOfBoundsError: If r or c is outside the shape
        """
        r, c = check_index((r, c), self.dim(), 'Matrix')
        return float(self._data[r * self._cols + c])

    def set(self, r: int, c: int, v: float) -> None:
        """
        Overwrite the element at row r, column c in place.

        All arguments are validated before anything is written.

        Raises:
            IndexOutOfBoundsError: If r or c is outside the shape
        """
        r, c = check_index((r, c), self.dim(), 'Matrix')
        v = check_scalar(v, 'v')
        self._data[r * self._cols + c] = v

    def transpose(self) -> Matrix:
        """New (cols, rows) matrix with result[c][r] == self[r][c]."""
        flipped = self._data.reshape(self._rows, self._cols).T.flatten()
        return Matrix._wrap(flipped, self._cols, self._rows)

    def matmul(self, other: ArrayLike | Matrix) -> Matrix:
        """
        Matrix product self @ other.

        result[i][j] = sum over k of self[i][k] * other[k][j], accumulated
        for k = 0 .. self.cols - 1 with plain float64 addition.

        Raises:
            DimensionMismatchError: If self.cols != other.rows
        """
        other = as_matrix(other)
        if self._cols != other._rows:
            raise DimensionMismatchError(
                f"matmul dimensions mismatch: {self._rows}x{self._cols} @ "
                f"{other._rows}x{other._cols}",
                left_shape=self.dim(),
                right_shape=other.dim(),
                operation='matmul',
            )

        product = _kernels.matmul(
            self._data, self._rows, self._cols, other._data, other._cols
        )
        return Matrix._wrap(product, self._rows, other._cols)

    def isclose(
        self,
        other: ArrayLike | Matrix,
        *,
        tolerance: ToleranceTier | str = FP64,
    ) -> bool:
        """
        Elementwise comparison within a tolerance tier.

        Matrices of different shape compare as False rather than raising.
        """
        tier = select_tolerance(tolerance)
        other = as_matrix(other)
        if self.dim() != other.dim():
            return False
        return bool(np.allclose(self._data, other._data, rtol=tier.rtol, atol=tier.atol))

    def to_numpy(self) -> NDArray[np.float64]:
        """Writable (rows, cols) copy of the elements."""
        return self._data.reshape(self._rows, self._cols).copy()

    def tolist(self) -> list[list[float]]:
        return self._data.reshape(self._rows, self._cols).tolist()

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self.get(*_pair(key))

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self.set(*_pair(key), value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.dim() == other.dim()
            and bool(np.array_equal(self._data, other._data))
        )

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.matmul(other)

    def __repr__(self) -> str:
        return f"Matrix({self.tolist()!r}, rows={self._rows}, cols={self._cols})"


def _pair(key: Any) -> tuple[Any, Any]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise ValidationError(f"Matrix: expected a (row, col) index, got {key!r}")
    return key


def as_matrix(value: ArrayLike | Matrix, name: str = 'other') -> Matrix:
    """Return value unchanged if it is a Matrix, else build one from a 2D array-like."""
    if isinstance(value, Matrix):
        return value
    return Matrix._from_2d(value, name)
