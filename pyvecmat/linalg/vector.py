"""
Vector: fixed-length, immutable sequence of float64 scalars.

The backing buffer is an owned, read-only numpy array. Every operation
returns a new Vector (or a float) and never mutates its operands.
"""

from __future__ import annotations

import math
import numbers
import warnings
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmat.core.compute.tolerances import ToleranceTier, FP64, select_tolerance
from pyvecmat.core.validation import (
    check_array,
    check_1d,
    check_size,
    check_scalar,
    check_index,
    check_same_shape,
)
from pyvecmat.linalg import _kernels


class Vector:
    """
    Dense vector of double-precision scalars.

    Construction:
        Vector([1.0, 2.0, 3.0])
        Vector.filled(3, 0.0)

    The length is fixed at construction. Binary operations (dot, add, sub)
    require operands of equal length and raise DimensionMismatchError
    otherwise. Arguments named ``other`` accept a Vector or any 1D
    array-like.
    """

    __slots__ = ('_data',)

    # Defer numpy scalar/array arithmetic to our reflected operators
    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, data: ArrayLike | Vector):
        if isinstance(data, Vector):
            data = data._data
        array = check_array(data, 'data')
        check_1d(array, 'data')
        array.flags.writeable = False
        self._data = array

    @classmethod
    def _wrap(cls, array: NDArray[np.float64]) -> Vector:
        """Adopt a freshly built 1D float64 buffer without revalidating."""
        vector = cls.__new__(cls)
        array.flags.writeable = False
        vector._data = array
        return vector

    @classmethod
    def filled(cls, n: int, value: float) -> Vector:
        """Vector of length n with every element equal to value."""
        n = check_size(n, 'n')
        value = check_scalar(value, 'value')
        return cls._wrap(np.full(n, value, dtype=np.float64))

    def dim(self) -> int:
        """Number of elements."""
        return self._data.shape[0]

    def get(self, i: int) -> float:
        """
        Element at position i.

        Raises:
            IndexOutOfBoundsError: If i is outside [0, dim)
        """
        (i,) = check_index((i,), self._data.shape, 'Vector')
        return float(self._data[i])

    def dot(self, other: ArrayLike | Vector) -> float:
        """
        Dot product, accumulated in index order.

        Uses plain float64 summation; accumulated rounding error is the
        caller's concern.

        Raises:
            DimensionMismatchError: If the vectors differ in length
        """
        other = as_vector(other)
        check_same_shape(self._data.shape, other._data.shape, 'dot')
        return _kernels.dot(self._data, other._data)

    def norm(self) -> float:
        """
        Euclidean norm, sqrt(self . self).

        Always >= 0, NaN if any element is NaN. A sum of squares that
        overflows float64 returns inf with a warning.
        """
        result = math.sqrt(self.dot(self))
        if math.isinf(result) and bool(np.all(np.isfinite(self._data))):
            warnings.warn(
                f"norm overflowed float64 range for a vector of dim {self.dim()}",
                stacklevel=2,
            )
        return result

    def add(self, other: ArrayLike | Vector) -> Vector:
        """Elementwise sum as a new vector."""
        other = as_vector(other)
        check_same_shape(self._data.shape, other._data.shape, 'add')
        return Vector._wrap(self._data + other._data)

    def sub(self, other: ArrayLike | Vector) -> Vector:
        """Elementwise difference as a new vector."""
        other = as_vector(other)
        check_same_shape(self._data.shape, other._data.shape, 'sub')
        return Vector._wrap(self._data - other._data)

    def scale(self, s: float) -> Vector:
        """Every element multiplied by s, as a new vector."""
        s = check_scalar(s, 's')
        return Vector._wrap(self._data * s)

    def isclose(
        self,
        other: ArrayLike | Vector,
        *,
        tolerance: ToleranceTier | str = FP64,
    ) -> bool:
        """
        Elementwise comparison within a tolerance tier.

        Vectors of different length compare as False rather than raising.
        """
        tier = select_tolerance(tolerance)
        other = as_vector(other)
        if self._data.shape != other._data.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=tier.rtol, atol=tier.atol))

    def to_numpy(self) -> NDArray[np.float64]:
        """Writable copy of the elements."""
        return self._data.copy()

    def tolist(self) -> list[float]:
        return self._data.tolist()

    def __len__(self) -> int:
        return self.dim()

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __getitem__(self, i: int) -> float:
        return self.get(i)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return (
            self._data.shape == other._data.shape
            and bool(np.array_equal(self._data, other._data))
        )

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, s: Any) -> Vector:
        if isinstance(s, bool) or not isinstance(s, numbers.Real):
            return NotImplemented
        return self.scale(s)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return self.scale(-1.0)

    def __matmul__(self, other: Any) -> float:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()!r})"


def as_vector(value: ArrayLike | Vector, name: str = 'other') -> Vector:
    """Return value unchanged if it is a Vector, else build one from a 1D array-like."""
    if isinstance(value, Vector):
        return value
    array = check_array(value, name)
    check_1d(array, name)
    return Vector._wrap(array)
