"""
Input validation utilities for PyVecMat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except conversion of real data to float64)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyvecmat.core.exceptions import (
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like of real numbers. Rejects inputs that result in
    object dtype (mixed types, ragged nesting), non-numeric dtypes and
    complex data. The returned array is always a fresh copy, so callers
    own it outright.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, bool, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.iscomplexobj(result):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    return result.astype(np.float64)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_size(value: Any, name: str) -> int:
    """
    Verify value is a non-negative integer usable as a length or extent.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a real number and return it as float.

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(value).__name__}"
        )
    return float(value)


def check_index(
    index: tuple[Any, ...],
    shape: tuple[int, ...],
    name: str,
) -> tuple[int, ...]:
    """
    Verify every index component lies in [0, extent) for its axis.

    Negative indices are rejected rather than wrapped.

    Args:
        index: One index per axis
        shape: Extent of each axis
        name: Container name for error messages

    Returns:
        The index as a tuple of plain ints

    Raises:
        ValidationError: If index has the wrong arity or a non-integer component
        IndexOutOfBoundsError: If any component is outside its axis
    """
    if len(index) != len(shape):
        raise ValidationError(
            f"{name}: expected {len(shape)} indices, got {len(index)}"
        )

    for i in index:
        if isinstance(i, bool) or not isinstance(i, numbers.Integral):
            raise ValidationError(
                f"{name}: indices must be integers, got {type(i).__name__}"
            )

    checked = tuple(int(i) for i in index)
    for i, extent in zip(checked, shape):
        if not 0 <= i < extent:
            raise IndexOutOfBoundsError(
                f"{name}: index {checked} out of bounds for shape {shape}",
                index=checked,
                shape=shape,
            )
    return checked


def check_same_shape(
    left_shape: tuple[int, ...],
    right_shape: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify the two operands of an elementwise operation have equal shapes.

    Args:
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
        operation: Operation name for error messages

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left_shape != right_shape:
        raise DimensionMismatchError(
            f"{operation}: dimensions mismatch, {left_shape} vs {right_shape}",
            left_shape=left_shape,
            right_shape=right_shape,
            operation=operation,
        )
