"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, float64 coercion, rejection of bad dtypes
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_size / check_scalar: scalar argument checks
    - check_index: bounds checking with typed errors
    - check_same_shape: operand compatibility
"""

import numpy as np
import pytest

from pyvecmat.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    ValidationError,
)
from pyvecmat.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_index,
    check_ndim,
    check_same_shape,
    check_scalar,
    check_size,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float64(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted(self):
        arr = np.array([1.0, 2.0], dtype=np.float32)
        assert check_array(arr, "X").dtype == np.float64

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0, 3.0])
        result = check_array(arr, "X")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.shape == (2, 2)

    def test_nan_and_inf_allowed(self):
        result = check_array([np.nan, np.inf, -np.inf], "X")
        assert np.isnan(result[0])
        assert np.isinf(result[1])

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b", "c"], "X")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([True, False], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3.0], "X")

    def test_empty_array(self):
        result = check_array([], "X")
        assert result.shape == (0,)

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_ndim / check_1d / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:

    def test_correct_ndim_passes(self):
        check_ndim(np.zeros((2, 3)), 2, "X")

    def test_wrong_ndim_raises(self):
        with pytest.raises(DimensionError, match="expected 1D array, got 2D"):
            check_ndim(np.zeros((2, 3)), 1, "X")

    def test_1d(self):
        check_1d(np.zeros(4), "v")
        with pytest.raises(DimensionError):
            check_1d(np.zeros(()), "v")

    def test_2d(self):
        check_2d(np.zeros((0, 3)), "m")
        with pytest.raises(DimensionError, match="m:"):
            check_2d(np.zeros(3), "m")


# ═══════════════════════════════════════════════════════════════════════
# check_size / check_scalar
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSize:

    @pytest.mark.parametrize("value", [0, 1, 10, np.int64(3)])
    def test_accepts_non_negative_integers(self, value):
        assert check_size(value, "n") == int(value)
        assert type(check_size(value, "n")) is int

    def test_rejects_negative(self):
        with pytest.raises(ValidationError, match="non-negative"):
            check_size(-1, "n")

    @pytest.mark.parametrize("value", [2.0, "3", None, True])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValidationError, match="n:"):
            check_size(value, "n")


class TestCheckScalar:

    @pytest.mark.parametrize("value", [0, 2.5, -1, np.float32(1.5), np.int32(7)])
    def test_accepts_real_numbers(self, value):
        assert check_scalar(value, "s") == float(value)

    @pytest.mark.parametrize("value", ["2", None, [1.0], 1j, False])
    def test_rejects_non_real(self, value):
        with pytest.raises(ValidationError, match="real scalar"):
            check_scalar(value, "s")


# ═══════════════════════════════════════════════════════════════════════
# check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_in_bounds(self):
        assert check_index((1, 2), (2, 3), "M") == (1, 2)

    def test_numpy_integers_accepted(self):
        assert check_index((np.int64(0),), (1,), "V") == (0,)

    def test_row_out_of_bounds(self):
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            check_index((2, 0), (2, 3), "M")
        assert exc_info.value.index == (2, 0)
        assert exc_info.value.shape == (2, 3)

    def test_col_out_of_bounds(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_index((0, 3), (2, 3), "M")

    def test_negative_rejected(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_index((-1,), (3,), "V")

    def test_empty_shape_has_no_valid_index(self):
        with pytest.raises(IndexOutOfBoundsError):
            check_index((0,), (0,), "V")

    def test_non_integer_index(self):
        with pytest.raises(ValidationError, match="integers"):
            check_index((1.0, 0), (2, 2), "M")

    def test_wrong_arity(self):
        with pytest.raises(ValidationError, match="expected 2 indices"):
            check_index((1,), (2, 2), "M")


# ═══════════════════════════════════════════════════════════════════════
# check_same_shape
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSameShape:

    def test_equal_passes(self):
        check_same_shape((3,), (3,), "add")

    def test_mismatch_carries_shapes(self):
        with pytest.raises(DimensionMismatchError, match="dot") as exc_info:
            check_same_shape((3,), (2,), "dot")
        assert exc_info.value.left_shape == (3,)
        assert exc_info.value.right_shape == (2,)
        assert exc_info.value.operation == "dot"
