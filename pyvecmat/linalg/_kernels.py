"""
Index-ordered reduction kernels.

Reductions are accumulated left to right with plain float64 addition:
no pairwise summation, no blocking, no BLAS. numpy's dot/matmul may
reorder the sum and are not used here.

Elementwise operations need no ordering and use numpy directly in the
value types.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def dot(x: NDArray[np.float64], y: NDArray[np.float64]) -> float:
    """
    Sum of x[i] * y[i] for i = 0 .. n-1, in index order.

    Caller guarantees len(x) == len(y). Empty inputs give 0.0.
    """
    total = 0.0
    for a, b in zip(x.tolist(), y.tolist()):
        total += a * b
    return total


def matmul(
    a: NDArray[np.float64],
    a_rows: int,
    a_cols: int,
    b: NDArray[np.float64],
    b_cols: int,
) -> NDArray[np.float64]:
    """
    Triple-loop product of two row-major buffers.

    Computes C = A @ B where A is (a_rows, a_cols) and B is (a_cols, b_cols),
    with C[i, j] = sum_k A[i, k] * B[k, j] accumulated for k = 0 .. a_cols-1.

    Args:
        a: Row-major buffer of A, length a_rows * a_cols
        a_rows: Rows of A
        a_cols: Columns of A, equal to the rows of B
        b: Row-major buffer of B, length a_cols * b_cols
        b_cols: Columns of B

    Returns:
        Row-major buffer of C, length a_rows * b_cols
    """
    lhs = a.tolist()
    rhs = b.tolist()
    out = np.zeros(a_rows * b_cols, dtype=np.float64)

    for i in range(a_rows):
        row = i * a_cols
        for j in range(b_cols):
            total = 0.0
            for k in range(a_cols):
                total += lhs[row + k] * rhs[k * b_cols + j]
            out[i * b_cols + j] = total

    return out
