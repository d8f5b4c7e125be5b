"""
Exception hierarchy for PyVecMat.

All exceptions inherit from PyVecMatError to allow catching any
library-specific error. Callers branch on the concrete class to tell a
bad shape from a bad index.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Raised before any operand is mutated
"""


class PyVecMatError(Exception):
    """Base exception for all PyVecMat errors."""
    pass


class ValidationError(PyVecMatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an input has the wrong number of dimensions, and the
    base class for the shape errors below.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Operands of a binary operation have incompatible shapes.

    Raised by dot, add and sub on vectors of different length, and by
    matmul when the left operand's column count differs from the right
    operand's row count.

    Attributes:
        left_shape: Shape of the left operand, e.g. (3,) or (2, 3)
        right_shape: Shape of the right operand
        operation: Name of the operation that failed, if known
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
        operation: str | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation


class ShapeMismatchError(DimensionError):
    """
    Flat data length does not match the requested matrix shape.

    Attributes:
        data_length: Number of elements supplied
        rows: Requested row count
        cols: Requested column count
    """

    def __init__(
        self,
        message: str,
        data_length: int | None = None,
        rows: int | None = None,
        cols: int | None = None
    ):
        super().__init__(message)
        self.data_length = data_length
        self.rows = rows
        self.cols = cols


class IndexOutOfBoundsError(ValidationError):
    """
    Element index lies outside the container's shape.

    Attributes:
        index: The offending index, (i,) for vectors or (r, c) for matrices
        shape: Shape of the container that was indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | None = None,
        shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape
