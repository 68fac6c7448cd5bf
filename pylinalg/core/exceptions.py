"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as typed attributes
    - Every exception has a stable numeric status code (StatusCode)
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from datetime import datetime, timezone
from enum import IntEnum
from typing import Any


class StatusCode(IntEnum):
    """
    Stable numeric codes for every failure kind.

    Grouped by category:
        6xx: vector validation and invalid arguments
        7xx: orthogonality / linear dependence
        8xx: matrix validation, dimensions, bounds and solvability
        9xx: scalar (Numerical) resolution
    """
    VECTOR_VALIDATION = 601
    VECTOR_DIMENSION = 602
    INVALID_ELEMENT = 603
    NOT_A_VECTOR = 604
    INVALID_ARGUMENT = 606
    ORIENTATION = 608

    LINEAR_DEPENDENCE = 704
    ZERO_VECTOR = 705

    OUT_OF_BOUNDS = 800
    MATRIX_RAGGED = 801
    DIMENSION_MISMATCH = 802
    MATRIX_NON_NUMERIC = 803
    NOT_A_MATRIX = 804
    SHAPE_MISMATCH = 805
    RESHAPE = 806
    MULTIPLY_DIMENSION = 807
    MATRIX_EMPTY = 808
    UNSOLVABLE = 814
    NOT_UPPER_TRIANGULAR = 815
    NOT_LOWER_TRIANGULAR = 816
    NOT_SQUARE = 817
    SINGULAR = 820

    UNSUPPORTED_SCALAR = 901


class PyLinalgError(Exception):
    """
    Base exception for all pylinalg errors.

    Attributes:
        status_code: Stable StatusCode member identifying the failure kind
        timestamp: UTC ISO-8601 time at which the error was raised
    """

    default_status: StatusCode = StatusCode.INVALID_ARGUMENT

    def __init__(self, message: str, status_code: StatusCode | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = StatusCode(
            status_code if status_code is not None else self.default_status
        )
        self.timestamp = datetime.now(timezone.utc).isoformat()

    @property
    def details(self) -> dict[str, Any]:
        """Typed context attributes of this error as a mapping."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        return {
            'name': type(self).__name__,
            'message': self.message,
            'status_code': int(self.status_code),
            'timestamp': self.timestamp,
            'details': self.details,
        }


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class VectorValidationError(ValidationError):
    """
    Vector elements do not form a row or a column vector.

    Attributes:
        index: Position of the offending entry, if known
        entry: The offending entry, if known
    """

    default_status = StatusCode.VECTOR_VALIDATION

    def __init__(
        self,
        message: str,
        index: int | None = None,
        entry: Any = None,
        status_code: StatusCode | None = None,
    ):
        super().__init__(message, status_code)
        self.index = index
        self.entry = entry

    @property
    def details(self) -> dict[str, Any]:
        return {'index': self.index, 'entry': self.entry}


class InvalidElementError(ValidationError):
    """
    A value cannot be stored in a vector of the current orientation.

    Attributes:
        element: The rejected value
    """

    default_status = StatusCode.INVALID_ELEMENT

    def __init__(self, message: str, element: Any = None):
        super().__init__(message)
        self.element = element

    @property
    def details(self) -> dict[str, Any]:
        return {'element': self.element}


class MatrixValidationError(ValidationError):
    """
    Matrix entries are empty, ragged or non-numeric.

    The status code distinguishes the three cases:
    MATRIX_EMPTY, MATRIX_RAGGED and MATRIX_NON_NUMERIC.

    Attributes:
        row: Row index of the offending entry, if known
        entry: The offending entry or row, if known
    """

    default_status = StatusCode.MATRIX_NON_NUMERIC

    def __init__(
        self,
        message: str,
        status_code: StatusCode | None = None,
        row: int | None = None,
        entry: Any = None,
    ):
        super().__init__(message, status_code)
        self.row = row
        self.entry = entry

    @property
    def details(self) -> dict[str, Any]:
        return {'row': self.row, 'entry': self.entry}


class DimensionMismatchError(ValidationError):
    """
    Operand shapes are incompatible for the requested operation.

    Attributes:
        expected: Expected shape or length
        actual: Shape or length that was supplied
    """

    default_status = StatusCode.DIMENSION_MISMATCH

    def __init__(
        self,
        message: str,
        expected: Any = None,
        actual: Any = None,
        status_code: StatusCode | None = None,
    ):
        super().__init__(message, status_code)
        self.expected = expected
        self.actual = actual

    @property
    def details(self) -> dict[str, Any]:
        return {'expected': self.expected, 'actual': self.actual}


class NotSquareError(DimensionMismatchError):
    """Operation requires a square matrix."""

    default_status = StatusCode.NOT_SQUARE


class InvalidArgumentError(ValidationError):
    """
    Argument has the wrong type or is out of its valid range.

    Attributes:
        name: Parameter name
        value: The rejected value
    """

    default_status = StatusCode.INVALID_ARGUMENT

    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: Any = None,
        status_code: StatusCode | None = None,
    ):
        super().__init__(message, status_code)
        self.name = name
        self.value = value

    @property
    def details(self) -> dict[str, Any]:
        return {'name': self.name, 'value': self.value}


class NotTriangularError(InvalidArgumentError):
    """Substitution was requested on a matrix of the wrong triangular form."""

    default_status = StatusCode.NOT_UPPER_TRIANGULAR


class OrientationError(InvalidArgumentError):
    """Orientation conversion requested on a matrix already in that orientation."""

    default_status = StatusCode.ORIENTATION


class IndexOutOfBoundsError(ValidationError):
    """
    Element, row or column access beyond the declared size.

    Attributes:
        row: Requested row index, if any
        column: Requested column index, if any
        shape: Shape of the container that was indexed
    """

    default_status = StatusCode.OUT_OF_BOUNDS

    def __init__(
        self,
        message: str,
        row: int | None = None,
        column: int | None = None,
        shape: str | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.column = column
        self.shape = shape

    @property
    def details(self) -> dict[str, Any]:
        return {'row': self.row, 'column': self.column, 'shape': self.shape}


class TypeMismatchError(ValidationError):
    """
    Argument is not an instance of the expected abstraction.

    Attributes:
        expected_type: Name of the expected type
        actual_type: Name of the type that was supplied
    """

    default_status = StatusCode.NOT_A_MATRIX

    def __init__(
        self,
        message: str,
        expected_type: str | None = None,
        actual_type: str | None = None,
        status_code: StatusCode | None = None,
    ):
        super().__init__(message, status_code)
        self.expected_type = expected_type
        self.actual_type = actual_type

    @property
    def details(self) -> dict[str, Any]:
        return {
            'expected_type': self.expected_type,
            'actual_type': self.actual_type,
        }


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """

    default_status = StatusCode.SINGULAR


class SingularSystemError(NumericalError):
    """
    System is singular, inconsistent or has a (near-)zero pivot.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Row/column at which the zero pivot was found
        pivot_value: Modulus of that pivot
    """

    default_status = StatusCode.UNSOLVABLE

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
        status_code: StatusCode | None = None,
    ):
        super().__init__(message, status_code)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value

    @property
    def details(self) -> dict[str, Any]:
        return {
            'matrix_name': self.matrix_name,
            'pivot_index': self.pivot_index,
            'pivot_value': self.pivot_value,
        }


class LinearDependenceError(NumericalError):
    """
    A vector is (numerically) zero or dependent on previous vectors.

    Raised by Gram-Schmidt when an orthogonalized column has a norm below
    the near-zero threshold, signalling the input is not full column rank.

    Attributes:
        column_index: Index of the dependent column, if any
        norm: Norm of the residual that fell below the threshold
        threshold: The near-zero threshold that was applied
    """

    default_status = StatusCode.LINEAR_DEPENDENCE

    def __init__(
        self,
        message: str,
        column_index: int | None = None,
        norm: float | None = None,
        threshold: float | None = None,
        status_code: StatusCode | None = None,
    ):
        super().__init__(message, status_code)
        self.column_index = column_index
        self.norm = norm
        self.threshold = threshold

    @property
    def details(self) -> dict[str, Any]:
        return {
            'column_index': self.column_index,
            'norm': self.norm,
            'threshold': self.threshold,
        }
