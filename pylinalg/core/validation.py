"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent clamping of indices or coercion of dimensions
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    MatrixValidationError,
    NotSquareError,
    StatusCode,
    TypeMismatchError,
)
from pylinalg.core.protocols import Numerical


def is_integer(value: Any) -> bool:
    """True for Python/numpy integers, False for bool."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def check_integer(value: Any, name: str) -> int:
    """
    Verify an index-like argument is an integer.

    Args:
        value: Argument to check
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        InvalidArgumentError: If value is not an integer
    """
    if not is_integer(value):
        raise InvalidArgumentError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}",
            name=name,
            value=value,
        )
    return int(value)


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify a dimension argument is a positive integer.

    Args:
        value: Argument to check
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        InvalidArgumentError: If value is not an integer or is <= 0
    """
    value = check_integer(value, name)
    if value <= 0:
        raise InvalidArgumentError(
            f"{name}: must be a positive integer, got {value}",
            name=name,
            value=value,
        )
    return value


def check_non_negative_int(value: Any, name: str) -> int:
    """Verify an argument is an integer >= 0."""
    value = check_integer(value, name)
    if value < 0:
        raise InvalidArgumentError(
            f"{name}: must be a non-negative integer, got {value}",
            name=name,
            value=value,
        )
    return value


def check_index(index: Any, bound: int, name: str, shape: str | None = None) -> int:
    """
    Verify a 0-based index lies in [0, bound).

    Raises:
        InvalidArgumentError: If index is not an integer
        IndexOutOfBoundsError: If index < 0 or index >= bound
    """
    index = check_integer(index, name)
    if index < 0 or index >= bound:
        raise IndexOutOfBoundsError(
            f"{name}: index {index} out of bounds for size {bound}",
            row=index if name == 'row' else None,
            column=index if name == 'column' else None,
            shape=shape,
        )
    return index


def check_scalar(value: Any, numerical: Numerical, name: str) -> None:
    """
    Verify a value is a finite scalar of the given Numerical type.

    Raises:
        InvalidArgumentError: If value is not a scalar, or is NaN/Inf
    """
    if not numerical.is_scalar(value):
        raise InvalidArgumentError(
            f"{name}: expected a numeric scalar, got {type(value).__name__} {value!r}",
            name=name,
            value=value,
        )
    if not np.isfinite(value):
        raise InvalidArgumentError(
            f"{name}: must be finite, got {value!r}",
            name=name,
            value=value,
        )


def check_finite(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        MatrixValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise MatrixValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            status_code=StatusCode.MATRIX_NON_NUMERIC,
        )


def check_instance(
    value: Any,
    expected: type,
    name: str,
    status_code: StatusCode = StatusCode.NOT_A_MATRIX,
) -> None:
    """
    Verify an argument is an instance of the expected abstraction.

    Raises:
        TypeMismatchError: If value is not an instance of `expected`
    """
    if not isinstance(value, expected):
        raise TypeMismatchError(
            f"{name}: expected {expected.__name__}, got {type(value).__name__}",
            expected_type=expected.__name__,
            actual_type=type(value).__name__,
            status_code=status_code,
        )


def check_same_shape(a: Any, b: Any, operation: str) -> None:
    """
    Verify two matrices/vectors have the same shape.

    Raises:
        DimensionMismatchError: If a.shape != b.shape
    """
    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"Invalid dimensions for {operation}: {a.shape} vs {b.shape}",
            expected=a.shape,
            actual=b.shape,
            status_code=StatusCode.SHAPE_MISMATCH,
        )


def check_square(matrix: Any, operation: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        NotSquareError: If rows != columns
    """
    if matrix.rows != matrix.columns:
        raise NotSquareError(
            f"{operation} requires a square matrix, got shape {matrix.shape}",
            expected='square',
            actual=matrix.shape,
        )


def check_length(length: int, expected: int, name: str) -> None:
    """
    Verify a right-hand side or vector has the expected number of entries.

    Raises:
        DimensionMismatchError: If length != expected
    """
    if length != expected:
        raise DimensionMismatchError(
            f"{name}: expected {expected} entries, got {length}",
            expected=expected,
            actual=length,
        )
