"""
Matrix factories.

All factories default to real scalars, accept an explicit Numerical, and
reject non-integer or non-positive dimensions with InvalidArgumentError.
"""

from typing import Any

import numpy as np

from pylinalg.core.exceptions import DimensionMismatchError, StatusCode
from pylinalg.core.protocols import Numerical
from pylinalg.core.validation import check_positive_int
from pylinalg.matrix.matrix import Matrix
from pylinalg.numerical import COMPLEX, REAL
from pylinalg.vector import Vector


def identity(n: int, numerical: Numerical | None = None) -> Matrix:
    """n x n identity matrix."""
    n = check_positive_int(n, 'n')
    numerical = numerical or REAL
    return Matrix._from_array(np.eye(n, dtype=numerical.dtype), numerical)


def zeros(rows: int, columns: int, numerical: Numerical | None = None) -> Matrix:
    rows = check_positive_int(rows, 'rows')
    columns = check_positive_int(columns, 'columns')
    numerical = numerical or REAL
    return Matrix._from_array(
        np.full((rows, columns), numerical.zero_value, dtype=numerical.dtype), numerical
    )


def ones(rows: int, columns: int, numerical: Numerical | None = None) -> Matrix:
    rows = check_positive_int(rows, 'rows')
    columns = check_positive_int(columns, 'columns')
    numerical = numerical or REAL
    return Matrix._from_array(
        np.full((rows, columns), numerical.one_value, dtype=numerical.dtype), numerical
    )


def random(
    rows: int,
    columns: int,
    seed: int | None = None,
    numerical: Numerical | None = None,
) -> Matrix:
    """
    Matrix with entries drawn uniformly from [0, 1).

    Complex matrices draw the real and imaginary parts independently.
    The same seed always produces the same matrix.

    Args:
        rows: Number of rows
        columns: Number of columns
        seed: Seed for np.random.default_rng, or None for fresh entropy
        numerical: Scalar implementation (default real)
    """
    rows = check_positive_int(rows, 'rows')
    columns = check_positive_int(columns, 'columns')
    numerical = numerical or REAL
    rng = np.random.default_rng(seed)
    values = rng.random((rows, columns))
    if numerical == COMPLEX:
        values = values + 1j * rng.random((rows, columns))
    return Matrix._from_array(values, numerical)


def reshape(values: Any, rows: int, columns: int, numerical: Numerical | None = None) -> Matrix:
    """
    Arrange values row-major into a rows x columns matrix.

    Args:
        values: Flat sequence, Vector, 1-D array, or a Matrix to re-shape

    Raises:
        InvalidArgumentError: If rows or columns is not a positive integer
        DimensionMismatchError: If the number of values != rows * columns
    """
    rows = check_positive_int(rows, 'rows')
    columns = check_positive_int(columns, 'columns')
    if isinstance(values, Matrix):
        if values.size != rows * columns:
            raise DimensionMismatchError(
                f"Cannot reshape {values.shape} into ({rows},{columns})",
                expected=rows * columns,
                actual=values.size,
                status_code=StatusCode.RESHAPE,
            )
        numerical = numerical or values.numerical
        return Matrix._from_array(values.to_numpy().reshape(rows, columns), numerical)
    if isinstance(values, Vector):
        numerical = numerical or values.numerical
        values = list(values)
    return Matrix(values, numerical, rows=rows, columns=columns)
