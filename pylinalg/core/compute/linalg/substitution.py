"""
Triangular solvers.

Both kernels assume the caller has already checked shape and triangular
form; they only detect (near-)zero diagonal entries.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.linalg._ops import is_near_zero, total
from pylinalg.core.exceptions import SingularSystemError
from pylinalg.core.protocols import Numerical
from pylinalg.core.tolerances import DELTA


def _zero_pivot(
    i: int, value: Any, numerical: Numerical, matrix_name: str, threshold: float,
) -> SingularSystemError:
    return SingularSystemError(
        f"{matrix_name} has a zero diagonal entry at index {i} "
        f"(|{numerical.to_string(value)}| < {threshold:g}); the system has no unique solution",
        matrix_name=matrix_name,
        pivot_index=i,
        pivot_value=float(numerical.abs(value)),
    )


def back_substitution(
    U: NDArray[Any],
    b: NDArray[Any],
    numerical: Numerical,
    threshold: float = DELTA,
) -> NDArray[Any]:
    """
    Solve U x = b for upper triangular U, bottom row first.

    x[i] = (b[i] - sum_{j>i} U[i, j] * x[j]) / U[i, i]

    Args:
        U: (n x n) upper triangular array
        b: length-n right-hand side
        numerical: Scalar implementation
        threshold: Diagonal entries with modulus below this are zero

    Returns:
        Solution vector, length n

    Raises:
        SingularSystemError: If a diagonal entry is (near) zero
    """
    n = U.shape[0]
    x = np.full(n, numerical.zero_value, dtype=numerical.dtype)
    for i in range(n - 1, -1, -1):
        pivot = U[i, i]
        if is_near_zero(pivot, numerical, threshold):
            raise _zero_pivot(i, pivot, numerical, 'upper triangular matrix', threshold)
        accumulated = total(numerical.multiply(U[i, i + 1:], x[i + 1:]), numerical)
        x[i] = numerical.divide(numerical.subtract(b[i], accumulated), pivot)
    return x


def forward_substitution(
    L: NDArray[Any],
    b: NDArray[Any],
    numerical: Numerical,
    threshold: float = DELTA,
) -> NDArray[Any]:
    """
    Solve L x = b for lower triangular L, top row first.

    x[i] = (b[i] - sum_{j<i} L[i, j] * x[j]) / L[i, i]
    """
    n = L.shape[0]
    x = np.full(n, numerical.zero_value, dtype=numerical.dtype)
    for i in range(n):
        pivot = L[i, i]
        if is_near_zero(pivot, numerical, threshold):
            raise _zero_pivot(i, pivot, numerical, 'lower triangular matrix', threshold)
        accumulated = total(numerical.multiply(L[i, :i], x[:i]), numerical)
        x[i] = numerical.divide(numerical.subtract(b[i], accumulated), pivot)
    return x
