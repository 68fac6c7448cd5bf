"""
LU decomposition with partial pivoting: P A = L U.

L is unit lower triangular, U upper triangular and P a permutation
matrix. The number of row interchanges is reported so determinants can
recover the sign of the permutation.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import SingularSystemError, StatusCode
from pylinalg.core.protocols import Numerical
from pylinalg.core.tolerances import DELTA


def lu_decomposition(
    A: NDArray[Any],
    numerical: Numerical,
    threshold: float = DELTA,
) -> tuple[NDArray[Any], NDArray[Any], NDArray[Any], int]:
    """
    Doolittle elimination with row pivoting on the largest modulus.

    Args:
        A: (n x n) array, not modified
        numerical: Scalar implementation
        threshold: Pivot candidates with modulus below this count as zero

    Returns:
        (L, U, P, permutation_count)

    Raises:
        SingularSystemError: If a column has no usable pivot
    """
    n = A.shape[0]
    U = np.array(A, dtype=numerical.dtype)
    L = np.zeros((n, n), dtype=numerical.dtype)
    P = np.eye(n, dtype=numerical.dtype)
    permutation_count = 0

    for k in range(n):
        candidates = numerical.abs(U[k:, k])
        p = k + int(np.argmax(candidates))
        if candidates[p - k] < threshold:
            raise SingularSystemError(
                f"Matrix is singular: no non-zero pivot in column {k}; "
                f"LU decomposition cannot be performed",
                matrix_name='A',
                pivot_index=k,
                pivot_value=float(candidates[p - k]),
                status_code=StatusCode.SINGULAR,
            )

        if p != k:
            U[[k, p]] = U[[p, k]]
            P[[k, p]] = P[[p, k]]
            L[[k, p], :k] = L[[p, k], :k]
            permutation_count += 1

        for i in range(k + 1, n):
            factor = numerical.divide(U[i, k], U[k, k])
            L[i, k] = factor
            U[i, k:] = numerical.subtract(U[i, k:], numerical.multiply(factor, U[k, k:]))
            U[i, k] = numerical.zero_value

    L[np.diag_indices(n)] = numerical.one_value
    return L, U, P, permutation_count
