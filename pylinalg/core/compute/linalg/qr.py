"""
QR decomposition by modified Gram-Schmidt.

Orthogonalization uses the Hermitian inner product <q, v> = sum(conj(q) v),
so the same kernel is correct over real and complex scalars. Each new
column is projected against the already-normalized columns one at a time
(modified, not classical, Gram-Schmidt) which keeps Q orthonormal to
working precision for well-conditioned input.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.linalg._ops import dot, norm, round_to_zero
from pylinalg.core.compute.linalg.multiply import naive_multiply
from pylinalg.core.exceptions import LinearDependenceError
from pylinalg.core.protocols import Numerical
from pylinalg.core.tolerances import DELTA


def gram_schmidt(
    A: NDArray[Any],
    numerical: Numerical,
    threshold: float = DELTA,
) -> NDArray[Any]:
    """
    Orthonormalize the columns of A.

    Args:
        A: (m x n) array with m >= n, not modified
        numerical: Scalar implementation
        threshold: Residual norms below this mean linear dependence

    Returns:
        Q: (m x n) array with orthonormal columns spanning col(A)

    Raises:
        LinearDependenceError: If a column is zero or lies in the span of
            the previous columns
    """
    m, n = A.shape
    Q = np.empty((m, n), dtype=numerical.dtype)

    for j in range(n):
        v = np.array(A[:, j], dtype=numerical.dtype)
        for k in range(j):
            q = Q[:, k]
            v = numerical.subtract(v, numerical.multiply(q, dot(q, v, numerical)))

        residual = norm(v, numerical)
        if residual < threshold:
            raise LinearDependenceError(
                f"Column {j} is linearly dependent on the preceding columns "
                f"(residual norm {residual:.3e} < {threshold:g}); "
                f"QR requires full column rank",
                column_index=j,
                norm=residual,
                threshold=threshold,
            )
        Q[:, j] = numerical.divide(v, numerical.from_integral(residual))

    return Q


def qr_decomposition(
    A: NDArray[Any],
    numerical: Numerical,
    threshold: float = DELTA,
) -> tuple[NDArray[Any], NDArray[Any]]:
    """
    Thin QR factorization A = Q R.

    Args:
        A: (m x n) array with m >= n and full column rank
        numerical: Scalar implementation
        threshold: Near-zero threshold for dependence and rounding

    Returns:
        (Q, R): Q is (m x n) with orthonormal columns, R is (n x n) upper
        triangular with near-zero entries rounded to exactly zero
    """
    Q = gram_schmidt(A, numerical, threshold)
    R = naive_multiply(numerical.conjugate(Q).T, A, numerical)
    R[np.tril(np.ones(R.shape, dtype=bool), k=-1)] = numerical.zero_value
    round_to_zero(R, numerical, threshold)
    return Q, R
