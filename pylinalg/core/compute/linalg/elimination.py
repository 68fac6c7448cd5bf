"""
Gaussian and Gauss-Jordan elimination with partial pivoting.

Design principles:
    - The pivot in each column is the entry of largest modulus at or
      below the current row
    - Columns whose candidates are all below the near-zero threshold are
      skipped and zeroed, never divided by
    - Solving an augmented system [A | b] never pivots on the b column;
      an inconsistent or rank-deficient system raises instead of
      returning a partial answer
"""

from dataclasses import dataclass
from typing import Any
import warnings

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.linalg._ops import round_to_zero
from pylinalg.core.compute.linalg.substitution import back_substitution
from pylinalg.core.exceptions import SingularSystemError, StatusCode
from pylinalg.core.protocols import Numerical
from pylinalg.core.tolerances import DELTA, ILL_CONDITIONED_PIVOT_RATIO


@dataclass(frozen=True)
class EchelonForm:
    """
    Result of forward elimination.

    Attributes:
        matrix: The (reduced) row-echelon array
        pivot_columns: Column of the pivot in each non-zero row, in row order
        pivot_magnitudes: Modulus of each pivot before any normalization
        swaps: Number of row interchanges performed
    """
    matrix: NDArray[Any]
    pivot_columns: tuple[int, ...]
    pivot_magnitudes: tuple[float, ...]
    swaps: int

    @property
    def rank(self) -> int:
        return len(self.pivot_columns)


def row_echelon(
    A: NDArray[Any],
    numerical: Numerical,
    reduced: bool = False,
    pivot_limit: int | None = None,
    threshold: float = DELTA,
) -> EchelonForm:
    """
    Reduce A to (reduced) row-echelon form.

    Args:
        A: (m x n) array, not modified
        numerical: Scalar implementation
        reduced: Normalize pivots to one and clear above them as well
        pivot_limit: Only the first pivot_limit columns may hold pivots
        threshold: Candidates with modulus below this count as zero

    Returns:
        EchelonForm with a freshly allocated matrix
    """
    E = A.copy()
    m, n = E.shape
    limit = n if pivot_limit is None else pivot_limit

    pivot_columns: list[int] = []
    magnitudes: list[float] = []
    swaps = 0
    r = 0

    for c in range(limit):
        if r >= m:
            break
        candidates = numerical.abs(E[r:, c])
        p = r + int(np.argmax(candidates))
        if candidates[p - r] < threshold:
            E[r:, c] = numerical.zero_value
            continue

        if p != r:
            E[[r, p]] = E[[p, r]]
            swaps += 1

        magnitudes.append(float(candidates[p - r]))
        if reduced:
            E[r, :] = numerical.divide(E[r, :], E[r, c])

        targets = range(m) if reduced else range(r + 1, m)
        for i in targets:
            if i == r:
                continue
            factor = numerical.divide(E[i, c], E[r, c])
            E[i, :] = numerical.subtract(E[i, :], numerical.multiply(factor, E[r, :]))
            E[i, c] = numerical.zero_value

        pivot_columns.append(c)
        r += 1

    round_to_zero(E, numerical, threshold)
    return EchelonForm(
        matrix=E,
        pivot_columns=tuple(pivot_columns),
        pivot_magnitudes=tuple(magnitudes),
        swaps=swaps,
    )


def check_solvable(echelon: EchelonForm, n_unknowns: int, numerical: Numerical, threshold: float = DELTA) -> None:
    """
    Verify an eliminated augmented system has exactly one solution.

    Raises:
        SingularSystemError: UNSOLVABLE for an inconsistent row 0 = c,
            SINGULAR when some unknown has no pivot
    """
    E = echelon.matrix
    for i in range(echelon.rank, E.shape[0]):
        if numerical.abs(E[i, n_unknowns]) >= threshold:
            raise SingularSystemError(
                f"System is inconsistent: row {i} reduces to "
                f"0 = {numerical.to_string(E[i, n_unknowns])}",
                matrix_name='augmented matrix',
                pivot_index=i,
                pivot_value=float(numerical.abs(E[i, n_unknowns])),
                status_code=StatusCode.UNSOLVABLE,
            )

    if echelon.rank < n_unknowns:
        missing = next(c for c in range(n_unknowns) if c not in echelon.pivot_columns)
        raise SingularSystemError(
            f"System is singular: no non-zero pivot in column {missing} "
            f"({echelon.rank} pivots for {n_unknowns} unknowns)",
            matrix_name='coefficient matrix',
            pivot_index=missing,
            pivot_value=0.0,
            status_code=StatusCode.SINGULAR,
        )


def _warn_if_ill_conditioned(echelon: EchelonForm, stacklevel: int) -> None:
    if not echelon.pivot_magnitudes:
        return
    ratio = min(echelon.pivot_magnitudes) / max(echelon.pivot_magnitudes)
    if ratio < ILL_CONDITIONED_PIVOT_RATIO:
        # +1 for this helper's own frame
        warnings.warn(
            f"System is ill-conditioned: smallest/largest pivot ratio is {ratio:.3e}. "
            f"The computed solution may be inaccurate.",
            RuntimeWarning,
            stacklevel=stacklevel + 1,
        )


def _split_augmented(A: NDArray[Any]) -> int:
    n_unknowns = A.shape[1] - 1
    if n_unknowns < 1:
        raise SingularSystemError(
            f"An augmented system needs at least two columns, got {A.shape[1]}",
            matrix_name='augmented matrix',
            status_code=StatusCode.UNSOLVABLE,
        )
    return n_unknowns


def gaussian_elimination(
    A: NDArray[Any],
    numerical: Numerical,
    solve: bool = False,
    threshold: float = DELTA,
    stacklevel: int = 2,
) -> NDArray[Any]:
    """
    Row-echelon form, or the solution of the augmented system [A | b].

    Args:
        A: (m x n) array; with solve=True the last column is b
        numerical: Scalar implementation
        solve: Return the solution vector instead of the echelon form
        threshold: Near-zero threshold
        stacklevel: Passed to warnings.warn for the ill-conditioning
            warning; 2 points at the caller of this function

    Returns:
        (m x n) echelon array, or the length n-1 solution vector

    Raises:
        SingularSystemError: When solving a singular or inconsistent system
    """
    if not solve:
        return row_echelon(A, numerical, threshold=threshold).matrix

    n_unknowns = _split_augmented(A)
    echelon = row_echelon(A, numerical, pivot_limit=n_unknowns, threshold=threshold)
    check_solvable(echelon, n_unknowns, numerical, threshold)
    _warn_if_ill_conditioned(echelon, stacklevel)

    E = echelon.matrix
    return back_substitution(E[:n_unknowns, :n_unknowns], E[:n_unknowns, n_unknowns], numerical, threshold)


def gauss_jordan(
    A: NDArray[Any],
    numerical: Numerical,
    solve: bool = False,
    threshold: float = DELTA,
    stacklevel: int = 2,
) -> NDArray[Any]:
    """
    Reduced row-echelon form, or the solution of [A | b].

    With solve=True, after reduction the coefficient block is the identity
    and the last column holds the solution.
    """
    if not solve:
        return row_echelon(A, numerical, reduced=True, threshold=threshold).matrix

    n_unknowns = _split_augmented(A)
    echelon = row_echelon(A, numerical, reduced=True, pivot_limit=n_unknowns, threshold=threshold)
    check_solvable(echelon, n_unknowns, numerical, threshold)
    _warn_if_ill_conditioned(echelon, stacklevel)

    return echelon.matrix[:n_unknowns, n_unknowns].copy()


def invert_square(
    A: NDArray[Any],
    numerical: Numerical,
    threshold: float = DELTA,
    stacklevel: int = 2,
) -> NDArray[Any]:
    """
    Inverse of a square array via Gauss-Jordan on [A | I].

    Raises:
        SingularSystemError: If A is singular
    """
    n = A.shape[0]
    augmented = np.concatenate([A, np.eye(n, dtype=numerical.dtype)], axis=1)
    echelon = row_echelon(augmented, numerical, reduced=True, pivot_limit=n, threshold=threshold)
    if echelon.rank < n:
        missing = next(c for c in range(n) if c not in echelon.pivot_columns)
        raise SingularSystemError(
            f"Matrix is singular and cannot be inverted (no pivot in column {missing})",
            matrix_name='A',
            pivot_index=missing,
            pivot_value=0.0,
            status_code=StatusCode.SINGULAR,
        )
    _warn_if_ill_conditioned(echelon, stacklevel)
    return echelon.matrix[:, n:].copy()
