"""
Result containers for Matrix factorizations.

Immutable (frozen=True) so a factorization cannot be edited after the
fact; the Matrix objects inside are fresh copies owned by the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pylinalg.core.tolerances import ILL_CONDITIONED_PIVOT_RATIO, ToleranceTier, select_tolerance

if TYPE_CHECKING:
    from pylinalg.matrix.matrix import Matrix


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition A = Q R.

    Attributes:
        Q: (m x n) matrix with orthonormal columns
        R: (n x n) upper triangular matrix
        rank: Number of independent columns (always n; dependent input raises)
    """
    Q: Matrix
    R: Matrix
    rank: int

    def reconstruct(self) -> Matrix:
        """Q R, which equals the decomposed matrix up to roundoff."""
        return self.Q.naive_multiply(self.R)

    def matches(self, A: Matrix, tolerance: ToleranceTier | None = None) -> bool:
        """
        Whether Q R reproduces A within tolerance.

        Without an explicit tier, the roundoff tier is used when the
        diagonal of R spans more than ILL_CONDITIONED_PIVOT_RATIO, the
        exact tier otherwise.
        """
        tier = tolerance or select_tolerance(_is_ill_conditioned(self.R))
        return _allclose(self.reconstruct(), A, tier)


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition with partial pivoting, P A = L U.

    Attributes:
        L: Unit lower triangular matrix
        U: Upper triangular matrix
        P: Permutation matrix
        permutation_count: Number of row interchanges in P
    """
    L: Matrix
    U: Matrix
    P: Matrix
    permutation_count: int

    @property
    def sign(self) -> int:
        """Determinant of P: +1 for an even number of swaps, -1 for odd."""
        return -1 if self.permutation_count % 2 else 1

    def matches(self, A: Matrix, tolerance: ToleranceTier | None = None) -> bool:
        """Whether L U reproduces P A within tolerance; tier chosen from U as for QRResult."""
        tier = tolerance or select_tolerance(_is_ill_conditioned(self.U))
        return _allclose(self.L.naive_multiply(self.U), self.P.naive_multiply(A), tier)


def _allclose(actual: Matrix, expected: Matrix, tier: ToleranceTier) -> bool:
    if actual.rows != expected.rows or actual.columns != expected.columns:
        return False
    return bool(np.allclose(actual.to_numpy(), expected.to_numpy(), rtol=tier.rtol, atol=tier.atol))


def _is_ill_conditioned(triangular: Matrix) -> bool:
    pivots = np.abs(np.diagonal(triangular.to_numpy()))
    largest = pivots.max()
    return largest == 0.0 or pivots.min() / largest < ILL_CONDITIONED_PIVOT_RATIO
