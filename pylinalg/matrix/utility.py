"""
Helpers that operate on whole matrices.

round_to_zero and to_fixed mutate their argument; pad_to_power_of_two
and clone return new matrices.
"""

import numpy as np

from pylinalg.core.compute.bits import next_power_of_two
from pylinalg.core.compute.linalg._ops import round_to_zero as _round_to_zero
from pylinalg.core.tolerances import DELTA
from pylinalg.core.validation import check_instance, check_non_negative_int
from pylinalg.matrix.matrix import Matrix


def pad_to_power_of_two(A: Matrix) -> Matrix:
    """
    Zero-pad A to a square matrix whose side is a power of two.

    The side is the next power of two of max(rows, columns). Returns A
    itself when it is already square with a power-of-two side.
    """
    check_instance(A, Matrix, 'A')
    side = next_power_of_two(max(A.rows, A.columns))
    if A.rows == side and A.columns == side:
        return A
    numerical = A.numerical
    padded = np.full((side, side), numerical.zero_value, dtype=numerical.dtype)
    padded[:A.rows, :A.columns] = A.to_numpy()
    return Matrix._from_array(padded, numerical, A.orientation)


def round_to_zero(A: Matrix, threshold: float = DELTA) -> None:
    """Set every entry with modulus below threshold to exactly zero, in place."""
    check_instance(A, Matrix, 'A')
    _round_to_zero(A._data, A.numerical, threshold)


def to_fixed(A: Matrix, digits: int) -> None:
    """Round every entry to `digits` decimals, in place (both parts for complex)."""
    check_instance(A, Matrix, 'A')
    digits = check_non_negative_int(digits, 'digits')
    A._data[:] = np.round(A._data, digits)


def clone(A: Matrix) -> Matrix:
    """Independent copy with the same orientation."""
    check_instance(A, Matrix, 'A')
    return A.copy()
