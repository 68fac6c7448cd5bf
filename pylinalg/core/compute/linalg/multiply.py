"""
Matrix products.

naive_multiply is the standard O(m*n*p) product and the default for
every caller. strassen_multiply is a separate, explicitly requested path;
nothing falls back to it silently.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.bits import next_power_of_two
from pylinalg.core.protocols import Numerical


def naive_multiply(
    A: NDArray[Any],
    B: NDArray[Any],
    numerical: Numerical,
) -> NDArray[Any]:
    """
    Triple-loop product C = A @ B using the field operations.

    The innermost loop is expressed as a row update
    C[i, :] += A[i, k] * B[k, :] so it runs over whole rows.

    Args:
        A: (m x n) array
        B: (n x p) array, caller guarantees A.shape[1] == B.shape[0]
        numerical: Scalar implementation

    Returns:
        (m x p) array, freshly allocated
    """
    m, n = A.shape
    p = B.shape[1]
    C = np.full((m, p), numerical.zero_value, dtype=numerical.dtype)
    for i in range(m):
        row = C[i, :]
        for k in range(n):
            row = numerical.add(row, numerical.multiply(A[i, k], B[k, :]))
        C[i, :] = row
    return C


def _split(M: NDArray[Any], half: int):
    return M[:half, :half], M[:half, half:], M[half:, :half], M[half:, half:]


def _strassen(A: NDArray[Any], B: NDArray[Any], numerical: Numerical, leaf_size: int) -> NDArray[Any]:
    n = A.shape[0]
    if n <= leaf_size:
        return naive_multiply(A, B, numerical)

    half = n // 2
    A11, A12, A21, A22 = _split(A, half)
    B11, B12, B21, B22 = _split(B, half)
    add, sub = numerical.add, numerical.subtract

    P1 = _strassen(A11, sub(B12, B22), numerical, leaf_size)
    P2 = _strassen(add(A11, A12), B22, numerical, leaf_size)
    P3 = _strassen(add(A21, A22), B11, numerical, leaf_size)
    P4 = _strassen(A22, sub(B21, B11), numerical, leaf_size)
    P5 = _strassen(add(A11, A22), add(B11, B22), numerical, leaf_size)
    P6 = _strassen(sub(A12, A22), add(B21, B22), numerical, leaf_size)
    P7 = _strassen(sub(A11, A21), add(B11, B12), numerical, leaf_size)

    C = np.empty((n, n), dtype=numerical.dtype)
    C[:half, :half] = add(sub(add(P5, P4), P2), P6)
    C[:half, half:] = add(P1, P2)
    C[half:, :half] = add(P3, P4)
    C[half:, half:] = sub(sub(add(P5, P1), P3), P7)
    return C


def strassen_multiply(
    A: NDArray[Any],
    B: NDArray[Any],
    numerical: Numerical,
    leaf_size: int = 1,
) -> NDArray[Any]:
    """
    Strassen product of arbitrary conformable matrices.

    Both operands are zero-padded to the next power of two of their
    largest dimension, multiplied recursively and the result cropped
    back to (m x p).

    Args:
        A: (m x n) array
        B: (n x p) array
        numerical: Scalar implementation
        leaf_size: Block size at which recursion switches to the naive product

    Returns:
        (m x p) array
    """
    m, n = A.shape
    p = B.shape[1]
    size = next_power_of_two(max(m, n, p))

    A_pad = np.full((size, size), numerical.zero_value, dtype=numerical.dtype)
    B_pad = np.full((size, size), numerical.zero_value, dtype=numerical.dtype)
    A_pad[:m, :n] = A
    B_pad[:n, :p] = B

    C = _strassen(A_pad, B_pad, numerical, leaf_size)
    return C[:m, :p].copy()
