"""
Shared scalar-generic helpers for the linear algebra kernels.

Every helper takes the Numerical implementation explicitly so the same
code runs over real and complex arrays.
"""

from functools import reduce
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.protocols import Numerical
from pylinalg.core.tolerances import DELTA


def total(values: NDArray[Any], numerical: Numerical) -> Any:
    """Sum a 1-D array with the field's addition."""
    return reduce(numerical.add, values, numerical.zero_value)


def dot(u: NDArray[Any], v: NDArray[Any], numerical: Numerical) -> Any:
    """
    Inner product <u, v> = sum(conj(u_i) * v_i).

    Reduces to the ordinary dot product for real scalars.
    """
    return total(numerical.multiply(numerical.conjugate(u), v), numerical)


def norm(u: NDArray[Any], numerical: Numerical) -> float:
    """Euclidean norm as a plain float."""
    return float(numerical.abs(numerical.sqrt(dot(u, u, numerical))))


def is_near_zero(x: Any, numerical: Numerical, threshold: float = DELTA) -> bool:
    return bool(numerical.abs(x) < threshold)


def round_to_zero(A: NDArray[Any], numerical: Numerical, threshold: float = DELTA) -> None:
    """Replace entries with modulus below threshold by zero, in place."""
    A[numerical.abs(A) < threshold] = numerical.zero_value


def is_upper_triangular(A: NDArray[Any], numerical: Numerical, threshold: float = DELTA) -> bool:
    """All entries strictly below the main diagonal are (near) zero."""
    below = np.tril(np.ones(A.shape, dtype=bool), k=-1)
    return bool(np.all(numerical.abs(A[below]) < threshold))


def is_lower_triangular(A: NDArray[Any], numerical: Numerical, threshold: float = DELTA) -> bool:
    """All entries strictly above the main diagonal are (near) zero."""
    above = np.triu(np.ones(A.shape, dtype=bool), k=1)
    return bool(np.all(numerical.abs(A[above]) < threshold))


def to_python(x: Any) -> Any:
    """Unwrap a numpy scalar into the matching Python float/complex."""
    if isinstance(x, np.generic):
        return x.item()
    return x
