"""
Scalar-type inference.

Picks the Numerical implementation for a batch of element values, the
way the constructors of Vector and Matrix need it: all real values map
to RealNumerical, any complex value promotes the batch to
ComplexNumerical, anything else is rejected.
"""

from __future__ import annotations

from numbers import Complex, Real
from typing import Any, Iterable

import numpy as np

from pylinalg.core.exceptions import StatusCode, TypeMismatchError
from pylinalg.core.protocols import Numerical
from pylinalg.numerical.complex import ComplexNumerical
from pylinalg.numerical.real import RealNumerical

REAL = RealNumerical()
COMPLEX = ComplexNumerical()


def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def numerical_for(values: Iterable[Any]) -> Numerical:
    """
    Infer the Numerical implementation for a flat iterable of scalars.

    Args:
        values: Element values (already flattened)

    Returns:
        REAL if every value is real, COMPLEX if any value is complex

    Raises:
        TypeMismatchError: If a value is neither real nor complex
    """
    numerical: Numerical = REAL
    for value in values:
        if _is_bool(value):
            raise TypeMismatchError(
                f"Boolean value {value!r} is not a numeric scalar",
                expected_type='real or complex',
                actual_type=type(value).__name__,
                status_code=StatusCode.UNSUPPORTED_SCALAR,
            )
        if isinstance(value, (Real, np.integer, np.floating)):
            continue
        if isinstance(value, (Complex, np.complexfloating)):
            numerical = COMPLEX
            continue
        raise TypeMismatchError(
            f"No Numerical implementation for scalar of type {type(value).__name__}",
            expected_type='real or complex',
            actual_type=type(value).__name__,
            status_code=StatusCode.UNSUPPORTED_SCALAR,
        )
    return numerical


def numerical_for_dtype(dtype: np.dtype) -> Numerical:
    """Map a numpy dtype onto its Numerical implementation."""
    if np.issubdtype(dtype, np.complexfloating):
        return COMPLEX
    if np.issubdtype(dtype, np.number) and not np.issubdtype(dtype, np.bool_):
        return REAL
    raise TypeMismatchError(
        f"No Numerical implementation for dtype {dtype}",
        expected_type='real or complex dtype',
        actual_type=str(dtype),
        status_code=StatusCode.UNSUPPORTED_SCALAR,
    )


def common_numerical(*numericals: Numerical) -> Numerical:
    """
    Smallest implementation able to hold results of mixing the inputs.

    Real combined with real stays real; anything combined with complex is
    complex.
    """
    if any(n == COMPLEX for n in numericals):
        return COMPLEX
    return REAL
