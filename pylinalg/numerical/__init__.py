"""
Scalar implementations of the Numerical protocol.

Public API:
    RealNumerical       - float64 arithmetic
    ComplexNumerical    - complex128 arithmetic, component-wise
    REAL, COMPLEX       - shared default instances
    numerical_for(xs)   - infer the implementation for a batch of values
    common_numerical    - promotion rule for mixed real and complex operands
"""

from pylinalg.numerical.real import RealNumerical
from pylinalg.numerical.complex import ComplexNumerical
from pylinalg.numerical._infer import (
    COMPLEX,
    REAL,
    common_numerical,
    numerical_for,
    numerical_for_dtype,
)

__all__ = [
    "RealNumerical",
    "ComplexNumerical",
    "REAL",
    "COMPLEX",
    "common_numerical",
    "numerical_for",
    "numerical_for_dtype",
]
