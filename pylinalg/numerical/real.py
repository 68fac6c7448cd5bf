"""
Real scalars stored as float64.

Direct arithmetic; every operation works on numpy arrays elementwise.
"""

from numbers import Real
from typing import Any

import numpy as np


class RealNumerical:
    """Numerical implementation over IEEE double precision reals."""

    zero_value: float = 0.0
    one_value: float = 1.0
    dtype = np.dtype(np.float64)

    def add(self, x, y):
        return x + y

    def subtract(self, x, y):
        return x - y

    def multiply(self, x, y):
        return x * y

    def divide(self, x, y):
        return x / y

    def sqrt(self, x):
        return np.sqrt(x)

    def conjugate(self, x):
        return x

    def abs(self, x):
        return np.abs(x)

    def from_integral(self, n: float) -> float:
        return float(n)

    def to_integral(self, x) -> float:
        return float(x)

    def sign_operator(self, x) -> int:
        return int(np.sign(x))

    def is_scalar(self, value: Any) -> bool:
        if isinstance(value, (bool, np.bool_)):
            return False
        return isinstance(value, (Real, np.integer, np.floating))

    def to_string(self, x) -> str:
        return f"{float(x):g}"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RealNumerical)

    def __hash__(self) -> int:
        return hash(RealNumerical)

    def __repr__(self) -> str:
        return "RealNumerical()"
