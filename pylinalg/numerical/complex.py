"""
Complex scalars stored as complex128.

Arithmetic is written component-wise on the real and imaginary parts so
the same code serves single scalars and numpy arrays. The square root
uses the two-argument formula

    re = sqrt((A + |x|) / 2)
    im = sign(B) * sqrt((-A + |x|) / 2)

with A = real(x), B = imag(x), |x| = sqrt(A^2 + B^2) and sign(0) = +1.
"""

from numbers import Complex
from typing import Any

import numpy as np


def _combine(real, imaginary):
    if np.ndim(real) == 0 and np.ndim(imaginary) == 0:
        return complex(float(real), float(imaginary))
    return np.asarray(real) + 1j * np.asarray(imaginary)


class ComplexNumerical:
    """Numerical implementation over double precision complex numbers."""

    zero_value: complex = complex(0.0, 0.0)
    one_value: complex = complex(1.0, 0.0)
    dtype = np.dtype(np.complex128)

    def add(self, x, y):
        return _combine(np.real(x) + np.real(y), np.imag(x) + np.imag(y))

    def subtract(self, x, y):
        return _combine(np.real(x) - np.real(y), np.imag(x) - np.imag(y))

    def multiply(self, x, y):
        a, b = np.real(x), np.imag(x)
        c, d = np.real(y), np.imag(y)
        return _combine(a * c - b * d, a * d + b * c)

    def divide(self, x, y):
        a, b = np.real(x), np.imag(x)
        c, d = np.real(y), np.imag(y)
        divisor = c * c + d * d
        return _combine((a * c + b * d) / divisor, (b * c - a * d) / divisor)

    def sqrt(self, x):
        A, B = np.real(x), np.imag(x)
        modulus = np.hypot(A, B)
        real = np.sqrt(np.maximum((A + modulus) / 2.0, 0.0))
        imaginary = np.where(B >= 0, 1.0, -1.0) * np.sqrt(np.maximum((-A + modulus) / 2.0, 0.0))
        if np.ndim(x) == 0:
            return complex(float(real), float(imaginary))
        return _combine(real, imaginary)

    def conjugate(self, x):
        return _combine(np.real(x), -np.imag(x))

    def abs(self, x):
        return np.hypot(np.real(x), np.imag(x))

    def from_integral(self, n: float) -> complex:
        return complex(float(n), 0.0)

    def to_integral(self, x) -> float:
        # Lossy: the imaginary part is discarded.
        return float(np.real(x))

    def sign_operator(self, x) -> int:
        return int(np.sign(np.real(x)))

    def is_scalar(self, value: Any) -> bool:
        if isinstance(value, (bool, np.bool_)):
            return False
        return isinstance(value, (Complex, np.number))

    def to_string(self, x) -> str:
        real, imaginary = float(np.real(x)), float(np.imag(x))
        if imaginary < 0:
            return f"{real:g} - {-imaginary:g}i"
        return f"{real:g} + {imaginary:g}i"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ComplexNumerical)

    def __hash__(self) -> int:
        return hash(ComplexNumerical)

    def __repr__(self) -> str:
        return "ComplexNumerical()"
