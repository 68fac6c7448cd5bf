"""
Core protocols for pylinalg.

Numerical defines the field operations every scalar type must supply so
that Vector and Matrix algorithms can be written once and run over real
and complex numbers alike. We use Protocol (structural typing) rather
than ABC (nominal typing) so third-party scalar types can participate
without inheriting from anything here.

Design Principles:
    - Minimal contract: the field operations plus conversions
    - Operations never mutate their operands
    - Operations are elementwise: they accept numpy arrays of `dtype`
      as well as single scalars, so kernels can work row-at-a-time
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

import numpy as np

T = TypeVar('T')  # Scalar type


@runtime_checkable
class Numerical(Protocol[T]):
    """
    Field operations over a scalar type T.

    Implementations: RealNumerical (float64), ComplexNumerical (complex128).
    """

    @property
    def zero_value(self) -> T:
        """Additive identity."""
        ...

    @property
    def one_value(self) -> T:
        """Multiplicative identity."""
        ...

    @property
    def dtype(self) -> np.dtype:
        """numpy dtype used to store scalars of this type."""
        ...

    def add(self, x: T, y: T) -> T: ...

    def subtract(self, x: T, y: T) -> T: ...

    def multiply(self, x: T, y: T) -> T: ...

    def divide(self, x: T, y: T) -> T: ...

    def sqrt(self, x: T) -> T:
        """Principal square root."""
        ...

    def conjugate(self, x: T) -> T:
        """Conjugate; the identity for real scalars."""
        ...

    def abs(self, x: T) -> Any:
        """Modulus as a real float (or float array)."""
        ...

    def from_integral(self, n: float) -> T:
        """Lift a plain Python number into T."""
        ...

    def to_integral(self, x: T) -> float:
        """
        Project T onto a plain Python number.

        Lossy for complex scalars: only the real part is kept.
        """
        ...

    def sign_operator(self, x: T) -> int:
        """Sign (-1, 0, 1) of the directional (real) component."""
        ...

    def is_scalar(self, value: Any) -> bool:
        """Whether `value` is an acceptable element of this type."""
        ...

    def to_string(self, x: T) -> str: ...
