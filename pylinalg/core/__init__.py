"""
Core infrastructure for pylinalg.

This module provides shared abstractions, utilities, and numeric
configuration used by the vector, matrix and numerical subpackages.

Key components:
    protocols: Numerical scalar protocol
    exceptions: Exception hierarchy and StatusCode
    validation: Input validators
    tolerances: Near-zero threshold and comparison tiers
    compute: Power-of-two helpers and linear algebra kernels
"""

from pylinalg.core.protocols import Numerical
from pylinalg.core.exceptions import (
    PyLinalgError,
    StatusCode,
    ValidationError,
    VectorValidationError,
    InvalidElementError,
    MatrixValidationError,
    DimensionMismatchError,
    NotSquareError,
    InvalidArgumentError,
    NotTriangularError,
    OrientationError,
    IndexOutOfBoundsError,
    TypeMismatchError,
    NumericalError,
    SingularSystemError,
    LinearDependenceError,
)
from pylinalg.core.tolerances import DELTA, ToleranceTier, select_tolerance

__all__ = [
    # Protocols
    "Numerical",
    # Exceptions
    "PyLinalgError",
    "StatusCode",
    "ValidationError",
    "VectorValidationError",
    "InvalidElementError",
    "MatrixValidationError",
    "DimensionMismatchError",
    "NotSquareError",
    "InvalidArgumentError",
    "NotTriangularError",
    "OrientationError",
    "IndexOutOfBoundsError",
    "TypeMismatchError",
    "NumericalError",
    "SingularSystemError",
    "LinearDependenceError",
    # Tolerances
    "DELTA",
    "ToleranceTier",
    "select_tolerance",
]
