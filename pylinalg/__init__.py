"""
pylinalg: dense linear algebra over real and complex scalars.

Vectors and matrices are generic over a Numerical scalar protocol, so
every algorithm (products, substitution, elimination, Gram-Schmidt/QR,
LU) runs unchanged over float64 and complex128 entries.

Submodules:
    vector: Row and column vectors
    matrix: Dense matrices, factories and factorization results
    numerical: Real and complex Numerical implementations
    core: Exceptions, validation, tolerances and compute kernels
"""

__version__ = "0.1.0"

from pylinalg.core.compute.bits import is_power_of_two, next_power_of_two
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
from pylinalg.core.protocols import Numerical
from pylinalg.core.tolerances import DELTA
from pylinalg.numerical import COMPLEX, REAL, ComplexNumerical, RealNumerical
from pylinalg.vector import Vector
from pylinalg.matrix import (
    LUResult,
    Matrix,
    QRResult,
    clone,
    identity,
    ones,
    pad_to_power_of_two,
    random,
    reshape,
    round_to_zero,
    to_fixed,
    zeros,
)

__all__ = [
    "__version__",
    # Types
    "Vector",
    "Matrix",
    "QRResult",
    "LUResult",
    # Scalars
    "Numerical",
    "RealNumerical",
    "ComplexNumerical",
    "REAL",
    "COMPLEX",
    # Factories
    "identity",
    "zeros",
    "ones",
    "random",
    "reshape",
    # Utilities
    "pad_to_power_of_two",
    "round_to_zero",
    "to_fixed",
    "clone",
    "is_power_of_two",
    "next_power_of_two",
    "DELTA",
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
]
