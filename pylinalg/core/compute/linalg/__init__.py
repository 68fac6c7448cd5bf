"""
Linear algebra kernels for pylinalg.

All functions follow these conventions:
    - Inputs are 2-D NumPy arrays plus the Numerical implementation
      that defines the scalar field
    - Arithmetic goes through the Numerical operations, so real and
      complex arrays share one code path
    - Inputs are never modified; results are freshly allocated
    - Errors are raised immediately with clear messages

Submodules:
    multiply: naive and Strassen products
    substitution: back and forward substitution
    elimination: Gaussian and Gauss-Jordan elimination, inversion
    qr: Gram-Schmidt and QR decomposition
    lu: LU decomposition with partial pivoting
"""

from pylinalg.core.compute.linalg.elimination import (
    EchelonForm,
    gauss_jordan,
    gaussian_elimination,
    invert_square,
    row_echelon,
)
from pylinalg.core.compute.linalg.lu import lu_decomposition
from pylinalg.core.compute.linalg.multiply import naive_multiply, strassen_multiply
from pylinalg.core.compute.linalg.qr import gram_schmidt, qr_decomposition
from pylinalg.core.compute.linalg.substitution import (
    back_substitution,
    forward_substitution,
)

__all__ = [
    # Products
    "naive_multiply",
    "strassen_multiply",
    # Triangular solvers
    "back_substitution",
    "forward_substitution",
    # Elimination
    "EchelonForm",
    "row_echelon",
    "gaussian_elimination",
    "gauss_jordan",
    "invert_square",
    # Factorizations
    "gram_schmidt",
    "qr_decomposition",
    "lu_decomposition",
]
