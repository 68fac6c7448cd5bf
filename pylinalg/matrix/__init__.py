"""
Dense matrices and their factorizations.

Public API:
    Matrix      - validated dense matrix over real or complex scalars
    QRResult    - Q, R factors from Matrix.qr_decomposition()
    LUResult    - L, U, P factors from Matrix.lu_decomposition()
    identity, zeros, ones, random, reshape - factories
    pad_to_power_of_two, round_to_zero, to_fixed, clone - utilities
"""

from pylinalg.matrix.matrix import Matrix
from pylinalg.matrix.solution import LUResult, QRResult
from pylinalg.matrix.factories import identity, ones, random, reshape, zeros
from pylinalg.matrix.utility import clone, pad_to_power_of_two, round_to_zero, to_fixed

__all__ = [
    "Matrix",
    "QRResult",
    "LUResult",
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
]
