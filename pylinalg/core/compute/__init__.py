"""
Shared compute infrastructure for pylinalg.

This module contains the NUMERIC kernels behind Vector and Matrix. The
kernels work on plain NumPy arrays; validation of user input happens in
the Matrix and Vector layer before any kernel is called.

Submodules:
    bits: Power-of-two helpers
    linalg: Linear algebra kernels (products, substitution, elimination, QR, LU)
"""

from pylinalg.core.compute.bits import is_power_of_two, next_power_of_two

__all__ = [
    "is_power_of_two",
    "next_power_of_two",
]
