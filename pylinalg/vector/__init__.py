"""
Row and column vectors.

Public API:
    Vector - validated row/column vector over real or complex scalars
"""

from pylinalg.vector.vector import Vector

__all__ = ["Vector"]
