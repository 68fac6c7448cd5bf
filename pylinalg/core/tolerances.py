"""
Tolerance configuration for numerical checks.

Single source of the near-zero threshold used by triangularity,
singularity and linear-dependence checks, plus tolerance tiers for
approximate matrix comparison:
- EXACT_FP64: results that should agree to machine precision
- ROUNDOFF_FP64: results of elimination/orthogonalization chains

Used by the matrix predicates, the numeric kernels and the test suite.
"""

from dataclasses import dataclass


# Values whose modulus falls below DELTA are treated as zero.
DELTA: float = 1e-12

# Solving a system whose smallest pivot is below this fraction of the
# largest pivot emits a RuntimeWarning.
ILL_CONDITIONED_PIVOT_RATIO: float = 1e-10


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=DELTA,
    name='exact_fp64',
    description='double precision, direct arithmetic',
)

ROUNDOFF_FP64 = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='roundoff_fp64',
    description='double precision after elimination or orthogonalization',
)


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a computation."""
    if is_ill_conditioned:
        return ROUNDOFF_FP64
    return EXACT_FP64
