"""
Power-of-two helpers used to size recursive algorithms (Strassen padding).
"""

from pylinalg.core.validation import check_non_negative_int


def is_power_of_two(n: int) -> bool:
    """True iff n has exactly one set bit."""
    n = check_non_negative_int(n, 'n')
    return n > 0 and (n & (n - 1)) == 0


def next_power_of_two(n: int) -> int:
    """
    Smallest power of two >= n.

    Returns n itself when n is already a power of two; 1 for n == 0.
    """
    n = check_non_negative_int(n, 'n')
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()
