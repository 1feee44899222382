#!/usr/bin/env python3
"""
Exact integer square root by base-4 digit halving.

The root is built from the top digits of n downwards:
1. COUNT: measure n in base-4 digits (two bits per digit)
2. HALVE: approximate the root of the leading half of the digits, recursively
3. COMBINE: rescale that approximation and apply one Newton correction
   taken from the next slice of n

Every level returns an approximation a with (a - 1)^2 < m < (a + 1)^2 for
the sub-value m it was given, so a single check-and-decrement at the top
yields the exact floor root. Only shifts, floor division and multiplication
are used; no floating point anywhere.
"""

import logging
import operator
from typing import List, Tuple

logger = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    """Raised for a negative operand or an unknown formulation name."""


def bit_length(n: int) -> int:
    """Smallest k >= 0 with n < 2**k (0 for n == 0)."""
    return n.bit_length()


def digit_count(n: int) -> int:
    """Number of base-4 digits needed to write n (0 for n == 0)."""
    return (1 + bit_length(n)) >> 1


def approximate_root(budget: int, n: int) -> int:
    """
    Approximate sqrt(n) to within 1, where budget == digit_count(n).

    The leading budget - k digits (k = budget // 2) are obtained by shifting
    n right by 2k bits; their root is then scaled back up by 2**k and refined
    with a single Newton step:

        a * 2**(k-1) + (n >> (k+1)) // a

    The recursive call must happen before the division: it is what
    guarantees a >= 2**(k-1) >= 1.
    """
    if budget < 2:
        # budget 0 only ever carries n == 0, budget 1 covers n in {1, 2, 3}
        return budget

    k = budget >> 1
    a = approximate_root(budget - k, n >> (2 * k))
    return (a << (k - 1)) + (n >> (k + 1)) // a


def approximate_root_alt(c: int, n: int) -> int:
    """
    Same contract as approximate_root, parameterised on c = digit_count(n) - 1.

    Needs n >= 1. Splits off k + 1 digits with k = (c - 1) // 2 and recurses
    on the c // 2 + 1 leading digits.
    """
    if c == 0:
        return 1

    k = (c - 1) >> 1
    a = approximate_root_alt(c >> 1, n >> (2 * (k + 1)))
    return (a << k) + (n >> (k + 2)) // a


def budget_schedule(budget: int) -> List[int]:
    """
    Split sizes k for each level of the halving recursion, outermost first.

    The budget left after the last split is 0 or 1.
    """
    splits = []
    while budget >= 2:
        k = budget >> 1
        splits.append(k)
        budget -= k
    return splits


def approximate_root_iterative(budget: int, n: int) -> int:
    """
    approximate_root without Python recursion.

    The schedule of splits is computed top-down, then the approximation is
    folded bottom-up. Shift offsets are tracked in digits.
    """
    splits = budget_schedule(budget)
    offsets = []
    offset = 0
    for k in splits:
        offsets.append(offset)
        offset += k

    a = budget - offset  # base budget, 0 or 1
    for k, offset in zip(reversed(splits), reversed(offsets)):
        m = n >> (2 * offset)
        a = (a << (k - 1)) + (m >> (k + 1)) // a
    return a


def _approximate_halving(n: int) -> int:
    return approximate_root(digit_count(n), n)


def _approximate_alternate(n: int) -> int:
    if n == 0:
        return 0
    return approximate_root_alt(digit_count(n) - 1, n)


def _approximate_iterative(n: int) -> int:
    return approximate_root_iterative(digit_count(n), n)


FORMULATIONS = {
    'halving': _approximate_halving,
    'alternate': _approximate_alternate,
    'iterative': _approximate_iterative,
}

DEFAULT_FORMULATION = 'halving'


def _as_operand(n) -> int:
    """Coerce n to a Python int and reject negatives."""
    n = operator.index(n)
    if n < 0:
        raise InvalidArgument(f"square root of negative number: {n}")
    return int(n)


def approximator(formulation: str):
    """Look up a formulation by name, raising InvalidArgument if unknown."""
    try:
        return FORMULATIONS[formulation]
    except KeyError:
        raise InvalidArgument(
            f"unknown formulation {formulation!r}, expected one of {sorted(FORMULATIONS)}"
        ) from None


def isqrt(n: int, formulation: str = DEFAULT_FORMULATION) -> int:
    """
    Floor square root of a non-negative integer.

    Args:
        n: Non-negative integer (any object supporting __index__)
        formulation: 'halving', 'alternate' or 'iterative'

    Returns:
        The unique d with d*d <= n < (d+1)*(d+1)

    Raises:
        InvalidArgument: n is negative, or formulation is unknown
        TypeError: n is not an integer
    """
    approximate = approximator(formulation)
    n = _as_operand(n)

    a = approximate(n)
    corrected = a * a > n
    if corrected:
        a -= 1

    logger.debug(
        f"isqrt: {digit_count(n)} base-4 digits, formulation={formulation}, "
        f"corrected={corrected}"
    )
    return a


def isqrt_rem(n: int, formulation: str = DEFAULT_FORMULATION) -> Tuple[int, int]:
    """Return (s, r) with s = isqrt(n) and r = n - s*s."""
    n = _as_operand(n)
    s = isqrt(n, formulation)
    return s, n - s * s


def is_perfect_square(n: int, formulation: str = DEFAULT_FORMULATION) -> Tuple[bool, int]:
    """
    Exact square test.

    Returns (True, root) for perfect squares, (False, floor root) otherwise,
    and (False, 0) for negative n.
    """
    n = operator.index(n)
    if n < 0:
        return False, 0
    r = isqrt(n, formulation)
    return r * r == n, r


__all__ = [
    'InvalidArgument',
    'bit_length',
    'digit_count',
    'approximate_root',
    'approximate_root_alt',
    'approximate_root_iterative',
    'budget_schedule',
    'FORMULATIONS',
    'DEFAULT_FORMULATION',
    'approximator',
    'isqrt',
    'isqrt_rem',
    'is_perfect_square',
]
