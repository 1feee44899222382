#!/usr/bin/env python3
"""
Verification helpers for integer square roots.

Results from digit_sqrt are checked two independent ways: the bracketing
inequality d*d <= n < (d+1)*(d+1), and sympy's integer_nthroot as a
reference oracle.
"""

import logging
from typing import Dict

import sympy as sp

from digit_sqrt import FORMULATIONS, InvalidArgument, isqrt

logger = logging.getLogger(__name__)


class RootMismatchError(RuntimeError):
    """Raised when a computed root is not the floor square root of n."""

    def __init__(self, n: int, roots: Dict[str, int]):
        self.n = n
        self.roots = dict(roots)
        detail = ", ".join(f"{name}={root}" for name, root in self.roots.items())
        super().__init__(f"square root mismatch for n with {n.bit_length()} bits: {detail}")


def check_root(n: int, d: int) -> bool:
    """Verify that d*d <= n < (d+1)*(d+1)."""
    if n < 0 or d < 0:
        return False
    return d * d <= n < (d + 1) * (d + 1)


def reference_root(n: int) -> int:
    """Floor square root computed by sympy."""
    if n < 0:
        raise InvalidArgument(f"square root of negative number: {n}")
    root, _exact = sp.integer_nthroot(n, 2)
    return int(root)


def verify_root(n: int, d: int) -> int:
    """Return d unchanged, or raise RootMismatchError if it is not isqrt(n)."""
    if not check_root(n, d):
        raise RootMismatchError(n, {'candidate': d, 'sympy': reference_root(n)})
    return d


def cross_check(n: int) -> Dict[str, int]:
    """
    Compute isqrt(n) with every formulation and compare against sympy.

    Returns:
        Mapping of formulation name (plus 'sympy') to root

    Raises:
        RootMismatchError: any two results disagree or fail the bracket check
    """
    roots = {name: isqrt(n, name) for name in FORMULATIONS}
    roots['sympy'] = reference_root(n)

    expected = roots['sympy']
    if any(root != expected for root in roots.values()) or not check_root(n, expected):
        logger.warning(f"Cross-check failed for {n.bit_length()}-bit input: {roots}")
        raise RootMismatchError(n, roots)

    logger.debug(f"Cross-check passed for {n.bit_length()}-bit input ({len(roots)} results)")
    return roots


__all__ = ['RootMismatchError', 'check_root', 'reference_root', 'verify_root', 'cross_check']
