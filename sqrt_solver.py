#!/usr/bin/env python3
"""
Configurable front end for the digit-halving square root.

    solver = IntegerSqrtSolver({'formulation': 'iterative', 'verify': True})
    solver.root(10**40)          # 10**20
    solver.root_rem(17)          # (4, 1)
    solver.is_square(2**64)      # (True, 2**32)
"""

import logging
from typing import Optional, Tuple

import numpy as np

from digit_sqrt import approximator, isqrt, isqrt_rem, is_perfect_square
from root_check import verify_root
from sqrt_array import IntegerVector

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'formulation': 'halving',
    'verify': False,
    'verbose': False,
}


class IntegerSqrtSolver:
    """Floor square roots with a chosen formulation and optional verification."""

    def __init__(self, config: dict = None):
        self.config = dict(DEFAULT_CONFIG)
        self.config.update(config or {})

        self.formulation = self.config.get('formulation', DEFAULT_CONFIG['formulation'])
        approximator(self.formulation)
        self.verify = bool(self.config.get('verify', False))
        self.verbose = bool(self.config.get('verbose', False))

        # verbose output goes through a child logger so the module logger's level is untouched
        if self.verbose:
            self.logger = logger.getChild('verbose')
            self.logger.setLevel(logging.DEBUG)
        else:
            self.logger = logger
        self.logger.debug(f"[Solver] formulation={self.formulation}, verify={self.verify}")

    def root(self, n: int) -> int:
        """Floor square root of n."""
        d = isqrt(n, self.formulation)
        if self.verify:
            verify_root(int(n), d)
        self.logger.debug(f"[Solver] root: {int(n).bit_length()} bits -> {d}")
        return d

    def root_rem(self, n: int) -> Tuple[int, int]:
        """(root, remainder) with n == root**2 + remainder."""
        s, r = isqrt_rem(n, self.formulation)
        if self.verify:
            verify_root(int(n), s)
        self.logger.debug(f"[Solver] root_rem: {int(n).bit_length()} bits -> ({s}, {r})")
        return s, r

    def is_square(self, n: int) -> Tuple[bool, int]:
        """(True, root) if n is a perfect square, else (False, floor root)."""
        exact, r = is_perfect_square(n, self.formulation)
        if self.verify and n >= 0:
            verify_root(int(n), r)
        self.logger.debug(f"[Solver] is_square: {int(n).bit_length()} bits -> ({exact}, {r})")
        return exact, r

    def roots(self, values, formulation: Optional[str] = None) -> np.ndarray:
        """Elementwise roots of an array or list."""
        vector = IntegerVector(values)
        roots = vector.isqrt(self.formulation if formulation is None else formulation)
        if self.verify:
            for index, val in np.ndenumerate(vector.to_numpy()):
                verify_root(val, roots[index])
        self.logger.debug(f"[Solver] roots: {vector.size} values (max entry: 2^{vector.max_bits()} bits)")
        return roots


__all__ = ['DEFAULT_CONFIG', 'IntegerSqrtSolver']
