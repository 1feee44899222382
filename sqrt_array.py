#!/usr/bin/env python3
"""
Batched integer square roots over numpy arrays.
Values are held as Python ints in object-dtype arrays, so entries of any
size pass through without being truncated to int64 or rounded to float.
"""

import numpy as np
from typing import Tuple
import logging

from digit_sqrt import DEFAULT_FORMULATION, InvalidArgument, approximator, isqrt, isqrt_rem

logger = logging.getLogger(__name__)


def to_object_array(data) -> np.ndarray:
    """
    Convert a list or numpy array to an object-dtype array of Python ints.
    Booleans (including np.bool_) count as 0 and 1; any other non-integer
    entry raises TypeError.
    """
    source = data if isinstance(data, np.ndarray) else np.array(data, dtype=object)
    result = np.empty(source.shape, dtype=object)
    for index, val in np.ndenumerate(source):
        if isinstance(val, (int, np.integer, np.bool_)):
            result[index] = int(val)
        else:
            raise TypeError(f"non-integer entry {val!r} at index {index}")
    return result


class IntegerVector:
    """
    Array of arbitrary-precision non-negative integers.
    """
    def __init__(self, data):
        """
        Initialize from numpy array or (nested) list.
        Negative entries are rejected with InvalidArgument.
        """
        self._values = to_object_array(data)
        for index, val in np.ndenumerate(self._values):
            if val < 0:
                raise InvalidArgument(f"square root of negative number {val} at index {index}")

    @property
    def shape(self):
        return self._values.shape

    @property
    def size(self):
        return self._values.size

    def __len__(self):
        return len(self._values)

    def __getitem__(self, key):
        return self._values[key]

    def to_numpy(self):
        """Return the underlying object array."""
        return self._values

    def copy(self):
        """Return a copy of the vector."""
        return IntegerVector(self._values.copy())

    def max_bits(self) -> int:
        """Bit length of the largest entry (0 when empty or all zero)."""
        if self._values.size == 0:
            return 0
        return max(int(val).bit_length() for val in self._values.flat)

    def _log_batch(self, operation: str):
        logger.info(f"Running {operation} on {self.size} values (max entry: 2^{self.max_bits()} bits)")

    def isqrt(self, formulation: str = DEFAULT_FORMULATION) -> np.ndarray:
        """Elementwise floor square roots, same shape as the vector."""
        approximator(formulation)
        self._log_batch("isqrt")
        roots = np.empty(self.shape, dtype=object)
        for index, val in np.ndenumerate(self._values):
            roots[index] = isqrt(val, formulation)
        return roots

    def isqrt_rem(self, formulation: str = DEFAULT_FORMULATION) -> Tuple[np.ndarray, np.ndarray]:
        """Elementwise (root, remainder) arrays."""
        approximator(formulation)
        self._log_batch("isqrt_rem")
        roots = np.empty(self.shape, dtype=object)
        remainders = np.empty(self.shape, dtype=object)
        for index, val in np.ndenumerate(self._values):
            roots[index], remainders[index] = isqrt_rem(val, formulation)
        return roots, remainders

    def perfect_square_mask(self, formulation: str = DEFAULT_FORMULATION) -> np.ndarray:
        """Boolean array marking entries that are exact squares."""
        _, remainders = self.isqrt_rem(formulation)
        return np.array([r == 0 for r in remainders.flat], dtype=bool).reshape(self.shape)


def isqrt_array(values, formulation: str = DEFAULT_FORMULATION) -> np.ndarray:
    """Floor square roots of every entry of values."""
    return IntegerVector(values).isqrt(formulation)


def isqrt_rem_array(values, formulation: str = DEFAULT_FORMULATION) -> Tuple[np.ndarray, np.ndarray]:
    """Roots and remainders of every entry of values."""
    return IntegerVector(values).isqrt_rem(formulation)


# Export main interface
__all__ = ['IntegerVector', 'isqrt_array', 'isqrt_rem_array', 'to_object_array']
