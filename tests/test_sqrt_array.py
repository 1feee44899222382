"""Tests for batched square roots over numpy object arrays."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from digit_sqrt import InvalidArgument, isqrt
from sqrt_array import IntegerVector, isqrt_array, isqrt_rem_array, to_object_array


def test_numpy_integer_scalar_is_accepted() -> None:
    assert isqrt(np.int64(49)) == 7
    assert isqrt(np.uint8(255)) == 15


def test_to_object_array_preserves_large_integers() -> None:
    big = 2**200 + 1
    arr = to_object_array([1, big, np.int32(9)])

    assert arr.dtype == object
    assert arr[1] == big
    assert type(arr[2]) is int


def test_to_object_array_rejects_floats() -> None:
    with pytest.raises(TypeError, match="non-integer"):
        to_object_array([1, 2.5])


def test_isqrt_array_on_list() -> None:
    roots = isqrt_array([0, 1, 15, 16, 10**18, 2**300])

    assert roots.dtype == object
    assert list(roots) == [0, 1, 3, 4, 10**9, 2**150]


def test_isqrt_array_keeps_shape() -> None:
    values = np.array([[4, 9], [24, 26]], dtype=np.int64)
    roots = isqrt_array(values, "alternate")

    assert roots.shape == (2, 2)
    assert roots.tolist() == [[2, 3], [4, 5]]


def test_isqrt_rem_array() -> None:
    roots, remainders = isqrt_rem_array([17, 25, 10**20 + 3], "iterative")

    assert list(roots) == [4, 5, 10**10]
    assert list(remainders) == [1, 0, 3]


def test_negative_entry_is_rejected_with_index() -> None:
    with pytest.raises(InvalidArgument, match=r"index \(2,\)"):
        IntegerVector([4, 9, -1])


def test_vector_accessors() -> None:
    vector = IntegerVector([3, 2**70, 0])

    assert len(vector) == 3
    assert vector.size == 3
    assert vector.shape == (3,)
    assert vector[1] == 2**70
    assert vector.max_bits() == 71
    assert IntegerVector([]).max_bits() == 0


def test_copy_is_independent() -> None:
    vector = IntegerVector([1, 2, 3])
    clone = vector.copy()
    clone.to_numpy()[0] = 100

    assert vector[0] == 1


def test_perfect_square_mask() -> None:
    mask = IntegerVector([0, 1, 2, 4, 2**64, 2**64 + 1]).perfect_square_mask()

    assert mask.dtype == bool
    assert mask.tolist() == [True, True, False, True, True, False]


def test_batch_logs_size_and_bits(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="sqrt_array"):
        isqrt_array([1, 2**100])

    assert "Running isqrt on 2 values (max entry: 2^101 bits)" in caplog.text


@pytest.mark.parametrize("values", [[4], []])
def test_empty_formulation_name_is_rejected(values: list) -> None:
    with pytest.raises(InvalidArgument, match="unknown formulation"):
        isqrt_array(values, "")
    with pytest.raises(InvalidArgument, match="unknown formulation"):
        isqrt_rem_array(values, "")


def test_default_formulation_applies_without_name() -> None:
    assert list(isqrt_array([99, 100])) == [9, 10]


def test_numpy_bool_entries_are_accepted() -> None:
    flags = np.array([True, False, True])
    roots = isqrt_array(flags)

    assert list(roots) == [1, 0, 1]
    assert all(type(value) is int for value in to_object_array(flags))
