"""Tests for the factoradic module."""

import itertools
import math

import numpy as np
import pytest

from lexperm.factoradic import (
    decode,
    digits_to_permutation,
    encode,
    n_permutations,
    unrank,
    unrank_many,
)


class TestDecode:
    """Tests for rank → factoradic digit decoding."""

    def test_digits_for_length_three(self):
        want = [[0, 0], [1, 0], [0, 1], [1, 1], [0, 2], [1, 2]]
        for rank, digits in enumerate(want):
            got, ok = decode(rank, 3)
            assert ok
            assert got == digits

    def test_rank_too_big(self):
        # 7 > 3!
        _, ok = decode(7, 3)
        assert not ok

    def test_rank_equal_to_factorial_is_rejected(self):
        _, ok = decode(24, 4)
        assert not ok

    def test_last_valid_rank(self):
        digits, ok = decode(23, 4)
        assert ok
        assert digits == [1, 2, 3]

    def test_negative_rank_rejected(self):
        _, ok = decode(-1, 3)
        assert not ok

    def test_digit_bounds(self):
        for rank in range(120):
            digits, ok = decode(rank, 5)
            assert ok
            assert len(digits) == 4
            for k, d in enumerate(digits):
                assert 0 <= d <= k + 1

    def test_digits_recompose_rank(self):
        digits, _ = decode(97, 5)
        value = sum(d * math.factorial(k + 1) for k, d in enumerate(digits))
        assert value == 97

    def test_single_element(self):
        assert decode(0, 1) == ([], True)
        assert decode(1, 1) == ([], False)

    def test_empty(self):
        assert decode(0, 0) == ([], True)
        assert decode(1, 0)[1] is False

    def test_accepts_numpy_integers(self):
        digits, ok = decode(np.int64(5), 3)
        assert ok
        assert digits == [1, 2]

    def test_rejects_float_rank(self):
        with pytest.raises(TypeError):
            decode(1.5, 3)


class TestDigitsToPermutation:
    """Tests for the rotation-based Lehmer decoder."""

    def test_length_three(self):
        want = [
            [0, 1, 2],
            [0, 2, 1],
            [1, 0, 2],
            [1, 2, 0],
            [2, 0, 1],
            [2, 1, 0],
        ]
        for rank, perm in enumerate(want):
            digits, _ = decode(rank, 3)
            assert digits_to_permutation(digits) == perm

    def test_zero_digits_is_identity(self):
        assert digits_to_permutation([0, 0, 0, 0]) == [0, 1, 2, 3, 4]

    def test_no_digits_is_singleton(self):
        assert digits_to_permutation([]) == [0]

    def test_matches_itertools_order(self):
        # itertools.permutations emits range(n) in lexicographic order.
        for rank, perm in enumerate(itertools.permutations(range(5))):
            digits, _ = decode(rank, 5)
            assert tuple(digits_to_permutation(digits)) == perm


class TestUnrank:
    """Tests for unrank / unrank_many / encode."""

    def test_rank_zero_is_identity(self):
        assert unrank(0, 4) == [0, 1, 2, 3]

    def test_last_rank_is_reverse(self):
        assert unrank(23, 4) == [3, 2, 1, 0]

    def test_known_rank(self):
        assert unrank(4, 3) == [2, 0, 1]

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError, match="out of range"):
            unrank(6, 3)

    def test_empty_permutation(self):
        assert len(unrank(0, 0)) == 0

    def test_encode_inverts_unrank(self):
        for rank in range(120):
            assert encode(unrank(rank, 5)) == rank

    def test_encode_plain_list(self):
        assert encode([3, 2, 1, 0]) == 23

    def test_encode_rejects_non_permutation(self):
        with pytest.raises(ValueError, match="not a permutation"):
            encode([0, 0, 1])

    def test_unrank_many_shape_and_rows(self):
        result = unrank_many(np.array([0, 5, 3]), 3)
        assert result.shape == (3, 3)
        assert result.dtype == np.intp
        np.testing.assert_array_equal(result, [[0, 1, 2], [2, 1, 0], [1, 2, 0]])

    def test_unrank_many_empty(self):
        result = unrank_many([], 4)
        assert result.shape == (0, 4)

    def test_unrank_many_rejects_bad_rank(self):
        with pytest.raises(ValueError, match="out of range"):
            unrank_many([0, 24], 4)


class TestNPermutations:
    """Tests for n_permutations."""

    @pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (3, 6), (10, 3_628_800)])
    def test_values(self, n, expected):
        assert n_permutations(n) == expected

    def test_negative_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            n_permutations(-1)
