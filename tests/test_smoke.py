"""Larger-n smoke tests for regression detection.

These tests drive full enumerations big enough to catch accidental
quadratic behaviour per step or a broken restore after exhaustion.

All tests are marked ``@pytest.mark.slow``; deselect them for a quick
run with::

    pytest -m "not slow"
"""

from __future__ import annotations

import time

import numpy as np
import pytest

from lexperm import Permuter, iter_permutations, n_permutations

N = 8
SEED = 42


@pytest.mark.slow
class TestFullEnumerationSmoke:
    """n=8 → 40,320 permutations, in place."""

    def test_completes_within_bound(self) -> None:
        data = list(range(N))
        permuter = Permuter(N)
        t0 = time.monotonic()
        count = 0
        previous = None
        while permuter.permute(data):
            current = tuple(data)
            if previous is not None:
                assert current > previous
            previous = current
            count += 1
        elapsed = time.monotonic() - t0
        assert elapsed < 30, f"Enumeration took {elapsed:.1f}s (limit 30s)"
        assert count == n_permutations(N)
        assert data == list(range(N))

    def test_array_rows_restored(self) -> None:
        rng = np.random.default_rng(SEED)
        arr = rng.standard_normal((N, 3))
        original = arr.copy()
        count = sum(1 for _ in iter_permutations(arr))
        assert count == n_permutations(N)
        np.testing.assert_array_equal(arr, original)


@pytest.mark.slow
class TestRandomJumpsSmoke:
    """Random jumps followed by short runs stay consistent with ranks."""

    def test_jumps_match_rank(self) -> None:
        rng = np.random.default_rng(SEED)
        data = list(range(N))
        permuter = Permuter(N)
        for rank in rng.integers(0, n_permutations(N) - 5, size=200):
            assert permuter.set_next(int(rank))
            for step in range(5):
                assert permuter.permute(data)
                assert permuter.rank == rank + step
                assert data == list(permuter.current)
        permuter.reset(data)
        assert data == list(range(N))
