"""Factoradic (Lehmer-code) conversion between ranks and permutations.

Every permutation of ``[0, 1, …, n−1]`` has a unique rank, its position
in the lexicographic enumeration of all n! orderings.  The factorial
number system writes that rank as n−1 mixed-radix digits:

    rank = d₀·1! + d₁·2! + ··· + d_{n−2}·(n−1)!

where digit d_k (least significant first, radix k+2) lies in [0, k+1].
Read from the most significant end, each digit says how many of the
still-unused values are smaller than the value placed next.

Decoding by rotation
--------------------
Instead of popping from a shrinking pool, :func:`digits_to_permutation`
starts from the identity and, for slot i, right-rotates the sub-range
``[i, i + d]``: the value at ``i + d`` moves to slot i and the values
in between shift up one place.  Because the tail ``p[i:]`` stays sorted
after every rotation, the value moved into slot i is exactly the d-th
smallest unused value.

Example for n=3, rank=4:
  decode → digits [0, 2]              (4 = 0·1! + 2·2!)
  i=0: d=2, rotate [0, 2] of [0,1,2] → [2, 0, 1]
  i=1: d=0, nothing moves            → [2, 0, 1]
  result = [2, 0, 1]
"""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable, Sequence

import numpy as np

from ._typing import Rank
from .vector import PermutationVector


def n_permutations(n: int) -> int:
    """Return ``n!``, the number of permutations of *n* elements."""
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"Permutation size must be non-negative, got {n}.")
    return math.factorial(n)


def decode(rank: Rank, n: int) -> tuple[list[int], bool]:
    """Split *rank* into factoradic digits for permutations of length *n*.

    Args:
        rank: Lexicographic rank.
        n: Permutation length.

    Returns:
        ``(digits, ok)``.  ``digits`` has ``max(n - 1, 0)`` entries,
        least significant first.  ``ok`` is ``True`` iff
        ``0 <= rank < n!``; when it is ``False`` the digits are
        meaningless.
    """
    rank = operator.index(rank)
    n = operator.index(n)
    if rank < 0:
        return [0] * max(n - 1, 0), False

    digits = []
    for radix in range(2, n + 1):
        rank, digit = divmod(rank, radix)
        digits.append(digit)
    return digits, rank == 0


def digits_to_permutation(digits: Sequence[int]) -> PermutationVector:
    """Build the permutation of length ``len(digits) + 1`` the digits encode.

    Args:
        digits: Factoradic digits, least significant first, as returned
            by :func:`decode`.

    Returns:
        The :class:`~lexperm.vector.PermutationVector` whose rank is the
        value of *digits*.
    """
    p = list(range(len(digits) + 1))
    e = len(digits) - 1
    for i in range(len(digits)):
        j = i + digits[e - i]
        # Right rotation of p[i:j+1].
        p[i : j + 1] = [p[j]] + p[i:j]
    return PermutationVector._trusted(p)


def unrank(rank: Rank, n: int) -> PermutationVector:
    """Return the *rank*-th lexicographic permutation of ``range(n)``.

    Raises:
        ValueError: If *rank* is outside ``[0, n!)``.
    """
    digits, ok = decode(rank, n)
    if not ok:
        raise ValueError(
            f"Rank {rank} is out of range for n={n}: valid ranks are "
            f"0 to {n_permutations(n) - 1}."
        )
    if n == 0:
        return PermutationVector.identity(0)
    return digits_to_permutation(digits)


def unrank_many(ranks: Iterable[int], n: int) -> np.ndarray:
    """Decode a batch of ranks into a permutation index matrix.

    Args:
        ranks: Ranks in ``[0, n!)``; NumPy integer arrays are accepted.
        n: Permutation length.

    Returns:
        Array of shape ``(len(ranks), n)`` and dtype ``intp`` whose
        rows are the decoded permutations, in input order.

    Raises:
        ValueError: If any rank is outside ``[0, n!)``.
    """
    rows = [unrank(k, n) for k in ranks]
    if not rows:
        return np.empty((0, n), dtype=np.intp)
    return np.array([list(row) for row in rows], dtype=np.intp)


def encode(permutation: Iterable[int]) -> Rank:
    """Return the lexicographic rank of *permutation*.

    The inverse of :func:`unrank`: counts, for every slot, how many
    later values are smaller, and folds those counts in Horner form
    (radix n, n−1, …, 1).

    Raises:
        ValueError: If *permutation* is not a permutation of
            ``range(len(permutation))``.
    """
    p = list(permutation)
    if not isinstance(permutation, PermutationVector):
        p = list(PermutationVector(p))

    n = len(p)
    rank = 0
    for i in range(n):
        smaller = sum(1 for v in p[i + 1 :] if v < p[i])
        rank = rank * (n - i) + smaller
    return rank
