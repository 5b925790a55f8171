"""Permutation vectors and their in-place action on caller data.

A :class:`PermutationVector` ``p`` of length *n* is a bijection from
*slot* to *source index*: applying it to a collection leaves the element
that started at index ``p[i]`` in slot ``i``.  The identity vector is
the canonical "original order" state.

Every operation that touches caller data does so through ``swap(i, j)``
only, so the engine never needs a second copy of the collection.

Applying a permutation with swaps only
--------------------------------------
:meth:`PermutationVector.apply` walks the slots left to right.  Slot
``i`` must receive the element that started at ``p[i]``, but if
``p[i] < i`` that element has already been moved by an earlier swap.
Where did it go?  Swap ``k`` (for ``k < i``) put whatever sat in slot
``k`` into the slot the chase for ``k`` resolved to, so following
``j = p[j]`` while ``j < i`` lands on the slot that currently holds the
wanted element.  No visited bitset is needed, and each non-trivial
cycle of length *L* costs exactly *L - 1* swaps.

Example for p = [1, 2, 0], data = [a, b, c]:
  i=0: j=1            swap(0, 1) → [b, a, c]
  i=1: j=2            swap(1, 2) → [b, c, a]
  i=2: j=0 → p[0]=1 → p[1]=2, j=2, no swap
  result = [b, c, a] = [data[1], data[2], data[0]]
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

import numpy as np

from ._config import checks_enabled
from .adapters import as_swappable
from .exceptions import PermutationInvariantError


class PermutationVector(Sequence):
    """A permutation of ``0..n-1`` in array form.

    Construct from any iterable of integers; the constructor verifies
    that the values form a bijection on ``range(n)``.  Use
    :meth:`identity` for the untouched state.

    The vector is mutable only through :meth:`next`, which advances it
    to its lexicographic successor while mirroring every swap onto a
    collection.  All other operations return new vectors.
    """

    __slots__ = ("_p",)

    def __init__(self, values: Iterable[int]) -> None:
        p = [operator.index(v) for v in values]
        n = len(p)
        seen = [False] * n
        for v in p:
            if not 0 <= v < n or seen[v]:
                raise ValueError(
                    f"{p} is not a permutation of range({n}): every value "
                    f"in [0, {n}) must appear exactly once."
                )
            seen[v] = True
        self._p = p

    @classmethod
    def identity(cls, n: int) -> PermutationVector:
        """Return the identity vector ``[0, 1, ..., n-1]``."""
        if n < 0:
            raise ValueError(f"Permutation size must be non-negative, got {n}.")
        return cls._trusted(list(range(n)))

    @classmethod
    def _trusted(cls, p: list[int]) -> PermutationVector:
        # Internal constructor for lists already known to be bijections.
        vec = cls.__new__(cls)
        vec._p = p
        return vec

    # ---- Sequence protocol -------------------------------------------

    def __len__(self) -> int:
        return len(self._p)

    def __getitem__(self, index: Any) -> Any:
        return self._p[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._p)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PermutationVector):
            return self._p == other._p
        if isinstance(other, Sequence) and not isinstance(other, str):
            return self._p == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PermutationVector({self._p})"

    # ---- Pure operations ---------------------------------------------

    @property
    def is_identity(self) -> bool:
        return all(i == v for i, v in enumerate(self._p))

    @property
    def rank(self) -> int:
        """Lexicographic rank of this vector among all ``n!`` vectors."""
        from .factoradic import encode

        return encode(self)

    def inverse(self) -> PermutationVector:
        """Return ``q`` with ``q[p[i]] == i`` for every ``i``.

        Applying ``q`` after ``p`` returns a collection to the order it
        had before ``p`` was applied.
        """
        q = [0] * len(self._p)
        for i, j in enumerate(self._p):
            q[j] = i
        return PermutationVector._trusted(q)

    def compose(self, other: PermutationVector) -> PermutationVector:
        """Return the single vector equivalent to applying *self*, then *other*."""
        if len(other) != len(self._p):
            raise ValueError(
                f"Cannot compose permutations of lengths {len(self._p)} "
                f"and {len(other)}."
            )
        return PermutationVector._trusted([self._p[j] for j in other])

    def cycles(self) -> list[tuple[int, ...]]:
        """Return the non-trivial cycles, each starting at its smallest slot."""
        seen = [False] * len(self._p)
        result: list[tuple[int, ...]] = []
        for start in range(len(self._p)):
            if seen[start]:
                continue
            cycle = []
            k = start
            while not seen[k]:
                seen[k] = True
                cycle.append(k)
                k = self._p[k]
            if len(cycle) > 1:
                result.append(tuple(cycle))
        return result

    def to_array(self) -> np.ndarray:
        """Return the vector as an ``intp`` NumPy array (a copy)."""
        return np.asarray(self._p, dtype=np.intp)

    def copy(self) -> PermutationVector:
        return PermutationVector._trusted(list(self._p))

    # ---- In-place operations on caller data --------------------------

    def _check_length(self, target: Any) -> None:
        if checks_enabled() and len(target) != len(self._p):
            raise PermutationInvariantError(len(self._p), len(target))

    def apply(self, collection: Any) -> None:
        """Permute *collection* in place so slot ``i`` holds source ``p[i]``.

        Uses at most ``n`` swaps and no scratch storage; fixed points
        cost nothing.

        Args:
            collection: A :class:`~lexperm.SwappableCollection` or any
                container accepted by :func:`~lexperm.adapters.as_swappable`.

        Raises:
            PermutationInvariantError: If the collection length differs
                from the vector length (when checks are enabled).
        """
        target = as_swappable(collection)
        self._check_length(target)
        p = self._p
        for i, j in enumerate(p):
            while j < i:
                j = p[j]
            if j != i:
                target.swap(i, j)

    def next(self, collection: Any) -> bool:
        """Advance to the lexicographic successor, mirroring swaps onto *collection*.

        Returns:
            ``True`` if the vector advanced.  ``False`` if it was already
            the last (strictly descending) permutation, in which case
            neither the vector nor the collection changes.

        Raises:
            PermutationInvariantError: If the collection length differs
                from the vector length.  Checked whenever checks are
                enabled; the step never runs on a mismatched pair.
        """
        target = as_swappable(collection)
        self._check_length(target)
        p = self._p

        # Rightmost ascent: the prefix up to i is kept.
        i = len(p) - 2
        while i >= 0 and p[i] >= p[i + 1]:
            i -= 1
        if i < 0:
            return False

        # Rightmost value larger than p[i]; the suffix is descending.
        j = len(p) - 1
        while p[i] >= p[j]:
            j -= 1
        p[i], p[j] = p[j], p[i]
        target.swap(i, j)

        # Reverse p[i+1:] so the suffix becomes ascending.
        lo, hi = i + 1, len(p) - 1
        while lo < hi:
            p[lo], p[hi] = p[hi], p[lo]
            target.swap(lo, hi)
            lo += 1
            hi -= 1

        return True
