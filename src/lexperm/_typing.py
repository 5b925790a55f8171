"""Shared type aliases and the swap capability for the lexperm package."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SwappableCollection(Protocol):
    """Anything the engine can permute in place.

    The engine never reads, copies, or compares elements: it only asks
    for the length and exchanges two positions.  Lists, NumPy arrays,
    and pandas objects are wrapped by :func:`lexperm.adapters.as_swappable`.
    """

    def __len__(self) -> int: ...

    def swap(self, i: int, j: int) -> None:
        """Exchange the elements at positions *i* and *j*."""
        ...


# 0-based lexicographic index of a permutation.
Rank = int
