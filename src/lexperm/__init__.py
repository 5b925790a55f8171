"""lexperm: in-place lexicographic permutation enumeration.

Enumerates every permutation of an indexable collection in
lexicographic order by swapping its elements in place, and jumps
straight to any permutation by its lexicographic rank via the
factorial number system (Lehmer code).  No copy of the caller's data
is ever made: the engine only needs ``len()`` and ``swap(i, j)``.

Public API:
    .. autosummary::
        Permuter
        PermuterState
        iter_permutations
        PermutationVector
        SwappableCollection
        PermutationInvariantError
        as_swappable
        decode
        digits_to_permutation
        encode
        unrank
        unrank_many
        n_permutations
        get_check_mode
        set_check_mode
"""

from ._config import get_check_mode, set_check_mode
from ._typing import SwappableCollection
from .adapters import as_swappable
from .exceptions import PermutationInvariantError
from .factoradic import (
    decode,
    digits_to_permutation,
    encode,
    n_permutations,
    unrank,
    unrank_many,
)
from .permuter import Permuter, PermuterState, iter_permutations
from .vector import PermutationVector

__all__ = [
    "Permuter",
    "PermuterState",
    "iter_permutations",
    "PermutationVector",
    "SwappableCollection",
    "PermutationInvariantError",
    "as_swappable",
    "decode",
    "digits_to_permutation",
    "encode",
    "n_permutations",
    "unrank",
    "unrank_many",
    "get_check_mode",
    "set_check_mode",
]

__version__ = "0.1.0"
