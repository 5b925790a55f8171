"""Stateful driver for in-place lexicographic enumeration.

A :class:`Permuter` sequences the factoradic decoder and the
permutation-vector primitives across repeated calls.  It stores only
the collection *length*: the collection itself is passed into every
call that touches it, so a Permuter never holds a reference to caller
data between calls.

Typical use::

    data = ["a", "b", "c"]
    permuter = Permuter.for_collection(data)
    while permuter.permute(data):
        print(data)          # abc, acb, bac, bca, cab, cba
    # data is back to ["a", "b", "c"]

State
-----
The driver tracks three things:

* ``current``: the vector the collection holds (or will hold once
  materialized).
* ``materialized``: whether ``current`` has been written into the
  collection yet.
* ``pending_reset``: after a jump, the vector that takes the
  collection from its present physical arrangement back to the
  original order.

Jumps
-----
:meth:`Permuter.set_next` only stages a target; the next
:meth:`Permuter.permute` first undoes whatever the collection holds
(``pending_reset``) and then writes the target.  If two jumps are
staged back to back, the reset captured by the first one is kept: the
collection still holds the arrangement from before the first jump, and
the inverse of the second (never materialized) target would not undo
it.
"""

from __future__ import annotations

import enum
import logging
import math
import operator
import warnings
from collections.abc import Generator
from typing import Any, TypeVar

from ._typing import Rank
from .adapters import as_swappable
from .exceptions import PermutationInvariantError
from .factoradic import decode, digits_to_permutation, n_permutations
from .vector import PermutationVector

logger = logging.getLogger(__name__)

T = TypeVar("T")

# iter_permutations warns above 10! permutations when no stop is given.
_LARGE_ENUMERATION = math.factorial(10)


class PermuterState(enum.Enum):
    """Lifecycle of a :class:`Permuter`."""

    FRESH = "fresh"
    """Nothing materialized since construction, a jump, or a reset."""

    MATERIALIZED = "materialized"
    """The collection holds ``current``; :meth:`Permuter.permute` steps."""

    EXHAUSTED = "exhausted"
    """The last enumeration ran out and the collection was restored."""


class Permuter:
    """Enumerate permutations of a collection in place, in lexicographic order.

    Args:
        size: Length of the collections this permuter will drive.
            Fixed for the lifetime of the permuter.

    Attributes:
        size: The bound collection length.
    """

    def __init__(self, size: int) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"Permuter size must be non-negative, got {size}.")
        self.size: int = size
        self._current = PermutationVector.identity(size)
        self._materialized = False
        self._reset: PermutationVector | None = None
        self._exhausted = False

    @classmethod
    def for_collection(cls, collection: Any) -> Permuter:
        """Return a permuter sized for *collection*."""
        return cls(len(as_swappable(collection)))

    def __repr__(self) -> str:
        return (
            f"Permuter(size={self.size}, state={self.state.value}, "
            f"current={list(self._current)})"
        )

    # ---- Introspection -----------------------------------------------

    @property
    def current(self) -> PermutationVector:
        """A copy of the current permutation vector."""
        return self._current.copy()

    @property
    def materialized(self) -> bool:
        return self._materialized

    @property
    def pending_reset(self) -> PermutationVector | None:
        """A copy of the staged reset vector, or ``None``."""
        return None if self._reset is None else self._reset.copy()

    @property
    def rank(self) -> Rank:
        """Lexicographic rank of the current vector."""
        return self._current.rank

    @property
    def state(self) -> PermuterState:
        if self._materialized:
            return PermuterState.MATERIALIZED
        if self._exhausted:
            return PermuterState.EXHAUSTED
        return PermuterState.FRESH

    # ---- Enumeration protocol ----------------------------------------

    def _bind(self, collection: Any) -> Any:
        target = as_swappable(collection)
        if len(target) != self.size:
            raise PermutationInvariantError(self.size, len(target))
        return target

    def set_next(self, rank: Rank) -> bool:
        """Make the next :meth:`permute` call produce permutation *rank*.

        Never touches any collection.  Enumeration then continues in
        lexicographic order from *rank*.

        Args:
            rank: Target rank in ``[0, size!)``.

        Returns:
            ``True`` if the jump was staged.  ``False`` if *rank* is out
            of range, in which case nothing changes.
        """
        digits, ok = decode(rank, self.size)
        if not ok:
            logger.debug(
                "Rejected rank %s for size %d (limit %d)",
                rank,
                self.size,
                n_permutations(self.size),
            )
            return False

        if self._reset is None:
            self._reset = self._current.inverse()
        if self.size == 0:
            self._current = PermutationVector.identity(0)
        else:
            self._current = digits_to_permutation(digits)
        self._materialized = False
        self._exhausted = False
        logger.debug("Staged jump to rank %s: %s", rank, list(self._current))
        return True

    def permute(self, collection: Any) -> bool:
        """Advance *collection* to the next permutation.

        Args:
            collection: The collection this permuter drives; the same
                object (or a view of it) on every call.

        Returns:
            ``True`` if *collection* now holds the next (or freshly
            jumped-to) permutation.  ``False`` once the enumeration is
            exhausted; *collection* is then back in its original order
            and the next call starts over from the identity.

        Raises:
            PermutationInvariantError: If ``len(collection)`` is not
                :attr:`size`.
        """
        target = self._bind(collection)

        if self._reset is not None:
            self._reset.apply(target)
            self._reset = None

        if not self._materialized:
            self._current.apply(target)
            self._materialized = True
            self._exhausted = False
            return True

        if self._current.next(target):
            return True

        self._current.inverse().apply(target)
        self._current = PermutationVector.identity(self.size)
        self._materialized = False
        self._exhausted = True
        logger.debug(
            "Enumeration of size %d exhausted; original order restored", self.size
        )
        return False

    def reset(self, collection: Any) -> None:
        """Return *collection* to its original order and start over.

        Safe from any state: a staged jump is discarded, a materialized
        permutation is undone, and an already restored collection is
        left alone.
        """
        target = self._bind(collection)
        if self._reset is not None:
            self._reset.apply(target)
        elif self._materialized:
            self._current.inverse().apply(target)
        self._current = PermutationVector.identity(self.size)
        self._reset = None
        self._materialized = False
        self._exhausted = False
        logger.debug("Permuter of size %d reset to original order", self.size)


def iter_permutations(
    collection: T,
    start: int = 0,
    stop: int | None = None,
) -> Generator[T, None, None]:
    """Yield *collection* once per permutation, permuted in place.

    The same object is yielded every time; copy it if you need to keep
    an arrangement.  When the generator finishes, whether by running
    out, reaching *stop*, or being closed early, *collection* is back in
    its original order.

    Args:
        collection: Anything accepted by
            :func:`~lexperm.adapters.as_swappable`.
        start: Rank of the first permutation to yield.
        stop: Rank at which to stop (exclusive).  ``None`` runs to the
            last permutation.

    Yields:
        *collection*, holding each permutation from *start* onward.

    Raises:
        ValueError: If *start* is out of range or *stop* < *start*.

    Warns:
        UserWarning: If *stop* is ``None`` and the enumeration covers
            more than ``10!`` permutations.
    """
    target = as_swappable(collection)
    permuter = Permuter(len(target))
    total = n_permutations(permuter.size)

    if stop is not None and stop < start:
        raise ValueError(f"stop ({stop}) must not be less than start ({start}).")
    if not permuter.set_next(start):
        raise ValueError(
            f"start={start} is out of range for a collection of length "
            f"{permuter.size}: valid ranks are 0 to {total - 1}."
        )
    if stop is None and total - start > _LARGE_ENUMERATION:
        warnings.warn(
            f"Enumerating {total - start} permutations of a collection of "
            f"length {permuter.size}; pass stop= to bound the run.",
            UserWarning,
            stacklevel=2,
        )

    rank = start
    try:
        while (stop is None or rank < stop) and permuter.permute(target):
            yield collection
            rank += 1
    finally:
        permuter.reset(target)
