"""Exception types raised by the lexperm engine.

Invalid ranks are not exceptional: :meth:`~lexperm.Permuter.set_next`
reports them with a ``False`` return.  The only package-specific error
is the one signalling caller misuse of a bound collection.
"""

from __future__ import annotations


class PermutationInvariantError(AssertionError):
    """A collection no longer matches the permutation vector driving it.

    Raised when the collection handed to an in-place step has a
    different length from the vector, which can only happen if the
    caller resized it mid-enumeration.  The vector/collection
    correspondence is lost at that point, so nothing tries to recover.

    Attributes:
        expected: Length of the permutation vector.
        actual: Length reported by the collection.
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"permutation vector has length {expected} but the collection "
            f"has length {actual}; the collection was resized while bound "
            f"to a Permuter."
        )
