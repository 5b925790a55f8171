"""Adapters that expose ordinary containers as swappable collections.

The engine only ever talks to a :class:`~lexperm.SwappableCollection`:
something with ``len()`` and ``swap(i, j)``.  This module wraps the
containers people actually hold so they never have to write that
capability by hand:

* **Mutable sequences** (``list``, ``bytearray``, any
  :class:`collections.abc.MutableSequence`) swap via item assignment.
* **NumPy arrays** swap along axis 0, so a 2-D array permutes its rows
  and every row moves as a unit.
* **pandas objects** swap positional row values with ``.iloc``.  Index
  labels stay where they are; a ``DataFrame`` is swapped column by
  column so each column keeps its dtype.

None of the wrappers copy the underlying data: every swap writes through
to the object the caller passed in.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

import numpy as np
import pandas as pd

from ._typing import SwappableCollection


class SequenceSwapper:
    """Swap capability over a :class:`~collections.abc.MutableSequence`."""

    __slots__ = ("data",)

    def __init__(self, data: MutableSequence) -> None:
        self.data = data

    def __len__(self) -> int:
        return len(self.data)

    def swap(self, i: int, j: int) -> None:
        data = self.data
        data[i], data[j] = data[j], data[i]

    def __repr__(self) -> str:
        return f"SequenceSwapper({self.data!r})"


class ArraySwapper:
    """Swap capability over a NumPy array, along its first axis.

    Fancy indexing on the right-hand side produces a temporary copy of
    the two rows, so the assignment is safe for rows of any width.
    """

    __slots__ = ("data",)

    def __init__(self, data: np.ndarray) -> None:
        if data.ndim == 0:
            raise TypeError("Cannot permute a 0-dimensional array.")
        if not data.flags.writeable:
            raise ValueError(
                "Cannot permute a read-only array in place; pass a "
                "writeable array (e.g. ``arr.copy()``)."
            )
        self.data = data

    def __len__(self) -> int:
        return self.data.shape[0]

    def swap(self, i: int, j: int) -> None:
        self.data[[i, j]] = self.data[[j, i]]

    def __repr__(self) -> str:
        return f"ArraySwapper(shape={self.data.shape}, dtype={self.data.dtype})"


class FrameSwapper:
    """Positional row swap capability over a pandas Series or DataFrame."""

    __slots__ = ("data",)

    def __init__(self, data: pd.Series | pd.DataFrame) -> None:
        self.data = data

    def __len__(self) -> int:
        return len(self.data)

    def swap(self, i: int, j: int) -> None:
        data = self.data
        if isinstance(data, pd.Series):
            data.iloc[[i, j]] = data.iloc[[j, i]].to_numpy()
            return
        for k in range(data.shape[1]):
            data.iloc[[i, j], k] = data.iloc[[j, i], k].to_numpy()

    def __repr__(self) -> str:
        return f"FrameSwapper({type(self.data).__name__}, rows={len(self.data)})"


def as_swappable(obj: Any) -> SwappableCollection:
    """Return a :class:`~lexperm.SwappableCollection` view of *obj*.

    Objects that already provide ``__len__`` and ``swap`` are returned
    unchanged; NumPy arrays, pandas objects, and mutable sequences are
    wrapped (see the module docstring for the swap semantics of each).

    Args:
        obj: The container to permute in place.

    Returns:
        An object exposing ``len()`` and ``swap(i, j)`` that writes
        through to *obj*.

    Raises:
        TypeError: If *obj* is immutable (``tuple``, ``str``, ...) or
            otherwise cannot be swapped in place.
        ValueError: If *obj* is a read-only NumPy array.
    """
    if isinstance(obj, SwappableCollection):
        return obj
    if isinstance(obj, np.ndarray):
        return ArraySwapper(obj)
    if isinstance(obj, (pd.Series, pd.DataFrame)):
        return FrameSwapper(obj)
    if isinstance(obj, MutableSequence):
        return SequenceSwapper(obj)

    raise TypeError(
        f"Cannot permute {type(obj).__name__} in place: expected a mutable "
        f"sequence, a NumPy array, a pandas Series/DataFrame, or an object "
        f"implementing __len__ and swap(i, j)."
    )
