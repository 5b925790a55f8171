"""
Example 1: Anagrams and seating plans
Enumerating permutations in place, jumping by rank, and permuting
NumPy / pandas containers without copying them.

Demonstrates:
- ``Permuter``: the permute() / set_next() protocol
- ``iter_permutations``: generator form with start / stop
- ``unrank`` / ``encode``: rank ↔ permutation conversion
- ``as_swappable`` adapters over NumPy rows and pandas Series
"""

import numpy as np
import pandas as pd

from lexperm import Permuter, encode, iter_permutations, n_permutations, unrank

# ============================================================================
# Full enumeration of a word's letters
# ============================================================================

letters = list("abcd")
permuter = Permuter.for_collection(letters)
words = []
while permuter.permute(letters):
    words.append("".join(letters))

assert len(words) == n_permutations(4)
assert letters == list("abcd"), "collection is restored after exhaustion"
print(f"{len(words)} arrangements: {', '.join(words[:6])}, …, {words[-1]}")

# ============================================================================
# Jump straight to a rank, then keep going
# ============================================================================

permuter.set_next(20)
tail = []
while permuter.permute(letters):
    tail.append("".join(letters))
print(f"From rank 20: {tail}")

# ============================================================================
# Rank ↔ permutation
# ============================================================================

vec = unrank(17, 4)
print(f"unrank(17, 4) → {list(vec)}; encode back → {encode(vec)}")

# ============================================================================
# Seating plan rows in a NumPy array (rows move as units)
# ============================================================================

guests = np.array([[1, 31], [2, 45], [3, 27]])
for arrangement in iter_permutations(guests, start=2, stop=5):
    print("seating:", arrangement[:, 0].tolist())
print("restored:", guests[:, 0].tolist())

# ============================================================================
# A pandas Series, permuted positionally (index labels stay put)
# ============================================================================

series = pd.Series(["red", "green", "blue"], index=["x", "y", "z"])
for s in iter_permutations(series, stop=3):
    print(dict(s))
