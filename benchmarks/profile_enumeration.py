"""Profile in-place enumeration and rank jumps across collection sizes.

Measures wall-clock time per permutation step, swap count, and peak
memory for a full ``Permuter`` drain, plus the cost of a
``set_next`` + ``permute`` jump, across a grid of sizes and container
types (list, NumPy rows, pandas Series).

Usage::

    python benchmarks/profile_enumeration.py          # full grid
    python benchmarks/profile_enumeration.py --quick  # reduced grid

Outputs:
    benchmarks/results/enumeration_profile.csv
"""

from __future__ import annotations

import argparse
import platform
import sys
import time
import tracemalloc
from pathlib import Path

import numpy as np
import pandas as pd

# Ensure the package is importable when running from the repo root.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))
from lexperm import Permuter, n_permutations  # noqa: E402

# ------------------------------------------------------------------ #
# Configuration
# ------------------------------------------------------------------ #

N_VALUES_FULL = [3, 5, 7, 8, 9]
N_VALUES_QUICK = [3, 5, 7]
CONTAINERS = ["list", "numpy", "pandas"]
JUMPS = 200
SEED = 42

RESULTS_DIR = Path(__file__).resolve().parent / "results"


# ------------------------------------------------------------------ #
# Benchmark helpers
# ------------------------------------------------------------------ #


class _CountingList:
    """List-backed collection that counts swaps."""

    def __init__(self, n: int) -> None:
        self.items = list(range(n))
        self.swaps = 0

    def __len__(self) -> int:
        return len(self.items)

    def swap(self, i: int, j: int) -> None:
        self.swaps += 1
        self.items[i], self.items[j] = self.items[j], self.items[i]


def _make_container(kind: str, n: int):
    if kind == "list":
        return _CountingList(n)
    if kind == "numpy":
        return np.arange(n * 4, dtype=float).reshape(n, 4)
    return pd.Series(np.arange(n))


def _drain(kind: str, n: int) -> dict:
    data = _make_container(kind, n)
    permuter = Permuter.for_collection(data)

    tracemalloc.start()
    t0 = time.perf_counter()
    steps = 0
    while permuter.permute(data):
        steps += 1
    elapsed = time.perf_counter() - t0
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    assert steps == n_permutations(n)
    return {
        "container": kind,
        "n": n,
        "steps": steps,
        "total_s": elapsed,
        "us_per_step": 1e6 * elapsed / steps,
        "swaps": getattr(data, "swaps", np.nan),
        "peak_kib": peak / 1024,
    }


def _jumps(n: int, rng: np.random.Generator) -> float:
    data = list(range(n))
    permuter = Permuter(n)
    ranks = rng.integers(0, n_permutations(n), size=JUMPS)
    t0 = time.perf_counter()
    for rank in ranks:
        permuter.set_next(int(rank))
        permuter.permute(data)
    return 1e6 * (time.perf_counter() - t0) / JUMPS


# ------------------------------------------------------------------ #
# Main
# ------------------------------------------------------------------ #


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--quick", action="store_true", help="reduced grid")
    args = parser.parse_args()

    n_values = N_VALUES_QUICK if args.quick else N_VALUES_FULL
    rng = np.random.default_rng(SEED)

    print(f"Python {platform.python_version()} on {platform.machine()}")
    rows = []
    for n in n_values:
        jump_us = _jumps(n, rng)
        for kind in CONTAINERS:
            # pandas swaps are slow; skip the largest drains.
            if kind == "pandas" and n > 7:
                continue
            row = _drain(kind, n)
            row["us_per_jump"] = jump_us
            rows.append(row)
            print(
                f"  {kind:>6}  n={n:<2}  {row['steps']:>7} steps  "
                f"{row['us_per_step']:8.2f} µs/step  "
                f"{jump_us:8.2f} µs/jump  peak {row['peak_kib']:.1f} KiB"
            )

    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    out = RESULTS_DIR / "enumeration_profile.csv"
    pd.DataFrame(rows).to_csv(out, index=False)
    print(f"Wrote {out}")


if __name__ == "__main__":
    main()
