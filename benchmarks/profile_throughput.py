"""Profile step throughput for every enumeration kind.

Measures wall-clock time and vectors per second for a full enumeration
of each kind across a grid of lengths, on both list and NumPy buffers.

Usage::

    python benchmarks/profile_throughput.py          # full grid
    python benchmarks/profile_throughput.py --quick   # reduced grid for smoke test

Outputs:
    benchmarks/results/throughput_profile.csv
"""

from __future__ import annotations

import argparse
import platform
import sys
import time
from pathlib import Path

import numpy as np
import pandas as pd

# Ensure the package is importable when running from the repo root.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))
from combinatorial import create, expected_count  # noqa: E402

# ------------------------------------------------------------------ #
# Configuration
# ------------------------------------------------------------------ #

RANGE_MAX = 10

LENGTHS_FULL = [2, 3, 4, 5, 6]
LENGTHS_QUICK = [2, 3, 4]

PERM_LENGTHS_FULL = [4, 6, 8, 9]
PERM_LENGTHS_QUICK = [4, 6]

REPEATS = 3

RANGE_KINDS = ["combination", "multiset", "subset", "ordered_subset"]
PERM_KINDS = ["simple_permutation", "permutation"]

RESULTS_DIR = Path(__file__).resolve().parent / "results"


# ------------------------------------------------------------------ #
# Benchmark helpers
# ------------------------------------------------------------------ #


def _make_buffer(kind: str, length: int, backend: str) -> list | np.ndarray:
    """Build a buffer for *kind*; permutation inputs get a few duplicates."""
    if kind in PERM_KINDS:
        values = [i // 2 if kind == "permutation" else i for i in range(length)]
    else:
        values = [0] * length
    if backend == "numpy":
        return np.array(values, dtype=np.int64)
    return values


def _args(kind: str, length: int) -> tuple:
    """Constructor arguments after the buffer."""
    if kind in PERM_KINDS:
        return (length,)
    return (0, RANGE_MAX, length)


def _time_one(kind: str, length: int, backend: str) -> tuple[float, int]:
    """Return (seconds, vectors) for one full enumeration."""
    buf = _make_buffer(kind, length, backend)
    gen = create(kind, buf, *_args(kind, length))
    t0 = time.perf_counter()
    n = 0
    while gen.step():
        n += 1
    return time.perf_counter() - t0, n


def run(quick: bool) -> pd.DataFrame:
    lengths = LENGTHS_QUICK if quick else LENGTHS_FULL
    perm_lengths = PERM_LENGTHS_QUICK if quick else PERM_LENGTHS_FULL

    grid = [(k, L) for k in RANGE_KINDS for L in lengths]
    grid += [(k, L) for k in PERM_KINDS for L in perm_lengths]

    records = []
    for kind, length in grid:
        for backend in ("list", "numpy"):
            times = []
            n = 0
            for _ in range(REPEATS):
                elapsed, n = _time_one(kind, length, backend)
                times.append(elapsed)
            best = min(times)
            if kind == "permutation":
                count_args = (_make_buffer(kind, length, backend), length)
            else:
                count_args = _args(kind, length)
            expected = expected_count(kind, *count_args)
            records.append(
                {
                    "kind": kind,
                    "length": length,
                    "backend": backend,
                    "vectors": n,
                    "expected": expected,
                    "seconds": best,
                    "vectors_per_sec": n / best if best > 0 else float("nan"),
                }
            )
            print(
                f"{kind:>18s}  L={length:<2d} {backend:>5s}  "
                f"{n:>9d} vectors  {best:8.4f}s"
            )
    return pd.DataFrame.from_records(records)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--quick", action="store_true", help="reduced grid")
    opts = parser.parse_args()

    print(f"Python {platform.python_version()} on {platform.machine()}")
    df = run(opts.quick)

    mismatched = df[df["vectors"] != df["expected"]]
    if not mismatched.empty:
        print("WARNING: vector counts differ from closed-form totals:")
        print(mismatched.to_string(index=False))

    RESULTS_DIR.mkdir(parents=True, exist_ok=True)
    out = RESULTS_DIR / "throughput_profile.csv"
    df.to_csv(out, index=False)
    print(f"Saved {out}")


if __name__ == "__main__":
    main()
