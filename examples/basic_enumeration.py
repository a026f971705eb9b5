"""
Walkthrough: every enumeration kind on small inputs

Demonstrates:
- Driving a generator by hand with ``step()`` / ``abandon()``
- The ``each_*`` loop adapters, including ``break`` and ``continue``
- ``enumerate_all`` for collecting every vector into a NumPy array
- The buffer's final state after exhaustion
"""

import numpy as np

from combinatorial import (
    CombinationGenerator,
    PermutationGenerator,
    each_multiset,
    each_ordered_subset,
    each_simple_permutation,
    each_subset,
    enumerate_all,
)

# ============================================================================
# Combinations: ordered, repetition allowed
# ============================================================================

buf = [0, 0]
gen = CombinationGenerator(buf, 1, 3, 2)
while gen.step():
    print("combination   ", buf)
assert buf == [2, 2], "range generators end on max - 1"
print(f"final buffer  → {buf}  ({gen.produced} vectors)")

# ============================================================================
# Multisets and subsets: one arrangement per selection
# ============================================================================

for vec in each_multiset([0, 0], 1, 3, 2):
    print("multiset      ", vec)

for vec in each_subset([0, 0, 0], 0, 5, 3):
    print("subset        ", sorted(vec))

# ============================================================================
# Ordered subsets, skipping vectors with `continue`
# ============================================================================

for vec in each_ordered_subset([0, 0], 0, 4, 2):
    if vec[0] < vec[1]:
        continue
    print("descending    ", vec)

# ============================================================================
# Permutations, stopping early with `break`
# ============================================================================

letters = ["a", "b", "c", "d"]
for i, vec in enumerate(each_simple_permutation(letters, 4)):
    if i == 5:
        break
    print("permutation   ", "".join(vec))
print(f"after break   → {letters}  (last produced vector is kept)")

word = list("level")
with PermutationGenerator(word, len(word)) as distinct:
    n = sum(1 for _ in distinct)
print(f"distinct orderings of 'level': {n}, restored → {''.join(word)}")

# ============================================================================
# Collecting everything into an array
# ============================================================================

rows = enumerate_all("multiset", np.zeros(3, dtype=np.int8), 0, 4, 3)
print(f"multiset rows: shape={rows.shape}, dtype={rows.dtype}")
print(rows)
