"""In-place permutation generators.

Two generators rearrange the first *length* positions of a caller-owned
buffer, one ordering per step:

1. **Simple permutations** (:class:`SimplePermutationGenerator`) —
   every ordering of a buffer whose entries are pairwise distinct,
   produced by an iterative form of Heap's algorithm.  Each step costs
   a single swap, and elements need no equality or ordering at all.
   Equal entries are not detected: they simply produce repeated
   vectors.  The final arrangement after exhaustion is unspecified.

2. **Distinct permutations** (:class:`PermutationGenerator`) — every
   *distinct* ordering of a buffer that may contain equal entries.
   Equal entries are detected with ``==`` only (no hashing, no
   sorting) through an equivalence index built once at construction.
   The buffer is restored to its original order after exhaustion.

For ``[1, 1, 2]`` the simple generator produces six vectors (each
distinct ordering twice) while the distinct generator produces exactly
``[1, 1, 2]``, ``[1, 2, 1]`` and ``[2, 1, 1]``.
"""

from __future__ import annotations

from ._handle import EnumerationGenerator
from ._typing import Buffer
from ._validation import check_permutation_arguments
from .counting import count_from_index, simple_permutation_count

# ------------------------------------------------------------------ #
# Equivalence index
# ------------------------------------------------------------------ #
#
# Position i of the index holds the first position j <= i whose value
# equals buffer[i].  Two positions hold equal values exactly when they
# share an index entry, so the index partitions positions into
# equivalence classes using nothing but ==.
#
# Example:
#   buffer = ["b", "a", "b", "c", "a"]
#   index  = [ 0,   1,   0,   3,   1 ]


def equivalence_index(buffer: Buffer, length: int) -> list[int]:
    """Map each position to the first position holding an equal value.

    Args:
        buffer: Sequence whose elements support ``==``.
        length: Number of leading positions to index.

    Returns:
        List of *length* integers, ``index[i] <= i``.
    """
    index: list[int] = []
    for i in range(length):
        value = buffer[i]
        index.append(next((j for j in range(i) if buffer[j] == value), i))
    return index


# ------------------------------------------------------------------ #
# Heap's algorithm, iterative form
# ------------------------------------------------------------------ #
#
# One counter per depth d.  At depth d the counter runs from 0 to
# L - d - 1; every time it advances (except the last time) position
# L - d - 1 is swapped with position 0 when L - d is odd, or with
# position counter when L - d is even.  Between two swaps the generator
# descends to the deepest level, which emits the current arrangement
# and marks itself done by setting its counter past its limit.


class SimplePermutationGenerator(EnumerationGenerator):
    """Every ordering of *length* pairwise-distinct buffer entries.

    Args:
        buffer: Caller-owned buffer holding the initial arrangement.
        length: Number of leading positions to permute.
    """

    kind = "simple_permutation"

    def __init__(self, buffer: Buffer, length: int) -> None:
        check_permutation_arguments(buffer, length)
        super().__init__(buffer, length)
        self._counters: list[int] | None = None
        self._depth = 0

    def expected_count(self) -> int:
        return simple_permutation_count(self._length)

    def _start(self) -> None:
        self._counters = [0] * max(self._length, 1)
        self._depth = 0

    def _advance(self) -> bool:
        buf, length = self._buffer, self._length
        counters, depth = self._counters, self._depth
        while True:
            span = length - depth
            if span >= 2 and counters[depth] < span:
                depth += 1
                counters[depth] = 0
            elif counters[depth] >= span:
                if depth == 0:
                    return False
                depth -= 1
                span += 1
                if counters[depth] < span - 1:
                    last = span - 1
                    other = 0 if span % 2 else counters[depth]
                    buf[last], buf[other] = buf[other], buf[last]
                counters[depth] += 1
            else:
                counters[depth] = span + 1
                self._depth = depth
                return True

    def _release(self) -> None:
        self._counters = None
        self._depth = 0


# ------------------------------------------------------------------ #
# Distinct permutations
# ------------------------------------------------------------------ #
#
# Output position p owns a counter naming the source position (in the
# original arrangement) whose value it holds.  Counters run downward
# from L - 1 to 0, and the positions behave like a backtracking
# odometer: a counter that runs out resets and the previous position
# tries its next source.
#
# Among sources of one equivalence class, only the assignment that uses
# them in increasing source order across output positions is emitted.
# When position p tries source s of class K, the first earlier position
# j holding a class-K source t >= s decides:
#
#   t == s   the source is taken; try the next source at p.
#   t >  s   s is an unused class-K source below t, so the prefix up to
#            j can never be completed in increasing order.  Reset every
#            position after j and try the next source at j.
#
# Values are copied from the saved original arrangement, so the buffer
# is written only when a source is accepted.


class PermutationGenerator(EnumerationGenerator):
    """Every distinct ordering of *length* buffer entries.

    The equivalence index and a copy of the original arrangement are
    taken at construction; the caller must not modify the buffer
    afterwards.

    Args:
        buffer: Caller-owned buffer holding the initial arrangement.
            Elements must support ``==``.
        length: Number of leading positions to permute.
    """

    kind = "permutation"

    def __init__(self, buffer: Buffer, length: int) -> None:
        check_permutation_arguments(buffer, length)
        super().__init__(buffer, length)
        self._index = equivalence_index(buffer, length)
        self._original = [buffer[i] for i in range(length)]
        self._sources: list[int] | None = None
        self._cursor = 0

    @property
    def index(self) -> list[int]:
        """Equivalence index of the original arrangement."""
        return list(self._index)

    def expected_count(self) -> int:
        return count_from_index(self._index)

    def _start(self) -> None:
        self._sources = [self._length] * self._length
        self._cursor = 0

    def _advance(self) -> bool:
        buf, index, original = self._buffer, self._index, self._original
        sources, length = self._sources, self._length
        pos = self._cursor
        while pos < length:
            if sources[pos] == 0:
                sources[pos] = length
                if pos == 0:
                    return False
                pos -= 1
                continue

            sources[pos] -= 1
            source = sources[pos]
            klass = index[source]
            for j in range(pos):
                if index[sources[j]] == klass and sources[j] >= source:
                    break
            else:
                buf[pos] = original[source]
                pos += 1
                continue

            if sources[j] > source:
                for k in range(j + 1, pos + 1):
                    sources[k] = length
                pos = j

        self._cursor = length - 1
        return True

    def _finish(self) -> None:
        buf = self._buffer
        for i, value in enumerate(self._original):
            buf[i] = value
        self._release()

    def _release(self) -> None:
        self._sources = None
        self._cursor = 0
