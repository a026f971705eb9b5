"""Range-based generators built on a shared mixed-radix odometer.

Four generators enumerate vectors of *length* values drawn from the
half-open range ``[min, max)``:

=========================  ==========  =======
Generator                  Repetition  Ordered
=========================  ==========  =======
``CombinationGenerator``   yes         yes
``MultisetGenerator``      yes         no
``OrderedSubsetGenerator`` no          yes
``SubsetGenerator``        no          no
=========================  ==========  =======

Examples for ``min=1, max=3, length=2``:

* combination produces ``[1, 1]``, ``[1, 2]``, ``[2, 1]`` and ``[2, 2]``;
* multiset produces ``[1, 1]``, ``[2, 2]`` and one of ``[1, 2]`` /
  ``[2, 1]``;
* ordered subset produces both ``[1, 2]`` and ``[2, 1]``;
* subset produces one of ``[1, 2]`` / ``[2, 1]``.

Only the set of produced vectors is contractual.  For the unordered
kinds the arrangement that represents a multiset or subset is whatever
the odometer reaches first; do not rely on it being sorted.

The odometer
------------
Position 0 is the most significant digit.  A position that has not
been visited since its last carry holds ``max`` (one past the top of
the range).  Each step walks a cursor over the buffer:

* a position already at ``min`` resets to ``max`` and the carry moves
  the cursor one position to the left; a carry out of position 0 ends
  the enumeration;
* any other position is decremented and handed to the generator's
  ``_place`` hook, which may adjust the next position and returns the
  position the cursor moves to.

When the cursor runs off the right end, the buffer holds a vector and
the step returns.  The next step resumes at the last position.  The
first vector is therefore all ``max - 1``, and after exhaustion every
position is left at ``max - 1`` again.

Values only need ``<=``, ``>``, ``==`` and ``+``/``-`` with ``1``.
"""

from __future__ import annotations

from typing import Any

from ._handle import EnumerationGenerator
from ._typing import Buffer
from ._validation import check_range_arguments
from .counting import (
    combination_count,
    multiset_count,
    ordered_subset_count,
    subset_count,
)


class RangeOdometer(EnumerationGenerator):
    """Shared odometer for the range-based generators.

    Args:
        buffer: Caller-owned buffer with at least *length* writable
            positions.  Its contents are overwritten.
        min_value: Inclusive lower bound of the range.
        max_value: Exclusive upper bound of the range.
        length: Number of positions to enumerate.
    """

    def __init__(
        self, buffer: Buffer, min_value: Any, max_value: Any, length: int
    ) -> None:
        check_range_arguments(buffer, min_value, max_value, length)
        super().__init__(buffer, length)
        self._min = min_value
        self._max = max_value
        self._cursor: int | None = None

    @property
    def min(self) -> Any:
        """Inclusive lower bound of the range."""
        return self._min

    @property
    def max(self) -> Any:
        """Exclusive upper bound of the range."""
        return self._max

    def expected_count(self) -> int:
        return combination_count(self._min, self._max, self._length)

    def _place(self, pos: int) -> int:
        """Accept the freshly decremented value at *pos*.

        Returns:
            The position the cursor moves to next.
        """
        return pos + 1

    def _start(self) -> None:
        buf, top = self._buffer, self._max
        for i in range(self._length):
            buf[i] = top
        self._cursor = 0

    def _advance(self) -> bool:
        buf, bottom, top = self._buffer, self._min, self._max
        length = self._length
        pos = self._cursor
        while pos < length:
            if buf[pos] <= bottom:
                buf[pos] = top
                if pos == 0:
                    return False
                pos -= 1
            else:
                buf[pos] -= 1
                pos = self._place(pos)
        self._cursor = length - 1
        return True

    def _finish(self) -> None:
        buf, last = self._buffer, self._max - 1
        for i in range(self._length):
            buf[i] = last
        self._release()

    def _release(self) -> None:
        self._cursor = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(min={self._min!r}, max={self._max!r}, "
            f"length={self._length}, state={self._state!r}, "
            f"produced={self._produced})"
        )


class CombinationGenerator(RangeOdometer):
    """Ordered selections with repetition: every vector in ``[min, max)**L``.

    Positions vary independently, so this is the bare odometer.
    """

    kind = "combination"


class MultisetGenerator(RangeOdometer):
    """One vector per size-*length* multiset over ``[min, max)``.

    After a position is decremented, the next position is capped at
    one above it, so once that position is decremented in turn the
    vector never increases from left to right.
    """

    kind = "multiset"

    def _place(self, pos: int) -> int:
        buf = self._buffer
        nxt = pos + 1
        if nxt < self._length and buf[nxt] > buf[pos]:
            buf[nxt] = buf[pos] + 1
        return nxt

    def expected_count(self) -> int:
        return multiset_count(self._min, self._max, self._length)


class SubsetGenerator(RangeOdometer):
    """One vector per size-*length* subset of ``[min, max)``.

    Same as :class:`MultisetGenerator` except the next position is
    capped at the current value itself, so vectors strictly decrease
    and every entry is distinct.  A length larger than the range
    produces nothing.
    """

    kind = "subset"

    def _place(self, pos: int) -> int:
        buf = self._buffer
        nxt = pos + 1
        if nxt < self._length and buf[nxt] > buf[pos]:
            buf[nxt] = buf[pos]
        return nxt

    def expected_count(self) -> int:
        return subset_count(self._min, self._max, self._length)


class OrderedSubsetGenerator(RangeOdometer):
    """Every ordering of every size-*length* subset of ``[min, max)``.

    A decremented value that already appears to the left is rejected
    and the same position is decremented again.
    """

    kind = "ordered_subset"

    def _place(self, pos: int) -> int:
        buf = self._buffer
        value = buf[pos]
        for j in range(pos):
            if buf[j] == value:
                return pos
        return pos + 1

    def expected_count(self) -> int:
        return ordered_subset_count(self._min, self._max, self._length)
