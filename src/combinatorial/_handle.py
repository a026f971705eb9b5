"""Resumable generator base class shared by every enumeration kind.

An :class:`EnumerationGenerator` is an explicit state object for one
enumeration over one caller-owned buffer.  Its lifecycle is:

``fresh``
    Constructed, no counters allocated, buffer untouched.
``running``
    The first :meth:`~EnumerationGenerator.step` allocated the private
    counters; every further step resumes exactly where the previous one
    returned.
``exhausted``
    The last vector was produced.  Counters are released and the buffer
    holds the kind's defined final state.  Further steps return
    ``EXHAUSTED`` without side effects.
``abandoned``
    The caller stopped early via :meth:`~EnumerationGenerator.abandon`.
    Counters are released and the buffer keeps the last produced
    vector.

Subclasses implement four hooks:

* ``_start()`` — allocate counters and prepare the buffer.
* ``_advance()`` — move to the next vector, ``False`` once exhausted.
* ``_finish()`` — put the buffer in its final state and drop counters.
* ``_release()`` — drop counters only (abandonment).

The zero-length case is handled here, once for all kinds: exactly one
empty iteration, and the buffer is never read or written.  Negative
lengths take the same path.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from typing_extensions import Self

from ._results import EnumerationStatus, StepResult
from ._typing import Buffer

logger = logging.getLogger(__name__)


class EnumerationGenerator:
    """Base class for the in-place, resumable enumeration generators.

    Generators are Python iterators as well: iterating yields the
    buffer object itself after every successful step.  Used as a
    context manager, leaving the block abandons a generator that has
    not been exhausted.

    Attributes:
        kind: Registered kind name of the concrete generator.
    """

    kind: ClassVar[str] = ""

    def __init__(self, buffer: Buffer, length: int) -> None:
        self._buffer = buffer
        self._length = length
        self._state = "fresh"
        self._produced = 0
        logger.debug("Created %s generator (length=%d)", self.kind, length)

    @property
    def buffer(self) -> Buffer:
        """The caller-owned buffer this generator mutates."""
        return self._buffer

    @property
    def length(self) -> int:
        """Number of buffer positions being enumerated."""
        return self._length

    @property
    def state(self) -> str:
        return self._state

    @property
    def produced(self) -> int:
        """Number of vectors produced so far."""
        return self._produced

    @property
    def status(self) -> EnumerationStatus:
        """Snapshot of this generator's progress."""
        return EnumerationStatus(
            kind=self.kind,
            length=self._length,
            state=self._state,
            produced=self._produced,
            expected=self.expected_count(),
        )

    def expected_count(self) -> int:
        """Total number of vectors a full enumeration produces."""
        raise NotImplementedError

    # ---- Step contract -------------------------------------------------

    def step(self) -> StepResult:
        """Advance the buffer to the next vector.

        Returns:
            ``StepResult.ADVANCED`` when the buffer holds a new vector,
            ``StepResult.EXHAUSTED`` once every vector was produced.
            Calling again after ``EXHAUSTED`` (or after
            :meth:`abandon`) returns ``EXHAUSTED`` with no side effects.
        """
        if self._state == "exhausted":
            return StepResult.EXHAUSTED
        if self._state == "abandoned":
            logger.debug("step() on abandoned %s generator ignored", self.kind)
            return StepResult.EXHAUSTED

        first = self._state == "fresh"
        if first:
            self._start()
            self._state = "running"

        if self._length <= 0:
            advanced = first
        else:
            advanced = self._advance()

        if advanced:
            self._produced += 1
            return StepResult.ADVANCED

        if self._length > 0:
            self._finish()
        else:
            self._release()
        self._state = "exhausted"
        logger.debug(
            "%s generator exhausted after %d vectors (length=%d)",
            self.kind,
            self._produced,
            self._length,
        )
        return StepResult.EXHAUSTED

    def abandon(self) -> None:
        """Stop the enumeration early and release the private counters.

        The buffer keeps the last produced vector.  Abandoning an
        exhausted or already abandoned generator does nothing.
        """
        if self._state in ("exhausted", "abandoned"):
            return
        self._release()
        self._state = "abandoned"
        logger.debug(
            "%s generator abandoned after %d vectors", self.kind, self._produced
        )

    # ---- Hooks ---------------------------------------------------------

    def _start(self) -> None:
        raise NotImplementedError

    def _advance(self) -> bool:
        raise NotImplementedError

    def _finish(self) -> None:
        self._release()

    def _release(self) -> None:
        raise NotImplementedError

    # ---- Python protocols ----------------------------------------------

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Buffer:
        if self.step():
            return self._buffer
        raise StopIteration

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.abandon()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(length={self._length}, "
            f"state={self._state!r}, produced={self._produced})"
        )
