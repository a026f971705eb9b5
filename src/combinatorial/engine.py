"""Generator registry, loop adapters, and bulk materialisation.

Three layers sit on top of the generator classes:

1. **Registry** — :func:`resolve_generator` maps a kind name
   (``"combination"``, ``"multiset"``, ``"subset"``,
   ``"ordered_subset"``, ``"simple_permutation"``, ``"permutation"``)
   to its class, and :func:`register_generator` adds new ones.
   :func:`create` constructs a generator by name.

2. **Loop adapters** — ``each_combination`` and friends are generator
   functions that drive one enumeration and yield the buffer after
   every step::

       buf = [0] * 3
       for vec in each_subset(buf, 0, 5, 3):
           if vec[0] == 2:
               break
           ...

   ``break`` closes the adapter, which abandons the enumeration and
   leaves the buffer on the last vector; ``continue`` simply requests
   the next step.

3. **Materialisation** — :func:`enumerate_all` runs one enumeration to
   the end (or to *max_rows*) and returns every vector as a row of a
   NumPy array of shape ``(n_vectors, length)``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import numpy as np

from ._compat import _snapshot
from ._handle import EnumerationGenerator
from ._typing import Buffer
from .odometer import (
    CombinationGenerator,
    MultisetGenerator,
    OrderedSubsetGenerator,
    SubsetGenerator,
)
from .permutations import PermutationGenerator, SimplePermutationGenerator

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------ #
# Registry
# ------------------------------------------------------------------ #

_GENERATORS: dict[str, type[EnumerationGenerator]] = {}
"""Registry mapping kind names to concrete generator classes."""


def _ensure_registry() -> None:
    """Populate the registry with the built-in kinds on first access."""
    if _GENERATORS:
        return
    for cls in (
        CombinationGenerator,
        MultisetGenerator,
        SubsetGenerator,
        OrderedSubsetGenerator,
        SimplePermutationGenerator,
        PermutationGenerator,
    ):
        _GENERATORS[cls.kind] = cls


def register_generator(name: str, cls: type) -> None:
    """Register a generator class under *name*.

    Args:
        name: Lookup key used by :func:`resolve_generator`.
        cls: A subclass of
            :class:`~combinatorial._handle.EnumerationGenerator`.

    Raises:
        TypeError: If *cls* is not an ``EnumerationGenerator`` subclass.
    """
    if not (isinstance(cls, type) and issubclass(cls, EnumerationGenerator)):
        msg = f"{cls!r} is not an EnumerationGenerator subclass."
        raise TypeError(msg)
    _ensure_registry()
    _GENERATORS[name] = cls


def resolve_generator(name: str) -> type[EnumerationGenerator]:
    """Return the generator class registered under *name*.

    Raises:
        ValueError: If *name* is not registered.
    """
    _ensure_registry()
    cls = _GENERATORS.get(name)
    if cls is None:
        valid = ", ".join(sorted(_GENERATORS))
        raise ValueError(f"Invalid kind '{name}'. Choose from: {valid}.")
    return cls


def create(kind: str, buffer: Buffer, *args: Any) -> EnumerationGenerator:
    """Construct a generator by kind name.

    Args:
        kind: Registered kind name.
        buffer: Caller-owned buffer.
        *args: Remaining constructor arguments, ``(min, max, length)``
            for the range kinds or ``(length,)`` for the permutation
            kinds.
    """
    return resolve_generator(kind)(buffer, *args)


# ------------------------------------------------------------------ #
# Loop adapters
# ------------------------------------------------------------------ #


def _drive(gen: EnumerationGenerator) -> Iterator[Buffer]:
    with gen:
        while gen.step():
            yield gen.buffer


def each_combination(
    buffer: Buffer, min_value: Any, max_value: Any, length: int
) -> Iterator[Buffer]:
    """Yield *buffer* once per vector of :class:`CombinationGenerator`."""
    yield from _drive(CombinationGenerator(buffer, min_value, max_value, length))


def each_multiset(
    buffer: Buffer, min_value: Any, max_value: Any, length: int
) -> Iterator[Buffer]:
    """Yield *buffer* once per vector of :class:`MultisetGenerator`."""
    yield from _drive(MultisetGenerator(buffer, min_value, max_value, length))


def each_subset(
    buffer: Buffer, min_value: Any, max_value: Any, length: int
) -> Iterator[Buffer]:
    """Yield *buffer* once per vector of :class:`SubsetGenerator`."""
    yield from _drive(SubsetGenerator(buffer, min_value, max_value, length))


def each_ordered_subset(
    buffer: Buffer, min_value: Any, max_value: Any, length: int
) -> Iterator[Buffer]:
    """Yield *buffer* once per vector of :class:`OrderedSubsetGenerator`."""
    yield from _drive(OrderedSubsetGenerator(buffer, min_value, max_value, length))


def each_simple_permutation(buffer: Buffer, length: int) -> Iterator[Buffer]:
    """Yield *buffer* once per vector of :class:`SimplePermutationGenerator`."""
    yield from _drive(SimplePermutationGenerator(buffer, length))


def each_permutation(buffer: Buffer, length: int) -> Iterator[Buffer]:
    """Yield *buffer* once per vector of :class:`PermutationGenerator`."""
    yield from _drive(PermutationGenerator(buffer, length))


# ------------------------------------------------------------------ #
# Materialisation
# ------------------------------------------------------------------ #


def enumerate_all(
    kind: str,
    buffer: Buffer,
    *args: Any,
    max_rows: int | None = None,
) -> np.ndarray:
    """Run one enumeration and collect every vector.

    The buffer is mutated exactly as a hand-driven enumeration would
    mutate it: after a complete run it holds the kind's final state,
    after a run cut short by *max_rows* it holds the last collected
    vector.

    Args:
        kind: Registered kind name.
        buffer: Caller-owned buffer.
        *args: Remaining constructor arguments (see :func:`create`).
        max_rows: Stop after this many vectors.  ``None`` collects all.

    Returns:
        Array of shape ``(n_vectors, length)``.  When *buffer* is a
        NumPy array its dtype is kept; otherwise NumPy infers one.
        A zero-length enumeration gives shape ``(1, 0)``.

    Raises:
        ValueError: If *max_rows* is given and smaller than 1.
    """
    if max_rows is not None and max_rows < 1:
        raise ValueError(f"max_rows must be at least 1, got {max_rows}.")
    gen = create(kind, buffer, *args)
    width = max(gen.length, 0)
    rows: list[tuple[Any, ...]] = []

    with gen:
        for view in gen:
            rows.append(_snapshot(view, width))
            if max_rows is not None and len(rows) >= max_rows:
                logger.debug("enumerate_all(%r) capped at %d rows", kind, max_rows)
                break

    dtype = buffer.dtype if isinstance(buffer, np.ndarray) else None
    if not rows:
        return np.empty((0, width), dtype=dtype)
    return np.array(rows, dtype=dtype).reshape(len(rows), width)
