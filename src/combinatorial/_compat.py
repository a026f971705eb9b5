"""Buffer compatibility layer for NumPy arrays and plain sequences.

Generators operate on anything that supports positional item access
and assignment.  Python lists and ``bytearray`` objects work as-is;
one-dimensional NumPy arrays work as well but hand back NumPy scalars
on item access.  This module holds the small amount of code that has
to know the difference:

* :func:`_is_writable` — detect immutable buffers (tuples, strings,
  read-only arrays) for the boundary validation layer.
* :func:`_snapshot` — copy the first *length* positions out of a
  buffer as a tuple of native Python values, suitable for hashing and
  comparison in tests and in :func:`~combinatorial.engine.enumerate_all`.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

import numpy as np

from ._typing import Buffer


def _is_writable(buffer: Any) -> bool:
    """Return ``True`` if *buffer* accepts positional item assignment.

    Accepted types:
        * ``numpy.ndarray`` with the ``WRITEABLE`` flag set.
        * Any ``collections.abc.MutableSequence`` (``list``,
          ``bytearray``, ``array.array``, ...).
    """
    if isinstance(buffer, np.ndarray):
        return bool(buffer.flags.writeable)
    return isinstance(buffer, MutableSequence)


def _to_python(value: Any) -> Any:
    """Convert a NumPy scalar to its Python-native equivalent."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def _snapshot(buffer: Buffer, length: int) -> tuple[Any, ...]:
    """Return the first *length* positions of *buffer* as a tuple.

    NumPy scalars are converted to Python-native types so that
    snapshots taken from an array and from a list compare equal.
    """
    if isinstance(buffer, np.ndarray):
        return tuple(buffer[:length].tolist())
    return tuple(_to_python(buffer[i]) for i in range(length))
