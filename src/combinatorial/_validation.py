"""Optional precondition checks run when a generator is constructed.

The enumeration core trusts its caller.  When the validation mode (see
:mod:`._config`) is ``"warn"`` or ``"strict"``, constructors call into
this module once to check the preconditions the core relies on:

* the length is not negative;
* the range is not empty or inverted when the length is positive;
* the buffer accepts item assignment and is one-dimensional;
* the buffer holds at least *length* positions;
* an integer NumPy buffer can represent *max* (the range generators
  park not-yet-visited positions at *max* between steps).

``"warn"`` reports each violation as a ``UserWarning`` and lets the
generator proceed; ``"strict"`` raises on the first one.  Nothing here
runs inside ``step()``.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from ._compat import _is_writable
from ._config import get_validation

# _report -> check_* -> generator __init__ -> caller
_STACKLEVEL = 4


def _buffer_problems(buffer: Any, length: int) -> list[tuple[type[Exception], str]]:
    problems: list[tuple[type[Exception], str]] = []
    if length < 0:
        problems.append((ValueError, f"length must be non-negative, got {length}."))
    if not _is_writable(buffer):
        problems.append(
            (
                TypeError,
                f"buffer must be a mutable sequence or writeable array, "
                f"got {type(buffer).__name__}.",
            )
        )
    if isinstance(buffer, np.ndarray) and buffer.ndim != 1:
        problems.append(
            (ValueError, f"buffer must be one-dimensional, got ndim={buffer.ndim}.")
        )
    try:
        size = len(buffer)
    except TypeError:
        size = None
    if size is not None and size < length:
        problems.append(
            (
                ValueError,
                f"buffer holds {size} positions but length={length} was requested.",
            )
        )
    return problems


def _report(problems: list[tuple[type[Exception], str]], mode: str) -> None:
    for exc_type, msg in problems:
        if mode == "strict":
            raise exc_type(msg)
        warnings.warn(msg, UserWarning, stacklevel=_STACKLEVEL)


def check_range_arguments(
    buffer: Any, min_value: Any, max_value: Any, length: int
) -> None:
    """Check the preconditions of the range generators.

    Args:
        buffer: Caller-owned buffer.
        min_value: Inclusive lower bound of the range.
        max_value: Exclusive upper bound of the range.
        length: Number of positions to enumerate.

    Raises:
        ValueError: In ``"strict"`` mode, for an invalid range, length
            or buffer size.
        TypeError: In ``"strict"`` mode, for an immutable buffer.
    """
    mode = get_validation()
    if mode == "off":
        return
    problems = _buffer_problems(buffer, length)
    if length > 0 and not max_value > min_value:
        problems.append(
            (
                ValueError,
                f"empty range [{min_value}, {max_value}) with length={length}.",
            )
        )
    if isinstance(buffer, np.ndarray) and np.issubdtype(buffer.dtype, np.integer):
        info = np.iinfo(buffer.dtype)
        if max_value > info.max or min_value < info.min:
            problems.append(
                (
                    ValueError,
                    f"range [{min_value}, {max_value}] does not fit buffer "
                    f"dtype {buffer.dtype}.",
                )
            )
    _report(problems, mode)


def check_permutation_arguments(buffer: Any, length: int) -> None:
    """Check the preconditions of the permutation generators.

    Raises:
        ValueError: In ``"strict"`` mode, for a negative length or a
            buffer shorter than *length*.
        TypeError: In ``"strict"`` mode, for an immutable buffer.
    """
    mode = get_validation()
    if mode == "off":
        return
    _report(_buffer_problems(buffer, length), mode)
