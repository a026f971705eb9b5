"""Typed result objects for enumeration generators.

Two result types are exposed:

* :class:`StepResult` — the outcome of a single ``step()`` call,
  either ``ADVANCED`` (the buffer now holds a new vector) or
  ``EXHAUSTED`` (no vector was produced).  ``ADVANCED`` is truthy and
  ``EXHAUSTED`` falsy, so ``while gen.step(): ...`` reads naturally.
* :class:`EnumerationStatus` — a frozen snapshot of a generator's
  progress, with attribute access, dict-like access, and a
  ``to_dict()`` serialiser that converts NumPy scalars to native
  Python types.

The status is frozen to communicate that it is a snapshot: it does
not follow the generator after it was taken.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields
from typing import Any

import numpy as np

# ------------------------------------------------------------------ #
# StepResult
# ------------------------------------------------------------------ #


class StepResult(enum.Enum):
    """Outcome of :meth:`~combinatorial._handle.EnumerationGenerator.step`."""

    ADVANCED = "advanced"
    EXHAUSTED = "exhausted"

    def __bool__(self) -> bool:
        return self is StepResult.ADVANCED


# ------------------------------------------------------------------ #
# Serialisation helper
# ------------------------------------------------------------------ #


def _numpy_to_python(obj: Any) -> Any:
    """Recursively convert NumPy scalars/arrays to Python-native types.

    Handles nested dicts, lists, np.ndarray, np.integer, and
    np.floating so that :meth:`EnumerationStatus.to_dict` returns a
    fully JSON-serialisable structure.
    """
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, (np.integer, np.bool_)):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, dict):
        return {k: _numpy_to_python(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        converted = [_numpy_to_python(item) for item in obj]
        return type(obj)(converted)
    return obj


# ------------------------------------------------------------------ #
# EnumerationStatus
# ------------------------------------------------------------------ #


@dataclass(frozen=True)
class EnumerationStatus:
    """Progress snapshot of a single generator.

    All fields are accessible both as attributes (``status.kind``)
    and via dict syntax (``status["kind"]``).
    """

    kind: str
    """Registered kind name (e.g. ``"multiset"``)."""

    length: int
    """Number of buffer positions being enumerated."""

    state: str
    """One of ``"fresh"``, ``"running"``, ``"exhausted"``, ``"abandoned"``."""

    produced: int
    """Number of vectors produced so far."""

    expected: int
    """Total number of vectors a full enumeration produces."""

    @property
    def remaining(self) -> int:
        """Vectors still to come, ``0`` once exhausted or abandoned."""
        if self.state in ("exhausted", "abandoned"):
            return 0
        return max(self.expected - self.produced, 0)

    def __getitem__(self, key: str) -> Any:
        """Attribute lookup via bracket syntax."""
        try:
            return getattr(self, key)
        except AttributeError:
            raise KeyError(key) from None

    def get(self, key: str, default: Any = None) -> Any:
        """Attribute lookup with a fallback default."""
        return getattr(self, key, default)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain, JSON-serialisable dictionary."""
        return {f.name: _numpy_to_python(getattr(self, f.name)) for f in fields(self)}
