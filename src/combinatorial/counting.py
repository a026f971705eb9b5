"""Closed-form vector counts for every enumeration kind.

Each function returns the number of vectors a full enumeration
produces for the given parameters:

=====================  ==============================
Kind                   Count
=====================  ==============================
combination            ``n ** L``
multiset               ``C(n + L - 1, L)``
subset                 ``C(n, L)``
ordered subset         ``n! / (n - L)!``
simple permutation     ``L!``
permutation            ``L! / ∏ m_k!``
=====================  ==============================

with ``n = max - min`` the size of the range and ``m_k`` the
multiplicity of each distinct value in the permutation input.

All counts follow the generators on degenerate input: a length of zero
(or below) gives ``1`` (the empty vector), an empty or inverted range
with a positive length gives ``0``.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from typing import Any

from ._typing import Buffer


def _range_size(min_value: Any, max_value: Any) -> int:
    return max(int(max_value - min_value), 0)


def combination_count(min_value: Any, max_value: Any, length: int) -> int:
    """Ordered selections with repetition: ``n ** L``."""
    if length <= 0:
        return 1
    return _range_size(min_value, max_value) ** length


def multiset_count(min_value: Any, max_value: Any, length: int) -> int:
    """Unordered selections with repetition: ``C(n + L - 1, L)``."""
    if length <= 0:
        return 1
    n = _range_size(min_value, max_value)
    if n == 0:
        return 0
    return math.comb(n + length - 1, length)


def subset_count(min_value: Any, max_value: Any, length: int) -> int:
    """Unordered selections without repetition: ``C(n, L)``."""
    if length <= 0:
        return 1
    return math.comb(_range_size(min_value, max_value), length)


def ordered_subset_count(min_value: Any, max_value: Any, length: int) -> int:
    """Ordered selections without repetition: ``n! / (n - L)!``."""
    if length <= 0:
        return 1
    return math.perm(_range_size(min_value, max_value), length)


def simple_permutation_count(length: int) -> int:
    """Orderings of *length* distinct elements: ``L!``."""
    if length <= 0:
        return 1
    return math.factorial(length)


def count_from_index(index: Sequence[int]) -> int:
    """Distinct orderings described by an equivalence index.

    Every position of the index names the first position holding an
    equal value, so the multiplicity of each distinct value is the
    number of times its first position appears.

    Args:
        index: Output of :func:`~combinatorial.permutations.equivalence_index`.

    Returns:
        ``L! / ∏ m_k!``.
    """
    total = math.factorial(len(index))
    for multiplicity in Counter(index).values():
        total //= math.factorial(multiplicity)
    return total


def permutation_count(buffer: Buffer, length: int) -> int:
    """Distinct orderings of the first *length* buffer positions.

    Only ``==`` is required of the elements; they are never hashed or
    sorted.
    """
    from .permutations import equivalence_index

    if length <= 0:
        return 1
    return count_from_index(equivalence_index(buffer, length))


_COUNTERS = {
    "combination": combination_count,
    "multiset": multiset_count,
    "subset": subset_count,
    "ordered_subset": ordered_subset_count,
    "simple_permutation": simple_permutation_count,
    "permutation": permutation_count,
}


def expected_count(kind: str, *args: Any) -> int:
    """Dispatch to the count function registered for *kind*.

    Args:
        kind: One of ``"combination"``, ``"multiset"``, ``"subset"``,
            ``"ordered_subset"``, ``"simple_permutation"`` or
            ``"permutation"``.
        *args: Arguments of the matching count function:
            ``(min, max, length)`` for the range kinds, ``(length,)``
            for ``"simple_permutation"`` and ``(buffer, length)`` for
            ``"permutation"``.

    Raises:
        ValueError: If *kind* is not recognised.
    """
    func = _COUNTERS.get(kind)
    if func is None:
        valid = ", ".join(sorted(_COUNTERS))
        raise ValueError(f"Invalid kind '{kind}'. Choose from: {valid}.")
    return func(*args)
