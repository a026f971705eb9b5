"""combinatorial — In-place, resumable enumeration of number sets and permutations.

Seven generators mutate a caller-owned buffer one vector per
``step()``: combinations, multisets, subsets and ordered subsets of a
numeric range, plus simple and duplicate-aware permutations of an
initial arrangement.  Every generator can be abandoned at any point,
and zero-length enumerations produce exactly one empty vector.

Public API:
    .. autosummary::
        CombinationGenerator
        MultisetGenerator
        SubsetGenerator
        OrderedSubsetGenerator
        SimplePermutationGenerator
        PermutationGenerator
        RangeOdometer
        EnumerationGenerator
        StepResult
        EnumerationStatus
        equivalence_index
        each_combination
        each_multiset
        each_subset
        each_ordered_subset
        each_simple_permutation
        each_permutation
        create
        enumerate_all
        register_generator
        resolve_generator
        expected_count
        get_validation
        set_validation
"""

from ._config import get_validation, set_validation
from ._handle import EnumerationGenerator
from ._results import EnumerationStatus, StepResult
from .counting import (
    combination_count,
    expected_count,
    multiset_count,
    ordered_subset_count,
    permutation_count,
    simple_permutation_count,
    subset_count,
)
from .engine import (
    create,
    each_combination,
    each_multiset,
    each_ordered_subset,
    each_permutation,
    each_simple_permutation,
    each_subset,
    enumerate_all,
    register_generator,
    resolve_generator,
)
from .odometer import (
    CombinationGenerator,
    MultisetGenerator,
    OrderedSubsetGenerator,
    RangeOdometer,
    SubsetGenerator,
)
from .permutations import (
    PermutationGenerator,
    SimplePermutationGenerator,
    equivalence_index,
)

__all__ = [
    "CombinationGenerator",
    "MultisetGenerator",
    "SubsetGenerator",
    "OrderedSubsetGenerator",
    "SimplePermutationGenerator",
    "PermutationGenerator",
    "RangeOdometer",
    "EnumerationGenerator",
    "StepResult",
    "EnumerationStatus",
    "equivalence_index",
    "each_combination",
    "each_multiset",
    "each_subset",
    "each_ordered_subset",
    "each_simple_permutation",
    "each_permutation",
    "create",
    "enumerate_all",
    "register_generator",
    "resolve_generator",
    "combination_count",
    "multiset_count",
    "subset_count",
    "ordered_subset_count",
    "simple_permutation_count",
    "permutation_count",
    "expected_count",
    "get_validation",
    "set_validation",
]

__version__ = "0.1.0"
