"""Tests for the registry, loop adapters and enumerate_all."""

import gc

import numpy as np
import pytest

from combinatorial import (
    CombinationGenerator,
    EnumerationGenerator,
    MultisetGenerator,
    PermutationGenerator,
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
from combinatorial import engine as _engine

KINDS = [
    "combination",
    "multiset",
    "subset",
    "ordered_subset",
    "simple_permutation",
    "permutation",
]


class TestRegistry:
    """Tests for resolve_generator / register_generator / create."""

    @pytest.mark.parametrize("kind", KINDS)
    def test_builtin_kinds_resolve(self, kind):
        cls = resolve_generator(kind)
        assert issubclass(cls, EnumerationGenerator)
        assert cls.kind == kind

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError, match="Invalid kind 'powerset'"):
            resolve_generator("powerset")

    def test_register_custom_generator(self):
        class CountdownGenerator(CombinationGenerator):
            kind = "countdown"

        try:
            register_generator("countdown", CountdownGenerator)
            assert resolve_generator("countdown") is CountdownGenerator
        finally:
            _engine._GENERATORS.pop("countdown", None)

    def test_register_rejects_non_generator(self):
        with pytest.raises(TypeError, match="not an EnumerationGenerator"):
            register_generator("bogus", dict)

    def test_create_range_kind(self):
        gen = create("multiset", [0, 0], 1, 3, 2)
        assert isinstance(gen, MultisetGenerator)
        assert (gen.min, gen.max, gen.length) == (1, 3, 2)

    def test_create_permutation_kind(self):
        gen = create("permutation", [1, 1, 2], 3)
        assert isinstance(gen, PermutationGenerator)
        assert gen.expected_count() == 3


class TestLoopAdapters:
    """Tests for the each_* generator functions."""

    def test_each_combination(self):
        seen = [tuple(v) for v in each_combination([0, 0], 1, 3, 2)]
        assert sorted(seen) == [(1, 1), (1, 2), (2, 1), (2, 2)]

    def test_each_multiset(self):
        seen = [tuple(v) for v in each_multiset([0, 0], 1, 3, 2)]
        assert len(seen) == 3

    def test_each_subset(self):
        seen = [frozenset(v) for v in each_subset([0, 0, 0], 0, 5, 3)]
        assert len(seen) == len(set(seen)) == 10

    def test_each_ordered_subset(self):
        seen = [tuple(v) for v in each_ordered_subset([0, 0], 0, 3, 2)]
        assert len(seen) == 6

    def test_each_simple_permutation(self):
        seen = [tuple(v) for v in each_simple_permutation([1, 2, 3], 3)]
        assert len(set(seen)) == 6

    def test_each_permutation(self):
        buf = [1, 1, 2]
        seen = [tuple(v) for v in each_permutation(buf, 3)]
        assert sorted(seen) == [(1, 1, 2), (1, 2, 1), (2, 1, 1)]
        assert buf == [1, 1, 2]

    def test_yields_the_buffer_itself(self):
        buf = [0, 0]
        for view in each_combination(buf, 0, 2, 2):
            assert view is buf

    def test_break_leaves_last_vector(self):
        buf = [1, 2, 3, 4]
        last = None
        for i, view in enumerate(each_permutation(buf, 4)):
            last = list(view)
            if i == 5:
                break
        assert buf == last

    def test_continue_requests_next_step(self):
        kept = []
        for view in each_combination([0, 0], 0, 3, 2):
            if view[0] == view[1]:
                continue
            kept.append(tuple(view))
        assert len(kept) == 6

    def test_closing_adapter_abandons_generator(self):
        adapter = each_subset([0, 0], 0, 4, 2)
        next(adapter)
        adapter.close()
        with pytest.raises(StopIteration):
            next(adapter)

    def test_dropped_adapter_is_collected(self):
        buf = [0, 0, 0]
        adapter = each_ordered_subset(buf, 0, 5, 3)
        next(adapter)
        snapshot = list(buf)
        del adapter
        gc.collect()
        assert buf == snapshot


class TestEnumerateAll:
    """Tests for enumerate_all."""

    def test_shape_and_rows(self):
        result = enumerate_all("combination", [0, 0], 1, 3, 2)
        assert result.shape == (4, 2)
        assert {tuple(row) for row in result.tolist()} == {
            (1, 1),
            (1, 2),
            (2, 1),
            (2, 2),
        }

    @pytest.mark.parametrize(
        "kind,args,count",
        [
            ("combination", (0, 4, 3), 64),
            ("multiset", (0, 4, 3), 20),
            ("subset", (0, 4, 3), 4),
            ("ordered_subset", (0, 4, 3), 24),
        ],
    )
    def test_row_counts(self, kind, args, count):
        result = enumerate_all(kind, [0] * 3, *args)
        assert result.shape == (count, 3)
        assert len({tuple(r) for r in result.tolist()}) == count

    def test_permutation_rows(self):
        result = enumerate_all("permutation", [1, 4, 2, 2], 4)
        assert result.shape == (12, 4)

    def test_keeps_numpy_dtype(self):
        buf = np.zeros(2, dtype=np.int16)
        result = enumerate_all("subset", buf, 0, 5, 2)
        assert result.dtype == np.int16
        assert result.shape == (10, 2)
        np.testing.assert_array_equal(buf, [4, 4])

    def test_zero_length(self):
        result = enumerate_all("simple_permutation", [], 0)
        assert result.shape == (1, 0)

    def test_no_vectors(self):
        result = enumerate_all("subset", [0, 0, 0], 0, 2, 3)
        assert result.shape == (0, 3)

    def test_max_rows_caps_and_abandons(self):
        buf = [0, 0, 0]
        result = enumerate_all("combination", buf, 0, 10, 3, max_rows=5)
        assert result.shape == (5, 3)
        assert tuple(buf) == tuple(result[-1].tolist())

    def test_max_rows_must_be_positive(self):
        with pytest.raises(ValueError, match="max_rows"):
            enumerate_all("combination", [0], 0, 3, 1, max_rows=0)
