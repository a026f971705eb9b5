"""Tests for StepResult and EnumerationStatus."""

import json

import numpy as np
import pytest

from combinatorial import EnumerationStatus, PermutationGenerator, StepResult
from combinatorial._results import _numpy_to_python


class TestStepResult:
    def test_values(self):
        assert StepResult.ADVANCED.value == "advanced"
        assert StepResult.EXHAUSTED.value == "exhausted"

    def test_while_loop_idiom(self):
        gen = PermutationGenerator([1, 2, 2], 3)
        n = 0
        while gen.step():
            n += 1
        assert n == 3


class TestEnumerationStatus:
    def _status(self, **overrides):
        fields = dict(kind="subset", length=2, state="running", produced=3, expected=10)
        fields.update(overrides)
        return EnumerationStatus(**fields)

    def test_frozen(self):
        status = self._status()
        with pytest.raises(AttributeError):
            status.produced = 4

    def test_dict_access(self):
        status = self._status()
        assert status["kind"] == "subset"
        assert status.get("missing", "fallback") == "fallback"
        with pytest.raises(KeyError):
            status["missing"]

    def test_remaining(self):
        assert self._status().remaining == 7
        assert self._status(state="exhausted", produced=10).remaining == 0
        assert self._status(state="abandoned").remaining == 0

    def test_to_dict_is_json_serialisable(self):
        status = self._status(produced=np.int64(3), expected=np.int64(10))
        payload = status.to_dict()
        assert payload == {
            "kind": "subset",
            "length": 2,
            "state": "running",
            "produced": 3,
            "expected": 10,
        }
        json.dumps(payload)

    def test_generator_status_lifecycle(self):
        gen = PermutationGenerator([1, 1, 2], 3)
        assert gen.status.state == "fresh"
        assert gen.status.remaining == 3
        list(gen)
        status = gen.status
        assert status.state == "exhausted"
        assert status.produced == status.expected == 3


class TestNumpyToPython:
    def test_nested(self):
        data = {"a": np.array([1, 2]), "b": [np.float64(0.5), (np.int32(1),)]}
        assert _numpy_to_python(data) == {"a": [1, 2], "b": [0.5, (1,)]}
