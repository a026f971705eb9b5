"""Tests for the validation configuration system."""

import os

import pytest

from combinatorial._config import get_validation, set_validation


class TestGetValidation:
    """Tests for get_validation() resolution order."""

    def setup_method(self):
        """Reset state before each test."""
        import combinatorial._config as _cfg
        _cfg._validation_override = None
        os.environ.pop("COMBINATORIAL_VALIDATE", None)

    def teardown_method(self):
        """Reset state after each test."""
        import combinatorial._config as _cfg
        _cfg._validation_override = None
        os.environ.pop("COMBINATORIAL_VALIDATE", None)

    def test_default_is_off(self):
        assert get_validation() == "off"

    def test_env_var_overrides_default(self):
        os.environ["COMBINATORIAL_VALIDATE"] = "strict"
        assert get_validation() == "strict"

    def test_env_var_case_insensitive(self):
        os.environ["COMBINATORIAL_VALIDATE"] = "  Warn "
        assert get_validation() == "warn"

    def test_unknown_env_value_ignored(self):
        os.environ["COMBINATORIAL_VALIDATE"] = "paranoid"
        assert get_validation() == "off"

    def test_programmatic_override_wins_over_env(self):
        os.environ["COMBINATORIAL_VALIDATE"] = "warn"
        set_validation("strict")
        assert get_validation() == "strict"

    def test_auto_restores_default(self):
        set_validation("strict")
        assert get_validation() == "strict"
        set_validation("auto")
        assert get_validation() == "off"


class TestSetValidation:
    """Tests for set_validation() validation."""

    def setup_method(self):
        import combinatorial._config as _cfg
        _cfg._validation_override = None

    def teardown_method(self):
        import combinatorial._config as _cfg
        _cfg._validation_override = None

    def test_accepts_valid_names(self):
        for name in ("off", "warn", "strict", "auto"):
            set_validation(name)  # should not raise

    def test_case_insensitive(self):
        set_validation("STRICT")
        assert get_validation() == "strict"

    def test_rejects_invalid_name(self):
        with pytest.raises(ValueError, match="Unknown validation mode"):
            set_validation("loud")
