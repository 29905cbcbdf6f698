"""
Tests for the hyte exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via HyteError)
    - Diagnostic attributes on NumericalError
    - str works correctly
"""

import pytest

from hyte.core.exceptions import (
    DimensionError,
    HyteError,
    NumericalError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via HyteError."""

    def test_validation_error_is_hyte_error(self):
        with pytest.raises(HyteError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_numerical_error_is_hyte_error(self):
        with pytest.raises(HyteError):
            raise NumericalError("computation failed")

    def test_numerical_error_is_not_validation_error(self):
        assert not issubclass(NumericalError, ValidationError)

    def test_hyte_error_is_exception(self):
        assert issubclass(HyteError, Exception)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestNumericalErrorAttributes:

    def test_defaults_are_none(self):
        err = NumericalError("zero standard error")
        assert err.quantity is None
        assert err.value is None

    def test_attributes_stored(self):
        err = NumericalError("zero", quantity="expected", value=0.0)
        assert err.quantity == "expected"
        assert err.value == 0.0

    def test_message(self):
        err = NumericalError("expected frequency is zero")
        assert str(err) == "expected frequency is zero"
