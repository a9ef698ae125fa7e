"""
Tests for the simplestats exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via StatisticsError)
    - Diagnostic attributes on InsufficientDataError and InvalidArgumentError
    - Default attribute values (None for optional attributes)
"""

import pytest

from simplestats.core.exceptions import (
    DimensionError,
    EmptyInputError,
    InsufficientDataError,
    InvalidArgumentError,
    NumericalError,
    StatisticsError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via StatisticsError."""

    @pytest.mark.parametrize("exc", [
        ValidationError("bad input"),
        EmptyInputError("empty"),
        InsufficientDataError("too few"),
        InvalidArgumentError("bad q"),
        DimensionError("wrong shape"),
        NumericalError("zero spread"),
    ])
    def test_is_statistics_error(self, exc):
        with pytest.raises(StatisticsError):
            raise exc

    @pytest.mark.parametrize("cls", [
        EmptyInputError, InsufficientDataError, InvalidArgumentError, DimensionError,
    ])
    def test_precondition_errors_are_validation_errors(self, cls):
        assert issubclass(cls, ValidationError)

    def test_empty_input_is_not_insufficient_data(self):
        """Empty input and too-few-points are distinguishable."""
        assert not issubclass(EmptyInputError, InsufficientDataError)
        assert not issubclass(InsufficientDataError, EmptyInputError)

    def test_numerical_error_is_not_validation_error(self):
        assert not isinstance(NumericalError("x"), ValidationError)

    def test_not_builtin_value_error(self):
        """Library errors are not confused with arbitrary ValueErrors."""
        assert not issubclass(StatisticsError, ValueError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestInsufficientDataError:

    def test_attributes(self):
        err = InsufficientDataError("need more", n_required=2, n_given=1)
        assert err.n_required == 2
        assert err.n_given == 1
        assert str(err) == "need more"

    def test_defaults_none(self):
        err = InsufficientDataError("need more")
        assert err.n_required is None
        assert err.n_given is None


class TestInvalidArgumentError:

    def test_attributes(self):
        err = InvalidArgumentError("q out of range", name="q", value=1.5)
        assert err.name == "q"
        assert err.value == 1.5
        assert "q out of range" in str(err)

    def test_defaults_none(self):
        err = InvalidArgumentError("bad")
        assert err.name is None
        assert err.value is None
