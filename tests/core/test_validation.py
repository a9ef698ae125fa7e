"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, copying, dtype rejection
    - check_1d: dimensionality
    - check_finite: NaN/Inf detection
    - check_not_empty / check_min_samples: sample counts
    - check_probabilities: [0, 1] domain
    - check_choice / check_positive: argument domains
"""

import numpy as np
import pytest

from simplestats.core.exceptions import (
    DimensionError,
    EmptyInputError,
    InsufficientDataError,
    InvalidArgumentError,
    ValidationError,
)
from simplestats.core.validation import (
    check_1d,
    check_array,
    check_choice,
    check_finite,
    check_min_samples,
    check_not_empty,
    check_positive,
    check_probabilities,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "x")
        assert result.dtype == np.float64

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0, 3.0])
        result = check_array(arr, "x")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_values_attribute_used(self):
        class Column:
            values = np.array([4.0, 5.0])

        np.testing.assert_array_equal(check_array(Column(), "x"), [4.0, 5.0])

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "x")

    def test_rejects_mixed_objects(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, "a", None], "x")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([True, False], "x")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "x")

    def test_rejects_ragged(self):
        with pytest.raises(ValidationError):
            check_array([[1, 2], [3]], "x")


# ═══════════════════════════════════════════════════════════════════════
# Shape and content
# ═══════════════════════════════════════════════════════════════════════


class TestCheck1d:

    def test_accepts_1d(self):
        check_1d(np.zeros(3), "x")

    def test_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")

    def test_rejects_scalar(self):
        with pytest.raises(DimensionError):
            check_1d(np.asarray(1.0), "x")


class TestCheckFinite:

    def test_accepts_finite(self):
        check_finite(np.array([1.0, -2.0]), "x")

    def test_reports_counts(self):
        with pytest.raises(InvalidArgumentError, match=r"1 NaN, 2 Inf"):
            check_finite(np.array([np.nan, np.inf, -np.inf, 0.0]), "x")


class TestSampleCounts:

    def test_not_empty_ok(self):
        check_not_empty(np.array([1.0]), "x")

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            check_not_empty(np.array([]), "x")

    def test_min_samples_ok(self):
        check_min_samples(np.array([1.0, 2.0]), 2, "x", "sample variance")

    def test_min_samples_insufficient(self):
        with pytest.raises(InsufficientDataError, match="sample variance requires at least 2") as info:
            check_min_samples(np.array([1.0]), 2, "x", "sample variance")
        assert info.value.n_required == 2
        assert info.value.n_given == 1

    def test_min_samples_empty_is_empty_input(self):
        with pytest.raises(EmptyInputError):
            check_min_samples(np.array([]), 2, "x", "sample variance")


# ═══════════════════════════════════════════════════════════════════════
# Argument domains
# ═══════════════════════════════════════════════════════════════════════


class TestCheckProbabilities:

    def test_scalar_to_1d(self):
        result = check_probabilities(0.5, "q")
        assert result.shape == (1,)

    def test_bounds_inclusive(self):
        np.testing.assert_array_equal(check_probabilities([0.0, 1.0], "q"), [0.0, 1.0])

    @pytest.mark.parametrize("q", [-0.01, 1.01, np.nan, np.inf])
    def test_out_of_domain(self, q):
        with pytest.raises(InvalidArgumentError, match=r"\[0, 1\]"):
            check_probabilities(q, "q")

    def test_rejects_2d(self):
        with pytest.raises(InvalidArgumentError):
            check_probabilities([[0.1, 0.2]], "q")

    def test_rejects_text(self):
        with pytest.raises(InvalidArgumentError):
            check_probabilities("half", "q")


class TestCheckChoice:

    def test_accepts_member(self):
        check_choice("sample", ("population", "sample"), "kind")

    def test_rejects_other(self):
        with pytest.raises(InvalidArgumentError, match="'population', 'sample'") as info:
            check_choice("unbiased", ("population", "sample"), "kind")
        assert info.value.name == "kind"
        assert info.value.value == "unbiased"


class TestCheckPositive:

    def test_strict(self):
        check_positive(0.5, "stdev")
        with pytest.raises(InvalidArgumentError, match="> 0"):
            check_positive(0.0, "stdev")

    def test_non_strict_allows_zero(self):
        check_positive(0.0, "stdev", strict=False)

    @pytest.mark.parametrize("value", [-1.0, np.nan, np.inf])
    def test_rejects_negative_and_non_finite(self, value):
        with pytest.raises(InvalidArgumentError):
            check_positive(value, "stdev", strict=False)
