"""
Closed-form standard errors and Pearson's mode skewness.

These take summary values (a standard deviation, a sample size) rather
than a sample, so they bypass SampleDesign and the backend.
"""

from __future__ import annotations

import math

import numpy as np

from simplestats.core.exceptions import InvalidArgumentError
from simplestats.core.validation import check_positive


def _check_sample_size(sample_size, name: str = 'sample_size') -> int:
    if (
        isinstance(sample_size, bool)
        or not isinstance(sample_size, (int, float, np.integer, np.floating))
        or not math.isfinite(sample_size)
        or int(sample_size) != sample_size
        or sample_size < 1
    ):
        raise InvalidArgumentError(
            f"{name}: must be a positive integer, got {sample_size!r}",
            name=name,
            value=sample_size,
        )
    return int(sample_size)


def standard_error_mean(
    stdev: float,
    sample_size: int,
    population_size: int | None = None,
) -> float:
    """
    Standard error of the mean, stdev / sqrt(n).

    When population_size N is given, applies the finite population
    correction sqrt((N - n) / (N - 1)).

    Raises
    ------
    InvalidArgumentError
        Negative stdev, non-positive sample size, or a population
        smaller than the sample.
    """
    check_positive(stdev, 'stdev', strict=False)
    n = _check_sample_size(sample_size)

    err = stdev / math.sqrt(n)
    if population_size is not None:
        big_n = _check_sample_size(population_size, 'population_size')
        if big_n < n:
            raise InvalidArgumentError(
                f"population_size ({big_n}) must be at least sample_size ({n})",
                name='population_size',
                value=population_size,
            )
        if big_n == 1:
            return 0.0
        err *= math.sqrt((big_n - n) / (big_n - 1))
    return err


def standard_error_skewness(sample_size: int) -> float:
    """Approximate standard error of skewness, sqrt(6 / n)."""
    n = _check_sample_size(sample_size)
    return math.sqrt(6.0 / n)


def standard_error_kurtosis(sample_size: int) -> float:
    """Approximate standard error of kurtosis, sqrt(24 / n)."""
    n = _check_sample_size(sample_size)
    return math.sqrt(24.0 / n)


def pearson_skewness(mean: float, mode: float, stdev: float) -> float:
    """Pearson's first (mode) skewness coefficient, (mean - mode) / stdev."""
    check_positive(stdev, 'stdev')
    return (mean - mode) / stdev
