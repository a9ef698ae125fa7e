"""
Input validation utilities for simplestats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from simplestats.core.exceptions import (
    DimensionError,
    EmptyInputError,
    InsufficientDataError,
    InvalidArgumentError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate input and return a float64 copy of it.

    The copy is always made, so the caller's buffer is never shared with
    the returned array. Inputs that convert to object, string, datetime or
    other non-numeric dtypes are rejected. Booleans are rejected as well:
    True/False are not measurements.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64, not aliasing the input

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    if hasattr(array, 'values') and not isinstance(array, dict):
        array = array.values

    try:
        result = np.array(array, copy=True)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64, copy=False)


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        InvalidArgumentError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise InvalidArgumentError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            name=name,
        )


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        EmptyInputError: If array is empty
    """
    if array.shape[0] == 0:
        raise EmptyInputError(f"{name}: requires at least 1 observation, got 0")


def check_min_samples(
    array: NDArray[np.floating[Any]],
    min_samples: int,
    name: str,
    statistic: str,
) -> None:
    """
    Verify array has at least the minimum number of samples.

    Empty input is reported as EmptyInputError regardless of min_samples,
    so callers see the same error for "no data" from every statistic.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages
        statistic: Name of the statistic being computed

    Raises:
        EmptyInputError: If array is empty
        InsufficientDataError: If array has fewer than min_samples
    """
    check_not_empty(array, name)
    n = array.shape[0]
    if n < min_samples:
        raise InsufficientDataError(
            f"{statistic} requires at least {min_samples} observations, got {n}",
            n_required=min_samples,
            n_given=n,
        )


def check_probabilities(probs: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate probabilities lie in [0, 1].

    Args:
        probs: Scalar or 1D array-like of probabilities
        name: Parameter name for error messages

    Returns:
        1D float64 array of the probabilities

    Raises:
        InvalidArgumentError: If any probability is non-finite or outside [0, 1]
    """
    try:
        arr = np.atleast_1d(np.asarray(probs, dtype=np.float64))
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(
            f"{name}: cannot convert to probabilities: {e}", name=name, value=probs
        ) from e

    if arr.ndim != 1:
        raise InvalidArgumentError(
            f"{name}: expected a scalar or 1D sequence, got shape {arr.shape}",
            name=name,
        )

    bad = ~np.isfinite(arr) | (arr < 0.0) | (arr > 1.0)
    if np.any(bad):
        first = arr[np.argmax(bad)]
        raise InvalidArgumentError(
            f"{name}: must be in [0, 1], got {first!r}", name=name, value=float(first)
        )
    return arr


def check_choice(value: Any, choices: Iterable[Any], name: str) -> None:
    """
    Verify value is one of the allowed choices.

    Raises:
        InvalidArgumentError: If value is not among choices
    """
    choices = tuple(choices)
    if value not in choices:
        allowed = ", ".join(repr(c) for c in choices)
        raise InvalidArgumentError(
            f"{name}: invalid value {value!r}, must be one of {allowed}",
            name=name,
            value=value,
        )


def check_positive(value: float, name: str, *, strict: bool = True) -> None:
    """
    Verify a scalar is positive (or non-negative when strict=False).

    Raises:
        InvalidArgumentError: If value is non-finite or not positive
    """
    if not np.isfinite(value) or value < 0 or (strict and value == 0):
        bound = "> 0" if strict else ">= 0"
        raise InvalidArgumentError(
            f"{name}: must be finite and {bound}, got {value!r}", name=name, value=value
        )
