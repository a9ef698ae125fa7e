"""
The nine Hyndman & Fan sample quantile definitions.

Types 1-3 are discontinuous (step functions of the order statistics).
Types 4-9 interpolate linearly between adjacent order statistics, and
differ only in the plotting position p(k) = (k - a) / (n + 1 - a - b).

Type 7 is the default: for probability q it interpolates at 0-indexed
rank q * (n - 1), the convention used by R, numpy and most spreadsheets.

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from simplestats.core.exceptions import EmptyInputError
from simplestats.core.validation import check_choice

QUANTILE_TYPES = tuple(range(1, 10))

# (a, b) plotting-position constants for the continuous types
_CONTINUOUS_POSITIONS = {
    4: (0.0, 1.0),
    5: (0.5, 0.5),
    6: (0.0, 0.0),
    7: (1.0, 1.0),
    8: (1.0 / 3.0, 1.0 / 3.0),
    9: (3.0 / 8.0, 3.0 / 8.0),
}

# Tolerance for deciding that n*p sits exactly on an order statistic
_FUZZ = 4.0 * np.finfo(np.float64).eps


def hyndman_fan_quantile(x: NDArray, probs: NDArray, qtype: int = 7) -> NDArray:
    """
    Sample quantiles of a sorted sample.

    Parameters
    ----------
    x : NDArray
        1D ascending array, finite values only.
    probs : NDArray
        1D array of probabilities, already validated to lie in [0, 1].
    qtype : int
        Hyndman & Fan type, 1-9.

    Returns
    -------
    NDArray
        One quantile per probability.
    """
    check_choice(qtype, QUANTILE_TYPES, 'type')

    n = len(x)
    if n == 0:
        raise EmptyInputError("quantile requires at least 1 observation, got 0")

    probs = np.asarray(probs, dtype=np.float64)
    if n == 1:
        return np.full(probs.shape, x[0])

    if qtype <= 3:
        return _discontinuous(x, probs, qtype)
    return _continuous(x, probs, qtype)


def _discontinuous(x: NDArray, probs: NDArray, qtype: int) -> NDArray:
    n = len(x)
    nppm = n * probs - 0.5 if qtype == 3 else n * probs
    j = np.floor(nppm + _FUZZ).astype(np.int64)
    on_statistic = np.abs(nppm - j) < _FUZZ

    if qtype == 1:
        h = np.where(nppm > j + _FUZZ, 1.0, 0.0)
    elif qtype == 2:
        # average the two neighbours when n*p lands exactly on one
        h = np.where(on_statistic, 0.5, np.where(nppm > j, 1.0, 0.0))
    else:
        # nearest even order statistic
        h = np.where(on_statistic & (j % 2 == 0), 0.0, 1.0)

    lo = np.clip(j - 1, 0, n - 1)
    hi = np.clip(j, 0, n - 1)
    return (1.0 - h) * x[lo] + h * x[hi]


def _continuous(x: NDArray, probs: NDArray, qtype: int) -> NDArray:
    n = len(x)
    a, b = _CONTINUOUS_POSITIONS[qtype]

    nppm = a + probs * (n + 1.0 - a - b)
    j = np.floor(nppm + _FUZZ).astype(np.int64)
    h = nppm - j
    h = np.where(np.abs(h) < _FUZZ, 0.0, h)
    h = np.where(np.abs(h - 1.0) < _FUZZ, 1.0, h)

    # nppm is a 1-indexed rank: x[j - 1] and x[j] bracket it
    lo = np.clip(j - 1, 0, n - 1)
    hi = np.clip(j, 0, n - 1)
    inner = (1.0 - h) * x[lo] + h * x[hi]
    return np.where(j < 1, x[0], np.where(j >= n, x[n - 1], inner))
