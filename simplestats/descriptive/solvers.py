"""
Solver dispatch for descriptive statistics.

Provides describe() and summary() as aggregate entry points returning a
DescriptiveSolution, plus scalar functions (mean(), median(), variance(),
quantile(), ...) returning plain Python values.

Every function validates its input through SampleDesign and computes
through the CPU backend, so all of them share one set of preconditions
and one numerical implementation.
"""

from __future__ import annotations

from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from simplestats.core.exceptions import InvalidArgumentError
from simplestats.core.validation import check_choice, check_probabilities
from simplestats.descriptive.design import SampleDesign
from simplestats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from simplestats.descriptive.backends.cpu import CPUDescriptiveBackend, STATISTICS
from simplestats.descriptive._quantile_types import QUANTILE_TYPES


VarianceKind = Literal['population', 'sample']
MomentDegree = Literal[1, 2, 3, 4]

VARIANCE_KINDS = ('population', 'sample')
DEFAULT_PROBS = (0.0, 0.25, 0.5, 0.75, 1.0)
DEFAULT_QUANTILE_TYPE = 7


def _ensure_design(data: ArrayLike | SampleDesign) -> SampleDesign:
    """Convert raw array to SampleDesign if needed."""
    if isinstance(data, SampleDesign):
        return data
    return SampleDesign.from_array(data)


def _solve(data: ArrayLike | SampleDesign, *compute: str, **options: Any) -> DescriptiveParams:
    """Run the backend for the given statistics and return the payload."""
    design = _ensure_design(data)
    result = CPUDescriptiveBackend().solve(design, compute=set(compute), **options)
    return result.params


# ---------------------------------------------------------------------------
# Aggregate entry points
# ---------------------------------------------------------------------------

def describe(
    data: ArrayLike | SampleDesign,
    *,
    quantile_type: int = DEFAULT_QUANTILE_TYPE,
) -> DescriptiveSolution:
    """
    Compute comprehensive descriptive statistics.

    Computes every statistic the library offers, with quantiles at
    (0, 0.25, 0.5, 0.75, 1). A statistic whose preconditions fail for this
    sample (sample variance of one observation, skewness of constant data,
    geometric mean of non-positive data, ...) is left as None and the reason
    is recorded in `solution.warnings`.

    Parameters
    ----------
    data : array-like or SampleDesign
        Non-empty, finite, one-dimensional sample.
    quantile_type : int
        Hyndman & Fan quantile type (1-9). Default 7.

    Returns
    -------
    DescriptiveSolution

    Raises
    ------
    EmptyInputError
        If the sample has no elements.
    """
    check_choice(quantile_type, QUANTILE_TYPES, 'quantile_type')
    design = _ensure_design(data)

    compute = set(STATISTICS) - {'std_moment'}
    result = CPUDescriptiveBackend().solve(
        design,
        compute=compute,
        strict=False,
        quantile_probs=np.array(DEFAULT_PROBS),
        quantile_type=quantile_type,
    )
    return DescriptiveSolution(_result=result, _design=design)


def summary(data: ArrayLike | SampleDesign) -> DescriptiveSolution:
    """
    Compute the six-number summary: Min, Q1, Median, Mean, Q3, Max.

    Q1 and Q3 are type-7 quantiles. `solution.summary()` renders the table.
    """
    design = _ensure_design(data)
    result = CPUDescriptiveBackend().solve(design, compute={'summary_table', 'mean'})
    return DescriptiveSolution(_result=result, _design=design)


# ---------------------------------------------------------------------------
# Central tendency
# ---------------------------------------------------------------------------

def mean(data: ArrayLike | SampleDesign) -> float:
    """
    Arithmetic mean.

    >>> mean([0.0, 0.25, 0.25, 1.25, 1.5, 1.75, 2.75, 3.25])
    1.375
    """
    return _solve(data, 'mean').mean


def median(data: ArrayLike | SampleDesign) -> float:
    """
    Middle value of the sorted sample; mean of the two middle values when
    the count is even. The caller's sequence is not reordered.

    >>> median([1, 3, 2])
    2.0
    >>> median([1, 2, 3, 4])
    2.5
    """
    return _solve(data, 'median').median


def mode(data: ArrayLike | SampleDesign) -> tuple[float, ...]:
    """
    Most frequent value(s).

    Multimodal samples return every value tied for the highest count, in
    ascending order, so the result never depends on input order.

    >>> mode([1, 1, 2, 2, 3])
    (1.0, 2.0)
    """
    return _solve(data, 'mode').mode


def frequencies(data: ArrayLike | SampleDesign) -> dict[float, int]:
    """Occurrence count of each distinct value, keys ascending."""
    return _solve(data, 'frequencies').frequencies


def harmonic_mean(data: ArrayLike | SampleDesign) -> float:
    """
    n / sum(1/x).

    Returns 0.0 when any value is zero; raises InvalidArgumentError for
    negative values.
    """
    return _solve(data, 'harmonic_mean').harmonic_mean


def geometric_mean(data: ArrayLike | SampleDesign) -> float:
    """n-th root of the product; requires strictly positive values."""
    return _solve(data, 'geometric_mean').geometric_mean


def quadratic_mean(data: ArrayLike | SampleDesign) -> float:
    """Root mean square, sqrt(mean(x**2))."""
    return _solve(data, 'quadratic_mean').quadratic_mean


# ---------------------------------------------------------------------------
# Order statistics
# ---------------------------------------------------------------------------

def minimum(data: ArrayLike | SampleDesign) -> float:
    """Smallest value."""
    return _solve(data, 'minimum').minimum


def maximum(data: ArrayLike | SampleDesign) -> float:
    """Largest value."""
    return _solve(data, 'maximum').maximum


def data_range(data: ArrayLike | SampleDesign) -> float:
    """maximum - minimum."""
    return _solve(data, 'range').range


def quantile(
    data: ArrayLike | SampleDesign,
    q: float | ArrayLike,
    *,
    type: int = DEFAULT_QUANTILE_TYPE,
) -> float | NDArray[np.floating[Any]]:
    """
    Sample quantile(s).

    Parameters
    ----------
    data : array-like or SampleDesign
        Non-empty, finite, one-dimensional sample.
    q : float or array-like
        Probability or probabilities in [0, 1].
    type : int
        Hyndman & Fan type 1-9. Default 7 interpolates linearly between
        the order statistics bracketing 0-indexed rank q * (n - 1).

    Returns
    -------
    float for scalar q, otherwise an ndarray with one value per probability.

    Raises
    ------
    EmptyInputError
        If the sample has no elements.
    InvalidArgumentError
        If any q is outside [0, 1] or type is not 1-9.

    >>> quantile([1, 2, 3, 4], 0.5)
    2.5
    """
    check_choice(type, QUANTILE_TYPES, 'type')
    probs = check_probabilities(q, 'q')
    design = _ensure_design(data)
    values = _solve(design, 'quantiles', quantile_probs=probs, quantile_type=type).quantiles
    if np.ndim(q) == 0:
        return float(values[0])
    return values


def percentile(
    data: ArrayLike | SampleDesign,
    p: float | ArrayLike,
    *,
    type: int = DEFAULT_QUANTILE_TYPE,
) -> float | NDArray[np.floating[Any]]:
    """
    Sample percentile(s): quantile(data, p / 100).

    p must lie in [0, 100].
    """
    pct = np.asarray(p, dtype=np.float64)
    if np.any(~np.isfinite(pct) | (pct < 0.0) | (pct > 100.0)):
        raise InvalidArgumentError(
            f"p: must be in [0, 100], got {p!r}", name='p', value=p
        )
    if pct.ndim == 0:
        return quantile(data, float(pct) / 100.0, type=type)
    return quantile(data, pct / 100.0, type=type)


# ---------------------------------------------------------------------------
# Dispersion
# ---------------------------------------------------------------------------

def variance(data: ArrayLike | SampleDesign, kind: VarianceKind = 'sample') -> float:
    """
    Variance of the sample.

    Parameters
    ----------
    data : array-like or SampleDesign
    kind : {'sample', 'population'}
        'sample' divides the sum of squared deviations by n - 1 (Bessel's
        correction), 'population' by n.

    Raises
    ------
    EmptyInputError
        If the sample has no elements.
    InsufficientDataError
        If kind='sample' and the sample has a single element.
    InvalidArgumentError
        If kind is not recognised.

    >>> variance([1, 2, 3, 4], 'population')
    1.25
    """
    check_choice(kind, VARIANCE_KINDS, 'kind')
    if kind == 'sample':
        return _solve(data, 'variance').variance
    return _solve(data, 'pvariance').pvariance


def standard_deviation(data: ArrayLike | SampleDesign, kind: VarianceKind = 'sample') -> float:
    """
    Non-negative square root of variance(data, kind).

    Same failure conditions as variance().
    """
    check_choice(kind, VARIANCE_KINDS, 'kind')
    if kind == 'sample':
        return _solve(data, 'sd').sd
    return _solve(data, 'psd').psd


def pvariance(data: ArrayLike | SampleDesign) -> float:
    """Population variance, variance(data, 'population')."""
    return variance(data, 'population')


def stdev(data: ArrayLike | SampleDesign) -> float:
    """Sample standard deviation, standard_deviation(data, 'sample')."""
    return standard_deviation(data, 'sample')


def pstdev(data: ArrayLike | SampleDesign) -> float:
    """Population standard deviation, standard_deviation(data, 'population')."""
    return standard_deviation(data, 'population')


def average_deviation(data: ArrayLike | SampleDesign, center: float | None = None) -> float:
    """Mean absolute deviation about `center` (default: the mean)."""
    return _solve(data, 'average_deviation', center=center).average_deviation


def standard_scores(data: ArrayLike | SampleDesign) -> NDArray[np.floating[Any]]:
    """
    Signed number of sample standard deviations each value lies from the mean.

    Raises InsufficientDataError for a single observation and NumericalError
    when all values are equal.
    """
    return _solve(data, 'standard_scores').standard_scores


# ---------------------------------------------------------------------------
# Shape
# ---------------------------------------------------------------------------

def std_moment(
    data: ArrayLike | SampleDesign,
    degree: MomentDegree,
    mean: float | None = None,
    pstdev: float | None = None,
) -> float:
    """
    Sum of standardised deviations raised to `degree`.

    sum(((x - mean) / pstdev) ** degree) for degree in 1-4. `mean` and
    `pstdev` default to the sample's own mean and population standard
    deviation; passing them avoids recomputation or standardises against
    known population values.
    """
    return _solve(data, 'std_moment', center=mean, scale=pstdev, degree=degree).std_moment


def skewness(
    data: ArrayLike | SampleDesign,
    mean: float | None = None,
    pstdev: float | None = None,
) -> float:
    """Adjusted Fisher-Pearson sample skewness. Requires n >= 3."""
    return _solve(data, 'skewness', center=mean, scale=pstdev).skewness


def pskewness(
    data: ArrayLike | SampleDesign,
    mean: float | None = None,
    pstdev: float | None = None,
) -> float:
    """Population skewness, sum(z**3) / n."""
    return _solve(data, 'pskewness', center=mean, scale=pstdev).pskewness


def kurtosis(
    data: ArrayLike | SampleDesign,
    mean: float | None = None,
    pstdev: float | None = None,
) -> float:
    """Bias-adjusted sample excess kurtosis. Requires n >= 4."""
    return _solve(data, 'kurtosis', center=mean, scale=pstdev).kurtosis


def pkurtosis(
    data: ArrayLike | SampleDesign,
    mean: float | None = None,
    pstdev: float | None = None,
) -> float:
    """Population excess kurtosis, sum(z**4) / n - 3."""
    return _solve(data, 'pkurtosis', center=mean, scale=pstdev).pkurtosis
