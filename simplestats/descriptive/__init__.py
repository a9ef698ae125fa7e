"""
Descriptive statistics module.

Central tendency, dispersion, order statistics and shape over a finite
one-dimensional sample of real numbers.

Public API:
    describe(x)               - All statistics at once
    summary(x)                - Six-number summary (Min, Q1, Median, Mean, Q3, Max)
    mean / median / mode      - Central tendency (mode returns all ties)
    variance(x, kind)         - 'sample' (n-1) or 'population' (n)
    standard_deviation(x, kind)
    min / max / range         - Order statistics
    quantile(x, q)            - Quantiles (Hyndman & Fan types 1-9, default 7)
    skewness / kurtosis       - Shape (sample and population forms)

`min`, `max` and `range` are aliases of minimum(), maximum() and
data_range(); they are importable by name but left out of __all__ so a
star import never shadows the builtins.
"""

from simplestats.descriptive.design import SampleDesign
from simplestats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from simplestats.descriptive.solvers import (
    describe,
    summary,
    mean,
    median,
    mode,
    frequencies,
    harmonic_mean,
    geometric_mean,
    quadratic_mean,
    minimum,
    maximum,
    data_range,
    quantile,
    percentile,
    variance,
    standard_deviation,
    pvariance,
    stdev,
    pstdev,
    average_deviation,
    standard_scores,
    std_moment,
    skewness,
    pskewness,
    kurtosis,
    pkurtosis,
)
from simplestats.descriptive._standard_errors import (
    pearson_skewness,
    standard_error_mean,
    standard_error_skewness,
    standard_error_kurtosis,
)

min = minimum
max = maximum
range = data_range

__all__ = [
    "describe",
    "summary",
    "mean",
    "median",
    "mode",
    "frequencies",
    "harmonic_mean",
    "geometric_mean",
    "quadratic_mean",
    "minimum",
    "maximum",
    "data_range",
    "quantile",
    "percentile",
    "variance",
    "standard_deviation",
    "pvariance",
    "stdev",
    "pstdev",
    "average_deviation",
    "standard_scores",
    "std_moment",
    "skewness",
    "pskewness",
    "kurtosis",
    "pkurtosis",
    "pearson_skewness",
    "standard_error_mean",
    "standard_error_skewness",
    "standard_error_kurtosis",
    "SampleDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]
