"""
simplestats: descriptive statistics for finite numeric samples.

Deterministic, stateless functions over in-memory sequences of real
numbers, with explicit errors instead of NaN sentinels.

Submodules:
    descriptive: Central tendency, dispersion, order statistics, shape
    core: Exceptions, validation, result envelope
"""

__version__ = "0.1.0"

from simplestats import descriptive
from simplestats.descriptive import (
    describe,
    summary,
    mean,
    median,
    mode,
    variance,
    standard_deviation,
    minimum,
    maximum,
    data_range,
    quantile,
    percentile,
)
from simplestats.core.exceptions import (
    StatisticsError,
    ValidationError,
    EmptyInputError,
    InsufficientDataError,
    InvalidArgumentError,
    DimensionError,
    NumericalError,
)

__all__ = [
    "__version__",
    "descriptive",
    "describe",
    "summary",
    "mean",
    "median",
    "mode",
    "variance",
    "standard_deviation",
    "minimum",
    "maximum",
    "data_range",
    "quantile",
    "percentile",
    "StatisticsError",
    "ValidationError",
    "EmptyInputError",
    "InsufficientDataError",
    "InvalidArgumentError",
    "DimensionError",
    "NumericalError",
]
