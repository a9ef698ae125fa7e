"""
Exception hierarchy for simplestats.

All exceptions inherit from StatisticsError to allow catching any
library-specific error. Precondition failures inherit from ValidationError;
statistics that are undefined for otherwise valid data raise NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - No function returns NaN, zero or -1 in place of raising
"""


class StatisticsError(Exception):
    """Base exception for all simplestats errors."""
    pass


class ValidationError(StatisticsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class EmptyInputError(ValidationError):
    """
    The sample has no elements.

    Every statistic in this library is undefined for an empty sample.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    The sample has fewer elements than the statistic requires.

    Raised e.g. for the sample variance of a single observation, which
    would otherwise divide by zero.

    Attributes:
        n_required: Minimum number of observations the statistic needs
        n_given: Number of observations supplied
    """

    def __init__(
        self,
        message: str,
        n_required: int | None = None,
        n_given: int | None = None,
    ):
        super().__init__(message)
        self.n_required = n_required
        self.n_given = n_given


class InvalidArgumentError(ValidationError):
    """
    A parameter is outside its valid domain.

    Attributes:
        name: Name of the offending parameter
        value: The rejected value, if it is cheap to keep
    """

    def __init__(self, message: str, name: str | None = None, value=None):
        super().__init__(message)
        self.name = name
        self.value = value


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a sample is not a one-dimensional sequence.
    """
    pass


class NumericalError(StatisticsError):
    """
    The statistic is undefined for the given data.

    Raised when the inputs pass validation but the computation would divide
    by a zero spread (skewness, kurtosis or standard scores of constant data).
    """
    pass
