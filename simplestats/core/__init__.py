"""
Core infrastructure for simplestats.

This module provides shared abstractions and utilities used by the
domain submodules.

Key components:
    protocols: DataSource, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from simplestats.core.protocols import DataSource, Backend
from simplestats.core.result import Result
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
    # Protocols
    "DataSource",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "StatisticsError",
    "ValidationError",
    "EmptyInputError",
    "InsufficientDataError",
    "InvalidArgumentError",
    "DimensionError",
    "NumericalError",
]
