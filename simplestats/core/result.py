"""
Generic result container for simplestats computations.

The Result class is the envelope a backend hands back to the solver layer.
It keeps the statistics payload together with the metadata needed to
reproduce and audit a computation: which backend ran, how long each
section took, which statistics were skipped and why.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (requested statistics, sample size)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version stamps recorded on every result."""
    from simplestats import __version__

    return {
        'simplestats_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (the computed statistics)
        info: Structured metadata (requested statistics, sample size)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library and interpreter versions that produced it

    Examples:
        >>> Result(
        ...     params=DescriptiveParams(n=4, mean=2.5),
        ...     info={'computed': ['mean']},
        ...     timing={'total_seconds': 1e-5, 'mean': 8e-6},
        ...     backend_name='cpu_descriptive',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
