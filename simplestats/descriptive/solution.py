"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from simplestats.core.result import Result

if TYPE_CHECKING:
    from simplestats.descriptive.design import SampleDesign


SUMMARY_LABELS = ("Min.", "1st Qu.", "Median", "Mean", "3rd Qu.", "Max.")


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    All statistic fields are optional (None if not computed). describe()
    populates every statistic defined for the sample; the scalar functions
    populate only the one they return.
    """
    n: int

    # Central tendency
    mean: float | None = None
    median: float | None = None
    mode: tuple[float, ...] | None = None
    frequencies: dict[float, int] | None = None
    harmonic_mean: float | None = None
    geometric_mean: float | None = None
    quadratic_mean: float | None = None

    # Order statistics
    minimum: float | None = None
    maximum: float | None = None
    range: float | None = None

    # Dispersion: variance/sd divide by n - 1, pvariance/psd by n
    variance: float | None = None
    sd: float | None = None
    pvariance: float | None = None
    psd: float | None = None
    average_deviation: float | None = None

    # Shape
    skewness: float | None = None
    pskewness: float | None = None
    kurtosis: float | None = None
    pkurtosis: float | None = None
    std_moment: float | None = None

    # Quantiles: shape (n_probs,)
    quantiles: NDArray[np.floating[Any]] | None = None
    quantile_probs: NDArray[np.floating[Any]] | None = None
    quantile_type: int | None = None

    # Summary table: shape (6,), Min, Q1, Median, Mean, Q3, Max
    summary_table: NDArray[np.floating[Any]] | None = None

    # Per-observation z-scores: shape (n,)
    standard_scores: NDArray[np.floating[Any]] | None = None

    def computed(self) -> list[str]:
        """Names of the populated statistic fields, in declaration order."""
        skip = {'n', 'quantile_probs', 'quantile_type'}
        return [
            f.name for f in fields(self)
            if f.name not in skip and getattr(self, f.name) is not None
        ]


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'SampleDesign'

    @property
    def params(self) -> DescriptiveParams:
        return self._result.params

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._result.params.n

    # --- Central tendency ---

    @property
    def mean(self) -> float | None:
        return self._result.params.mean

    @property
    def median(self) -> float | None:
        return self._result.params.median

    @property
    def mode(self) -> tuple[float, ...] | None:
        """All values tied for the highest frequency, ascending."""
        return self._result.params.mode

    @property
    def frequencies(self) -> dict[float, int] | None:
        """Occurrence count per distinct value, keys ascending."""
        return self._result.params.frequencies

    @property
    def harmonic_mean(self) -> float | None:
        return self._result.params.harmonic_mean

    @property
    def geometric_mean(self) -> float | None:
        return self._result.params.geometric_mean

    @property
    def quadratic_mean(self) -> float | None:
        return self._result.params.quadratic_mean

    # --- Order statistics ---

    @property
    def minimum(self) -> float | None:
        return self._result.params.minimum

    @property
    def maximum(self) -> float | None:
        return self._result.params.maximum

    @property
    def range(self) -> float | None:
        """maximum - minimum."""
        return self._result.params.range

    # --- Dispersion ---

    @property
    def variance(self) -> float | None:
        """Sample variance (Bessel-corrected, n-1)."""
        return self._result.params.variance

    @property
    def sd(self) -> float | None:
        """Sample standard deviation."""
        return self._result.params.sd

    @property
    def pvariance(self) -> float | None:
        """Population variance (divides by n)."""
        return self._result.params.pvariance

    @property
    def psd(self) -> float | None:
        """Population standard deviation."""
        return self._result.params.psd

    @property
    def average_deviation(self) -> float | None:
        """Mean absolute deviation from the mean."""
        return self._result.params.average_deviation

    # --- Shape ---

    @property
    def skewness(self) -> float | None:
        """Adjusted Fisher-Pearson skewness (sample)."""
        return self._result.params.skewness

    @property
    def pskewness(self) -> float | None:
        return self._result.params.pskewness

    @property
    def kurtosis(self) -> float | None:
        """Excess kurtosis, bias-adjusted (sample)."""
        return self._result.params.kurtosis

    @property
    def pkurtosis(self) -> float | None:
        return self._result.params.pkurtosis

    # --- Quantiles ---

    @property
    def quantiles(self) -> NDArray[np.floating[Any]] | None:
        """Quantile values, shape (n_probs,)."""
        return self._result.params.quantiles

    @property
    def quantile_probs(self) -> NDArray[np.floating[Any]] | None:
        """Probabilities used for quantile computation."""
        return self._result.params.quantile_probs

    @property
    def quantile_type(self) -> int | None:
        """Hyndman & Fan quantile type used (1-9)."""
        return self._result.params.quantile_type

    @property
    def summary_table(self) -> NDArray[np.floating[Any]] | None:
        """Six-number summary (6,): Min, Q1, Median, Mean, Q3, Max."""
        return self._result.params.summary_table

    @property
    def standard_scores(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.standard_scores

    # --- Metadata ---

    @property
    def name(self) -> str | None:
        """Sample label from the design."""
        return self._design.name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    def summary(self) -> str:
        """R-style summary output."""
        lines = []
        params = self._result.params

        if params.summary_table is not None:
            cells = [f"{v:.6f}" for v in params.summary_table]
            widths = [max(len(lbl), len(c)) for lbl, c in zip(SUMMARY_LABELS, cells)]
            if self.name is not None:
                lines.append(self.name)
            lines.append("  ".join(lbl.rjust(w) for lbl, w in zip(SUMMARY_LABELS, widths)))
            lines.append("  ".join(c.rjust(w) for c, w in zip(cells, widths)))
        else:
            lines.append("Descriptive Statistics:")
            if self.name is not None:
                lines.append(f"  {self.name}:")
            lines.append(f"  n={params.n}")
            for key in ('mean', 'median', 'sd', 'variance', 'minimum', 'maximum'):
                value = getattr(params, key)
                if value is not None:
                    lines.append(f"  {key}={value:.6f}")
            if params.mode is not None:
                modes = ", ".join(f"{m:g}" for m in params.mode)
                lines.append(f"  mode={modes}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        computed = self._result.params.computed()
        stats_str = ", ".join(computed) if computed else "none"
        return f"DescriptiveSolution(n={self.n}, computed=[{stats_str}])"
