"""
CPU reference backend for descriptive statistics.

Validated against scipy.stats and hand-computed values to rtol=1e-12.

Numerical choices:
    - Sums use numpy's pairwise summation, not a naive running total.
    - The mean gets one refinement pass, m += sum(x - m) / n, and is
      clamped to [min, max].
    - If the plain sum overflows, the mean is taken on x / max(|x|).
    - Squared deviations about the sample mean use the two-pass algorithm
      with the compensating term (sum of deviations)^2 / n subtracted.
"""

from __future__ import annotations

from functools import cached_property
from typing import Any
import numpy as np
from numpy.typing import NDArray

from simplestats.core.exceptions import (
    InsufficientDataError,
    InvalidArgumentError,
    NumericalError,
)
from simplestats.core.result import Result
from simplestats.core.compute.timing import timed
from simplestats.core.validation import check_choice, check_min_samples, check_positive
from simplestats.descriptive.design import SampleDesign
from simplestats.descriptive.solution import DescriptiveParams
from simplestats.descriptive._quantile_types import hyndman_fan_quantile


# Evaluation order; also the set of valid compute= entries
STATISTICS = (
    'mean', 'median', 'mode', 'frequencies',
    'minimum', 'maximum', 'range',
    'variance', 'sd', 'pvariance', 'psd', 'average_deviation',
    'harmonic_mean', 'geometric_mean', 'quadratic_mean',
    'quantiles', 'summary_table',
    'skewness', 'pskewness', 'kurtosis', 'pkurtosis', 'std_moment',
    'standard_scores',
)

MOMENT_DEGREES = (1, 2, 3, 4)

# Failures that make a single statistic undefined for the sample
_UNDEFINED = (InsufficientDataError, InvalidArgumentError, NumericalError)


def _refined_mean(x: NDArray) -> float:
    m = np.sum(x) / x.shape[0]
    return m + np.sum(x - m) / x.shape[0]


class _Workspace:
    """Per-call intermediate values shared between statistics."""

    def __init__(self, design: SampleDesign):
        self.design = design
        self.data = design.data
        self.n = design.n

    @cached_property
    def sorted(self) -> NDArray:
        return self.design.sorted()

    @cached_property
    def mean(self) -> float:
        x = self.data
        with np.errstate(over='ignore', invalid='ignore'):
            m = _refined_mean(x)
            if not np.isfinite(m):
                # partial sums overflow float64; average on the unit scale
                scale = np.max(np.abs(x))
                m = _refined_mean(x / scale) * scale
        # rounding can push the quotient past the extremes
        return float(np.clip(m, self.sorted[0], self.sorted[-1]))

    def sum_square_deviations(self, center: float | None = None) -> float:
        """
        Sum of squared deviations about `center`, or about the sample mean
        when center is None.

        Only deviations from the sample mean get the compensating term
        (sum d)^2 / n; about any other center it would cancel the center out.
        """
        with np.errstate(over='ignore', invalid='ignore'):
            if center is None:
                d = self.data - self.mean
                ss = np.sum(d * d) - np.sum(d) ** 2 / self.n
            else:
                d = self.data - center
                ss = np.sum(d * d)
        if not np.isfinite(ss):
            raise NumericalError("sum of squared deviations overflows float64")
        return float(max(ss, 0.0))


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(
        self,
        design: SampleDesign,
        *,
        compute: set[str],
        strict: bool = True,
        quantile_probs: NDArray | None = None,
        quantile_type: int = 7,
        center: float | None = None,
        scale: float | None = None,
        degree: int = 2,
    ) -> Result[DescriptiveParams]:
        """
        Compute requested descriptive statistics.

        Parameters
        ----------
        design : SampleDesign
        compute : set of str
            Which statistics to compute; see STATISTICS.
        strict : bool
            If True, the first statistic whose preconditions fail raises.
            If False, it is left as None and the reason is recorded in
            Result.warnings.
        quantile_probs : array-like or None
            Validated probabilities for 'quantiles'.
        quantile_type : int
            Hyndman & Fan quantile type 1-9.
        center : float or None
            Location for the moment statistics and 'average_deviation'.
            Defaults to the sample mean.
        scale : float or None
            Population standard deviation for the moment statistics.
            Defaults to the one computed about `center`.
        degree : int
            Moment order for 'std_moment', 1-4.
        """
        unknown = set(compute) - set(STATISTICS)
        if unknown:
            raise InvalidArgumentError(
                f"Unknown statistics requested: {sorted(unknown)}. "
                f"Valid entries: {', '.join(STATISTICS)}",
                name='compute',
            )
        if 'quantiles' in compute and quantile_probs is None:
            raise InvalidArgumentError(
                "'quantiles' requested without quantile_probs", name='quantile_probs'
            )

        ws = _Workspace(design)
        options = {
            'quantile_probs': quantile_probs,
            'quantile_type': quantile_type,
            'center': center,
            'scale': scale,
            'degree': degree,
        }
        values: dict[str, Any] = {}
        warnings_list: list[str] = []

        with timed() as timer:
            for key in STATISTICS:
                if key not in compute:
                    continue
                method = getattr(self, f'_compute_{key}')
                with timer.section(key):
                    try:
                        values[key] = method(ws, **options)
                    except _UNDEFINED as e:
                        if strict:
                            raise
                        warnings_list.append(f"{key}: {e}")

        if 'quantiles' in values:
            values['quantile_probs'] = np.asarray(quantile_probs, dtype=np.float64)
            values['quantile_type'] = quantile_type

        params = DescriptiveParams(n=ws.n, **values)

        return Result(
            params=params,
            info={'computed': params.computed(), 'requested': sorted(compute), 'n': ws.n},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    # --- Central tendency ---

    def _compute_mean(self, ws: _Workspace, **_) -> float:
        return ws.mean

    def _compute_median(self, ws: _Workspace, **_) -> float:
        xs = ws.sorted
        mid = ws.n // 2
        if ws.n % 2 == 1:
            return float(xs[mid])
        # halving first keeps the sum of two large values finite
        return float(xs[mid - 1] / 2.0 + xs[mid] / 2.0)

    def _compute_frequencies(self, ws: _Workspace, **_) -> dict[float, int]:
        values, counts = np.unique(ws.data, return_counts=True)
        return {float(v): int(c) for v, c in zip(values, counts)}

    def _compute_mode(self, ws: _Workspace, **_) -> tuple[float, ...]:
        """All values sharing the highest count, ascending."""
        values, counts = np.unique(ws.data, return_counts=True)
        return tuple(float(v) for v in values[counts == counts.max()])

    def _compute_harmonic_mean(self, ws: _Workspace, **_) -> float:
        x = ws.data
        if np.any(x < 0):
            raise InvalidArgumentError(
                "harmonic mean is undefined for negative values", name='x'
            )
        if np.any(x == 0):
            return 0.0
        return float(ws.n / np.sum(1.0 / x))

    def _compute_geometric_mean(self, ws: _Workspace, **_) -> float:
        x = ws.data
        if np.any(x <= 0):
            raise InvalidArgumentError(
                "geometric mean requires strictly positive values", name='x'
            )
        # log space avoids overflow of the running product
        return float(np.exp(np.sum(np.log(x)) / ws.n))

    def _compute_quadratic_mean(self, ws: _Workspace, **_) -> float:
        x = ws.data
        with np.errstate(over='ignore'):
            rms = np.sqrt(np.sum(x * x) / ws.n)
        if not np.isfinite(rms):
            scale = np.max(np.abs(x))
            rms = np.sqrt(np.sum((x / scale) ** 2) / ws.n) * scale
        return float(rms)

    # --- Order statistics ---

    def _compute_minimum(self, ws: _Workspace, **_) -> float:
        return float(np.min(ws.data))

    def _compute_maximum(self, ws: _Workspace, **_) -> float:
        return float(np.max(ws.data))

    def _compute_range(self, ws: _Workspace, **_) -> float:
        return float(np.max(ws.data) - np.min(ws.data))

    # --- Dispersion ---

    def _compute_variance(self, ws: _Workspace, **_) -> float:
        """Sample variance with Bessel correction (n-1)."""
        check_min_samples(ws.data, 2, 'x', 'sample variance')
        return ws.sum_square_deviations() / (ws.n - 1)

    def _compute_sd(self, ws: _Workspace, **options) -> float:
        return float(np.sqrt(self._compute_variance(ws, **options)))

    def _compute_pvariance(self, ws: _Workspace, **_) -> float:
        """Population variance (divides by n)."""
        return ws.sum_square_deviations() / ws.n

    def _compute_psd(self, ws: _Workspace, **options) -> float:
        return float(np.sqrt(self._compute_pvariance(ws, **options)))

    def _compute_average_deviation(self, ws: _Workspace, *, center=None, **_) -> float:
        c = ws.mean if center is None else self._location(center)
        return float(np.sum(np.abs(ws.data - c)) / ws.n)

    # --- Quantiles ---

    def _compute_quantiles(
        self, ws: _Workspace, *, quantile_probs, quantile_type, **_,
    ) -> NDArray:
        return hyndman_fan_quantile(ws.sorted, quantile_probs, quantile_type)

    def _compute_summary_table(self, ws: _Workspace, **_) -> NDArray:
        """
        Six-number summary: Min, Q1, Median, Mean, Q3, Max.

        Q1 and Q3 use quantile type 7.
        """
        xs = ws.sorted
        q1, q3 = hyndman_fan_quantile(xs, np.array([0.25, 0.75]), 7)
        return np.array([
            xs[0],
            q1,
            self._compute_median(ws),
            ws.mean,
            q3,
            xs[-1],
        ], dtype=np.float64)

    # --- Shape ---

    def _location(self, center) -> float:
        if not np.isfinite(center):
            raise InvalidArgumentError(
                f"center: must be finite, got {center!r}", name='center', value=center
            )
        return float(center)

    def _moment_basis(self, ws: _Workspace, center, scale) -> tuple[float, float]:
        """Location and population standard deviation used to standardise."""
        m = ws.mean if center is None else self._location(center)
        if scale is None:
            # about the caller's center when one is given, not the sample mean
            ss = ws.sum_square_deviations(None if center is None else m)
            s = float(np.sqrt(ss / ws.n))
            if s == 0.0:
                raise NumericalError(
                    "standardised moments are undefined for zero-variance data"
                )
        else:
            check_positive(scale, 'pstdev')
            s = float(scale)
        return m, s

    def _standardised_sum(self, ws: _Workspace, r: int, center, scale) -> float:
        m, s = self._moment_basis(ws, center, scale)
        return float(np.sum(((ws.data - m) / s) ** r))

    def _compute_std_moment(self, ws: _Workspace, *, center=None, scale=None,
                            degree=2, **_) -> float:
        check_choice(degree, MOMENT_DEGREES, 'degree')
        return self._standardised_sum(ws, int(degree), center, scale)

    def _compute_pskewness(self, ws: _Workspace, *, center=None, scale=None, **_) -> float:
        """Population skewness g1 = m3 / n."""
        return self._standardised_sum(ws, 3, center, scale) / ws.n

    def _compute_skewness(self, ws: _Workspace, *, center=None, scale=None, **_) -> float:
        """
        Adjusted Fisher-Pearson skewness.

        G1 = g1 * sqrt(n*(n-1)) / (n-2). Requires n >= 3.
        """
        check_min_samples(ws.data, 3, 'x', 'skewness')
        n = ws.n
        g1 = self._standardised_sum(ws, 3, center, scale) / n
        return float(g1 * np.sqrt(n * (n - 1.0)) / (n - 2.0))

    def _compute_pkurtosis(self, ws: _Workspace, *, center=None, scale=None, **_) -> float:
        """Population excess kurtosis g2 - 3."""
        return self._standardised_sum(ws, 4, center, scale) / ws.n - 3.0

    def _compute_kurtosis(self, ws: _Workspace, *, center=None, scale=None, **_) -> float:
        """
        Bias-adjusted excess kurtosis.

        (n-1)/((n-2)(n-3)) * ((n+1)*g2 - 3*(n-1)), where g2 = m4 / n is
        the (non-excess) population kurtosis. Requires n >= 4.
        """
        check_min_samples(ws.data, 4, 'x', 'kurtosis')
        n = float(ws.n)
        g2 = self._standardised_sum(ws, 4, center, scale) / n
        q = (n - 1.0) / ((n - 2.0) * (n - 3.0))
        return float(q * ((n + 1.0) * g2 - 3.0 * (n - 1.0)))

    def _compute_standard_scores(self, ws: _Workspace, **options) -> NDArray:
        """(x - mean) / sample sd, one score per observation."""
        sd = self._compute_sd(ws, **options)
        if sd == 0.0:
            raise NumericalError("standard scores are undefined for zero-variance data")
        return (ws.data - ws.mean) / sd
