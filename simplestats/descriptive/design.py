"""
SampleDesign: data wrapper for descriptive statistics.

Wraps a one-dimensional sample and provides validation and metadata for
the descriptive statistics pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from simplestats.core.validation import (
    check_1d, check_array, check_finite, check_not_empty,
)


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for descriptive statistics.

    Owns a read-only float64 copy of a finite, non-empty, one-dimensional
    sample. The caller's object is never referenced after construction,
    so nothing computed downstream can mutate or alias it.

    Construction:
        SampleDesign.from_array(data)
        SampleDesign.from_array(series, name='height')
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _name: str | None

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str | None = None) -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            Sequence of real numbers: list, tuple, numpy array, or anything
            with a .values attribute (pandas Series). A Series' name is used
            when name is not given.
        name : str, optional
            Label used in rendered output.

        Raises
        ------
        ValidationError
            Non-numeric input.
        DimensionError
            Input is not one-dimensional.
        EmptyInputError
            Input has no elements.
        InvalidArgumentError
            Input contains NaN or infinite values.
        """
        if name is None and getattr(data, 'name', None) is not None:
            name = str(data.name)

        data_array = check_array(data, 'x')
        check_1d(data_array, 'x')
        check_not_empty(data_array, 'x')
        check_finite(data_array, 'x')

        data_array.setflags(write=False)
        return cls(_data=data_array, _n=int(data_array.shape[0]), _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Sample values in caller order, read-only."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def name(self) -> str | None:
        """Sample label, or None if not available."""
        return self._name

    @property
    def n_observations(self) -> int:
        return self._n

    @property
    def metadata(self) -> dict[str, Any]:
        return {'n': self._n, 'name': self._name}

    def sorted(self) -> NDArray[np.floating[Any]]:
        """Ascending copy of the sample."""
        return np.sort(self._data, kind='stable')

    def __repr__(self) -> str:
        label = f", name={self._name!r}" if self._name is not None else ""
        return f"SampleDesign(n={self._n}{label})"
