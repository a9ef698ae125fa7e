"""
Tests for the Result[P] envelope.

Validates:
    - Generic payload
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import numpy as np
import pytest

import simplestats
from simplestats.core.result import Result, _default_provenance


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**overrides):
    kwargs = dict(
        params=FakeParams(value=42.0),
        info={"computed": ["mean"]},
        timing={"total_seconds": 0.01},
        backend_name="cpu_descriptive",
    )
    kwargs.update(overrides)
    return Result(**kwargs)


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result()
        assert result.params.value == 42.0
        assert result.info["computed"] == ["mean"]
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_descriptive"

    def test_timing_optional(self):
        assert _result(timing=None).timing is None

    def test_default_warnings_empty(self):
        assert _result().warnings == ()


class TestResultImmutability:

    def test_cannot_reassign_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=0.0)

    def test_cannot_reassign_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("late",)


class TestHasWarning:

    def test_substring_match(self):
        result = _result(warnings=("variance: sample variance requires at least 2 observations, got 1",))
        assert result.has_warning("at least 2")
        assert not result.has_warning("kurtosis")

    def test_no_warnings(self):
        assert not _result().has_warning("anything")


class TestProvenance:

    def test_default_keys(self):
        prov = _default_provenance()
        assert set(prov) == {"simplestats_version", "numpy_version", "python_version"}

    def test_versions(self):
        prov = _result().provenance
        assert prov["simplestats_version"] == simplestats.__version__
        assert prov["numpy_version"] == np.__version__

    def test_each_result_gets_own_dict(self):
        a, b = _result(), _result()
        assert a.provenance == b.provenance
        assert a.provenance is not b.provenance
