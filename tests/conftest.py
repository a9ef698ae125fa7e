"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def spread_sample():
    """Eight-point sample with hand-checked dispersion statistics."""
    return [0.0, 0.25, 0.25, 1.25, 1.5, 1.75, 2.75, 3.25]


@pytest.fixture
def skewed_sample():
    """Right-skewed eight-point sample with hand-checked shape statistics."""
    return [1.25, 1.5, 1.5, 1.75, 1.75, 2.5, 2.75, 4.5]
