"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest


@pytest.fixture
def samples_10():
    """Ten measurements with published reference statistics."""
    return [200.0, 171.0, 176.0, 194.0, 148.0, 203.0, 182.0, 186.0, 176.0, 161.0]


@pytest.fixture
def samples_30(samples_10):
    """The ten reference measurements extended to thirty."""
    return samples_10 + [
        159.0, 198.0, 167.0, 164.0, 186.0, 150.0, 190.0, 171.0, 190.0, 145.0,
        164.0, 186.0, 175.0, 202.0, 199.0, 161.0, 150.0, 209.0, 164.0, 149.0,
    ]  # fmt: skip


@pytest.fixture
def cancellation_terms():
    """Terms whose naive float sum loses both small values."""
    return [1.0, 1e100, 1.0, -1e100]


@pytest.fixture
def normal_samples():
    """Reproducible normally distributed samples."""
    rng = np.random.default_rng(42)
    return rng.normal(loc=50.0, scale=7.5, size=1000)
