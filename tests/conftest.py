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
def binned_heights():
    """Grouped sample: six 2-unit bins from 22 to 34, N = 100."""
    bin_ranges = [(22, 24), (24, 26), (26, 28), (28, 30), (30, 32), (32, 34)]
    counts = [2, 12, 34, 40, 10, 2]
    return bin_ranges, counts


@pytest.fixture
def frequency_table():
    """Eight bins with given expected frequencies."""
    empirical = [7, 12, 49, 66, 83, 67, 23, 13]
    theoretical = [5, 9, 46, 60, 89, 81, 19, 11]
    return empirical, theoretical


@pytest.fixture
def variance_samples():
    """Two samples of different sizes; var(x) = 20.125, var(y) = 4.84."""
    x = [100.0, 100.5, 99.5, 90.0, 100.0]
    y = [85.4, 80.6, 83.0, 81.0]
    return x, y
