"""
Test configuration and fixtures for pytest.

This file contains fixtures and configuration that will be available to all tests.
"""
import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

# Set random seed for reproducibility
np.random.seed(42)


# Common test data fixtures
@pytest.fixture
def sample_time_series():
    """Generate a sample time series for testing."""
    return np.random.randn(30)


@pytest.fixture
def sample_2d_time_series():
    """Generate a 2D array of time series for testing."""
    return np.random.randn(5, 20)  # 5 time series, each with 20 points


@pytest.fixture
def sine_cosine():
    """The sin(1..12) / cos(1..12) pair."""
    k = np.arange(1, 13)
    return np.sin(k), np.cos(k)


@pytest.fixture
def palindrome():
    """Short symmetric sequence used for identity alignments."""
    return np.array([0.0, 1.0, 2.0, 1.0, 0.0])
