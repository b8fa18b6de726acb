"""Shared pytest fixtures."""

from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def small_sample() -> list:
    """N=10 sample with four values equal to the maximum."""
    return [1, 2, 2, 3, 3, 3, 4, 4, 4, 4]


@pytest.fixture
def chi_square_values() -> np.ndarray:
    """Fifty draws from a chi-square distribution (MATLAB chi2rnd)."""
    return np.array([
        4.9506, 6.1203, 1.4620, 6.3150, 3.6614, 4.8902, 11.7663, 8.2703, 1.7215, 2.1105,
        21.9353, 2.6600, 4.5397, 2.5497, 4.4388, 3.0415, 4.5772, 5.1293, 1.1323, 9.6146,
        6.3091, 3.8107, 3.9854, 2.6705, 3.9978, 5.5348, 0.8111, 5.1975, 6.9759, 1.4899,
        8.4501, 3.8086, 9.2413, 3.1875, 2.1619, 1.8470, 3.9828, 2.7426, 2.9056, 6.8836,
        8.1504, 3.4887, 5.1483, 2.3263, 5.6205, 4.4762, 5.3977, 3.2068, 3.3470, 7.8549,
    ])
