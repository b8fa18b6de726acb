"""Tests for special functions."""

from __future__ import annotations

import numpy as np
import pytest
from scipy import special as sp_special
from scipy import stats

from core.config import AnalysisConfig
from numerics.special import (
    bernoulli,
    bernoulli_trials,
    beta,
    beta_incomplete,
    beta_regularized,
    binomial_coefficient,
    erf,
    erfc_inv,
    factorial,
    laplace,
)


class TestCombinatorics:

    def test_binomial_coefficient(self):
        assert binomial_coefficient(5, 2) == 10
        assert binomial_coefficient(30, 15) == 155117520
        assert binomial_coefficient(4, 0) == 1

    def test_binomial_coefficient_k_above_n_is_zero(self):
        assert binomial_coefficient(3, 5) == 0

    def test_factorial(self):
        assert factorial(0) == 1
        assert factorial(5) == 120

    def test_factorial_negative_raises(self):
        with pytest.raises(ValueError):
            factorial(-1)


class TestErrorFunctions:

    @pytest.mark.parametrize("x", [-2.5, -1.0, -0.3, 0.0, 0.1, 0.5, 1.0, 1.7, 3.0])
    def test_erf_matches_scipy(self, x):
        assert erf(x) == pytest.approx(float(sp_special.erf(x)), abs=2e-7)

    def test_erf_is_odd(self):
        assert erf(-0.8) == pytest.approx(-erf(0.8))

    def test_erfc_inv(self):
        assert erfc_inv(1.0) == pytest.approx(0.0, abs=1e-15)
        assert float(sp_special.erfc(erfc_inv(0.3))) == pytest.approx(0.3)

    def test_laplace(self):
        assert laplace(1.96) == pytest.approx(stats.norm.cdf(1.96) - 0.5, abs=1e-4)

    def test_laplace_non_positive_is_zero(self):
        assert laplace(0.0) == 0
        assert laplace(-1.0) == 0

    def test_laplace_precision_from_config(self):
        cfg = AnalysisConfig(integration_step=0.5)
        assert laplace(1.0, config=cfg) == pytest.approx(laplace(1.0, precision=0.5))
        assert laplace(1.0, config=cfg) != pytest.approx(laplace(1.0), abs=1e-6)


class TestBeta:

    def test_beta(self):
        assert beta(2, 2) == pytest.approx(1.0 / 6.0, abs=1e-6)
        assert beta(2, 3) == pytest.approx(float(sp_special.beta(2, 3)), abs=1e-6)

    def test_beta_incomplete(self):
        # ∫_0^0.5 t (1 - t) dt
        assert beta_incomplete(2, 2, 0.5) == pytest.approx(1.0 / 12.0, abs=1e-6)

    def test_beta_regularized_matches_scipy(self):
        assert beta_regularized(2, 3, 0.5) == pytest.approx(float(sp_special.betainc(2, 3, 0.5)), abs=1e-4)

    def test_step_from_config(self):
        cfg = AnalysisConfig(integration_step=0.25)
        assert beta(2, 2, config=cfg) == pytest.approx(beta(2, 2, step=0.25))
        assert beta_regularized(2, 3, 0.5, config=cfg) == pytest.approx(beta_regularized(2, 3, 0.5, step=0.25))


class TestBernoulli:

    def test_certain_outcomes(self, rng):
        assert bernoulli(0.0, rng) is False
        assert bernoulli(1.0, rng) is True

    def test_invalid_probability(self, rng):
        with pytest.raises(ValueError):
            bernoulli(1.5, rng)
        with pytest.raises(ValueError):
            bernoulli_trials(-0.1, 10, rng)

    def test_trial_frequency(self, rng):
        trials = bernoulli_trials(0.3, 10_000, rng)
        assert trials.dtype == bool
        assert len(trials) == 10_000
        assert trials.mean() == pytest.approx(0.3, abs=0.02)

    def test_explicit_generator_is_reproducible(self):
        a = bernoulli_trials(0.5, 100, np.random.default_rng(5))
        b = bernoulli_trials(0.5, 100, np.random.default_rng(5))
        np.testing.assert_array_equal(a, b)
