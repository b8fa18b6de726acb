"""End-to-end goodness-of-fit runs: sample or load data, group it, test it."""

from __future__ import annotations

import numpy as np
import pytest
from scipy import stats

from distributions import Normal, exponential, normal
from hypotheses import chi_squared_test, group_observations, groups_to_dataframe, jarque_bera


class TestChiSquareSample:
    """Fifty chi-square draws produced by MATLAB."""

    def test_grouping(self, chi_square_values):
        rows = group_observations(chi_square_values)
        assert len(rows) == 7
        assert rows[0].lower == pytest.approx(0.8111)
        assert rows[-1].upper == pytest.approx(21.9353)
        # only the single maximum is left unbinned
        assert rows[-1].cumulative_frequency == 49

    def test_against_chi_square_distribution(self, chi_square_values):
        result = chi_squared_test(stats.chi2(5), chi_square_values)
        assert result.bin_count == 7
        assert result.degrees_of_freedom == 6
        assert np.isfinite(result.statistic)

    def test_frequency_table(self, chi_square_values):
        df = groups_to_dataframe(group_observations(chi_square_values))
        assert df["frequency"].sum() == 49
        assert df["cumulative_relative_frequency"].iloc[-1] == pytest.approx(49 / 50)


class TestFittedNormal:

    def test_fit_then_test(self):
        values = normal.samples(10.0, 1.0, 500, seed=21)
        mu = normal.point_estimate_mean(values)
        sigma = normal.point_estimate_std(values)
        result = chi_squared_test(Normal(mu, sigma), values, n_estimated_params=2)
        assert result.degrees_of_freedom == result.bin_count - 3
        assert result.statistic >= 0.0
        assert jarque_bera(values).statistic >= 0.0

    def test_fitted_exponential_beats_normal(self):
        values = exponential.samples(0.5, 1000, seed=2)
        rate = exponential.point_estimate(values)
        fitted = chi_squared_test(exponential.Exponential(rate), values, n_estimated_params=1)
        wrong = chi_squared_test(
            Normal(float(values.mean()), float(values.std(ddof=1))), values, n_estimated_params=2
        )
        assert fitted.statistic < wrong.statistic
