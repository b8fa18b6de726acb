"""Tests for the trapezoid integrator."""

from __future__ import annotations

import math

import pytest

from core.config import AnalysisConfig
from numerics.integration import integrate


class TestTrapezoid:

    def test_constant_function_is_exact(self):
        assert integrate(lambda x: 1.0, 0.0, 1.0, step=0.1) == pytest.approx(1.0, abs=1e-9)

    def test_interval_narrower_than_step_is_zero(self):
        assert integrate(lambda x: x, 0.0, 0.0005, step=0.001) == 0

    def test_reversed_bounds_are_zero(self):
        assert integrate(lambda x: x, 1.0, 0.0, step=0.01) == 0

    def test_interval_of_exactly_one_step(self):
        # no interior points: step * (f(0) + f(0.5)) / 2
        assert integrate(lambda x: x, 0.0, 0.5, step=0.5) == pytest.approx(0.125)

    def test_quadratic(self):
        step = 2.0 ** -10
        assert integrate(lambda x: x * x, 0.0, 1.0, step=step) == pytest.approx(1.0 / 3.0, abs=1e-6)

    def test_exponential(self):
        step = 2.0 ** -12
        assert integrate(math.exp, 0.0, 1.0, step=step) == pytest.approx(math.e - 1.0, abs=1e-6)

    def test_default_step(self):
        assert integrate(lambda x: 2.0 * x, 0.0, 1.0) == pytest.approx(1.0, abs=1e-3)

    def test_step_from_config(self):
        cfg = AnalysisConfig(integration_step=0.5)
        assert integrate(lambda x: x, 0.0, 0.5, config=cfg) == pytest.approx(0.125)
        assert integrate(lambda x: x, 0.0, 0.25, config=cfg) == 0

    def test_explicit_step_overrides_config(self):
        cfg = AnalysisConfig(integration_step=1.0)
        assert integrate(lambda x: 1.0, 0.0, 0.5, step=0.125, config=cfg) == pytest.approx(0.5)

    def test_workers_from_config(self):
        step = 2.0 ** -12
        reference = integrate(math.sin, 0.0, 2.0, step=step, workers=1)
        cfg = AnalysisConfig(workers=3)
        assert integrate(math.sin, 0.0, 2.0, step=step, config=cfg) == pytest.approx(reference, rel=1e-10)


class TestParallelReduction:

    @pytest.mark.parametrize("workers", [1, 2, 3, 8])
    def test_worker_count_does_not_change_result(self, workers):
        step = 2.0 ** -12
        reference = integrate(math.sin, 0.0, 2.0, step=step, workers=1)
        assert integrate(math.sin, 0.0, 2.0, step=step, workers=workers) == pytest.approx(
            reference, rel=1e-10
        )

    def test_more_workers_than_points(self):
        assert integrate(lambda x: 1.0, 0.0, 0.5, step=0.125, workers=64) == pytest.approx(0.5, abs=1e-12)

    @pytest.mark.parametrize("workers", [1, 4])
    def test_function_errors_propagate(self, workers):
        def explode(x):
            if x > 0.5:
                raise ZeroDivisionError("boom")
            return x

        with pytest.raises(ZeroDivisionError, match="boom"):
            integrate(explode, 0.0, 1.0, step=0.01, workers=workers)
