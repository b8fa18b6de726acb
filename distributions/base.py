"""
Base classes for univariate distributions.
Just the interface; closed-form implementations live in binomial/exponential/normal.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

import numpy as np

from core.config import AnalysisConfig

from .sampler import parallel_samples

INVALID_PARAMETRIZATION = "Invalid parametrization for the distribution."


@runtime_checkable
class SupportsCDF(Protocol):
    """Anything the goodness-of-fit evaluator can consume: P(X <= x)."""

    def cdf(self, x: float) -> float:
        ...


class UnivariateDistribution:
    """Interface shared by discrete and continuous distributions."""

    sample_dtype = float

    def cdf(self, x: float) -> float:
        raise NotImplementedError

    def sample(self, rng: Optional[np.random.Generator] = None):
        raise NotImplementedError

    def samples(
        self,
        count: int,
        *,
        seed: Optional[int] = None,
        workers: Optional[int] = None,
        config: Optional[AnalysisConfig] = None,
    ) -> np.ndarray:
        """Draw `count` independent values in parallel; reproducible for a fixed seed and worker count."""
        return parallel_samples(
            self.sample, count, seed=seed, workers=workers, dtype=self.sample_dtype, config=config
        )


class DiscreteDistribution(UnivariateDistribution):
    """Distribution over integers; `pmf` gives P(X = k)."""

    sample_dtype = int

    def pmf(self, k: int) -> float:
        raise NotImplementedError


class ContinuousDistribution(UnivariateDistribution):
    """Distribution with a density; `pdf` gives dP(X <= x)/dx."""

    def pdf(self, x: float) -> float:
        raise NotImplementedError

    def inv_cdf(self, p: float) -> float:
        raise NotImplementedError
