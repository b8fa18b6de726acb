"""
Binomial distribution B(n, p): number of successes in n Bernoulli trials.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

from core.config import AnalysisConfig
from numerics.special import bernoulli_trials

from .base import INVALID_PARAMETRIZATION, DiscreteDistribution
from . import normal as _normal


def is_valid_parameter_set(p: float, n: int) -> bool:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        return False
    return 0.0 <= p <= 1.0 and n >= 0


def _validate(p: float, n: int) -> None:
    if not is_valid_parameter_set(p, n):
        raise ValueError(INVALID_PARAMETRIZATION)


def pmf(p: float, n: int, k: int) -> float:
    """P(X = k)."""
    _validate(p, n)
    if k < 0 or k > n:
        return 0.0
    if p == 0.0:
        return 1.0 if k == 0 else 0.0
    if p == 1.0:
        return 1.0 if k == n else 0.0
    # log space: C(n, k) overflows a float past n ~ 1030
    log_coefficient = math.lgamma(n + 1) - math.lgamma(k + 1) - math.lgamma(n - k + 1)
    return math.exp(log_coefficient + k * math.log(p) + (n - k) * math.log1p(-p))


def cdf(p: float, n: int, x: float) -> float:
    """P(X <= x), summed term by term and capped at 1."""
    _validate(p, n)
    if x < 0.0:
        return 0.0
    if x > n:
        return 1.0
    total = 0.0
    for k in range(int(math.floor(x)) + 1):
        total += pmf(p, n, k)
    return min(total, 1.0)


def sample(p: float, n: int, rng: Optional[np.random.Generator] = None) -> int:
    """Count of successes in n Bernoulli(p) trials."""
    _validate(p, n)
    return int(np.count_nonzero(bernoulli_trials(p, n, rng)))


def samples(
    p: float,
    n: int,
    count: int,
    *,
    seed: Optional[int] = None,
    workers: Optional[int] = None,
    config: Optional[AnalysisConfig] = None,
) -> np.ndarray:
    return Binomial(p, n).samples(count, seed=seed, workers=workers, config=config)


def point_estimate(samples: Iterable[int], n: int) -> float:
    """Success probability estimate: mean(samples) / n (MATLAB binofit)."""
    values = np.asarray(list(samples), dtype=float)
    if values.size == 0:
        raise ValueError("samples must not be empty.")
    if n <= 0:
        raise ValueError(INVALID_PARAMETRIZATION)
    return float(values.mean() / n)


def interval_estimate(samples: Iterable[int], n: int, alpha: float = 0.05) -> Tuple[float, float]:
    """
    Normal-approximation (Wald) confidence interval for p.

    Every sample counts n trials, so the pooled trial count is n * len(samples).
    """
    values = list(samples)
    h = point_estimate(values, n)
    z = _normal.inv_cdf(0.0, 1.0, alpha / 2)
    half_width = z * math.sqrt(h * (1 - h) / (n * len(values)))
    return h + half_width, h - half_width


@dataclass(frozen=True)
class Binomial(DiscreteDistribution):
    p: float
    n: int

    def __post_init__(self) -> None:
        _validate(self.p, self.n)

    def __str__(self) -> str:
        return f"Binomial(p = {self.p}, n = {self.n})"

    @property
    def mean(self) -> float:
        return self.p * self.n

    @property
    def variance(self) -> float:
        return self.p * (1.0 - self.p) * self.n

    @property
    def std_dev(self) -> float:
        return math.sqrt(self.variance)

    @property
    def entropy(self) -> float:
        if self.p == 0.0 or self.p == 1.0:
            return 0.0
        h = 0.0
        for k in range(self.n + 1):
            pk = self.pmf(k)
            if pk > 0.0:
                h -= pk * math.log(pk)
        return h

    @property
    def skewness(self) -> float:
        num = 1.0 - 2.0 * self.p
        den = math.sqrt(self.n * self.p * (1.0 - self.p))
        if den == 0.0:
            # degenerate: all mass on one point
            return math.copysign(math.inf, num) if num != 0.0 else math.nan
        return num / den

    @property
    def median(self) -> float:
        return float(math.floor(self.p * self.n))

    @property
    def minimum(self) -> int:
        return 0

    @property
    def maximum(self) -> int:
        return self.n

    def pmf(self, k: int) -> float:
        return pmf(self.p, self.n, k)

    def cdf(self, x: float) -> float:
        return cdf(self.p, self.n, x)

    def sample(self, rng: Optional[np.random.Generator] = None) -> int:
        return sample(self.p, self.n, rng)

    def point_estimate(self, samples: Iterable[int]) -> float:
        return point_estimate(samples, self.n)

    def interval_estimate(self, samples: Iterable[int], alpha: float = 0.05) -> Tuple[float, float]:
        return interval_estimate(samples, self.n, alpha)
