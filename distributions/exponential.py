"""
Exponential distribution Exp(λ) with rate λ > 0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np
from scipy import stats

from core.config import AnalysisConfig

from .base import INVALID_PARAMETRIZATION, ContinuousDistribution


def is_valid_parameter_set(rate: float) -> bool:
    return rate > 0.0


def _validate(rate: float) -> None:
    if not is_valid_parameter_set(rate):
        raise ValueError(INVALID_PARAMETRIZATION)


def pdf(rate: float, x: float) -> float:
    _validate(rate)
    if x < 0.0:
        return 0.0
    return rate * math.exp(-rate * x)


def cdf(rate: float, x: float) -> float:
    _validate(rate)
    if x < 0.0:
        return 0.0
    return 1.0 - math.exp(-rate * x)


def inv_cdf(rate: float, p: float) -> float:
    _validate(rate)
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p must be in [0, 1], got {p}")
    if p >= 1.0:
        return math.inf
    return -math.log(1.0 - p) / rate


def sample(rate: float, rng: Optional[np.random.Generator] = None) -> float:
    """Inverse-transform draw: -ln(1 - U) / λ."""
    _validate(rate)
    rng = rng if rng is not None else np.random.default_rng()
    return -math.log(1.0 - rng.random()) / rate


def samples(
    rate: float,
    count: int,
    *,
    seed: Optional[int] = None,
    workers: Optional[int] = None,
    config: Optional[AnalysisConfig] = None,
) -> np.ndarray:
    return Exponential(rate).samples(count, seed=seed, workers=workers, config=config)


def point_estimate(samples: Iterable[float]) -> float:
    """Unbiased rate estimate (N - 1) / Σx."""
    values = np.asarray(list(samples), dtype=float)
    if values.size < 2:
        raise ValueError("rate estimation needs at least 2 samples.")
    return float((values.size - 1) / values.sum())


def interval_estimate(samples: Iterable[float], alpha: float = 0.05) -> Tuple[float, float]:
    """
    Exact confidence interval for the rate (MATLAB expfit).

    2λΣx follows χ² with 2N degrees of freedom.
    """
    values = np.asarray(list(samples), dtype=float)
    h = point_estimate(values)
    n = values.size
    lower = h * stats.chi2.ppf(alpha / 2, 2 * n) / (2 * (n - 1))
    upper = h * stats.chi2.ppf(1 - alpha / 2, 2 * n) / (2 * (n - 1))
    return float(lower), float(upper)


@dataclass(frozen=True)
class Exponential(ContinuousDistribution):
    rate: float

    def __post_init__(self) -> None:
        _validate(self.rate)

    def __str__(self) -> str:
        return f"Exponential(λ = {self.rate})"

    @property
    def mean(self) -> float:
        return 1.0 / self.rate

    @property
    def variance(self) -> float:
        return 1.0 / (self.rate * self.rate)

    @property
    def std_dev(self) -> float:
        return 1.0 / self.rate

    @property
    def entropy(self) -> float:
        return 1.0 - math.log(self.rate)

    @property
    def skewness(self) -> float:
        return 2.0

    @property
    def median(self) -> float:
        return math.log(2.0) / self.rate

    @property
    def minimum(self) -> float:
        return 0.0

    @property
    def maximum(self) -> float:
        return math.inf

    def pdf(self, x: float) -> float:
        return pdf(self.rate, x)

    def cdf(self, x: float) -> float:
        return cdf(self.rate, x)

    def inv_cdf(self, p: float) -> float:
        return inv_cdf(self.rate, p)

    def sample(self, rng: Optional[np.random.Generator] = None) -> float:
        return sample(self.rate, rng)
