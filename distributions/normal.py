"""
Normal distribution N(μ, σ²).

CDF through the complementary error function, inverse CDF through its
inverse, and sampling by the Marsaglia polar method. Estimators follow
MATLAB normfit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np
from scipy import special as sp_special
from scipy import stats

from core.config import AnalysisConfig
from numerics.special import erfc_inv

from .base import INVALID_PARAMETRIZATION, ContinuousDistribution

_SQRT2 = math.sqrt(2.0)
_HALF_LOG_2PI_E = 1.4189385332046727


def is_valid_parameter_set(mu: float, sigma: float) -> bool:
    return sigma >= 0.0 and not math.isnan(mu)


def _validate(mu: float, sigma: float) -> None:
    if not is_valid_parameter_set(mu, sigma):
        raise ValueError(INVALID_PARAMETRIZATION)


def pdf(mu: float, sigma: float, x: float) -> float:
    _validate(mu, sigma)
    if sigma == 0.0:
        return math.inf if x == mu else 0.0
    z = (x - mu) / sigma
    return math.exp(-0.5 * z * z) / (sigma * math.sqrt(2 * math.pi))


def cdf(mu: float, sigma: float, x: float) -> float:
    _validate(mu, sigma)
    if sigma == 0.0:
        return 1.0 if x >= mu else 0.0
    return 0.5 * float(sp_special.erfc((mu - x) / (sigma * _SQRT2)))


def inv_cdf(mu: float, sigma: float, p: float) -> float:
    """Quantile function (MATLAB norminv)."""
    _validate(mu, sigma)
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p must be in [0, 1], got {p}")
    return mu - sigma * _SQRT2 * erfc_inv(2.0 * p)


def _polar_pair(rng: np.random.Generator) -> Tuple[float, float]:
    while True:
        u = 2.0 * rng.random() - 1.0
        v = 2.0 * rng.random() - 1.0
        s = u * u + v * v
        if 0.0 < s < 1.0:
            factor = math.sqrt(-2.0 * math.log(s) / s)
            return u * factor, v * factor


def sample(mu: float, sigma: float, rng: Optional[np.random.Generator] = None) -> float:
    _validate(mu, sigma)
    rng = rng if rng is not None else np.random.default_rng()
    x, _ = _polar_pair(rng)
    return mu + sigma * x


def samples(
    mu: float,
    sigma: float,
    count: int,
    *,
    seed: Optional[int] = None,
    workers: Optional[int] = None,
    config: Optional[AnalysisConfig] = None,
) -> np.ndarray:
    return Normal(mu, sigma).samples(count, seed=seed, workers=workers, config=config)


def _as_sample_array(samples: Iterable[float], minimum: int) -> np.ndarray:
    values = np.asarray(list(samples), dtype=float)
    if values.size < minimum:
        raise ValueError(f"estimation needs at least {minimum} samples, got {values.size}")
    return values


def point_estimate_mean(samples: Iterable[float]) -> float:
    return float(_as_sample_array(samples, 1).mean())


def point_estimate_std(samples: Iterable[float]) -> float:
    """Sample standard deviation with N - 1 in the denominator."""
    return float(_as_sample_array(samples, 2).std(ddof=1))


def interval_estimate_mean(samples: Iterable[float], alpha: float = 0.05) -> Tuple[float, float]:
    """Student-t confidence interval for μ."""
    values = _as_sample_array(samples, 2)
    n = values.size
    h = float(values.mean())
    s = float(values.std(ddof=1))
    half_width = stats.t.ppf(1 - alpha / 2, n - 1) * s / math.sqrt(n)
    return h - float(half_width), h + float(half_width)


def interval_estimate_std(samples: Iterable[float], alpha: float = 0.05) -> Tuple[float, float]:
    """χ² confidence interval for σ."""
    values = _as_sample_array(samples, 2)
    n = values.size
    s = float(values.std(ddof=1))
    lower = s * math.sqrt((n - 1) / stats.chi2.ppf(1 - alpha / 2, n - 1))
    upper = s * math.sqrt((n - 1) / stats.chi2.ppf(alpha / 2, n - 1))
    return lower, upper


@dataclass(frozen=True)
class Normal(ContinuousDistribution):
    mu: float = 0.0
    sigma: float = 1.0

    def __post_init__(self) -> None:
        _validate(self.mu, self.sigma)

    def __str__(self) -> str:
        return f"Normal(Mu = {self.mu}, Sigma = {self.sigma})"

    @property
    def mean(self) -> float:
        return self.mu

    @property
    def std_dev(self) -> float:
        return self.sigma

    @property
    def variance(self) -> float:
        return self.sigma * self.sigma

    @property
    def precision(self) -> float:
        return 1.0 / (self.sigma * self.sigma) if self.sigma > 0.0 else math.inf

    @property
    def entropy(self) -> float:
        return math.log(self.sigma) + _HALF_LOG_2PI_E if self.sigma > 0.0 else -math.inf

    @property
    def skewness(self) -> float:
        return 0.0

    @property
    def median(self) -> float:
        return self.mu

    @property
    def minimum(self) -> float:
        return -math.inf

    @property
    def maximum(self) -> float:
        return math.inf

    def pdf(self, x: float) -> float:
        return pdf(self.mu, self.sigma, x)

    def cdf(self, x: float) -> float:
        return cdf(self.mu, self.sigma, x)

    def inv_cdf(self, p: float) -> float:
        return inv_cdf(self.mu, self.sigma, p)

    def sample(self, rng: Optional[np.random.Generator] = None) -> float:
        return sample(self.mu, self.sigma, rng)
