"""
Special functions used by the distributions and estimators.

Combinatorics, the Laplace and error functions, the (incomplete) Beta
function evaluated with the trapezoid integrator, and Bernoulli trials drawn
from an explicit numpy Generator.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from scipy import special as sp_special

from core.config import AnalysisConfig

from .integration import integrate

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)

# Abramowitz & Stegun 7.1.26
_ERF_A1 = 0.254829592
_ERF_A2 = -0.284496736
_ERF_A3 = 1.421413741
_ERF_A4 = -1.453152027
_ERF_A5 = 1.061405429
_ERF_P = 0.3275911


def binomial_coefficient(n: int, k: int) -> int:
    """C(n, k); zero when k > n."""
    if k > n:
        return 0
    if n < 0 or k < 0:
        raise ValueError(f"binomial_coefficient needs n >= 0 and k >= 0, got n={n}, k={k}")
    return math.comb(n, k)


def factorial(n: int) -> int:
    if n < 0:
        raise ValueError(f"factorial is undefined for n={n}")
    return math.factorial(n)


def _standard_normal_density(t: float) -> float:
    return _INV_SQRT_2PI * math.exp(-0.5 * t * t)


def laplace(
    a: float, precision: Optional[float] = None, *, config: Optional[AnalysisConfig] = None
) -> float:
    """Laplace function Φ0(a) = ∫_0^a φ(t) dt; 0 for a <= 0. `precision` defaults to config.integration_step."""
    return integrate(_standard_normal_density, 0.0, a, step=precision, config=config)


def erf(x: float) -> float:
    """Error function, A&S 7.1.26 rational approximation (|error| < 1.5e-7)."""
    sign = -1.0 if x < 0 else 1.0
    x = abs(x)
    t = 1.0 / (1.0 + _ERF_P * x)
    poly = ((((_ERF_A5 * t + _ERF_A4) * t + _ERF_A3) * t + _ERF_A2) * t + _ERF_A1) * t
    return sign * (1.0 - poly * math.exp(-x * x))


def erfc_inv(z: float) -> float:
    """Inverse complementary error function, z in [0, 2]."""
    return float(sp_special.erfcinv(z))


def beta_incomplete(
    a: float,
    b: float,
    x: float,
    step: Optional[float] = None,
    *,
    config: Optional[AnalysisConfig] = None,
) -> float:
    """B(x; a, b) = ∫_0^x t^(a-1) (1-t)^(b-1) dt by the trapezoid rule."""
    return integrate(lambda t: t ** (a - 1) * (1 - t) ** (b - 1), 0.0, x, step=step, config=config)


def beta(
    a: float, b: float, step: Optional[float] = None, *, config: Optional[AnalysisConfig] = None
) -> float:
    return beta_incomplete(a, b, 1.0, step=step, config=config)


def beta_regularized(
    a: float,
    b: float,
    x: float,
    step: Optional[float] = None,
    *,
    config: Optional[AnalysisConfig] = None,
) -> float:
    """I_x(a, b) = B(x; a, b) / B(a, b)."""
    return beta_incomplete(a, b, x, step=step, config=config) / beta(a, b, step=step, config=config)


def _check_probability(p: float) -> None:
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Bernoulli probability must be in [0, 1], got {p}")


def bernoulli(p: float, rng: Optional[np.random.Generator] = None) -> bool:
    """One Bernoulli trial with success probability p."""
    _check_probability(p)
    rng = rng if rng is not None else np.random.default_rng()
    return bool(rng.random() < p)


def bernoulli_trials(p: float, count: int, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """`count` independent Bernoulli trials as a boolean array."""
    _check_probability(p)
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    rng = rng if rng is not None else np.random.default_rng()
    return rng.random(count) < p
