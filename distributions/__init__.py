"""
Distributions package — closed-form univariate distributions and their samplers.

  1. base.py         — SupportsCDF capability, discrete/continuous base classes
  2. binomial.py     — B(n, p)
  3. exponential.py  — Exp(λ)
  4. normal.py       — N(μ, σ²)
  5. sampler.py      — fork-join batch sampling with per-worker generators
"""

from .base import ContinuousDistribution, DiscreteDistribution, SupportsCDF, UnivariateDistribution
from .binomial import Binomial
from .exponential import Exponential
from .normal import Normal
from .sampler import parallel_samples

__all__ = [
    "ContinuousDistribution",
    "DiscreteDistribution",
    "SupportsCDF",
    "UnivariateDistribution",
    "Binomial",
    "Exponential",
    "Normal",
    "parallel_samples",
]
