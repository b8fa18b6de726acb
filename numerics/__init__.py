"""
Numerics package — trapezoid integration and the special functions built on it.
"""

from .integration import integrate
from .special import (
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

__all__ = [
    "integrate",
    "bernoulli",
    "bernoulli_trials",
    "beta",
    "beta_incomplete",
    "beta_regularized",
    "binomial_coefficient",
    "erf",
    "erfc_inv",
    "factorial",
    "laplace",
]
