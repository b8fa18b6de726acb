"""
Pearson chi-squared goodness-of-fit.

Data flow:
  samples -> group_observations -> observed frequencies per bin
  bins + distribution.cdf     -> expected frequencies per bin
  Σ (observed - expected)² / expected -> statistic

Any object with a callable `cdf(x)` works as the distribution: the package's
own Binomial/Exponential/Normal, or a frozen scipy.stats distribution.
Discrete and continuous distributions share one code path.

A bin with zero expected frequency is not guarded against: its term is inf
(or nan when nothing was observed there either) and so is the statistic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
from scipy import stats

from core.config import AnalysisConfig
from core.utils import ArrayLike, as_observations
from distributions.base import SupportsCDF

from .grouping import GroupRow, group_observations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChiSquaredTestResult:
    statistic: float
    degrees_of_freedom: int
    critical_value: float
    confidence: float
    bin_count: int

    @property
    def passed(self) -> bool:
        """True when the sample is consistent with the distribution at this confidence."""
        return bool(self.statistic < self.critical_value)

    def __repr__(self) -> str:
        return (
            f"ChiSquaredTestResult(statistic={self.statistic:.4f}, "
            f"dof={self.degrees_of_freedom}, critical={self.critical_value:.4f}, "
            f"passed={self.passed})"
        )


def _require_cdf(distribution) -> None:
    if not isinstance(distribution, SupportsCDF) or not callable(distribution.cdf):
        raise ValueError(f"Not expected distribution value: {distribution!r} (no cdf)")


def expected_frequencies(distribution: SupportsCDF, rows: Sequence[GroupRow], n: int) -> np.ndarray:
    """n * (F(upper_i) - F(lower_i)) for every bin."""
    _require_cdf(distribution)
    return np.array(
        [n * (float(distribution.cdf(r.upper)) - float(distribution.cdf(r.lower))) for r in rows],
        dtype=float,
    )


def _statistic(observed: np.ndarray, expected: np.ndarray) -> float:
    n_zero = int(np.count_nonzero(expected == 0.0))
    if n_zero:
        logger.warning(
            "chi-squared: %d bin(s) with zero expected frequency; statistic is not finite", n_zero
        )
    with np.errstate(divide="ignore", invalid="ignore"):
        terms = (observed - expected) ** 2 / expected
    return float(terms.sum())


def _grouped_statistic(
    distribution: SupportsCDF, samples: ArrayLike, config: Optional[AnalysisConfig]
) -> Tuple[List[GroupRow], float]:
    _require_cdf(distribution)
    data = as_observations(samples, "samples")
    rows = group_observations(data, config=config)
    observed = np.array([r.frequency for r in rows], dtype=float)
    expected = expected_frequencies(distribution, rows, data.size)
    return rows, _statistic(observed, expected)


def chi_squared_statistic(
    distribution: SupportsCDF,
    samples: ArrayLike,
    *,
    config: Optional[AnalysisConfig] = None,
) -> float:
    """
    Pearson statistic of `samples` against `distribution`.

    The caller compares it with a chi-squared critical value; see
    chi_squared_test for the packaged comparison.
    """
    _, statistic = _grouped_statistic(distribution, samples, config)
    return statistic


def degrees_of_freedom(bin_count: int, n_estimated_params: int = 0) -> int:
    """bins - 1 - number of parameters estimated from the same sample."""
    dof = bin_count - 1 - n_estimated_params
    if dof < 1:
        raise ValueError(
            f"Non-positive degrees of freedom: {bin_count} bins, {n_estimated_params} estimated parameter(s)"
        )
    return dof


def chi_squared_test(
    distribution: SupportsCDF,
    samples: ArrayLike,
    *,
    n_estimated_params: int = 0,
    confidence: Optional[float] = None,
    config: Optional[AnalysisConfig] = None,
) -> ChiSquaredTestResult:
    """
    Statistic plus the critical value chi2.ppf(confidence, dof).

    Parameters
    ----------
    n_estimated_params : int
        Distribution parameters fitted on `samples` (2 for a fitted Normal).
    confidence : float, optional
        Defaults to config.confidence (0.95).
    """
    cfg = config or AnalysisConfig()
    level = confidence if confidence is not None else cfg.confidence

    rows, statistic = _grouped_statistic(distribution, samples, cfg)

    dof = degrees_of_freedom(len(rows), n_estimated_params)
    critical = float(stats.chi2.ppf(level, dof))
    result = ChiSquaredTestResult(
        statistic=statistic,
        degrees_of_freedom=dof,
        critical_value=critical,
        confidence=level,
        bin_count=len(rows),
    )
    logger.debug("chi_squared_test: %r", result)
    return result
