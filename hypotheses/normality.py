"""
Jarque-Bera normality test from sample skewness and kurtosis.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from scipy import stats

from core.config import AnalysisConfig
from core.utils import ArrayLike, as_observations


@dataclass(frozen=True)
class JarqueBeraResult:
    passed: bool
    statistic: float
    critical_value: float


def jarque_bera(values: ArrayLike, confidence: Optional[float] = None) -> JarqueBeraResult:
    """
    JB = N * (S² / 6 + (K - 3)² / 24) with population moments, as scipy.stats.jarque_bera.

    Normality is not rejected when JB < chi2.ppf(confidence, 2).
    """
    level = confidence if confidence is not None else AnalysisConfig().confidence
    data = as_observations(values, "values")
    if float(data.std()) == 0.0:
        raise ValueError("Jarque-Bera needs values with non-zero spread.")
    statistic = float(stats.jarque_bera(data).statistic)
    critical = float(stats.chi2.ppf(level, 2))
    return JarqueBeraResult(passed=statistic < critical, statistic=statistic, critical_value=critical)
