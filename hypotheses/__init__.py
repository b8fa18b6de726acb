"""
Hypotheses package — frequency grouping and goodness-of-fit tests.

  1. grouping.py     — Sturges frequency table (GroupRow)
  2. chi_squared.py  — Pearson chi-squared statistic and test
  3. normality.py    — Jarque-Bera test
"""

from .grouping import GroupRow, group_observations, groups_to_dataframe
from .chi_squared import (
    ChiSquaredTestResult,
    chi_squared_statistic,
    chi_squared_test,
    degrees_of_freedom,
    expected_frequencies,
)
from .normality import JarqueBeraResult, jarque_bera

__all__ = [
    "GroupRow",
    "group_observations",
    "groups_to_dataframe",
    "ChiSquaredTestResult",
    "chi_squared_statistic",
    "chi_squared_test",
    "degrees_of_freedom",
    "expected_frequencies",
    "JarqueBeraResult",
    "jarque_bera",
]
