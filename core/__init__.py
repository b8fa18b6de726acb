"""
Core package — configuration, table schema, and shared utilities.
No statistics live here.
"""

from .schema import GROUP_TABLE_COLUMNS
from .config import AnalysisConfig
from .utils import as_observations, configure_logging, split_range, sturges_bin_count

__all__ = [
    "GROUP_TABLE_COLUMNS",
    "AnalysisConfig",
    "as_observations",
    "configure_logging",
    "split_range",
    "sturges_bin_count",
]
