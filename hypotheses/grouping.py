"""
Group a sample into equal-width frequency bins.

Input:  a finite set of real observations
Output: one GroupRow per bin, ordered by lower bound

Bin count comes from Sturges' rule, round(1 + 3.32 * log10(N)), and the bins
split [min, max] into equal widths. Bin i holds the observations with
    min + width * i <= x < min + width * (i + 1)
with the top edge fixed at the sample maximum. The last bin is open on the
right, so observations equal to the maximum land in no bin unless
`include_maximum` is set.

Cumulative columns are a left-to-right running sum over the bins.
"""

from __future__ import annotations

import logging
from dataclasses import astuple, dataclass
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from core.config import AnalysisConfig
from core.schema import GROUP_TABLE_COLUMNS
from core.utils import ArrayLike, as_observations, sturges_bin_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupRow:
    """One bin of the frequency table."""
    lower: float
    upper: float
    frequency: int
    cumulative_frequency: int
    relative_frequency: float
    cumulative_relative_frequency: float

    @property
    def width(self) -> float:
        return self.upper - self.lower


def group_observations(
    samples: ArrayLike,
    *,
    include_maximum: Optional[bool] = None,
    config: Optional[AnalysisConfig] = None,
) -> List[GroupRow]:
    """
    Build the Sturges frequency table for `samples`.

    Parameters
    ----------
    samples : sequence of float
        Non-empty, finite observations.
    include_maximum : bool, optional
        Close the last bin on the right. Defaults to config.include_maximum (False).
    config : AnalysisConfig, optional
        Supplies the Sturges coefficient and the include_maximum default.
    """
    cfg = config or AnalysisConfig()
    if include_maximum is None:
        include_maximum = cfg.include_maximum

    data = as_observations(samples, "samples")
    n = data.size
    lo = float(data.min())
    hi = float(data.max())
    bin_count = sturges_bin_count(n, cfg.sturges_coefficient)
    width = (hi - lo) / bin_count

    logger.debug("group_observations: n=%d bins=%d width=%g", n, bin_count, width)

    # last edge pinned to max: lo + width * bin_count can round above it
    edges = lo + width * np.arange(bin_count + 1)
    edges[-1] = hi

    rows: List[GroupRow] = []
    cumulative = 0
    cumulative_relative = 0.0
    for i in range(bin_count):
        lower = float(edges[i])
        upper = float(edges[i + 1])
        in_bin = (data >= lower) & (data < upper)
        if include_maximum and i == bin_count - 1:
            in_bin |= data == hi
        frequency = int(np.count_nonzero(in_bin))
        relative = frequency / n
        cumulative += frequency
        cumulative_relative += relative
        rows.append(
            GroupRow(
                lower=lower,
                upper=upper,
                frequency=frequency,
                cumulative_frequency=cumulative,
                relative_frequency=relative,
                cumulative_relative_frequency=cumulative_relative,
            )
        )

    dropped = n - cumulative
    if dropped:
        logger.debug("group_observations: %d observation(s) equal to max=%g left unbinned", dropped, hi)
    return rows


def groups_to_dataframe(rows: Sequence[GroupRow]) -> pd.DataFrame:
    """Frequency table as a DataFrame with GROUP_TABLE_COLUMNS."""
    return pd.DataFrame([astuple(r) for r in rows], columns=list(GROUP_TABLE_COLUMNS))
