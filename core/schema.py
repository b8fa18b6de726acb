from __future__ import annotations

from typing import Tuple

# Column order of the frequency table produced by hypotheses.grouping.groups_to_dataframe.
GROUP_TABLE_COLUMNS: Tuple[str, ...] = (
    "lower",
    "upper",
    "frequency",
    "cumulative_frequency",
    "relative_frequency",
    "cumulative_relative_frequency",
)
