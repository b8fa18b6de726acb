from __future__ import annotations

import logging
import math
from typing import Iterable, List, Tuple, Union

import numpy as np
import pandas as pd

ArrayLike = Union[Iterable[float], np.ndarray, pd.Series]


def as_observations(values: ArrayLike, name: str = "samples") -> np.ndarray:
    """
    Convert an observation set to a 1-D float array.

    Accepts lists, generators, numpy arrays and pandas Series.
    Raises ValueError for empty input, non-numeric elements or NaN/inf.
    """
    if isinstance(values, pd.Series):
        values = values.to_numpy()
    elif not isinstance(values, np.ndarray):
        values = list(values)

    try:
        data = np.asarray(values, dtype=float).reshape(-1)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a sequence of real numbers.") from exc

    if data.size == 0:
        raise ValueError(f"{name} must not be empty.")
    if not np.all(np.isfinite(data)):
        n_bad = int((~np.isfinite(data)).sum())
        raise ValueError(f"{name} contains {n_bad} non-finite value(s).")
    return data


def sturges_bin_count(n: int, coefficient: float = 3.32) -> int:
    """Sturges' rule: round(1 + coefficient * log10(n)), round-half-to-even."""
    if n < 1:
        raise ValueError(f"Sturges' rule needs at least one observation, got n={n}")
    return int(round(1 + coefficient * math.log10(n)))


def split_range(start: int, stop: int, parts: int) -> List[Tuple[int, int]]:
    """
    Split [start, stop) into at most `parts` contiguous, non-empty slices.

    Slice sizes differ by at most one; an empty range gives an empty list.
    """
    total = max(stop - start, 0)
    parts = max(min(parts, total), 1)
    if total == 0:
        return []
    base, extra = divmod(total, parts)
    slices = []
    lo = start
    for k in range(parts):
        hi = lo + base + (1 if k < extra else 0)
        slices.append((lo, hi))
        lo = hi
    return slices


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Attach a basic stderr handler. Library modules only create loggers."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
