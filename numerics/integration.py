"""
Composite trapezoidal integration with a fork-join reduction.

The interior points of [left, right] are split into contiguous slices; each
worker sums its own slice and hands back a partial sum. Partials are added
up after the pool has joined, so no accumulator is shared between threads.

Floating-point addition is not associative: changing `workers` changes the
summation order and may change the last bits of the result.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from core.config import AnalysisConfig
from core.utils import split_range

logger = logging.getLogger(__name__)

RealFunction = Callable[[float], float]


def _partial_sum(func: RealFunction, left: float, step: float, lo: int, hi: int) -> float:
    local = 0.0
    for i in range(lo, hi):
        local += func(left + i * step)
    return local


def integrate(
    func: RealFunction,
    left: float,
    right: float,
    step: Optional[float] = None,
    *,
    workers: Optional[int] = None,
    config: Optional[AnalysisConfig] = None,
) -> float:
    """
    Approximate the definite integral of `func` over [left, right].

    Parameters
    ----------
    func : callable
        Real function of one real argument. Exceptions it raises propagate.
    left, right : float
        Integration bounds.
    step : float, optional
        Trapezoid width; defaults to config.integration_step (1e-4). An
        interval narrower than `step` integrates to 0.
    workers : int, optional
        Pool size; defaults to config.workers. 1 runs inline.
    config : AnalysisConfig, optional
        Supplies the step and worker defaults.

    Returns
    -------
    step * (f(x_1) + ... + f(x_{n-1}) + (f(left) + f(right)) / 2)
    with n = floor((right - left) / step) and x_i = left + i * step.
    """
    cfg = config or AnalysisConfig()
    if step is None:
        step = cfg.integration_step
    if right - left < step:
        return 0.0

    n = int(math.floor((right - left) / step))
    n_workers = workers if workers is not None else cfg.workers
    slices = split_range(1, n, n_workers)

    if len(slices) <= 1:
        interior = sum(_partial_sum(func, left, step, lo, hi) for lo, hi in slices)
    else:
        logger.debug("integrate: %d interior points over %d workers", n - 1, len(slices))
        with ThreadPoolExecutor(max_workers=len(slices)) as pool:
            futures = [pool.submit(_partial_sum, func, left, step, lo, hi) for lo, hi in slices]
            partials = [f.result() for f in futures]
        interior = 0.0
        for partial in partials:
            interior += partial

    return step * (interior + 0.5 * (func(left) + func(right)))
