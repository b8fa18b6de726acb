"""
Analysis configuration.
Numerical defaults shared by the integrator, the binning engine and the samplers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _default_workers() -> int:
    return min(8, os.cpu_count() or 1)


@dataclass(frozen=True)
class AnalysisConfig:
    # trapezoid rule
    integration_step: float = 1e-4

    # Sturges' rule: bins = round(1 + coefficient * log10(N))
    sturges_coefficient: float = 3.32

    # last bin stays right-exclusive unless asked otherwise (observations equal to max are dropped)
    include_maximum: bool = False

    # fork-join pool size for integration and batch sampling
    workers: int = _default_workers()

    # None -> fresh OS entropy per call
    seed: Optional[int] = None

    # chi-squared / Jarque-Bera critical value level
    confidence: float = 0.95

    def __post_init__(self) -> None:
        if not self.integration_step > 0:
            raise ValueError(f"integration_step must be positive, got {self.integration_step}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if not 0.0 < self.confidence < 1.0:
            raise ValueError(f"confidence must be in (0, 1), got {self.confidence}")
