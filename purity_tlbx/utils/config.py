"""Analysis configuration shared by the dataset, engine and session layers."""

from __future__ import annotations

import logging
from dataclasses import dataclass


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisConfig:
    """Tunable defaults for pure-region analysis.

    Attributes:
        class_column_name: Header (matched case-insensitively) that marks the class-label column.
        default_threshold: Coverage threshold in percent used before the user picks one.
        min_threshold: Lower bound of the threshold range.
        max_threshold: Upper bound of the threshold range.
        sweep_step: Step between thresholds tested by the best-threshold sweep.
    """

    class_column_name: str = "class"
    default_threshold: float = 5
    min_threshold: float = 0
    max_threshold: float = 100
    sweep_step: float = 1

    def sweep_thresholds(self) -> list[float]:
        """Return the ascending list of thresholds visited by the sweep."""
        n_steps = int((self.max_threshold - self.min_threshold) // self.sweep_step)
        return [self.min_threshold + i * self.sweep_step for i in range(n_steps + 1)]


DEFAULT_ANALYSIS_CFG = AnalysisConfig()


def clamp_threshold(value: float, cfg: AnalysisConfig = DEFAULT_ANALYSIS_CFG) -> float:
    """Clamp ``value`` into ``[cfg.min_threshold, cfg.max_threshold]``."""
    clamped = min(max(value, cfg.min_threshold), cfg.max_threshold)
    if clamped != value:
        logger.debug("Threshold %s clamped to %s", value, clamped)
    return clamped


__all__ = ["DEFAULT_ANALYSIS_CFG", "AnalysisConfig", "clamp_threshold"]
