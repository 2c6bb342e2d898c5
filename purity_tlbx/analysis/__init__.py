"""Pure-region engine: region search, significance filtering and row classification."""

from .base_analyser import AnalysisIssue, BaseAnalyser
from .easy_case_classifier import EasyCaseClassifier, EasyCaseResult, classify_rows, remaining_visible_count
from .pure_region_finder import PureRegion, PureRegionFinder, PureRegionResult, find_regions
from .region_filter import apply_threshold, filter_significant, remove_dominated
from .session import EasyCaseSession
from .threshold_sweep import ThresholdSweep, ThresholdSweepResult, best_threshold, sweep_thresholds


__all__ = [
    "AnalysisIssue",
    "BaseAnalyser",
    "EasyCaseClassifier",
    "EasyCaseResult",
    "EasyCaseSession",
    "PureRegion",
    "PureRegionFinder",
    "PureRegionResult",
    "ThresholdSweep",
    "ThresholdSweepResult",
    "apply_threshold",
    "best_threshold",
    "classify_rows",
    "filter_significant",
    "find_regions",
    "remaining_visible_count",
    "remove_dominated",
    "sweep_thresholds",
]
