"""Best-threshold search: the threshold leaving the fewest hard cases visible."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

import pandas as pd

from purity_tlbx.data.views import DatasetView
from purity_tlbx.utils.config import DEFAULT_ANALYSIS_CFG

from .base_analyser import AnalysisIssue, BaseAnalyser, detect_issue
from .easy_case_classifier import classify_rows
from .pure_region_finder import PureRegion, find_regions
from .region_filter import filter_significant


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThresholdSweepResult:
    """Outcome of sweeping the coverage threshold.

    Attributes:
        table: One row per tested threshold with columns ``threshold``,
            ``n_regions``, ``n_hidden`` and ``n_visible``, ascending by threshold.
        best_threshold: Threshold with the fewest visible rows; ties go to the smallest threshold.
        issue: Reason the sweep had nothing to analyze, if any.
    """

    table: pd.DataFrame
    best_threshold: float
    issue: AnalysisIssue | None = None

    @property
    def best_visible_count(self) -> int:
        """Visible (hard-case) rows remaining at ``best_threshold``."""
        row = self.table.loc[self.table["threshold"] == self.best_threshold].iloc[0]
        return int(row["n_visible"])

    def plot(self, **kwargs: object):
        """Plot visible rows against threshold."""
        from purity_tlbx.plotting.sweep_plots import plot_threshold_sweep  # noqa: PLC0415

        return plot_threshold_sweep(self, **kwargs)


def sweep_thresholds(
    view: DatasetView,
    thresholds: Iterable[float] | None = None,
    raw_regions: list[PureRegion] | None = None,
) -> ThresholdSweepResult:
    """Evaluate the remaining visible row count for every threshold.

    Args:
        view: Dataset snapshot.
        thresholds: Thresholds to test (defaults to 0..100 in the configured step).
        raw_regions: Unfiltered regions of ``view``; searched here when omitted.

    Returns:
        The sweep table and the best threshold.
    """
    tested = sorted(set(thresholds if thresholds is not None else DEFAULT_ANALYSIS_CFG.sweep_thresholds()))
    if not tested:
        raise ValueError("At least one threshold is required")
    raw = find_regions(view) if raw_regions is None else raw_regions

    rows = []
    for threshold in tested:
        regions = filter_significant(raw, threshold)
        n_hidden = len(classify_rows(view, regions))
        rows.append(
            {
                "threshold": threshold,
                "n_regions": len(regions),
                "n_hidden": n_hidden,
                "n_visible": view.n_rows - n_hidden,
            },
        )
    table = pd.DataFrame(rows, columns=["threshold", "n_regions", "n_hidden", "n_visible"])

    # idxmin returns the first minimum, i.e. the smallest threshold among ties
    best = float(table.loc[table["n_visible"].idxmin(), "threshold"])
    logger.info("Best threshold %s leaves %d of %d rows visible", best, table["n_visible"].min(), view.n_rows)
    return ThresholdSweepResult(table=table, best_threshold=best, issue=detect_issue(view))


def best_threshold(view: DatasetView, thresholds: Iterable[float] | None = None) -> float:
    """Shortcut for ``sweep_thresholds(view, thresholds).best_threshold``."""
    return sweep_thresholds(view, thresholds).best_threshold


class ThresholdSweep(BaseAnalyser):
    """Analyzer wrapping :func:`sweep_thresholds`."""

    def __init__(self, view: DatasetView, thresholds: Iterable[float] | None = None) -> None:
        self._view = view
        self.thresholds = list(thresholds) if thresholds is not None else DEFAULT_ANALYSIS_CFG.sweep_thresholds()
        self._result: ThresholdSweepResult | None = None

    def fit(self) -> Self:
        self._result = sweep_thresholds(self._view, self.thresholds)
        return self

    def result(self) -> ThresholdSweepResult:
        """Return the sweep outcome.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if self._result is None:
            raise ValueError("Must call fit() before result()")
        return self._result
