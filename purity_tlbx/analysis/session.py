"""Session state for interactive easy/hard case exploration."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

import pandas as pd

from purity_tlbx.data.labeled_dataset import LabeledDataset
from purity_tlbx.data.views import DatasetView
from purity_tlbx.utils.config import DEFAULT_ANALYSIS_CFG, AnalysisConfig, clamp_threshold

from .base_analyser import AnalysisIssue, detect_issue
from .easy_case_classifier import classify_rows
from .pure_region_finder import PureRegion, find_regions
from .region_filter import filter_significant
from .threshold_sweep import ThresholdSweepResult, sweep_thresholds


logger = logging.getLogger(__name__)


@dataclass
class EasyCaseSession:
    """Owns the dataset snapshot, threshold, significant regions and hidden rows of one session.

    Nothing is computed until :meth:`load` is called. Raw regions do not
    depend on the threshold, so they are searched once per load and only
    re-filtered when the threshold changes.

    Example:
        >>> session = EasyCaseSession()
        >>> session.load(LabeledDataset.from_csv("iris.csv"))
        >>> session.set_threshold(20)
        >>> session.toggle_easy_cases()
        True
        >>> hard_cases = session.visible_frame()
    """

    cfg: AnalysisConfig = DEFAULT_ANALYSIS_CFG
    threshold: float | None = None
    view: DatasetView | None = None
    raw_regions: list[PureRegion] = field(default_factory=list)
    regions: list[PureRegion] = field(default_factory=list)
    hidden_rows: frozenset[int] = frozenset()
    hide_easy_cases: bool = False
    issue: AnalysisIssue | None = None

    def __post_init__(self) -> None:
        threshold = self.cfg.default_threshold if self.threshold is None else self.threshold
        self.threshold = clamp_threshold(threshold, self.cfg)

    def load(self, data: LabeledDataset | pd.DataFrame, class_col: str | None = None) -> None:
        """Replace the dataset snapshot and recompute at the current threshold.

        Clears the hidden set and the row filter first. Call again after the
        rows have been edited.

        Args:
            data: Dataset or raw frame (class column detected from the headers when not given)
            class_col: Explicit class column for a raw frame
        """
        dataset = data if isinstance(data, LabeledDataset) else LabeledDataset(data, class_col=class_col, cfg=self.cfg)
        self.hidden_rows = frozenset()
        self.hide_easy_cases = False
        self.view = dataset.view()
        self.issue = detect_issue(self.view)
        if self.issue is AnalysisIssue.NO_CLASS_COLUMN:
            logger.warning("Loaded dataset has no '%s' column; no analysis possible", self.cfg.class_column_name)
        self.raw_regions = find_regions(self.view)
        self.recompute()

    def recompute(self) -> None:
        """Filter the cached raw regions at the current threshold and reclassify rows."""
        if self.view is None:
            return
        self.regions = filter_significant(self.raw_regions, self.threshold, self.cfg)
        self.hidden_rows = classify_rows(self.view, self.regions)
        logger.info(
            "Threshold %s: %d significant regions, %d easy / %d hard cases",
            self.threshold,
            len(self.regions),
            len(self.hidden_rows),
            self.view.n_rows - len(self.hidden_rows),
        )

    def set_threshold(self, threshold: float) -> None:
        """Clamp and store ``threshold``, then recompute immediately."""
        self.threshold = clamp_threshold(threshold, self.cfg)
        self.recompute()

    def toggle_easy_cases(self) -> bool:
        """Flip between hiding easy cases and showing all rows; nothing is recomputed.

        Returns:
            ``True`` when easy cases are now hidden.
        """
        self.hide_easy_cases = not self.hide_easy_cases
        return self.hide_easy_cases

    def apply_best_threshold(self) -> ThresholdSweepResult | None:
        """Sweep all thresholds, adopt the one leaving the fewest visible rows and recompute.

        Returns:
            The sweep outcome, or ``None`` when no dataset is loaded.
        """
        if self.view is None:
            return None
        sweep = sweep_thresholds(self.view, self.cfg.sweep_thresholds(), raw_regions=self.raw_regions)
        self.set_threshold(sweep.best_threshold)
        return sweep

    @property
    def n_rows(self) -> int:
        return 0 if self.view is None else self.view.n_rows

    def visible_rows(self) -> list[int]:
        """Row positions currently shown: all rows, minus easy cases while they are hidden."""
        if not self.hide_easy_cases:
            return list(range(self.n_rows))
        return [row for row in range(self.n_rows) if row not in self.hidden_rows]

    def visible_frame(self) -> pd.DataFrame:
        """Rows currently shown, as a frame indexed by row position."""
        if self.view is None:
            return pd.DataFrame()
        return self.view.df.iloc[self.visible_rows()]

    def visible_selection(self, rows: Iterable[int]) -> list[int]:
        """Drop currently hidden rows from a user selection."""
        if not self.hide_easy_cases:
            return list(rows)
        return [row for row in rows if row not in self.hidden_rows]

    def report(self) -> str:
        """Text report of the significant regions at the current threshold."""
        from purity_tlbx.utils.reporting import format_region_report  # noqa: PLC0415

        if self.issue is AnalysisIssue.NO_CLASS_COLUMN:
            return "No class column found. Pure regions cannot be calculated."
        return format_region_report(self.regions, self.threshold)
