"""Split rows into easy cases (covered by a significant pure region) and hard cases."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

import numpy as np
import pandas as pd

from purity_tlbx.data.views import DatasetView
from purity_tlbx.utils.config import DEFAULT_ANALYSIS_CFG, AnalysisConfig, clamp_threshold

from .base_analyser import AnalysisIssue, BaseAnalyser, detect_issue
from .pure_region_finder import PureRegion, find_regions
from .region_filter import filter_significant


logger = logging.getLogger(__name__)


def classify_rows(view: DatasetView, regions: Iterable[PureRegion]) -> frozenset[int]:
    """Return the positions of rows explained by at least one region.

    A row matches a region when its value on ``region.attribute`` lies in
    ``[region.start, region.end]`` and its label equals ``region.dominant_class``.
    Rows whose cell on that attribute is not numeric never match it.
    """
    if detect_issue(view) is not None:
        return frozenset()

    labels = view.labels.to_numpy()
    easy = np.zeros(view.n_rows, dtype=bool)
    for region in regions:
        if region.attribute not in view.numeric.columns:
            continue
        values = view.numeric[region.attribute].to_numpy()
        easy |= (values >= region.start) & (values <= region.end) & (labels == region.dominant_class)
    return frozenset(np.flatnonzero(easy).tolist())


def remaining_visible_count(view: DatasetView, regions: Iterable[PureRegion]) -> int:
    """Number of hard cases left once the rows explained by ``regions`` are hidden."""
    return view.n_rows - len(classify_rows(view, regions))


@dataclass(frozen=True)
class EasyCaseResult:
    """Easy/hard split of a dataset at one coverage threshold.

    Attributes:
        threshold: Coverage threshold (percent) the regions were filtered with.
        regions: Significant regions, largest first.
        hidden_rows: Positions of easy cases (rows covered by some region).
        n_rows: Number of rows in the analyzed snapshot.
        issue: Reason the analysis produced nothing, if it could not run.
    """

    threshold: float
    regions: list[PureRegion]
    hidden_rows: frozenset[int]
    n_rows: int
    issue: AnalysisIssue | None = None

    @property
    def n_hidden(self) -> int:
        return len(self.hidden_rows)

    @property
    def n_visible(self) -> int:
        """Number of hard cases."""
        return self.n_rows - self.n_hidden

    @property
    def hard_rows(self) -> list[int]:
        """Positions of rows not covered by any significant region, ascending."""
        return [row for row in range(self.n_rows) if row not in self.hidden_rows]

    def easy_mask(self) -> pd.Series:
        """Boolean mask over row positions, ``True`` for easy cases."""
        return pd.Series([row in self.hidden_rows for row in range(self.n_rows)], dtype=bool)

    # ------------------------------------------------------------------ plotting shortcuts
    def plot_coverage(self, **kwargs: object):
        """Plot class coverage of the significant regions."""
        from purity_tlbx.plotting.region_plots import plot_region_coverage  # noqa: PLC0415

        return plot_region_coverage(self.regions, **kwargs)


class EasyCaseClassifier(BaseAnalyser):
    """Find pure regions, keep the significant ones and classify rows against them.

    Example:
        >>> ds = LabeledDataset(df)
        >>> res = ds.make_easy_case_classifier(threshold=20).fit().result()
        >>> hard = ds.df.iloc[res.hard_rows]
    """

    def __init__(
        self,
        view: DatasetView,
        threshold: float = DEFAULT_ANALYSIS_CFG.default_threshold,
        cfg: AnalysisConfig = DEFAULT_ANALYSIS_CFG,
    ) -> None:
        """Initialize the classifier.

        Args:
            view: Immutable dataset view to analyze
            threshold: Coverage threshold in percent, clamped to the configured range
            cfg: Analysis defaults
        """
        self._view = view
        self.cfg = cfg
        self.threshold = clamp_threshold(threshold, cfg)
        self._result: EasyCaseResult | None = None

    def fit(self) -> Self:
        """Run search, filtering and classification."""
        regions = filter_significant(find_regions(self._view), self.threshold, self.cfg)
        self._result = EasyCaseResult(
            threshold=self.threshold,
            regions=regions,
            hidden_rows=classify_rows(self._view, regions),
            n_rows=self._view.n_rows,
            issue=detect_issue(self._view),
        )
        return self

    def result(self) -> EasyCaseResult:
        """Return the easy/hard split.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if self._result is None:
            raise ValueError("Must call fit() before result()")
        return self._result
