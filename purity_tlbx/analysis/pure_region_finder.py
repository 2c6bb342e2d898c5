"""Pure-region search: class-pure value intervals on single attributes."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Self

import pandas as pd

from purity_tlbx.data.views import DatasetView

from .base_analyser import AnalysisIssue, BaseAnalyser, detect_issue


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PureRegion:
    """Closed value interval ``[start, end]`` on one attribute whose rows all share one class.

    Attributes:
        attribute: Name of the numeric attribute the region was found on.
        start: Smallest attribute value inside the region.
        end: Largest attribute value inside the region (inclusive).
        dominant_class: The class label every covered row carries.
        row_count: Number of rows covered.
        coverage_of_class: ``row_count`` as a percentage of the rows of ``dominant_class``.
        coverage_of_dataset: ``row_count`` as a percentage of all rows.
    """

    attribute: str
    start: float
    end: float
    dominant_class: str
    row_count: int
    coverage_of_class: float
    coverage_of_dataset: float

    @property
    def width(self) -> float:
        """Length of the value interval."""
        return self.end - self.start

    def contains(self, value: float) -> bool:
        """Whether ``value`` lies in ``[start, end]``."""
        return self.start <= value <= self.end

    def is_dominated_by(self, other: "PureRegion") -> bool:
        """Whether ``other`` covers this region on the same attribute and class with at least as many rows."""
        return (
            self.attribute == other.attribute
            and self.dominant_class == other.dominant_class
            and other.start <= self.start
            and self.end <= other.end
            and self.row_count <= other.row_count
        )


def _value_groups(values: pd.Series, labels: pd.Series) -> pd.DataFrame:
    """Group rows by distinct attribute value, ascending.

    Returns one row per distinct value with the number of rows holding it,
    the number of distinct labels among them and the first label.
    """
    present = values.dropna()
    return (
        pd.DataFrame({"value": present, "label": labels.loc[present.index]})
        .groupby("value", sort=True)["label"]
        .agg(n_rows="size", n_labels="nunique", label="first")
    )


def _attribute_regions(
    attribute: str,
    values: pd.Series,
    labels: pd.Series,
    class_counts: Mapping[str, int],
    n_rows: int,
) -> list[PureRegion]:
    """Grow a window from every distinct value and emit each pure expansion step.

    Rows sharing a value always enter the window together; a value carried by
    rows of more than one class can never be part of a region. Growth from a
    start stops at the first value whose rows disagree with the window's class.
    """
    groups = _value_groups(values, labels)
    distinct = groups.index.tolist()
    sizes = groups["n_rows"].tolist()
    group_labels = groups["label"].tolist()
    mixed = groups["n_labels"].gt(1).tolist()

    regions: list[PureRegion] = []
    for start in range(len(distinct)):
        if mixed[start]:
            continue
        current_class = group_labels[start]
        class_total = class_counts[current_class]
        covered = 0
        for end in range(start, len(distinct)):
            if mixed[end] or group_labels[end] != current_class:
                break
            covered += sizes[end]
            regions.append(
                PureRegion(
                    attribute=attribute,
                    start=float(distinct[start]),
                    end=float(distinct[end]),
                    dominant_class=current_class,
                    row_count=covered,
                    coverage_of_class=covered / class_total * 100,
                    coverage_of_dataset=covered / n_rows * 100,
                ),
            )
    return regions


def find_regions(view: DatasetView) -> list[PureRegion]:
    """Find every pure window on every feature attribute of ``view`` (unfiltered).

    Cells that are not numeric are left out of their attribute's analysis.
    Coverage percentages are computed against the whole dataset: all rows of
    the region's class and all rows, respectively.

    Returns:
        Regions of all attributes, concatenated in attribute order.
    """
    issue = detect_issue(view)
    if issue is not None:
        if issue is AnalysisIssue.NO_CLASS_COLUMN:
            logger.warning("No class column identified; pure-region search skipped")
        return []

    class_counts = view.class_counts.to_dict()
    regions: list[PureRegion] = []
    for attribute in view.feature_cols:
        found = _attribute_regions(attribute, view.numeric[attribute], view.labels, class_counts, view.n_rows)
        logger.debug("Attribute %s: %d pure windows", attribute, len(found))
        regions.extend(found)
    return regions


@dataclass(frozen=True)
class PureRegionResult:
    """Unfiltered pure-region search outputs.

    Attributes:
        regions: Every pure window found, in attribute order.
        n_rows: Number of rows in the analyzed snapshot.
        class_counts: Rows per class label.
        issue: Reason the search produced nothing, if it could not run.
    """

    regions: list[PureRegion]
    n_rows: int
    class_counts: dict[str, int] = field(default_factory=dict)
    issue: AnalysisIssue | None = None

    def to_frame(self) -> pd.DataFrame:
        """Tabular form of ``regions``."""
        from purity_tlbx.utils.reporting import regions_to_frame  # noqa: PLC0415

        return regions_to_frame(self.regions)


class PureRegionFinder(BaseAnalyser):
    """Analyzer wrapping :func:`find_regions`.

    Example:
        >>> ds = LabeledDataset(df)
        >>> raw = ds.make_pure_region_finder().fit().result()
        >>> raw.to_frame().head()
    """

    def __init__(self, view: DatasetView) -> None:
        self._view = view
        self._regions: list[PureRegion] | None = None

    def fit(self) -> Self:
        """Search all feature attributes for pure windows."""
        self._regions = find_regions(self._view)
        return self

    def result(self) -> PureRegionResult:
        """Return the raw region list.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if self._regions is None:
            raise ValueError("Must call fit() before result()")

        return PureRegionResult(
            regions=self._regions,
            n_rows=self._view.n_rows,
            class_counts={str(k): int(v) for k, v in self._view.class_counts.items()},
            issue=detect_issue(self._view),
        )
