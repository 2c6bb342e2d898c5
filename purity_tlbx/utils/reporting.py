"""Text and tabular formatting of pure regions for reports and statistic panes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict
from typing import TYPE_CHECKING

import pandas as pd


if TYPE_CHECKING:
    from purity_tlbx.analysis.pure_region_finder import PureRegion


REGION_COLUMNS: tuple[str, ...] = (
    "attribute",
    "start",
    "end",
    "dominant_class",
    "row_count",
    "coverage_of_class",
    "coverage_of_dataset",
)


def _fmt_value(value: float) -> str:
    return f"{value:.2f}"


def format_region(region: PureRegion) -> str:
    """One-line description of ``region``.

    Example: ``petal_length [1.00, 1.90] -> setosa: 50 cases, 100.00% of class, 33.33% of dataset``
    """
    return (
        f"{region.attribute} [{_fmt_value(region.start)}, {_fmt_value(region.end)}] -> {region.dominant_class}: "
        f"{region.row_count} cases, {region.coverage_of_class:.2f}% of class, "
        f"{region.coverage_of_dataset:.2f}% of dataset"
    )


def format_region_report(regions: Iterable[PureRegion], threshold: float) -> str:
    """Multi-line report listing every significant region, grouped by attribute.

    Args:
        regions: Significant regions (typically from :func:`filter_significant`).
        threshold: The coverage threshold the regions were filtered with.

    Returns:
        Report text; states explicitly when no region reaches the threshold.
    """
    regions = list(regions)
    lines = [f"Pure regions (coverage threshold {threshold:g}%):"]
    if not regions:
        lines.append("  none")
        return "\n".join(lines)

    by_attribute: dict[str, list[PureRegion]] = {}
    for region in regions:
        by_attribute.setdefault(region.attribute, []).append(region)
    for attribute, group in by_attribute.items():
        lines.append(f"  {attribute}:")
        lines.extend(f"    {format_region(r)}" for r in sorted(group, key=lambda r: r.start))
    return "\n".join(lines)


def regions_to_frame(regions: Iterable[PureRegion]) -> pd.DataFrame:
    """DataFrame with one row per region and the columns in :data:`REGION_COLUMNS`."""
    return pd.DataFrame([asdict(r) for r in regions], columns=list(REGION_COLUMNS))


__all__ = ["REGION_COLUMNS", "format_region", "format_region_report", "regions_to_frame"]
