"""Dominance deduplication and significance filtering of pure regions."""

import logging
from collections import defaultdict
from collections.abc import Iterable

from purity_tlbx.utils.config import DEFAULT_ANALYSIS_CFG, AnalysisConfig, clamp_threshold

from .pure_region_finder import PureRegion


logger = logging.getLogger(__name__)


def remove_dominated(regions: Iterable[PureRegion]) -> list[PureRegion]:
    """Drop regions contained in an already kept region of the same attribute and class.

    Regions are visited largest first (row count, then interval width, both
    descending); a region is kept unless a kept region dominates it (see
    :meth:`PureRegion.is_dominated_by`). Regions of different classes never
    dominate each other.

    Returns:
        Kept regions in visiting order.
    """
    ordered = sorted(regions, key=lambda r: (r.row_count, r.width), reverse=True)
    kept_by_key: defaultdict[tuple[str, str], list[PureRegion]] = defaultdict(list)
    kept: list[PureRegion] = []
    for region in ordered:
        rivals = kept_by_key[region.attribute, region.dominant_class]
        if any(region.is_dominated_by(other) for other in rivals):
            continue
        rivals.append(region)
        kept.append(region)
    return kept


def apply_threshold(regions: Iterable[PureRegion], threshold: float) -> list[PureRegion]:
    """Keep regions whose class coverage or dataset coverage reaches ``threshold`` percent."""
    return [r for r in regions if r.coverage_of_class >= threshold or r.coverage_of_dataset >= threshold]


def filter_significant(
    regions: Iterable[PureRegion],
    threshold: float,
    cfg: AnalysisConfig = DEFAULT_ANALYSIS_CFG,
) -> list[PureRegion]:
    """Deduplicate ``regions`` by dominance, then drop those below ``threshold``.

    The dominance pass runs first: a large region removed by the threshold may
    already have eliminated smaller regions it contains.

    Args:
        regions: Raw regions as returned by :func:`find_regions`.
        threshold: Coverage threshold in percent, clamped to the configured range.
        cfg: Analysis defaults providing the threshold range.

    Returns:
        The significant regions, largest first.
    """
    threshold = clamp_threshold(threshold, cfg)
    kept = remove_dominated(regions)
    significant = apply_threshold(kept, threshold)
    logger.debug("Threshold %s: %d undominated, %d significant", threshold, len(kept), len(significant))
    return significant
