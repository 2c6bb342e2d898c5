"""Threshold sweep visualization."""

import matplotlib.pyplot as plt
import seaborn as sns

from purity_tlbx.analysis.threshold_sweep import ThresholdSweepResult
from purity_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


def plot_threshold_sweep(
    result: ThresholdSweepResult,
    *,
    cfg: PlottingConfig = DEFAULT_PLOT_CFG,
    ax: plt.Axes | None = None,
) -> plt.Axes:
    """Remaining visible (hard-case) rows per tested threshold, best threshold marked."""
    ax = ax or plt.gca()
    with cfg.apply():
        sns.lineplot(data=result.table, x="threshold", y="n_visible", marker="o", ax=ax)
    ax.axvline(result.best_threshold, color="firebrick", ls="--", label=f"best = {result.best_threshold:g}%")
    ax.set_xlabel("Coverage threshold (%)")
    ax.set_ylabel("Visible rows (hard cases)")
    ax.set_title("Threshold Sweep")
    ax.legend()
    ax.grid(alpha=0.2)
    return ax
