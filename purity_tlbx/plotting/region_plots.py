"""Pure-region overlays on parallel coordinates and region coverage charts."""

from collections.abc import Collection, Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import plotly.graph_objects as go
import seaborn as sns
from matplotlib.lines import Line2D
from matplotlib.patches import Rectangle

from purity_tlbx.analysis.pure_region_finder import PureRegion
from purity_tlbx.data.views import DatasetView
from purity_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig
from purity_tlbx.utils.reporting import regions_to_frame


def _plotted_axes(view: DatasetView) -> list[str]:
    """Feature columns holding at least one numeric value."""
    return [col for col in view.feature_cols if view.numeric[col].notna().any()]


def _axis_bounds(values: pd.Series) -> tuple[float, float]:
    return float(values.min()), float(values.max())


def _scale(value: float | np.ndarray, lo: float, hi: float) -> float | np.ndarray:
    """Map ``value`` from ``[lo, hi]`` onto [0, 1]; constant axes collapse to 0.5."""
    if hi == lo:
        return np.full_like(value, 0.5, dtype=float) if isinstance(value, np.ndarray) else 0.5
    return (value - lo) / (hi - lo)


def plot_parallel_coordinates(
    view: DatasetView,
    regions: Sequence[PureRegion] = (),
    hidden_rows: Collection[int] = frozenset(),
    *,
    hide_easy_cases: bool = True,
    cfg: PlottingConfig = DEFAULT_PLOT_CFG,
    ax: plt.Axes | None = None,
) -> plt.Axes:
    """Parallel coordinates of the numeric attributes with pure regions drawn as bands.

    Every axis is min-max scaled on its own. Rows in ``hidden_rows`` are
    omitted when ``hide_easy_cases`` is set and drawn faintly otherwise.
    Non-numeric cells leave a gap in their row's polyline.

    Args:
        view: Dataset snapshot.
        regions: Regions to overlay (typically the significant ones).
        hidden_rows: Easy-case row positions.
        hide_easy_cases: Drop easy cases instead of de-emphasizing them.
        cfg: Plot style and class colors.
        ax: Target axes (defaults to the current axes).

    Returns:
        The axes drawn on.
    """
    ax = ax or plt.gca()
    axes = _plotted_axes(view)
    colors = cfg.class_colors(view.labels)
    bounds = {col: _axis_bounds(view.numeric[col]) for col in axes}

    with cfg.apply():
        if axes:
            scaled = np.column_stack([_scale(view.numeric[col].to_numpy(), *bounds[col]) for col in axes])
            xs = np.arange(len(axes))
            for row in range(view.n_rows):
                easy = row in hidden_rows
                if easy and hide_easy_cases:
                    continue
                color = colors.get(view.labels.iloc[row], "grey") if view.has_class_col else "grey"
                ax.plot(xs, scaled[row], color=color, alpha=cfg.hidden_alpha if easy else cfg.line_alpha, lw=1)

            for region in regions:
                if region.attribute not in bounds:
                    continue
                x = axes.index(region.attribute)
                y0 = _scale(region.start, *bounds[region.attribute])
                y1 = _scale(region.end, *bounds[region.attribute])
                ax.add_patch(
                    Rectangle(
                        (x - cfg.region_width / 2, y0),
                        cfg.region_width,
                        max(y1 - y0, 0.005),
                        facecolor=colors.get(region.dominant_class, "grey"),
                        edgecolor="black",
                        alpha=cfg.region_alpha,
                    ),
                )

        ax.set_xticks(range(len(axes)))
        ax.set_xticklabels(axes, rotation=45, ha="right", rotation_mode="anchor")
        ax.set_xlim(-0.5, max(len(axes) - 0.5, 0.5))
        ax.set_ylim(-0.05, 1.05)
        ax.set_ylabel("Scaled value")
        ax.set_title("Parallel Coordinates with Pure Regions")
        if colors:
            handles = [Line2D([0], [0], color=c, lw=2, label=label) for label, c in colors.items()]
            ax.legend(handles=handles, title=view.class_col, loc="upper right")
    return ax


def plot_region_coverage(
    regions: Sequence[PureRegion],
    *,
    cfg: PlottingConfig = DEFAULT_PLOT_CFG,
    ax: plt.Axes | None = None,
) -> plt.Axes:
    """Horizontal bars of class coverage per region, colored by dominant class."""
    ax = ax or plt.gca()
    ax.set_title("Pure Region Coverage")
    if not regions:
        ax.text(0.5, 0.5, "No significant regions", ha="center", va="center", transform=ax.transAxes)
        ax.set_axis_off()
        return ax

    frame = regions_to_frame(regions).assign(
        region=lambda d: d.attribute + " [" + d.start.map("{:.2f}".format) + ", " + d.end.map("{:.2f}".format) + "]",
    )
    with cfg.apply():
        sns.barplot(
            data=frame,
            y="region",
            x="coverage_of_class",
            hue="dominant_class",
            palette=cfg.class_colors(frame["dominant_class"]),
            dodge=False,
            orient="h",
            ax=ax,
        )
    ax.set_xlim(0, 100)
    ax.set_xlabel("Coverage of class (%)")
    ax.set_ylabel("")
    return ax


def plot_parallel_coordinates_plotly(
    view: DatasetView,
    hidden_rows: Collection[int] = frozenset(),
    *,
    hide_easy_cases: bool = True,
    cfg: PlottingConfig = DEFAULT_PLOT_CFG,
    height: int = 600,
    width: int = 1000,
) -> go.Figure:
    """Interactive parallel coordinates of the rows still visible.

    Implemented with Plotly's [:class:`plotly.graph_objects.Parcoords`](https://plotly.com/python/parallel-coordinates-plot/);
    lines are colored by class.
    """
    axes = _plotted_axes(view)
    rows = [r for r in range(view.n_rows) if not (hide_easy_cases and r in hidden_rows)]
    labels = view.labels.iloc[rows] if view.has_class_col else pd.Series(["?"] * len(rows))
    colors = cfg.class_colors(view.labels if view.has_class_col else labels)
    classes = list(colors)
    codes = labels.map({label: i for i, label in enumerate(classes)}).to_numpy()

    if len(classes) > 1:
        colorscale = [[i / (len(classes) - 1), colors[label]] for i, label in enumerate(classes)]
    else:
        only = colors[classes[0]] if classes else "grey"
        colorscale = [[0.0, only], [1.0, only]]

    fig = go.Figure(
        go.Parcoords(
            line=dict(color=codes, colorscale=colorscale, cmin=0, cmax=max(len(classes) - 1, 1)),
            dimensions=[dict(label=col, values=view.numeric[col].iloc[rows]) for col in axes],
        ),
    )
    fig.update_layout(
        template=cfg.plotly_template,
        height=height,
        width=width,
        title=f"Parallel Coordinates ({len(rows)} of {view.n_rows} rows)",
    )
    return fig
