"""Shared plotting configuration (style, class colors, overlay transparency)."""

from __future__ import annotations

import colorsys
from collections.abc import Generator, Iterable
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

import matplotlib as mpl
import plotly.io as pio
import seaborn as sns
from matplotlib.colors import to_hex


_FIXED_CLASS_COLORS: dict[str, str] = {
    "malignant": "#ff0000",
    "positive": "#ff0000",
    "benign": "#00ff00",
    "negative": "#00ff00",
}


@dataclass
class PlottingConfig:
    """Reusable plotting style for region overlays and coordinate plots."""

    style: str = "whitegrid"
    context: str = "notebook"
    font_scale: float = 1.0
    title_size: int = 14
    label_size: int = 12
    figure_dpi: int = 100
    line_alpha: float = 0.6
    hidden_alpha: float = 0.08
    """Line transparency of easy cases when they are drawn but de-emphasized."""
    region_alpha: float = 0.25
    region_width: float = 0.12
    """Width of a region band on a parallel-coordinates axis (axis spacing is 1)."""
    plotly_template: str = "plotly_white"
    seaborn_kwargs: dict[str, Any] = field(default_factory=dict)

    def class_colors(self, labels: Iterable[object]) -> dict[str, str]:
        """Assign a hex color to every distinct class label.

        ``malignant``/``positive`` are red and ``benign``/``negative`` green
        (case-insensitive); remaining labels get evenly spaced, fully saturated
        hues in order of first appearance.
        """
        colors: dict[str, str] = {}
        others: list[str] = []
        for label in map(str, labels):
            if label in colors or label in others:
                continue
            fixed = _FIXED_CLASS_COLORS.get(label.casefold())
            if fixed is not None:
                colors[label] = fixed
            else:
                others.append(label)
        for i, label in enumerate(others):
            colors[label] = to_hex(colorsys.hsv_to_rgb(i / len(others), 1.0, 1.0))
        return colors

    def _rc_params(self) -> dict[str, Any]:
        return {
            "axes.titlesize": self.title_size,
            "axes.labelsize": self.label_size,
            "figure.dpi": self.figure_dpi,
        }

    def apply_global(self) -> None:
        """Apply plotting style globally (no automatic restore), e.g. once per app start."""
        sns.set_theme(style=self.style, context=self.context, font_scale=self.font_scale, **self.seaborn_kwargs)
        mpl.rcParams.update(self._rc_params())
        pio.templates.default = self.plotly_template

    @contextmanager
    def apply(self) -> Generator[None]:
        """Apply style within a context, restoring previous rcParams afterwards."""
        prev = {k: mpl.rcParams.get(k) for k in self._rc_params()}
        prev_plotly_template = pio.templates.default
        with sns.axes_style(self.style, rc=self.seaborn_kwargs or None):
            mpl.rcParams.update(self._rc_params())
            pio.templates.default = self.plotly_template
            try:
                yield
            finally:
                pio.templates.default = prev_plotly_template
                mpl.rcParams.update(prev)


# Default configuration used across plotting functions
DEFAULT_PLOT_CFG = PlottingConfig()


__all__ = ["DEFAULT_PLOT_CFG", "PlottingConfig"]
