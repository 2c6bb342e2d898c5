"""Plotting utilities for pure regions and easy/hard case splits."""

from .region_plots import plot_parallel_coordinates, plot_parallel_coordinates_plotly, plot_region_coverage
from .sweep_plots import plot_threshold_sweep


__all__ = [
    "plot_parallel_coordinates",
    "plot_parallel_coordinates_plotly",
    "plot_region_coverage",
    "plot_threshold_sweep",
]
