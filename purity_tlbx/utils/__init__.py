from .config import DEFAULT_ANALYSIS_CFG, AnalysisConfig, clamp_threshold
from .plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


__all__ = [
    "DEFAULT_ANALYSIS_CFG",
    "DEFAULT_PLOT_CFG",
    "AnalysisConfig",
    "PlottingConfig",
    "clamp_threshold",
]
