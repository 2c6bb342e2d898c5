"""Labeled tabular dataset: rows of attribute values plus one class-label column."""

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Literal

import pandas as pd
from sklearn.preprocessing import MinMaxScaler, StandardScaler

from purity_tlbx.utils.config import DEFAULT_ANALYSIS_CFG, AnalysisConfig

from .views import DatasetView, parse_numeric


if TYPE_CHECKING:
    from purity_tlbx.analysis.easy_case_classifier import EasyCaseClassifier
    from purity_tlbx.analysis.pure_region_finder import PureRegionFinder
    from purity_tlbx.analysis.threshold_sweep import ThresholdSweep


class LabeledDataset:
    """Container for a labeled dataset and the entry point for all analyzers.

    The class column is either passed explicitly or detected by its header
    (``"class"``, case-insensitive, configurable via :class:`AnalysisConfig`).
    Every other column is a candidate attribute; cells that do not parse as
    numbers are simply left out of the numeric analysis.

    **Example workflow**:
    >>> from purity_tlbx.data import LabeledDataset
    >>> ds = LabeledDataset.from_csv("iris.csv")
    >>> regions = ds.make_pure_region_finder().fit().result().regions
    >>> easy = ds.make_easy_case_classifier(threshold=10).fit().result()
    >>> easy.n_hidden, easy.n_visible
    >>> best = ds.make_threshold_sweep().fit().result().best_threshold
    """

    def __init__(
        self,
        df: pd.DataFrame | None = None,
        class_col: str | None = None,
        cfg: AnalysisConfig = DEFAULT_ANALYSIS_CFG,
    ) -> None:
        """Initialize the dataset.

        Args:
            df: Pre-loaded DataFrame (optional)
            class_col: Explicit class-label column; detected from the headers when omitted
            cfg: Analysis defaults (class column header, thresholds)
        """
        if df is not None and class_col is not None and class_col not in df.columns:
            raise KeyError(f"Class column '{class_col}' not found in data")
        self._df: pd.DataFrame | None = df
        self._class_col = class_col
        self.cfg = cfg

    @classmethod
    def from_csv(
        cls,
        filepath: str | Path,
        class_col: str | None = None,
        cfg: AnalysisConfig = DEFAULT_ANALYSIS_CFG,
        **kwargs: object,
    ) -> "LabeledDataset":
        """Load a labeled dataset from a CSV file.

        Args:
            filepath: Path to the CSV file
            class_col: Explicit class-label column (optional)
            cfg: Analysis defaults
            **kwargs: Forwarded to :func:`pandas.read_csv`

        Returns:
            Dataset instance with loaded data
        """
        kwargs.setdefault("skipinitialspace", True)
        df = pd.read_csv(filepath, **kwargs)  # type: ignore[arg-type]
        return cls(df=df, class_col=class_col, cfg=cfg)

    @property
    def df(self) -> pd.DataFrame:
        """Get the raw DataFrame.

        Raises:
            ValueError: If dataset not loaded
        """
        if self._df is None:
            raise ValueError("Dataset not loaded. Use from_csv() to load data.")
        return self._df

    @property
    def class_col(self) -> str | None:
        """Name of the class-label column, or ``None`` if none can be identified."""
        if self._class_col is not None:
            return self._class_col
        wanted = self.cfg.class_column_name.casefold()
        return next((str(c) for c in self.df.columns if str(c).casefold() == wanted), None)

    @property
    def feature_cols(self) -> list[str]:
        """All attribute columns except the class column, in dataset order."""
        return [c for c in self.df.columns if c != self.class_col]

    @property
    def numeric_cols(self) -> list[str]:
        """Feature columns where every cell parses as a real number."""
        return [
            col
            for col in self.feature_cols
            if len(self.df) > 0 and parse_numeric(self.df[col]).notna().all()
        ]

    @property
    def class_counts(self) -> pd.Series:
        """Row count per class label (labels compared as text)."""
        if self.class_col is None:
            return pd.Series(dtype=int)
        return self.df[self.class_col].astype(str).value_counts()

    def view(self, columns: Iterable[str] | None = None) -> DatasetView:
        """Build the immutable snapshot consumed by analyzers.

        Args:
            columns: Attribute columns to analyze (defaults to all feature columns)

        Returns:
            DatasetView with the parsed numeric cache
        """
        return DatasetView.from_frame(
            self.df,
            class_col=self.class_col,
            feature_cols=list(columns) if columns is not None else None,
        )

    def normalized(self, method: Literal["minmax", "zscore"] = "minmax") -> "LabeledDataset":
        """Return a copy with fully numeric attribute columns rescaled.

        ``"minmax"`` maps every column to [0, 1] with
        [sklearn's MinMaxScaler](https://scikit-learn.org/stable/modules/generated/sklearn.preprocessing.MinMaxScaler.html);
        ``"zscore"`` standardizes to zero mean and unit variance with ``StandardScaler``.
        The class column and non-numeric columns are left untouched.
        """
        if method == "minmax":
            scaler: MinMaxScaler | StandardScaler = MinMaxScaler()
        elif method == "zscore":
            scaler = StandardScaler()
        else:
            raise ValueError(f"Invalid method='{method}'. Use 'minmax' or 'zscore'.")

        cols = self.numeric_cols
        df = self.df.copy()
        if cols:
            scaled = scaler.fit_transform(self.view(columns=cols).numeric.to_numpy())
            df = df.assign(**{col: scaled[:, i] for i, col in enumerate(cols)})
        return LabeledDataset(df=df, class_col=self._class_col, cfg=self.cfg)

    def make_pure_region_finder(self, columns: Iterable[str] | None = None) -> "PureRegionFinder":
        """Instantiate an (unfiltered) pure-region finder for this dataset."""
        from purity_tlbx.analysis.pure_region_finder import PureRegionFinder

        return PureRegionFinder(self.view(columns=columns))

    def make_easy_case_classifier(
        self,
        threshold: float | None = None,
        columns: Iterable[str] | None = None,
    ) -> "EasyCaseClassifier":
        """Instantiate an easy/hard case classifier.

        Args:
            threshold: Coverage threshold in percent (defaults to ``cfg.default_threshold``)
            columns: Attribute columns to analyze (defaults to all feature columns)
        """
        from purity_tlbx.analysis.easy_case_classifier import EasyCaseClassifier

        return EasyCaseClassifier(
            self.view(columns=columns),
            threshold=self.cfg.default_threshold if threshold is None else threshold,
            cfg=self.cfg,
        )

    def make_threshold_sweep(self, columns: Iterable[str] | None = None) -> "ThresholdSweep":
        """Instantiate the best-threshold sweep over ``cfg.sweep_thresholds()``."""
        from purity_tlbx.analysis.threshold_sweep import ThresholdSweep

        return ThresholdSweep(self.view(columns=columns), thresholds=self.cfg.sweep_thresholds())
