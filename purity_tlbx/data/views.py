"""Immutable per-pass snapshot of a labeled dataset."""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd


def parse_numeric(values: pd.Series) -> pd.Series:
    """Parse cells to floats; unparsable, missing and boolean cells become NaN."""
    if pd.api.types.is_bool_dtype(values):
        return pd.Series(np.nan, index=values.index, dtype=float)
    if values.dtype == object:
        values = values.mask(values.map(lambda v: isinstance(v, (bool, np.bool_))))
    return pd.to_numeric(values, errors="coerce").astype(float)


@dataclass(frozen=True)
class DatasetView:
    """Immutable snapshot of dataset rows together with their parsed numeric cache.

    Rows are addressed by position (``0..n_rows-1``); every analyzer reports row
    indices in that space.

    Attributes:
        df: Row-position-indexed copy of the raw cell values.
        class_col: Name of the class-label column, ``None`` if the dataset has none.
        feature_cols: Ordered attribute columns analyzed as features (class column excluded).
        numeric: Feature columns parsed once to floats; unparsable or missing cells are NaN.
        labels: Class label of every row as text (empty when ``class_col`` is ``None``).
    """

    df: pd.DataFrame
    class_col: str | None
    feature_cols: list[str]
    numeric: pd.DataFrame
    """Nullable-numeric column cache, one float column per feature."""
    labels: pd.Series

    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        class_col: str | None,
        feature_cols: Sequence[str] | None = None,
    ) -> "DatasetView":
        """Snapshot ``df`` and parse its feature columns once.

        Args:
            df: Raw data; cells may be numbers or their text representations.
            class_col: Class-label column name or ``None``.
            feature_cols: Columns to analyze (defaults to every column but the class column).

        Returns:
            A frozen view whose index is the row position.
        """
        if class_col is not None and class_col not in df.columns:
            raise KeyError(f"Class column '{class_col}' not found in data")

        frame = df.reset_index(drop=True).copy()
        features = [c for c in (frame.columns if feature_cols is None else feature_cols) if c != class_col]
        numeric = pd.DataFrame(
            {col: parse_numeric(frame[col]) for col in features},
            index=frame.index,
            columns=features,
        ).astype(float)
        labels = frame[class_col].astype(str) if class_col is not None else pd.Series(dtype=str)

        return cls(
            df=frame,
            class_col=class_col,
            feature_cols=features,
            numeric=numeric,
            labels=labels,
        )

    @property
    def n_rows(self) -> int:
        """Number of rows in the snapshot."""
        return len(self.df)

    @property
    def has_class_col(self) -> bool:
        return self.class_col is not None

    @property
    def class_counts(self) -> pd.Series:
        """Row count per class label."""
        return self.labels.value_counts(sort=False)
