"""Tests for DatasetView."""

import numpy as np
import pandas as pd
import pytest

from purity_tlbx.data.views import DatasetView, parse_numeric


class TestDatasetView:
    """Test DatasetView functionality."""

    @pytest.fixture
    def sample_view(self) -> DatasetView:
        """Create a sample DatasetView with text cells and a shifted index."""
        data = pd.DataFrame(
            {
                "feature1": ["1.5", "2", "abc"],
                "feature2": [4.0, 5.0, 6.0],
                "Class": [1, 2, 1],
            },
            index=[10, 20, 30],
        )
        return DatasetView.from_frame(data, class_col="Class")

    def test_view_creation(self, sample_view: DatasetView) -> None:
        """Test rows are addressed by position and the class column is excluded from features."""
        assert sample_view.n_rows == 3
        assert list(sample_view.df.index) == [0, 1, 2]
        assert sample_view.feature_cols == ["feature1", "feature2"]
        assert sample_view.has_class_col

    def test_numeric_cache_parses_once(self, sample_view: DatasetView) -> None:
        """Test text cells are parsed to floats and unparsable cells become NaN."""
        assert sample_view.numeric["feature1"].iloc[0] == 1.5
        assert sample_view.numeric["feature1"].iloc[1] == 2.0
        assert np.isnan(sample_view.numeric["feature1"].iloc[2])
        assert (sample_view.numeric.dtypes == float).all()

    def test_labels_are_text(self, sample_view: DatasetView) -> None:
        """Test class labels are compared as strings."""
        assert sample_view.labels.tolist() == ["1", "2", "1"]
        assert sample_view.class_counts.to_dict() == {"1": 2, "2": 1}

    def test_view_is_frozen(self, sample_view: DatasetView) -> None:
        """Test that DatasetView is immutable."""
        with pytest.raises(AttributeError):
            sample_view.class_col = "feature2"  # type: ignore[misc]

    def test_unknown_class_column(self) -> None:
        """Test an explicit class column must exist."""
        with pytest.raises(KeyError):
            DatasetView.from_frame(pd.DataFrame({"x": [1]}), class_col="class")

    def test_view_without_class_column(self) -> None:
        """Test creating a view without a class column."""
        view = DatasetView.from_frame(pd.DataFrame({"x": [1, 2, 3]}), class_col=None)
        assert not view.has_class_col
        assert view.feature_cols == ["x"]
        assert view.labels.empty

    def test_feature_subset(self) -> None:
        """Test restricting the analyzed columns."""
        df = pd.DataFrame({"x": [1], "y": [2], "class": ["A"]})
        view = DatasetView.from_frame(df, class_col="class", feature_cols=["y", "class"])
        assert view.feature_cols == ["y"]
        assert list(view.numeric.columns) == ["y"]

    def test_empty_frame(self) -> None:
        """Test an empty frame yields an empty cache with the feature columns."""
        view = DatasetView.from_frame(pd.DataFrame({"x": [], "class": []}), class_col="class")
        assert view.n_rows == 0
        assert list(view.numeric.columns) == ["x"]

    def test_empty_feature_subset(self) -> None:
        """Test an explicit empty column list analyzes no attributes."""
        df = pd.DataFrame({"x": [1, 2], "y": [3, 4], "class": ["A", "B"]})
        view = DatasetView.from_frame(df, class_col="class", feature_cols=[])
        assert view.feature_cols == []
        assert view.numeric.empty
        assert view.n_rows == 2

    def test_boolean_cells_not_numeric(self) -> None:
        """Test boolean cells are excluded from the numeric cache like other non-numbers."""
        df = pd.DataFrame(
            {
                "flag": [True, False, True],
                "mixed": pd.Series([True, "2.5", 3], dtype=object),
                "class": ["A", "B", "A"],
            },
        )
        view = DatasetView.from_frame(df, class_col="class")
        assert view.numeric["flag"].isna().all()
        assert np.isnan(view.numeric["mixed"].iloc[0])
        assert view.numeric["mixed"].iloc[1:].tolist() == [2.5, 3.0]


class TestParseNumeric:
    def test_text_and_missing(self) -> None:
        parsed = parse_numeric(pd.Series(["1", "2.5", "x", None], dtype=object))
        assert parsed.iloc[0] == 1.0
        assert parsed.iloc[1:].isna().tolist() == [False, True, True]

    def test_nullable_boolean(self) -> None:
        parsed = parse_numeric(pd.Series([True, None], dtype="boolean"))
        assert parsed.isna().all()
        assert parsed.dtype == float
