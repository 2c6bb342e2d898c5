"""Tests for LabeledDataset loading, class column detection and normalization."""

from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from purity_tlbx.analysis import EasyCaseClassifier, PureRegionFinder, ThresholdSweep
from purity_tlbx.data import LabeledDataset
from purity_tlbx.utils.config import AnalysisConfig


@pytest.fixture
def sample_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "a": [0.0, 5.0, 10.0],
            "b": ["1", "2", "3"],
            "c": ["1", "x", "3"],
            "Class": ["pos", "neg", "pos"],
        },
    )


class TestClassColumn:
    def test_detected_case_insensitively(self, sample_df: pd.DataFrame) -> None:
        ds = LabeledDataset(sample_df)
        assert ds.class_col == "Class"
        assert ds.feature_cols == ["a", "b", "c"]

    def test_explicit_class_column(self, sample_df: pd.DataFrame) -> None:
        ds = LabeledDataset(sample_df, class_col="c")
        assert ds.class_col == "c"
        assert "Class" in ds.feature_cols

    def test_missing_class_column(self) -> None:
        ds = LabeledDataset(pd.DataFrame({"x": [1, 2]}))
        assert ds.class_col is None
        assert ds.class_counts.empty

    def test_explicit_class_column_must_exist(self, sample_df: pd.DataFrame) -> None:
        with pytest.raises(KeyError):
            LabeledDataset(sample_df, class_col="label")

    def test_configured_class_header(self) -> None:
        df = pd.DataFrame({"x": [1], "Label": ["A"]})
        ds = LabeledDataset(df, cfg=AnalysisConfig(class_column_name="label"))
        assert ds.class_col == "Label"

    def test_class_counts(self, sample_df: pd.DataFrame) -> None:
        assert LabeledDataset(sample_df).class_counts.to_dict() == {"pos": 2, "neg": 1}


class TestDatasetBasics:
    def test_not_loaded(self) -> None:
        with pytest.raises(ValueError, match="not loaded"):
            _ = LabeledDataset().df

    def test_numeric_cols_require_every_cell(self, sample_df: pd.DataFrame) -> None:
        assert LabeledDataset(sample_df).numeric_cols == ["a", "b"]

    def test_from_csv(self, tmp_path: Path) -> None:
        path = tmp_path / "toy.csv"
        path.write_text("x, y, class\n1, 2, A\n3, 4, B\n")
        ds = LabeledDataset.from_csv(path)
        assert ds.class_col == "class"
        assert ds.df["class"].tolist() == ["A", "B"]
        assert ds.numeric_cols == ["x", "y"]

    def test_view_uses_detected_class(self, sample_df: pd.DataFrame) -> None:
        view = LabeledDataset(sample_df).view(columns=["a"])
        assert view.class_col == "Class"
        assert view.feature_cols == ["a"]

    def test_empty_column_selection(self, sample_df: pd.DataFrame) -> None:
        ds = LabeledDataset(sample_df)
        assert ds.view(columns=[]).feature_cols == []
        assert ds.make_pure_region_finder(columns=[]).fit().result().regions == []

    def test_boolean_column_not_numeric(self) -> None:
        df = pd.DataFrame({"x": [1, 2, 3], "flag": [True, False, True], "class": ["A", "B", "A"]})
        ds = LabeledDataset(df)
        assert ds.numeric_cols == ["x"]
        assert ds.normalized().df["flag"].tolist() == [True, False, True]
        regions = ds.make_pure_region_finder().fit().result().regions
        assert {r.attribute for r in regions} == {"x"}


class TestNormalization:
    def test_minmax(self, sample_df: pd.DataFrame) -> None:
        norm = LabeledDataset(sample_df).normalized("minmax")
        assert norm.df["a"].tolist() == pytest.approx([0.0, 0.5, 1.0])
        assert norm.df["b"].tolist() == pytest.approx([0.0, 0.5, 1.0])
        assert norm.df["c"].tolist() == ["1", "x", "3"]
        assert norm.df["Class"].tolist() == sample_df["Class"].tolist()

    def test_zscore(self, sample_df: pd.DataFrame) -> None:
        norm = LabeledDataset(sample_df).normalized("zscore")
        assert norm.df["a"].mean() == pytest.approx(0.0)
        assert np.std(norm.df["a"].to_numpy()) == pytest.approx(1.0)

    def test_original_untouched(self, sample_df: pd.DataFrame) -> None:
        ds = LabeledDataset(sample_df)
        ds.normalized()
        assert ds.df["a"].tolist() == [0.0, 5.0, 10.0]

    def test_invalid_method(self, sample_df: pd.DataFrame) -> None:
        with pytest.raises(ValueError, match="Invalid method"):
            LabeledDataset(sample_df).normalized("log")  # type: ignore[arg-type]

    def test_normalization_preserves_pure_rows(self, scenario_df: pd.DataFrame) -> None:
        """Min-max scaling is monotone, so the easy cases stay the same."""
        ds = LabeledDataset(scenario_df)
        raw = ds.make_easy_case_classifier(threshold=50).fit().result()
        norm = ds.normalized().make_easy_case_classifier(threshold=50).fit().result()
        assert raw.hidden_rows == norm.hidden_rows


class TestFactories:
    def test_factories(self, scenario_df: pd.DataFrame) -> None:
        ds = LabeledDataset(scenario_df)
        assert isinstance(ds.make_pure_region_finder(), PureRegionFinder)
        assert isinstance(ds.make_threshold_sweep(), ThresholdSweep)
        classifier = ds.make_easy_case_classifier()
        assert isinstance(classifier, EasyCaseClassifier)
        assert classifier.threshold == 5

    def test_sweep_uses_configured_thresholds(self, scenario_df: pd.DataFrame) -> None:
        cfg = AnalysisConfig(sweep_step=25)
        sweep = LabeledDataset(scenario_df, cfg=cfg).make_threshold_sweep()
        assert sweep.thresholds == [0, 25, 50, 75, 100]
