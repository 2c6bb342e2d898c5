"""Test configuration for the pure-region toolbox."""

from pathlib import Path
import sys

import matplotlib
import numpy as np
import pandas as pd
import pytest


matplotlib.use("Agg")

# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def scenario_df() -> pd.DataFrame:
    """Four rows on one attribute: three ``A`` cases at 1..3 and one ``B`` case at 10."""
    return pd.DataFrame({"x": [1, 2, 3, 10], "class": ["A", "A", "A", "B"]})


@pytest.fixture
def scenario_view(scenario_df: pd.DataFrame):
    from purity_tlbx.data.views import DatasetView

    return DatasetView.from_frame(scenario_df, class_col="class")


@pytest.fixture
def alternating_view():
    """Six rows whose classes alternate along ``x``: every pure region is a single row."""
    from purity_tlbx.data.views import DatasetView

    df = pd.DataFrame({"x": [1, 2, 3, 4, 5, 6], "class": ["A", "B", "A", "B", "A", "B"]})
    return DatasetView.from_frame(df, class_col="class")


@pytest.fixture
def no_pure_view():
    """Every value is shared by rows of both classes, so no pure region exists."""
    from purity_tlbx.data.views import DatasetView

    df = pd.DataFrame({"x": [1, 1, 2, 2], "y": [7, 7, 7, 7], "class": ["A", "B", "A", "B"]})
    return DatasetView.from_frame(df, class_col="class")


@pytest.fixture(scope="session")
def random_view():
    """Seeded mixed dataset with ties, text cells and three classes."""
    from purity_tlbx.data.views import DatasetView

    rng = np.random.default_rng(7)
    n = 60
    coarse = rng.integers(0, 8, size=n).astype(object)
    coarse[[3, 17, 41]] = "n/a"
    df = pd.DataFrame(
        {
            "coarse": coarse,
            "fine": rng.normal(size=n).round(2),
            "label_text": rng.choice(["red", "blue"], size=n),
            "class": rng.choice(["A", "B", "C"], size=n, p=[0.5, 0.3, 0.2]),
        },
    )
    return DatasetView.from_frame(df, class_col="class")
