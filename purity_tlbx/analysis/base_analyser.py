"""Base analyzer class and shared result vocabulary for the pure-region engine."""

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any

from purity_tlbx.data.views import DatasetView


class AnalysisIssue(StrEnum):
    """Recoverable conditions under which an analysis yields empty results.

    Analyzers report these on their result objects instead of raising, so a
    caller can show "no analysis possible" and keep the session alive.
    """

    NO_CLASS_COLUMN = "no_class_column"
    EMPTY_DATASET = "empty_dataset"


def detect_issue(view: DatasetView) -> AnalysisIssue | None:
    """Return the condition preventing analysis of ``view``, if any."""
    if not view.has_class_col:
        return AnalysisIssue.NO_CLASS_COLUMN
    if view.n_rows == 0:
        return AnalysisIssue.EMPTY_DATASET
    return None


class BaseAnalyser(ABC):
    """Abstract base class for analysis components in the toolbox.

    All analyzers must:
    1. Accept a DatasetView in their constructor
    2. Implement fit() to perform the analysis and return self for chaining
    3. Implement result() to return a frozen dataclass with results

    Analyzers never mutate the view; each fit() produces fresh results.

    ### Adding a New Analyzer

    ```python
    @dataclass(frozen=True)
    class MyResult:
        regions: list[PureRegion]
        issue: AnalysisIssue | None = None

    class MyAnalyzer(BaseAnalyser):
        def __init__(self, view: DatasetView):
            self._view = view
            self._fitted = False

        def fit(self) -> "MyAnalyzer":
            ...
            self._fitted = True
            return self

        def result(self) -> MyResult:
            if not self._fitted:
                raise ValueError("Call fit() first")
            return MyResult(...)
    ```

    Then add a ``make_my_analyzer()`` factory to
    :class:`~purity_tlbx.data.LabeledDataset`.
    """

    @abstractmethod
    def fit(self) -> "BaseAnalyser":
        """Fit the analyzer to the data.

        Returns:
            Self for method chaining.
        """
        ...

    @abstractmethod
    def result(self) -> Any:
        """Return analysis results as a frozen dataclass instance.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        ...
