"""Data module for labeled datasets and their analysis views."""

from .labeled_dataset import LabeledDataset
from .views import DatasetView


__all__ = ["DatasetView", "LabeledDataset"]
