"""Gaussian Naive Bayes -- classification of small numeric tabular datasets."""

__version__ = "0.1.0"

from .classifier import GaussianNaiveBayes, class_log_scores, select_best
from .config import BUILTIN_DATASETS, Settings, load_settings
from .distributions import (
    gaussian_density,
    log_density,
    mean,
    separate_by_class,
    stdev,
    summarize_dataset,
)
from .exceptions import (
    DimensionMismatchError,
    GaussianBayesError,
    InsufficientDataError,
    UnfittedModelError,
)
from .loader import Dataset, load_dataset, parse_dataset
from .metrics import ClassificationReport, accuracy_score, compute_metrics
from .models import AccuracyResult, ClassSummary, Prediction
from .pipeline import EvaluationResult, Evaluator

__all__ = [
    # Core
    "GaussianNaiveBayes",
    "ClassSummary",
    "Prediction",
    "class_log_scores",
    "select_best",
    # Distributions
    "mean",
    "stdev",
    "gaussian_density",
    "log_density",
    "separate_by_class",
    "summarize_dataset",
    # Scoring
    "AccuracyResult",
    "ClassificationReport",
    "accuracy_score",
    "compute_metrics",
    # Data and wiring
    "Dataset",
    "load_dataset",
    "parse_dataset",
    "Evaluator",
    "EvaluationResult",
    "Settings",
    "BUILTIN_DATASETS",
    "load_settings",
    # Errors
    "GaussianBayesError",
    "DimensionMismatchError",
    "UnfittedModelError",
    "InsufficientDataError",
]
