"""Fit-predict-score wiring over loaded datasets.

The ``Evaluator`` class is the main entry point for callers that start
from files rather than in-memory arrays. It loads the data, fits a
``GaussianNaiveBayes`` model, predicts, and scores the predictions.

By default the training data is also the evaluation data. A separate test
set can be passed instead; its labels are re-coded to the training set's
label order before scoring.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .classifier import GaussianNaiveBayes
from .loader import Dataset, load_dataset
from .metrics import ClassificationReport, compute_metrics
from .models import AccuracyResult, ClassSummary, Prediction

logger = logging.getLogger(__name__)

DatasetSource = Union[Dataset, str, Path]


@dataclass
class EvaluationResult:
    """Outcome of fitting on one dataset and scoring on another (or the same)."""

    train_name: str
    test_name: str
    label_names: list[str]
    summaries: list[ClassSummary] = field(default_factory=list)
    predictions: list[Prediction] = field(default_factory=list)
    report: ClassificationReport = field(default_factory=ClassificationReport)

    @property
    def accuracy(self) -> AccuracyResult:
        return self.report.accuracy

    def label_name(self, code: int) -> str:
        if 0 <= code < len(self.label_names):
            return self.label_names[code]
        return str(code)

    def to_dict(self) -> dict:
        return {
            "train": self.train_name,
            "test": self.test_name,
            "labels": self.label_names,
            "accuracy": self.accuracy.to_dict(),
            "report": self.report.to_dict(),
            "summaries": [
                {**s.to_dict(), "name": self.label_name(s.label)} for s in self.summaries
            ],
        }


class Evaluator:
    """Loads datasets and runs the classifier end to end.

    Example::

        evaluator = Evaluator()
        result = evaluator.evaluate("datasets/iris.csv")
        print(result.accuracy)  # Accuracy: 96.00% - 144/150 correctly classified

    Args:
        strict: Passed to ``GaussianNaiveBayes``.
    """

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict

    def evaluate(
        self,
        train: DatasetSource,
        test: Optional[DatasetSource] = None,
    ) -> EvaluationResult:
        """Fit on ``train`` and score on ``test`` (or on ``train`` itself).

        Raises:
            FileNotFoundError: If a dataset path does not exist.
            DimensionMismatchError: If the datasets disagree on feature count.
            InsufficientDataError: On empty training data, or a one-row
                class in strict mode.
        """
        train_data = self._resolve(train)
        test_data = train_data if test is None else self._resolve(test)
        if test_data is not train_data:
            test_data = test_data.reencode(train_data.label_names)

        model = GaussianNaiveBayes(strict=self._strict)
        summaries = model.fit(train_data.features, train_data.labels)
        predictions = model.predict(test_data.features)
        report = compute_metrics(test_data.labels, predictions)

        logger.info(
            "Evaluated %s on %s: %s", train_data.name, test_data.name, report.accuracy
        )
        return EvaluationResult(
            train_name=train_data.name,
            test_name=test_data.name,
            label_names=test_data.label_names,
            summaries=summaries,
            predictions=predictions,
            report=report,
        )

    def summarize(self, source: DatasetSource) -> tuple[Dataset, list[ClassSummary]]:
        """Fit on one dataset and return it with the learned class summaries."""
        dataset = self._resolve(source)
        model = GaussianNaiveBayes(strict=self._strict)
        return dataset, model.fit(dataset.features, dataset.labels)

    @staticmethod
    def _resolve(source: DatasetSource) -> Dataset:
        if isinstance(source, Dataset):
            return source
        return load_dataset(source)
