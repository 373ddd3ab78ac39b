"""Gaussian Naive Bayes classifier in pure Python.

Each feature is assumed to be normally distributed within a class and
independent of the other features given the class. A row is scored
against every class by summing per-feature log-densities, and the
highest-scoring class wins.

Example::

    model = GaussianNaiveBayes()
    model.fit([[1.0, 2.1], [1.2, 1.9], [6.8, 7.2], [7.1, 6.9]], [0, 0, 1, 1])

    for prediction in model.predict([[1.1, 2.0]]):
        print(prediction.label, prediction.score)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from .distributions import log_density, separate_by_class, summarize_dataset
from .exceptions import DimensionMismatchError, InsufficientDataError, UnfittedModelError
from .models import ClassSummary, Prediction

logger = logging.getLogger(__name__)


def class_log_scores(
    row: Sequence[float],
    summaries: Sequence[ClassSummary],
) -> dict[Hashable, float]:
    """Sum the per-feature log-densities of ``row`` under each class.

    A zero density on any feature rules the class out with ``-inf``, even
    when another feature matched a zero-spread mean exactly.
    """
    scores: dict[Hashable, float] = {}
    for summary in summaries:
        score = 0.0
        for value, avg, std in zip(row, summary.means, summary.stdevs):
            feature_score = log_density(value, avg, std)
            if feature_score == -math.inf:
                score = -math.inf
                break
            score += feature_score
        scores[summary.label] = score
    return scores


def select_best(scores: dict[Hashable, float]) -> Prediction:
    """Pick the class with the strictly largest score.

    Earlier classes win ties. A ``nan`` score never beats a real one.
    """
    best_label: Hashable = None
    best_score: Optional[float] = None

    for label, score in scores.items():
        if (
            best_score is None
            or score > best_score
            or (math.isnan(best_score) and not math.isnan(score))
        ):
            best_label = label
            best_score = score

    if best_score is None:
        raise ValueError("Cannot select a class from empty scores")
    return Prediction(label=best_label, score=best_score)


@dataclass
class GaussianNaiveBayes:
    """Gaussian Naive Bayes over dense numeric feature rows.

    Args:
        strict: Raise ``InsufficientDataError`` when a class has fewer than
            two training rows, instead of carrying a ``nan`` spread.
    """

    strict: bool = False

    # Learned state
    summaries_: Optional[list[ClassSummary]] = field(default=None, repr=False)

    @property
    def is_fitted(self) -> bool:
        return self.summaries_ is not None

    @property
    def classes_(self) -> list[Hashable]:
        """Class labels in the order they were discovered while fitting."""
        return [s.label for s in self._require_fitted()]

    @property
    def n_features_(self) -> int:
        summaries = self._require_fitted()
        return summaries[0].n_features if summaries else 0

    def fit(
        self,
        features: Sequence[Sequence[float]],
        labels: Sequence[Hashable],
    ) -> list[ClassSummary]:
        """Learn per-class means and standard deviations.

        Any previously learned state is replaced.

        Args:
            features: Feature rows, all of the same width.
            labels: Class label for each row (same length as ``features``).

        Returns:
            The fitted class summaries, in class discovery order.

        Raises:
            DimensionMismatchError: On mismatched lengths or ragged rows.
            InsufficientDataError: On empty input, or a one-row class in
                strict mode.
        """
        if len(features) == 0 and len(labels) == 0:
            raise InsufficientDataError("Cannot fit on an empty dataset")

        separated = separate_by_class(features, labels)
        summaries = summarize_dataset(separated, strict=self.strict)
        self.summaries_ = summaries

        logger.debug(
            "Fitted %d classes over %d rows (%d features)",
            len(summaries), len(features), self.n_features_,
        )
        return summaries

    def predict(self, rows: Sequence[Sequence[float]]) -> list[Prediction]:
        """Predict the most likely class for each row.

        Raises:
            UnfittedModelError: If ``fit()`` has not been called.
            DimensionMismatchError: If a row's width differs from the fitted one.
        """
        predictions = [select_best(scores) for scores in self.log_scores(rows)]
        logger.debug("Predicted %d rows", len(predictions))
        return predictions

    def predict_labels(self, rows: Sequence[Sequence[float]]) -> list[Hashable]:
        """Predict class labels only."""
        return [p.label for p in self.predict(rows)]

    def log_scores(self, rows: Sequence[Sequence[float]]) -> list[dict[Hashable, float]]:
        """Per-class log-likelihood scores for each row."""
        summaries = self._require_fitted()
        n_features = self.n_features_

        results = []
        for i, row in enumerate(rows):
            if len(row) != n_features:
                raise DimensionMismatchError(
                    f"row {i} has {len(row)} features, model was fitted on {n_features}"
                )
            results.append(class_log_scores(row, summaries))
        return results

    def get_summary(self, label: Hashable) -> ClassSummary:
        """Return the learned summary for one class.

        Raises:
            ValueError: If ``label`` was not seen during fitting.
        """
        for summary in self._require_fitted():
            if summary.label == label:
                return summary
        raise ValueError(f"Unknown class: {label!r}. Known: {self.classes_}")

    def _require_fitted(self) -> list[ClassSummary]:
        if self.summaries_ is None:
            raise UnfittedModelError("Classifier has not been fitted. Call fit() first.")
        return self.summaries_
