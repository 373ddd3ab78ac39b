"""Scoring predictions against ground-truth labels."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
from typing import Union

from .exceptions import DimensionMismatchError
from .models import AccuracyResult, Prediction


def _label_of(item: Union[Prediction, Hashable]) -> Hashable:
    return item.label if isinstance(item, Prediction) else item


def accuracy_score(
    predictions: Sequence[Union[Prediction, Hashable]],
    y_true: Sequence[Hashable],
) -> AccuracyResult:
    """Count exact matches between predicted and true labels.

    Args:
        predictions: ``Prediction`` objects or bare labels.
        y_true: Ground-truth labels in the same order.

    Raises:
        DimensionMismatchError: If the two sequences differ in length.
    """
    if len(predictions) != len(y_true):
        raise DimensionMismatchError(
            f"predictions ({len(predictions)}) and labels ({len(y_true)}) "
            "must have same length"
        )
    correct = sum(1 for p, t in zip(predictions, y_true) if _label_of(p) == t)
    return AccuracyResult(correct=correct, total=len(y_true))


@dataclass
class ClassificationReport:
    """Per-class breakdown of a set of predictions.

    Attributes:
        accuracy: Overall exact-match accuracy.
        per_class: Precision, recall and F1 for each class.
        confusion_matrix: ``{true: {predicted: count}}``.
        support: Number of true examples per class.
    """

    accuracy: AccuracyResult = field(default_factory=AccuracyResult)
    per_class: dict[Hashable, dict[str, float]] = field(default_factory=dict)
    confusion_matrix: dict[Hashable, dict[Hashable, int]] = field(default_factory=dict)
    support: dict[Hashable, int] = field(default_factory=dict)

    @property
    def macro_f1(self) -> float:
        if not self.per_class:
            return 0.0
        return sum(m["f1"] for m in self.per_class.values()) / len(self.per_class)

    def to_dict(self) -> dict:
        return {
            "accuracy": self.accuracy.to_dict(),
            "macro_f1": round(self.macro_f1, 4),
            "per_class": {
                str(cls): {k: round(v, 4) for k, v in m.items()}
                for cls, m in self.per_class.items()
            },
            "confusion_matrix": {
                str(t): {str(p): n for p, n in row.items()}
                for t, row in self.confusion_matrix.items()
            },
            "support": {str(cls): n for cls, n in self.support.items()},
        }


def compute_metrics(
    y_true: Sequence[Hashable],
    y_pred: Sequence[Union[Prediction, Hashable]],
) -> ClassificationReport:
    """Build a ``ClassificationReport`` from true and predicted labels.

    Classes are listed in first-seen order across ``y_true`` then ``y_pred``.
    """
    accuracy = accuracy_score(y_pred, y_true)
    predicted = [_label_of(p) for p in y_pred]

    classes = list(dict.fromkeys([*y_true, *predicted]))
    cm: dict[Hashable, dict[Hashable, int]] = {c: {c2: 0 for c2 in classes} for c in classes}
    for true, pred in zip(y_true, predicted):
        cm[true][pred] += 1

    per_class: dict[Hashable, dict[str, float]] = {}
    for cls in classes:
        tp = cm[cls][cls]
        fp = sum(cm[other][cls] for other in classes if other != cls)
        fn = sum(cm[cls][other] for other in classes if other != cls)

        precision = tp / (tp + fp) if (tp + fp) > 0 else 0.0
        recall = tp / (tp + fn) if (tp + fn) > 0 else 0.0
        f1 = (
            2 * precision * recall / (precision + recall)
            if (precision + recall) > 0
            else 0.0
        )
        per_class[cls] = {"precision": precision, "recall": recall, "f1": f1}

    support = Counter(y_true)
    return ClassificationReport(
        accuracy=accuracy,
        per_class=per_class,
        confusion_matrix=cm,
        support={cls: support.get(cls, 0) for cls in classes},
    )
