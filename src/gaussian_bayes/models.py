"""Data models for Gaussian Naive Bayes classification."""

from __future__ import annotations

import math
from collections.abc import Hashable
from dataclasses import dataclass, field


def _round_or_none(value: float, digits: int = 6) -> float | None:
    """Round a float for JSON output; NaN and infinities become None."""
    if math.isnan(value) or math.isinf(value):
        return None
    return round(value, digits)


@dataclass
class ClassSummary:
    """Per-feature mean and standard deviation learned for one class."""

    label: Hashable
    means: list[float] = field(default_factory=list)
    stdevs: list[float] = field(default_factory=list)
    count: int = 0

    @property
    def n_features(self) -> int:
        return len(self.means)

    @property
    def is_degenerate(self) -> bool:
        """True when any feature has zero or undefined spread."""
        return any(s == 0 or math.isnan(s) for s in self.stdevs)

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "count": self.count,
            "means": [_round_or_none(m) for m in self.means],
            "stdevs": [_round_or_none(s) for s in self.stdevs],
        }


@dataclass
class Prediction:
    """Winning class for one row and its log-likelihood score."""

    label: Hashable
    score: float

    def to_dict(self) -> dict:
        return {"label": self.label, "score": _round_or_none(self.score)}


@dataclass
class AccuracyResult:
    """Exact-match accuracy of predictions against true labels."""

    correct: int = 0
    total: int = 0

    @property
    def ratio(self) -> float:
        return self.correct / self.total if self.total > 0 else 0.0

    @property
    def percentage(self) -> float:
        """Accuracy as a percentage rounded to two decimals."""
        return round(self.ratio * 100, 2)

    def summary(self) -> str:
        return (
            f"Accuracy: {self.ratio * 100:.2f}%"
            f" - {self.correct}/{self.total} correctly classified"
        )

    def __str__(self) -> str:
        return self.summary()

    def to_dict(self) -> dict:
        return {
            "correct": self.correct,
            "total": self.total,
            "accuracy": round(self.ratio, 4),
            "percentage": self.percentage,
        }
