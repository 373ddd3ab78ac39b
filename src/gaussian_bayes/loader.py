"""Reading labeled numeric datasets from comma-separated text.

The expected layout is a header row followed by one example per line:
all feature columns first, then a single trailing label column::

    sepal_length,sepal_width,petal_length,petal_width,species
    5.1,3.5,1.4,0.2,Iris-setosa

Label text is turned into integer codes in order of first appearance, so
the first distinct label in the file is ``0``, the next ``1``, and so on.
Feature fields that are not valid numbers are read as ``nan`` rather than
rejected.
"""

from __future__ import annotations

import csv
import io
import logging
import math
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Dataset:
    """Feature matrix and integer-coded labels read from one source."""

    name: str
    features: list[list[float]] = field(default_factory=list)
    labels: list[int] = field(default_factory=list)
    label_names: list[str] = field(default_factory=list)
    feature_names: list[str] = field(default_factory=list)

    @property
    def n_samples(self) -> int:
        return len(self.features)

    @property
    def n_features(self) -> int:
        return len(self.features[0]) if self.features else 0

    @property
    def class_counts(self) -> dict[str, int]:
        """Number of rows per label, in label-code order."""
        counts = Counter(self.labels)
        return {name: counts.get(code, 0) for code, name in enumerate(self.label_names)}

    def reencode(self, label_names: Sequence[str]) -> "Dataset":
        """Re-code labels against another label order.

        Labels missing from ``label_names`` are appended after them, so a
        separately loaded test set can be scored against a model fitted on
        a training set.
        """
        names = list(label_names)
        index = {name: code for code, name in enumerate(names)}
        for name in self.label_names:
            if name not in index:
                index[name] = len(names)
                names.append(name)

        labels = [index[self.label_names[code]] for code in self.labels]
        return Dataset(
            name=self.name,
            features=self.features,
            labels=labels,
            label_names=names,
            feature_names=self.feature_names,
        )


def _parse_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return math.nan


def parse_dataset(text: str, name: str = "dataset") -> Dataset:
    """Parse CSV text with a header row into a ``Dataset``.

    Blank lines are ignored. The header's trailing column name is dropped
    from ``feature_names``.
    """
    reader = csv.reader(io.StringIO(text))
    dataset = Dataset(name=name)
    codes: dict[str, int] = {}

    header_seen = False
    for fields in reader:
        if not any(f.strip() for f in fields):
            continue
        if not header_seen:
            dataset.feature_names = [f.strip() for f in fields[:-1]]
            header_seen = True
            continue

        label = fields[-1].strip()
        if label not in codes:
            codes[label] = len(dataset.label_names)
            dataset.label_names.append(label)

        dataset.features.append([_parse_float(f.strip()) for f in fields[:-1]])
        dataset.labels.append(codes[label])

    logger.debug(
        "Parsed %s: %d rows, %d features, classes %s",
        name, dataset.n_samples, dataset.n_features, dataset.class_counts,
    )
    return dataset


def load_dataset(path: str | Path) -> Dataset:
    """Read a dataset file from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    text = path.read_text(encoding="utf-8")
    return parse_dataset(text, name=path.stem)
