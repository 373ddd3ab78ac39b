"""Per-class distribution estimates and Gaussian density helpers.

Everything here is a plain function so each step of fitting can be
tested on its own:

- ``separate_by_class`` groups rows by label in first-seen order
- ``summarize_dataset`` turns the groups into ``ClassSummary`` objects
- ``gaussian_density`` / ``log_density`` score a value against a summary

Standard deviations use the sample (N-1) estimator. A class with a single
example has an undefined spread; by default that is reported as ``nan``
and flows through scoring, while ``strict=True`` raises
``InsufficientDataError`` instead.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Sequence

from .exceptions import DimensionMismatchError, InsufficientDataError
from .models import ClassSummary

logger = logging.getLogger(__name__)

_LOG_SQRT_2PI = 0.5 * math.log(2 * math.pi)


# ---------------------------------------------------------------------------
# Descriptive statistics
# ---------------------------------------------------------------------------

def mean(values: Sequence[float]) -> float:
    """Arithmetic mean of a non-empty sequence."""
    if not values:
        raise InsufficientDataError("mean() requires at least one value")
    return sum(values) / len(values)


def stdev(
    values: Sequence[float],
    mean_value: float | None = None,
    strict: bool = False,
) -> float:
    """Sample standard deviation (Bessel-corrected).

    Args:
        values: Observations for one feature of one class.
        mean_value: Precomputed mean, to avoid a second pass.
        strict: Raise instead of returning ``nan`` for fewer than 2 values.

    Returns:
        ``sqrt(sum((v - mean)^2) / (n - 1))``, or ``nan`` when ``n < 2``.

    Raises:
        InsufficientDataError: If ``strict`` and fewer than 2 values.
    """
    n = len(values)
    if n < 2:
        if strict:
            raise InsufficientDataError(
                f"standard deviation needs at least 2 values, got {n}"
            )
        return math.nan

    avg = mean(values) if mean_value is None else mean_value
    variance = sum((v - avg) ** 2 for v in values)
    return math.sqrt(variance / (n - 1))


def columns(rows: Sequence[Sequence[float]]) -> list[list[float]]:
    """Transpose rows into feature columns.

    Raises:
        DimensionMismatchError: If the rows do not all have the same width.
    """
    if not rows:
        return []
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise DimensionMismatchError(
                f"row {i} has {len(row)} features, expected {width}"
            )
    return [[row[f] for row in rows] for f in range(width)]


# ---------------------------------------------------------------------------
# Gaussian density
# ---------------------------------------------------------------------------

def gaussian_density(x: float, mean_value: float, std: float) -> float:
    """Gaussian probability density of ``x``.

    A zero standard deviation is taken as the limit of a collapsing bell
    curve: infinite density at the mean, zero everywhere else.
    """
    if std == 0:
        return math.inf if x == mean_value else 0.0
    exponent = math.exp(-((x - mean_value) ** 2) / (2 * std**2))
    return exponent / (math.sqrt(2 * math.pi) * std)


def log_density(x: float, mean_value: float, std: float) -> float:
    """Natural log of :func:`gaussian_density`, computed without ``exp``.

    Working in log space keeps far-away values finite instead of
    underflowing to ``log(0)``. With ``std == 0`` the result is ``+inf``
    on an exact match and ``-inf`` otherwise; ``nan`` inputs give ``nan``.
    """
    if std == 0:
        return math.inf if x == mean_value else -math.inf
    return -((x - mean_value) ** 2) / (2 * std**2) - math.log(std) - _LOG_SQRT_2PI


# ---------------------------------------------------------------------------
# Grouping and summarizing
# ---------------------------------------------------------------------------

def separate_by_class(
    features: Sequence[Sequence[float]],
    labels: Sequence[Hashable],
) -> dict[Hashable, list[Sequence[float]]]:
    """Group feature rows by their label.

    Classes appear in the order their first row appears, and rows keep
    their original order within a class.

    Raises:
        DimensionMismatchError: If ``features`` and ``labels`` differ in length.
    """
    if len(features) != len(labels):
        raise DimensionMismatchError(
            f"features ({len(features)}) and labels ({len(labels)}) must have same length"
        )

    separated: dict[Hashable, list[Sequence[float]]] = {}
    for row, label in zip(features, labels):
        separated.setdefault(label, []).append(row)
    return separated


def summarize_class(
    label: Hashable,
    rows: Sequence[Sequence[float]],
    strict: bool = False,
) -> ClassSummary:
    """Compute per-feature mean and standard deviation for one class."""
    summary = ClassSummary(label=label, count=len(rows))
    for column in columns(rows):
        avg = mean(column)
        summary.means.append(avg)
        summary.stdevs.append(stdev(column, avg, strict=strict))
    return summary


def summarize_dataset(
    separated: dict[Hashable, list[Sequence[float]]],
    strict: bool = False,
) -> list[ClassSummary]:
    """Summarize every class bucket produced by :func:`separate_by_class`.

    Raises:
        DimensionMismatchError: If classes disagree on the number of features.
        InsufficientDataError: If ``strict`` and a class has fewer than 2 rows.
    """
    summaries: list[ClassSummary] = []
    for label, rows in separated.items():
        try:
            summary = summarize_class(label, rows, strict=strict)
        except InsufficientDataError as exc:
            raise InsufficientDataError(f"class {label!r}: {exc}") from exc

        if summaries and summary.n_features != summaries[0].n_features:
            raise DimensionMismatchError(
                f"class {label!r} has {summary.n_features} features, "
                f"expected {summaries[0].n_features}"
            )
        if summary.is_degenerate:
            logger.debug("Class %r has zero or undefined spread: %s", label, summary.stdevs)
        summaries.append(summary)
    return summaries
