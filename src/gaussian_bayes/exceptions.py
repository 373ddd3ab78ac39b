"""Error kinds raised by the classifier and its helpers."""

from __future__ import annotations


class GaussianBayesError(Exception):
    """Base class for all errors raised by this package."""


class DimensionMismatchError(GaussianBayesError, ValueError):
    """Feature, label, or row counts do not line up."""


class UnfittedModelError(GaussianBayesError, RuntimeError):
    """A fitted-only operation was called before ``fit()``."""


class InsufficientDataError(GaussianBayesError, ValueError):
    """Too few examples to estimate a distribution."""
