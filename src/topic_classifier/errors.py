"""Exception hierarchy for the topic classifier.

Every failure the classifier signals derives from ``TopicClassifierError``
so callers can catch the whole family with one clause. The core never
swallows these; recovery (e.g. skipping a bad CSV row) is the caller's job.
"""

from __future__ import annotations


class TopicClassifierError(Exception):
    """Base class for all topic classifier errors."""


class InvalidCategoryError(TopicClassifierError, ValueError):
    """A category string matched none of the canonical categories."""

    def __init__(self, raw: str, valid: list[str] | None = None) -> None:
        self.raw = raw
        message = f"Invalid category: '{raw}'."
        if valid:
            message += f" Valid categories are: {', '.join(valid)}"
        super().__init__(message)


class ModelNotTrainedError(TopicClassifierError, RuntimeError):
    """An operation that needs at least one trained document ran on an empty model."""


class InvalidModelFormatError(TopicClassifierError, ValueError):
    """A persisted model is missing required fields or cannot be decoded."""


class ModelIOError(TopicClassifierError, OSError):
    """A model or data file could not be read or written."""


class InternalInconsistencyError(TopicClassifierError, RuntimeError):
    """The classifier picked a category outside the canonical set."""


class TrainingDataError(TopicClassifierError, ValueError):
    """A training data file is structurally unusable (e.g. missing columns)."""
