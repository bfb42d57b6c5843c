"""Runtime configuration.

Settings come from environment variables (optionally via a ``.env`` file)
and can be overridden per command on the CLI:

- ``TOPIC_CLASSIFIER_DATA``: training CSV (default ``training_data.csv``)
- ``TOPIC_CLASSIFIER_MODEL``: model file (default ``naive_bayes_model.json``)
- ``TOPIC_CLASSIFIER_MIN_CATEGORIES``: curation threshold (default ``2``)
- ``TOPIC_CLASSIFIER_CURATE``: run stop-word curation after training
  (default ``true``)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_DATA_PATH = Path("training_data.csv")
DEFAULT_MODEL_PATH = Path("naive_bayes_model.json")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got '{value}'")


def _env_int(name: str, default: int, minimum: int | None = None) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{value}'") from None
    if minimum is not None and number < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {number}")
    return number


@dataclass
class Settings:
    """Paths and training options used by the command-line tools."""

    data_path: Path = DEFAULT_DATA_PATH
    model_path: Path = DEFAULT_MODEL_PATH
    min_categories: int = 2
    curate: bool = True

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """Build settings from the environment.

        Args:
            dotenv: Load a ``.env`` file from the working directory first.
                Variables already set in the environment take precedence.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        return cls(
            data_path=Path(os.getenv("TOPIC_CLASSIFIER_DATA") or DEFAULT_DATA_PATH),
            model_path=Path(os.getenv("TOPIC_CLASSIFIER_MODEL") or DEFAULT_MODEL_PATH),
            min_categories=_env_int("TOPIC_CLASSIFIER_MIN_CATEGORIES", 2, minimum=1),
            curate=_env_bool("TOPIC_CLASSIFIER_CURATE", True),
        )
