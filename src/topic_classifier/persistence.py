"""JSON persistence for ``Model`` snapshots.

A saved model is a single JSON object::

    {
        "category_counts": {"Climate Change": 2, ...},
        "word_counts": {"Climate Change": {"ocean": 1, ...}, ...},
        "total_documents": 3,
        "vocabulary_size": 10,
        "stop_words": ["the", "and", ...]
    }

``stop_words`` is optional on load; snapshots written before it existed
fall back to the built-in list. Word keys and stop words are always
coerced to strings so numeric tokens such as ``"2024"`` survive a
round trip unchanged.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .errors import InvalidModelFormatError, ModelIOError
from .models import Category, Model
from .preprocessing import DEFAULT_STOP_WORDS

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: tuple[str, ...] = (
    "category_counts",
    "word_counts",
    "total_documents",
    "vocabulary_size",
)


def model_to_dict(model: Model) -> dict:
    """Serialize a model to plain JSON-compatible types."""
    return {
        "category_counts": {
            category.value: count for category, count in model.category_counts.items()
        },
        "word_counts": {
            category.value: {str(word): count for word, count in words.items()}
            for category, words in model.word_counts.items()
        },
        "total_documents": model.total_documents,
        "vocabulary_size": model.vocabulary_size,
        "stop_words": [str(word) for word in model.stop_words],
    }


def _category(label: str) -> Category:
    try:
        return Category(label)
    except ValueError:
        raise InvalidModelFormatError(
            f"Invalid model format: unknown category '{label}'"
        ) from None


def _count(value, what: str, minimum: int) -> int:
    count = int(value)
    if count < minimum:
        raise InvalidModelFormatError(
            f"Invalid model format: {what} must be at least {minimum}, got {count}"
        )
    return count


def model_from_dict(data: dict) -> Model:
    """Rebuild a model from the output of ``model_to_dict``.

    Raises:
        InvalidModelFormatError: If a required field is missing, a field
            has the wrong shape, or a count is out of range.
    """
    if not isinstance(data, dict):
        raise InvalidModelFormatError("Invalid model format: expected a JSON object")

    missing = [name for name in REQUIRED_FIELDS if data.get(name) is None]
    if missing:
        raise InvalidModelFormatError(
            f"Invalid model format: missing required fields: {', '.join(missing)}"
        )

    try:
        category_counts = {
            _category(label): _count(count, f"category count for '{label}'", 1)
            for label, count in data["category_counts"].items()
        }
        word_counts = {
            _category(label): {
                str(word): _count(count, f"count of '{word}' in '{label}'", 1)
                for word, count in words.items()
            }
            for label, words in data["word_counts"].items()
        }
        total_documents = _count(data["total_documents"], "total_documents", 0)
        vocabulary_size = _count(data["vocabulary_size"], "vocabulary_size", 0)

        raw_stop_words = data.get("stop_words")
        if raw_stop_words is None:
            stop_words = list(DEFAULT_STOP_WORDS)
        else:
            stop_words = [str(word) for word in raw_stop_words]
    except InvalidModelFormatError:
        raise
    except (AttributeError, TypeError, ValueError) as e:
        raise InvalidModelFormatError(f"Invalid model format: {e}") from e

    return Model(
        category_counts=category_counts,
        word_counts=word_counts,
        total_documents=total_documents,
        vocabulary_size=vocabulary_size,
        stop_words=stop_words,
    )


def save_model(model: Model, path: str | Path) -> None:
    """Write ``model`` to ``path`` as pretty-printed JSON.

    Parent directories are created as needed.

    Raises:
        ModelIOError: If the file cannot be written.
    """
    path = Path(path)
    payload = json.dumps(model_to_dict(model), indent=4, ensure_ascii=False)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload, encoding="utf-8")
    except OSError as e:
        raise ModelIOError(f"Failed to save model to file: {path} ({e})") from e
    logger.debug("Saved model with %d documents to %s", model.total_documents, path)


def load_model(path: str | Path) -> Model:
    """Load a model previously written by ``save_model``.

    Raises:
        ModelIOError: If the file is missing or unreadable.
        InvalidModelFormatError: If the file is not a valid model snapshot.
    """
    path = Path(path)
    if not path.is_file():
        raise ModelIOError(f"Model file not found: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ModelIOError(f"Failed to read model file: {path} ({e})") from e
    except UnicodeDecodeError as e:
        raise InvalidModelFormatError(f"Failed to decode model file: {path} ({e})") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidModelFormatError(f"Failed to decode model JSON: {e}") from e

    model = model_from_dict(data)
    logger.debug("Loaded model with %d documents from %s", model.total_documents, path)
    return model
