"""Data models for the topic classifier."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .preprocessing import DEFAULT_STOP_WORDS, tokenize


class Category(str, Enum):
    """Topical categories a document can be assigned to."""

    CLIMATE_CHANGE = "Climate Change"
    ECONOMIC_JUSTICE = "Economic Justice"
    IMMIGRATION = "Immigration"
    REPRODUCTIVE_RIGHTS = "Reproductive Rights"
    LGBTQIA = "LGBTQIA+"

    def __str__(self) -> str:
        return self.value


@dataclass
class Model:
    """Accumulated Naive Bayes counts plus the active stop-word list.

    A model is owned by one caller and mutated in place by
    ``classifier.train`` and ``classifier.promote_multi_category_words``.
    ``category_counts`` keeps categories in the order they were first
    trained; classification walks that order and keeps the first maximum.

    Attributes:
        category_counts: Documents seen per category.
        word_counts: Token occurrence counts per category.
        total_documents: Sum of ``category_counts``.
        vocabulary_size: Distinct tokens across all categories.
        stop_words: Tokens excluded by the tokenizer. Only ever grows.
    """

    category_counts: dict[Category, int] = field(default_factory=dict)
    word_counts: dict[Category, dict[str, int]] = field(default_factory=dict)
    total_documents: int = 0
    vocabulary_size: int = 0
    stop_words: list[str] = field(default_factory=lambda: list(DEFAULT_STOP_WORDS))

    _stop_word_set: set[str] = field(
        init=False, repr=False, compare=False, default_factory=set
    )

    def __post_init__(self) -> None:
        self._stop_word_set = set(self.stop_words)

    @property
    def is_trained(self) -> bool:
        return self.total_documents > 0

    @property
    def categories(self) -> list[Category]:
        """Trained categories in first-seen order."""
        return list(self.category_counts)

    def is_stop_word(self, token: str) -> bool:
        return token in self._stop_word_set

    def add_stop_word(self, token: str) -> bool:
        """Append a stop word. Returns False if it was already present."""
        if token in self._stop_word_set:
            return False
        self.stop_words.append(token)
        self._stop_word_set.add(token)
        return True

    def tokenize(self, text: str) -> list[str]:
        """Tokenize ``text`` against the current stop-word list."""
        return tokenize(text, self._stop_word_set)

    def total_words(self, category: Category) -> int:
        """Total token occurrences recorded for ``category``."""
        return sum(self.word_counts.get(category, {}).values())

    def recompute_vocabulary_size(self) -> int:
        vocabulary: set[str] = set()
        for words in self.word_counts.values():
            vocabulary.update(words)
        self.vocabulary_size = len(vocabulary)
        return self.vocabulary_size

    def stats(self) -> dict:
        return {
            "category_counts": {c.value: n for c, n in self.category_counts.items()},
            "total_documents": self.total_documents,
            "vocabulary_size": self.vocabulary_size,
        }
