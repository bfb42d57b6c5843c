"""Multinomial Naive Bayes over raw word counts.

The operations here all take an explicit ``Model`` and mutate or read it:

- ``train`` adds one labelled document to the counts,
- ``promote_multi_category_words`` turns words shared between categories
  into stop words,
- ``log_scores`` / ``classify`` / ``classify_detailed`` run inference.

Scoring uses Laplace (add-one) smoothing and accumulates natural logs so
long documents do not underflow::

    score(c) = log(N_c / N)
             + sum_t log((count(t, c) + 1) / (words(c) + |V|))

``TopicClassifier`` wraps a model with a small object API and file
persistence for callers that prefer that style.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path

from .categories import normalize_category
from .errors import InternalInconsistencyError, ModelNotTrainedError
from .models import Category, Model
from .persistence import load_model, save_model

logger = logging.getLogger(__name__)

_CANONICAL: frozenset[Category] = frozenset(Category)


# ---------------------------------------------------------------------------
# Training
# ---------------------------------------------------------------------------

def train(model: Model, text: str, raw_category: str | Category) -> Category:
    """Add one labelled document to ``model``.

    Each call represents one document, so training the same text twice
    doubles its counts.

    Args:
        model: Model to update in place.
        text: Document text. An empty text still counts as a document.
        raw_category: Category label in any spelling accepted by
            ``normalize_category``.

    Returns:
        The canonical category the document was counted under.

    Raises:
        InvalidCategoryError: If the label is not recognised. The model
            is left untouched.
    """
    category = normalize_category(raw_category)
    tokens = model.tokenize(text)

    if category not in model.category_counts:
        model.category_counts[category] = 0
        model.word_counts[category] = {}

    model.category_counts[category] += 1
    model.total_documents += 1

    words = model.word_counts[category]
    for token in tokens:
        words[token] = words.get(token, 0) + 1

    model.recompute_vocabulary_size()
    logger.debug(
        "Trained document %d as %s (%d tokens, vocabulary %d)",
        model.total_documents, category.value, len(tokens), model.vocabulary_size,
    )
    return category


# ---------------------------------------------------------------------------
# Stop-word curation
# ---------------------------------------------------------------------------

def promote_multi_category_words(model: Model, min_categories: int = 2) -> list[str]:
    """Add words that occur in several categories to the stop-word list.

    A word present in many categories carries little signal about which
    one a document belongs to. Presence is what counts, not frequency.

    Only future tokenization is affected: existing ``word_counts`` and
    ``vocabulary_size`` keep the promoted words. Run this once, after
    the full training pass.

    Args:
        model: Trained model to curate in place.
        min_categories: Number of categories a word must appear in.

    Returns:
        The newly added stop words, in first-seen order.

    Raises:
        ModelNotTrainedError: If the model has no training documents.
        ValueError: If ``min_categories`` is below 1.
    """
    if not model.is_trained:
        raise ModelNotTrainedError(
            "Classifier has not been trained yet. Cannot analyze word distribution."
        )
    if min_categories < 1:
        raise ValueError(f"min_categories must be at least 1, got {min_categories}")

    category_presence: dict[str, int] = {}
    for words in model.word_counts.values():
        for word in words:
            category_presence[word] = category_presence.get(word, 0) + 1

    added: list[str] = []
    for word, n_categories in category_presence.items():
        if n_categories >= min_categories and model.add_stop_word(str(word)):
            added.append(str(word))

    logger.info("Promoted %d multi-category words to stop words", len(added))
    return added


# ---------------------------------------------------------------------------
# Inference
# ---------------------------------------------------------------------------

@dataclass
class ClassificationResult:
    """Outcome of classifying one document.

    Attributes:
        category: Predicted category.
        log_scores: Unnormalized log posterior per trained category, in
            training order.
        tokens: Tokens the document was scored on.
    """

    category: Category
    log_scores: dict[Category, float]
    tokens: list[str]

    @property
    def probabilities(self) -> dict[Category, float]:
        """Posterior probabilities, normalized with log-sum-exp."""
        best = max(self.log_scores.values())
        exp_scores = {c: math.exp(s - best) for c, s in self.log_scores.items()}
        total = sum(exp_scores.values())
        return {c: s / total for c, s in exp_scores.items()}

    @property
    def confidence(self) -> float:
        return self.probabilities[self.category]

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "confidence": round(self.confidence, 4),
            "log_scores": {c.value: s for c, s in self.log_scores.items()},
            "probabilities": {
                c.value: round(p, 4) for c, p in sorted(
                    self.probabilities.items(),
                    key=lambda x: x[1],
                    reverse=True,
                )
            },
        }


def _require_trained(model: Model) -> None:
    if not model.is_trained:
        raise ModelNotTrainedError("Classifier has not been trained yet.")


def _score_tokens(model: Model, tokens: list[str]) -> dict[Category, float]:
    scores: dict[Category, float] = {}
    for category, count in model.category_counts.items():
        score = math.log(count / model.total_documents)
        words = model.word_counts.get(category, {})
        denominator = model.total_words(category) + model.vocabulary_size
        if denominator == 0:
            # Only empty documents trained so far: no word evidence anywhere.
            scores[category] = score
            continue
        for token in tokens:
            score += math.log((words.get(token, 0) + 1) / denominator)
        scores[category] = score
    return scores


def log_scores(model: Model, text: str) -> dict[Category, float]:
    """Log posterior score of ``text`` for every trained category.

    Raises:
        ModelNotTrainedError: If the model has no training documents.
    """
    _require_trained(model)
    return _score_tokens(model, model.tokenize(text))


def _select_best(scores: dict[Category, float]) -> Category:
    # Strict comparison keeps the earliest category on exact ties.
    best: Category | None = None
    best_score = -math.inf
    for category, score in scores.items():
        if best is None or score > best_score:
            best, best_score = category, score

    if best not in _CANONICAL:
        raise InternalInconsistencyError(
            f"Internal error: predicted category '{best}' is not valid."
        )
    return Category(best)


def classify_detailed(model: Model, text: str) -> ClassificationResult:
    """Classify ``text`` and return scores alongside the prediction.

    Raises:
        ModelNotTrainedError: If the model has no training documents.
        InternalInconsistencyError: If the model holds a category outside
            the canonical set.
    """
    _require_trained(model)
    tokens = model.tokenize(text)
    scores = _score_tokens(model, tokens)
    return ClassificationResult(
        category=_select_best(scores),
        log_scores=scores,
        tokens=tokens,
    )


def classify(model: Model, text: str) -> Category:
    """Predict the most probable category for ``text``.

    Raises:
        ModelNotTrainedError: If the model has no training documents.
        InternalInconsistencyError: If the model holds a category outside
            the canonical set.
    """
    return classify_detailed(model, text).category


# ---------------------------------------------------------------------------
# Object API
# ---------------------------------------------------------------------------

class TopicClassifier:
    """Naive Bayes topic classifier bound to a single ``Model``.

    Example::

        clf = TopicClassifier()
        clf.train("ocean warming record temperatures", "climate_change")
        clf.train("wage inequality rising poverty", "Economic Justice")
        clf.promote_multi_category_words()
        clf.save("naive_bayes_model.json")

        loaded = TopicClassifier.load("naive_bayes_model.json")
        loaded.classify("glacier melt")  # Category.CLIMATE_CHANGE

    Args:
        model: Existing model to wrap. A fresh empty model is created
            when omitted.
    """

    def __init__(self, model: Model | None = None) -> None:
        self.model = model if model is not None else Model()

    @property
    def is_trained(self) -> bool:
        return self.model.is_trained

    def train(self, text: str, category: str | Category) -> Category:
        return train(self.model, text, category)

    def promote_multi_category_words(self, min_categories: int = 2) -> list[str]:
        return promote_multi_category_words(self.model, min_categories)

    def classify(self, text: str) -> Category:
        return classify(self.model, text)

    def classify_detailed(self, text: str) -> ClassificationResult:
        return classify_detailed(self.model, text)

    def stats(self) -> dict:
        return self.model.stats()

    def save(self, path: str | Path) -> None:
        save_model(self.model, path)

    @classmethod
    def load(cls, path: str | Path) -> "TopicClassifier":
        return cls(load_model(path))
