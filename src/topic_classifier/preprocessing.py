"""Text preprocessing for the topic classifier.

Turns raw text into the word tokens the Naive Bayes model counts:

1. lowercase the text,
2. replace anything that is not a Unicode letter, digit or whitespace
   with a space (so accented and non-Latin scripts survive intact),
3. collapse whitespace and split,
4. drop stop words.

Tokenization depends on the stop-word set in force at call time. The
model's set can grow after training (see
``classifier.promote_multi_category_words``), so the same text may yield
different tokens before and after curation.
"""

from __future__ import annotations

import re
from collections.abc import Collection

# ---------------------------------------------------------------------------
# Built-in stop words
# ---------------------------------------------------------------------------

# Persisted models embed this list verbatim and curated words are appended
# after it. A few entries ("white house", "Trump", ...) can never match a
# lowercased single token; they stay to keep the list identical to the one
# older models were trained with.
DEFAULT_STOP_WORDS: tuple[str, ...] = (
    # Function words
    "the", "and", "is", "in", "to", "of", "a", "an", "as", "are", "was",
    "were", "been", "be", "have", "has", "had", "do", "does", "did", "will",
    "would", "could", "should", "may", "might", "must", "can", "this",
    "that", "these", "those", "i", "you", "he", "she", "it", "we", "they",
    "what", "which", "who", "when", "where", "why", "how", "all", "each",
    "every", "both", "few", "more", "most", "other", "some", "such", "no",
    "nor", "not", "only", "own", "same", "so", "than", "too", "very",
    "just", "now",
    # Dates and time
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
    "sunday", "january", "february", "march", "april", "june", "july",
    "august", "september", "october", "november", "december", "today",
    "yesterday", "tomorrow", "week", "month", "year", "time",
    # News boilerplate
    "said", "says", "according", "new", "state", "states", "country",
    "countries", "people", "public", "government", "official", "officials",
    "agency", "report", "reports", "law", "bill", "policy", "policies",
    "right", "rights", "administration", "president", "presidential",
    "trump", "biden", "white house", "court", "supreme", "justice",
    "department", "make", "makes", "made", "take", "takes", "took", "say",
    "also", "however", "like", "even", "still", "back", "one", "two",
    "first", "last", "many", "much", "less", "least", "really", "quite",
    "already", "yet", "almost", "actually", "probably", "especially",
    "particularly", "Trump", "Biden", "Lawmakers", "congress",
    "congressional", "republican", "democrat", "man", "woman", "women",
    # Places
    "india", "asia", "region", "asian", "pacific", "china", "indonesia",
    "japan", "vietnam", "europe", "uk", "france", "delhi", "california",
    "utah", "philadelphia", "maine", "louisiana", "boston", "kentucky",
    "afghanistan", "mexico",
    # Reporting and institutions
    "study", "research", "data", "analysis", "information", "federal",
    "security", "company", "companies", "business", "industry", "market",
    "executive", "director", "group", "called", "found", "show", "shows",
    "including", "need", "needs", "needed", "help", "helping", "provide",
    "provides", "give", "giving",
    # Quantities
    "percent", "million", "billion", "trillion", "increase", "higher",
    "estimated", "figure",
)

DEFAULT_STOP_WORD_SET: frozenset[str] = frozenset(DEFAULT_STOP_WORDS)


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------

# ``\w`` is Unicode-aware but admits the underscore, which is punctuation here.
_NON_WORD_RE = re.compile(r"[^\w\s]|_")
_WHITESPACE_RE = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Lowercase, strip punctuation and collapse whitespace.

    >>> clean_text("  Record-breaking HEAT, again!  ")
    'record breaking heat again'
    """
    text = _NON_WORD_RE.sub(" ", text.lower())
    return _WHITESPACE_RE.sub(" ", text).strip()


def tokenize(
    text: str,
    stop_words: Collection[str] = DEFAULT_STOP_WORD_SET,
) -> list[str]:
    """Split text into normalized word tokens, dropping stop words.

    Args:
        text: Raw document text.
        stop_words: Tokens to exclude. Pass a set for large collections;
            membership is checked once per token.

    Returns:
        Tokens in their original order, repeats included.
    """
    cleaned = clean_text(text)
    if not cleaned:
        return []
    return [tok for tok in cleaned.split(" ") if tok and tok not in stop_words]
