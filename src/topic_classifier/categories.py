"""Category normalization.

Training data often spells categories inconsistently ("climate_change",
"CLIMATE-CHANGE", "Economic  justice"). ``normalize_category`` maps such
spellings onto the canonical ``Category`` members, trying progressively
looser comparisons and stopping at the first hit:

1. exact match,
2. case-insensitive match,
3. loose match: lowercase, then treat any run of ``_``, ``-`` or
   whitespace as a single space.

Anything else is rejected; there is no typo tolerance.
"""

from __future__ import annotations

import re

from .errors import InvalidCategoryError
from .models import Category

_SEPARATOR_RE = re.compile(r"[_\-\s]+")


def _loose_key(value: str) -> str:
    return _SEPARATOR_RE.sub(" ", value.lower()).strip()


_EXACT: dict[str, Category] = {c.value: c for c in Category}
_CASELESS: dict[str, Category] = {c.value.lower(): c for c in Category}
_LOOSE: dict[str, Category] = {_loose_key(c.value): c for c in Category}


def valid_categories() -> list[str]:
    """Canonical category labels in declaration order."""
    return [c.value for c in Category]


def normalize_category(raw: str | Category) -> Category:
    """Resolve a free-form category string to a canonical ``Category``.

    Args:
        raw: Category label as found in the source data. Surrounding
            whitespace is ignored.

    Returns:
        The matching ``Category``.

    Raises:
        InvalidCategoryError: If no canonical category matches.
    """
    if isinstance(raw, Category):
        return raw

    candidate = raw.strip()
    for table, key in (
        (_EXACT, candidate),
        (_CASELESS, candidate.lower()),
        (_LOOSE, _loose_key(candidate)),
    ):
        category = table.get(key)
        if category is not None:
            return category

    raise InvalidCategoryError(raw, valid_categories())
