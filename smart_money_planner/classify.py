"""Keyword-based category classification.

Categories and subcategories carry keyword lists. A text scores the summed
length of every keyword it contains (case-insensitive), so one long keyword
outweighs a short one and several hits add up.

Quick Start:

    from smart_money_planner import match_category, suggest_categories
    from smart_money_planner import DEFAULT_CATEGORIES, DEFAULT_SUBCATEGORIES

    result = match_category("점심 김치찌개", DEFAULT_CATEGORIES, DEFAULT_SUBCATEGORIES)
    # => CategoryMatch(category=<food>, subcategory=<food-lunch>)

    suggest_categories("카페 라떼", DEFAULT_CATEGORIES)
    # => [<food>, <entertainment>]  (equal scores keep table order)

Learning from corrections:

    categories = learn_from_user_classification("스타벅스 아메리카노", "food", categories)
    # "food" now also matches "스타벅스" and "아메리카노"

Category tables are never modified in place. The learner returns a new list
with the one changed category replaced, or the very same list when nothing
was learned, so callers can persist only on change (``new is not old``).
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal
from typing import Any, TypeVar

from smart_money_planner.models import Category, CategoryMatch, CategoryStat, Subcategory

MAX_SUGGESTIONS = 3
MAX_LEARNED_KEYWORDS = 3

# Anything that is not a word character, whitespace or a Hangul syllable
_NON_TOKEN_CHARS = re.compile(r"[^\w\s가-힣]")

_Scored = TypeVar("_Scored", Category, Subcategory)


# =============================================================================
# Scoring
# =============================================================================


def keyword_score(text: str, keywords: Iterable[str]) -> int:
    """Score text against a keyword list.

    Every keyword contained in the text (case-insensitive) adds its own
    length to the score.

    Args:
        text: The text to score
        keywords: Keywords of one category or subcategory

    Returns:
        The summed length of all matching keywords (0 when none match)
    """
    lowered = text.lower()
    return sum(len(keyword) for keyword in keywords if keyword.lower() in lowered)


def _best_match(text: str, candidates: Iterable[_Scored]) -> _Scored | None:
    """Return the highest scoring candidate; ties keep the earliest one."""
    best = None
    best_score = 0
    for candidate in candidates:
        score = keyword_score(text, candidate.keywords)
        # Strictly greater: an equal score never replaces an earlier winner
        if score > best_score:
            best = candidate
            best_score = score
    return best


# =============================================================================
# Matching and suggestions
# =============================================================================


def match_category(
    text: str,
    categories: Sequence[Category],
    subcategories: Sequence[Subcategory] = (),
) -> CategoryMatch:
    """Find the best category, and the best subcategory under it, for a text.

    Subcategories are only considered when a category matched, and only the
    children of that category compete.

    Args:
        text: Free text (pasted message or transaction description)
        categories: Category table, in priority order for ties
        subcategories: Subcategory table

    Returns:
        A CategoryMatch; both fields are None when no keyword occurs in the text.
    """
    category = _best_match(text, categories)
    if category is None:
        return CategoryMatch()

    children = (sub for sub in subcategories if sub.parent_category_id == category.id)
    return CategoryMatch(category=category, subcategory=_best_match(text, children))


def suggest_categories(
    description: str,
    categories: Sequence[Category],
    limit: int = MAX_SUGGESTIONS,
) -> list[Category]:
    """Rank categories for a description being typed.

    Args:
        description: Current description text
        categories: Category table
        limit: Maximum number of suggestions

    Returns:
        Up to ``limit`` categories with a positive score, best first.
        Categories with equal scores keep their table order.
    """
    scored = [(keyword_score(description, c.keywords), c) for c in categories]
    ranked = sorted(
        ((score, c) for score, c in scored if score > 0),
        key=lambda item: item[0],
        reverse=True,
    )
    return [c for _, c in ranked[:limit]]


# =============================================================================
# Learning from user classification
# =============================================================================


def tokenize(description: str) -> list[str]:
    """Split a description into lowercase tokens longer than one character."""
    cleaned = _NON_TOKEN_CHARS.sub(" ", description.lower())
    return [token for token in cleaned.split() if len(token) > 1]


def _is_known(token: str, keywords: Iterable[str]) -> bool:
    # Either direction counts: "커피" covers "아아커피" and vice versa
    return any(token in kw.lower() or kw.lower() in token for kw in keywords)


def learn_from_user_classification(
    description: str,
    category_id: str,
    categories: list[Category],
    max_keywords: int = MAX_LEARNED_KEYWORDS,
) -> list[Category]:
    """Learn keywords from a description the user filed under a category.

    Tokens of the description that are not already covered by one of the
    category's keywords are appended to its keyword list, at most
    ``max_keywords`` per call.

    Args:
        description: Transaction description the user classified
        category_id: Id of the category the user picked
        categories: Current category table (not modified)
        max_keywords: Maximum number of keywords added per call

    Returns:
        A new list with the updated category in place of the old one, or
        ``categories`` itself when the id is unknown or nothing new was found.
    """
    category = next((c for c in categories if c.id == category_id), None)
    if category is None:
        return categories

    new_keywords: list[str] = []
    for token in tokenize(description):
        if token in new_keywords or _is_known(token, category.keywords):
            continue
        new_keywords.append(token)

    if not new_keywords:
        return categories

    updated = category.model_copy(
        update={"keywords": [*category.keywords, *new_keywords[:max_keywords]]}
    )
    return [updated if c.id == category_id else c for c in categories]


# =============================================================================
# Usage statistics
# =============================================================================


def _get(txn: Any, name: str) -> Any:
    if isinstance(txn, Mapping):
        return txn.get(name)
    return getattr(txn, name, None)


def get_category_stats(transactions: Iterable[Any]) -> list[CategoryStat]:
    """Count transactions and sum amounts per category.

    Accepts transaction models or plain mappings with ``category`` and
    ``amount`` keys. Unclassified transactions are grouped under ``""``.
    Results follow the order in which each category first appears.
    """
    stats: dict[str, CategoryStat] = {}
    for txn in transactions:
        category_id = _get(txn, "category") or ""
        stat = stats.setdefault(category_id, CategoryStat(category_id=category_id))
        stat.count += 1
        stat.total_amount += Decimal(str(_get(txn, "amount") or 0))
    return list(stats.values())
