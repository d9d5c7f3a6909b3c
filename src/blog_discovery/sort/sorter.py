"""Ordering of article lists by date or title.

Each ``SortField`` has exactly one key function. Descending order inverts the
comparison rather than reversing the result, so articles with equal keys keep
their input order in both directions.
"""

import unicodedata
from collections.abc import Callable, Sequence
from datetime import datetime

from blog_discovery.data import ArticleSummary, SortField, SortOrder


def title_collation_key(title: str) -> tuple[str, str]:
    """Collation key approximating a locale-aware title comparison.

    Accents and case are ignored first; remaining ties put lowercase before
    uppercase.
    """
    decomposed = unicodedata.normalize("NFKD", title)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), title.swapcase())


def _date_key(article: ArticleSummary) -> datetime:
    return article.published_at


def _title_key(article: ArticleSummary) -> tuple[str, str]:
    return title_collation_key(article.title)


def sort_key(sort_by: SortField) -> Callable[[ArticleSummary], object]:
    """Return the key function for a sort field.

    Uses explicit matching rather than attribute lookup.
    """
    if sort_by == SortField.DATE:
        return _date_key
    if sort_by == SortField.TITLE:
        return _title_key
    msg = f"Unknown sort field: {sort_by!r}"
    raise ValueError(msg)


def sort_articles(
    articles: Sequence[ArticleSummary],
    sort_by: SortField,
    sort_order: SortOrder,
) -> list[ArticleSummary]:
    """Return a new list ordered by ``sort_by`` in ``sort_order``.

    Args:
        articles: Articles to order.
        sort_by: Date (oldest first when ascending) or title (A to Z when
            ascending).
        sort_order: Ascending or descending.

    Returns:
        Sorted copy of ``articles``; ties keep their input order.
    """
    return sorted(articles, key=sort_key(sort_by), reverse=sort_order == SortOrder.DESC)
