"""Substring search ranker that puts title matches first.

An article matches when the query occurs, case-insensitively, in its title,
its excerpt, or any one of its tags. Ranking has a single dimension:

    title match  >  excerpt or tag match only

Within each group the input order is kept, so a date-sorted input stays
date-sorted inside each group.
"""

import logging
from collections.abc import Sequence

from blog_discovery.data import ArticleSummary

logger = logging.getLogger(__name__)


def _normalize(text: str) -> str:
    return text.casefold()


def matches_title(article: ArticleSummary, needle: str) -> bool:
    """Whether an already-normalized query occurs in the article title."""
    return needle in _normalize(article.title)


def matches_article(article: ArticleSummary, needle: str) -> bool:
    """Whether an already-normalized query occurs in title, excerpt or any tag."""
    return (
        matches_title(article, needle)
        or needle in _normalize(article.excerpt)
        or any(needle in _normalize(tag) for tag in article.tags)
    )


class TitleFirstRanker:
    """Rank articles by substring match, title matches before all others."""

    def rank(
        self,
        articles: Sequence[ArticleSummary],
        query: str,
    ) -> list[ArticleSummary]:
        """Filter articles to those matching ``query`` and rank them.

        Args:
            articles: Articles to search.
            query: Free-text query. Whitespace only decides blankness; a
                non-blank query is matched as given, padding included.

        Returns:
            The input unchanged when the query is blank, otherwise the matching
            articles with title matches first (stable within each group).
        """
        if not query.strip():
            return list(articles)
        needle = _normalize(query)

        title_hits: list[ArticleSummary] = []
        other_hits: list[ArticleSummary] = []
        for article in articles:
            if matches_title(article, needle):
                title_hits.append(article)
            elif matches_article(article, needle):
                other_hits.append(article)

        logger.debug(
            f"Search {query!r}: {len(title_hits)} title matches, {len(other_hits)} other matches"
        )
        return title_hits + other_hits
