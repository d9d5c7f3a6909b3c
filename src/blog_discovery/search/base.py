"""Protocol for search ranking."""

from collections.abc import Sequence
from typing import Protocol

from blog_discovery.data import ArticleSummary


class SearchRanker(Protocol):
    """Interface for matching a free-text query against article summaries."""

    def rank(
        self,
        articles: Sequence[ArticleSummary],
        query: str,
    ) -> list[ArticleSummary]:
        """Select the articles matching a query, most relevant first.

        Args:
            articles: Articles to search.
            query: Free-text query. A blank query matches everything.

        Returns:
            Matching articles in ranked order.
        """
        ...
