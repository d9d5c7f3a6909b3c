"""Pipeline protocol for computing the visible article list."""

from collections.abc import Sequence
from typing import Protocol

from blog_discovery.data import ArticleSummary, FilterState, VisibleSet


class Pipeline(Protocol):
    """Interface for turning (full list, filter state) into a visible set."""

    def evaluate(
        self,
        articles: Sequence[ArticleSummary],
        state: FilterState,
    ) -> VisibleSet:
        """Compute the articles visible under ``state``.

        Args:
            articles: Full article list. Never mutated.
            state: Current filter state.

        Returns:
            Ordered subset of ``articles`` with counts.
        """
        ...
