"""Source of article summaries consumed by the discovery engine."""

from typing import Protocol

from blog_discovery.data import ArticleSummary


class ArticleStore(Protocol):
    """Interface for the read-only source of article summaries."""

    def list_articles(self) -> list[ArticleSummary]: ...
