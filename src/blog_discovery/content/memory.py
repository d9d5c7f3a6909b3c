"""In-memory article store."""

from collections.abc import Iterable

from blog_discovery.data import ArticleSummary


class InMemoryArticleStore:
    """Article store over a fixed list of summaries.

    Useful for embedding the engine in another application or for tests.
    Summaries are returned newest first, like the file-backed store.
    """

    def __init__(self, articles: Iterable[ArticleSummary]) -> None:
        self._articles = sorted(articles, key=lambda a: a.published_at, reverse=True)
        ids = [a.id for a in self._articles]
        if len(ids) != len(set(ids)):
            raise ValueError("Article ids must be unique")

    def list_articles(self) -> list[ArticleSummary]:
        return list(self._articles)
