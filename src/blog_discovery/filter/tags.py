"""Tag filtering."""

from collections.abc import Iterable, Sequence

from blog_discovery.data import ArticleSummary


def has_tag(article: ArticleSummary, tag: str) -> bool:
    """Whether the article carries ``tag``, compared case-insensitively."""
    wanted = tag.casefold()
    return any(t.casefold() == wanted for t in article.tags)


def filter_by_tag(articles: Sequence[ArticleSummary], tag: str) -> list[ArticleSummary]:
    """Keep the articles carrying ``tag``, in input order."""
    return [a for a in articles if has_tag(a, tag)]


def filter_by_tags(
    articles: Sequence[ArticleSummary], tags: Iterable[str]
) -> list[ArticleSummary]:
    """Narrow by each tag in turn, so an article must carry every tag to remain.

    Args:
        articles: Articles to narrow.
        tags: Selected tags, applied in selection order.

    Returns:
        Articles carrying all of ``tags``. No tags means no narrowing.
    """
    result = list(articles)
    for tag in tags:
        result = filter_by_tag(result, tag)
    return result
