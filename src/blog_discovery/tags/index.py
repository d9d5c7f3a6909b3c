"""Tag index: distinct tags and how many articles carry each."""

from collections import Counter
from collections.abc import Iterable

from blog_discovery.data import ArticleSummary, TagCount


def build_tag_index(articles: Iterable[ArticleSummary]) -> list[TagCount]:
    """Count tag usage across articles.

    Tags are counted as written (case-sensitive), once per article.

    Args:
        articles: Full article list.

    Returns:
        Tag counts ordered by count descending, then tag name ascending
        by code point.
    """
    counts: Counter[str] = Counter()
    for article in articles:
        counts.update(article.tags)

    return [
        TagCount(tag=tag, count=count)
        for tag, count in sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    ]
