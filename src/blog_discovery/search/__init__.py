"""Search ranking module."""

from blog_discovery.search.base import SearchRanker
from blog_discovery.search.title_first import TitleFirstRanker, matches_article, matches_title

__all__ = [
    "SearchRanker",
    "TitleFirstRanker",
    "matches_article",
    "matches_title",
]
