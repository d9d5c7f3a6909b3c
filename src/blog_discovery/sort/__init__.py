"""Sorting module."""

from blog_discovery.sort.sorter import sort_articles, sort_key, title_collation_key

__all__ = [
    "sort_articles",
    "sort_key",
    "title_collation_key",
]
