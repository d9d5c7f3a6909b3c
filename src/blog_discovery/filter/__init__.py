"""Tag filter module."""

from blog_discovery.filter.tags import filter_by_tag, filter_by_tags, has_tag

__all__ = [
    "filter_by_tag",
    "filter_by_tags",
    "has_tag",
]
