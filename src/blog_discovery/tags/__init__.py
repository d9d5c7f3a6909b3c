"""Tag index module."""

from blog_discovery.tags.index import build_tag_index

__all__ = [
    "build_tag_index",
]
