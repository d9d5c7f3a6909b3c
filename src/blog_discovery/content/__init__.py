"""Article content store module."""

from blog_discovery.content.base import ArticleStore
from blog_discovery.content.markdown import (
    MarkdownArticleStore,
    parse_front_matter,
    summary_from_front_matter,
)
from blog_discovery.content.memory import InMemoryArticleStore

__all__ = [
    "ArticleStore",
    "InMemoryArticleStore",
    "MarkdownArticleStore",
    "parse_front_matter",
    "summary_from_front_matter",
]
