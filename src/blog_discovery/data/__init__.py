"""Data models for blog discovery."""

from blog_discovery.data.models import (
    ArticleSummary,
    FilterState,
    SortField,
    SortOrder,
    TagCount,
    VisibleSet,
)

__all__ = [
    "ArticleSummary",
    "FilterState",
    "SortField",
    "SortOrder",
    "TagCount",
    "VisibleSet",
]
