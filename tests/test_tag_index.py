"""Tests for the tag index."""

from conftest import make_article

from blog_discovery.data import ArticleSummary, TagCount
from blog_discovery.tags import build_tag_index


def test_counts_sorted_by_count_then_name(articles: list[ArticleSummary]) -> None:
    index = build_tag_index(articles)
    assert index == [
        TagCount(tag="Web", count=3),
        TagCount(tag="architecture", count=2),
        TagCount(tag="React", count=1),
        TagCount(tag="backend", count=1),
        TagCount(tag="debugging", count=1),
        TagCount(tag="games", count=1),
    ]


def test_ties_use_ordinal_case_sensitive_order() -> None:
    articles = [
        make_article("1", "One", "2025-01-01", tags=("beta", "Zeta", "alpha")),
    ]
    assert [t.tag for t in build_tag_index(articles)] == ["Zeta", "alpha", "beta"]


def test_case_variants_counted_separately() -> None:
    articles = [
        make_article("1", "One", "2025-01-01", tags=("Web",)),
        make_article("2", "Two", "2025-01-02", tags=("web",)),
    ]
    assert build_tag_index(articles) == [TagCount("Web", 1), TagCount("web", 1)]


def test_duplicate_tags_count_once_per_article() -> None:
    articles = [make_article("1", "One", "2025-01-01", tags=("Web", "Web"))]
    assert build_tag_index(articles) == [TagCount("Web", 1)]


def test_empty_input() -> None:
    assert build_tag_index([]) == []


def test_deterministic(articles: list[ArticleSummary]) -> None:
    assert build_tag_index(articles) == build_tag_index(list(articles))
