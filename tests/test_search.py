"""Tests for the title-first search ranker."""

import pytest
from conftest import make_article

from blog_discovery.data import ArticleSummary
from blog_discovery.search import TitleFirstRanker, matches_article


@pytest.fixture
def ranker() -> TitleFirstRanker:
    return TitleFirstRanker()


def _ids(articles: list[ArticleSummary]) -> list[str]:
    return [a.id for a in articles]


@pytest.mark.parametrize("query", ["", "   ", "\t\n"])
def test_blank_query_is_identity(
    ranker: TitleFirstRanker, articles: list[ArticleSummary], query: str
) -> None:
    result = ranker.rank(articles, query)
    assert result == articles
    assert result is not articles


def test_title_match_case_insensitive(
    ranker: TitleFirstRanker, scenario_articles: list[ArticleSummary]
) -> None:
    assert _ids(ranker.rank(scenario_articles, "next")) == ["a"]
    assert _ids(ranker.rank(scenario_articles, "NEXT")) == ["a"]


def test_matches_excerpt(ranker: TitleFirstRanker, articles: list[ArticleSummary]) -> None:
    assert _ids(ranker.rank(articles, "idempotency")) == ["payments"]


def test_matches_tag_substring(ranker: TitleFirstRanker, articles: list[ArticleSummary]) -> None:
    assert _ids(ranker.rank(articles, "archi")) == ["survey", "payments"]


def test_no_match(ranker: TitleFirstRanker, articles: list[ArticleSummary]) -> None:
    assert ranker.rank(articles, "kubernetes") == []


def test_title_matches_rank_first(
    ranker: TitleFirstRanker, articles: list[ArticleSummary]
) -> None:
    # "next" is in the nextjs title, the debugging excerpt and the rpg excerpt
    result = ranker.rank(articles, "next")
    assert _ids(result) == ["nextjs", "debugging", "rpg"]


def test_title_precedence_regardless_of_input_order(ranker: TitleFirstRanker) -> None:
    x = make_article("x", "Rust async", "2025-01-01", excerpt="runtime notes")
    y = make_article("y", "Runtime notes", "2025-02-01", excerpt="about rust async")
    assert _ids(ranker.rank([y, x], "rust")) == ["x", "y"]
    assert _ids(ranker.rank([x, y], "rust")) == ["x", "y"]


def test_stable_within_groups(ranker: TitleFirstRanker) -> None:
    articles = [
        make_article("1", "Other", "2025-01-04", excerpt="python"),
        make_article("2", "Python one", "2025-01-03"),
        make_article("3", "Other two", "2025-01-02", tags=("python",)),
        make_article("4", "Python two", "2025-01-01"),
    ]
    assert _ids(ranker.rank(articles, "python")) == ["2", "4", "1", "3"]


def test_padded_query_matched_as_given(ranker: TitleFirstRanker) -> None:
    articles = [
        make_article("1", "Next.js patterns", "2025-01-02"),
        make_article("2", "What comes next in CSS", "2025-01-01"),
    ]
    assert _ids(ranker.rank(articles, " next ")) == ["2"]
    assert _ids(ranker.rank(articles, "next")) == ["1", "2"]


def test_does_not_mutate_input(ranker: TitleFirstRanker, articles: list[ArticleSummary]) -> None:
    before = list(articles)
    ranker.rank(articles, "web")
    assert articles == before


def test_matches_article_checks_each_tag() -> None:
    article = make_article("1", "Title", "2025-01-01", tags=("alpha", "beta"))
    assert matches_article(article, "bet")
    assert not matches_article(article, "gamma")
