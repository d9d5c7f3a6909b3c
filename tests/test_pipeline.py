"""Tests for the filter pipeline."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from conftest import make_article

from blog_discovery.data import ArticleSummary, FilterState, SortField, SortOrder
from blog_discovery.pipeline import FilterPipeline
from blog_discovery.run_logger import RunLogger


@pytest.fixture
def pipeline() -> FilterPipeline:
    return FilterPipeline()


class TestScenarios:
    """The worked examples for the two-article list."""

    def test_default_state_is_date_desc(
        self, pipeline: FilterPipeline, scenario_articles: list[ArticleSummary]
    ) -> None:
        visible = pipeline.evaluate(scenario_articles, FilterState())
        assert visible.ids == ["b", "a"]
        assert visible.total_count == 2
        assert not visible.has_active_filters

    def test_search_next(
        self, pipeline: FilterPipeline, scenario_articles: list[ArticleSummary]
    ) -> None:
        visible = pipeline.evaluate(scenario_articles, FilterState(search_query="next"))
        assert visible.ids == ["a"]
        assert visible.has_active_filters

    def test_select_tag_web(
        self, pipeline: FilterPipeline, scenario_articles: list[ArticleSummary]
    ) -> None:
        visible = pipeline.evaluate(scenario_articles, FilterState(selected_tags=("Web",)))
        assert visible.ids == ["a"]

    def test_select_both_tags_is_empty(
        self, pipeline: FilterPipeline, scenario_articles: list[ArticleSummary]
    ) -> None:
        state = FilterState(selected_tags=("Web", "debugging"))
        visible = pipeline.evaluate(scenario_articles, state)
        assert visible.ids == []
        assert visible.visible_count == 0
        assert visible.total_count == 2


class TestFilterPipeline:
    """General pipeline behavior."""

    def test_identity_on_default_state(
        self, pipeline: FilterPipeline, articles: list[ArticleSummary]
    ) -> None:
        visible = pipeline.evaluate(articles, FilterState())
        assert set(visible.ids) == {a.id for a in articles}
        dates = [a.published_at for a in visible]
        assert dates == sorted(dates, reverse=True)

    @pytest.mark.parametrize(
        "state",
        [
            FilterState(),
            FilterState(search_query="next"),
            FilterState(search_query="zzz"),
            FilterState(selected_tags=("web",)),
            FilterState(selected_tags=("Web", "architecture")),
            FilterState(selected_tags=("unknown-tag",)),
            FilterState(search_query="a", sort_by=SortField.TITLE, sort_order=SortOrder.ASC),
        ],
    )
    def test_visible_is_subset(
        self, pipeline: FilterPipeline, articles: list[ArticleSummary], state: FilterState
    ) -> None:
        visible = pipeline.evaluate(articles, state)
        all_ids = {a.id for a in articles}
        assert set(visible.ids) <= all_ids
        assert len(visible.ids) == len(set(visible.ids))

    def test_and_semantics(self, pipeline: FilterPipeline) -> None:
        a = make_article("A", "A", "2025-01-01", tags=("t1", "t2"))
        b = make_article("B", "B", "2025-01-02", tags=("t1",))
        visible = pipeline.evaluate([a, b], FilterState(selected_tags=("t1", "t2")))
        assert visible.ids == ["A"]

    def test_sort_overrides_search_ranking(
        self, pipeline: FilterPipeline, articles: list[ArticleSummary]
    ) -> None:
        state = FilterState(search_query="next", sort_by=SortField.DATE, sort_order=SortOrder.ASC)
        visible = pipeline.evaluate(articles, state)
        # Title match "nextjs" no longer leads once date ordering applies
        assert visible.ids == ["rpg", "nextjs", "debugging"]

    def test_search_then_tags_then_sort(
        self, pipeline: FilterPipeline, articles: list[ArticleSummary]
    ) -> None:
        state = FilterState(
            search_query="next",
            selected_tags=("Web",),
            sort_by=SortField.TITLE,
            sort_order=SortOrder.ASC,
        )
        visible = pipeline.evaluate(articles, state)
        assert visible.ids == ["rpg", "nextjs"]

    def test_does_not_mutate_input(
        self, pipeline: FilterPipeline, articles: list[ArticleSummary]
    ) -> None:
        before = list(articles)
        pipeline.evaluate(articles, FilterState(search_query="web", sort_by=SortField.TITLE))
        assert articles == before

    def test_uses_injected_ranker(self, articles: list[ArticleSummary]) -> None:
        ranker = MagicMock()
        ranker.rank = MagicMock(return_value=articles[:1])
        pipeline = FilterPipeline(ranker=ranker)
        visible = pipeline.evaluate(articles, FilterState(search_query="q"))
        ranker.rank.assert_called_once_with(articles, "q")
        assert visible.ids == [articles[0].id]

    def test_empty_article_list(self, pipeline: FilterPipeline) -> None:
        visible = pipeline.evaluate([], FilterState(search_query="x", selected_tags=("y",)))
        assert visible.ids == []
        assert visible.total_count == 0

    def test_writes_run_log(self, tmp_path: Path, articles: list[ArticleSummary]) -> None:
        run_logger = RunLogger(log_dir=tmp_path, enabled=True)
        pipeline = FilterPipeline(run_logger=run_logger)
        pipeline.evaluate(articles, FilterState(search_query="next", selected_tags=("Web",)))

        path = run_logger.last_log_path
        assert path is not None
        assert path.exists()
        text = path.read_text()
        assert '"search"' in text
        assert '"tag_filter"' in text
        assert '"sort"' in text
