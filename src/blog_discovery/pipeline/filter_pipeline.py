"""Search, tag filter and sort composed into one evaluation."""

import logging
import time
from collections.abc import Sequence

from blog_discovery.data import ArticleSummary, FilterState, VisibleSet
from blog_discovery.filter import filter_by_tag
from blog_discovery.run_logger import RunLogger
from blog_discovery.search import SearchRanker, TitleFirstRanker
from blog_discovery.sort import sort_articles

logger = logging.getLogger(__name__)


class FilterPipeline:
    """Single source of truth for which articles are visible, and in what order.

    Flow:
    1. The search ranker narrows and reorders by the search query
    2. Each selected tag narrows the result further, in selection order (AND)
    3. The sorter sets the final order

    Every stage returns a new list; the input is never mutated.

    Args:
        ranker: Search ranker. Defaults to ``TitleFirstRanker``.
        run_logger: Optional RunLogger for per-stage records.
    """

    def __init__(
        self,
        ranker: SearchRanker | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._ranker = ranker if ranker is not None else TitleFirstRanker()
        self._run_logger = run_logger

    def evaluate(
        self,
        articles: Sequence[ArticleSummary],
        state: FilterState,
    ) -> VisibleSet:
        """Compute the visible set for ``state``.

        Args:
            articles: Full article list.
            state: Current filter state.

        Returns:
            VisibleSet whose articles are a subset of ``articles``.
        """
        if self._run_logger:
            self._run_logger.start_run(state, len(articles))

        # Step 1: Search
        t0 = time.monotonic()
        result = self._ranker.rank(articles, state.search_query)
        self._log_stage(
            "search",
            type(self._ranker).__name__,
            len(articles),
            len(result),
            t0,
            {"query": state.search_query},
        )

        # Step 2: Tag filters, one pass per selected tag
        for tag in state.selected_tags:
            t0 = time.monotonic()
            before = len(result)
            result = filter_by_tag(result, tag)
            self._log_stage("tag_filter", "filter_by_tag", before, len(result), t0, {"tag": tag})

        # Step 3: Sort
        t0 = time.monotonic()
        result = sort_articles(result, state.sort_by, state.sort_order)
        self._log_stage(
            "sort",
            "sort_articles",
            len(result),
            len(result),
            t0,
            {"sort_by": state.sort_by, "sort_order": state.sort_order},
        )

        if self._run_logger:
            self._run_logger.finish_run(result)

        logger.debug(f"Visible {len(result)} of {len(articles)} articles")
        return VisibleSet(
            articles=tuple(result),
            total_count=len(articles),
            has_active_filters=state.has_active_filters,
        )

    def _log_stage(
        self,
        stage: str,
        component: str,
        input_count: int,
        output_count: int,
        started: float,
        detail: dict[str, object],
    ) -> None:
        if self._run_logger:
            self._run_logger.log_stage(
                stage=stage,
                component=component,
                input_count=input_count,
                output_count=output_count,
                duration_seconds=time.monotonic() - started,
                detail=detail,
            )
