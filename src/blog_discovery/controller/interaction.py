"""Stateful orchestrator for search, tag and sort interactions.

States:

    IDLE            no search commit pending
    PENDING_SEARCH  a debounce timer is armed for the latest search input

``set_search_query`` stores the raw input at once, replaces any armed timer
and moves to PENDING_SEARCH. When the timer fires the trimmed input is
committed, the URL pushed and the visible set recomputed. Tag, sort and
clear operations apply synchronously. ``handle_url_changed`` decodes the
new URL without pushing it back.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import replace
from enum import StrEnum

from blog_discovery.codec import StateCodec
from blog_discovery.controller.base import Navigator
from blog_discovery.controller.scheduler import Scheduler, TimerHandle
from blog_discovery.data import (
    ArticleSummary,
    FilterState,
    SortField,
    SortOrder,
    TagCount,
    VisibleSet,
)
from blog_discovery.pipeline import FilterPipeline, Pipeline
from blog_discovery.results import ActiveFilter, FilterKind, ResultsSummary, active_filters
from blog_discovery.tags import build_tag_index

logger = logging.getLogger(__name__)

# Search debounce delay in seconds
SEARCH_DEBOUNCE_DELAY = 0.3

VisibleListener = Callable[[VisibleSet], None]


class ControllerState(StrEnum):
    """Debounce state of the controller."""

    IDLE = "idle"
    PENDING_SEARCH = "pending_search"


class InteractionController:
    """Owns the filter state and keeps URL and visible set in step with it.

    Args:
        articles: Full article list for this page load.
        navigator: Navigation primitive receiving each new URL.
        scheduler: Source of cancellable timers for search debouncing.
        codec: URL codec. Defaults to ``StateCodec()``.
        pipeline: Visible-set pipeline. Defaults to ``FilterPipeline()``.
        debounce_seconds: Quiet period before a search input is committed.
        initial_url: URL or query string the page was loaded with.
    """

    def __init__(
        self,
        articles: Sequence[ArticleSummary],
        *,
        navigator: Navigator,
        scheduler: Scheduler,
        codec: StateCodec | None = None,
        pipeline: Pipeline | None = None,
        debounce_seconds: float = SEARCH_DEBOUNCE_DELAY,
        initial_url: str = "",
    ) -> None:
        self._articles = tuple(articles)
        self._navigator = navigator
        self._scheduler = scheduler
        self._codec = codec if codec is not None else StateCodec()
        self._pipeline = pipeline if pipeline is not None else FilterPipeline()
        self._debounce_seconds = debounce_seconds
        self._listeners: list[VisibleListener] = []
        self._search_timer: TimerHandle | None = None

        self._tag_index = build_tag_index(self._articles)
        self._state = self._codec.decode(initial_url)
        self._search_input = self._state.search_query
        self._visible = self._pipeline.evaluate(self._articles, self._state)

    # -- Read-only views --

    @property
    def state(self) -> FilterState:
        """Committed filter state."""
        return self._state

    @property
    def search_input(self) -> str:
        """Latest raw search input, committed or not."""
        return self._search_input

    @property
    def status(self) -> ControllerState:
        if self._search_timer is not None:
            return ControllerState.PENDING_SEARCH
        return ControllerState.IDLE

    @property
    def visible(self) -> VisibleSet:
        return self._visible

    @property
    def tag_index(self) -> list[TagCount]:
        """Tag counts over the full article list, computed once."""
        return list(self._tag_index)

    @property
    def summary(self) -> ResultsSummary:
        return ResultsSummary.from_visible(self._visible)

    @property
    def active_filters(self) -> list[ActiveFilter]:
        return active_filters(self._state)

    @property
    def url(self) -> str:
        """URL encoding the committed state."""
        return self._codec.to_url(self._state)

    def subscribe(self, listener: VisibleListener) -> Callable[[], None]:
        """Register a callback receiving every recomputed visible set.

        Returns:
            A callable that unregisters the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- Search (debounced) --

    def set_search_query(self, raw: str) -> None:
        """Record search input and (re)arm the debounce timer."""
        self._search_input = raw
        self._cancel_search_timer()
        self._search_timer = self._scheduler.call_later(
            self._debounce_seconds,
            self._debounced_search,
        )

    def flush_search(self) -> None:
        """Commit a pending search input immediately. No-op when idle."""
        if self._search_timer is None:
            return
        self._cancel_search_timer()
        self._commit_search()

    def clear_search(self) -> None:
        """Drop the search query, including any pending input."""
        self._cancel_search_timer()
        self._search_input = ""
        self._commit_search()

    def _debounced_search(self) -> None:
        """Apply search input after the debounce delay."""
        self._search_timer = None
        self._commit_search()

    def _commit_search(self) -> None:
        query = self._search_input.strip()
        logger.debug(f"Committing search {query!r}")
        self._apply(replace(self._state, search_query=query))

    def _cancel_search_timer(self) -> None:
        # Atomic swap: clear before cancelling
        old_timer = self._search_timer
        self._search_timer = None
        if old_timer is not None:
            old_timer.cancel()

    # -- Synchronous operations --

    def toggle_tag(self, tag: str) -> None:
        """Select ``tag`` if unselected, otherwise deselect it."""
        if not tag.strip():
            return
        selected = self._state.selected_tags
        if tag in selected:
            tags = tuple(t for t in selected if t != tag)
        else:
            tags = (*selected, tag)
        self._apply(replace(self._state, selected_tags=tags))

    def remove_tag(self, tag: str) -> None:
        """Deselect ``tag``. No-op when it is not selected."""
        if tag not in self._state.selected_tags:
            return
        tags = tuple(t for t in self._state.selected_tags if t != tag)
        self._apply(replace(self._state, selected_tags=tags))

    def change_sort(self, sort_by: SortField, sort_order: SortOrder) -> None:
        self._apply(replace(self._state, sort_by=sort_by, sort_order=sort_order))

    def remove_filter(self, active: ActiveFilter) -> None:
        """Remove one active-filter chip; the sort chip resets to the default sort."""
        if active.kind == FilterKind.SEARCH:
            self.clear_search()
        elif active.kind == FilterKind.TAG:
            self.remove_tag(active.value)
        elif active.kind == FilterKind.SORT:
            self.change_sort(SortField.DATE, SortOrder.DESC)
        else:
            msg = f"Unknown filter kind: {active.kind!r}"
            raise ValueError(msg)

    def clear_all(self) -> None:
        """Reset every filter and navigate to the bare list URL."""
        self._cancel_search_timer()
        self._search_input = ""
        self._state = FilterState()
        self._navigator.set_url(self._codec.bare_url, preserve_scroll=True)
        self._recompute()

    # -- External events --

    def handle_url_changed(self, url: str) -> None:
        """Adopt state from a URL changed outside the controller.

        Any pending search input is discarded; the URL is not pushed back.
        """
        self._cancel_search_timer()
        self._state = self._codec.decode(url)
        self._search_input = self._state.search_query
        logger.debug(f"URL changed to {url!r}")
        self._recompute()

    # -- Internals --

    def _apply(self, state: FilterState) -> None:
        self._state = state
        self._navigator.set_url(self._codec.to_url(state), preserve_scroll=True)
        self._recompute()

    def _recompute(self) -> None:
        self._visible = self._pipeline.evaluate(self._articles, self._state)
        for listener in list(self._listeners):
            listener(self._visible)
