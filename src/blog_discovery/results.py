"""Presentation helpers for the results line and active-filter chips."""

from dataclasses import dataclass
from enum import StrEnum

from blog_discovery.data import FilterState, SortField, SortOrder, VisibleSet

_SORT_LABELS: dict[tuple[SortField, SortOrder], str] = {
    (SortField.DATE, SortOrder.DESC): "Newest First",
    (SortField.DATE, SortOrder.ASC): "Oldest First",
    (SortField.TITLE, SortOrder.ASC): "Title A-Z",
    (SortField.TITLE, SortOrder.DESC): "Title Z-A",
}


class FilterKind(StrEnum):
    """Kind of an active filter chip."""

    SEARCH = "search"
    TAG = "tag"
    SORT = "sort"


@dataclass(frozen=True)
class ActiveFilter:
    """One removable (or, for sort, resettable) filter shown to the visitor."""

    kind: FilterKind
    label: str
    value: str = ""


@dataclass(frozen=True)
class ResultsSummary:
    """Counts consumed by the rendering layer."""

    total_count: int
    visible_count: int
    has_active_filters: bool

    @classmethod
    def from_visible(cls, visible: VisibleSet) -> "ResultsSummary":
        return cls(
            total_count=visible.total_count,
            visible_count=visible.visible_count,
            has_active_filters=visible.has_active_filters,
        )

    @property
    def is_empty(self) -> bool:
        return self.visible_count == 0


def sort_label(sort_by: SortField, sort_order: SortOrder) -> str:
    """Human label for a sort choice, e.g. "Newest First"."""
    return _SORT_LABELS[(sort_by, sort_order)]


def _posts(count: int) -> str:
    return "post" if count == 1 else "posts"


def results_text(summary: ResultsSummary) -> str:
    """The "Showing N of M posts" line."""
    if summary.visible_count == 0:
        return "No posts found"
    if not summary.has_active_filters or summary.visible_count == summary.total_count:
        return f"Showing all {summary.total_count} {_posts(summary.total_count)}"
    return (
        f"Showing {summary.visible_count} of {summary.total_count} "
        f"{_posts(summary.total_count)}"
    )


def results_hint(summary: ResultsSummary) -> str | None:
    """Extra hint for an empty result caused by filters, otherwise None."""
    if summary.visible_count == 0 and summary.has_active_filters:
        return "Try removing some filters or adjusting your search terms"
    return None


def active_filters(state: FilterState) -> list[ActiveFilter]:
    """Chips for the current state: search first, then tags, then sort.

    Returns an empty list when nothing differs from the defaults.
    """
    chips: list[ActiveFilter] = []
    if state.has_search:
        chips.append(
            ActiveFilter(
                kind=FilterKind.SEARCH,
                label=f'Search: "{state.search_query}"',
                value=state.search_query,
            )
        )
    chips.extend(
        ActiveFilter(kind=FilterKind.TAG, label=f"Tag: {tag}", value=tag)
        for tag in state.selected_tags
    )
    if state.has_custom_sort:
        chips.append(
            ActiveFilter(
                kind=FilterKind.SORT,
                label=f"Sort: {sort_label(state.sort_by, state.sort_order)}",
            )
        )
    return chips
