"""Core data models for blog discovery."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from enum import StrEnum


class SortField(StrEnum):
    """Field a list of articles can be ordered by."""

    DATE = "date"
    TITLE = "title"


class SortOrder(StrEnum):
    """Direction of an ordering."""

    ASC = "asc"
    DESC = "desc"


def _to_instant(value: datetime | date | str) -> datetime:
    """Coerce a publication date into a timezone-aware instant.

    Naive values are read as UTC so every article compares on one timeline.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    msg = f"Unsupported publication date: {value!r}"
    raise ValueError(msg)


@dataclass(frozen=True)
class ArticleSummary:
    """Metadata record for one article, without its body.

    ``tags`` is normalized on construction: blank entries are dropped and
    duplicates collapse to their first occurrence.
    """

    id: str
    title: str
    published_at: datetime
    excerpt: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Article id must be non-empty")
        if not self.title:
            raise ValueError(f"Article {self.id!r} has an empty title")
        object.__setattr__(self, "published_at", _to_instant(self.published_at))
        object.__setattr__(self, "excerpt", self.excerpt or "")
        object.__setattr__(self, "tags", tuple(dict.fromkeys(t for t in self.tags if t)))


@dataclass(frozen=True)
class TagCount:
    """A distinct tag and the number of articles carrying it."""

    tag: str
    count: int


@dataclass(frozen=True)
class FilterState:
    """Search, tag and sort selection for the article list."""

    search_query: str = ""
    selected_tags: tuple[str, ...] = ()
    sort_by: SortField = SortField.DATE
    sort_order: SortOrder = SortOrder.DESC

    @property
    def has_search(self) -> bool:
        return bool(self.search_query.strip())

    @property
    def has_custom_sort(self) -> bool:
        return self.sort_by != SortField.DATE or self.sort_order != SortOrder.DESC

    @property
    def has_active_filters(self) -> bool:
        return self.has_search or bool(self.selected_tags) or self.has_custom_sort


@dataclass(frozen=True)
class VisibleSet:
    """Ordered articles currently visible, with counts for the results line."""

    articles: tuple[ArticleSummary, ...]
    total_count: int
    has_active_filters: bool = False

    @property
    def visible_count(self) -> int:
        return len(self.articles)

    @property
    def ids(self) -> list[str]:
        return [a.id for a in self.articles]

    def __iter__(self):
        return iter(self.articles)

    def __len__(self) -> int:
        return len(self.articles)
