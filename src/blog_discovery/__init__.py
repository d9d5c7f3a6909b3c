"""Blog Discovery: search, tag filtering and sorting for an article list, shareable by URL."""

from blog_discovery.codec import StateCodec
from blog_discovery.config import DiscoveryConfig, create_from_config, load_config
from blog_discovery.content import ArticleStore, InMemoryArticleStore, MarkdownArticleStore
from blog_discovery.controller import (
    AsyncioScheduler,
    ControllerState,
    InteractionController,
    LoggingNavigator,
    Navigator,
    Scheduler,
)
from blog_discovery.data import (
    ArticleSummary,
    FilterState,
    SortField,
    SortOrder,
    TagCount,
    VisibleSet,
)
from blog_discovery.filter import filter_by_tag, filter_by_tags
from blog_discovery.pipeline import FilterPipeline, Pipeline
from blog_discovery.results import (
    ActiveFilter,
    FilterKind,
    ResultsSummary,
    active_filters,
    results_hint,
    results_text,
    sort_label,
)
from blog_discovery.run_logger import RunLogger
from blog_discovery.search import SearchRanker, TitleFirstRanker
from blog_discovery.sort import sort_articles
from blog_discovery.tags import build_tag_index

__all__ = [
    # Models
    "ArticleSummary",
    "FilterState",
    "SortField",
    "SortOrder",
    "TagCount",
    "VisibleSet",
    # Functions
    "build_tag_index",
    "filter_by_tag",
    "filter_by_tags",
    "sort_articles",
    # Protocols
    "ArticleStore",
    "Navigator",
    "Pipeline",
    "Scheduler",
    "SearchRanker",
    # Rankers
    "TitleFirstRanker",
    # Pipelines
    "FilterPipeline",
    # Codec
    "StateCodec",
    # Controller
    "AsyncioScheduler",
    "ControllerState",
    "InteractionController",
    "LoggingNavigator",
    # Content
    "InMemoryArticleStore",
    "MarkdownArticleStore",
    # Results
    "ActiveFilter",
    "FilterKind",
    "ResultsSummary",
    "active_filters",
    "results_hint",
    "results_text",
    "sort_label",
    # Logging
    "RunLogger",
    # Config
    "DiscoveryConfig",
    "create_from_config",
    "load_config",
]
