"""Factory functions to create components from configuration."""

from collections.abc import Sequence
from pathlib import Path

from blog_discovery.codec import StateCodec
from blog_discovery.config.models import DiscoveryConfig, LoggingConfig
from blog_discovery.content import MarkdownArticleStore
from blog_discovery.controller import (
    AsyncioScheduler,
    InteractionController,
    Navigator,
    Scheduler,
)
from blog_discovery.data import ArticleSummary
from blog_discovery.pipeline import FilterPipeline
from blog_discovery.run_logger import RunLogger


def create_store(
    config: DiscoveryConfig,
    *,
    directory_override: Path | str | None = None,
) -> MarkdownArticleStore:
    """Create the markdown article store from config."""
    directory = directory_override if directory_override is not None else config.content.directory
    return MarkdownArticleStore(directory)


def create_run_logger(
    config: LoggingConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> RunLogger | None:
    """Create a RunLogger, or None when logging is disabled."""
    log_enabled = log_override if log_override is not None else config.enabled
    if not log_enabled:
        return None
    log_dir = Path(log_dir_override if log_dir_override is not None else config.log_dir)
    return RunLogger(log_dir=log_dir, enabled=True)


def create_from_config(
    config: DiscoveryConfig,
    articles: Sequence[ArticleSummary],
    *,
    navigator: Navigator,
    scheduler: Scheduler | None = None,
    initial_url: str = "",
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[InteractionController, RunLogger | None]:
    """Create a controller wired to a pipeline and codec from root config.

    Args:
        config: Root configuration.
        articles: Full article list for this page load.
        navigator: Navigation primitive.
        scheduler: Debounce scheduler. Defaults to ``AsyncioScheduler()``.
        initial_url: URL the page was loaded with.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (controller, run_logger). run_logger is None if logging is
        disabled.
    """
    run_logger = create_run_logger(
        config.logging,
        log_override=log_override,
        log_dir_override=log_dir_override,
    )
    controller = InteractionController(
        articles,
        navigator=navigator,
        scheduler=scheduler if scheduler is not None else AsyncioScheduler(),
        codec=StateCodec(base_path=config.url.base_path),
        pipeline=FilterPipeline(run_logger=run_logger),
        debounce_seconds=config.controller.debounce_seconds,
        initial_url=initial_url,
    )
    return (controller, run_logger)
