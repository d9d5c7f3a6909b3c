#!/usr/bin/env python
"""CLI for browsing a directory of articles with search, tag filters and sorting."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from blog_discovery.config import (
    create_from_config,
    create_store,
    get_default_config_path,
    load_config,
)
from blog_discovery.controller import InteractionController, LoggingNavigator
from blog_discovery.data import SortField, SortOrder
from blog_discovery.results import results_hint, results_text

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    config: Path
    url: str = ""
    search: str | None = None
    tags: list[str] = []
    sort: SortField | None = None
    order: SortOrder | None = None
    content_dir: Path | None = None
    show_tags: bool = False
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @field_validator("content_dir")
    @classmethod
    def content_dir_must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.is_dir():
            raise ValueError(f"Content directory not found: {v}")
        return v


def apply_flags(controller: InteractionController, args: CLIArgs) -> None:
    """Apply flag overrides on top of the state decoded from ``--url``."""
    if args.search is not None:
        controller.set_search_query(args.search)
        controller.flush_search()
    for tag in args.tags:
        if tag not in controller.state.selected_tags:
            controller.toggle_tag(tag)
    if args.sort is not None or args.order is not None:
        controller.change_sort(
            args.sort or controller.state.sort_by,
            args.order or controller.state.sort_order,
        )


async def run(args: CLIArgs) -> None:
    """Evaluate the requested view and print it.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    store = create_store(config, directory_override=args.content_dir)
    articles = store.list_articles()

    controller, run_logger = create_from_config(
        config,
        articles,
        navigator=LoggingNavigator(),
        initial_url=args.url,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )
    apply_flags(controller, args)

    if args.show_tags:
        print("\nTags:")
        for tag_count in controller.tag_index:
            print(f"  {tag_count.tag} ({tag_count.count})")

    summary = controller.summary
    print(f"\n{results_text(summary)}")
    hint = results_hint(summary)
    if hint:
        print(hint)
    for chip in controller.active_filters:
        print(f"  [{chip.label}]")

    print()
    for i, article in enumerate(controller.visible, 1):
        print(f"{i}. {article.title}")
        print(f"   {article.published_at:%B %d, %Y}  ({article.id})")
        if article.tags:
            print(f"   Tags: {', '.join(article.tags)}")

    logger.info(f"\nURL: {controller.url}")
    if run_logger and run_logger.last_log_path:
        logger.info(f"Run log written to: {run_logger.last_log_path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Search, filter and sort blog articles.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--url",
        default="",
        help="Shared URL or query string to start from, e.g. '/blog?tag=Web&sort=title'",
    )
    parser.add_argument("--search", "-s", default=None, help="Free-text search query")
    parser.add_argument(
        "--tag",
        "-t",
        action="append",
        default=[],
        help="Select a tag (repeatable; all selected tags must match)",
    )
    parser.add_argument("--sort", choices=[f.value for f in SortField], default=None)
    parser.add_argument("--order", choices=[o.value for o in SortOrder], default=None)
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=None,
        help="Directory of markdown articles (overrides config)",
    )
    parser.add_argument(
        "--show-tags",
        action="store_true",
        default=False,
        help="Print the tag index before the results",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON trace of each pipeline evaluation",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            config=config_path,
            url=ns.url,
            search=ns.search,
            tags=ns.tag,
            sort=ns.sort,
            order=ns.order,
            content_dir=ns.content_dir,
            show_tags=ns.show_tags,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except (FileNotFoundError, ValidationError) as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
