"""Article store reading YAML front matter from a directory of markdown files.

Each ``<slug>.md`` file starts with a front matter block:

    ---
    title: Next.js patterns
    date: 2025-01-20
    excerpt: Notes from a year of App Router work.
    tags: [Web, React]
    ---

Only the front matter is read; bodies are left to the rendering layer.
"""

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from blog_discovery.data import ArticleSummary

logger = logging.getLogger(__name__)

_FRONT_MATTER = re.compile(r"^---\s*\n(.*?)\n---\s*(?:\n|$)", re.DOTALL)


def parse_front_matter(text: str) -> dict[str, Any] | None:
    """Extract the YAML front matter mapping from markdown text.

    Returns:
        The mapping, or None when there is no front matter block or it is not
        a YAML mapping.

    Raises:
        yaml.YAMLError: If the block is not valid YAML.
    """
    match = _FRONT_MATTER.match(text)
    if not match:
        return None
    data = yaml.safe_load(match.group(1))
    return data if isinstance(data, dict) else None


def _as_tags(raw: Any) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        return (raw,)
    if not isinstance(raw, list | tuple):
        raise ValueError(f"tags must be a string or a list, got {type(raw).__name__}")
    return tuple(str(tag) for tag in raw if tag is not None)


def summary_from_front_matter(slug: str, data: dict[str, Any]) -> ArticleSummary:
    """Build an ArticleSummary from a front matter mapping.

    Raises:
        ValueError: If the title is missing, the date is missing or invalid, or
            tags is neither a string nor a list.
    """
    return ArticleSummary(
        id=slug,
        title=str(data.get("title") or ""),
        published_at=data.get("date"),
        excerpt=str(data.get("excerpt") or ""),
        tags=_as_tags(data.get("tags")),
    )


class MarkdownArticleStore:
    """Load article summaries from ``*.md`` files in a directory.

    Files that cannot be read or whose front matter is missing or invalid are
    skipped with a warning.

    Args:
        directory: Directory holding the markdown files.
    """

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def _paths(self) -> list[Path]:
        if not self._directory.is_dir():
            raise FileNotFoundError(f"Content directory not found: {self._directory}")
        return sorted(self._directory.glob("*.md"))

    def list_slugs(self) -> list[str]:
        """Slugs of every markdown file, whether or not it parses."""
        return [path.stem for path in self._paths()]

    def list_articles(self) -> list[ArticleSummary]:
        """Read every markdown file's front matter.

        Returns:
            Article summaries, newest first.
        """
        articles: list[ArticleSummary] = []
        for path in self._paths():
            try:
                data = parse_front_matter(path.read_text(encoding="utf-8"))
            except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
                logger.warning(f"Skipping {path.name}: {e}")
                continue
            if data is None:
                logger.warning(f"Skipping {path.name}: no front matter")
                continue
            try:
                articles.append(summary_from_front_matter(path.stem, data))
            except ValueError as e:
                logger.warning(f"Skipping {path.name}: {e}")

        logger.info(f"Loaded {len(articles)} articles from {self._directory}")
        return sorted(articles, key=lambda a: a.published_at, reverse=True)
