"""Shared fixtures: articles, a manual clock scheduler and a recording navigator."""

from collections.abc import Callable

import pytest

from blog_discovery.data import ArticleSummary


def make_article(
    id: str,
    title: str,
    date: str,
    excerpt: str = "",
    tags: tuple[str, ...] = (),
) -> ArticleSummary:
    return ArticleSummary(id=id, title=title, published_at=date, excerpt=excerpt, tags=tags)


class ManualTimer:
    """Timer handle for ManualScheduler."""

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by an advanceable fake clock."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: list[ManualTimer] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self.now + delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[ManualTimer]:
        return [t for t in self.timers if not t.cancelled]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due timers in order."""
        self.now += seconds
        while True:
            due = [t for t in self.pending if t.due <= self.now]
            if not due:
                return
            timer = min(due, key=lambda t: t.due)
            self.timers.remove(timer)
            timer.callback()


class RecordingNavigator:
    """Navigator that keeps every URL it is asked to set."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, bool]] = []

    @property
    def urls(self) -> list[str]:
        return [url for url, _ in self.calls]

    def set_url(self, url: str, *, preserve_scroll: bool = True) -> None:
        self.calls.append((url, preserve_scroll))


@pytest.fixture
def scenario_articles() -> list[ArticleSummary]:
    """The two-article example: a Next.js post and a newer debugging post."""
    return [
        make_article("a", "Next.js patterns", "2025-01-20", tags=("Web",)),
        make_article("b", "Debugging prod", "2025-01-25", tags=("debugging",)),
    ]


@pytest.fixture
def articles() -> list[ArticleSummary]:
    return [
        make_article(
            "nextjs",
            "Next.js patterns",
            "2025-01-20",
            excerpt="App Router lessons",
            tags=("Web", "React"),
        ),
        make_article(
            "debugging",
            "Debugging prod",
            "2025-01-25",
            excerpt="Tracing a leak in a Next.js service",
            tags=("debugging",),
        ),
        make_article(
            "survey",
            "Building a survey system",
            "2024-11-02",
            excerpt="Branching questions",
            tags=("Web", "architecture"),
        ),
        make_article(
            "payments",
            "Payment processor design",
            "2024-08-15",
            excerpt="Idempotency keys everywhere",
            tags=("architecture", "backend"),
        ),
        make_article(
            "rpg",
            "An RPG management system",
            "2024-05-01",
            excerpt="Campaigns, characters and nextgen dice",
            tags=("games", "Web"),
        ),
    ]


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()
