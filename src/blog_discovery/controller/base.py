"""Navigation primitive consumed by the interaction controller."""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Navigator(Protocol):
    """Interface for changing the browser address bar.

    Calls are fire-and-forget: the controller never waits on them.
    """

    def set_url(self, url: str, *, preserve_scroll: bool = True) -> None: ...


class LoggingNavigator:
    """Navigator that records and logs each URL instead of touching a browser."""

    def __init__(self) -> None:
        self._history: list[str] = []

    @property
    def history(self) -> list[str]:
        """URLs pushed so far, oldest first."""
        return list(self._history)

    @property
    def current_url(self) -> str | None:
        return self._history[-1] if self._history else None

    def set_url(self, url: str, *, preserve_scroll: bool = True) -> None:
        self._history.append(url)
        logger.info(f"Navigate: {url}")
