"""Interaction controller module."""

from blog_discovery.controller.base import LoggingNavigator, Navigator
from blog_discovery.controller.interaction import (
    SEARCH_DEBOUNCE_DELAY,
    ControllerState,
    InteractionController,
)
from blog_discovery.controller.scheduler import AsyncioScheduler, Scheduler, TimerHandle

__all__ = [
    "SEARCH_DEBOUNCE_DELAY",
    "AsyncioScheduler",
    "ControllerState",
    "InteractionController",
    "LoggingNavigator",
    "Navigator",
    "Scheduler",
    "TimerHandle",
]
