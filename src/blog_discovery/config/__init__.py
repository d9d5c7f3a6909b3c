"""Configuration module for blog discovery."""

from blog_discovery.config.factory import create_from_config, create_run_logger, create_store
from blog_discovery.config.loader import get_default_config_path, load_config
from blog_discovery.config.models import (
    ContentConfig,
    ControllerConfig,
    DiscoveryConfig,
    LoggingConfig,
    UrlConfig,
)

__all__ = [
    "ContentConfig",
    "ControllerConfig",
    "DiscoveryConfig",
    "LoggingConfig",
    "UrlConfig",
    "create_from_config",
    "create_run_logger",
    "create_store",
    "get_default_config_path",
    "load_config",
]
