"""URL state codec module."""

from blog_discovery.codec.query_string import (
    DEFAULT_BASE_PATH,
    ORDER_PARAM,
    SEARCH_PARAM,
    SORT_PARAM,
    TAG_PARAM,
    StateCodec,
)

__all__ = [
    "DEFAULT_BASE_PATH",
    "ORDER_PARAM",
    "SEARCH_PARAM",
    "SORT_PARAM",
    "TAG_PARAM",
    "StateCodec",
]
