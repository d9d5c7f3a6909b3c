"""Bidirectional mapping between filter state and the URL query string.

Parameters (all optional, absence means default):

    search   0 or 1      free-text query, trimmed        default ""
    tag      0 or many   one per selected tag, in order  default none
    sort     0 or 1      "date" | "title"                default "date"
    order    0 or 1      "asc" | "desc"                  default "desc"

Values equal to their default are omitted when encoding. Decoding never
fails: absent, blank or unknown values fall back to the default.
"""

import logging
from enum import StrEnum
from typing import TypeVar
from urllib.parse import parse_qsl, urlencode

from blog_discovery.data import FilterState, SortField, SortOrder

logger = logging.getLogger(__name__)

SEARCH_PARAM = "search"
TAG_PARAM = "tag"
SORT_PARAM = "sort"
ORDER_PARAM = "order"

DEFAULT_BASE_PATH = "/blog"

E = TypeVar("E", bound=StrEnum)


def _parse_enum(enum_cls: type[E], raw: str | None, default: E) -> E:
    if raw is None:
        return default
    try:
        return enum_cls(raw)
    except ValueError:
        logger.debug(f"Ignoring unknown {enum_cls.__name__} value {raw!r}")
        return default


def _query_part(value: str) -> str:
    """Strip any path prefix and fragment, leaving the bare query string."""
    value = value.split("#", 1)[0]
    if "?" in value:
        prefix, rest = value.split("?", 1)
        if "=" not in prefix and "&" not in prefix:
            return rest
    return value


class StateCodec:
    """Encode filter state into a shareable URL and decode it back.

    ``decode(encode(state)) == state`` holds for every state whose search
    query is trimmed and whose tags are non-blank and distinct, which is every
    state the interaction controller can produce.

    Args:
        base_path: Path of the article list page, used for full URLs.
    """

    def __init__(self, base_path: str = DEFAULT_BASE_PATH) -> None:
        self._base_path = base_path

    @property
    def bare_url(self) -> str:
        """The article list URL with no query string."""
        return self._base_path

    def encode(self, state: FilterState) -> str:
        """Encode ``state`` as a query string without the leading ``?``.

        Args:
            state: Filter state to encode.

        Returns:
            Query string; empty when every value equals its default.
        """
        params: list[tuple[str, str]] = []

        search = state.search_query.strip()
        if search:
            params.append((SEARCH_PARAM, search))

        params.extend((TAG_PARAM, tag) for tag in state.selected_tags)

        if state.sort_by != SortField.DATE:
            params.append((SORT_PARAM, state.sort_by.value))

        if state.sort_order != SortOrder.DESC:
            params.append((ORDER_PARAM, state.sort_order.value))

        return urlencode(params)

    def decode(self, query_string: str) -> FilterState:
        """Decode a query string (or relative URL) into filter state.

        Args:
            query_string: ``search=x&tag=y``, ``?search=x`` or ``/blog?search=x``.

        Returns:
            Decoded filter state with defaults for anything absent or invalid.
        """
        search: str | None = None
        sort_raw: str | None = None
        order_raw: str | None = None
        tags: list[str] = []

        for key, value in parse_qsl(_query_part(query_string or ""), keep_blank_values=True):
            if key == SEARCH_PARAM and search is None:
                search = value
            elif key == TAG_PARAM:
                if value.strip() and value not in tags:
                    tags.append(value)
            elif key == SORT_PARAM and sort_raw is None:
                sort_raw = value
            elif key == ORDER_PARAM and order_raw is None:
                order_raw = value

        return FilterState(
            search_query=(search or "").strip(),
            selected_tags=tuple(tags),
            sort_by=_parse_enum(SortField, sort_raw, SortField.DATE),
            sort_order=_parse_enum(SortOrder, order_raw, SortOrder.DESC),
        )

    def to_url(self, state: FilterState) -> str:
        """Full relative URL for ``state``: base path plus ``?query`` if any."""
        query = self.encode(state)
        return f"{self._base_path}?{query}" if query else self._base_path
