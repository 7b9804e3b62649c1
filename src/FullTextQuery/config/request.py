"""Request-file parsing into ``SearchRequest`` and ``AccessContext``.

A request file is a YAML mapping, for example::

    search: 'invoice +2024 -"draft copy"'
    page: 2
    size: 20
    parts: [comments]
    limit_fields: [content, parts.comments]
    wildcard_filters:
      - - {name: "*.pdf"}
    access:
      viewer: alice
      groups: [finance]
"""

from __future__ import annotations

from typing import Any, Mapping

from FullTextQuery.config.common import (
    expect_int,
    expect_str,
    expect_str_list,
    expect_str_mapping,
    get_optional_value,
    get_required_value,
    get_section,
)
from FullTextQuery.config.search import SearchDefaultsConfig
from FullTextQuery.core.models import NO_SEARCH, AccessContext, SearchRequest
from FullTextQuery.utils.log import log

_LIST_KEYS = ("fields", "limit_fields", "wildcard_fields", "parts", "meta_tags", "sub_tags")
_FILTER_KEYS = ("wildcard_filters", "regex_filters")
_ALLOWED_KEYS = frozenset({"search", "page", "size", "access", *_LIST_KEYS, *_FILTER_KEYS})


def parse_search_request(raw: Mapping[str, Any], defaults: SearchDefaultsConfig) -> SearchRequest:
    """Validate a request mapping into a ``SearchRequest``.

    A missing ``search`` means a filter-only query. ``size`` falls back to
    ``defaults.default_size`` and is clamped to ``defaults.max_size``.

    Args:
        raw: Request mapping.
        defaults: Paging defaults from the application config.

    Returns:
        Parsed search request.

    Raises:
        TypeError: If a value has the wrong type.
        ValueError: If keys are unknown or paging values are out of range.
    """
    unknown = {str(k) for k in raw.keys()} - _ALLOWED_KEYS
    if unknown:
        raise ValueError(f"request has unknown keys: {sorted(unknown)}")

    page = expect_int(get_optional_value(raw, "page", 1), "request.page")
    if page < 1:
        raise ValueError("request.page must be >= 1")

    size = expect_int(get_optional_value(raw, "size", defaults.default_size), "request.size")
    if size <= 0:
        raise ValueError("request.size must be positive")
    if size > defaults.max_size:
        log.warning("request.size=%d exceeds search.max_size=%d, clamping", size, defaults.max_size)
        size = defaults.max_size

    lists = {
        key: expect_str_list(get_optional_value(raw, key, []), f"request.{key}")
        for key in _LIST_KEYS
    }
    filters = {
        key: _parse_filter_groups(get_optional_value(raw, key, []), f"request.{key}")
        for key in _FILTER_KEYS
    }

    return SearchRequest(
        search=expect_str(get_optional_value(raw, "search", NO_SEARCH), "request.search"),
        page=page,
        size=size,
        **lists,
        **filters,
    )


def parse_access_context(raw: Mapping[str, Any]) -> AccessContext:
    """Validate the ``access`` section of a request mapping.

    Raises:
        TypeError: If a value has the wrong type.
        ValueError: If ``access.viewer`` is missing or blank.
    """
    section = get_section(raw, "access", required=True)
    viewer = expect_str(get_required_value(section, "viewer", "access.viewer"), "access.viewer").strip()
    if not viewer:
        raise ValueError("access.viewer must not be empty")
    return AccessContext(
        viewer_id=viewer,
        groups=expect_str_list(get_optional_value(section, "groups", []), "access.groups"),
        circles=expect_str_list(get_optional_value(section, "circles", []), "access.circles"),
    )


def _parse_filter_groups(value: Any, config_key: str) -> list[list[dict[str, str]]]:
    """Parse a list of filter groups, each a list of field -> pattern mappings."""
    if not isinstance(value, list):
        raise TypeError(f"{config_key} must be a list")
    groups: list[list[dict[str, str]]] = []
    for idx, group in enumerate(value):
        if not isinstance(group, list):
            raise TypeError(f"{config_key}[{idx}] must be a list")
        groups.append(
            [expect_str_mapping(entry, f"{config_key}[{idx}][{pos}]") for pos, entry in enumerate(group)]
        )
    return groups
