"""Filter clauses: provider scope, access, tags, wildcard and regex filters."""

from __future__ import annotations

from typing import Any, Sequence

from FullTextQuery.compiler.access import build_access_clauses
from FullTextQuery.compiler.legacy import bypass_simple_query
from FullTextQuery.core.models import LEGACY_INFO_KEY, AccessContext, FilterGroup, SearchRequest


def build_filter_clauses(
    request: SearchRequest, access: AccessContext, provider_id: str
) -> list[dict[str, Any]]:
    """Build the outer filter list of a search query.

    Entries are ANDed by the backend; ``should`` entries are ORed inside.

    Args:
        request: Search request providing tags and filter groups.
        access: Viewer identity and memberships.
        provider_id: Provider the search is scoped to.

    Returns:
        Provider scope, access, meta-tag and sub-tag entries, followed by the
        wildcard and regex filter entries in request order.
    """
    filters: list[dict[str, Any]] = [
        {"bool": {"must": {"term": {"provider": provider_id}}}},
        {"bool": {"should": build_access_clauses(access)}},
        {"bool": {"should": build_tag_clauses("metatags", request.meta_tags)}},
        {"bool": {"must": build_tag_clauses("subtags", request.sub_tags)}},
    ]
    filters.extend(build_wildcard_filters(request.wildcard_filters))
    filters.extend(build_regex_filters(request.regex_filters))
    return filters


def build_tag_clauses(field: str, tags: Sequence[str]) -> list[dict[str, Any]]:
    """Build one exact-match clause per tag on ``field``."""
    return [{"term": {field: tag}} for tag in tags]


def build_wildcard_filters(groups: Sequence[Sequence[FilterGroup]]) -> list[dict[str, Any]]:
    """Build one should-group per wildcard filter group, empty groups included."""
    return [
        {"bool": {"should": [{"wildcard": dict(entry)} for entry in group]}}
        for group in groups
    ]


def build_regex_filters(groups: Sequence[Sequence[FilterGroup]]) -> list[dict[str, Any]]:
    """Build filter entries for regex filter groups.

    Legacy ``info_msg`` entries are decoded into a must-group each, in place.
    The remaining entries of a group become one should-group of ``regexp``
    clauses, which is left out when the group has none.
    """
    filters: list[dict[str, Any]] = []
    for group in groups:
        regex: list[dict[str, Any]] = []
        for entry in group:
            if LEGACY_INFO_KEY in entry:
                filters.append({"bool": {"must": bypass_simple_query(entry[LEGACY_INFO_KEY])}})
            else:
                regex.append({"regexp": dict(entry)})

        if regex:
            filters.append({"bool": {"should": regex}})
    return filters
