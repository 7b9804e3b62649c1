"""Expansion of one search term across the searchable field set."""

from __future__ import annotations

from typing import Any

from FullTextQuery.core.models import QueryContent, SearchRequest

_DEFAULT_TEXT_FIELDS: tuple[str, ...] = ("content", "title")


def build_field_fanout(request: SearchRequest, content: QueryContent) -> dict[str, Any]:
    """Build the per-field disjunction for one query term.

    Text fields (``content``, ``title`` and the request's extra fields) get
    the term's match mode, wildcard fields get a ``*word*`` wildcard, and the
    ``parts.`` fields share a single ``query_string`` clause.

    Args:
        request: Search request providing the field configuration.
        content: Normalized query term.

    Returns:
        ``{"bool": {"should": [...]}}``. The list is empty when the allow-list
        excludes every field; such a term cannot match anything.
    """
    should: list[dict[str, Any]] = []

    for field in (*_DEFAULT_TEXT_FIELDS, *request.fields):
        if not field_is_out_of_limit(request, field):
            should.append({content.match.value: {field: content.word}})

    for field in request.wildcard_fields:
        if not field_is_out_of_limit(request, field):
            should.append({"wildcard": {field: f"*{content.word}*"}})

    parts = [field for field in request.parts_fields if not field_is_out_of_limit(request, field)]
    if parts:
        should.append({"query_string": {"fields": parts, "query": content.word}})

    return {"bool": {"should": should}}


def field_is_out_of_limit(request: SearchRequest, field: str) -> bool:
    """Return True if the request's allow-list excludes ``field``."""
    if not request.limit_fields:
        return False
    return field not in request.limit_fields
