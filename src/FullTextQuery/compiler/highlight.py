"""Highlighting configuration."""

from __future__ import annotations

from typing import Any

from FullTextQuery.core.models import SearchRequest

CONTENT_FRAGMENTS = 5


def build_highlight(request: SearchRequest) -> dict[str, Any]:
    """Highlight ``content`` by score and every ``parts.`` field with defaults.

    Markup tags are empty; presentation is left to the caller.
    """
    fields: dict[str, Any] = {"content": {"number_of_fragments": CONTENT_FRAGMENTS, "order": "score"}}
    for part in request.parts_fields:
        fields[part] = {}

    return {
        "fields": fields,
        "pre_tags": [""],
        "post_tags": [""],
    }
