"""Grouping of per-term field clauses by polarity."""

from __future__ import annotations

from typing import Any, Sequence

from FullTextQuery.compiler.fields import build_field_fanout
from FullTextQuery.core.models import QueryContent, SearchRequest


def compose_text_clause(request: SearchRequest, contents: Sequence[QueryContent]) -> dict[str, Any]:
    """Assemble the textual-match clause from normalized terms.

    Each term is fanned out across fields and the resulting trees are grouped
    under the term's polarity key. Groups appear in the order their first
    term appears in the search string.

    Args:
        request: Search request providing the field configuration.
        contents: Terms in search-string order.

    Returns:
        ``{"bool": {<polarity>: [fanout, ...], ...}}``.
    """
    groups: dict[str, list[dict[str, Any]]] = {}
    for content in contents:
        groups.setdefault(content.polarity_key, []).append(build_field_fanout(request, content))
    return {"bool": groups}
