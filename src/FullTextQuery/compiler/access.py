"""Access-control clauses restricting results to what the viewer may see."""

from __future__ import annotations

from typing import Any

from FullTextQuery.core.models import EVERYONE, AccessContext


def build_access_clauses(access: AccessContext) -> list[dict[str, Any]]:
    """Build the access disjunction for a viewer.

    A document is visible if the viewer owns it, it is shared with the viewer
    or with everyone, or it is shared with one of the viewer's groups or
    circles.

    Returns:
        ``3 + len(groups) + len(circles)`` term clauses in that order.
    """
    clauses: list[dict[str, Any]] = [
        {"term": {"owner": access.viewer_id}},
        {"term": {"users": access.viewer_id}},
        {"term": {"users": EVERYONE}},
    ]
    clauses.extend({"term": {"groups": group}} for group in access.groups)
    clauses.extend({"term": {"circles": circle}} for circle in access.circles)
    return clauses
