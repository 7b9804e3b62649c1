"""Command implementations for the FullTextQuery CLI.

Encapsulates request resolution and compilation, separated from CLI
parameter handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from FullTextQuery.compiler import QueryCompiler
from FullTextQuery.config import AppConfig, parse_access_context, parse_search_request
from FullTextQuery.utils.log import log


@dataclass(slots=True)
class CompileCommand:
    """Compile one request mapping into a backend search query."""

    config: AppConfig
    compiler: QueryCompiler

    def execute(
        self,
        raw_request: Mapping[str, Any],
        *,
        provider_id: str,
        viewer: str | None = None,
        groups: Sequence[str] = (),
        circles: Sequence[str] = (),
    ) -> dict[str, Any]:
        """Parse the request and access context, then compile.

        Command-line access options override the request file's ``access``
        section: a viewer replaces the viewer, and non-empty group or circle
        lists replace the corresponding lists.
        """
        request = parse_search_request(raw_request, self.config.search)
        access_raw = resolve_access(raw_request, viewer=viewer, groups=groups, circles=circles)
        access = parse_access_context({"access": access_raw})

        log.info(
            "Compiling provider=%s page=%d size=%d search=%r",
            provider_id,
            request.page,
            request.size,
            request.search,
        )
        return self.compiler.compile_search_query(request, access, provider_id)


@dataclass(slots=True)
class DocumentCommand:
    """Compile a direct fetch of one document."""

    compiler: QueryCompiler

    def execute(self, provider_id: str, document_id: str) -> dict[str, Any]:
        log.info("Compiling document lookup provider=%s document=%s", provider_id, document_id)
        return self.compiler.compile_get_by_id_query(provider_id, document_id)


def resolve_access(
    raw_request: Mapping[str, Any],
    *,
    viewer: str | None,
    groups: Sequence[str],
    circles: Sequence[str],
) -> dict[str, Any]:
    """Merge the request file's ``access`` section with command-line overrides."""
    section = raw_request.get("access") or {}
    if not isinstance(section, Mapping):
        raise TypeError("access must be an object")

    merged: dict[str, Any] = dict(section)
    if viewer is not None:
        merged["viewer"] = viewer
    if groups:
        merged["groups"] = list(groups)
    if circles:
        merged["circles"] = list(circles)
    return merged
