"""Search query compiler.

Combines pagination, the textual-match clause, filters and highlighting into
the request body handed to the search backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from FullTextQuery.compiler.clauses import compose_text_clause
from FullTextQuery.compiler.filters import build_filter_clauses
from FullTextQuery.compiler.highlight import build_highlight
from FullTextQuery.core.models import AccessContext, SearchRequest
from FullTextQuery.core.query import extract_query_contents
from FullTextQuery.utils.log import log

DOCUMENT_TYPE = "standard"
SOURCE_EXCLUDES: tuple[str, ...] = ("content",)


class IndexSource(Protocol):
    """Protocol for the collaborator that knows the backend index name."""

    def get_elastic_index(self) -> str:
        """Return the configured index name.

        Raises:
            ConfigurationError: If no index is configured.
        """
        raise NotImplementedError


@dataclass(slots=True)
class QueryCompiler:
    """Stateless compiler from search requests to backend queries."""

    index_source: IndexSource

    def compile_search_query(
        self, request: SearchRequest, access: AccessContext, provider_id: str
    ) -> dict[str, Any]:
        """Compile a search request into a backend search query.

        Args:
            request: Search request.
            access: Viewer identity and memberships.
            provider_id: Provider the search is scoped to.

        Returns:
            Query mapping with ``index``, ``type``, ``size``, ``from`` and
            ``body``.

        Raises:
            ConfigurationError: If no index is configured.
            NoValidQueryTermsError: If a text search has no usable term.
        """
        params: dict[str, Any] = {
            "index": self.index_source.get_elastic_index(),
            "type": DOCUMENT_TYPE,
            "size": request.size,
            "from": request.offset,
        }

        query_bool: dict[str, Any] = {}
        if request.has_search:
            contents = extract_query_contents(request.search)
            log.debug("Compiled %d search terms for provider=%s", len(contents), provider_id)
            query_bool["must"] = {"bool": {"should": compose_text_clause(request, contents)}}
        query_bool["filter"] = build_filter_clauses(request, access, provider_id)

        params["body"] = {
            "query": {"bool": query_bool},
            "highlight": build_highlight(request),
            "_source": {"excludes": list(SOURCE_EXCLUDES)},
        }
        return params

    def compile_get_by_id_query(self, provider_id: str, document_id: str) -> dict[str, Any]:
        """Compile a direct fetch of one document.

        Raises:
            ConfigurationError: If no index is configured.
        """
        return {
            "index": self.index_source.get_elastic_index(),
            "type": DOCUMENT_TYPE,
            "id": f"{provider_id}:{document_id}",
        }
