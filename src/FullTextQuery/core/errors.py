"""Error hierarchy for query compilation."""

from __future__ import annotations


class QueryMappingError(Exception):
    """Base class for all FullTextQuery errors."""


class ConfigurationError(QueryMappingError):
    """Raised when no backend index is configured."""


class QueryGenerationError(QueryMappingError):
    """Raised when a search request cannot be turned into a query."""


class EmptyTokenError(QueryGenerationError):
    """Raised for a token whose normalized word is empty.

    Always recovered by the caller, which skips the token.
    """


class NoValidQueryTermsError(QueryGenerationError):
    """Raised when a text search was requested but no usable term remains."""

    def __init__(self, search: str) -> None:
        super().__init__(f"No valid search terms in: {search!r}")
        self.search = search
