from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Sequence

NO_SEARCH = ":null"
"""Search string meaning "no text search": the query is filter-only."""

PARTS_PREFIX = "parts."
LEGACY_INFO_KEY = "info_msg"
EVERYONE = "__all"


class Polarity(str, Enum):
    """Known polarity tags of a query term.

    Any other string is accepted where a polarity is expected and is used
    verbatim as the boolean group key.
    """

    MUST = "must"
    SHOULD = "should"
    MUST_NOT = "must_not"


class MatchMode(str, Enum):
    """How a term is matched against a text field."""

    PHRASE = "match_phrase"
    FUZZY_TERM = "match"


FilterGroup = Mapping[str, str]


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """User-issued search request.

    Attributes:
        search: Free-text search string, or ``NO_SEARCH``.
        page: 1-based page number.
        size: Page size.
        fields: Extra text fields searched with the term's match mode.
        limit_fields: Field allow-list; empty means no restriction.
        wildcard_fields: Fields searched with a ``*word*`` wildcard.
        parts: Multi-part names, searched as ``parts.<name>``.
        meta_tags: Meta tags, any of which may match.
        sub_tags: Sub tags, all of which must match.
        wildcard_filters: Ordered groups of field -> wildcard pattern.
        regex_filters: Ordered groups of field -> regex pattern. An entry
            keyed by ``info_msg`` carries a serialized legacy payload.
    """

    search: str = NO_SEARCH
    page: int = 1
    size: int = 10
    fields: Sequence[str] = ()
    limit_fields: Sequence[str] = ()
    wildcard_fields: Sequence[str] = ()
    parts: Sequence[str] = ()
    meta_tags: Sequence[str] = ()
    sub_tags: Sequence[str] = ()
    wildcard_filters: Sequence[Sequence[FilterGroup]] = ()
    regex_filters: Sequence[Sequence[FilterGroup]] = ()

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        # Callers may pass lists and dicts; keep the request read-only.
        for name in ("fields", "limit_fields", "wildcard_fields", "parts", "meta_tags", "sub_tags"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        for name in ("wildcard_filters", "regex_filters"):
            object.__setattr__(self, name, _freeze_filters(getattr(self, name)))

    @property
    def has_search(self) -> bool:
        """Return whether a text search was requested."""
        return self.search != NO_SEARCH

    @property
    def offset(self) -> int:
        """Return the index of the first hit of the requested page."""
        return (self.page - 1) * self.size

    @property
    def parts_fields(self) -> tuple[str, ...]:
        """Return the multi-part field names in the ``parts.`` namespace."""
        return tuple(PARTS_PREFIX + part for part in self.parts)


@dataclass(frozen=True, slots=True)
class AccessContext:
    """Viewer identity and memberships used to restrict visible documents."""

    viewer_id: str
    groups: Sequence[str] = ()
    circles: Sequence[str] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "groups", tuple(self.groups))
        object.__setattr__(self, "circles", tuple(self.circles))


@dataclass(frozen=True, slots=True)
class QueryContent:
    """One normalized search term."""

    word: str
    polarity: Polarity | str = Polarity.SHOULD
    match: MatchMode = MatchMode.FUZZY_TERM

    @property
    def polarity_key(self) -> str:
        """Return the boolean group key this term belongs to."""
        if isinstance(self.polarity, Polarity):
            return self.polarity.value
        return str(self.polarity)


def _freeze_filters(groups: Any) -> tuple[tuple[Mapping[str, str], ...], ...]:
    return tuple(
        tuple(MappingProxyType(dict(entry)) for entry in group)
        for group in groups
    )
