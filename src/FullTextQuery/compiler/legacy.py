"""Legacy ``info_msg`` filter decoding.

Deprecated: older mail clients send author/recipient/date filters as a JSON
payload inside a regex filter group instead of as regular filters. The format
is frozen; new filter types must not be added here.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping

from FullTextQuery.utils.log import log

_NO_DATE = "0"


@dataclass(frozen=True, slots=True)
class LegacyInfo:
    """Decoded legacy filter payload."""

    author: str = ""
    recipient: str = ""
    start: str = _NO_DATE
    end: str = _NO_DATE


def decode_legacy_payload(raw: str) -> LegacyInfo:
    """Decode a serialized legacy payload, falling back to defaults.

    Invalid JSON, a non-object root, or a field of the wrong type never
    raises; the affected field keeps its default.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as error:
        log.debug("Ignoring malformed legacy filter payload: %s", error)
        data = {}
    if not isinstance(data, Mapping):
        data = {}

    return LegacyInfo(
        author=_get_str(data, "author", ""),
        recipient=_get_str(data, "recipient", ""),
        start=_get_str(data, "start", _NO_DATE),
        end=_get_str(data, "end", _NO_DATE),
    )


def bypass_simple_query(raw: str) -> list[dict[str, Any]]:
    """Translate a legacy payload into equivalent wildcard and range clauses."""
    log.debug("Decoding deprecated info_msg filter")
    info = decode_legacy_payload(raw)

    clauses: list[dict[str, Any]] = []
    if info.author != "":
        clauses.append({"wildcard": {"info_msg_author": f"*{info.author}*"}})
    if info.recipient != "":
        clauses.append({"wildcard": {"info_msg_recipient": f"*{info.recipient}*"}})
    if info.start != _NO_DATE:
        clauses.append({"range": {"info_msg_date": {"gte": info.start}}})
    if info.end != _NO_DATE:
        clauses.append({"range": {"info_msg_date": {"lte": info.end}}})
    return clauses


def _get_str(data: Mapping[str, Any], key: str, default: str) -> str:
    value = data.get(key)
    if isinstance(value, str):
        return value
    # bool is an int subclass; JSON true/false are not dates.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return default
