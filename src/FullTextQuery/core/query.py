"""Free-text tokenizer and term classifier.

Marker grammar for a single token:

- `+word`   -> required (``must``)
- `-word`   -> excluded (``must_not``)
- `?word`   -> optional (``should``), same as no marker
- `"a b"`   -> phrase match; the marker, if any, goes before the quote
- anything else is a fuzzy term match

A `?` written directly before a quote is split off as its own token, so
`?"a b"` searches the optional phrase `a b`.

A phrase needs at least one character between its quotes. An empty pair
stays attached to the surrounding text: `""a` is one token, the word `a`,
and a lone `""` is an empty token.
"""

from __future__ import annotations

import re

from FullTextQuery.core.errors import EmptyTokenError, NoValidQueryTermsError
from FullTextQuery.core.models import MatchMode, Polarity, QueryContent
from FullTextQuery.utils.log import log

_TOKEN_RE = re.compile(r'[^?\s"]?"(?:\\.|[^\\"])+"|\?(?=")|\S+')
_ESCAPE_RE = re.compile(r"\\(.)")

_MARKERS: dict[str, Polarity] = {
    "+": Polarity.MUST,
    "-": Polarity.MUST_NOT,
    "?": Polarity.SHOULD,
}


def tokenize_search(search: str) -> list[str]:
    """Split a search string into raw tokens, keeping quoted phrases whole.

    Args:
        search: Raw search string.

    Returns:
        Lower-cased tokens in input order; empty for blank input.
    """
    return _TOKEN_RE.findall(search.lower())


def parse_query_content(token: str) -> QueryContent:
    """Classify one raw token into a ``QueryContent``.

    Args:
        token: Raw token as produced by ``tokenize_search``.

    Returns:
        Normalized query content.

    Raises:
        EmptyTokenError: If nothing is left after removing markers and quotes.
    """
    word = token.strip()

    polarity = Polarity.SHOULD
    if word[:1] in _MARKERS:
        polarity = _MARKERS[word[0]]
        word = word[1:]

    match = MatchMode.FUZZY_TERM
    if len(word) >= 2 and word.startswith('"') and word.endswith('"'):
        match = MatchMode.PHRASE
        word = _ESCAPE_RE.sub(r"\1", word[1:-1])
    else:
        word = word.strip('"')

    word = word.strip()
    if not word:
        raise EmptyTokenError(token)
    return QueryContent(word=word, polarity=polarity, match=match)


def extract_query_contents(search: str) -> list[QueryContent]:
    """Tokenize and classify a search string, skipping empty tokens.

    Raises:
        NoValidQueryTermsError: If no token yields a usable term.
    """
    contents: list[QueryContent] = []
    for token in tokenize_search(search):
        try:
            contents.append(parse_query_content(token))
        except EmptyTokenError:
            log.debug("Skipping empty search token: %r", token)
            continue

    if not contents:
        raise NoValidQueryTermsError(search)
    return contents
