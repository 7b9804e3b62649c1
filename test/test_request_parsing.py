"""Tests for request-file parsing."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from FullTextQuery.cli.commands import resolve_access
from FullTextQuery.config import SearchDefaultsConfig, parse_access_context, parse_search_request, parse_yaml
from FullTextQuery.core.models import NO_SEARCH

_DEFAULTS = SearchDefaultsConfig(default_size=10, max_size=50)

_REQUEST_YAML = """
search: 'invoice -"draft copy"'
page: 3
size: 20
fields: [description]
limit_fields: [content, parts.comments]
parts: [comments]
meta_tags: [m1]
wildcard_filters:
  - - {name: "*.pdf"}
    - {path: "/docs/*"}
regex_filters:
  - - {info_msg: '{"author": "alice"}'}
access:
  viewer: alice
  groups: [finance]
"""


class TestParseSearchRequest(unittest.TestCase):
    def test_full_request(self) -> None:
        request = parse_search_request(parse_yaml(_REQUEST_YAML), _DEFAULTS)

        self.assertEqual(request.search, 'invoice -"draft copy"')
        self.assertEqual(request.page, 3)
        self.assertEqual(request.size, 20)
        self.assertEqual(request.offset, 40)
        self.assertEqual(request.fields, ("description",))
        self.assertEqual(request.parts_fields, ("parts.comments",))
        self.assertEqual(len(request.wildcard_filters), 1)
        self.assertEqual(dict(request.wildcard_filters[0][1]), {"path": "/docs/*"})
        self.assertEqual(dict(request.regex_filters[0][0]), {"info_msg": '{"author": "alice"}'})

    def test_defaults(self) -> None:
        request = parse_search_request({}, _DEFAULTS)
        self.assertEqual(request.search, NO_SEARCH)
        self.assertFalse(request.has_search)
        self.assertEqual(request.page, 1)
        self.assertEqual(request.size, 10)
        self.assertEqual(request.wildcard_filters, ())

    def test_size_is_clamped(self) -> None:
        request = parse_search_request({"size": 500}, _DEFAULTS)
        self.assertEqual(request.size, 50)

    def test_invalid_values(self) -> None:
        with self.assertRaisesRegex(ValueError, "request\\.page"):
            parse_search_request({"page": 0}, _DEFAULTS)
        with self.assertRaisesRegex(ValueError, "request\\.size"):
            parse_search_request({"size": 0}, _DEFAULTS)
        with self.assertRaisesRegex(TypeError, "request\\.meta_tags\\[1\\]"):
            parse_search_request({"meta_tags": ["a", 2]}, _DEFAULTS)
        with self.assertRaisesRegex(TypeError, "request\\.wildcard_filters\\[0\\]"):
            parse_search_request({"wildcard_filters": [{"name": "*.pdf"}]}, _DEFAULTS)
        with self.assertRaisesRegex(ValueError, "unknown keys"):
            parse_search_request({"serach": "typo"}, _DEFAULTS)

    def test_request_is_read_only(self) -> None:
        request = parse_search_request(parse_yaml(_REQUEST_YAML), _DEFAULTS)
        with self.assertRaises(TypeError):
            request.wildcard_filters[0][0]["name"] = "*"  # type: ignore[index]


class TestParseAccessContext(unittest.TestCase):
    def test_access_section(self) -> None:
        access = parse_access_context(parse_yaml(_REQUEST_YAML))
        self.assertEqual(access.viewer_id, "alice")
        self.assertEqual(access.groups, ("finance",))
        self.assertEqual(access.circles, ())

    def test_viewer_required(self) -> None:
        with self.assertRaisesRegex(ValueError, "access\\.viewer"):
            parse_access_context({"access": {"groups": []}})
        with self.assertRaisesRegex(ValueError, "access\\.viewer"):
            parse_access_context({"access": {"viewer": "  "}})

    def test_overrides_replace_file_values(self) -> None:
        merged = resolve_access(
            parse_yaml(_REQUEST_YAML), viewer="bob", groups=(), circles=("c1",)
        )
        access = parse_access_context({"access": merged})
        self.assertEqual(access.viewer_id, "bob")
        self.assertEqual(access.groups, ("finance",))
        self.assertEqual(access.circles, ("c1",))


if __name__ == "__main__":
    unittest.main()
