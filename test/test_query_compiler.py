"""Tests for the search query compiler."""

import json
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from FullTextQuery.compiler import QueryCompiler
from FullTextQuery.compiler.highlight import build_highlight
from FullTextQuery.config.elastic import ElasticConfig
from FullTextQuery.core.errors import ConfigurationError, NoValidQueryTermsError
from FullTextQuery.core.models import NO_SEARCH, AccessContext, SearchRequest


class _StaticIndex:
    def __init__(self, name: str = "nextcloud") -> None:
        self.name = name
        self.calls = 0

    def get_elastic_index(self) -> str:
        self.calls += 1
        return self.name


_ACCESS = AccessContext(viewer_id="alice", groups=["admin"], circles=["c1"])


class TestCompileSearchQuery(unittest.TestCase):
    def setUp(self) -> None:
        self.index = _StaticIndex()
        self.compiler = QueryCompiler(index_source=self.index)

    def test_pagination_and_terms(self) -> None:
        request = SearchRequest(search='hello "big world"', page=2, size=10)
        query = self.compiler.compile_search_query(request, _ACCESS, "files")

        self.assertEqual(query["index"], "nextcloud")
        self.assertEqual(query["type"], "standard")
        self.assertEqual(query["size"], 10)
        self.assertEqual(query["from"], 10)

        text = query["body"]["query"]["bool"]["must"]["bool"]["should"]
        hello, big_world = text["bool"]["should"]
        self.assertEqual(hello["bool"]["should"][0], {"match": {"content": "hello"}})
        self.assertEqual(big_world["bool"]["should"][0], {"match_phrase": {"content": "big world"}})

    def test_first_page_starts_at_zero(self) -> None:
        query = self.compiler.compile_search_query(SearchRequest(page=1, size=25), _ACCESS, "files")
        self.assertEqual(query["from"], 0)
        self.assertEqual(query["size"], 25)

    def test_request_rejects_invalid_paging(self) -> None:
        with self.assertRaisesRegex(ValueError, "page"):
            SearchRequest(page=0)
        with self.assertRaisesRegex(ValueError, "size"):
            SearchRequest(size=0)
        with self.assertRaisesRegex(ValueError, "size"):
            SearchRequest(size=-5)

    def test_no_search_sentinel_omits_text_clause(self) -> None:
        request = SearchRequest(search=NO_SEARCH)
        query = self.compiler.compile_search_query(request, _ACCESS, "files")

        query_bool = query["body"]["query"]["bool"]
        self.assertNotIn("must", query_bool)
        self.assertEqual(query_bool["filter"][0], {"bool": {"must": {"term": {"provider": "files"}}}})

    def test_provider_scope_always_present(self) -> None:
        for search in (NO_SEARCH, "hello", "-spam +ham"):
            with self.subTest(search=search):
                query = self.compiler.compile_search_query(SearchRequest(search=search), _ACCESS, "mail")
                self.assertEqual(
                    query["body"]["query"]["bool"]["filter"][0]["bool"]["must"],
                    {"term": {"provider": "mail"}},
                )

    def test_access_filter_is_second(self) -> None:
        query = self.compiler.compile_search_query(SearchRequest(), _ACCESS, "files")
        access = query["body"]["query"]["bool"]["filter"][1]["bool"]["should"]
        self.assertEqual(len(access), 5)
        self.assertEqual(access[-1], {"term": {"circles": "c1"}})

    def test_blank_search_fails(self) -> None:
        for search in ("", "   ", "+ -"):
            with self.subTest(search=search):
                with self.assertRaises(NoValidQueryTermsError):
                    self.compiler.compile_search_query(SearchRequest(search=search), _ACCESS, "files")

    def test_source_excludes_content_and_highlight(self) -> None:
        request = SearchRequest(search="x", parts=["comments"])
        body = self.compiler.compile_search_query(request, _ACCESS, "files")["body"]
        self.assertEqual(body["_source"], {"excludes": ["content"]})
        self.assertEqual(body["highlight"], build_highlight(request))

    def test_compilation_is_idempotent_and_serializable(self) -> None:
        request = SearchRequest(
            search='+invoice -"draft copy" 2024',
            fields=["description"],
            wildcard_fields=["name"],
            parts=["comments"],
            meta_tags=["m1"],
            sub_tags=["s1"],
            wildcard_filters=[[{"name": "*.pdf"}]],
            regex_filters=[[{"info_msg": '{"author": "alice"}'}, {"subject": "inv.*"}]],
        )
        first = self.compiler.compile_search_query(request, _ACCESS, "files")
        second = self.compiler.compile_search_query(request, _ACCESS, "files")
        self.assertEqual(first, second)
        self.assertEqual(json.loads(json.dumps(first)), first)

    def test_index_resolved_once_per_compilation(self) -> None:
        self.compiler.compile_search_query(SearchRequest(search="x"), _ACCESS, "files")
        self.assertEqual(self.index.calls, 1)

    def test_missing_index_propagates(self) -> None:
        compiler = QueryCompiler(index_source=ElasticConfig(index="", index_env="UNSET", resolved_index=""))
        with self.assertRaises(ConfigurationError):
            compiler.compile_search_query(SearchRequest(), _ACCESS, "files")


class TestCompileGetByIdQuery(unittest.TestCase):
    def test_composite_id(self) -> None:
        compiler = QueryCompiler(index_source=_StaticIndex("nc"))
        self.assertEqual(
            compiler.compile_get_by_id_query("mail", "42"),
            {"index": "nc", "type": "standard", "id": "mail:42"},
        )


class TestBuildHighlight(unittest.TestCase):
    def test_content_and_parts(self) -> None:
        highlight = build_highlight(SearchRequest(parts=["comments", "notes"]))
        self.assertEqual(
            highlight,
            {
                "fields": {
                    "content": {"number_of_fragments": 5, "order": "score"},
                    "parts.comments": {},
                    "parts.notes": {},
                },
                "pre_tags": [""],
                "post_tags": [""],
            },
        )


if __name__ == "__main__":
    unittest.main()
