"""Compilation of search requests into backend boolean queries."""

from __future__ import annotations

from FullTextQuery.compiler.mapping import IndexSource, QueryCompiler

__all__ = [
    "IndexSource",
    "QueryCompiler",
]
