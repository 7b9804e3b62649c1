from __future__ import annotations

"""Public configuration API for FullTextQuery."""

from FullTextQuery.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
    parse_yaml,
)
from FullTextQuery.config.elastic import ElasticConfig
from FullTextQuery.config.request import parse_access_context, parse_search_request
from FullTextQuery.config.runtime import RuntimeConfig
from FullTextQuery.config.search import SearchDefaultsConfig

__all__ = [
    "RuntimeConfig",
    "ElasticConfig",
    "SearchDefaultsConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
    "parse_yaml",
    "parse_search_request",
    "parse_access_context",
]
