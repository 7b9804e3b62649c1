"""Search backend configuration and index resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from FullTextQuery.config.common import (
    expect_str,
    get_optional_value,
    get_section,
)
from FullTextQuery.core.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ElasticConfig:
    """Backend index settings.

    Attributes:
        index: Index name from the config file; may be empty.
        index_env: Environment variable consulted when ``index`` is empty.
        resolved_index: Index name after applying the environment fallback.
    """

    index: str
    index_env: str
    resolved_index: str

    def get_elastic_index(self) -> str:
        """Return the index to query.

        Raises:
            ConfigurationError: If neither the config nor the environment
                names an index.
        """
        if not self.resolved_index:
            raise ConfigurationError(
                f"No search index configured. Set elastic.index or the {self.index_env} environment variable."
            )
        return self.resolved_index


def load_elastic(raw: Mapping[str, Any]) -> ElasticConfig:
    """Load the ``elastic`` section, resolving the index from the environment if needed.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If the section is missing.
    """
    section = get_section(raw, "elastic", required=True)
    index = expect_str(get_optional_value(section, "index", ""), "elastic.index").strip()
    index_env = expect_str(
        get_optional_value(section, "index_env", "FULLTEXTQUERY_INDEX"), "elastic.index_env"
    ).strip()
    return ElasticConfig(
        index=index,
        index_env=index_env,
        resolved_index=index or _load_index_from_env(index_env),
    )


def check_elastic(config: ElasticConfig) -> None:
    """Validate backend constraints.

    A missing index is not an error here; it surfaces as ``ConfigurationError``
    when a query is compiled.
    """
    if not config.index_env:
        raise ValueError("elastic.index_env must not be empty")
    if any(ch.isspace() for ch in config.resolved_index):
        raise ValueError("elastic.index must not contain whitespace")


def _load_index_from_env(index_env: str) -> str:
    if not index_env:
        return ""
    return os.getenv(index_env, "").strip()
