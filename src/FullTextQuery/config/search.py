"""Search request defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from FullTextQuery.config.common import (
    expect_int,
    get_required_value,
    get_section,
)


@dataclass(frozen=True, slots=True)
class SearchDefaultsConfig:
    """Paging defaults applied to request files.

    Attributes:
        default_size: Page size used when a request does not give one.
        max_size: Largest page size a request may ask for.
    """

    default_size: int
    max_size: int


def load_search(raw: Mapping[str, Any]) -> SearchDefaultsConfig:
    """Load search domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "search", required=True)
    return SearchDefaultsConfig(
        default_size=expect_int(
            get_required_value(section, "default_size", "search.default_size"),
            "search.default_size",
        ),
        max_size=expect_int(get_required_value(section, "max_size", "search.max_size"), "search.max_size"),
    )


def check_search(config: SearchDefaultsConfig) -> None:
    """Validate search domain constraints.

    Raises:
        ValueError: If values violate paging constraints.
    """
    if config.default_size <= 0:
        raise ValueError("search.default_size must be positive")
    if config.max_size < config.default_size:
        raise ValueError("search.max_size must be >= search.default_size")
