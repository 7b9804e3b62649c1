"""Runtime domain configuration (logging)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from FullTextQuery.config.common import (
    expect_bool,
    expect_str,
    get_optional_value,
    get_section,
)

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Logging settings for the command line."""

    level: str = "INFO"
    to_file: bool = False
    dir: str = "log"


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Load the optional ``log`` section; missing keys keep their defaults."""
    section = get_section(raw, "log", required=False)
    defaults = RuntimeConfig()
    return RuntimeConfig(
        level=expect_str(get_optional_value(section, "level", defaults.level), "log.level").upper(),
        to_file=expect_bool(get_optional_value(section, "to_file", defaults.to_file), "log.to_file"),
        dir=expect_str(get_optional_value(section, "dir", defaults.dir), "log.dir"),
    )


def check_runtime(config: RuntimeConfig) -> None:
    """Validate runtime domain constraints.

    Raises:
        ValueError: If the level is unknown or the log directory is blank.
    """
    if config.level not in _ALLOWED_LOG_LEVELS:
        raise ValueError(f"log.level must be one of {sorted(_ALLOWED_LOG_LEVELS)}")
    if config.to_file and not config.dir.strip():
        raise ValueError("log.dir must not be empty when log.to_file is true")
