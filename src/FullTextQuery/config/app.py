from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from FullTextQuery.config.elastic import ElasticConfig, check_elastic, load_elastic
from FullTextQuery.config.runtime import RuntimeConfig, check_runtime, load_runtime
from FullTextQuery.config.search import SearchDefaultsConfig, check_search, load_search

DEFAULT_CONFIG_PATH = Path("config/default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    elastic: ElasticConfig
    search: SearchDefaultsConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    elastic = load_elastic(raw)
    search = load_search(raw)

    check_runtime(runtime)
    check_elastic(elastic)
    check_search(search)

    return AppConfig(runtime=runtime, elastic=elastic, search=search)


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(
    config_path: Path, default_path: Path = DEFAULT_CONFIG_PATH
) -> AppConfig:
    """Load config by merging defaults and optional override."""
    if config_path == default_path:
        return load_config(config_path)
    base = parse_yaml(default_path.read_text(encoding="utf-8"))
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
