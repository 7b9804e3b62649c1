"""CLI package for FullTextQuery.

Separates click parameter handling (``ui``), execution and error reporting
(``runner``), and command logic (``commands``).
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from FullTextQuery.cli.runner import CommandRunner
from FullTextQuery.cli.ui import cli


def main() -> None:
    """Run FullTextQuery CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
