"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation, output, and error
handling for command execution.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

import click

from FullTextQuery.cli.commands import CompileCommand, DocumentCommand
from FullTextQuery.compiler import QueryCompiler
from FullTextQuery.config import AppConfig, parse_yaml
from FullTextQuery.core.errors import ConfigurationError, NoValidQueryTermsError
from FullTextQuery.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution and error reporting.

    Compiled queries are printed to stdout as JSON; logs go to stderr.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.compiler = QueryCompiler(index_source=config.elastic)

    def run_compile(
        self,
        action: str,
        *,
        request_path: Path,
        provider_id: str,
        viewer: str | None,
        groups: Sequence[str],
        circles: Sequence[str],
    ) -> None:
        """Compile a request file and print the query.

        Raises:
            click.Abort: When compilation fails.
        """
        self._configure_logging(action)
        try:
            raw_request = parse_yaml(request_path.read_text(encoding="utf-8"))
            command = CompileCommand(config=self.config, compiler=self.compiler)
            query = command.execute(
                raw_request,
                provider_id=provider_id,
                viewer=viewer,
                groups=groups,
                circles=circles,
            )
        except NoValidQueryTermsError as e:
            log.error("No valid search terms in %r; nothing to search for", e.search)
            raise click.Abort from e
        except ConfigurationError as e:
            log.error("Configuration error: %s", e)
            raise click.Abort from e
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Compile failed: %s", e)
            raise click.Abort from e
        self._echo(query)

    def run_document(self, action: str, *, provider_id: str, document_id: str) -> None:
        """Compile a document lookup and print the query.

        Raises:
            click.Abort: When no index is configured.
        """
        self._configure_logging(action)
        try:
            query = DocumentCommand(compiler=self.compiler).execute(provider_id, document_id)
        except ConfigurationError as e:
            log.error("Configuration error: %s", e)
            raise click.Abort from e
        self._echo(query)

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    @staticmethod
    def _echo(query: dict[str, Any]) -> None:
        click.echo(json.dumps(query, ensure_ascii=False, indent=2))
