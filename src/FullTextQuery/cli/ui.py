"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from FullTextQuery.cli.runner import CommandRunner
from FullTextQuery.config import load_config
from FullTextQuery.config.app import DEFAULT_CONFIG_PATH


@click.group(help="FullTextQuery: compile search requests into backend queries.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config,
    so the index name can come from the environment.
    """
    load_dotenv()

    ctx.obj = load_config(config_path)


@cli.command("compile")
@click.argument("request_path", type=click.Path(path_type=Path, dir_okay=False, exists=True))
@click.option("--provider", "provider_id", required=True, help="Provider the search is scoped to.")
@click.option("--viewer", default=None, help="Viewer identity; overrides access.viewer.")
@click.option("--group", "groups", multiple=True, help="Viewer group; repeatable.")
@click.option("--circle", "circles", multiple=True, help="Viewer circle; repeatable.")
@click.pass_context
def compile_cmd(
    ctx: click.Context,
    request_path: Path,
    provider_id: str,
    viewer: str | None,
    groups: tuple[str, ...],
    circles: tuple[str, ...],
) -> None:
    """Compile a YAML request file and print the search query as JSON."""
    runner = CommandRunner(ctx.obj)
    runner.run_compile(
        ctx.command.name,
        request_path=request_path,
        provider_id=provider_id,
        viewer=viewer,
        groups=groups,
        circles=circles,
    )


@cli.command("document")
@click.argument("provider_id")
@click.argument("document_id")
@click.pass_context
def document_cmd(ctx: click.Context, provider_id: str, document_id: str) -> None:
    """Print the lookup query for one document as JSON."""
    runner = CommandRunner(ctx.obj)
    runner.run_document(ctx.command.name, provider_id=provider_id, document_id=document_id)
