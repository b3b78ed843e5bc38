"""DataFlow CLI - Main entry point."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from dataflow_tools.config.loader import ConfigError, load_settings

console = Console()

_log_handler: logging.Handler | None = None


def _setup_logging(level: str, log_format: str) -> None:
    """Configure a stderr handler on the root logger, replacing any previous one."""
    global _log_handler
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _log_handler is not None:
        root_logger.removeHandler(_log_handler)

    _log_handler = logging.StreamHandler(sys.stderr)
    _log_handler.setFormatter(logging.Formatter(log_format))
    root_logger.addHandler(_log_handler)


@click.group()
@click.version_option(version="0.1.0", prog_name="dataflow")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file (default: ~/.dataflow/config.yaml)",
)
@click.pass_context
def cli(ctx, verbose, config_path):
    """DataFlow - manifest tools

    Generate and validate DataFlow manifests, and migrate Kafka Connect
    connectors to DataFlow.
    """
    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    _setup_logging("DEBUG" if verbose else settings.log_level, settings.log_format)
    ctx.obj = settings


from .catalog_commands import catalog  # noqa: E402
from .manifest_commands import generate, validate  # noqa: E402
from .migrate_commands import migrate  # noqa: E402

cli.add_command(generate)
cli.add_command(validate)
cli.add_command(migrate)
cli.add_command(catalog)


@cli.command()
def tools():
    """List the tools exposed to tool-calling clients."""
    from rich.table import Table

    from dataflow_tools.tools import TOOLS

    table = Table(title="DataFlow Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    for spec in TOOLS.values():
        table.add_row(spec.name, spec.description)
    console.print(table)


if __name__ == "__main__":
    cli()
