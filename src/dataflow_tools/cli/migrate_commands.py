"""CLI command for migrating Kafka Connect connectors."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from dataflow_tools.errors import InvalidInput
from dataflow_tools.migration.mapper import migrate_connectors

from .manifest_commands import write_output

console = Console()


@click.command()
@click.argument("connectors", type=click.File("r"))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the manifest to a file instead of stdout",
)
def migrate(connectors, output):
    """Migrate Kafka Connect connector JSON to a DataFlow manifest.

    CONNECTORS is a JSON file holding one connector object or an array of
    connectors, as returned by the Connect REST API ('-' reads stdin).

    Example: dataflow migrate connectors.json -o dataflow.yaml
    """
    try:
        text = migrate_connectors(connectors.read())
    except InvalidInput as e:
        console.print(f"[red]Migration failed:[/red] {escape(str(e))}")
        raise SystemExit(1)

    write_output(text, output)
