"""CLI commands for generating and validating DataFlow manifests."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from dataflow_tools.errors import InvalidInput
from dataflow_tools.manifest.generator import generate_manifest
from dataflow_tools.manifest.validator import validate_manifest
from dataflow_tools.tools import VALID_MESSAGE

console = Console()
logger = logging.getLogger(__name__)


def write_output(text: str, output: Path | None) -> None:
    """Print ``text`` or write it to ``output``."""
    if output is None:
        click.echo(text, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text)
    logger.info(f"Wrote {output}")
    console.print(f"[green]Written to {escape(str(output))}[/green]")


@click.command()
@click.option("--source-type", required=True, help="Source type: kafka, postgresql, trino")
@click.option("--sink-type", required=True, help="Sink type: kafka, postgresql, trino")
@click.option("--source-config", help="Source settings as a JSON object")
@click.option("--sink-config", help="Sink settings as a JSON object")
@click.option("--transformations", help="Transformations as a JSON array")
@click.option("--name", help="Resource name (default: dataflow-example)")
@click.option("--namespace", help="Kubernetes namespace")
@click.option("--description", help="Description added as a header comment")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the manifest to a file instead of stdout",
)
@click.pass_obj
def generate(
    settings,
    source_type,
    sink_type,
    source_config,
    sink_config,
    transformations,
    name,
    namespace,
    description,
    output,
):
    """Generate a DataFlow manifest.

    Example: dataflow generate --source-type kafka --sink-type postgresql
    """
    if namespace is None and settings is not None:
        namespace = settings.default_namespace

    try:
        text = generate_manifest(
            source_type,
            sink_type,
            description=description,
            source_config=source_config,
            sink_config=sink_config,
            transformations=transformations,
            name=name,
            namespace=namespace,
        )
    except InvalidInput as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    write_output(text, output)


@click.command()
@click.argument("manifest", type=click.File("r"))
def validate(manifest):
    """Validate a DataFlow manifest file ('-' reads stdin)."""
    errors = validate_manifest(manifest.read())
    if errors:
        console.print("[red]Validation errors:[/red]")
        for error in errors:
            console.print(f"  - {escape(error)}")
        raise SystemExit(1)
    console.print(f"[green]{VALID_MESSAGE}[/green]")
