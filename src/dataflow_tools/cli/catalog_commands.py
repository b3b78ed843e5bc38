"""CLI commands for browsing the connector and transformation catalogs."""

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dataflow_tools.reference.catalog import (
    connector_catalog,
    list_connectors,
    list_transformations,
    transformation_catalog,
)

console = Console()


@click.group()
def catalog():
    """Show supported connectors and transformations."""


@catalog.command()
@click.option("--json", "as_json", is_flag=True, help="Print the raw JSON catalog")
def connectors(as_json):
    """List supported sources and sinks with their fields."""
    if as_json:
        click.echo(list_connectors())
        return

    data = connector_catalog()
    for role, title in (("sources", "Sources"), ("sinks", "Sinks")):
        table = Table(title=title)
        table.add_column("Type", style="cyan", no_wrap=True)
        table.add_column("Description")
        table.add_column("Required")
        table.add_column("Optional", style="dim")
        for name, info in data.get(role, {}).items():
            table.add_row(
                name,
                info.get("description", ""),
                ", ".join(info.get("required_fields", [])),
                ", ".join(info.get("optional_fields", [])),
            )
        console.print(table)


@catalog.command()
@click.option("--json", "as_json", is_flag=True, help="Print the raw JSON catalog")
def transformations(as_json):
    """List transformations with an example for each."""
    if as_json:
        click.echo(list_transformations())
        return

    table = Table(title="Transformations")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Example", style="dim")
    for name, info in transformation_catalog().items():
        table.add_row(name, info.get("description", ""), escape(json.dumps(info.get("example", {}))))
    console.print(table)
