"""Whole-graph CLI commands."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

console = Console()


@click.command()
@click.argument("resource", required=False)
@click.option("--output", "-o", type=click.Path(), help="Output file for graph")
@click.pass_obj
def graph(obj, resource, output) -> None:
    """Generate a DOT dependency graph, optionally rooted at RESOURCE."""
    output_text = obj.graph().export_dot(resource)

    if output:
        Path(output).write_text(output_text + "\n")
        click.echo(f"Graph written to: {output}")
        click.echo(f"Visualize with: dot -Tpng {output} -o graph.png")
    else:
        click.echo(output_text)


@click.command()
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.pass_obj
def stats(obj, format) -> None:
    """Show catalog and dependency graph statistics."""
    statistics = obj.graph().get_statistics()

    if format == "json":
        click.echo(json.dumps(statistics, indent=2))
        return

    table = Table(title="Dependency Graph Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    for key, value in statistics.items():
        label = key.replace("_", " ").capitalize()
        table.add_row(label, "n/a" if value is None else str(value))
    console.print(table)
