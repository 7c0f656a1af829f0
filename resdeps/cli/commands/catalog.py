"""Catalog maintenance commands."""

import sys

import click
from rich.console import Console

from resdeps.loader import FORMATS, dump_catalog
from resdeps.resolution import CHAIN_SEPARATOR

console = Console()


@click.command()
@click.pass_obj
def validate(obj) -> None:
    """Check the catalog for unknown requirements and cycles."""
    catalog = obj.catalog()
    dangling = catalog.dangling_requirements()
    cycles = obj.graph().find_cycles()

    for resource, requirement in dangling:
        console.print(f"[yellow]Unknown requirement:[/yellow] {resource} requires {requirement}")
    for cycle in cycles:
        console.print(f"[red]Cycle:[/red] {CHAIN_SEPARATOR.join(cycle)}")

    if dangling or cycles:
        console.print(
            f"[red]✗[/red] {len(dangling)} unknown requirement(s), {len(cycles)} cycle(s)",
        )
        sys.exit(1)

    console.print(f"[green]✓[/green] {len(catalog)} resources, no problems found")


@click.command()
@click.option(
    "--format",
    "-f",
    type=click.Choice(FORMATS),
    default="yaml",
    help="Output format",
)
@click.option("--output", "-o", type=click.Path(), help="Output file")
@click.option("--metadata/--no-metadata", default=False, help="Include a metadata section")
@click.pass_obj
def export(obj, format, output, metadata) -> None:
    """Write the loaded catalog back out as YAML or JSON."""
    text = dump_catalog(obj.catalog(), format, output, include_metadata=metadata)
    if output:
        click.echo(f"Catalog written to: {output}")
    else:
        click.echo(text.rstrip("\n"))
