"""CLI interface for resdeps."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from resdeps.cli.commands.catalog import export, validate
from resdeps.cli.commands.graph import graph, stats
from resdeps.cli.commands.query import chain, deps, order, rdeps, show, tree
from resdeps.errors import ResolutionError
from resdeps.loader import load_catalog
from resdeps.resolution import DependencyGraph, ResourceCatalog
from resdeps.version import get_version_info, get_version_string

err_console = Console(stderr=True)

LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


@dataclass
class CliContext:
    """Catalog location and the catalog loaded from it on first use."""

    catalog_path: str | None
    _catalog: ResourceCatalog | None = field(default=None, repr=False)

    def catalog(self) -> ResourceCatalog:
        if self._catalog is None:
            if not self.catalog_path:
                msg = "No catalog given (use --catalog or RESDEPS_CATALOG)"
                raise click.UsageError(msg)
            self._catalog = load_catalog(self.catalog_path)
        return self._catalog

    def graph(self) -> DependencyGraph:
        return DependencyGraph(self.catalog())


def configure_logging(verbose: int) -> None:
    """Send log records to stderr through rich."""
    level = LOG_LEVELS.get(verbose, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


class ResdepsGroup(click.Group):
    """Click group that reports resolution errors instead of tracebacks."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except ResolutionError as e:
            err_console.print(
                f"[red]Error:[/red] {escape(str(e))}",
                style="bold",
                highlight=False,
                soft_wrap=True,
            )
            sys.exit(1)


@click.group(cls=ResdepsGroup)
@click.option(
    "--catalog",
    "-c",
    envvar="RESDEPS_CATALOG",
    type=click.Path(dir_okay=False),
    help="Catalog file (YAML or JSON)",
)
@click.option("--verbose", "-v", count=True, help="Increase log verbosity")
@click.pass_context
def cli(ctx: click.Context, catalog: str | None, verbose: int) -> None:
    """Inspect resources and their dependencies."""
    configure_logging(verbose)
    ctx.obj = CliContext(catalog_path=catalog)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print version info as JSON")
def version(as_json: bool) -> None:
    """Show version information."""
    if as_json:
        click.echo(json.dumps(get_version_info(), indent=2))
    else:
        click.echo(get_version_string())


cli.add_command(show)
cli.add_command(chain)
cli.add_command(tree)
cli.add_command(order)
cli.add_command(deps)
cli.add_command(rdeps)
cli.add_command(graph)
cli.add_command(stats)
cli.add_command(validate)
cli.add_command(export)


if __name__ == "__main__":
    cli()
