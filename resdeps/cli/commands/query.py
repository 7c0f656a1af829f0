"""Resource query commands.

The four core queries write plain lines to stdout so their output can be
compared byte for byte or piped into other tools.
"""

import click


@click.command()
@click.argument("resource")
@click.pass_obj
def show(obj, resource: str) -> None:
    """Show the catalog entry of RESOURCE."""
    obj.catalog().show_resource_entry(resource)


@click.command()
@click.argument("resource")
@click.pass_obj
def chain(obj, resource: str) -> None:
    """List progressive dependency chains starting at RESOURCE.

    Every route to a leaf is listed, so graphs with many shared
    dependencies can produce a very large output; use "order" for a
    listing with each resource once.

    Example:
        resdeps -c catalog.yaml chain c

    """
    obj.graph().list_direct_dependencies(resource)


@click.command()
@click.argument("resource")
@click.pass_obj
def tree(obj, resource: str) -> None:
    """Print each chain from RESOURCE down to a leaf on one line.

    One line is printed per route to a leaf, so shared dependencies
    multiply the line count; use "order" to list each resource once.
    """
    obj.graph().list_dependency_tree(resource)


@click.command()
@click.argument("resource")
@click.pass_obj
def order(obj, resource: str) -> None:
    """List everything RESOURCE needs in install order, RESOURCE last."""
    obj.graph().list_dependency_tree_top_down(resource)


@click.command()
@click.argument("resource")
@click.pass_obj
def deps(obj, resource: str) -> None:
    """List the transitive requirements of RESOURCE."""
    for dependency in obj.graph().get_dependencies(resource):
        click.echo(dependency)


@click.command()
@click.argument("resource")
@click.pass_obj
def rdeps(obj, resource: str) -> None:
    """List resources that directly or transitively require RESOURCE."""
    for dependent in obj.graph().get_dependents(resource):
        click.echo(dependent)
