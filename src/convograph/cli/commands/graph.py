"""Read-side queries against the saved knowledge graph."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from convograph.cli.output import create_edge_table, create_node_table
from convograph.config import Settings
from convograph.memory.graph_store import GraphStore
from convograph.memory.persistence import GraphFileError, load_graph, save_graph


def open_saved_graph(settings: Settings, console: Console) -> GraphStore:
    """Load the snapshot named by ``settings`` or exit with an error."""
    store = GraphStore()
    try:
        found = load_graph(store, settings.graph_path)
    except GraphFileError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    if not found:
        console.print(
            f"[yellow]No saved graph at {settings.graph_path}. "
            "Run 'convograph analyze' first.[/yellow]"
        )
    return store


def _labels(store: GraphStore) -> dict[str, str]:
    return {node.id: node.label for node in store.export_graph().nodes}


@click.group("graph")
def graph_group() -> None:
    """Query the saved knowledge graph."""
    pass


@graph_group.command()
@click.pass_context
def stats(ctx: click.Context) -> None:
    """Show node and edge counts."""
    console: Console = ctx.obj["console"]
    store = open_saved_graph(ctx.obj["settings"], console)
    summary = store.get_stats()

    console.print(
        f"[cyan]Knowledge Graph:[/cyan] {summary.node_count} nodes, "
        f"{summary.edge_count} edges"
    )
    if summary.node_types:
        console.print(f"  Node types: {', '.join(summary.node_types)}")
    if summary.edge_types:
        console.print(f"  Edge types: {', '.join(summary.edge_types)}")


@graph_group.command()
@click.option("--limit", default=10, show_default=True, help="Rows to show.")
@click.pass_context
def top(ctx: click.Context, limit: int) -> None:
    """List the most connected nodes."""
    console: Console = ctx.obj["console"]
    store = open_saved_graph(ctx.obj["settings"], console)
    console.print(
        create_node_table("Most Connected", store.get_most_connected_nodes(limit))
    )


@graph_group.command()
@click.option("--limit", default=10, show_default=True, help="Rows to show.")
@click.pass_context
def strongest(ctx: click.Context, limit: int) -> None:
    """List the heaviest edges."""
    console: Console = ctx.obj["console"]
    store = open_saved_graph(ctx.obj["settings"], console)
    console.print(
        create_edge_table(
            "Strongest Connections",
            store.get_strongest_connections(limit),
            _labels(store),
        )
    )


@graph_group.command()
@click.pass_context
def clusters(ctx: click.Context) -> None:
    """List connected groups of nodes."""
    console: Console = ctx.obj["console"]
    store = open_saved_graph(ctx.obj["settings"], console)
    labels = _labels(store)
    found = store.find_clusters()

    if not found:
        console.print("[yellow]No clusters found.[/yellow]")
        return

    table = Table(title="Clusters")
    table.add_column("#", justify="right")
    table.add_column("Size", justify="right", style="magenta")
    table.add_column("Members", style="cyan")
    for i, cluster in enumerate(found, start=1):
        members = ", ".join(labels[node_id] for node_id in cluster[:8])
        if len(cluster) > 8:
            members += ", ..."
        table.add_row(str(i), str(len(cluster)), members)
    console.print(table)


@graph_group.command()
@click.argument("start")
@click.argument("end")
@click.option("--max-depth", default=5, show_default=True, help="Max nodes in path.")
@click.pass_context
def path(ctx: click.Context, start: str, end: str, max_depth: int) -> None:
    """Find a shortest path between two node ids."""
    console: Console = ctx.obj["console"]
    store = open_saved_graph(ctx.obj["settings"], console)
    found = store.find_path(start, end, max_depth=max_depth)

    if found is None:
        console.print(f"[yellow]No path from {start} to {end}.[/yellow]")
        ctx.exit(1)

    labels = _labels(store)
    console.print(" → ".join(labels.get(node_id, node_id) for node_id in found))


@graph_group.command("export")
@click.argument("output", type=click.Path(path_type=Path))
@click.pass_context
def export_graph(ctx: click.Context, output: Path) -> None:
    """Write the saved graph snapshot to OUTPUT."""
    console: Console = ctx.obj["console"]
    settings: Settings = ctx.obj["settings"]
    store = GraphStore()
    try:
        found = load_graph(store, settings.graph_path)
    except GraphFileError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    if not found:
        console.print(f"[red]Error:[/red] no saved graph at {settings.graph_path}")
        sys.exit(1)

    save_graph(store, output)
    console.print(f"[green]Exported[/green] {len(store)} nodes to {output}")
