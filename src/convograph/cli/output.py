"""Rich output formatting helpers."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from convograph.memory.models import Edge, Node


def print_banner(console: Console, version: str) -> None:
    """Print the convograph startup banner.

    Args:
        console: Rich console for output.
        version: Package version string.
    """
    console.print(
        Panel(
            f"[bold cyan]convograph[/bold cyan] v{version}",
            subtitle="Conversation Knowledge Graph",
            border_style="cyan",
        )
    )


def print_insights(console: Console, title: str, insights: list[str]) -> None:
    """Print a titled bullet list of insight lines."""
    console.print(f"[bold cyan]{title}[/bold cyan]")
    if not insights:
        console.print("  [dim]No insights.[/dim]")
    for insight in insights:
        console.print(f"  • {insight}")


def create_node_table(title: str, rows: list[tuple[Node, int]]) -> Table:
    """Create a table of nodes with their degree.

    Args:
        title: Table title.
        rows: (node, degree) pairs.

    Returns:
        Configured Rich Table.
    """
    table = Table(title=title)
    table.add_column("Label", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Degree", justify="right")
    for node, degree in rows:
        table.add_row(node.label, node.type, str(degree))
    return table


def create_edge_table(title: str, edges: list[Edge], labels: dict[str, str]) -> Table:
    """Create a table of edges.

    Args:
        title: Table title.
        edges: Edges to list.
        labels: Node id to label lookup; unknown ids are shown raw.

    Returns:
        Configured Rich Table.
    """
    table = Table(title=title)
    table.add_column("Source", style="cyan")
    table.add_column("Relation", style="magenta")
    table.add_column("Target", style="cyan")
    table.add_column("Weight", justify="right")
    for edge in edges:
        table.add_row(
            labels.get(edge.source, edge.source),
            edge.type,
            labels.get(edge.target, edge.target),
            f"{edge.weight:.2f}",
        )
    return table
