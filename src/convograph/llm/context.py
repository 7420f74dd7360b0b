"""Graph-derived context lines handed to the answer layer."""

from collections import Counter

from convograph.memory.graph_store import GraphStore


def build_graph_insights(store: GraphStore, limit: int = 5) -> list[str]:
    """Summarize a graph as a few plain-text lines.

    Args:
        store: Graph to summarize.
        limit: How many of the most connected nodes to list.

    Returns:
        Insight lines; empty for an empty graph.
    """
    stats = store.get_stats()
    if stats.node_count == 0 and stats.edge_count == 0:
        return []

    insights = [
        f"Knowledge graph contains {stats.node_count} nodes and "
        f"{stats.edge_count} edges."
    ]

    top = store.get_most_connected_nodes(limit)
    if top:
        connected = ", ".join(
            f"{node.label} ({degree} connections)" for node, degree in top
        )
        insights.append(f"Most connected entities: {connected}")

    snapshot = store.export_graph()
    distribution = Counter(node.type for node in snapshot.nodes)
    if distribution:
        parts = ", ".join(f"{count} {kind}(s)" for kind, count in distribution.items())
        insights.append(f"Entity distribution: {parts}")

    return insights
