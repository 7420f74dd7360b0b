"""In-memory knowledge graph store.

Nodes and edges live in plain id-keyed maps, which are the source of truth.
A NetworkX multigraph keyed by edge id mirrors the edge map as an adjacency
index so neighbor lookups do not rescan every edge.
"""

import copy
import logging
import re
from collections import deque
from typing import Iterable, Iterator

import networkx as nx

from convograph.memory.clock import Clock, isoformat, utc_now
from convograph.memory.models import (
    Edge,
    EdgeInput,
    GraphMetadata,
    GraphSnapshot,
    GraphStats,
    Node,
    NodeInput,
)

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize_id(text: str) -> str:
    """Derive a node id from label text.

    Lowercases and collapses every run of non-alphanumeric characters to a
    single underscore, e.g. ``"Next.js"`` becomes ``"next_js"``.
    """
    return _NON_ALNUM.sub("_", text.lower())


def edge_id_for(source: str, edge_type: str, target: str) -> str:
    """Build the deterministic id of an edge."""
    return f"{source}_{edge_type}_{target}"


class GraphStore:
    """Mutable node/edge repository with traversal and ranking queries.

    The store assumes a single writer. Readers running alongside a writer
    should work on ``export_graph()`` snapshots.

    Args:
        clock: Callable returning the current time; used to stamp writes.
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self.clock = clock
        self._nodes: dict[str, Node] = {}
        self._edges: dict[str, Edge] = {}
        self._adjacency = nx.MultiGraph()
        now = isoformat(clock)
        self._metadata = GraphMetadata(created=now, updated=now)

    @property
    def metadata(self) -> GraphMetadata:
        """A copy of the current graph metadata."""
        return self._metadata.model_copy()

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_node(self, node: NodeInput) -> Node:
        """Insert or overwrite a node by id.

        Args:
            node: The node to store. Any timestamp it carries is replaced.

        Returns:
            The stored node.
        """
        stored = Node(
            id=node.id,
            type=node.type,
            label=node.label,
            properties=copy.deepcopy(node.properties),
            timestamp=isoformat(self.clock),
        )
        self._nodes[stored.id] = stored
        self._update_metadata()
        return stored

    def add_edge(self, edge: EdgeInput) -> Edge:
        """Insert or overwrite an edge.

        The id is derived from source, type and target. Source and target
        are not required to exist as nodes yet.

        Args:
            edge: The edge to store.

        Returns:
            The stored edge.
        """
        stored = Edge(
            id=edge_id_for(edge.source, edge.type, edge.target),
            source=edge.source,
            target=edge.target,
            type=edge.type,
            weight=edge.weight,
            properties=copy.deepcopy(edge.properties),
            timestamp=isoformat(self.clock),
        )
        self._put_edge(stored)
        self._update_metadata()
        return stored

    def import_graph(self, nodes: Iterable[Node], edges: Iterable[Edge]) -> None:
        """Replace the whole graph with the given nodes and edges.

        Stored timestamps are kept as given.
        """
        self._nodes.clear()
        self._edges.clear()
        self._adjacency.clear()

        for node in nodes:
            self._nodes[node.id] = node.model_copy(deep=True)
        for edge in edges:
            self._put_edge(edge.model_copy(deep=True))

        self._update_metadata()
        logger.info(
            "Imported graph with %d nodes and %d edges.",
            len(self._nodes),
            len(self._edges),
        )

    def clear(self) -> None:
        """Remove every node and edge."""
        self._nodes.clear()
        self._edges.clear()
        self._adjacency.clear()
        self._update_metadata()

    def _put_edge(self, edge: Edge) -> None:
        # An overwritten id may have joined different endpoints.
        old = self._edges.get(edge.id)
        if old is not None:
            self._adjacency.remove_edge(old.source, old.target, key=old.id)
        self._edges[edge.id] = edge
        self._adjacency.add_edge(edge.source, edge.target, key=edge.id)

    def _update_metadata(self) -> None:
        self._metadata = GraphMetadata(
            created=self._metadata.created,
            updated=isoformat(self.clock),
            node_count=len(self._nodes),
            edge_count=len(self._edges),
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_node(self, node_id: str) -> Node | None:
        return self._nodes.get(node_id)

    def get_edge(self, edge_id: str) -> Edge | None:
        return self._edges.get(edge_id)

    def get_nodes_by_type(self, node_type: str) -> list[Node]:
        return [node for node in self._nodes.values() if node.type == node_type]

    def get_edges_by_type(self, edge_type: str) -> list[Edge]:
        return [edge for edge in self._edges.values() if edge.type == edge_type]

    def get_edges_for_node(self, node_id: str) -> list[Edge]:
        """Return every edge with ``node_id`` as source or target."""
        if not self._adjacency.has_node(node_id):
            return []
        return [
            self._edges[key]
            for keyed in self._adjacency.adj[node_id].values()
            for key in keyed
        ]

    def get_connected_nodes(self, node_id: str) -> list[Node]:
        """Return the distinct nodes one edge away, in either direction.

        Neighbor ids without a stored node are skipped.
        """
        return [self._nodes[neighbor] for neighbor in self._neighbor_ids(node_id)]

    def _neighbor_ids(self, node_id: str) -> Iterator[str]:
        if not self._adjacency.has_node(node_id):
            return iter(())
        return (n for n in self._adjacency.adj[node_id] if n in self._nodes)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def find_path(
        self, start_id: str, end_id: str, max_depth: int = 5
    ) -> list[str] | None:
        """Breadth-first search for a shortest undirected path.

        Args:
            start_id: Node to start from.
            end_id: Node to reach.
            max_depth: Maximum number of nodes in the returned path.

        Returns:
            The node ids along the path, or None if the nodes are unknown or
            no path fits within ``max_depth``.
        """
        if start_id not in self._nodes or end_id not in self._nodes:
            return None

        visited: set[str] = set()
        queue: deque[tuple[str, list[str]]] = deque([(start_id, [start_id])])

        while queue:
            node_id, path = queue.popleft()

            if node_id == end_id:
                return path

            if len(path) >= max_depth or node_id in visited:
                continue

            visited.add(node_id)

            for neighbor in self._neighbor_ids(node_id):
                if neighbor not in visited:
                    queue.append((neighbor, path + [neighbor]))

        return None

    def find_clusters(self) -> list[list[str]]:
        """Group nodes into connected components.

        Returns:
            One id list per component with more than one member.
        """
        visited: set[str] = set()
        clusters: list[list[str]] = []

        for node_id in self._nodes:
            if node_id in visited:
                continue
            cluster = self._explore_cluster(node_id, visited)
            if len(cluster) > 1:
                clusters.append(cluster)

        return clusters

    def _explore_cluster(self, start_id: str, visited: set[str]) -> list[str]:
        cluster: list[str] = []
        queue = deque([start_id])

        while queue:
            node_id = queue.popleft()
            if node_id in visited:
                continue

            visited.add(node_id)
            cluster.append(node_id)

            for neighbor in self._neighbor_ids(node_id):
                if neighbor not in visited:
                    queue.append(neighbor)

        return cluster

    # ------------------------------------------------------------------
    # Ranking
    # ------------------------------------------------------------------

    def get_strongest_connections(self, limit: int = 10) -> list[Edge]:
        """Return edges by weight, heaviest first."""
        ranked = sorted(self._edges.values(), key=lambda e: e.weight, reverse=True)
        return ranked[:limit]

    def get_node_degree(self, node_id: str) -> int:
        return len(self.get_edges_for_node(node_id))

    def get_most_connected_nodes(self, limit: int = 10) -> list[tuple[Node, int]]:
        """Return (node, degree) pairs, highest degree first."""
        degrees = [
            (node, self.get_node_degree(node.id)) for node in self._nodes.values()
        ]
        degrees.sort(key=lambda pair: pair[1], reverse=True)
        return degrees[:limit]

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def export_graph(self) -> GraphSnapshot:
        """Return a detached copy of the whole graph."""
        return GraphSnapshot(
            nodes=[node.model_copy(deep=True) for node in self._nodes.values()],
            edges=[edge.model_copy(deep=True) for edge in self._edges.values()],
            metadata=self.metadata,
        )

    def get_stats(self) -> GraphStats:
        """Return current graph statistics."""
        return GraphStats(
            node_count=len(self._nodes),
            edge_count=len(self._edges),
            node_types=sorted({node.type for node in self._nodes.values()}),
            edge_types=sorted({edge.type for edge in self._edges.values()}),
        )
