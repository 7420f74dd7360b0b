"""Knowledge graph store, its models, and snapshot persistence."""

from convograph.memory.clock import Clock, FixedClock, utc_now
from convograph.memory.graph_store import GraphStore, edge_id_for, normalize_id
from convograph.memory.models import (
    Edge,
    EdgeInput,
    GraphMetadata,
    GraphSnapshot,
    GraphStats,
    Node,
    NodeInput,
)
from convograph.memory.persistence import GraphFileError, load_graph, save_graph

__all__ = [
    "Clock",
    "Edge",
    "EdgeInput",
    "FixedClock",
    "GraphFileError",
    "GraphMetadata",
    "GraphSnapshot",
    "GraphStats",
    "GraphStore",
    "Node",
    "NodeInput",
    "edge_id_for",
    "load_graph",
    "normalize_id",
    "save_graph",
    "utc_now",
]
