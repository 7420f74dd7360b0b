"""Data models for the knowledge graph store.

Pydantic models for nodes, edges, and the snapshot format used to move a
whole graph in and out of a GraphStore.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

NodeType = Literal["person", "topic", "preference", "fact", "event"]
EdgeType = Literal["mentions", "likes", "dislikes", "knows", "related_to", "discussed"]


class NodeInput(BaseModel):
    """A node as supplied by a caller, before the store stamps it."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Normalized identifier (e.g. 'next_js')")
    type: NodeType = Field(..., description="Entity type of the node")
    label: str = Field(..., description="Original surface text")
    properties: dict[str, Any] = Field(
        default_factory=dict, description="Free-form metadata such as confidence"
    )


class Node(NodeInput):
    """Represents a node in the knowledge graph."""

    timestamp: str = Field(..., description="ISO-8601 time of the last write")


class EdgeInput(BaseModel):
    """An edge as supplied by a caller; the store derives the id."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="ID of the source node")
    target: str = Field(..., description="ID of the target node")
    type: EdgeType = Field(..., description="Type of relationship")
    weight: float = Field(1.0, ge=0.0, le=1.0, description="Relationship strength")
    properties: dict[str, Any] = Field(default_factory=dict)


class Edge(EdgeInput):
    """Represents an edge in the knowledge graph."""

    id: str = Field(..., description="'{source}_{type}_{target}'")
    timestamp: str = Field(..., description="ISO-8601 time of the last write")


class GraphMetadata(BaseModel):
    """Bookkeeping kept alongside the node and edge maps."""

    created: str
    updated: str
    node_count: int = 0
    edge_count: int = 0


class GraphSnapshot(BaseModel):
    """Full export of a graph, suitable for JSON serialization."""

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)
    metadata: GraphMetadata | None = None


class GraphStats(BaseModel):
    """Statistics about the current state of the knowledge graph."""

    node_count: int
    edge_count: int
    node_types: list[str]
    edge_types: list[str]
