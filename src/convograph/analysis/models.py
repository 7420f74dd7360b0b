"""Data models for conversations and the analysis pipeline."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from convograph.memory.models import Edge, Node, NodeType

Role = Literal["user", "assistant"]


class Message(BaseModel):
    """A single chat turn."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(..., description="'user' is mined, 'assistant' is not")
    content: str
    timestamp: str


class ConversationMetadata(BaseModel):
    created: str
    topic: str | None = None
    participants: list[str] = Field(
        default_factory=list, description="Declared speakers, first is the owner"
    )


class Conversation(BaseModel):
    """An ordered transcript plus its metadata."""

    id: str
    messages: list[Message] = Field(default_factory=list)
    metadata: ConversationMetadata


class Entity(BaseModel):
    """A typed, scored mention extracted from a message."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Surface form as it appeared")
    type: NodeType
    confidence: float = Field(..., ge=0.0, le=1.0)
    context: str = Field("", description="Originating message text")


class Relationship(BaseModel):
    """A directed, scored link between two labels."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str = Field(..., alias="from", description="Subject label")
    target: str = Field(..., alias="to", description="Object label")
    type: Literal["mentions", "likes", "dislikes", "knows", "related_to", "discussed"]
    strength: float = Field(..., ge=0.0, le=1.0)


class GraphDelta(BaseModel):
    """Nodes and edges merged into the store by one analysis run."""

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    entities: list[Entity]
    relationships: list[Relationship]
    insights: list[str]
    graph: GraphDelta
