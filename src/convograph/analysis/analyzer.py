"""Conversation analyzer.

Chains extraction, deduplication, relationship derivation and insight
synthesis, then folds the result into a caller-owned GraphStore.
"""

import logging
from typing import Iterable

from convograph.analysis.dedupe import dedupe_entities, dedupe_relationships
from convograph.analysis.extractor import PatternExtractor
from convograph.analysis.insights import synthesize_insights
from convograph.analysis.models import (
    AnalysisResult,
    Conversation,
    Entity,
    GraphDelta,
    Relationship,
)
from convograph.analysis.relationships import RelationshipDeriver
from convograph.config import AnalyzerConfig
from convograph.memory.graph_store import GraphStore, normalize_id
from convograph.memory.models import EdgeInput, NodeInput

logger = logging.getLogger(__name__)


def entity_to_node(entity: Entity) -> NodeInput:
    return NodeInput(
        id=normalize_id(entity.text),
        type=entity.type,
        label=entity.text,
        properties={"confidence": entity.confidence, "context": entity.context},
    )


def relationship_to_edge(relationship: Relationship) -> EdgeInput:
    return EdgeInput(
        source=normalize_id(relationship.source),
        target=normalize_id(relationship.target),
        type=relationship.type,
        weight=relationship.strength,
    )


class ConversationAnalyzer:
    """Turn conversations into entities, relationships and graph updates.

    Args:
        graph: Store that receives the projected nodes and edges.
        config: Analyzer configuration shared by every stage.
    """

    def __init__(
        self,
        graph: GraphStore,
        config: AnalyzerConfig | None = None,
    ) -> None:
        self.graph = graph
        self.config = config or AnalyzerConfig()
        self.extractor = PatternExtractor(self.config)
        self.deriver = RelationshipDeriver(self.config)

    def analyze_conversation(self, conversation: Conversation) -> AnalysisResult:
        """Analyze one conversation and merge it into the graph.

        Args:
            conversation: Conversation to analyze.

        Returns:
            AnalysisResult with final entities, relationships, insights and
            the stored nodes and edges.
        """
        entities = dedupe_entities(self.extractor.extract(conversation))
        relationships = dedupe_relationships(
            self.deriver.derive(conversation, entities)
        )
        insights = synthesize_insights(
            entities, relationships, top_n=self.config.top_discussed
        )

        nodes = [self.graph.add_node(entity_to_node(e)) for e in entities]
        edges = [self.graph.add_edge(relationship_to_edge(r)) for r in relationships]

        logger.info(
            "Analyzed conversation %s: %d entities, %d relationships.",
            conversation.id,
            len(entities),
            len(relationships),
        )

        return AnalysisResult(
            entities=entities,
            relationships=relationships,
            insights=insights,
            graph=GraphDelta(nodes=nodes, edges=edges),
        )

    def analyze_all(
        self, conversations: Iterable[Conversation | None]
    ) -> list[AnalysisResult]:
        """Analyze conversations in order, skipping any that were not supplied."""
        results = []
        for conversation in conversations:
            if conversation is None:
                logger.warning("Skipping missing conversation.")
                continue
            results.append(self.analyze_conversation(conversation))
        return results
