"""Deterministic extraction of entities and relationships from conversations."""

from convograph.analysis.analyzer import ConversationAnalyzer
from convograph.analysis.dedupe import dedupe_entities, dedupe_relationships
from convograph.analysis.extractor import PatternExtractor
from convograph.analysis.insights import synthesize_insights
from convograph.analysis.models import (
    AnalysisResult,
    Conversation,
    ConversationMetadata,
    Entity,
    GraphDelta,
    Message,
    Relationship,
)
from convograph.analysis.relationships import RelationshipDeriver

__all__ = [
    "AnalysisResult",
    "Conversation",
    "ConversationAnalyzer",
    "ConversationMetadata",
    "Entity",
    "GraphDelta",
    "Message",
    "PatternExtractor",
    "Relationship",
    "RelationshipDeriver",
    "dedupe_entities",
    "dedupe_relationships",
    "synthesize_insights",
]
