"""Conversation analysis into an in-memory knowledge graph."""

__version__ = "0.1.0"
