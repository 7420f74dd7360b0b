"""Shared test utilities, fixtures, and factories."""

from convograph.testing.factories import (
    make_conversation,
    make_edge_input,
    make_entity,
    make_message,
    make_node_input,
    make_relationship,
)
from convograph.testing.fixtures import create_mock_llm_client, create_stub_llm_client

__all__ = [
    "create_mock_llm_client",
    "create_stub_llm_client",
    "make_conversation",
    "make_edge_input",
    "make_entity",
    "make_message",
    "make_node_input",
    "make_relationship",
]
