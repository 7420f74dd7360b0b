"""Shared fixtures for CLI command tests."""

from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from convograph.config import Settings
from convograph.memory.graph_store import GraphStore
from convograph.memory.persistence import save_graph
from convograph.testing.factories import make_edge_input, make_node_input


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(data_dir=tmp_path)


@pytest.fixture
def saved_graph(settings) -> GraphStore:
    """A small saved graph: Sarah likes Python, Python relates to Go."""
    store = GraphStore()
    store.add_node(make_node_input(id="sarah", type="person", label="Sarah"))
    store.add_node(make_node_input(id="python", label="Python"))
    store.add_node(make_node_input(id="go", label="Go"))
    store.add_node(make_node_input(id="php", label="PHP"))
    store.add_edge(
        make_edge_input(source="sarah", target="python", type="likes", weight=0.9)
    )
    store.add_edge(make_edge_input(source="python", target="go", weight=0.6))
    save_graph(store, settings.graph_path)
    return store


@pytest.fixture
def invoke(settings):
    """Invoke a command with settings and a mock console in context.

    Returns the click result and the joined console.print calls.
    """

    def _invoke(command, args: list[str]):
        console = MagicMock()
        result = CliRunner().invoke(
            command, args, obj={"settings": settings, "console": console}
        )
        return result, " ".join(str(c) for c in console.print.call_args_list)

    return _invoke
