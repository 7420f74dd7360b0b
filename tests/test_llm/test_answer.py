"""Tests for graph context and answer composition."""

import httpx

from convograph.llm.answer import AnswerComposer, build_prompt, build_summary_prompt
from convograph.llm.client import LLMResponseError
from convograph.llm.context import build_graph_insights
from convograph.testing.factories import make_edge_input, make_node_input
from convograph.testing.fixtures import create_mock_llm_client, create_stub_llm_client


def _populate(store) -> None:
    store.add_node(make_node_input(id="sarah", type="person", label="Sarah"))
    store.add_node(make_node_input(id="python", type="topic", label="Python"))
    store.add_node(make_node_input(id="go", type="topic", label="Go"))
    store.add_edge(make_edge_input(source="sarah", target="python", type="likes"))
    store.add_edge(make_edge_input(source="sarah", target="go", type="mentions"))


class TestBuildGraphInsights:
    def test_empty_graph(self, store):
        assert build_graph_insights(store) == []

    def test_lines(self, store):
        _populate(store)
        insights = build_graph_insights(store, limit=1)
        assert insights == [
            "Knowledge graph contains 3 nodes and 2 edges.",
            "Most connected entities: Sarah (2 connections)",
            "Entity distribution: 1 person(s), 2 topic(s)",
        ]


class TestBuildPrompt:
    def test_numbered_insights_and_context(self):
        prompt = build_prompt("What does Sarah like?", ["a", "b"], context="ctx")
        assert "1. a\n2. b" in prompt
        assert "Context: ctx" in prompt
        assert "Question: What does Sarah like?" in prompt

    def test_without_insights(self):
        prompt = build_prompt("Why?", [])
        assert prompt.startswith("Question: Why?")

    def test_summary_prompt_truncates(self, store):
        for i in range(25):
            store.add_node(make_node_input(id=f"n{i}"))
        prompt = build_summary_prompt(store)
        assert "Nodes (25):" in prompt
        assert "... and 5 more" in prompt
        assert "Edges (0):" in prompt


class TestAnswerComposer:
    def test_ask(self):
        llm = create_mock_llm_client("Sarah likes Python.")
        answer = AnswerComposer(llm, model="m").ask("Likes?", ["insight"])

        assert answer.answer == "Sarah likes Python."
        assert answer.confidence == 0.9
        assert answer.sources == ["insight"]
        prompt = llm.complete.call_args.args[0]
        assert llm.complete.call_args.kwargs["model"] == "m"
        assert "1. insight" in prompt

    def test_ask_degrades_on_transport_error(self):
        llm = create_mock_llm_client()
        llm.complete.side_effect = httpx.ConnectError("refused")
        answer = AnswerComposer(llm).ask("Likes?", ["insight"])

        assert answer.confidence == 0.0
        assert answer.sources == []
        assert "Error querying LLM" in answer.answer

    def test_summarize_graph(self, store):
        _populate(store)
        llm = create_mock_llm_client("A small graph.")
        assert AnswerComposer(llm).summarize_graph(store) == "A small graph."
        prompt = llm.complete.call_args.args[0]
        assert "- Sarah (person)" in prompt
        assert "sarah --[likes]--> python" in prompt

    def test_ask_degrades_on_malformed_reply(self):
        llm = create_mock_llm_client()
        llm.complete.side_effect = LLMResponseError("Malformed completion response")
        answer = AnswerComposer(llm).ask("Likes?", [])
        assert answer.confidence == 0.0
        assert answer.answer.startswith("Error querying LLM")

    def test_ask_end_to_end_over_http(self, store):
        _populate(store)
        client, requests = create_stub_llm_client("Sarah likes Python.")
        insights = build_graph_insights(store)

        answer = AnswerComposer(client, model="local").ask("Likes?", insights)

        assert answer.answer == "Sarah likes Python."
        assert answer.sources == insights
        body = requests[0]["json"]
        assert body["model"] == "local"
        assert "Knowledge graph contains 3 nodes" in body["messages"][0]["content"]

    def test_summarize_graph_failure(self, store):
        client, _ = create_stub_llm_client(status_code=500)
        assert AnswerComposer(client).summarize_graph(store).startswith(
            "Error summarizing graph"
        )
