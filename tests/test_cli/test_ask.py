"""Tests for the ask command."""

from unittest.mock import patch

import httpx
from convograph.cli.commands.ask import ask
from convograph.testing.fixtures import create_mock_llm_client


class TestAsk:
    @patch("convograph.cli.commands.ask.LLMClient")
    def test_answers_with_graph_insights(self, mock_cls, invoke, settings, saved_graph):
        llm = create_mock_llm_client("Sarah likes Python.")
        mock_cls.return_value = llm

        result, printed = invoke(ask, ["What does Sarah like?"])

        assert result.exit_code == 0
        assert "Knowledge graph contains 4 nodes and 2 edges." in printed
        assert "Sarah likes Python." in printed
        mock_cls.assert_called_once_with(
            base_url=settings.llm_base_url,
            timeout=settings.llm_timeout,
            api_key=None,
        )
        prompt = llm.complete.call_args.args[0]
        assert "Question: What does Sarah like?" in prompt

    @patch("convograph.cli.commands.ask.LLMClient")
    def test_llm_failure_is_reported(self, mock_cls, invoke, settings, saved_graph):
        llm = create_mock_llm_client()
        llm.complete.side_effect = httpx.ConnectError("refused")
        mock_cls.return_value = llm

        result, printed = invoke(ask, ["Anything?"])

        assert result.exit_code == 0
        assert "Error querying LLM: refused" in printed

    def test_invalid_base_url_exits(self, invoke, settings, saved_graph):
        settings.llm_base_url = "ftp://localhost/v1"
        result, printed = invoke(ask, ["Anything?"])
        assert result.exit_code == 1
        assert "http:// or https://" in printed

    @patch("convograph.cli.commands.ask.LLMClient")
    def test_unreachable_server_shows_insights_only(
        self, mock_cls, invoke, settings, saved_graph
    ):
        llm = create_mock_llm_client()
        llm.is_available.return_value = False
        mock_cls.return_value = llm

        result, printed = invoke(ask, ["Anything?"])

        assert result.exit_code == 0
        assert "not reachable" in printed
        assert "Knowledge graph contains 4 nodes" in printed
        llm.complete.assert_not_called()

    @patch("convograph.cli.commands.ask.LLMClient")
    def test_api_key_is_passed_through(self, mock_cls, invoke, settings, saved_graph):
        mock_cls.return_value = create_mock_llm_client()
        settings.llm_api_key = "secret"
        invoke(ask, ["Anything?"])
        assert mock_cls.call_args.kwargs["api_key"] == "secret"
