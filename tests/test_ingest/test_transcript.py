"""Tests for transcript segmentation."""

import pytest

from convograph.ingest.transcript import (
    TranscriptParser,
    determine_role,
    infer_topic,
)

TRANSCRIPT = """\
Page 1
Alice: I love Python and I work with Bob.
Assistant: That's great to hear about Python.
this continuation line is long enough to append
short
Bob: I joined the team in March 2023.
12
"""


@pytest.fixture
def parser(clock) -> TranscriptParser:
    return TranscriptParser(clock=clock)


class TestHelpers:
    @pytest.mark.parametrize(
        "speaker, role",
        [
            ("Claude", "assistant"),
            ("ASSISTANT", "assistant"),
            ("Chatbot", "assistant"),
            ("Sarah", "user"),
            ("Bob", "user"),
        ],
    )
    def test_determine_role(self, speaker, role):
        assert determine_role(speaker) == role

    @pytest.mark.parametrize(
        "text, topic",
        [
            ("We shipped new software today", "Software Development"),
            ("The UX review went well", "Design"),
            ("Our database is slow", "Data Analysis"),
            ("Hello there", "General Discussion"),
        ],
    )
    def test_infer_topic(self, text, topic):
        assert infer_topic(text) == topic


class TestParseText:
    def test_single_conversation(self, parser):
        conversations = parser.parse_text(TRANSCRIPT)

        assert len(conversations) == 1
        conversation = conversations[0]
        assert [m.role for m in conversation.messages] == [
            "user",
            "assistant",
            "user",
        ]
        assert conversation.messages[1].content.endswith("long enough to append")
        assert conversation.metadata.participants == ["Alice", "Bob"]
        assert conversation.messages[0].timestamp == "2024-01-15T10:00:00+00:00"
        assert conversation.messages[2].timestamp == "2024-01-15T10:02:00+00:00"

    def test_speaker_layouts(self, parser):
        text = "[Dana]: hello\nERIC: hi there\nFrank says: good morning\n"
        messages = parser.parse_text(text)[0].messages
        assert [m.content for m in messages] == ["hello", "hi there", "good morning"]

    def test_chunking(self, clock):
        conversations = TranscriptParser(chunk_size=2, clock=clock).parse_text(
            TRANSCRIPT
        )
        assert [c.id for c in conversations] == ["conv_1", "conv_2"]
        assert len(conversations[1].messages) == 1
        assert conversations[1].messages[0].timestamp == "2024-01-15T10:02:00+00:00"

    def test_nothing_recognized(self, parser):
        assert parser.parse_text("just some words\n42\n") == []

    def test_empty_text(self, parser):
        assert parser.parse_text("") == []


class TestParseFiles:
    def test_text_file(self, parser, tmp_path):
        path = tmp_path / "transcript.txt"
        path.write_text(TRANSCRIPT, encoding="utf-8")
        assert len(parser.parse_file(path)) == 1

    def test_unreadable_pdf(self, parser, tmp_path):
        assert parser.parse_pdf(tmp_path / "missing.pdf") == []
