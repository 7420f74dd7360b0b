"""Tests for the sample conversation generator."""

from convograph.ingest.samples import SampleConversationGenerator


class TestSampleConversationGenerator:
    def test_default_count(self):
        conversations = SampleConversationGenerator().generate()
        assert [c.id for c in conversations] == ["conv_1", "conv_2", "conv_3"]
        assert conversations[1].metadata.participants == ["Sarah", "John", "Emma"]

    def test_count_is_capped(self):
        assert len(SampleConversationGenerator().generate(10)) == 5

    def test_zero_count(self):
        assert SampleConversationGenerator().generate(0) == []

    def test_timestamps_one_minute_apart(self):
        conversation = SampleConversationGenerator().generate(1)[0]
        stamps = [m.timestamp for m in conversation.messages[:2]]
        assert stamps == ["2024-01-15T10:00:00+00:00", "2024-01-15T10:01:00+00:00"]
        assert conversation.metadata.created == stamps[0]

    def test_custom_conversation(self):
        generator = SampleConversationGenerator()
        generator.generate(2)
        conversation = generator.custom(
            [("user", "I love Go."), ("assistant", "Nice.")], topic="Go"
        )
        assert conversation.id == "conv_3"
        assert [m.role for m in conversation.messages] == ["user", "assistant"]
        assert conversation.metadata.topic == "Go"
        assert conversation.metadata.participants == []
