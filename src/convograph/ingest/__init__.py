"""Conversation sources: canned samples and transcript segmentation."""

from convograph.ingest.samples import SampleConversationGenerator
from convograph.ingest.transcript import TranscriptParser, determine_role, infer_topic

__all__ = [
    "SampleConversationGenerator",
    "TranscriptParser",
    "determine_role",
    "infer_topic",
]
