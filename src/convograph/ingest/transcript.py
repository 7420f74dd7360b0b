"""Transcript ingestion.

Segments a plain-text (or PDF) transcript into Conversations. Speaker
lines are recognized by a few common layouts; continuation lines are
folded into the previous message.
"""

import logging
import re
from datetime import datetime, timedelta
from pathlib import Path

import pypdf
from pypdf.errors import PyPdfError

from convograph.analysis.models import Conversation, ConversationMetadata, Message
from convograph.memory.clock import Clock, utc_now

logger = logging.getLogger(__name__)

SPEAKER_PATTERNS = [
    re.compile(r"^([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)\s*[:：]\s*(.+)$"),  # Name: msg
    re.compile(r"^([A-Z]+)\s*[:：]\s*(.+)$"),  # NAME: msg
    re.compile(r"^\[([^\]]+)\]\s*[:：]?\s*(.+)$"),  # [Name]: msg
    re.compile(r"^([A-Z][a-z]+)\s+says?\s*[:：]?\s*(.+)$", re.IGNORECASE),
]
_SKIP_LINE = re.compile(r"^(?:page\s+\d+.*|\d+)$", re.IGNORECASE)

ASSISTANT_KEYWORDS = ("assistant", "ai", "bot", "system", "claude", "gpt", "model")

TOPIC_KEYWORDS: list[tuple[tuple[str, ...], str]] = [
    (("code", "programming", "software", "development"), "Software Development"),
    (("design", "ui", "ux", "interface"), "Design"),
    (("data", "analysis", "analytics", "database"), "Data Analysis"),
    (("ai", "machine learning", "ml", "model"), "AI/ML"),
    (("project", "management", "planning"), "Project Management"),
    (("business", "strategy", "market"), "Business"),
]
DEFAULT_TOPIC = "General Discussion"


def determine_role(speaker: str) -> str:
    """Classify a speaker name as 'assistant' or 'user'."""
    lowered = speaker.lower()
    if any(keyword in lowered for keyword in ASSISTANT_KEYWORDS):
        return "assistant"
    return "user"


def infer_topic(text: str) -> str:
    """Pick a topic label from the first keyword table row that matches."""
    lowered = text.lower()
    for keywords, label in TOPIC_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return label
    return DEFAULT_TOPIC


class TranscriptParser:
    """Parse transcripts into conversations.

    Args:
        chunk_size: Number of messages per emitted conversation.
        clock: Source of the base timestamp; messages are one minute apart.
    """

    def __init__(self, chunk_size: int = 12, clock: Clock = utc_now) -> None:
        self.chunk_size = chunk_size
        self.clock = clock

    def parse_pdf(self, path: Path) -> list[Conversation]:
        """Extract text from a PDF and parse it.

        Returns an empty list if the PDF cannot be read.
        """
        try:
            reader = pypdf.PdfReader(path)
            text = ""
            for page in reader.pages:
                text += (page.extract_text() or "") + "\n"
        except (OSError, PyPdfError) as e:
            logger.error("Failed to read PDF %s: %s", path, e)
            return []
        return self.parse_text(text)

    def parse_file(self, path: Path) -> list[Conversation]:
        """Parse a ``.pdf`` or plain-text transcript file."""
        if path.suffix.lower() == ".pdf":
            return self.parse_pdf(path)
        return self.parse_text(path.read_text(encoding="utf-8"))

    def parse_text(self, text: str) -> list[Conversation]:
        """Segment transcript text into conversations."""
        base = self.clock()
        conversations: list[Conversation] = []
        current: list[tuple[str, str, str]] = []
        message_count = 0
        dropped = 0

        for raw in text.splitlines():
            line = raw.strip()
            if not line or _SKIP_LINE.match(line):
                continue

            parsed = self._match_speaker(line)
            if parsed is not None:
                speaker, content = parsed
                current.append((speaker, determine_role(speaker), content))
                message_count += 1
            elif current and len(line) > 20:
                speaker, role, content = current[-1]
                current[-1] = (speaker, role, f"{content} {line}")
            else:
                dropped += 1

            if len(current) >= self.chunk_size:
                conversations.append(
                    self._build(len(conversations) + 1, current, base, message_count)
                )
                current = []

        if current:
            conversations.append(
                self._build(len(conversations) + 1, current, base, message_count)
            )

        if dropped:
            logger.warning("Dropped %d unattributed transcript lines.", dropped)
        logger.info("Parsed transcript into %d conversations.", len(conversations))
        return conversations

    @staticmethod
    def _match_speaker(line: str) -> tuple[str, str] | None:
        for pattern in SPEAKER_PATTERNS:
            match = pattern.match(line)
            if match:
                content = match.group(2).strip()
                if content:
                    return match.group(1).strip(), content
        return None

    @staticmethod
    def _build(
        number: int,
        turns: list[tuple[str, str, str]],
        base: datetime,
        message_count: int,
    ) -> Conversation:
        first_index = message_count - len(turns)
        messages = [
            Message(
                role=role,
                content=content,
                timestamp=(base + timedelta(minutes=first_index + i)).isoformat(),
            )
            for i, (_, role, content) in enumerate(turns)
        ]

        participants: list[str] = []
        for speaker, role, _ in turns:
            if role == "user" and speaker not in participants:
                participants.append(speaker)

        opening = " ".join(m.content for m in messages[:3])
        return Conversation(
            id=f"conv_{number}",
            messages=messages,
            metadata=ConversationMetadata(
                created=messages[0].timestamp,
                topic=infer_topic(opening),
                participants=participants,
            ),
        )
