"""Pattern-based entity extraction.

Scans the human side of a conversation with ordered regex families
(person, preference, topic, fact, event) and emits every match as a
scored Entity. Nothing is deduplicated here.
"""

import logging
import re
from dataclasses import dataclass

from convograph.analysis.models import Conversation, Entity
from convograph.config import AnalyzerConfig

logger = logging.getLogger(__name__)

_MONTHS = (
    "January|February|March|April|May|June|July|August|"
    "September|October|November|December"
)
_CLAUSE = r"([^.!?]+)"


@dataclass(frozen=True)
class PatternRule:
    """One regex within a pattern family.

    Attributes:
        pattern: Compiled expression, applied with ``finditer``.
        entity_type: Type given to entities produced by this rule.
        confidence: Confidence given to those entities.
        group: Capture group holding the entity text (0 for the whole match).
        min_length: Matches shorter than this after trimming are noise.
    """

    pattern: re.Pattern
    entity_type: str
    confidence: float
    group: int = 1
    min_length: int = 1


def technology_pattern(technologies: frozenset[str]) -> re.Pattern | None:
    """Compile a whole-word alternation over a technology vocabulary.

    Longer names are tried first so a name that prefixes another never
    shadows it. Returns None for an empty vocabulary.
    """
    if not technologies:
        return None
    names = sorted(technologies, key=lambda name: (-len(name), name))
    alternation = "|".join(re.escape(name) for name in names)
    return re.compile(rf"\b({alternation})\b")


def build_rules(config: AnalyzerConfig) -> list[PatternRule]:
    """Build the ordered rule list for a configuration."""
    person = config.person_confidence
    preference = config.preference_confidence
    fact = config.fact_confidence
    event = config.event_confidence

    rules = [
        # person
        PatternRule(
            re.compile(r"(?:my colleague|my friend|I work with)\s+([A-Z][a-z]+)"),
            "person",
            person,
            min_length=2,
        ),
        PatternRule(
            re.compile(r"\b([A-Z][a-z]+)\s+(?:is|was|works|specializes)\b"),
            "person",
            person,
            min_length=2,
        ),
        # preference: likes
        PatternRule(
            re.compile(rf"\bI (?:love|like|enjoy|prefer)\s+{_CLAUSE}", re.IGNORECASE),
            "preference",
            preference,
            min_length=3,
        ),
        PatternRule(
            re.compile(rf"\bI'm (?:interested in|into)\s+{_CLAUSE}", re.IGNORECASE),
            "preference",
            preference,
            min_length=3,
        ),
        # Case-sensitive, unlike the other preference rules: the subject must
        # be a capitalized name.
        PatternRule(
            re.compile(
                r"\b([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)\s+is (?:my favorite|great|amazing)"
            ),
            "preference",
            preference,
            min_length=3,
        ),
        # preference: dislikes
        PatternRule(
            re.compile(rf"\bI (?:don't like|dislike|hate)\s+{_CLAUSE}", re.IGNORECASE),
            "preference",
            preference,
            min_length=3,
        ),
        PatternRule(
            re.compile(
                rf"\bI (?:really )?don't (?:like|enjoy)\s+{_CLAUSE}", re.IGNORECASE
            ),
            "preference",
            preference,
            min_length=3,
        ),
    ]

    topics = technology_pattern(config.technologies)
    if topics is not None:
        rules.append(PatternRule(topics, "topic", config.topic_confidence))

    rules += [
        # fact
        PatternRule(
            re.compile(
                rf"(?:was created|was first released|created by|developed by)\s+{_CLAUSE}",
                re.IGNORECASE,
            ),
            "fact",
            fact,
        ),
        PatternRule(re.compile(r"\b(\d{4})\b"), "fact", fact),
        # event
        PatternRule(
            re.compile(
                r"\bI (?:started|joined|got promoted|attended)\s+[^.!?]+",
                re.IGNORECASE,
            ),
            "event",
            event,
            group=0,
            min_length=4,
        ),
        PatternRule(
            re.compile(rf"\bin (?:{_MONTHS})\s+\d{{4}}", re.IGNORECASE),
            "event",
            event,
            group=0,
            min_length=4,
        ),
    ]
    return rules


class PatternExtractor:
    """Extract candidate entities from the user's messages.

    Args:
        config: Analyzer configuration supplying vocabulary and confidences.
    """

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        self.config = config or AnalyzerConfig()
        self.rules = build_rules(self.config)

    def extract(self, conversation: Conversation) -> list[Entity]:
        """Run every rule over every user message.

        Args:
            conversation: Conversation to scan.

        Returns:
            Entities in extraction order, duplicates included.
        """
        entities: list[Entity] = []
        for message in conversation.messages:
            if message.role != "user":
                continue
            found = self.extract_text(message.content)
            logger.debug(
                "Message in %s yielded %d entities.", conversation.id, len(found)
            )
            entities.extend(found)
        return entities

    def extract_text(self, content: str) -> list[Entity]:
        """Run every rule over a single message body."""
        entities: list[Entity] = []
        for rule in self.rules:
            for match in rule.pattern.finditer(content):
                text = (match.group(rule.group) or "").strip()
                if len(text) < rule.min_length:
                    continue
                entities.append(
                    Entity(
                        text=text,
                        type=rule.entity_type,
                        confidence=rule.confidence,
                        context=content,
                    )
                )
        return entities
