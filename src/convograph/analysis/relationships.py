"""Relationship derivation from co-occurrence and cue phrases."""

import logging
from itertools import combinations

from convograph.analysis.models import Conversation, Entity, Relationship
from convograph.config import AnalyzerConfig

logger = logging.getLogger(__name__)


class RelationshipDeriver:
    """Infer speaker-to-entity and entity-to-entity relationships.

    For each user message, an entity counts as mentioned when its lowercased
    text is a substring of the lowercased message. Every mention yields a
    ``mentions`` link from the speaker, and cue phrases in the same message
    add ``likes``, ``dislikes`` and (for people) ``knows`` links. Each pair
    of mentioned entities is joined by ``related_to``.

    Args:
        config: Analyzer configuration supplying cues and strengths.
    """

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        self.config = config or AnalyzerConfig()

    def speaker_for(self, conversation: Conversation) -> str:
        participants = conversation.metadata.participants
        if participants and participants[0]:
            return participants[0]
        return self.config.default_speaker

    def derive(
        self, conversation: Conversation, entities: list[Entity]
    ) -> list[Relationship]:
        """Derive raw relationships; duplicates are left for the deduplicator.

        Args:
            conversation: Source conversation.
            entities: Deduplicated entities extracted from it.

        Returns:
            Relationships in derivation order.
        """
        cfg = self.config
        speaker = self.speaker_for(conversation)
        relationships: list[Relationship] = []

        for message in conversation.messages:
            if message.role != "user":
                continue

            content = message.content.lower()
            mentioned = [e for e in entities if e.text.lower() in content]
            if not mentioned:
                continue

            likes = any(cue in content for cue in cfg.like_cues)
            dislikes = any(cue in content for cue in cfg.dislike_cues)
            collaborates = any(cue in content for cue in cfg.collaboration_cues)

            for entity in mentioned:
                relationships.append(
                    self._link(speaker, entity.text, "mentions", cfg.mentions_strength)
                )
                if likes:
                    relationships.append(
                        self._link(speaker, entity.text, "likes", cfg.likes_strength)
                    )
                if dislikes:
                    relationships.append(
                        self._link(
                            speaker, entity.text, "dislikes", cfg.dislikes_strength
                        )
                    )
                if collaborates and entity.type == "person":
                    relationships.append(
                        self._link(speaker, entity.text, "knows", cfg.knows_strength)
                    )

            for first, second in combinations(mentioned, 2):
                relationships.append(
                    self._link(
                        first.text, second.text, "related_to", cfg.related_strength
                    )
                )

        logger.debug(
            "Derived %d raw relationships for %s.", len(relationships), conversation.id
        )
        return relationships

    @staticmethod
    def _link(source: str, target: str, kind: str, strength: float) -> Relationship:
        return Relationship(source=source, target=target, type=kind, strength=strength)
