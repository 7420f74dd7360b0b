"""Human-readable summary lines for an analysis run."""

from collections import Counter

from convograph.analysis.models import Entity, Relationship


def synthesize_insights(
    entities: list[Entity],
    relationships: list[Relationship],
    top_n: int = 3,
) -> list[str]:
    """Summarize entities and relationships.

    Lines are emitted in a fixed order and only when they have content:
    entity totals by type, most discussed targets, likes, dislikes, people,
    and topics.

    Args:
        entities: Final (deduplicated) entities.
        relationships: Final (deduplicated) relationships.
        top_n: How many targets the most-discussed line lists.

    Returns:
        Insight strings.
    """
    insights: list[str] = []

    if entities:
        by_type = Counter(e.type for e in entities)
        breakdown = ", ".join(f"{count} {kind}(s)" for kind, count in by_type.items())
        insights.append(f"Extracted {len(entities)} entities: {breakdown}")

    # Counter keeps first-encounter order and most_common sorts stably.
    mentions = Counter(r.target for r in relationships)
    top = mentions.most_common(top_n)
    if top:
        discussed = ", ".join(f"{target} ({count} mentions)" for target, count in top)
        insights.append(f"Most discussed: {discussed}")

    likes = [r.target for r in relationships if r.type == "likes"]
    if likes:
        insights.append(f"User likes: {', '.join(likes)}")

    dislikes = [r.target for r in relationships if r.type == "dislikes"]
    if dislikes:
        insights.append(f"User dislikes: {', '.join(dislikes)}")

    people = [e.text for e in entities if e.type == "person"]
    if people:
        insights.append(f"People mentioned: {', '.join(people)}")

    topics = [e.text for e in entities if e.type == "topic"]
    if topics:
        insights.append(f"Topics discussed: {', '.join(topics)}")

    return insights
