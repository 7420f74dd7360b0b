"""Collapse repeated observations, keeping the strongest of each."""

from typing import Callable, Hashable, Iterable, TypeVar

from convograph.analysis.models import Entity, Relationship

T = TypeVar("T")


def keep_strongest(
    items: Iterable[T],
    key: Callable[[T], Hashable],
    score: Callable[[T], float],
) -> list[T]:
    """Keep one item per key, replacing it only on a strictly higher score.

    Output order is not part of the contract.
    """
    best: dict[Hashable, T] = {}
    for item in items:
        k = key(item)
        current = best.get(k)
        if current is None or score(item) > score(current):
            best[k] = item
    return list(best.values())


def dedupe_entities(entities: Iterable[Entity]) -> list[Entity]:
    """Deduplicate by (type, lowercased text) on confidence."""
    return keep_strongest(
        entities,
        key=lambda e: (e.type, e.text.lower()),
        score=lambda e: e.confidence,
    )


def dedupe_relationships(relationships: Iterable[Relationship]) -> list[Relationship]:
    """Deduplicate by (source, type, target) on strength."""
    return keep_strongest(
        relationships,
        key=lambda r: (r.source, r.type, r.target),
        score=lambda r: r.strength,
    )
