"""Ordered collection of the entities belonging to a layer."""

from __future__ import annotations

from typing import Iterator

from blocks.entity import Entity


class EntityManager:
    """Keeps entities in insertion order; membership is by identity."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []

    def add(self, entity: Entity) -> None:
        self._entities.append(entity)

    def remove(self, entity: Entity) -> None:
        """Remove every occurrence of entity; absent entities are ignored."""
        self._entities = [e for e in self._entities if e is not entity]

    def exists(self, entity: Entity) -> bool:
        return any(e is entity for e in self._entities)

    def count_of(self, entity: Entity) -> int:
        return sum(1 for e in self._entities if e is entity)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities))