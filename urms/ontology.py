"""Ontology entities, their store, and a category reasoner."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class OntologyEntity:
    """A labelled entity of some category."""

    id: int
    label: str
    category: str


class EntityType(Enum):
    """Broad kinds of entity."""

    SYSTEM = "System"
    ENGINE = "Engine"
    RUNTIME = "Runtime"
    MEMORY = "Memory"
    VALIDATOR = "Validator"
    QUERY = "Query"


@dataclass
class OntologyStore:
    """An ordered collection of entities."""

    entities: list[OntologyEntity] = field(default_factory=list)

    def insert(self, entity: OntologyEntity) -> None:
        """Add an entity."""
        print(f"ontology insert -> {entity.label}")
        self.entities.append(entity)

    def print(self) -> None:
        """Print every stored entity."""
        print(f"ontology entities -> {len(self.entities)}")
        for entity in self.entities:
            print(f"entity [{entity.id}] {entity.label} ({entity.category})")


def analyze_entity(entity: OntologyEntity) -> None:
    """Report what kind of entity this is, judged by its category."""
    match entity.category:
        case "concept":
            print(f"Concept detected: {entity.label}")
        case "memory":
            print(f"Memory node: {entity.label}")
        case _:
            print(f"Unknown entity: {entity.label}")