from dataclasses import dataclass, field


@dataclass(frozen=True)
class Entity:
    """A named entity recognized by the annotation service."""

    type: str = "unknown"
    identifier: str = "unknown"
    relevance: float = 0.0
    confidence: float = 0.0


@dataclass(frozen=True)
class EntityExtraction:
    """Successful entity extraction."""

    entities: tuple[Entity, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CategoryExtraction:
    """Successful category extraction."""

    categories: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AnnotationFailure:
    """A failed extraction; the pipeline continues with an empty result."""

    extractor: str
    reason: str


EntityOutcome = EntityExtraction | AnnotationFailure
CategoryOutcome = CategoryExtraction | AnnotationFailure
