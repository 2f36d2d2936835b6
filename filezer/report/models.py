from dataclasses import dataclass, field

from filezer.analysis.statistics import TextStatistics
from filezer.annotation.models import Entity

SCALAR_FIELDS = (
    "total_characters",
    "total_words",
    "total_lines",
    "total_sentences",
    "average_word_length",
    "average_sentence_length",
)


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the report shows about one document."""

    total_characters: int
    total_words: int
    total_lines: int
    total_sentences: int
    average_word_length: float
    average_sentence_length: float
    top_words: dict[str, int] = field(default_factory=dict)
    entities: tuple[Entity, ...] = field(default_factory=tuple)
    categories: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_parts(
        cls,
        statistics: TextStatistics,
        top_words: dict[str, int],
        entities: tuple[Entity, ...] = (),
        categories: tuple[str, ...] = (),
    ) -> "AnalysisResult":
        return cls(
            total_characters=statistics.total_characters,
            total_words=statistics.total_words,
            total_lines=statistics.total_lines,
            total_sentences=statistics.total_sentences,
            average_word_length=statistics.average_word_length,
            average_sentence_length=statistics.average_sentence_length,
            top_words=dict(top_words),
            entities=tuple(entities),
            categories=tuple(categories),
        )

    def scalars(self) -> dict[str, int | float]:
        """Scalar statistics in report order."""
        return {name: getattr(self, name) for name in SCALAR_FIELDS}
