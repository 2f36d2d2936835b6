"""Plain-text rendering of an AnalysisResult."""

import html

from filezer.annotation.models import Entity
from filezer.report.models import AnalysisResult

REPORT_HEADER = "File Analysis Report"
TOP_WORDS_HEADER = "Top 10 Most Frequent Words:"
ENTITIES_HEADER = "Entities:"
CATEGORIES_HEADER = "Categories:"


def report_label(name: str) -> str:
    """'average_word_length' -> 'Average Word Length'."""
    return name.replace("_", " ").title()


def format_value(value: int | float) -> str:
    """Integers as-is, floats with two decimals and thousands separators."""
    if isinstance(value, float):
        return f"{value:,.2f}"
    return str(value)


def format_score(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_entity(entity: Entity) -> str:
    return (
        f"{entity.identifier} (Type: {entity.type}, "
        f"Relevance: {format_score(entity.relevance)}, "
        f"Confidence: {format_score(entity.confidence)})"
    )


def render_report(result: AnalysisResult) -> str:
    lines = [REPORT_HEADER, ""]
    lines += [
        f"{report_label(name)}: {format_value(value)}"
        for name, value in result.scalars().items()
    ]

    lines += ["", TOP_WORDS_HEADER]
    lines += [f"{html.escape(word)}: {count}" for word, count in result.top_words.items()]

    lines += ["", ENTITIES_HEADER]
    lines += [format_entity(entity) for entity in result.entities]

    lines += ["", CATEGORIES_HEADER]
    lines += list(result.categories)
    return "\n".join(lines) + "\n"


def format_analysis_summary(result: AnalysisResult) -> str:
    """Short on-screen summary shown after an analysis completes."""
    lines = [
        f"{name.replace('_', ' ').capitalize()}: {format_value(value)}"
        for name, value in result.scalars().items()
    ]
    lines.append(ENTITIES_HEADER)
    lines += [format_entity(entity) for entity in result.entities]
    lines.append(CATEGORIES_HEADER)
    lines += list(result.categories)
    lines.append("Top Words:")
    lines += [f"{html.escape(word)}: {count}" for word, count in result.top_words.items()]
    return "\n".join(lines)
