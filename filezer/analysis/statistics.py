from collections.abc import Sequence
from dataclasses import dataclass

from filezer.analysis.exceptions import EmptyInputError
from filezer.analysis.tokenizer import TokenizedText


@dataclass(frozen=True)
class TextStatistics:
    """Scalar statistics of one document."""

    total_characters: int
    total_words: int
    total_lines: int
    total_sentences: int
    average_word_length: float
    average_sentence_length: float


def count_characters(content: bytes) -> int:
    """Length of the original content, before any normalization."""
    return len(content)


def count_lines(content: bytes) -> int:
    """Count newline-delimited segments, including an unterminated last one."""
    if not content:
        return 0
    lines = content.count(b"\n")
    if not content.endswith(b"\n"):
        lines += 1
    return lines


def average_word_length(words: Sequence[str]) -> float:
    if not words:
        raise EmptyInputError("Cannot compute average word length of zero words")
    return sum(len(word) for word in words) / len(words)


def average_sentence_length(words: Sequence[str], sentences: Sequence[str]) -> float:
    """Average number of words per sentence."""
    if not sentences:
        raise EmptyInputError("Cannot compute average sentence length of zero sentences")
    return len(words) / len(sentences)


def compute_statistics(
    content: bytes,
    tokens: TokenizedText,
    empty_average: float = 0.0,
) -> TextStatistics:
    """Compute all scalar statistics, substituting empty_average for undefined averages."""
    try:
        word_length = average_word_length(tokens.words)
    except EmptyInputError:
        word_length = empty_average
    try:
        sentence_length = average_sentence_length(tokens.words, tokens.sentences)
    except EmptyInputError:
        sentence_length = empty_average
    return TextStatistics(
        total_characters=count_characters(content),
        total_words=len(tokens.words),
        total_lines=count_lines(content),
        total_sentences=len(tokens.sentences),
        average_word_length=word_length,
        average_sentence_length=sentence_length,
    )
