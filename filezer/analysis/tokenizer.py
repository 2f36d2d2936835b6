"""Naive ASCII tokenization of uploaded text.

Words and sentences are split with plain regular expressions. There is no
handling of abbreviations, decimals or ellipses: the period in "3.14" ends a
sentence just like the one after "Dr".
"""

import re
from dataclasses import dataclass

_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)
_WHITESPACE = re.compile(r"\s+", re.ASCII)
_SENTENCE_TERMINATORS = re.compile(r"[.!?]")


@dataclass(frozen=True)
class TokenizedText:
    """Normalized text together with its word and sentence sequences."""

    normalized_text: str
    words: tuple[str, ...]
    sentences: tuple[str, ...]


def normalize(text: str) -> str:
    """Strip every non-word, non-whitespace character, then lowercase."""
    return _NON_WORD.sub("", text).lower()


def split_words(normalized_text: str) -> list[str]:
    return [word for word in _WHITESPACE.split(normalized_text) if word]


def split_sentences(text: str) -> list[str]:
    """Split raw text on `.`, `!` and `?` and normalize each segment.

    Terminators are removed by normalization, so splitting happens first.
    Segments that are blank after normalization are discarded.
    """
    sentences: list[str] = []
    for segment in _SENTENCE_TERMINATORS.split(text):
        sentence = " ".join(split_words(normalize(segment)))
        if sentence:
            sentences.append(sentence)
    return sentences


def tokenize(text: str) -> TokenizedText:
    normalized_text = normalize(text)
    return TokenizedText(
        normalized_text=normalized_text,
        words=tuple(split_words(normalized_text)),
        sentences=tuple(split_sentences(text)),
    )
