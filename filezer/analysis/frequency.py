from collections import Counter
from collections.abc import Sequence

DEFAULT_TOP_WORDS_LIMIT = 10


class FrequencyRanker:
    """Counts word occurrences and ranks the most frequent words."""

    def __init__(self, limit: int = DEFAULT_TOP_WORDS_LIMIT) -> None:
        if not 0 <= limit <= DEFAULT_TOP_WORDS_LIMIT:
            raise ValueError(
                f"limit must be between 0 and {DEFAULT_TOP_WORDS_LIMIT}, got {limit}"
            )
        self._limit = limit

    @staticmethod
    def frequency_table(words: Sequence[str]) -> dict[str, int]:
        """Map each word to its count, keyed in first-occurrence order."""
        return dict(Counter(words))

    def top_words(self, words: Sequence[str]) -> dict[str, int]:
        """Return up to `limit` words by descending count.

        Ties keep first-occurrence order since the sort is stable.
        """
        table = self.frequency_table(words)
        ranked = sorted(table.items(), key=lambda item: item[1], reverse=True)
        return dict(ranked[: self._limit])
