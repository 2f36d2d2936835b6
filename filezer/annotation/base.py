from abc import ABC, abstractmethod

from filezer.annotation.models import CategoryOutcome, EntityOutcome


class BaseAnnotator(ABC):
    """Contract for entity and category annotation.

    Both operations return a tagged outcome instead of raising, and each
    succeeds or fails independently of the other.
    """

    @abstractmethod
    def extract_entities(self, text: str) -> EntityOutcome:
        """Recognize named entities in text."""

    @abstractmethod
    def extract_categories(self, text: str) -> CategoryOutcome:
        """Assign category labels to text."""

    def close(self) -> None:
        """Release resources held by the annotator."""
