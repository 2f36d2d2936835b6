from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class BaseAnnotationClient(ABC):
    """Contract for provider-specific annotation clients."""

    @abstractmethod
    def analyze(self, text: str, *, extractors: Sequence[str]) -> dict[str, Any]:
        """Submit text to the provider and return its decoded payload.

        The payload follows the TextRazor layout: an optional top-level
        ``error`` string and, on success, ``response.entities`` and
        ``response.categories`` lists.

        Raises:
            AnnotationError: when the provider cannot be reached or answers
                with something that is not a JSON object.
        """

    def close(self) -> None:
        """Release provider connections. Clients without any keep this no-op."""
