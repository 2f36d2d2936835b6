"""Example annotation client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnnotationClient and register the provider in AnnotatorFactory.
"""

import copy
from collections.abc import Sequence
from typing import Any, ClassVar

from filezer.annotation.client_base import BaseAnnotationClient


class ExampleClientAdapter(BaseAnnotationClient):
    """Example adapter that returns a fixed annotation payload.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, Any]] = {
        "ok": True,
        "response": {
            "entities": [
                {
                    "entityId": "Example",
                    "type": ["Thing"],
                    "relevanceScore": 0.5,
                    "confidenceScore": 1.0,
                }
            ],
            "categories": [{"label": "example", "score": 1.0}],
        },
    }

    def analyze(self, text: str, *, extractors: Sequence[str]) -> dict[str, Any]:
        _ = text, extractors
        return copy.deepcopy(self.DEFAULT_RESPONSE)
