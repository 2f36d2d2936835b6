"""Entity and category annotation backed by an external annotation service."""

from collections.abc import Sequence
from typing import Any

from filezer.annotation.base import BaseAnnotator
from filezer.annotation.client_base import BaseAnnotationClient
from filezer.annotation.exceptions import AnnotationResponseError
from filezer.annotation.models import (
    AnnotationFailure,
    CategoryExtraction,
    CategoryOutcome,
    Entity,
    EntityExtraction,
    EntityOutcome,
)
from filezer.logging.logger import Log

ENTITIES = "entities"
CATEGORIES = "categories"
DEFAULT_EXTRACTORS = (ENTITIES, CATEGORIES)
UNKNOWN = "unknown"


class Annotator(BaseAnnotator):
    """Runs entity and category extraction as two separate service calls.

    Each call is attempted once. Transport faults and service-reported errors
    are logged and turned into an AnnotationFailure for that extraction only.
    """

    def __init__(
        self,
        *,
        client: BaseAnnotationClient,
        extractors: Sequence[str] = DEFAULT_EXTRACTORS,
    ) -> None:
        self._client = client
        self._extractors = tuple(extractors)

    def extract_entities(self, text: str) -> EntityOutcome:
        payload = self._request(text, ENTITIES, "entity recognition")
        if isinstance(payload, AnnotationFailure):
            return payload
        try:
            entities = tuple(_build_entity(raw) for raw in _section(payload, ENTITIES))
        except AnnotationResponseError as exc:
            return _failure(ENTITIES, f"Error performing entity recognition: {exc}")
        Log.info(f"Entity recognition complete: {len(entities)} entities")
        return EntityExtraction(entities=entities)

    def extract_categories(self, text: str) -> CategoryOutcome:
        payload = self._request(text, CATEGORIES, "categorization")
        if isinstance(payload, AnnotationFailure):
            return payload
        try:
            categories = tuple(_build_category(raw) for raw in _section(payload, CATEGORIES))
        except AnnotationResponseError as exc:
            return _failure(CATEGORIES, f"Error performing categorization: {exc}")
        Log.info(f"Categorization complete: {len(categories)} categories")
        return CategoryExtraction(categories=categories)

    def close(self) -> None:
        self._client.close()

    def _request(
        self, text: str, extractor: str, operation: str
    ) -> dict[str, Any] | AnnotationFailure:
        if extractor not in self._extractors:
            return _failure(extractor, f"Extractor '{extractor}' is not enabled")
        try:
            payload = self._client.analyze(text, extractors=self._extractors)
        except Exception as exc:
            return _failure(extractor, f"Error performing {operation}: {exc}")
        if not isinstance(payload, dict):
            return _failure(
                extractor,
                f"Error performing {operation}: expected a JSON object, "
                f"got {type(payload).__name__}",
            )
        error = payload.get("error")
        if error:
            return _failure(extractor, f"Annotation service request failed. Error: {error}")
        return payload


def _failure(extractor: str, reason: str) -> AnnotationFailure:
    Log.warning(reason)
    return AnnotationFailure(extractor=extractor, reason=reason)


def _section(payload: dict[str, Any], name: str) -> list[Any]:
    response = payload.get("response")
    if response is None:
        return []
    if not isinstance(response, dict):
        raise AnnotationResponseError("'response' must be an object")
    items = response.get(name)
    if items is None:
        return []
    if not isinstance(items, list):
        raise AnnotationResponseError(f"'response.{name}' must be a list")
    return items


def _build_entity(raw: Any) -> Entity:
    if not isinstance(raw, dict):
        raise AnnotationResponseError("entity records must be objects")
    return Entity(
        type=_entity_type(raw.get("type")),
        identifier=_text(raw.get("entityId")),
        relevance=_score(raw.get("relevanceScore"), "relevanceScore"),
        confidence=_score(raw.get("confidenceScore"), "confidenceScore"),
    )


def _build_category(raw: Any) -> str:
    if not isinstance(raw, dict):
        raise AnnotationResponseError("category records must be objects")
    return _text(raw.get("label"))


def _entity_type(raw: Any) -> str:
    # TextRazor reports a list of ontology types per entity.
    if isinstance(raw, list):
        types = [str(item) for item in raw if item]
        return ", ".join(types) if types else UNKNOWN
    return _text(raw)


def _text(raw: Any) -> str:
    if raw is None:
        return UNKNOWN
    return str(raw)


def _score(raw: Any, name: str) -> float:
    if raw is None:
        return 0.0
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise AnnotationResponseError(f"'{name}' must be a number, got {raw!r}")
    return float(raw)
