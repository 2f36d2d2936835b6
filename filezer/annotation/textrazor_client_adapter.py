from collections.abc import Sequence
from typing import Any

import httpx

from filezer.annotation.client_base import BaseAnnotationClient
from filezer.annotation.exceptions import AnnotationNetworkError, AnnotationResponseError


class TextRazorClientAdapter(BaseAnnotationClient):
    """Annotation client for the TextRazor REST API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str = "https://api.textrazor.com",
        classifiers: str = "",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._classifiers = classifiers
        self._client = httpx.Client(
            headers={"x-textrazor-key": api_key},
            timeout=timeout_seconds,
            transport=transport,
        )

    def analyze(self, text: str, *, extractors: Sequence[str]) -> dict[str, Any]:
        form = {"text": text, "extractors": ",".join(extractors)}
        if self._classifiers and "categories" in extractors:
            form["classifiers"] = self._classifiers
        try:
            response = self._client.post(self._base_url, data=form)
        except httpx.HTTPError as exc:
            raise AnnotationNetworkError(f"TextRazor network error: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            if response.is_error:
                raise AnnotationNetworkError(
                    f"TextRazor returned HTTP {response.status_code}"
                ) from exc
            raise AnnotationResponseError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(payload, dict):
            raise AnnotationResponseError("JSON response must be an object")
        # Service-reported errors come back as a payload with an "error" key.
        if response.is_error and not payload.get("error"):
            raise AnnotationNetworkError(f"TextRazor returned HTTP {response.status_code}")
        return payload

    def close(self) -> None:
        self._client.close()
