import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import httpx
import openai

from filezer.annotation.client_base import BaseAnnotationClient
from filezer.annotation.exceptions import (
    AnnotationError,
    AnnotationNetworkError,
    AnnotationResponseError,
)
from filezer.annotation.prompt_loader import load_json_schema, load_prompt_template


class OpenAIClientAdapter(BaseAnnotationClient):
    """Annotation client built on an OpenAI-compatible chat API.

    The model is asked for the same entity and category records TextRazor
    returns, so the result is wrapped in a ``response`` object.
    """

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._model = model
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema = json.loads(load_json_schema(json_schema_path))

    def analyze(self, text: str, *, extractors: Sequence[str]) -> dict[str, Any]:
        prompt = self._prompt_template.format(
            text=text,
            extractors=", ".join(extractors),
        )
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=0.0,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "annotation_result",
                        "strict": True,
                        "schema": self._json_schema,
                    },
                },
                messages=[{"role": "user", "content": prompt}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnnotationNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AnnotationNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AnnotationError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AnnotationError("AI returned empty response")

        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as exc:
            raise AnnotationResponseError(f"Invalid JSON response: {exc}") from exc
        if not isinstance(parsed, dict):
            raise AnnotationResponseError("JSON response must be an object")
        return {"ok": True, "response": parsed}

    def close(self) -> None:
        self._client.close()
