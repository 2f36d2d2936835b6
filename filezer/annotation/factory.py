from typing import ClassVar

from filezer.annotation.annotator import Annotator
from filezer.annotation.base import BaseAnnotator
from filezer.annotation.client_base import BaseAnnotationClient
from filezer.annotation.example_client_adapter import ExampleClientAdapter
from filezer.annotation.openai_client_adapter import OpenAIClientAdapter
from filezer.annotation.textrazor_client_adapter import TextRazorClientAdapter
from filezer.config.settings import Settings


class AnnotatorFactory:
    """Creates the configured annotator."""

    PROVIDERS: ClassVar[tuple[str, ...]] = ("example", "openai", "textrazor")

    @classmethod
    def create(cls, settings: Settings) -> BaseAnnotator:
        """Create an annotator for settings.annotation_provider."""
        return Annotator(
            client=cls.create_client(settings),
            extractors=settings.annotation_extractors,
        )

    @classmethod
    def create_client(cls, settings: Settings) -> BaseAnnotationClient:
        provider = settings.annotation_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "textrazor":
            if not settings.textrazor_api_key:
                raise ValueError(
                    "textrazor_api_key is required for annotation_provider=textrazor"
                )
            return TextRazorClientAdapter(
                api_key=settings.textrazor_api_key,
                timeout_seconds=settings.annotation_timeout_seconds,
                base_url=settings.textrazor_base_url,
                classifiers=settings.textrazor_classifiers,
            )
        if provider == "openai":
            if not settings.openai_model_name:
                raise ValueError("openai_model_name is required for annotation_provider=openai")
            return OpenAIClientAdapter(
                api_key=settings.openai_api_key,
                model=settings.openai_model_name,
                timeout_seconds=settings.annotation_timeout_seconds,
                base_url=settings.openai_base_url,
            )
        raise ValueError(
            f"Unknown annotation provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
