from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    text_encoding: str = "latin-1"
    top_words_limit: int = Field(default=10, ge=0, le=10)
    report_dir: str | None = None

    annotation_provider: str = "textrazor"
    annotation_extractors: list[str] = ["entities", "categories"]
    annotation_timeout_seconds: int = 30

    textrazor_api_key: str = ""
    textrazor_base_url: str = "https://api.textrazor.com"
    textrazor_classifiers: str = "textrazor_newscodes"

    openai_api_key: str = ""
    openai_model_name: str = ""
    openai_base_url: str | None = None
