from pathlib import Path

from filezer.annotation.exceptions import AnnotationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the annotation prompt template.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled annotation_prompt.txt.

    Raises:
        AnnotationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "annotation_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnnotationError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the annotation JSON schema (defaults to the bundled annotation_schema.json)."""
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "annotation_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnnotationError(f"Failed to load JSON schema: {exc}") from exc
