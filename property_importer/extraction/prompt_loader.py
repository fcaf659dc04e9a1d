from pathlib import Path

from property_importer.extraction.exceptions import ExtractionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the system instruction template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled extraction_prompt.txt.

    Returns:
        The raw template string with a ``{field_listing}`` placeholder.

    Raises:
        ExtractionError: if the file cannot be read or lacks the placeholder.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "extraction_prompt.txt"
    try:
        template = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load prompt template: {exc}") from exc
    if "{field_listing}" not in template:
        raise ExtractionError(f"Prompt template {path} has no {{field_listing}} placeholder")
    return template
