"""AI-powered schema-constrained property extractor."""

import json
from pathlib import Path

from property_importer.extraction.base import BasePropertyExtractor
from property_importer.extraction.client_base import BaseExtractionClient
from property_importer.extraction.exceptions import ExtractionError, ExtractionNetworkError
from property_importer.extraction.models import PropertyData
from property_importer.extraction.prompt_loader import load_prompt_template
from property_importer.extraction.schema import (
    build_json_schema,
    build_strict_reminder,
    build_system_prompt,
)
from property_importer.extraction.validator import validate_and_build
from property_importer.logging.logger import Log


class PropertyExtractor(BasePropertyExtractor):
    """Extracts structured property fields from document text using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.0,
        max_input_chars: int = 100_000,
        retry_on_invalid_response: bool = True,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_input_chars = max_input_chars
        self._retry_on_invalid_response = retry_on_invalid_response
        self._system_prompt = build_system_prompt(load_prompt_template(prompt_template_path))
        self._json_schema = build_json_schema()

    @property
    def system_prompt(self) -> str:
        return self._system_prompt

    def extract(self, text: str) -> PropertyData:
        """Ask the model for a property record and normalize its answer."""
        content = self._truncate(text)
        try:
            return self._attempt(self._system_prompt, content)
        except ExtractionNetworkError:
            raise
        except ExtractionError as exc:
            if not self._retry_on_invalid_response:
                raise
            Log.warning(f"Model response rejected ({exc}); retrying once with schema reminder")
            stricter = f"{self._system_prompt}\n\n{build_strict_reminder(str(exc))}"
            return self._attempt(stricter, content)

    def _attempt(self, system_prompt: str, content: str) -> PropertyData:
        Log.debug(f"Extraction system prompt:\n{system_prompt}")
        raw_response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=system_prompt,
            user_prompt=content,
            json_schema=self._json_schema,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        result = validate_and_build(self._parse_json(raw_response))
        filled = sum(1 for value in vars(result).values() if value is not None)
        Log.info(f"Extraction complete: {filled} of {len(vars(result))} fields populated")
        return result

    def _truncate(self, text: str) -> str:
        if not text:
            Log.warning("Document text is empty; the model will see no content")
            return ""
        if len(text) <= self._max_input_chars:
            return text
        Log.warning(
            f"Document text truncated from {len(text)} to {self._max_input_chars} chars"
        )
        return text[: self._max_input_chars]

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise ExtractionError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise ExtractionError("JSON response must be an object")
        return parsed
