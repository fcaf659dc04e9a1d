import httpx
import openai
from openai.types.chat import ChatCompletion

from property_importer.extraction.client_base import BaseExtractionClient
from property_importer.extraction.exceptions import ExtractionError, ExtractionNetworkError
from property_importer.logging.logger import Log


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction client for OpenAI and any host speaking its chat completions API.

    Retries are left to PropertyExtractor, so the SDK's own retry loop is off.
    """

    RESPONSE_FORMAT_NAME = "property_record"

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        try:
            completion = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format=self._response_format(json_schema),
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ExtractionNetworkError(f"AI provider API error: {exc}") from exc

        return self._read_content(completion)

    @classmethod
    def _response_format(cls, json_schema: dict[str, object]) -> dict[str, object]:
        return {
            "type": "json_schema",
            "json_schema": {
                "name": cls.RESPONSE_FORMAT_NAME,
                "strict": True,
                "schema": json_schema,
            },
        }

    @staticmethod
    def _read_content(completion: ChatCompletion) -> str:
        if not completion.choices:
            raise ExtractionError("AI returned no choices")
        choice = completion.choices[0]
        message = choice.message
        if getattr(message, "refusal", None):
            raise ExtractionError(f"AI refused the request: {message.refusal}")
        # A reply cut at the token limit is never valid JSON.
        if choice.finish_reason == "length":
            raise ExtractionError("AI response was cut off at the output token limit")
        if not message.content:
            raise ExtractionError("AI returned empty response")

        usage = getattr(completion, "usage", None)
        if usage is not None:
            Log.debug(
                f"AI usage: {usage.prompt_tokens} prompt + "
                f"{usage.completion_tokens} completion tokens"
            )
        return message.content
