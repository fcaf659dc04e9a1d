from abc import ABC, abstractmethod


class BaseExtractionClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        """Return the provider's JSON response body as plain text."""
