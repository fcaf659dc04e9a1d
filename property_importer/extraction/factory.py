from property_importer.config.settings import Settings
from property_importer.extraction.base import BasePropertyExtractor
from property_importer.extraction.client_base import BaseExtractionClient
from property_importer.extraction.example_client_adapter import ExampleClientAdapter
from property_importer.extraction.extractor import PropertyExtractor
from property_importer.extraction.openai_client_adapter import OpenAIClientAdapter

SUPPORTED_PROVIDERS = ("example", "openai", "openai_compatible")


class ExtractorFactory:
    """Creates the property extractor for the configured AI provider.

    ``openai`` talks to the OpenAI API; ``openai_compatible`` points the same
    client at any host speaking that API (a gateway or a local model server).
    """

    @classmethod
    def create(cls, settings: Settings) -> BasePropertyExtractor:
        provider = settings.extraction_provider.strip().lower()
        if provider == "example":
            return cls._build(ExampleClientAdapter(), "example", 0.0, settings)
        if provider == "openai":
            model = cls._require_model(provider, settings.extraction_openai_model_name)
            client = OpenAIClientAdapter(
                api_key=settings.extraction_openai_api_key,
                timeout_seconds=settings.extraction_openai_timeout_seconds,
            )
            temperature = settings.extraction_openai_temperature
        elif provider == "openai_compatible":
            base_url = settings.extraction_openai_compatible_base_url.strip()
            if not base_url:
                raise ValueError(
                    "extraction_openai_compatible_base_url is required for "
                    "extraction_provider=openai_compatible"
                )
            model = cls._require_model(
                provider, settings.extraction_openai_compatible_model_name
            )
            client = OpenAIClientAdapter(
                api_key=settings.extraction_openai_compatible_api_key,
                timeout_seconds=settings.extraction_openai_compatible_timeout_seconds,
                base_url=base_url,
            )
            temperature = 0.0
        else:
            raise ValueError(
                f"Unknown extraction provider '{provider}'. "
                f"Choose from: {list(SUPPORTED_PROVIDERS)}"
            )

        return cls._build(client, model, temperature, settings)

    @staticmethod
    def _require_model(provider: str, model_name: str) -> str:
        model = model_name.strip()
        if not model:
            raise ValueError(f"extraction_{provider}_model_name is required")
        return model

    @staticmethod
    def _build(
        client: BaseExtractionClient,
        model: str,
        temperature: float,
        settings: Settings,
    ) -> PropertyExtractor:
        return PropertyExtractor(
            client=client,
            model=model,
            temperature=temperature,
            max_input_chars=settings.extraction_max_input_chars,
            retry_on_invalid_response=settings.extraction_retry_on_invalid_response,
        )
