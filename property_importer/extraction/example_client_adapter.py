"""Offline extraction client.

Returns a fixed, schema-conforming record without any network call. Handy
for local runs of the whole pipeline and as a template for new providers:
implement BaseExtractionClient and register the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from property_importer.extraction.client_base import BaseExtractionClient


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that always answers with DEFAULT_RESPONSE."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "address": None,
        "price": None,
        "bedrooms": None,
        "bathrooms": None,
        "car_spaces": None,
        "land_area_sqm": None,
        "house_area_sqm": None,
        "description": None,
        "features": [],
    }

    def __init__(self, response: dict[str, object] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE
        self.last_user_prompt: str | None = None

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, json_schema
        self.last_user_prompt = user_prompt
        return json.dumps(self._response)
