"""Target property schema as data, and the prompt text derived from it.

Nothing here talks to a model, so the schema -> prompt mapping can be
inspected and tested on its own.
"""

import json
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldSpec:
    """One field of the target property schema."""

    name: str
    type: str
    description: str


STRING = "string"
NUMBER = "number"
INTEGER = "integer"
STRING_LIST = "array<string>"

PROPERTY_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("address", STRING, "Full street address of the property"),
    FieldSpec("price", NUMBER, "Asking or sold price as a plain number, no currency"),
    FieldSpec("bedrooms", INTEGER, "Number of bedrooms"),
    FieldSpec("bathrooms", INTEGER, "Number of bathrooms"),
    FieldSpec("car_spaces", INTEGER, "Number of car spaces, garage or carport bays"),
    FieldSpec("land_area_sqm", NUMBER, "Land area in square metres"),
    FieldSpec("house_area_sqm", NUMBER, "Internal house area in square metres"),
    FieldSpec("description", STRING, "Single-paragraph description of the property"),
    FieldSpec("features", STRING_LIST, "Key selling points or amenities as short phrases"),
)

FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in PROPERTY_FIELDS)

_JSON_TYPES = {
    STRING: {"type": ["string", "null"]},
    NUMBER: {"type": ["number", "null"]},
    INTEGER: {"type": ["integer", "null"]},
    STRING_LIST: {"type": ["array", "null"], "items": {"type": "string"}},
}


def field_listing() -> str:
    """Field name -> primitive type mapping, pretty-printed as JSON."""
    return json.dumps({f.name: f.type for f in PROPERTY_FIELDS}, indent=2)


def build_json_schema() -> dict[str, object]:
    """Strict JSON schema for the model's response format.

    All properties are required and nullable so the model must emit every
    key and use null for values it cannot find.
    """
    properties: dict[str, object] = {}
    for spec in PROPERTY_FIELDS:
        properties[spec.name] = {**_JSON_TYPES[spec.type], "description": spec.description}
    return {
        "type": "object",
        "properties": properties,
        "required": list(FIELD_NAMES),
        "additionalProperties": False,
    }


def build_system_prompt(template: str) -> str:
    """Render the system instruction template with the schema listing."""
    return template.format(field_listing=field_listing())


def build_strict_reminder(reason: str) -> str:
    """Extra instruction appended when a previous response was rejected."""
    keys = ", ".join(FIELD_NAMES)
    return (
        f"IMPORTANT: your previous reply was rejected ({reason}). "
        f"Reply with ONLY one JSON object containing exactly these keys: {keys}. "
        "Use null for any value not present in the text. "
        "Do not add commentary, markdown or code fences."
    )
