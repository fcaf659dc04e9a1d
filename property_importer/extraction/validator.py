"""Builds a PropertyData from the parsed model response.

Structural problems (no expected keys at all) are errors. Individual missing
or unrecognizable values are normalized to None instead.
"""

import math
import re
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Any

from property_importer.extraction.exceptions import ExtractionValidationError
from property_importer.extraction.models import PropertyData
from property_importer.extraction.schema import FIELD_NAMES
from property_importer.logging.logger import Log

_MULTIPLIERS = {
    "k": 1_000,
    "thousand": 1_000,
    "m": 1_000_000,
    "mil": 1_000_000,
    "mill": 1_000_000,
    "mn": 1_000_000,
    "million": 1_000_000,
    "b": 1_000_000_000,
    "bn": 1_000_000_000,
    "billion": 1_000_000_000,
}
_PRICE_PATTERN = re.compile(
    r"(\d+(?:\.\d+)?)\s*(?:(million|thousand|billion|mill|mil|mn|bn|k|m|b)(?![a-z]))?"
)
_NUMBER_PATTERN = re.compile(r"\d+(?:\.\d+)?")
_INTEGER_PATTERN = re.compile(r"\s*(\d+)(?:\.0+)?(?!\.?\d)")


def validate_and_build(data: dict[str, Any]) -> PropertyData:
    """Validate a parsed model response and build PropertyData.

    Raises:
        ExtractionValidationError: if none of the schema fields is present.
    """
    present = [name for name in FIELD_NAMES if name in data]
    if not present:
        raise ExtractionValidationError(
            f"Response contains none of the expected fields: {', '.join(FIELD_NAMES)}"
        )
    missing = [name for name in FIELD_NAMES if name not in data]
    if missing:
        Log.warning(f"Fields missing from model response, set to null: {', '.join(missing)}")
    unexpected = sorted(set(data) - set(FIELD_NAMES))
    if unexpected:
        Log.debug(f"Ignoring unexpected fields in model response: {', '.join(unexpected)}")

    return PropertyData(
        address=_field(data, "address", _to_text),
        price=_field(data, "price", to_price),
        bedrooms=_field(data, "bedrooms", _to_integer),
        bathrooms=_field(data, "bathrooms", _to_integer),
        car_spaces=_field(data, "car_spaces", _to_integer),
        land_area_sqm=_field(data, "land_area_sqm", _to_number),
        house_area_sqm=_field(data, "house_area_sqm", _to_number),
        description=_field(data, "description", _to_text),
        features=_field(data, "features", _to_features),
    )


def _field(data: dict[str, Any], name: str, convert: Callable[[Any], Any]) -> Any:
    raw = data.get(name)
    if raw is None:
        return None
    value = convert(raw)
    if value is None:
        Log.warning(f"Unrecognized value for '{name}' set to null: {raw!r}")
    return value


def to_price(raw: Any) -> int | float | None:
    """Resolve a price to a bare number.

    Accepts numbers as-is and strings such as "$1.25M", "1,250,000",
    "850k" or "AUD 1.5 million".
    """
    if _is_number(raw):
        return raw
    if not isinstance(raw, str):
        return None
    text = raw.lower().replace(",", "")
    match = _PRICE_PATTERN.search(text)
    if match is None:
        return None
    suffix = match.group(2)
    # letters glued to the number that are not a known suffix, e.g. "1.5mio"
    if not suffix and text[match.end(1) : match.end(1) + 1].isalpha():
        return None
    amount = _decimal(match.group(1))
    if amount is None:
        return None
    if suffix:
        amount *= _MULTIPLIERS[suffix]
    return _plain_number(amount)


def _to_integer(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        match = _INTEGER_PATTERN.match(raw)
        return int(match.group(1)) if match else None
    return None


def _to_number(raw: Any) -> int | float | None:
    if _is_number(raw):
        return raw
    if not isinstance(raw, str):
        return None
    match = _NUMBER_PATTERN.search(raw.replace(",", ""))
    if match is None:
        return None
    amount = _decimal(match.group(0))
    return _plain_number(amount) if amount is not None else None


def _to_text(raw: Any) -> str | None:
    if not isinstance(raw, str):
        return None
    collapsed = " ".join(raw.split())
    return collapsed or None


def _to_features(raw: Any) -> list[str] | None:
    if not isinstance(raw, list):
        return None
    features = []
    for item in raw:
        if isinstance(item, str) and item.strip():
            features.append(" ".join(item.split()))
    return features


def _is_number(raw: Any) -> bool:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return False
    return math.isfinite(raw)


def _decimal(text: str) -> Decimal | None:
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def _plain_number(amount: Decimal) -> int | float:
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)
