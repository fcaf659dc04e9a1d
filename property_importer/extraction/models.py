from dataclasses import dataclass


@dataclass(frozen=True)
class PropertyData:
    """Structured property fields produced by schema-constrained extraction.

    Every field is optional: values missing from the document or not
    recognizable in the model response are None.
    """

    address: str | None = None
    price: int | float | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    car_spaces: int | None = None
    land_area_sqm: int | float | None = None
    house_area_sqm: int | float | None = None
    description: str | None = None
    features: list[str] | None = None
