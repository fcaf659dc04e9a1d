from dataclasses import asdict, dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from property_importer.extraction.models import PropertyData
from property_importer.storage.models import ArchivedDocumentRef

SOURCE_PDF_KEY = "source_pdf"


class PropertyStatus(str, Enum):
    IMPORTED = "imported"
    PUBLISHED = "published"
    ARCHIVED = "archived"


@dataclass(frozen=True)
class PropertyRecord:
    """Represents a row of the properties table."""

    address: str | None = None
    price: int | float | None = None
    bedrooms: int | None = None
    bathrooms: int | None = None
    car_spaces: int | None = None
    land_area_sqm: int | float | None = None
    house_area_sqm: int | float | None = None
    description: str | None = None
    features: list[str] | None = None
    status: PropertyStatus = PropertyStatus.IMPORTED
    source_pdf_name: str = ""
    document_urls: dict[str, str] = field(default_factory=dict)
    facade_image_url: str | None = None
    floor_plan_image_url: str | None = None
    image_gallery_urls: list[str] = field(default_factory=list)
    id: int | None = None
    created_at: datetime | None = None

    @classmethod
    def from_extraction(
        cls,
        data: PropertyData,
        archived: ArchivedDocumentRef,
        file_name: str,
    ) -> "PropertyRecord":
        """Combine extracted fields with provenance into a new imported record.

        Image fields stay empty: no image pipeline feeds them.
        """
        return cls(
            **asdict(data),
            status=PropertyStatus.IMPORTED,
            source_pdf_name=file_name,
            document_urls={SOURCE_PDF_KEY: archived.public_url},
            facade_image_url=None,
            floor_plan_image_url=None,
            image_gallery_urls=[],
        )

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "PropertyRecord":
        return cls(
            id=row["id"],
            address=row["address"],
            price=_plain_number(row["price"]),
            bedrooms=row["bedrooms"],
            bathrooms=row["bathrooms"],
            car_spaces=row["car_spaces"],
            land_area_sqm=_plain_number(row["land_area_sqm"]),
            house_area_sqm=_plain_number(row["house_area_sqm"]),
            description=row["description"],
            features=row["features"],
            status=PropertyStatus(row["status"]),
            source_pdf_name=row["source_pdf_name"],
            document_urls=row["document_urls"] or {},
            facade_image_url=row["facade_image_url"],
            floor_plan_image_url=row["floor_plan_image_url"],
            image_gallery_urls=row["image_gallery_urls"] or [],
            created_at=row["created_at"],
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation for API responses."""
        payload = asdict(self)
        payload["status"] = self.status.value
        payload["created_at"] = self.created_at.isoformat() if self.created_at else None
        return payload


def _plain_number(value: Any) -> int | float | None:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value
