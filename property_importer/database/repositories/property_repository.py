from typing import Any

import psycopg
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from property_importer.database.connection import Database
from property_importer.database.exceptions import PersistError
from property_importer.database.models import PropertyRecord

_COLUMNS = (
    "address",
    "price",
    "bedrooms",
    "bathrooms",
    "car_spaces",
    "land_area_sqm",
    "house_area_sqm",
    "description",
    "features",
    "status",
    "source_pdf_name",
    "document_urls",
    "facade_image_url",
    "floor_plan_image_url",
    "image_gallery_urls",
)
_RETURNING = ", ".join(("id", *_COLUMNS, "created_at"))

INSERT_SQL = (
    f"INSERT INTO properties ({', '.join(_COLUMNS)}) "
    f"VALUES ({', '.join(f'%({c})s' for c in _COLUMNS)}) "
    f"RETURNING {_RETURNING}"
)


class PropertyRepository:
    """Database operations for the properties table."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def insert(self, record: PropertyRecord) -> PropertyRecord:
        """Insert one property in a single transaction and return the stored row.

        Raises:
            PersistError: on constraint violations or when the database is
                unavailable. Nothing is committed in that case.
        """
        try:
            with self._database.connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(INSERT_SQL, self._params(record))
                    row = cur.fetchone()
                if row is None:
                    conn.rollback()
                    raise PersistError("Insert returned no row")
                conn.commit()
        except psycopg.Error as exc:
            raise PersistError(str(exc).strip()) from exc

        return PropertyRecord.from_row(row)

    def find_by_id(self, property_id: int) -> PropertyRecord | None:
        """Find a property by ID. Useful for tests."""
        with self._database.connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_RETURNING} FROM properties WHERE id = %s",
                    (property_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None
        return PropertyRecord.from_row(row)

    @staticmethod
    def _params(record: PropertyRecord) -> dict[str, Any]:
        return {
            "address": record.address,
            "price": record.price,
            "bedrooms": record.bedrooms,
            "bathrooms": record.bathrooms,
            "car_spaces": record.car_spaces,
            "land_area_sqm": record.land_area_sqm,
            "house_area_sqm": record.house_area_sqm,
            "description": record.description,
            "features": record.features,
            "status": record.status.value,
            "source_pdf_name": record.source_pdf_name,
            "document_urls": Jsonb(record.document_urls),
            "facade_image_url": record.facade_image_url,
            "floor_plan_image_url": record.floor_plan_image_url,
            "image_gallery_urls": record.image_gallery_urls,
        }
