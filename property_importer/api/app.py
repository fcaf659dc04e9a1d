"""HTTP surface for property imports.

POST /import-property takes {"documentUrl", "fileName"}, runs the pipeline
synchronously and answers with the stored property or the failing stage.
"""

from pathlib import PurePosixPath
from typing import Any
from urllib.parse import unquote, urlparse

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import AliasChoices, BaseModel, Field

from property_importer.processor.models import ImportRequest
from property_importer.processor.processor import Processor

DEFAULT_FILE_NAME = "document.pdf"


class ImportPropertyRequest(BaseModel):
    document_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("documentUrl", "pdfUrl", "document_url"),
    )
    file_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("fileName", "file_name"),
    )


def file_name_from_url(url: str) -> str:
    """Last path segment of the URL, used when the caller gives no name."""
    name = PurePosixPath(unquote(urlparse(url).path)).name
    return name or DEFAULT_FILE_NAME


def create_app(processor: Processor) -> FastAPI:
    app = FastAPI(title="Property Importer")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    # Blocking handler: FastAPI runs it in its worker thread pool.
    @app.post("/import-property")
    def import_property(body: ImportPropertyRequest) -> JSONResponse:
        document_url = (body.document_url or "").strip()
        if not document_url:
            return JSONResponse(status_code=400, content={"error": "PDF URL is required"})
        file_name = (body.file_name or "").strip() or file_name_from_url(document_url)

        outcome = processor.process(ImportRequest(document_url=document_url, file_name=file_name))
        if outcome.ok and outcome.record is not None:
            content: dict[str, Any] = {"success": True, "property": outcome.record.to_dict()}
            return JSONResponse(status_code=200, content=content)
        stage = outcome.failed_stage.value if outcome.failed_stage else None
        return JSONResponse(status_code=500, content={"error": outcome.error, "stage": stage})

    return app
