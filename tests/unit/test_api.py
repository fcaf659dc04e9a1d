from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from property_importer.api.app import create_app, file_name_from_url
from property_importer.database.models import PropertyRecord
from property_importer.fetch.exceptions import FetchError
from property_importer.fetch.fetcher import DocumentFetcher
from property_importer.processor.models import (
    ImportOutcome,
    ImportRequest,
    PipelineState,
    Stage,
)
from property_importer.processor.processor import Processor
from property_importer.processor.steps import ExtractTextStep, FetchDocumentStep

_RECORD = PropertyRecord(
    id=7,
    address="123 Example St",
    price=950000,
    bedrooms=4,
    features=["Pool"],
    source_pdf_name="listing.pdf",
    document_urls={"source_pdf": "https://cdn.example.com/property-assets/documents/x.pdf"},
    created_at=datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
)


@pytest.fixture()
def processor() -> MagicMock:
    mock = MagicMock(spec=Processor)
    mock.process.return_value = ImportOutcome.succeeded(
        _RECORD, [PipelineState.SUBMITTED, PipelineState.SUCCEEDED]
    )
    return mock


@pytest.fixture()
def client(processor: MagicMock) -> TestClient:
    return TestClient(create_app(processor))


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestImportProperty:
    def test_returns_stored_property(self, client: TestClient, processor: MagicMock) -> None:
        response = client.post(
            "/import-property",
            json={"documentUrl": "https://files.example.com/listing.pdf", "fileName": "listing.pdf"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["property"]["id"] == 7
        assert body["property"]["address"] == "123 Example St"
        assert body["property"]["status"] == "imported"
        assert body["property"]["created_at"] == "2026-01-02T03:04:05+00:00"
        assert body["property"]["document_urls"]["source_pdf"].endswith("x.pdf")
        processor.process.assert_called_once_with(
            ImportRequest(
                document_url="https://files.example.com/listing.pdf",
                file_name="listing.pdf",
            )
        )

    def test_accepts_pdf_url_alias(self, client: TestClient, processor: MagicMock) -> None:
        response = client.post(
            "/import-property",
            json={"pdfUrl": "https://files.example.com/listing.pdf", "fileName": "a.pdf"},
        )
        assert response.status_code == 200
        request = processor.process.call_args.args[0]
        assert request.document_url == "https://files.example.com/listing.pdf"

    def test_file_name_defaults_to_url_basename(
        self, client: TestClient, processor: MagicMock
    ) -> None:
        client.post(
            "/import-property",
            json={"documentUrl": "https://files.example.com/docs/My%20Home.pdf?token=abc"},
        )
        request = processor.process.call_args.args[0]
        assert request.file_name == "My Home.pdf"

    @pytest.mark.parametrize("payload", [{}, {"documentUrl": ""}, {"documentUrl": "   "}])
    def test_missing_url_is_rejected(
        self, client: TestClient, processor: MagicMock, payload: dict[str, str]
    ) -> None:
        response = client.post("/import-property", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "PDF URL is required"}
        processor.process.assert_not_called()

    def test_failure_reports_stage(self, client: TestClient, processor: MagicMock) -> None:
        processor.process.return_value = ImportOutcome.failed(
            Stage.FETCH,
            FetchError("404 Not Found"),
            [PipelineState.SUBMITTED, PipelineState.FAILED],
        )

        response = client.post(
            "/import-property", json={"documentUrl": "https://files.example.com/gone.pdf"}
        )

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to fetch PDF: 404 Not Found",
            "stage": "fetch",
        }


    @pytest.mark.parametrize("document_url", ["/etc/hostname", "file:///etc/hostname"])
    def test_server_file_paths_are_not_read(self, document_url: str) -> None:
        pdf_extractor = MagicMock()
        processor = Processor(
            steps=[FetchDocumentStep(DocumentFetcher()), ExtractTextStep(pdf_extractor)]
        )
        client = TestClient(create_app(processor))

        response = client.post("/import-property", json={"documentUrl": document_url})

        assert response.status_code == 500
        body = response.json()
        assert body["stage"] == "fetch"
        assert "disabled" in body["error"]
        pdf_extractor.extract.assert_not_called()


class TestFileNameFromUrl:
    def test_uses_last_path_segment(self) -> None:
        assert file_name_from_url("https://x.example.com/a/b/listing.pdf") == "listing.pdf"

    def test_falls_back_when_path_is_empty(self) -> None:
        assert file_name_from_url("https://x.example.com/") == "document.pdf"
