from datetime import datetime, timezone

import httpx
import pytest

from property_importer.processor.models import SubmittedDocument
from property_importer.storage.exceptions import ArchiveError
from property_importer.storage.supabase_archiver import SupabaseStorageArchiver

_DOCUMENT = SubmittedDocument(
    content=b"%PDF-1.4 listing",
    name="listing.pdf",
    submitted_at=datetime(2026, 1, 2, 3, 4, 5, 6, tzinfo=timezone.utc),
)


def _archiver(handler) -> SupabaseStorageArchiver:  # type: ignore[no-untyped-def]
    return SupabaseStorageArchiver(
        url="https://abc.supabase.co/",
        api_key="anon-key",
        transport=httpx.MockTransport(handler),
    )


class TestSupabaseStorageArchiver:
    def test_uploads_without_upsert(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"Key": "property-assets/documents/x"})

        _archiver(handler).archive(_DOCUMENT)

        (request,) = requests
        assert request.method == "POST"
        assert str(request.url) == (
            "https://abc.supabase.co/storage/v1/object/property-assets/"
            "documents/20260102_030405_000006_listing.pdf"
        )
        assert request.headers["x-upsert"] == "false"
        assert request.headers["authorization"] == "Bearer anon-key"
        assert request.headers["content-type"] == "application/pdf"
        assert request.content == b"%PDF-1.4 listing"

    def test_returns_public_url(self) -> None:
        ref = _archiver(lambda request: httpx.Response(200, json={})).archive(_DOCUMENT)
        assert ref.storage_path == "documents/20260102_030405_000006_listing.pdf"
        assert ref.public_url == (
            "https://abc.supabase.co/storage/v1/object/public/property-assets/"
            "documents/20260102_030405_000006_listing.pdf"
        )

    def test_rejected_write_raises_with_message(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(409, json={"message": "The resource already exists"})

        with pytest.raises(ArchiveError, match="409 The resource already exists"):
            _archiver(handler).archive(_DOCUMENT)

    def test_plain_text_error_body(self) -> None:
        with pytest.raises(ArchiveError, match="500 boom"):
            _archiver(lambda request: httpx.Response(500, text="boom")).archive(_DOCUMENT)

    def test_transport_failure_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(ArchiveError, match="unreachable"):
            _archiver(handler).archive(_DOCUMENT)

    def test_requires_url(self) -> None:
        with pytest.raises(ValueError, match="supabase_url"):
            SupabaseStorageArchiver(url="", api_key="k")
