from datetime import datetime, timezone
from pathlib import Path

import pytest

from property_importer.processor.models import SubmittedDocument
from property_importer.storage.exceptions import ArchiveError
from property_importer.storage.local_archiver import LocalArtifactArchiver


def _archiver(root: Path) -> LocalArtifactArchiver:
    return LocalArtifactArchiver(
        root=root,
        public_base_url="https://cdn.example.com/storage/",
        bucket="property-assets",
        prefix="documents",
    )


def _document(name: str = "listing.pdf", microsecond: int = 0) -> SubmittedDocument:
    return SubmittedDocument(
        content=b"%PDF-1.4 listing",
        name=name,
        submitted_at=datetime(2026, 1, 2, 3, 4, 5, microsecond, tzinfo=timezone.utc),
    )


class TestLocalArtifactArchiver:
    def test_writes_bytes_under_bucket(self, tmp_path: Path) -> None:
        ref = _archiver(tmp_path).archive(_document())
        assert ref.storage_path == "documents/20260102_030405_000000_listing.pdf"
        stored = tmp_path / "property-assets" / ref.storage_path
        assert stored.read_bytes() == b"%PDF-1.4 listing"

    def test_returns_public_url(self, tmp_path: Path) -> None:
        ref = _archiver(tmp_path).archive(_document(name="my listing.pdf"))
        assert ref.public_url == (
            "https://cdn.example.com/storage/property-assets/"
            "documents/20260102_030405_000000_my%20listing.pdf"
        )

    def test_same_name_submissions_are_both_kept(self, tmp_path: Path) -> None:
        archiver = _archiver(tmp_path)
        first = archiver.archive(_document(microsecond=1))
        second = archiver.archive(_document(microsecond=2))
        assert first.storage_path != second.storage_path
        assert len(list((tmp_path / "property-assets" / "documents").iterdir())) == 2

    def test_existing_path_is_never_overwritten(self, tmp_path: Path) -> None:
        archiver = _archiver(tmp_path)
        ref = archiver.archive(_document())
        with pytest.raises(ArchiveError, match="already exists"):
            archiver.archive(
                SubmittedDocument(
                    content=b"other", name="listing.pdf", submitted_at=_document().submitted_at
                )
            )
        assert (tmp_path / "property-assets" / ref.storage_path).read_bytes() == b"%PDF-1.4 listing"

    def test_unwritable_root_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(ArchiveError):
            _archiver(blocker).archive(_document())
