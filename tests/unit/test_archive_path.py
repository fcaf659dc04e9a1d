from datetime import datetime, timedelta, timezone

from property_importer.storage.base import build_archive_path

_AT = datetime(2026, 3, 14, 9, 26, 53, 589793, tzinfo=timezone.utc)


class TestBuildArchivePath:
    def test_prefix_timestamp_and_name(self) -> None:
        assert (
            build_archive_path("documents", "listing.pdf", _AT)
            == "documents/20260314_092653_589793_listing.pdf"
        )

    def test_same_name_different_timestamps_do_not_collide(self) -> None:
        first = build_archive_path("documents", "listing.pdf", _AT)
        second = build_archive_path("documents", "listing.pdf", _AT + timedelta(microseconds=1))
        assert first != second

    def test_same_inputs_give_same_path(self) -> None:
        assert build_archive_path("documents", "a.pdf", _AT) == build_archive_path(
            "documents", "a.pdf", _AT
        )

    def test_path_separators_in_name_are_replaced(self) -> None:
        path = build_archive_path("documents", "../etc/passwd", _AT)
        assert path == "documents/20260314_092653_589793_.._etc_passwd"

    def test_blank_name_falls_back(self) -> None:
        assert build_archive_path("documents", "  ", _AT).endswith("_document.pdf")

    def test_timestamp_normalized_to_utc(self) -> None:
        local = _AT.astimezone(timezone(timedelta(hours=10)))
        assert build_archive_path("documents", "a.pdf", local) == build_archive_path(
            "documents", "a.pdf", _AT
        )

    def test_empty_prefix(self) -> None:
        assert build_archive_path("", "a.pdf", _AT) == "20260314_092653_589793_a.pdf"
