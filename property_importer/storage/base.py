from abc import ABC, abstractmethod
from datetime import datetime, timezone

from property_importer.processor.models import SubmittedDocument
from property_importer.storage.models import ArchivedDocumentRef

_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S_%f"


def build_archive_path(prefix: str, file_name: str, submitted_at: datetime) -> str:
    """Build ``{prefix}/{YYYYMMDD_HHMMSS_ffffff}_{name}`` for a submission.

    The microsecond timestamp keeps same-name submissions apart, so writes
    never need overwrite semantics.
    """
    if submitted_at.tzinfo is not None:
        submitted_at = submitted_at.astimezone(timezone.utc)
    safe_name = file_name.replace("/", "_").replace("\\", "_").strip() or "document.pdf"
    key = f"{submitted_at.strftime(_TIMESTAMP_FORMAT)}_{safe_name}"
    prefix = prefix.strip("/")
    return f"{prefix}/{key}" if prefix else key


class BaseArtifactArchiver(ABC):
    """Contract for durable storage of original documents."""

    def __init__(self, *, bucket: str, prefix: str) -> None:
        self._bucket = bucket
        self._prefix = prefix

    def archive(self, document: SubmittedDocument) -> ArchivedDocumentRef:
        """Store the document bytes once and return their public location.

        Raises:
            ArchiveError: if the backend rejects the write, including when
                the exact path already exists.
        """
        path = build_archive_path(self._prefix, document.name, document.submitted_at)
        self._write(path, document.content)
        return ArchivedDocumentRef(storage_path=path, public_url=self._public_url(path))

    @abstractmethod
    def _write(self, path: str, content: bytes) -> None:
        """Create a new blob at ``path``; never overwrite."""

    @abstractmethod
    def _public_url(self, path: str) -> str:
        """Public URL of the blob stored at ``path``."""
