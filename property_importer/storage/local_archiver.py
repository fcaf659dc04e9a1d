from pathlib import Path
from urllib.parse import quote

from property_importer.logging.logger import Log
from property_importer.storage.base import BaseArtifactArchiver
from property_importer.storage.exceptions import ArchiveError


class LocalArtifactArchiver(BaseArtifactArchiver):
    """Archives documents on the local filesystem: {root}/{bucket}/{path}."""

    def __init__(
        self,
        *,
        root: Path,
        public_base_url: str,
        bucket: str = "property-assets",
        prefix: str = "documents",
    ) -> None:
        super().__init__(bucket=bucket, prefix=prefix)
        self._root = root
        self._public_base_url = public_base_url.rstrip("/")

    def _write(self, path: str, content: bytes) -> None:
        target = self._root / self._bucket / path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("xb") as fh:
                fh.write(content)
        except FileExistsError as exc:
            raise ArchiveError(f"{path} already exists") from exc
        except OSError as exc:
            raise ArchiveError(str(exc)) from exc
        Log.debug(f"Archived {len(content)} bytes to {target}")

    def _public_url(self, path: str) -> str:
        return f"{self._public_base_url}/{quote(self._bucket)}/{quote(path)}"
