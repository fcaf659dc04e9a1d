from urllib.parse import quote

import httpx

from property_importer.logging.logger import Log
from property_importer.storage.base import BaseArtifactArchiver
from property_importer.storage.exceptions import ArchiveError


class SupabaseStorageArchiver(BaseArtifactArchiver):
    """Archives documents in a Supabase Storage bucket over its REST API.

    Uploads are sent with ``x-upsert: false`` so an existing object at the
    same path is rejected rather than replaced.
    """

    CACHE_CONTROL = "max-age=3600"

    def __init__(
        self,
        *,
        url: str,
        api_key: str,
        bucket: str = "property-assets",
        prefix: str = "documents",
        timeout_seconds: float = 30,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(bucket=bucket, prefix=prefix)
        if not url:
            raise ValueError("supabase_url is required for storage_backend=supabase")
        self._url = url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout_seconds
        self._transport = transport

    def _write(self, path: str, content: bytes) -> None:
        endpoint = f"{self._url}/storage/v1/object/{quote(self._bucket)}/{quote(path)}"
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "apikey": self._api_key,
            "Content-Type": "application/pdf",
            "cache-control": self.CACHE_CONTROL,
            "x-upsert": "false",
        }
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.post(endpoint, content=content, headers=headers)
        except httpx.HTTPError as exc:
            raise ArchiveError(str(exc)) from exc

        if response.is_error:
            raise ArchiveError(
                f"{response.status_code} {self._error_message(response)}"
            )
        Log.debug(f"Uploaded {len(content)} bytes to {self._bucket}/{path}")

    def _public_url(self, path: str) -> str:
        return f"{self._url}/storage/v1/object/public/{quote(self._bucket)}/{quote(path)}"

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            return str(body.get("message") or body.get("error") or body)
        return str(body)
