from pathlib import Path
from urllib.parse import unquote, urlparse

import httpx

from property_importer.fetch.exceptions import FetchError
from property_importer.logging.logger import Log


class DocumentFetcher:
    """Reads raw document bytes from an HTTP(S) URL.

    Local paths and file:// URLs are refused unless ``local_root`` is given,
    and then only files under that directory are served. A single attempt is
    made; the caller decides whether to resubmit.
    """

    HTTP_SCHEMES = frozenset({"http", "https"})

    def __init__(
        self,
        timeout_seconds: float = 30,
        transport: httpx.BaseTransport | None = None,
        local_root: Path | None = None,
    ) -> None:
        self._timeout = timeout_seconds
        self._transport = transport
        self._local_root = local_root.resolve() if local_root is not None else None

    def fetch(self, reference: str) -> bytes:
        """Return the bytes behind ``reference``.

        Raises:
            FetchError: on non-2xx responses, network failures, timeouts,
                unsupported schemes, or local references that are disabled,
                outside the allowed directory or missing.
        """
        reference = (reference or "").strip()
        if not reference:
            raise FetchError("Document reference is empty")

        parsed = urlparse(reference)
        scheme = parsed.scheme.lower()
        if scheme in self.HTTP_SCHEMES:
            return self._fetch_http(reference)
        if scheme == "file":
            return self._fetch_local(unquote(parsed.path))
        if scheme == "" or len(scheme) == 1:
            # bare path, or a Windows drive letter parsed as a scheme
            return self._fetch_local(reference)
        raise FetchError(f"Unsupported document scheme '{scheme}'")

    def _fetch_http(self, url: str) -> bytes:
        try:
            with httpx.Client(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"{exc.response.status_code} {exc.response.reason_phrase}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise FetchError(f"Timed out after {self._timeout}s: {exc}") from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Network error: {exc}") from exc

        content = response.content
        Log.debug(f"Fetched {len(content)} bytes from {url}")
        return content

    def _fetch_local(self, reference: str) -> bytes:
        if self._local_root is None:
            raise FetchError("Local file references are disabled; use an http(s) URL")
        # relative references resolve against the root; symlinks are followed first
        path = (self._local_root / reference).resolve()
        if not path.is_relative_to(self._local_root):
            raise FetchError(f"Path is outside the allowed directory: {reference}")
        if not path.is_file():
            raise FetchError(f"File not found: {reference}")
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FetchError(f"Failed to read {reference}: {exc}") from exc
