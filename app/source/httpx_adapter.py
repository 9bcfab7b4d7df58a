import httpx

from app.source.base import BaseByteStore, FetchedBytes
from app.source.exceptions import ByteStoreError


class HttpxByteStore(BaseByteStore):
    """Fetches documents over HTTP(S) using httpx. No automatic retry."""

    def __init__(
        self,
        *,
        timeout_seconds: float,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            timeout=timeout_seconds,
            follow_redirects=True,
            transport=transport,
        )

    def fetch(self, url: str) -> FetchedBytes:
        try:
            response = self._client.get(url)
        except httpx.TimeoutException as exc:
            raise ByteStoreError(f"Timed out fetching document: {exc}") from exc
        except httpx.HTTPError as exc:
            raise ByteStoreError(f"Failed to fetch document: {exc}") from exc

        if not response.is_success:
            raise ByteStoreError(
                f"Failed to fetch document: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )
        return FetchedBytes(
            content=response.content,
            content_type=response.headers.get("content-type"),
        )

    def close(self) -> None:
        self._client.close()
