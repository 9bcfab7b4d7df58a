import base64
import binascii
import re

import httpx

from app.logging.logger import Log
from app.processor.exceptions import MalformedInputError, UnreachableError
from app.processor.models import (
    BytesRef,
    DataUriRef,
    DocumentRef,
    ResolvedSource,
    TextRef,
    UrlRef,
)
from app.source.base import BaseByteStore
from app.source.exceptions import ByteStoreError

_BASE64_MARKER = ";base64,"
_WHITESPACE_RE = re.compile(r"\s+")


def decode_data_uri(data_uri: str) -> tuple[bytes, str | None]:
    """Decode a base64 data URI into (bytes, media_type).

    Raises:
        MalformedInputError: if the ``;base64,`` marker is missing or the
            payload is not valid base64.
    """
    if not data_uri.startswith("data:"):
        raise MalformedInputError("Data URI must start with 'data:'")
    header, marker, payload = data_uri.partition(_BASE64_MARKER)
    if not marker:
        raise MalformedInputError("Invalid data URI format: missing ';base64,' marker")
    media_type = header[len("data:"):].split(";", 1)[0].strip() or None
    try:
        data = base64.b64decode(_WHITESPACE_RE.sub("", payload), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedInputError(f"Invalid base64 payload in data URI: {exc}") from exc
    return data, media_type


def _strip_mime_parameters(content_type: str | None) -> str | None:
    if not content_type:
        return None
    return content_type.split(";", 1)[0].strip().lower() or None


class ByteSourceResolver:
    """Turns a DocumentRef into an in-memory byte buffer."""

    def __init__(self, byte_store: BaseByteStore) -> None:
        self._byte_store = byte_store

    def resolve(self, ref: DocumentRef) -> ResolvedSource:
        """Resolve *ref* to bytes plus the declared or transport mime type.

        Raises:
            MalformedInputError: if the reference cannot be parsed.
            UnreachableError: if a remote fetch fails.
        """
        if isinstance(ref, BytesRef):
            return ResolvedSource(
                data=ref.data,
                declared_mime=ref.declared_mime,
                file_name=ref.file_name,
            )
        if isinstance(ref, TextRef):
            Log.info(f"Using provided document text, {len(ref.text)} chars")
            return ResolvedSource(data=ref.text.encode("utf-8"), declared_mime="text/plain")
        if isinstance(ref, DataUriRef):
            return self._resolve_data_uri(ref.data_uri)
        if isinstance(ref, UrlRef):
            url = ref.url.strip()
            if url.startswith("data:"):
                return self._resolve_data_uri(url)
            return self._resolve_url(url)
        raise MalformedInputError(f"Unsupported document reference: {type(ref).__name__}")

    def close(self) -> None:
        self._byte_store.close()

    def _resolve_data_uri(self, data_uri: str) -> ResolvedSource:
        if not data_uri:
            raise MalformedInputError("Data URI is required")
        data, media_type = decode_data_uri(data_uri)
        Log.info(f"Decoded {len(data)} bytes of {media_type or 'unknown'} data from data URI")
        return ResolvedSource(data=data, declared_mime=media_type)

    def _resolve_url(self, url: str) -> ResolvedSource:
        self._validate_url(url)
        Log.info(f"Downloading document from {url[:100]}")
        try:
            fetched = self._byte_store.fetch(url)
        except ByteStoreError as exc:
            raise UnreachableError(str(exc), status_code=exc.status_code) from exc
        Log.info(f"Downloaded {len(fetched.content)} bytes")
        return ResolvedSource(
            data=fetched.content,
            declared_mime=_strip_mime_parameters(fetched.content_type),
            file_name=httpx.URL(url).path.rsplit("/", 1)[-1] or None,
        )

    @staticmethod
    def _validate_url(url: str) -> None:
        if not url:
            raise MalformedInputError("Document URL is required")
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as exc:
            raise MalformedInputError(f"Invalid document URL: {exc}") from exc
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise MalformedInputError(
                f"Document URL must be an absolute http(s) URL, got {url[:100]!r}"
            )
