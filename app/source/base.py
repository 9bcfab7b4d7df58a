from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class FetchedBytes:
    """Body and declared content type of a fetched document."""

    content: bytes
    content_type: str | None = None


class BaseByteStore(ABC):
    """Contract for all remote byte store adapters."""

    @abstractmethod
    def fetch(self, url: str) -> FetchedBytes:
        """Download the document at *url* with a single GET.

        Args:
            url: Absolute http(s) URL.

        Returns:
            FetchedBytes with the response body and Content-Type header.

        Raises:
            ByteStoreError: on transport errors, timeouts and non-2xx responses.
        """

    def close(self) -> None:
        """Release network resources. Stores without any keep the default."""
