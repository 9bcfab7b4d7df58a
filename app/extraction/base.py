from abc import ABC, abstractmethod

from app.processor.models import DocumentKind


class BaseDocumentUnderstanding(ABC):
    """Contract for OCR/layout-aware text extraction adapters."""

    @abstractmethod
    def extract(self, data: bytes, kind_hint: DocumentKind) -> str:
        """Extract plain text from a PDF, image or unidentified binary document.

        Args:
            data: Whole document content.
            kind_hint: Kind chosen by the classifier.

        Returns:
            Extracted text as a single normalized string (may be empty).

        Raises:
            DocumentUnderstandingError: if extraction fails for any reason.
        """


class BaseOfficeDocumentReader(ABC):
    """Contract for office-document text readers."""

    @abstractmethod
    def extract_raw_text(self, data: bytes) -> str:
        """Extract raw text from office document bytes.

        Raises:
            OfficeDocumentError: if the document cannot be read.
        """
