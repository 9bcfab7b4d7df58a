class ExtractionError(Exception):
    """Base exception for all text extraction errors."""


class DocumentUnderstandingError(ExtractionError):
    """Raised when the document understanding service cannot extract text."""


class OfficeDocumentError(ExtractionError):
    """Raised when an office document cannot be read."""


class ExtractionTimeoutError(ExtractionError):
    """Raised when an extraction call exceeds its time budget."""
