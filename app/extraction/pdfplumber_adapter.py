import io

import pdfplumber

from app.extraction.base import BaseDocumentUnderstanding
from app.extraction.exceptions import DocumentUnderstandingError
from app.processor.models import DocumentKind


class PdfPlumberAdapter(BaseDocumentUnderstanding):
    """Extracts the text layer of PDF documents using pdfplumber."""

    def extract(self, data: bytes, kind_hint: DocumentKind) -> str:
        if kind_hint == DocumentKind.IMAGE:
            raise DocumentUnderstandingError("pdfplumber cannot read image documents")
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages).strip()
        except DocumentUnderstandingError:
            raise
        except Exception as exc:
            raise DocumentUnderstandingError(f"pdfplumber extraction failed: {exc}") from exc
