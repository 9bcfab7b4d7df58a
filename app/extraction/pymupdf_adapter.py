from typing import ClassVar

import pymupdf

from app.extraction.base import BaseDocumentUnderstanding
from app.extraction.exceptions import DocumentUnderstandingError
from app.processor.models import DocumentKind


class PyMuPdfAdapter(BaseDocumentUnderstanding):
    """Extracts text from PDFs and image documents using PyMuPDF."""

    FILETYPES: ClassVar[dict[DocumentKind, str]] = {
        DocumentKind.PDF: "pdf",
        DocumentKind.UNKNOWN: "pdf",
    }

    def extract(self, data: bytes, kind_hint: DocumentKind) -> str:
        filetype = self.FILETYPES.get(kind_hint, self._image_filetype(data))
        try:
            with pymupdf.open(stream=data, filetype=filetype) as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            return "\n".join(pages).strip()
        except DocumentUnderstandingError:
            raise
        except Exception as exc:
            raise DocumentUnderstandingError(f"pymupdf extraction failed: {exc}") from exc

    @staticmethod
    def _image_filetype(data: bytes) -> str:
        if data.startswith(b"\x89PNG"):
            return "png"
        if data.startswith((b"II*\x00", b"MM\x00*")):
            return "tiff"
        return "jpeg"
