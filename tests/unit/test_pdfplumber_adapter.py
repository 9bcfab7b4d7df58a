import pytest

from app.extraction.exceptions import DocumentUnderstandingError
from app.extraction.pdfplumber_adapter import PdfPlumberAdapter
from app.processor.models import DocumentKind


@pytest.fixture
def adapter() -> PdfPlumberAdapter:
    return PdfPlumberAdapter()


class TestPdfPlumberAdapter:
    @pytest.mark.parametrize("kind_hint", [DocumentKind.PDF, DocumentKind.UNKNOWN])
    def test_reads_text_layer(
        self, adapter: PdfPlumberAdapter, sample_pdf_bytes: bytes, kind_hint: DocumentKind
    ) -> None:
        assert "Hello PDF World" in adapter.extract(sample_pdf_bytes, kind_hint)

    def test_joins_pages_in_order(
        self, adapter: PdfPlumberAdapter, multi_page_pdf_bytes: bytes
    ) -> None:
        text = adapter.extract(multi_page_pdf_bytes, DocumentKind.PDF)
        assert text.index("Page one content") < text.index("Page two content")

    def test_blank_pdf_yields_empty_text(
        self, adapter: PdfPlumberAdapter, empty_pdf_bytes: bytes
    ) -> None:
        assert adapter.extract(empty_pdf_bytes, DocumentKind.PDF) == ""

    def test_corrupt_bytes_are_wrapped(self, adapter: PdfPlumberAdapter) -> None:
        with pytest.raises(DocumentUnderstandingError, match="pdfplumber extraction failed"):
            adapter.extract(b"not a pdf", DocumentKind.PDF)

    def test_images_are_not_supported(self, adapter: PdfPlumberAdapter) -> None:
        with pytest.raises(DocumentUnderstandingError, match="image"):
            adapter.extract(b"\xff\xd8\xff", DocumentKind.IMAGE)
