import pytest

from app.extraction.docx_adapter import DocxReaderAdapter
from app.extraction.exceptions import OfficeDocumentError


class TestDocxReaderAdapter:
    def test_reads_paragraphs_and_tables(self, sample_docx_bytes: bytes) -> None:
        text = DocxReaderAdapter().extract_raw_text(sample_docx_bytes)
        assert text.splitlines() == ["Letter of recommendation", "Award\t2024"]

    def test_empty_document_returns_empty_string(self, empty_docx_bytes: bytes) -> None:
        assert DocxReaderAdapter().extract_raw_text(empty_docx_bytes) == ""

    def test_raises_on_invalid_bytes(self) -> None:
        with pytest.raises(OfficeDocumentError, match="DOCX"):
            DocxReaderAdapter().extract_raw_text(b"PK\x03\x04 not really a docx")
