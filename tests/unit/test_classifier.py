import pytest

from app.classification.classifier import classify
from app.processor.models import DocumentKind


class TestDeclaredType:
    @pytest.mark.parametrize(
        ("declared", "expected"),
        [
            ("application/pdf", DocumentKind.PDF),
            ("PDF", DocumentKind.PDF),
            ("docx", DocumentKind.OFFICE_DOCUMENT),
            ("application/msword", DocumentKind.OFFICE_DOCUMENT),
            (
                "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                DocumentKind.OFFICE_DOCUMENT,
            ),
            ("image/jpeg", DocumentKind.IMAGE),
            ("png", DocumentKind.IMAGE),
            ("image/tiff", DocumentKind.IMAGE),
            ("text/html", DocumentKind.HTML),
            ("htm", DocumentKind.HTML),
            ("text/plain", DocumentKind.PLAIN_TEXT),
            ("txt", DocumentKind.PLAIN_TEXT),
        ],
    )
    def test_maps_declared_type(self, declared: str, expected: DocumentKind) -> None:
        assert classify(declared_type=declared) == expected

    def test_declared_type_wins_over_file_name_and_bytes(self) -> None:
        assert classify("text/plain", "scan.pdf", b"%PDF-1.7") == DocumentKind.PLAIN_TEXT

    def test_unmatched_declared_type_falls_through(self) -> None:
        assert classify("application/octet-stream", "cv.docx") == DocumentKind.OFFICE_DOCUMENT


class TestFileName:
    @pytest.mark.parametrize(
        ("file_name", "expected"),
        [
            ("resume.PDF", DocumentKind.PDF),
            ("letter.docx", DocumentKind.OFFICE_DOCUMENT),
            ("photo.jpeg", DocumentKind.IMAGE),
            ("page.htm", DocumentKind.HTML),
            ("notes.txt", DocumentKind.PLAIN_TEXT),
        ],
    )
    def test_maps_extension(self, file_name: str, expected: DocumentKind) -> None:
        assert classify(file_name=file_name) == expected

    def test_name_without_extension_falls_through(self) -> None:
        assert classify(file_name="README", byte_sample=b"%PDF-1.4") == DocumentKind.PDF


class TestSniffing:
    @pytest.mark.parametrize(
        ("sample", "expected"),
        [
            (b"%PDF-1.7\n", DocumentKind.PDF),
            (b"PK\x03\x04\x14\x00", DocumentKind.OFFICE_DOCUMENT),
            (b"\xff\xd8\xff\xe0", DocumentKind.IMAGE),
            (b"\x89PNG\r\n\x1a\n\x00\x00", DocumentKind.IMAGE),
            (b"<!DOCTYPE HTML><html><body>x</body></html>", DocumentKind.HTML),
            (b"   <html lang='en'>", DocumentKind.HTML),
        ],
    )
    def test_sniffs_magic_bytes(self, sample: bytes, expected: DocumentKind) -> None:
        assert classify(byte_sample=sample) == expected

    def test_html_marker_beyond_first_100_bytes_is_ignored(self) -> None:
        assert classify(byte_sample=b" " * 120 + b"<html>") == DocumentKind.UNKNOWN


class TestUnknown:
    def test_no_hints_is_unknown(self) -> None:
        assert classify() == DocumentKind.UNKNOWN

    def test_unrecognized_bytes_are_unknown(self) -> None:
        assert classify(None, None, b"\x00\x01\x02\x03") == DocumentKind.UNKNOWN

    def test_blank_declared_type_is_ignored(self) -> None:
        assert classify("   ", "", b"") == DocumentKind.UNKNOWN
