"""Maps declared types, file names and magic bytes to a DocumentKind.

Resolution order (first match wins):
1. Declared type string (MIME or bare extension), substring match.
2. File-name extension, through the same table.
3. Magic-byte sniffing of the first bytes.
4. UNKNOWN.

A ZIP local-file header is read as an office document. Plain ZIP archives
collide with this rule; that is a known limitation.
"""

from pathlib import PurePosixPath

from app.processor.models import DocumentKind

# Checked in order; "text/html" must reach HTML before the "text" rule.
_TYPE_TABLE: list[tuple[DocumentKind, tuple[str, ...]]] = [
    (DocumentKind.PDF, ("pdf",)),
    (
        DocumentKind.OFFICE_DOCUMENT,
        ("doc", "word", "officedocument", "opendocument"),
    ),
    (
        DocumentKind.IMAGE,
        ("image/", "jpg", "jpeg", "png", "tiff", "tif", "gif", "bmp"),
    ),
    (DocumentKind.HTML, ("html", "htm")),
    (DocumentKind.PLAIN_TEXT, ("txt", "text")),
]

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_HTML_SNIFF_BYTES = 100


def classify(
    declared_type: str | None = None,
    file_name: str | None = None,
    byte_sample: bytes | None = None,
) -> DocumentKind:
    """Return the DocumentKind for the given hints. Never raises."""
    kind = _match_type_string(declared_type)
    if kind is not None:
        return kind
    kind = _match_type_string(_extension(file_name))
    if kind is not None:
        return kind
    if byte_sample:
        kind = _sniff(byte_sample)
        if kind is not None:
            return kind
    return DocumentKind.UNKNOWN


def _match_type_string(value: str | None) -> DocumentKind | None:
    if not value:
        return None
    lowered = value.strip().lower()
    if not lowered:
        return None
    for kind, needles in _TYPE_TABLE:
        if any(needle in lowered for needle in needles):
            return kind
    return None


def _extension(file_name: str | None) -> str | None:
    if not file_name:
        return None
    suffix = PurePosixPath(file_name.strip()).suffix
    return suffix.lstrip(".") or None


def _sniff(sample: bytes) -> DocumentKind | None:
    if sample.startswith(b"%PDF"):
        return DocumentKind.PDF
    if sample.startswith(b"PK\x03\x04"):
        return DocumentKind.OFFICE_DOCUMENT
    if sample.startswith(b"\xff\xd8"):
        return DocumentKind.IMAGE
    if sample.startswith(_PNG_SIGNATURE):
        return DocumentKind.IMAGE
    head = sample[:_HTML_SNIFF_BYTES].decode("utf-8", errors="ignore").lower()
    if "<!doctype html" in head or "<html" in head:
        return DocumentKind.HTML
    return None
