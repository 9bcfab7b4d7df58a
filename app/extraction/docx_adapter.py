import io

import docx

from app.extraction.base import BaseOfficeDocumentReader
from app.extraction.exceptions import OfficeDocumentError


class DocxReaderAdapter(BaseOfficeDocumentReader):
    """Reads raw text from Word documents using python-docx."""

    def extract_raw_text(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
            lines = [paragraph.text for paragraph in document.paragraphs]
            for table in document.tables:
                for row in table.rows:
                    lines.append("\t".join(cell.text for cell in row.cells))
        except Exception as exc:
            raise OfficeDocumentError(f"Failed to extract text from DOCX: {exc}") from exc
        return "\n".join(line for line in lines if line.strip()).strip()
