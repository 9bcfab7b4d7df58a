from app.config.settings import Settings
from app.extraction.base import BaseDocumentUnderstanding, BaseOfficeDocumentReader
from app.extraction.docx_adapter import DocxReaderAdapter
from app.extraction.executor import ExtractionExecutor
from app.extraction.pdfplumber_adapter import PdfPlumberAdapter
from app.extraction.pymupdf_adapter import PyMuPdfAdapter


class DocumentUnderstandingFactory:
    """Creates the configured document understanding adapter."""

    ADAPTERS: dict[str, type[BaseDocumentUnderstanding]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseDocumentUnderstanding | None:
        """Return the adapter, or None when the engine is 'none'."""
        engine = settings.document_understanding_engine.lower()
        if engine == "none":
            return None
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown document understanding engine '{engine}'. "
                f"Choose from: {[*cls.ADAPTERS, 'none']}"
            )
        return adapter_cls()


class ExtractionExecutorFactory:
    """Wires the executor with the configured collaborators."""

    @classmethod
    def create(
        cls,
        settings: Settings,
        office_reader: BaseOfficeDocumentReader | None = None,
    ) -> ExtractionExecutor:
        return ExtractionExecutor(
            document_understanding=DocumentUnderstandingFactory.create(settings),
            office_reader=office_reader or DocxReaderAdapter(),
            document_understanding_timeout_seconds=settings.document_understanding_timeout_seconds,
            office_reader_timeout_seconds=settings.office_reader_timeout_seconds,
        )
