from dataclasses import asdict, dataclass, field
from enum import Enum


class DocumentKind(str, Enum):
    """Coarse format family used to pick an extraction cascade."""

    PDF = "pdf"
    OFFICE_DOCUMENT = "office_document"
    IMAGE = "image"
    HTML = "html"
    PLAIN_TEXT = "plain_text"
    UNKNOWN = "unknown"


class ErrorKind(str, Enum):
    MALFORMED_INPUT = "malformed_input"
    UNREACHABLE = "unreachable"
    UNSUPPORTED_KIND = "unsupported_kind"
    MODEL_CONTRACT_VIOLATION = "model_contract_violation"
    EMPTY_CONTENT = "empty_content"
    EXTRACTION_FAILED = "extraction_failed"


class StepName(str, Enum):
    DOWNLOAD = "download"
    CLASSIFY = "classify"
    EXTRACT = "extract"
    ENRICH = "enrich"


class StrategyId(str, Enum):
    OFFICE_TEXT_EXTRACTOR = "office-text-extractor"
    DOCUMENT_UNDERSTANDING_SERVICE = "document-understanding-service"
    PLACEHOLDER_DESCRIPTION = "placeholder-description"
    HTML_TEXT_EXTRACTOR = "html-text-extractor"
    RAW_PASSTHROUGH = "raw-passthrough"


# ----------------------------------------------------------------------
# Document references
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class UrlRef:
    """Remote document (http/https). A ``data:`` URI is accepted here too."""

    url: str


@dataclass(frozen=True)
class DataUriRef:
    data_uri: str


@dataclass(frozen=True)
class BytesRef:
    """Document bytes already held by the caller."""

    data: bytes
    declared_mime: str | None = None
    file_name: str | None = None


@dataclass(frozen=True)
class TextRef:
    """Already-extracted document text supplied by the caller."""

    text: str


DocumentRef = UrlRef | DataUriRef | BytesRef | TextRef


@dataclass(frozen=True)
class ResolvedSource:
    """In-memory bytes produced by the byte source resolver."""

    data: bytes
    declared_mime: str | None = None
    file_name: str | None = None

    @property
    def content_length(self) -> int:
        return len(self.data)


# ----------------------------------------------------------------------
# Extraction
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class ExtractionAttempt:
    """One member of the ordered cascade for a DocumentKind."""

    strategy_id: StrategyId
    ordinal: int


@dataclass(frozen=True)
class ExtractionOutcome:
    attempt: ExtractionAttempt
    succeeded: bool
    text: str | None = None
    failure_reason: ErrorKind | None = None
    failure_message: str | None = None


@dataclass(frozen=True)
class ExtractionTrace:
    """Chosen outcome plus every outcome tried, kept for diagnostics."""

    chosen: ExtractionOutcome
    outcomes: list[ExtractionOutcome] = field(default_factory=list)


# ----------------------------------------------------------------------
# Enrichment
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class EnrichmentRequest:
    """Text sent to the generative model, already capped."""

    text: str
    document_kind: DocumentKind
    document_name: str | None = None

    @classmethod
    def build(
        cls,
        full_text: str,
        document_kind: DocumentKind,
        document_name: str | None,
        max_chars: int,
    ) -> "EnrichmentRequest":
        return cls(
            text=full_text[:max_chars],
            document_kind=document_kind,
            document_name=document_name,
        )


@dataclass(frozen=True)
class EnrichmentResult:
    summary: str
    tags: list[str] = field(default_factory=list)


# ----------------------------------------------------------------------
# Results
# ----------------------------------------------------------------------


@dataclass(frozen=True)
class PipelineResult:
    """Final record returned by DocumentPipeline.run(). Never raised past."""

    success: bool
    extracted_text: str
    summary: str
    tags: list[str]
    document_kind: DocumentKind
    document_name: str
    extraction_strategy: StrategyId | None = None
    failure_step: StepName | None = None
    error_message: str | None = None

    def __post_init__(self) -> None:
        if self.success == (self.failure_step is not None):
            raise ValueError("failure_step must be set if and only if success is False")

    def to_dict(self) -> dict[str, object]:
        return _enum_values(asdict(self))


@dataclass(frozen=True)
class CustomInstructionResult:
    """Output of DocumentPipeline.run_with_custom_instruction()."""

    success: bool
    text: str
    extracted_text: str
    document_kind: DocumentKind
    failure_step: StepName | None = None
    error_message: str | None = None

    def __post_init__(self) -> None:
        if self.success == (self.failure_step is not None):
            raise ValueError("failure_step must be set if and only if success is False")

    def to_dict(self) -> dict[str, object]:
        return _enum_values(asdict(self))


def _enum_values(data: dict[str, object]) -> dict[str, object]:
    return {k: v.value if isinstance(v, Enum) else v for k, v in data.items()}
