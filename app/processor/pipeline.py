from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar

from app.processor.models import (
    DocumentKind,
    DocumentRef,
    EnrichmentResult,
    ExtractionAttempt,
    ExtractionTrace,
    ResolvedSource,
    StepName,
)


@dataclass(slots=True)
class PipelineContext:
    """Per-invocation state. Never shared between runs."""

    ref: DocumentRef
    declared_type: str | None = None
    file_name: str | None = None
    document_name: str | None = None
    instruction_template: str | None = None
    source: ResolvedSource | None = None
    document_kind: DocumentKind = DocumentKind.UNKNOWN
    attempts: list[ExtractionAttempt] = field(default_factory=list)
    extraction: ExtractionTrace | None = None
    extracted_text: str = ""
    enrichment: EnrichmentResult | None = None
    custom_output: str = ""


class PipelineStep(ABC):
    step_name: ClassVar[StepName]

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
