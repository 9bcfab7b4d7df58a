from types import TracebackType

import httpx

from app.config.settings import Settings
from app.enrichment.base import BaseEnricher
from app.enrichment.factory import EnricherFactory
from app.extraction.executor import ExtractionExecutor
from app.extraction.factory import ExtractionExecutorFactory
from app.logging.logger import Log
from app.processor.models import CustomInstructionResult, DocumentRef, PipelineResult
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.result_normalizer import ResultNormalizer
from app.processor.steps import (
    ClassifyStep,
    CustomInstructionStep,
    EnrichStep,
    ExtractTextStep,
    ResolveSourceStep,
)
from app.source.httpx_adapter import HttpxByteStore
from app.source.resolver import ByteSourceResolver


class DocumentPipeline:
    """Orchestrates one document through the extraction and enrichment stages.

    Pipeline: download -> classify -> extract -> enrich -> normalize.
    Entry points never raise; every failure becomes a result record.
    """

    def __init__(
        self,
        *,
        resolver: ByteSourceResolver,
        executor: ExtractionExecutor,
        enricher: BaseEnricher,
        normalizer: ResultNormalizer | None = None,
        max_enrichment_chars: int = 8000,
    ) -> None:
        self._resolver = resolver
        self._normalizer = normalizer or ResultNormalizer()
        extraction_steps: list[PipelineStep] = [
            ResolveSourceStep(resolver),
            ClassifyStep(),
            ExtractTextStep(executor),
        ]
        self._steps = [*extraction_steps, EnrichStep(enricher, max_enrichment_chars)]
        self._custom_steps = [
            *extraction_steps,
            CustomInstructionStep(enricher, max_enrichment_chars),
        ]

    def run(
        self,
        ref: DocumentRef,
        declared_type: str | None = None,
        file_name: str | None = None,
        document_name: str | None = None,
    ) -> PipelineResult:
        """Extract text from *ref* and enrich it with a summary and tags."""
        context = PipelineContext(
            ref=ref,
            declared_type=declared_type,
            file_name=file_name,
            document_name=document_name,
        )
        Log.info(f"Processing document '{document_name or file_name or 'unnamed'}'")
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                return self._normalizer.failure(step.step_name, exc, context)
        result = self._normalizer.success(context)
        Log.info(
            f"Processed {result.document_kind.value} document: "
            f"{len(result.extracted_text)} chars, {len(result.tags)} tags"
        )
        return result

    def run_with_custom_instruction(
        self,
        ref: DocumentRef,
        instruction_template: str,
        declared_type: str | None = None,
        file_name: str | None = None,
    ) -> CustomInstructionResult:
        """Extract text from *ref* and run a caller-supplied instruction over it.

        The template receives the extracted text through ``{extracted_text}``.
        """
        context = PipelineContext(
            ref=ref,
            declared_type=declared_type,
            file_name=file_name,
            instruction_template=instruction_template,
        )
        for step in self._custom_steps:
            try:
                context = step.run(context)
            except Exception as exc:
                return self._normalizer.custom_failure(step.step_name, exc, context)
        return self._normalizer.custom_success(context)

    def close(self) -> None:
        """Close the HTTP client behind the byte source resolver."""
        self._resolver.close()

    def __enter__(self) -> "DocumentPipeline":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def build_pipeline(
    settings: Settings,
    transport: httpx.BaseTransport | None = None,
) -> DocumentPipeline:
    """Build a DocumentPipeline with all required adapters."""
    byte_store = HttpxByteStore(
        timeout_seconds=settings.http_timeout_seconds,
        transport=transport,
    )
    return DocumentPipeline(
        resolver=ByteSourceResolver(byte_store),
        executor=ExtractionExecutorFactory.create(settings),
        enricher=EnricherFactory.create(settings),
        max_enrichment_chars=settings.enrichment_max_chars,
    )
