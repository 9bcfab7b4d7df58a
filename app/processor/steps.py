from app.classification.classifier import classify
from app.enrichment.base import BaseEnricher
from app.extraction.executor import ExtractionExecutor
from app.extraction.strategies import select_strategies
from app.logging.logger import Log
from app.processor.exceptions import UnsupportedKindError
from app.processor.models import EnrichmentRequest, StepName
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.result_normalizer import describe_failed_extraction
from app.source.resolver import ByteSourceResolver


class ResolveSourceStep(PipelineStep):
    step_name = StepName.DOWNLOAD

    def __init__(self, resolver: ByteSourceResolver) -> None:
        self._resolver = resolver

    def run(self, context: PipelineContext) -> PipelineContext:
        context.source = self._resolver.resolve(context.ref)
        Log.info(
            f"Resolved {context.source.content_length} bytes "
            f"({context.source.declared_mime or 'no declared type'})"
        )
        return context


class ClassifyStep(PipelineStep):
    step_name = StepName.CLASSIFY

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.source is None:
            raise ValueError("PipelineContext.source must be set before classification")
        context.document_kind = classify(
            declared_type=context.declared_type or context.source.declared_mime,
            file_name=context.file_name or context.source.file_name,
            byte_sample=context.source.data[:512],
        )
        context.attempts = select_strategies(context.document_kind)
        if not context.attempts:
            raise UnsupportedKindError(
                f"No extraction cascade for document kind '{context.document_kind.value}'"
            )
        Log.info(
            f"Classified document as {context.document_kind.value}; cascade: "
            f"{[a.strategy_id.value for a in context.attempts]}"
        )
        return context


class ExtractTextStep(PipelineStep):
    step_name = StepName.EXTRACT

    def __init__(self, executor: ExtractionExecutor) -> None:
        self._executor = executor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.source is None:
            raise ValueError("PipelineContext.source must be set before extraction")
        trace = self._executor.execute(
            context.source.data,
            context.document_kind,
            context.attempts,
        )
        context.extraction = trace
        if trace.chosen.succeeded:
            context.extracted_text = trace.chosen.text or ""
        else:
            context.extracted_text = describe_failed_extraction(
                context.document_kind, trace.chosen
            )
        return context


class EnrichStep(PipelineStep):
    step_name = StepName.ENRICH

    def __init__(self, enricher: BaseEnricher, max_chars: int) -> None:
        self._enricher = enricher
        self._max_chars = max_chars

    def run(self, context: PipelineContext) -> PipelineContext:
        request = EnrichmentRequest.build(
            context.extracted_text,
            context.document_kind,
            context.document_name,
            self._max_chars,
        )
        context.enrichment = self._enricher.enrich(request)
        return context


class CustomInstructionStep(PipelineStep):
    step_name = StepName.ENRICH

    def __init__(self, enricher: BaseEnricher, max_chars: int) -> None:
        self._enricher = enricher
        self._max_chars = max_chars

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.instruction_template is None:
            raise ValueError("PipelineContext.instruction_template must be set")
        context.custom_output = self._enricher.run_custom_instruction(
            context.extracted_text[: self._max_chars],
            context.instruction_template,
        )
        Log.info(f"Custom instruction produced {len(context.custom_output)} chars")
        return context
